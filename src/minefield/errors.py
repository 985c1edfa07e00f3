"""
Exceptions raised by the Minesweeper engine.

Gameplay actions never raise; these are reserved for bad construction
parameters and off-grid queries.
"""


class InvalidConfiguration(ValueError):
    """Board dimensions or mine count outside the allowed bounds."""


class OutOfBoundsError(IndexError):
    """Coordinate query outside the board."""

    def __init__(self, row: int, col: int) -> None:
        super().__init__(f"Cell ({row}, {col}) is outside the board")
        self.row = row
        self.col = col
