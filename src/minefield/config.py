"""
Board configuration for Minesweeper.

Defines validated board dimensions and the standard difficulty presets.
"""
from dataclasses import dataclass
from typing import Dict

from .errors import InvalidConfiguration


# ============================================================================
# Constants
# ============================================================================

MIN_SIDE = 1
MAX_SIDE = 100
MAX_MINE_DENSITY = 0.6


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Values are validated on creation; out-of-range values are rejected
    rather than clamped, so callers decide their own clamping policy.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are within bounds."""
        for side in (self.rows, self.cols):
            if not MIN_SIDE <= side <= MAX_SIDE:
                raise InvalidConfiguration(
                    f"Board dimensions must be between {MIN_SIDE} "
                    f"and {MAX_SIDE}"
                )
        if self.num_mines < 1:
            raise InvalidConfiguration("Board needs at least one mine")
        max_mines = self.max_mines
        if self.num_mines > max_mines:
            raise InvalidConfiguration(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols

    @property
    def safe_cells(self) -> int:
        """Cells that must be revealed to win."""
        return self.total_cells - self.num_mines

    @property
    def max_mines(self) -> int:
        """Largest mine count allowed for these dimensions."""
        return min(
            self.total_cells - 1,
            int(self.total_cells * MAX_MINE_DENSITY),
        )


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)

PRESETS: Dict[str, BoardConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}
