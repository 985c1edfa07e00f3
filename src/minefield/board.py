"""
Board module for Minesweeper game.

Implements the fixed-size grid of cells with neighbor lookup and
mine bookkeeping. Mine placement policy lives in the generator.
"""
from typing import Iterable, Iterator, List, Tuple

from .cell import Cell, Visibility
from .errors import OutOfBoundsError


Coord = Tuple[int, int]


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Owns the grid of cells and the coordinates of every placed mine.
    """

    def __init__(self, rows: int, cols: int) -> None:
        """
        Create an empty board with every cell hidden.

        Args:
            rows: Number of rows.
            cols: Number of columns.
        """
        self._rows = rows
        self._cols = cols
        self._grid: List[List[Cell]] = [
            [Cell() for _ in range(cols)] for _ in range(rows)
        ]
        self.mine_locations: List[Coord] = []

    @classmethod
    def with_mines(
        cls, rows: int, cols: int, positions: Iterable[Coord]
    ) -> "Board":
        """
        Build a board with a fixed mine layout.

        Args:
            rows: Number of rows.
            cols: Number of columns.
            positions: (row, col) of every mine.

        Returns:
            Board with mines placed and neighbor counts computed.
        """
        board = cls(rows, cols)
        for row, col in positions:
            board.add_mine(row, col)
        return board

    # ========================================================================
    # Geometry
    # ========================================================================

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def mine_count(self) -> int:
        return len(self.mine_locations)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self._rows and 0 <= col < self._cols

    def neighbors(self, row: int, col: int) -> List[Coord]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.in_bounds(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    # ========================================================================
    # Cell Access
    # ========================================================================

    def cell(self, row: int, col: int) -> Cell:
        """Get cell at position, raising OutOfBoundsError if off the grid."""
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col)
        return self._grid[row][col]

    def coords(self) -> Iterator[Coord]:
        """Iterate every (row, col) in row-major order."""
        for row in range(self._rows):
            for col in range(self._cols):
                yield row, col

    def count(self, visibility: Visibility) -> int:
        """Count cells currently in the given visibility state."""
        return sum(
            1 for line in self._grid for cell in line
            if cell.visibility == visibility
        )

    # ========================================================================
    # Mine Placement
    # ========================================================================

    def add_mine(self, row: int, col: int) -> bool:
        """
        Place a mine and bump the counts of its neighbors.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            True if a mine was placed, False if one was already there.

        Raises:
            OutOfBoundsError: If the position is off the grid.
        """
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(row, col)
        cell = self._grid[row][col]
        if cell.is_mine:
            return False
        cell.make_mine()
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            self._grid[neighbor_row][neighbor_col].increment()
        self.mine_locations.append((row, col))
        return True
