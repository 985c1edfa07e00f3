"""
Mine placement for Minesweeper boards.

Mines are placed by rejection sampling: random coordinates are drawn
until enough distinct, non-excluded cells have been mined.
"""
import logging
import random
from typing import Optional

from .board import Board, Coord
from .errors import InvalidConfiguration, OutOfBoundsError


logger = logging.getLogger(__name__)


# ============================================================================
# Board Generator
# ============================================================================

class BoardGenerator:
    """
    Produces boards with randomly placed mines.

    Each generator owns its random source, so seeding one generator
    never affects another.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the generator.

        Args:
            rng: Random source to draw coordinates from.
            seed: Seed for a fresh random source when rng is not given.
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def generate(
        self,
        rows: int,
        cols: int,
        num_mines: int,
        exclude: Optional[Coord] = None,
    ) -> Board:
        """
        Create a new board and fill it with mines.

        Args:
            rows: Number of rows.
            cols: Number of columns.
            num_mines: Mines to place.
            exclude: (row, col) that must stay mine-free.

        Returns:
            Fully generated board.
        """
        board = Board(rows, cols)
        self.place_mines(board, num_mines, exclude)
        return board

    def place_mines(
        self,
        board: Board,
        num_mines: int,
        exclude: Optional[Coord] = None,
    ) -> None:
        """
        Place mines on an existing board, keeping cell visibility intact.

        Args:
            board: Board without mines.
            num_mines: Mines to place.
            exclude: (row, col) that must stay mine-free.
        """
        total_cells = board.rows * board.cols
        if not 0 < num_mines < total_cells:
            raise InvalidConfiguration(
                f"Mine count must be between 1 and {total_cells - 1}"
            )
        if exclude is not None and not board.in_bounds(*exclude):
            raise OutOfBoundsError(*exclude)
        if board.mine_count:
            raise ValueError("Board already has mines")

        placed = 0
        attempts = 0
        while placed < num_mines:
            attempts += 1
            row = self.rng.randrange(board.rows)
            col = self.rng.randrange(board.cols)
            if (row, col) == exclude:
                continue
            if board.add_mine(row, col):
                placed += 1

        logger.debug(
            "Placed %d mines on %dx%d board in %d draws (excluded %s)",
            num_mines, board.rows, board.cols, attempts, exclude,
        )
