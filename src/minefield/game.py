"""
Game state machine for Minesweeper.

Owns the board for the current game, routes reveal and flag actions to
the reveal engine and flag controller, and decides when the game is
won or lost. Callers only get read-only views of the board.
"""
import logging
from typing import List, NamedTuple, Optional, Tuple

import numpy as np

from .board import Board, Coord
from .cell import Visibility
from .config import BoardConfig
from .flags import FlagController
from .generator import BoardGenerator
from .reveal import RevealEngine
from .state import GameState, Phase


logger = logging.getLogger(__name__)


# ============================================================================
# Read-only Views
# ============================================================================

class CellView(NamedTuple):
    """What the player can see of one cell."""

    value_visible: bool
    visibility: Visibility
    value: Optional[int]


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    A single-player Minesweeper game.

    Mines are placed on the first reveal, with the clicked cell
    excluded, so the first click is never a mine. Starting a new game
    discards the previous board entirely.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        *,
        marks: bool = False,
        generator: Optional[BoardGenerator] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize a game in the NOT_STARTED phase.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            marks: Whether flag cycling includes the MARKED state.
            generator: Board generator to place mines with.
            seed: Seed for the default generator. Cannot be combined
                with generator.

        Raises:
            ValueError: If both generator and seed are given.
        """
        if generator is not None and seed is not None:
            raise ValueError("Pass either generator or seed, not both")
        self._generator = generator or BoardGenerator(seed=seed)
        self._reveal_engine = RevealEngine()
        self._flag_controller = FlagController()
        self._mark_option = marks
        self._start(config or BoardConfig())

    def _start(self, config: BoardConfig) -> None:
        self._config = config
        self._board = Board(config.rows, config.cols)
        self._state = GameState(flags_remaining=config.num_mines)

    # ========================================================================
    # Game Lifecycle
    # ========================================================================

    def new_game(
        self,
        rows: Optional[int] = None,
        cols: Optional[int] = None,
        num_mines: Optional[int] = None,
    ) -> None:
        """
        Start a new game, discarding the current board.

        Omitted values are taken from the current configuration.

        Raises:
            InvalidConfiguration: If the new dimensions or mine count
                are out of bounds. The current game is left untouched.
        """
        config = BoardConfig(
            rows=self._config.rows if rows is None else rows,
            cols=self._config.cols if cols is None else cols,
            num_mines=self._config.num_mines if num_mines is None else num_mines,
        )
        self._start(config)
        logger.debug(
            "New game %dx%d with %d mines",
            config.rows, config.cols, config.num_mines,
        )

    def reset(self) -> None:
        """Start a new game with the same configuration."""
        self._start(self._config)

    # ========================================================================
    # Player Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> Phase:
        """
        Reveal a cell.

        The first reveal of a game places the mines. Does nothing once
        the game is over, or if the target is off-grid, revealed or
        flagged.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            Game phase after the reveal.
        """
        if self._state.is_over:
            return self._state.phase
        if not self._board.in_bounds(row, col):
            return self._state.phase
        if not self._board.cell(row, col).can_reveal:
            return self._state.phase

        if self._state.phase == Phase.NOT_STARTED:
            self._handle_first_reveal(row, col)

        self._reveal_engine.reveal(self._board, self._state, row, col)
        self._check_win_condition()
        return self._state.phase

    def _handle_first_reveal(self, row: int, col: int) -> None:
        """Place mines around the first reveal and start play."""
        self._generator.place_mines(
            self._board, self._config.num_mines, exclude=(row, col)
        )
        self._state.phase = Phase.IN_PROGRESS
        logger.debug("Game started at (%d, %d)", row, col)

    def _check_win_condition(self) -> None:
        """Win when every safe cell is revealed."""
        if self._state.phase != Phase.IN_PROGRESS:
            return
        if self._state.revealed_count == self._config.safe_cells:
            self._state.phase = Phase.WON
            self._flag_controller.flag_all_mines(self._board, self._state)
            logger.info("All safe cells revealed, game won")

    def flag(self, row: int, col: int) -> int:
        """
        Cycle the flag on a cell.

        Args:
            row: Row index.
            col: Column index.

        Returns:
            Change to flags-remaining (-1, 0 or +1).
        """
        if self._state.is_over:
            return 0
        return self._flag_controller.flag(
            self._board, self._state, row, col, self._mark_option
        )

    def set_mark_option(self, enabled: bool) -> None:
        """Set whether flag cycling includes the MARKED state."""
        self._mark_option = enabled

    def toggle_mark_option(self) -> bool:
        """Flip the marks option and return the new setting."""
        self._mark_option = not self._mark_option
        return self._mark_option

    # ========================================================================
    # Queries
    # ========================================================================

    @property
    def config(self) -> BoardConfig:
        return self._config

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def flags_remaining(self) -> int:
        return self._state.flags_remaining

    @property
    def revealed_count(self) -> int:
        return self._state.revealed_count

    @property
    def safe_revealed_count(self) -> int:
        """Revealed cells that hold no mine, excluding mines disclosed by a loss."""
        if self._state.phase == Phase.LOST:
            return self._state.revealed_count - self._config.num_mines
        return self._state.revealed_count

    @property
    def mark_option(self) -> bool:
        return self._mark_option

    @property
    def dimensions(self) -> Tuple[int, int]:
        """(rows, cols) of the current board."""
        return self._config.rows, self._config.cols

    @property
    def detonated(self) -> Optional[Coord]:
        """Mine that ended the game, or None."""
        return self._state.detonated

    @property
    def is_over(self) -> bool:
        return self._state.is_over

    def cell_at(self, row: int, col: int) -> CellView:
        """
        Get the player-visible view of a cell.

        Raises:
            OutOfBoundsError: If the position is off the grid.
        """
        cell = self._board.cell(row, col)
        if cell.is_revealed:
            return CellView(True, cell.visibility, cell.value)
        return CellView(False, cell.visibility, None)

    def drain_changed(self) -> List[Coord]:
        """Return and clear the coordinates changed since the last drain."""
        changed = self._state.changed
        self._state.changed = []
        return changed

    def misflagged(self) -> List[Coord]:
        """
        Get flagged cells that hold no mine.

        Only disclosed once the game is lost; empty otherwise.
        """
        if self._state.phase != Phase.LOST:
            return []
        return [
            (row, col) for row, col in self._board.coords()
            if self._board.cell(row, col).is_flagged
            and not self._board.cell(row, col).is_mine
        ]

    def snapshot(self) -> np.ndarray:
        """
        Get the player-visible board as a read-only array.

        Returns:
            2D int8 array using Cell.to_observation codes.
        """
        obs = np.zeros((self._config.rows, self._config.cols), dtype=np.int8)
        for row, col in self._board.coords():
            obs[row, col] = self._board.cell(row, col).to_observation()
        obs.flags.writeable = False
        return obs

    def observe(self, row: int, col: int) -> int:
        """Get the observation code of a single cell."""
        return self._board.cell(row, col).to_observation()
