"""
Reveal engine for Minesweeper.

Opens cells and flood-fills connected empty regions using an explicit
frontier, so stack depth does not grow with board size.
"""
import logging
from collections import deque
from typing import Deque

from .board import Board, Coord
from .cell import Visibility
from .state import GameState, Phase


logger = logging.getLogger(__name__)


# ============================================================================
# Reveal Engine
# ============================================================================

class RevealEngine:
    """
    Applies reveal actions to a board.

    Every cell whose visibility changes is appended to the game
    state's changed list, in the order it was opened.
    """

    def reveal(self, board: Board, state: GameState, row: int, col: int) -> None:
        """
        Reveal a cell and any region it opens.

        Off-grid, revealed and flagged targets are ignored. A mine ends
        the game and discloses every other mine; an empty cell opens
        its neighbors until numbered cells bound the region.

        Args:
            board: Board to mutate.
            state: Game state to update.
            row: Row index to reveal.
            col: Column index to reveal.
        """
        if not board.in_bounds(row, col):
            return
        if not self._open(board, state, row, col):
            return

        cell = board.cell(row, col)
        if cell.is_mine:
            self._detonate(board, state, (row, col))
            return
        if cell.value > 0:
            return

        frontier: Deque[Coord] = deque([(row, col)])
        while frontier:
            current_row, current_col = frontier.popleft()
            for neighbor_row, neighbor_col in board.neighbors(
                current_row, current_col
            ):
                if not self._open(board, state, neighbor_row, neighbor_col):
                    continue
                if board.cell(neighbor_row, neighbor_col).value == 0:
                    frontier.append((neighbor_row, neighbor_col))

    def reveal_all_mines(self, board: Board, state: GameState) -> None:
        """
        Show every mine after a loss.

        Flagged mines are revealed too, returning their flag to the
        remaining count.
        """
        for row, col in board.mine_locations:
            cell = board.cell(row, col)
            if cell.is_revealed:
                continue
            if cell.is_flagged:
                state.flags_remaining += 1
            cell.visibility = Visibility.REVEALED
            state.revealed_count += 1
            state.changed.append((row, col))

    def _open(self, board: Board, state: GameState, row: int, col: int) -> bool:
        """Reveal a single cell and record it. False if it cannot be opened."""
        if not board.cell(row, col).reveal():
            return False
        state.revealed_count += 1
        state.changed.append((row, col))
        return True

    def _detonate(self, board: Board, state: GameState, mine: Coord) -> None:
        state.phase = Phase.LOST
        state.detonated = mine
        self.reveal_all_mines(board, state)
        logger.info("Mine hit at %s, game lost", mine)
