"""
Flag controller for Minesweeper.

Cycles a cell's marking and keeps the flags-remaining counter from
going below zero.
"""
from .board import Board
from .cell import Visibility
from .state import GameState


class FlagController:
    """Applies flag actions to a board."""

    def flag(
        self, board: Board, state: GameState, row: int, col: int, allow_marks: bool
    ) -> int:
        """
        Cycle the flag state of a cell.

        A new flag is only placed while flags remain; removing a flag or
        clearing a mark is always allowed.

        Args:
            board: Board to mutate.
            state: Game state to update.
            row: Row index.
            col: Column index.
            allow_marks: Whether the cycle passes through MARKED.

        Returns:
            Change to flags-remaining (-1, 0 or +1).
        """
        if not board.in_bounds(row, col):
            return 0
        cell = board.cell(row, col)
        if cell.is_hidden and state.flags_remaining <= 0:
            return 0

        before = cell.visibility
        delta = cell.cycle_flag(allow_marks)
        if cell.visibility != before:
            state.changed.append((row, col))
        state.flags_remaining += delta
        return delta

    def flag_all_mines(self, board: Board, state: GameState) -> None:
        """Force every mine to FLAGGED after a win."""
        for row, col in board.mine_locations:
            board.cell(row, col).visibility = Visibility.FLAGGED
            state.changed.append((row, col))
        state.flags_remaining = 0
