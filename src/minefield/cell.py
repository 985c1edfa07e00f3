"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their visibility
(hidden/flagged/marked/revealed) and value (mine or neighbor count).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict, Tuple


# ============================================================================
# Constants
# ============================================================================

MINE = -1
EMPTY = 0


class Visibility(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    REVEALED = auto()
    MARKED = auto()


# (current visibility, marks enabled) -> (next visibility, flags-remaining delta)
FLAG_TRANSITIONS: Dict[Tuple[Visibility, bool], Tuple[Visibility, int]] = {
    (Visibility.HIDDEN, False): (Visibility.FLAGGED, -1),
    (Visibility.HIDDEN, True): (Visibility.FLAGGED, -1),
    (Visibility.FLAGGED, False): (Visibility.HIDDEN, 1),
    (Visibility.FLAGGED, True): (Visibility.MARKED, 1),
    (Visibility.MARKED, False): (Visibility.HIDDEN, 0),
    (Visibility.MARKED, True): (Visibility.HIDDEN, 0),
    (Visibility.REVEALED, False): (Visibility.REVEALED, 0),
    (Visibility.REVEALED, True): (Visibility.REVEALED, 0),
}

# Observation codes for cells whose value is not visible
HIDDEN_CODE = -1
FLAGGED_CODE = -2
MARKED_CODE = -3
REVEALED_MINE_CODE = 9


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        value: -1 for a mine, otherwise the count of adjacent mines (0-8).
        visibility: Current visual state of the cell.
    """

    value: int = EMPTY
    visibility: Visibility = Visibility.HIDDEN

    def make_mine(self) -> None:
        """Turn this cell into a mine."""
        self.value = MINE

    def increment(self) -> None:
        """Count one more adjacent mine. Mines keep their value."""
        if self.value != MINE:
            self.value += 1

    def reveal(self) -> bool:
        """
        Reveal this cell by player action.

        Returns:
            True if cell was revealed, False if already revealed
            or flagged.
        """
        if not self.can_reveal:
            return False
        self.visibility = Visibility.REVEALED
        return True

    def cycle_flag(self, allow_marks: bool) -> int:
        """
        Advance this cell through its flag cycle.

        Args:
            allow_marks: Whether the cycle passes through MARKED.

        Returns:
            Change to the flags-remaining counter (-1, 0 or +1).
        """
        self.visibility, delta = FLAG_TRANSITIONS[self.visibility, allow_marks]
        return delta

    @property
    def is_mine(self) -> bool:
        return self.value == MINE

    @property
    def can_reveal(self) -> bool:
        """Hidden and marked cells can be revealed; flags must be removed first."""
        return self.visibility in (Visibility.HIDDEN, Visibility.MARKED)

    @property
    def is_hidden(self) -> bool:
        return self.visibility == Visibility.HIDDEN

    @property
    def is_revealed(self) -> bool:
        return self.visibility == Visibility.REVEALED

    @property
    def is_flagged(self) -> bool:
        return self.visibility == Visibility.FLAGGED

    @property
    def is_marked(self) -> bool:
        return self.visibility == Visibility.MARKED

    def to_observation(self) -> int:
        """
        Convert cell to its player-visible code.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            -3: Marked cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.visibility == Visibility.HIDDEN:
            return HIDDEN_CODE
        if self.visibility == Visibility.FLAGGED:
            return FLAGGED_CODE
        if self.visibility == Visibility.MARKED:
            return MARKED_CODE
        if self.is_mine:
            return REVEALED_MINE_CODE
        return self.value
