"""
Per-game mutable state shared by the reveal engine and flag controller.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from .board import Coord


class Phase(Enum):
    """Possible phases of a game."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


@dataclass
class GameState:
    """
    Counters and pending changes for one game.

    Attributes:
        flags_remaining: Mines minus flags placed.
        phase: Current game phase.
        revealed_count: Cells with REVEALED visibility.
        changed: Coordinates whose visibility changed since last drain.
        detonated: Mine that ended the game, if any.
    """

    flags_remaining: int
    phase: Phase = Phase.NOT_STARTED
    revealed_count: int = 0
    changed: List[Coord] = field(default_factory=list)
    detonated: Optional[Coord] = None

    @property
    def is_over(self) -> bool:
        return self.phase in (Phase.WON, Phase.LOST)
