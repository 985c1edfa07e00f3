"""
Minesweeper game engine.

Provides board generation, flood-fill reveal, flag cycling and the
game state machine, plus a Gymnasium environment built on top of them.
"""
from .cell import Cell, Visibility, FLAG_TRANSITIONS
from .board import Board
from .config import BoardConfig, BEGINNER, INTERMEDIATE, EXPERT, PRESETS
from .errors import InvalidConfiguration, OutOfBoundsError
from .generator import BoardGenerator
from .reveal import RevealEngine
from .flags import FlagController
from .state import GameState, Phase
from .game import Game, CellView
from .environment import MinesweeperEnv, render_ansi
from .simulation import SimulationStats, simulate

__all__ = [
    "Cell",
    "Visibility",
    "FLAG_TRANSITIONS",
    "Board",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "InvalidConfiguration",
    "OutOfBoundsError",
    "BoardGenerator",
    "RevealEngine",
    "FlagController",
    "GameState",
    "Phase",
    "Game",
    "CellView",
    "MinesweeperEnv",
    "render_ansi",
    "SimulationStats",
    "simulate",
]
