"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig, BoardGenerator, Cell, Game, GameState


class ScriptedRandom:
    """Random source that yields scripted coordinates before falling back."""

    def __init__(self, coords: Iterable[Tuple[int, int]], seed: int = 0) -> None:
        self._values: List[int] = [value for coord in coords for value in coord]
        self._fallback = random.Random(seed)

    def randrange(self, stop: int) -> int:
        if self._values:
            return self._values.pop(0)
        return self._fallback.randrange(stop)


# ============================================================================
# Generator Fixtures
# ============================================================================

@pytest.fixture
def scripted_generator() -> Callable[..., BoardGenerator]:
    """Factory for generators whose first draws are fixed coordinates."""
    def make(*coords: Tuple[int, int]) -> BoardGenerator:
        return BoardGenerator(rng=ScriptedRandom(coords))
    return make


@pytest.fixture
def seeded_generator() -> BoardGenerator:
    """Generator with a fixed seed."""
    return BoardGenerator(seed=1234)


# ============================================================================
# Game Fixtures
# ============================================================================

@pytest.fixture
def default_game() -> Game:
    """Create a default 9x9 game with 10 mines."""
    return Game(seed=7)


@pytest.fixture
def corner_mine_game(scripted_generator) -> Game:
    """3x3 game whose single mine lands at (0, 0)."""
    return Game(BoardConfig(3, 3, 1), generator=scripted_generator((0, 0)))


@pytest.fixture
def marks_game() -> Game:
    """Default game with question marks enabled."""
    return Game(marks=True, seed=7)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with one mine at (0, 0)."""
    return Board.with_mines(3, 3, [(0, 0)])


@pytest.fixture
def split_board() -> Board:
    """
    5x5 board with a wall of mines down column 2.

    Column 0 is empty, columns 1 and 3 are numbered, column 4 is empty.
    """
    return Board.with_mines(5, 5, [(row, 2) for row in range(5)])


@pytest.fixture
def fresh_state() -> Callable[[int], GameState]:
    """Factory for game states with a given flag budget."""
    def make(flags: int) -> GameState:
        return GameState(flags_remaining=flags)
    return make


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    cell = Cell()
    cell.make_mine()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


@pytest.fixture
def small_config() -> BoardConfig:
    """Small board for environment tests."""
    return BoardConfig(4, 4, 2)
