"""
Batch simulation of random-click games.

Plays games through the Gymnasium environment, picking uniformly among
valid reveals, and accumulates outcome statistics.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np

from .config import BoardConfig
from .environment import MinesweeperEnv


# ============================================================================
# Simulation Statistics
# ============================================================================

@dataclass
class SimulationStats:
    """Accumulated statistics over simulated games."""

    games: int = 0
    wins: int = 0
    losses: int = 0
    total_steps: int = 0
    revealed_history: List[int] = field(default_factory=list)

    @property
    def win_rate(self) -> float:
        if not self.games:
            return 0.0
        return self.wins / self.games

    @property
    def avg_steps(self) -> float:
        if not self.games:
            return 0.0
        return self.total_steps / self.games

    @property
    def avg_revealed(self) -> float:
        if not self.revealed_history:
            return 0.0
        return sum(self.revealed_history) / len(self.revealed_history)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for reporting."""
        return {
            "games": self.games,
            "wins": self.wins,
            "losses": self.losses,
            "win_rate": self.win_rate,
            "avg_steps": self.avg_steps,
            "avg_revealed": self.avg_revealed,
        }


# ============================================================================
# Simulation Loop
# ============================================================================

def simulate(
    config: Optional[BoardConfig] = None,
    games: int = 100,
    seed: Optional[int] = None,
) -> SimulationStats:
    """
    Play random-click games to completion.

    Args:
        config: Board configuration (default: 9x9 with 10 mines).
        games: Number of games to play.
        seed: Seed for both board generation and click choice.

    Returns:
        Statistics over all games.
    """
    env = MinesweeperEnv(config=config)
    rng = np.random.default_rng(seed)
    stats = SimulationStats()

    for episode in range(games):
        env.reset(seed=None if seed is None else seed + episode)
        info: Dict[str, Any] = {}
        done = False

        while not done:
            valid_indices = np.flatnonzero(env.get_action_mask())
            action = int(rng.choice(valid_indices))
            _, _, terminated, truncated, info = env.step(action)
            stats.total_steps += 1
            done = terminated or truncated

        stats.games += 1
        if info["game_state"] == "WON":
            stats.wins += 1
        else:
            stats.losses += 1
        stats.revealed_history.append(info["safe_revealed"])

    env.close()
    return stats
