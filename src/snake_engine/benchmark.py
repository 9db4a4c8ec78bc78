"""Throughput benchmarking for the tick loop."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from snake_engine.engine import GameEngine
from snake_engine.snake import Direction

logger = logging.getLogger(__name__)

_DIRECTIONS = list(Direction)


@dataclass
class BenchmarkResult:
    """Results from a throughput benchmark run."""

    total_games: int
    total_ticks: int
    wall_time_seconds: float
    games_per_second: float
    ticks_per_second: float
    best_score: int

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_games} games, {self.total_ticks} ticks "
            f"in {self.wall_time_seconds:.2f}s | "
            f"{self.games_per_second:.1f} games/s, "
            f"{self.ticks_per_second:.1f} ticks/s | "
            f"best score {self.best_score}"
        )


def benchmark_throughput(
    *,
    num_games: int = 100,
    width: int = 20,
    height: int = 16,
    max_ticks: int = 1_000,
    seed: tuple[int, int] = (1, 2),
) -> BenchmarkResult:
    """Measure raw engine throughput with random turns.

    One engine is reused across games through :meth:`GameEngine.restart`.
    Each game ends on game over or after *max_ticks* ticks.
    """
    engine = GameEngine(width, height, seed=seed)
    rng = np.random.default_rng(seed[0] << 16 | seed[1])

    total_ticks = 0
    start = time.perf_counter()

    for game in range(num_games):
        if game:
            engine.restart()
        turns = rng.integers(len(_DIRECTIONS), size=max_ticks).tolist()
        for turn in turns:
            engine.change_direction(_DIRECTIONS[turn])
            engine.tick()
            total_ticks += 1
            if engine.game_over:
                break

    elapsed = time.perf_counter() - start
    safe = max(elapsed, 1e-9)
    result = BenchmarkResult(
        total_games=num_games,
        total_ticks=total_ticks,
        wall_time_seconds=elapsed,
        games_per_second=num_games / safe,
        ticks_per_second=total_ticks / safe,
        best_score=max(engine.high_score, engine.score),
    )
    logger.info(result.summary())
    return result
