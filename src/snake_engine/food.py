"""Food spawning logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from snake_engine.board import Board
    from snake_engine.prng import Prng16
    from snake_engine.snake import Vector

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Manages food placement on the board.

    Picks uniformly among the board's free cells using the seeded
    :class:`~snake_engine.prng.Prng16`, so placement is reproducible.
    """

    def __init__(self, board: Board, prng: Prng16) -> None:
        self.board = board
        self.prng = prng
        self.positions: set[Vector] = set()

    def spawn(self, count: int = 1) -> list[Vector]:
        """Spawn up to *count* food items on free cells.

        Stops early once the board has no free cells left. Returns the
        list of newly spawned positions.
        """
        spawned: list[Vector] = []
        for _ in range(count):
            free = self.board.free
            if not free:
                logger.warning("No free cells available for food spawning.")
                break
            # Modulo selection carries a slight bias towards low indices.
            pos = free[self.prng.next() % len(free)]
            self.board.claim(pos)
            self.positions.add(pos)
            spawned.append(pos)
        return spawned

    def place(self, pos: Vector) -> None:
        """Put food on a specific free cell."""
        if pos not in self.board.free:
            raise ValueError(f"Cannot place food on occupied cell {pos}.")
        self.board.claim(pos)
        self.positions.add(pos)

    def remove(self, pos: Vector) -> bool:
        """Consume the food at *pos*. Returns True if removed.

        The cell is not returned to the board; its new occupant claims it.
        """
        if pos in self.positions:
            self.positions.remove(pos)
            return True
        return False

    def clear(self) -> None:
        self.positions.clear()

    def to_list(self) -> list[list[int]]:
        """Serialize food positions in row-major order."""
        return [p.to_list() for p in sorted(self.positions, key=_row_major)]


def _row_major(pos: Vector) -> tuple[int, int]:
    return pos.y, pos.x
