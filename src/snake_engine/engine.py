"""Step-based game engine composing board, snake, and food logic."""

from __future__ import annotations

import enum
import logging

import numpy as np

from snake_engine.board import Board, IndexedSet
from snake_engine.food import FoodSpawner
from snake_engine.prng import Prng16
from snake_engine.snake import Direction, Snake, Vector

logger = logging.getLogger(__name__)


class GameOverReason(str, enum.Enum):
    """Why a run ended, phrased as advice to the player."""

    WALL = "avoid walls"
    SELF = "avoid crashing into your own tail"
    HAZARD = "don't slip on the leftovers"
    KILL_SCREEN = "can't believe you made it this far"


class GameEngine:
    """Single-snake, step-based game engine with persistent hazards.

    The engine owns the board, snake, food spawner and hazard set. Each
    call to :meth:`tick` advances the game by one cell. Eating food grows
    the snake and marks the tail it keeps; once that tail moves on, the
    cell stays behind as a hazard for the rest of the run.

    The engine is not thread-safe; a single driver must own it.
    """

    def __init__(
        self,
        width: int = 20,
        height: int = 16,
        *,
        seed: tuple[int, int] | None = None,
        prng: Prng16 | None = None,
    ) -> None:
        self.board = Board(width, height)
        if prng is None:
            prng = Prng16(seed) if seed is not None else Prng16.from_entropy()
        self.prng = prng
        self.snake = Snake()
        self.food_spawner = FoodSpawner(self.board, self.prng)
        # Cells the snake has left behind. A kept tail is not listed here
        # until the snake moves off it; see pending_hazards.
        self.hazards: set[Vector] = set()
        # Tail cells kept by a growing snake; they become hazards on release.
        self.pending_hazards: set[Vector] = set()

        self.direction = Direction.LEFT
        self.next_direction = Direction.LEFT
        self.score = 0
        self.high_score = 0
        self.high_score_display = 0
        self.ticks = 0
        self.game_over = False
        self.game_over_reason: GameOverReason | None = None

        self.restart()

    # -- accessors ---------------------------------------------------------

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def food(self) -> set[Vector]:
        return self.food_spawner.positions

    @property
    def free_positions(self) -> IndexedSet[Vector]:
        return self.board.free

    @property
    def running(self) -> bool:
        return not self.game_over

    # -- mutators ----------------------------------------------------------

    def restart(self) -> None:
        """Start a new run, keeping dimensions and the high score."""
        self.snake.clear()
        self.food_spawner.clear()
        self.hazards.clear()
        self.pending_hazards.clear()
        self.board.init_free_positions(self.snake, self.hazards, self.food)

        row = self.height // 2
        for cell in (Vector(self.width - 2, row), Vector(self.width - 1, row)):
            self.snake.push_tail(cell)
            self.board.claim(cell)

        self.direction = Direction.LEFT
        self.next_direction = Direction.LEFT
        self.high_score_display = self.high_score
        self.score = 0
        self.ticks = 0
        self.game_over = False
        self.game_over_reason = None

        self.spawn_food(1)

    def change_direction(self, direction: Direction) -> None:
        """Queue a turn for the next tick, ignoring no-ops and reversals."""
        if direction in (self.direction, self.direction.opposite):
            return
        self.next_direction = direction

    def tick(self) -> None:
        """Advance the game by one step. Does nothing once the game is over."""
        if self.game_over:
            return

        self.direction = self.next_direction
        new_head = self.snake.head + self.direction.vector

        if not self.board.in_bounds(new_head):
            self._end_game(GameOverReason.WALL)
            return
        if new_head in self.snake:
            self._end_game(GameOverReason.SELF)
            return
        if new_head in self.hazards:
            self._end_game(GameOverReason.HAZARD)
            return

        self.snake.push_head(new_head)
        self.ticks += 1

        # Food cells are already claimed; the head takes the claim over.
        if self.food_spawner.remove(new_head):
            self.score += 1
            self.pending_hazards.add(self.snake.tail)
            self.spawn_food(1)
            return

        self.board.claim(new_head)
        tail = self.snake.pop_tail()
        if tail in self.pending_hazards:
            self.pending_hazards.remove(tail)
            self.hazards.add(tail)
        elif tail not in self.hazards:
            self.board.release(tail)

    def spawn_food(self, count: int = 1) -> list[Vector]:
        """Place up to *count* food items, ending the game if the board is full."""
        if self.game_over:
            return []
        spawned = self.food_spawner.spawn(count)
        if len(spawned) < count:
            self._end_game(GameOverReason.KILL_SCREEN)
        return spawned

    def place_food(self, cell: Vector) -> None:
        """Put a food item on a specific free cell."""
        if self.game_over:
            raise ValueError("Cannot place food after game over.")
        self.food_spawner.place(cell)

    # -- queries -----------------------------------------------------------

    def semi_open_tiles(self) -> list[Vector]:
        """Return in-bounds cells orthogonally adjacent to the head or any food.

        Debug-overlay helper; each cell appears once, head neighbours first.
        """
        anchors = [self.snake.head]
        anchors.extend(sorted(self.food, key=lambda c: (c.y, c.x)))
        tiles: dict[Vector, None] = {}
        for anchor in anchors:
            for cell in anchor.neighbors():
                if self.board.in_bounds(cell):
                    tiles.setdefault(cell, None)
        return list(tiles)

    def to_array(self) -> np.ndarray:
        """Render the board as a ``(height, width)`` array of cell codes."""
        return self.board.to_array(self.snake, self.food, self.hazards)

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "width": self.width,
            "height": self.height,
            "ticks": self.ticks,
            "score": self.score,
            "high_score": self.high_score,
            "high_score_display": self.high_score_display,
            "game_over": self.game_over,
            "reason": (
                self.game_over_reason.value
                if self.game_over_reason is not None else None
            ),
            "direction": self.direction.name,
            "snake": self.snake.to_list(),
            "food": self.food_spawner.to_list(),
            "hazards": [
                c.to_list() for c in sorted(self.hazards, key=lambda c: (c.y, c.x))
            ],
            "free_count": len(self.board.free),
            "prng_state": list(self.prng.state),
        }

    def _end_game(self, reason: GameOverReason) -> None:
        """Enter the terminal state and record the high score."""
        self.game_over = True
        self.game_over_reason = reason
        self.high_score = max(self.high_score, self.score)
        logger.info(
            "Game over: %s. Score: %d, high score: %d.",
            reason.value, self.score, self.high_score,
        )
