"""Board geometry and the snake body container."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vector:
    """Integer board coordinate, ``x`` to the right and ``y`` downwards."""

    x: int
    y: int

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def neighbors(self) -> Iterator[Vector]:
        """Yield the four orthogonal neighbours (up, right, down, left)."""
        for direction in Direction:
            yield self + direction.vector

    def to_list(self) -> list[int]:
        return [self.x, self.y]


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def vector(self) -> Vector:
        """Unit step for this direction."""
        return Vector(*self.value)

    @property
    def opposite(self) -> Direction:
        """The direction that would cause an instant 180° reversal."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(self, segments: Iterable[Vector] = ()) -> None:
        self.body: deque[Vector] = deque(segments)

    @property
    def head(self) -> Vector:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> Vector:
        """Return the oldest body segment."""
        return self.body[-1]

    def push_head(self, cell: Vector) -> None:
        self.body.appendleft(cell)

    def push_tail(self, cell: Vector) -> None:
        self.body.append(cell)

    def pop_tail(self) -> Vector:
        """Remove and return the tail segment."""
        return self.body.pop()

    def clear(self) -> None:
        self.body.clear()

    def __contains__(self, cell: object) -> bool:
        return cell in self.body

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self.body)

    def to_list(self) -> list[list[int]]:
        """Serialize the body, head first."""
        return [seg.to_list() for seg in self.body]
