"""Board dimensions and free-cell tracking."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

import numpy as np

from snake_engine.snake import Vector

T = TypeVar("T")

MIN_WIDTH = 5
MIN_HEIGHT = 3


class CellType(enum.IntEnum):
    """Integer codes stored in rendered board arrays."""

    EMPTY = 0
    HEAD = 1
    BODY = 2
    FOOD = 3
    HAZARD = 4


class IndexedSet(Generic[T]):
    """Unordered set with O(1) insert, removal by value and indexing.

    Elements live in a list; a side map records each element's slot.
    Removal swaps the last element into the vacated slot, so indices are
    only stable until the next removal.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        self._index: dict[T, int] = {}
        for item in items:
            self.add(item)

    def add(self, item: T) -> None:
        if item in self._index:
            raise ValueError(f"{item!r} is already present.")
        self._index[item] = len(self._items)
        self._items.append(item)

    def remove(self, item: T) -> None:
        """Remove *item*, raising ``KeyError`` if it is absent."""
        slot = self._index.pop(item)
        last = self._items.pop()
        if slot < len(self._items):
            self._items[slot] = last
            self._index[last] = slot

    def discard(self, item: T) -> bool:
        """Remove *item* if present. Returns True if removed."""
        if item not in self._index:
            return False
        self.remove(item)
        return True

    def clear(self) -> None:
        self._items.clear()
        self._index.clear()

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __contains__(self, item: object) -> bool:
        return item in self._index

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"IndexedSet({self._items!r})"


class Board:
    """Fixed-size board that tracks which cells are free.

    A cell is free when it holds no snake segment, food or hazard. The
    free set is maintained incrementally through :meth:`claim` and
    :meth:`release`, and only rebuilt from scratch on restart.
    """

    def __init__(self, width: int, height: int) -> None:
        if width < MIN_WIDTH or height < MIN_HEIGHT:
            raise ValueError(
                f"Board must be at least {MIN_WIDTH}×{MIN_HEIGHT}, "
                f"got {width}×{height}."
            )
        self.width = width
        self.height = height
        self.free: IndexedSet[Vector] = IndexedSet()

    @property
    def area(self) -> int:
        return self.width * self.height

    def in_bounds(self, cell: Vector) -> bool:
        """Check whether a coordinate lies on the board."""
        return 0 <= cell.x < self.width and 0 <= cell.y < self.height

    def cells(self) -> Iterator[Vector]:
        """Yield every board cell in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Vector(x, y)

    def init_free_positions(self, *occupied: Iterable[Vector]) -> None:
        """Rebuild the free set as all cells minus the *occupied* groups."""
        mask = np.ones((self.height, self.width), dtype=bool)
        for group in occupied:
            for cell in group:
                mask[cell.y, cell.x] = False
        rows, cols = np.nonzero(mask)
        self.free = IndexedSet(
            Vector(x, y)
            for y, x in zip(rows.tolist(), cols.tolist(), strict=True)
        )

    def claim(self, cell: Vector) -> None:
        """Mark a free cell as occupied."""
        self.free.remove(cell)

    def release(self, cell: Vector) -> None:
        """Return an occupied cell to the free set."""
        self.free.add(cell)

    def to_array(
        self,
        snake: Iterable[Vector],
        food: Iterable[Vector],
        hazards: Iterable[Vector],
    ) -> np.ndarray:
        """Render occupancy into a ``(height, width)`` array of cell codes.

        Later layers win: hazards, then body, then head, then food.
        """
        cells = np.zeros((self.height, self.width), dtype=np.int8)
        for cell in hazards:
            cells[cell.y, cell.x] = CellType.HAZARD
        segments = list(snake)
        for cell in segments[1:]:
            cells[cell.y, cell.x] = CellType.BODY
        if segments:
            head = segments[0]
            cells[head.y, head.x] = CellType.HEAD
        for cell in food:
            cells[cell.y, cell.x] = CellType.FOOD
        return cells
