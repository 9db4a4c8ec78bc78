"""Tests for the Board module."""

import numpy as np
import pytest

from snake_engine.board import Board, CellType, IndexedSet
from snake_engine.snake import Vector


class TestIndexedSet:
    def test_add_and_contains(self):
        s = IndexedSet(["a", "b"])
        assert "a" in s
        assert len(s) == 2

    def test_duplicate_add_rejected(self):
        s = IndexedSet(["a"])
        with pytest.raises(ValueError, match="already present"):
            s.add("a")

    def test_remove_swaps_last_into_slot(self):
        s = IndexedSet(["a", "b", "c", "d"])
        s.remove("b")
        assert list(s) == ["a", "d", "c"]
        assert s[1] == "d"
        assert "b" not in s

    def test_remove_last(self):
        s = IndexedSet(["a", "b"])
        s.remove("b")
        assert list(s) == ["a"]

    def test_remove_missing_raises(self):
        s = IndexedSet(["a"])
        with pytest.raises(KeyError):
            s.remove("z")

    def test_discard(self):
        s = IndexedSet(["a"])
        assert s.discard("a")
        assert not s.discard("a")
        assert len(s) == 0

    def test_index_stays_consistent(self):
        s = IndexedSet(range(10))
        for item in (3, 9, 0, 5):
            s.remove(item)
        assert sorted(s) == [1, 2, 4, 6, 7, 8]
        for i in range(len(s)):
            assert s[i] in s


class TestBoardInit:
    def test_dimensions(self):
        board = Board(7, 4)
        assert board.width == 7
        assert board.height == 4
        assert board.area == 28

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 5"):
            Board(4, 5)
        with pytest.raises(ValueError, match="at least 5"):
            Board(5, 2)

    def test_smallest_board_allowed(self):
        Board(5, 3)


class TestBoardOperations:
    def test_in_bounds(self):
        board = Board(5, 3)
        assert board.in_bounds(Vector(0, 0))
        assert board.in_bounds(Vector(4, 2))
        assert not board.in_bounds(Vector(-1, 0))
        assert not board.in_bounds(Vector(5, 0))
        assert not board.in_bounds(Vector(0, 3))

    def test_init_free_positions_row_major(self):
        board = Board(5, 3)
        board.init_free_positions()
        assert len(board.free) == 15
        assert list(board.free) == list(board.cells())
        assert board.free[0] == Vector(0, 0)
        assert board.free[5] == Vector(0, 1)

    def test_init_free_positions_excludes_occupied(self):
        board = Board(5, 3)
        board.init_free_positions([Vector(1, 1)], [Vector(2, 2), Vector(0, 0)])
        assert len(board.free) == 12
        assert Vector(1, 1) not in board.free
        assert Vector(0, 0) not in board.free

    def test_claim_and_release(self):
        board = Board(5, 3)
        board.init_free_positions()
        board.claim(Vector(2, 1))
        assert Vector(2, 1) not in board.free
        assert len(board.free) == 14
        board.release(Vector(2, 1))
        assert Vector(2, 1) in board.free
        assert len(board.free) == 15

    def test_claim_occupied_raises(self):
        board = Board(5, 3)
        board.init_free_positions([Vector(2, 1)])
        with pytest.raises(KeyError):
            board.claim(Vector(2, 1))


class TestBoardRendering:
    def test_to_array(self):
        board = Board(5, 3)
        cells = board.to_array(
            snake=[Vector(2, 1), Vector(3, 1)],
            food=[Vector(0, 0)],
            hazards=[Vector(4, 2)],
        )
        assert cells.shape == (3, 5)
        assert cells.dtype == np.int8
        assert cells[1, 2] == CellType.HEAD
        assert cells[1, 3] == CellType.BODY
        assert cells[0, 0] == CellType.FOOD
        assert cells[2, 4] == CellType.HAZARD
        assert np.count_nonzero(cells) == 4
