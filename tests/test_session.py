"""Tests for command dispatch and the tick loop."""

import asyncio

import pytest

from snake_engine.engine import GameEngine, GameOverReason
from snake_engine.session import (
    KEY_BINDINGS,
    Command,
    GameSession,
    TickLoop,
    parse_script,
)
from snake_engine.snake import Direction, Vector


def _session(width=10, height=10) -> GameSession:
    return GameSession(GameEngine(width, height, seed=(1, 2)))


class TestCommandDispatch:
    def test_move_commands_queue_direction(self):
        session = _session()
        session.apply(Command.MOVE_UP)
        assert session.engine.next_direction == Direction.UP
        assert session.engine.direction == Direction.LEFT

    def test_reverse_command_ignored(self):
        session = _session()
        session.apply(Command.MOVE_RIGHT)
        assert session.engine.next_direction == Direction.LEFT

    def test_step_ticks(self):
        session = _session()
        session.apply(Command.MOVE_DOWN)
        session.apply(Command.STEP)
        assert session.engine.snake.head == Vector(8, 6)

    def test_restart(self):
        session = _session(5, 5)
        for _ in range(4):
            session.apply(Command.STEP)
        assert session.engine.game_over
        session.apply(Command.RESTART)
        assert session.engine.running
        assert session.engine.snake.head == Vector(3, 2)

    def test_run_returns_state(self):
        session = _session(5, 5)
        state = session.run([Command.STEP] * 4)
        assert state["game_over"]
        assert state["reason"] == GameOverReason.WALL.value


class TestKeyBindings:
    def test_arrow_keys(self):
        session = _session()
        assert session.handle_key("ArrowDown")
        assert session.engine.next_direction == Direction.DOWN

    def test_space_restarts(self):
        assert KEY_BINDINGS[" "] is Command.RESTART
        session = _session(5, 5)
        session.run([Command.STEP] * 4)
        assert session.handle_key(" ")
        assert not session.engine.game_over

    def test_unbound_key(self):
        session = _session()
        before = session.engine.get_state()
        assert not session.handle_key("q")
        assert session.engine.get_state() == before


class TestScriptParsing:
    def test_parse(self):
        assert parse_script("U.d !") == [
            Command.MOVE_UP, Command.STEP, Command.MOVE_DOWN, Command.RESTART,
        ]

    def test_empty(self):
        assert parse_script("") == []

    def test_unknown_symbol(self):
        with pytest.raises(ValueError, match="position 2"):
            parse_script("..x")


class TestTickLoop:
    def test_invalid_interval(self):
        with pytest.raises(ValueError, match="positive"):
            TickLoop(_session(), interval_ms=0)

    @pytest.mark.asyncio
    async def test_runs_until_game_over(self):
        session = _session(5, 5)
        loop = TickLoop(session, interval_ms=1, stop_on_game_over=True)
        task = loop.start()
        await asyncio.wait_for(task, timeout=5)
        assert session.engine.game_over
        assert not loop.running

    @pytest.mark.asyncio
    async def test_submit_between_ticks(self):
        session = _session()
        loop = TickLoop(session, interval_ms=10_000)
        loop.start()
        await loop.submit(Command.MOVE_UP)
        assert session.engine.next_direction == Direction.UP
        await loop.stop()
        assert not loop.running

    @pytest.mark.asyncio
    async def test_double_start_rejected(self):
        loop = TickLoop(_session(), interval_ms=10_000)
        loop.start()
        with pytest.raises(RuntimeError, match="already running"):
            loop.start()
        await loop.stop()
