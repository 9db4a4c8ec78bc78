"""Command dispatch and tick scheduling around a single engine."""

from __future__ import annotations

import asyncio
import enum
import logging
from collections.abc import Iterable

from snake_engine.engine import GameEngine
from snake_engine.snake import Direction

logger = logging.getLogger(__name__)


class Command(enum.Enum):
    """External inputs a driver can feed to the engine."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    RESTART = "restart"
    STEP = "step"


_MOVES: dict[Command, Direction] = {
    Command.MOVE_UP: Direction.UP,
    Command.MOVE_DOWN: Direction.DOWN,
    Command.MOVE_LEFT: Direction.LEFT,
    Command.MOVE_RIGHT: Direction.RIGHT,
}

KEY_BINDINGS: dict[str, Command] = {
    "ArrowUp": Command.MOVE_UP,
    "ArrowDown": Command.MOVE_DOWN,
    "ArrowLeft": Command.MOVE_LEFT,
    "ArrowRight": Command.MOVE_RIGHT,
    " ": Command.RESTART,
}

_SCRIPT_SYMBOLS: dict[str, Command] = {
    "U": Command.MOVE_UP,
    "D": Command.MOVE_DOWN,
    "L": Command.MOVE_LEFT,
    "R": Command.MOVE_RIGHT,
    ".": Command.STEP,
    "!": Command.RESTART,
}


def parse_script(text: str) -> list[Command]:
    """Translate a compact command script into commands.

    ``U D L R`` queue a turn, ``.`` advances one tick and ``!`` restarts.
    Whitespace is ignored.
    """
    commands: list[Command] = []
    for pos, char in enumerate(text):
        if char.isspace():
            continue
        try:
            commands.append(_SCRIPT_SYMBOLS[char.upper()])
        except KeyError:
            raise ValueError(
                f"Unknown script symbol {char!r} at position {pos}."
            ) from None
    return commands


class GameSession:
    """Exclusive owner of a :class:`GameEngine`, driven by commands."""

    def __init__(self, engine: GameEngine) -> None:
        self.engine = engine

    def apply(self, command: Command) -> None:
        """Dispatch a single command to the engine."""
        if command is Command.STEP:
            self.engine.tick()
        elif command is Command.RESTART:
            logger.debug("Restarting game.")
            self.engine.restart()
        else:
            self.engine.change_direction(_MOVES[command])

    def handle_key(self, key: str) -> bool:
        """Apply the command bound to *key*. Returns False for unbound keys."""
        command = KEY_BINDINGS.get(key)
        if command is None:
            return False
        self.apply(command)
        return True

    def run(self, commands: Iterable[Command]) -> dict:
        """Apply *commands* in order and return the resulting state."""
        for command in commands:
            self.apply(command)
        return self.engine.get_state()


class TickLoop:
    """Asyncio driver that steps a session on a fixed cadence.

    Input commands submitted while the loop runs share its lock, so the
    engine only ever sees one call at a time.
    """

    def __init__(
        self,
        session: GameSession,
        interval_ms: int = 100,
        stop_on_game_over: bool = False,
    ) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive.")
        self.session = session
        self.interval_ms = interval_ms
        self.stop_on_game_over = stop_on_game_over
        self.lock = asyncio.Lock()
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> asyncio.Task:
        """Schedule the loop on the running event loop."""
        if self.running:
            raise RuntimeError("Tick loop is already running.")
        self._task = asyncio.create_task(self._loop())
        return self._task

    async def submit(self, command: Command) -> None:
        """Apply a command between ticks."""
        async with self.lock:
            self.session.apply(command)

    async def stop(self) -> None:
        """Cancel the loop and wait for it to finish."""
        if self._task is None:
            return
        if not self._task.done():
            self._task.cancel()
        await asyncio.gather(self._task, return_exceptions=True)
        self._task = None

    async def _loop(self) -> None:
        interval = self.interval_ms / 1000.0
        engine = self.session.engine
        try:
            while True:
                await asyncio.sleep(interval)
                async with self.lock:
                    self.session.apply(Command.STEP)
                    if engine.game_over and self.stop_on_game_over:
                        break
        except asyncio.CancelledError:
            logger.info("Tick loop cancelled.")
            raise
