"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from snake_engine.engine import GameEngine
from snake_engine.session import GameSession, TickLoop

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Board size, PRNG seed and tick cadence for one game session.

    Supports JSON serialization for reproducible runs.
    """

    width: int = 20
    height: int = 16
    # Pair of 16-bit words; ``None`` seeds from host entropy.
    seed: tuple[int, int] | None = None
    tick_interval_ms: int = 100

    def __post_init__(self) -> None:
        if self.seed is not None:
            if len(self.seed) != 2:
                raise ValueError("seed must be a pair of 16-bit words.")
            if not all(0 <= word <= 0xFFFF for word in self.seed):
                raise ValueError("seed words must be in [0, 65535].")
        if self.tick_interval_ms <= 0:
            raise ValueError("tick_interval_ms must be positive.")

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        d = asdict(self)
        if self.seed is not None:
            d["seed"] = list(self.seed)
        return d

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        raw = dict(raw)
        if raw.get("seed") is not None:
            raw["seed"] = tuple(raw["seed"])
        return cls(**raw)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))

    def build_engine(self) -> GameEngine:
        """Construct a fresh engine for this configuration."""
        return GameEngine(self.width, self.height, seed=self.seed)

    def build_tick_loop(self, session: GameSession) -> TickLoop:
        """Wrap *session* in a tick loop running at the configured cadence."""
        return TickLoop(session, self.tick_interval_ms)
