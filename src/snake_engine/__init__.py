"""Snake engine: deterministic grid simulation core."""

from snake_engine.board import Board, CellType, IndexedSet
from snake_engine.config import GameConfig
from snake_engine.engine import GameEngine, GameOverReason
from snake_engine.food import FoodSpawner
from snake_engine.prng import Prng16
from snake_engine.session import Command, GameSession, TickLoop
from snake_engine.snake import Direction, Snake, Vector

__all__ = [
    "Board",
    "CellType",
    "Command",
    "Direction",
    "FoodSpawner",
    "GameConfig",
    "GameEngine",
    "GameOverReason",
    "GameSession",
    "IndexedSet",
    "Prng16",
    "Snake",
    "TickLoop",
    "Vector",
]
