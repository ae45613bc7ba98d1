"""Vim Snake: grid snake simulation core."""

from vim_snake.config import SimulationConfig
from vim_snake.controls import LogicalKey, decode_keys, resolve_direction
from vim_snake.entities import Entity, EntityKind, EntityStore
from vim_snake.grid import ARENA_HEIGHT, ARENA_WIDTH, Arena, Position, Size
from vim_snake.simulation import FrameReport, Renderable, Simulation, TickReport
from vim_snake.snake import Direction, SnakeHead

__all__ = [
    "ARENA_HEIGHT",
    "ARENA_WIDTH",
    "Arena",
    "Direction",
    "Entity",
    "EntityKind",
    "EntityStore",
    "FrameReport",
    "LogicalKey",
    "Position",
    "Renderable",
    "Simulation",
    "SimulationConfig",
    "Size",
    "SnakeHead",
    "TickReport",
    "decode_keys",
    "resolve_direction",
]
