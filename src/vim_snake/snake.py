"""Headings and per-head steering state."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from vim_snake.grid import Position


class Direction(enum.Enum):
    """Cardinal headings with (dx, dy) values. Up increases y."""

    LEFT = (-1, 0)
    UP = (0, 1)
    DOWN = (0, -1)
    RIGHT = (1, 0)

    def opposite(self) -> Direction:
        """Return the heading that would reverse this one."""
        return _OPPOSITES[self]

    def step(self, position: Position) -> Position:
        """Return *position* moved one cell in this direction."""
        dx, dy = self.value
        return Position(position.x + dx, position.y + dy)


_OPPOSITES: dict[Direction, Direction] = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


@dataclass
class SnakeHead:
    """Steering state carried by the head entity.

    ``direction`` is the heading requested for the next move;
    ``last_direction`` is the heading the previous move actually used.
    Reversal checks run against ``last_direction`` so that several input
    passes between two moves cannot chain into a 180° turn.
    """

    direction: Direction = Direction.UP
    last_direction: Direction = Direction.UP

    def steer(self, candidate: Direction) -> bool:
        """Accept *candidate* unless it reverses the executed heading."""
        if candidate == self.last_direction.opposite():
            return False
        self.direction = candidate
        return True

    def commit(self) -> Direction:
        """Record the pending heading as executed and return it."""
        self.last_direction = self.direction
        return self.direction

    def to_dict(self) -> dict:
        return {
            "direction": self.direction.name.lower(),
            "last_direction": self.last_direction.name.lower(),
        }
