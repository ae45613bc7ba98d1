"""In-tick signal outboxes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from vim_snake.grid import Position

E = TypeVar("E")


@dataclass(frozen=True)
class GrowthEvent:
    """Food was consumed; the snake gains one segment."""

    food_position: Position


@dataclass(frozen=True)
class GameOverEvent:
    """The round ended; ``reason`` is ``"wall"`` or ``"self"``."""

    reason: str


class EventQueue(Generic[E]):
    """Outbox with read-and-clear semantics.

    Producers :meth:`send` during a tick; the consumer :meth:`drain`\\ s the
    queue at its fixed point in the pipeline.
    """

    def __init__(self) -> None:
        self._pending: list[E] = []

    def __len__(self) -> int:
        return len(self._pending)

    def __bool__(self) -> bool:
        return bool(self._pending)

    def send(self, event: E) -> None:
        self._pending.append(event)

    def drain(self) -> list[E]:
        """Return every pending event and empty the queue."""
        events, self._pending = self._pending, []
        return events
