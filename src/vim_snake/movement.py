"""Head movement and follow-the-leader body shift."""

from __future__ import annotations

from dataclasses import dataclass

from vim_snake.entities import EntityStore
from vim_snake.grid import Position
from vim_snake.snake import Direction


@dataclass(frozen=True)
class MoveOutcome:
    """Result of one movement tick.

    ``snapshot`` holds every segment position, head first, as it was before
    the move; collision checks run against it.
    """

    head_position: Position
    direction: Direction
    snapshot: tuple[Position, ...]


def move_snake(store: EntityStore) -> MoveOutcome:
    """Advance the head one cell and shift the body behind it.

    Every segment takes the pre-move position of the segment ahead of it,
    so the shift reads only from the snapshot and never from positions
    already updated this tick.
    """
    head = store.head()
    snapshot = tuple(store.segment_positions())

    direction = head.head.commit()
    new_head = direction.step(head.position)
    head.position = new_head

    for position, segment_id in zip(snapshot, store.segments[1:]):
        store.set_position(segment_id, position)

    store.last_tail_position = snapshot[-1]
    return MoveOutcome(
        head_position=new_head, direction=direction, snapshot=snapshot,
    )
