"""Round startup and game-over reset."""

from __future__ import annotations

import logging

from vim_snake.entities import HEAD_SIZE, EntityStore
from vim_snake.events import EventQueue, GameOverEvent
from vim_snake.grid import Position
from vim_snake.snake import Direction, SnakeHead

logger = logging.getLogger(__name__)

HEAD_START = Position(10, 20)
TAIL_START = Position(10, 19)


def spawn_snake(
    store: EntityStore,
    head_start: Position = HEAD_START,
    tail_start: Position = TAIL_START,
) -> list[int]:
    """Replace the body chain with a fresh two-segment snake heading up."""
    head_id = store.spawn(
        head_start,
        HEAD_SIZE,
        segment=True,
        head=SnakeHead(direction=Direction.UP, last_direction=Direction.UP),
    )
    store.segments = [head_id, store.spawn_segment(tail_start)]
    return store.segments


def reset_round(
    store: EntityStore,
    head_start: Position = HEAD_START,
    tail_start: Position = TAIL_START,
) -> None:
    """Despawn every segment and food, then respawn the starting snake."""
    for food in store.foods():
        store.despawn(food.entity_id)
    for segment_id in store.segment_ids():
        store.despawn(segment_id)
    spawn_snake(store, head_start, tail_start)


def handle_game_over(
    store: EntityStore,
    game_over: EventQueue[GameOverEvent],
    head_start: Position = HEAD_START,
    tail_start: Position = TAIL_START,
) -> list[GameOverEvent]:
    """Reset the round once if any game-over signal is pending.

    Returns the drained signals; several in one tick still mean one reset.
    """
    events = game_over.drain()
    if events:
        length = len(store.segments)
        reset_round(store, head_start, tail_start)
        logger.info(
            "Round over (%s) at length %d; snake respawned.",
            ", ".join(e.reason for e in events),
            length,
        )
    return events
