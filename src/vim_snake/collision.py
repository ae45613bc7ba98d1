"""Fatal collision checks, food consumption, and growth."""

from __future__ import annotations

import logging

from vim_snake.entities import EntityStore
from vim_snake.events import EventQueue, GameOverEvent, GrowthEvent
from vim_snake.grid import Arena
from vim_snake.movement import MoveOutcome

logger = logging.getLogger(__name__)


def check_collisions(
    outcome: MoveOutcome,
    arena: Arena,
    game_over: EventQueue[GameOverEvent],
) -> list[GameOverEvent]:
    """Send a game-over signal for each fatal condition of this move.

    The body check uses the pre-move snapshot, so moving into the cell the
    tail is just leaving is still fatal.
    """
    sent: list[GameOverEvent] = []
    if not arena.in_bounds(outcome.head_position):
        sent.append(GameOverEvent("wall"))
    if outcome.head_position in outcome.snapshot:
        sent.append(GameOverEvent("self"))
    for event in sent:
        game_over.send(event)
    return sent


def eat_food(store: EntityStore, growth: EventQueue[GrowthEvent]) -> int:
    """Despawn every food under a head and send one growth signal per food.

    Returns the number of food items eaten.
    """
    eaten: set[int] = set()
    for head in store.heads():
        for food in store.foods():
            if food.entity_id in eaten or food.position != head.position:
                continue
            store.despawn(food.entity_id)
            eaten.add(food.entity_id)
            growth.send(GrowthEvent(food.position))
    return len(eaten)


def grow_snake(store: EntityStore, growth: EventQueue[GrowthEvent]) -> int:
    """Append one segment at the last tail position per growth signal."""
    events = growth.drain()
    if not events:
        return 0
    if store.last_tail_position is None:
        raise RuntimeError("Growth requested before the snake has moved.")
    for _ in events:
        store.segments.append(store.spawn_segment(store.last_tail_position))
    logger.debug(
        "Snake grew by %d to length %d.", len(events), len(store.segments),
    )
    return len(events)
