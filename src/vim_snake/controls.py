"""Key decoding and heading resolution."""

from __future__ import annotations

import enum
import logging
from collections.abc import Collection, Iterable

from vim_snake.snake import Direction, SnakeHead

logger = logging.getLogger(__name__)


class LogicalKey(enum.Enum):
    """Keys the simulation understands, independent of the physical layout."""

    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RESTART = "restart"


# Checked in this order; the first held key that is not a reversal wins.
_PRIORITY: tuple[tuple[LogicalKey, Direction], ...] = (
    (LogicalKey.RIGHT, Direction.RIGHT),
    (LogicalKey.UP, Direction.UP),
    (LogicalKey.DOWN, Direction.DOWN),
    (LogicalKey.LEFT, Direction.LEFT),
)

KEY_LAYOUTS: dict[str, dict[str, LogicalKey]] = {
    "vim": {
        "l": LogicalKey.RIGHT,
        "k": LogicalKey.UP,
        "j": LogicalKey.DOWN,
        "h": LogicalKey.LEFT,
        "r": LogicalKey.RESTART,
    },
    "arrows": {
        "right": LogicalKey.RIGHT,
        "up": LogicalKey.UP,
        "down": LogicalKey.DOWN,
        "left": LogicalKey.LEFT,
        "r": LogicalKey.RESTART,
    },
}


def get_layout(name: str) -> dict[str, LogicalKey]:
    """Return the raw-key mapping for a layout name."""
    try:
        return KEY_LAYOUTS[name]
    except KeyError:
        raise ValueError(
            f"Unknown key layout {name!r}; expected one of "
            f"{sorted(KEY_LAYOUTS)}."
        ) from None


def decode_keys(raw_keys: Iterable[str], layout: str = "vim") -> frozenset[LogicalKey]:
    """Map raw key names to logical keys, dropping unbound names."""
    mapping = get_layout(layout)
    held: set[LogicalKey] = set()
    for raw in raw_keys:
        key = mapping.get(raw.lower())
        if key is not None:
            held.add(key)
    return frozenset(held)


def candidate_direction(
    pressed: Collection[LogicalKey], last_direction: Direction | None = None,
) -> Direction | None:
    """Pick the highest-priority held movement key, if any.

    Keys that would reverse *last_direction* are skipped and the scan
    continues with the next key in priority order.
    """
    forbidden = last_direction.opposite() if last_direction is not None else None
    for key, direction in _PRIORITY:
        if key in pressed and direction != forbidden:
            return direction
    return None


def resolve_direction(
    head: SnakeHead, pressed: Collection[LogicalKey],
) -> Direction | None:
    """Update ``head.direction`` from the held keys.

    Returns the accepted heading, or ``None`` when nothing changed because
    no held movement key turns the snake without reversing the heading it
    last moved in.
    """
    if LogicalKey.RESTART in pressed:
        handle_restart()

    candidate = candidate_direction(pressed, head.last_direction)
    if candidate is None or not head.steer(candidate):
        return None
    return candidate


def handle_restart() -> None:
    """Restart key handler; rounds only restart on game over."""
    logger.debug("Restart key pressed; ignored.")
