"""Food spawning logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from vim_snake.grid import Position

if TYPE_CHECKING:
    from vim_snake.entities import EntityStore
    from vim_snake.grid import Arena

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places food at uniformly random cells.

    There is no occupancy check: food can land on the snake or on other
    food, and nothing caps how many instances are live. Uses a seeded NumPy
    RNG for reproducible placement.
    """

    def __init__(
        self,
        arena: Arena,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.arena = arena
        self.rng = rng if rng is not None else np.random.default_rng()

    def next_position(self) -> Position:
        """Draw a cell by scaling two ``[0, 1)`` draws to the arena."""
        x = int(self.rng.random() * self.arena.width)
        y = int(self.rng.random() * self.arena.height)
        return Position(x, y)

    def spawn(self, store: EntityStore) -> int:
        """Add one food entity to *store* and return its id."""
        position = self.next_position()
        food_id = store.spawn_food(position)
        logger.debug("Food %d spawned at %s.", food_id, tuple(position))
        return food_id
