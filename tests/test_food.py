"""Tests for the food spawner."""

import numpy as np

from vim_snake.entities import EntityStore
from vim_snake.food import FoodSpawner
from vim_snake.grid import Arena, Position
from vim_snake.rounds import spawn_snake


class _FixedRng:
    """Stand-in generator returning scripted ``random()`` draws."""

    def __init__(self, draws):
        self._draws = iter(draws)

    def random(self):
        return next(self._draws)


class TestFoodSpawner:
    def test_spawn_in_bounds(self):
        arena = Arena()
        spawner = FoodSpawner(arena, rng=np.random.default_rng(0))
        store = EntityStore()
        for _ in range(200):
            spawner.spawn(store)
        assert all(arena.in_bounds(f.position) for f in store.foods())

    def test_draws_are_scaled_and_truncated(self):
        spawner = FoodSpawner(Arena(), rng=_FixedRng([0.0, 0.999999]))
        assert spawner.next_position() == Position(0, 49)

    def test_scaling_uses_arena_dimensions(self):
        spawner = FoodSpawner(Arena(width=10, height=20), rng=_FixedRng([0.55, 0.55]))
        assert spawner.next_position() == Position(5, 11)

    def test_no_occupancy_check(self):
        store = EntityStore()
        spawn_snake(store)
        # 0.2 * 50 = 10, 0.4 * 50 = 20: directly on the head.
        spawner = FoodSpawner(Arena(), rng=_FixedRng([0.2, 0.4, 0.2, 0.4]))
        spawner.spawn(store)
        spawner.spawn(store)
        assert [f.position for f in store.foods()] == [Position(10, 20)] * 2

    def test_deterministic(self):
        """Same seed produces same food positions."""
        assert self._positions(42) == self._positions(42)

    def test_different_seeds(self):
        assert self._positions(1) != self._positions(2)

    @staticmethod
    def _positions(seed: int) -> list[Position]:
        spawner = FoodSpawner(Arena(), rng=np.random.default_rng(seed))
        return [spawner.next_position() for _ in range(5)]
