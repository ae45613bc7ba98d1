"""Tests for fatal collisions, eating, and growth."""

import pytest

from vim_snake.collision import check_collisions, eat_food, grow_snake
from vim_snake.entities import EntityStore
from vim_snake.events import EventQueue, GameOverEvent, GrowthEvent
from vim_snake.grid import ARENA_HEIGHT, ARENA_WIDTH, Arena, Position
from vim_snake.movement import MoveOutcome, move_snake
from vim_snake.rounds import spawn_snake
from vim_snake.snake import Direction


def _outcome(head: Position, snapshot=()) -> MoveOutcome:
    return MoveOutcome(
        head_position=head, direction=Direction.UP, snapshot=tuple(snapshot),
    )


class TestCheckCollisions:
    @pytest.mark.parametrize(
        "head",
        [
            Position(-1, 10),
            Position(ARENA_WIDTH, 10),
            Position(10, -1),
            Position(10, ARENA_HEIGHT),
        ],
    )
    def test_each_wall_is_fatal(self, head):
        queue: EventQueue[GameOverEvent] = EventQueue()
        sent = check_collisions(_outcome(head), Arena(), queue)
        assert [e.reason for e in sent] == ["wall"]
        assert len(queue) == 1

    @pytest.mark.parametrize("y", [0, 17, ARENA_HEIGHT - 1])
    def test_last_column_is_safe(self, y):
        queue: EventQueue[GameOverEvent] = EventQueue()
        check_collisions(_outcome(Position(ARENA_WIDTH - 1, y)), Arena(), queue)
        assert not queue

    def test_self_collision_uses_pre_move_snapshot(self):
        queue: EventQueue[GameOverEvent] = EventQueue()
        snapshot = [Position(5, 5), Position(5, 4), Position(6, 4)]
        # (6, 4) was the tail before the move; it is vacated now but still fatal.
        check_collisions(_outcome(Position(6, 4), snapshot), Arena(), queue)
        assert [e.reason for e in queue.drain()] == ["self"]

    def test_both_conditions_send_two_signals(self):
        queue: EventQueue[GameOverEvent] = EventQueue()
        check_collisions(
            _outcome(Position(-1, 0), [Position(-1, 0)]), Arena(), queue,
        )
        assert len(queue) == 2


class TestEatFood:
    def _store(self) -> EntityStore:
        store = EntityStore()
        spawn_snake(store)
        return store

    def test_food_under_head_is_eaten(self):
        store = self._store()
        store.spawn_food(Position(10, 20))
        growth: EventQueue[GrowthEvent] = EventQueue()
        assert eat_food(store, growth) == 1
        assert store.foods() == []
        assert growth.drain() == [GrowthEvent(Position(10, 20))]

    def test_food_elsewhere_untouched(self):
        store = self._store()
        store.spawn_food(Position(10, 19))
        growth: EventQueue[GrowthEvent] = EventQueue()
        assert eat_food(store, growth) == 0
        assert len(store.foods()) == 1
        assert not growth

    def test_stacked_food_each_eaten(self):
        store = self._store()
        store.spawn_food(Position(10, 20))
        store.spawn_food(Position(10, 20))
        growth: EventQueue[GrowthEvent] = EventQueue()
        assert eat_food(store, growth) == 2
        assert len(growth) == 2


class TestGrowSnake:
    def test_appends_at_last_tail_position(self):
        store = EntityStore()
        spawn_snake(store)
        move_snake(store)
        growth: EventQueue[GrowthEvent] = EventQueue()
        growth.send(GrowthEvent(Position(10, 21)))
        assert grow_snake(store, growth) == 1
        assert store.segment_positions()[-1] == Position(10, 19)
        assert len(store.segments) == 3

    def test_each_signal_appends_one_segment(self):
        store = EntityStore()
        spawn_snake(store)
        move_snake(store)
        growth: EventQueue[GrowthEvent] = EventQueue()
        growth.send(GrowthEvent(Position(0, 0)))
        growth.send(GrowthEvent(Position(0, 0)))
        assert grow_snake(store, growth) == 2
        assert len(store.segments) == 4
        assert not growth

    def test_no_signal_no_growth(self):
        store = EntityStore()
        spawn_snake(store)
        assert grow_snake(store, EventQueue()) == 0
        assert len(store.segments) == 2

    def test_growth_before_first_move_fails(self):
        store = EntityStore()
        spawn_snake(store)
        growth: EventQueue[GrowthEvent] = EventQueue()
        growth.send(GrowthEvent(Position(0, 0)))
        with pytest.raises(RuntimeError, match="before the snake has moved"):
            grow_snake(store, growth)
