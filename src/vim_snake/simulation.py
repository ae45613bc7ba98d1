"""Frame-driven simulation composing movement, collisions, food, and rounds."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from dataclasses import dataclass

import numpy as np

from vim_snake.collision import check_collisions, eat_food, grow_snake
from vim_snake.config import SimulationConfig
from vim_snake.controls import LogicalKey, decode_keys, resolve_direction
from vim_snake.entities import EntityKind, EntityStore
from vim_snake.events import EventQueue, GameOverEvent, GrowthEvent
from vim_snake.food import FoodSpawner
from vim_snake.grid import Arena, CellType, Position, Size
from vim_snake.movement import move_snake
from vim_snake.rounds import handle_game_over, spawn_snake
from vim_snake.snake import Direction
from vim_snake.timers import IntervalTimer

# Paint order for the occupancy array: the head is drawn over everything.
_PAINT_ORDER = (EntityKind.FOOD, EntityKind.SEGMENT, EntityKind.HEAD)


@dataclass(frozen=True)
class TickReport:
    """What one movement tick did."""

    tick: int
    head_position: Position
    eaten: int
    grown: int
    game_over: tuple[str, ...]


@dataclass(frozen=True)
class FrameReport:
    """What one frame did; ``tick`` is ``None`` if the snake did not move."""

    frame: int
    steered: Direction | None
    tick: TickReport | None
    food_spawned: int | None

    @property
    def changed(self) -> bool:
        return self.tick is not None or self.food_spawned is not None


@dataclass(frozen=True)
class Renderable:
    """Everything a renderer needs to draw one entity."""

    entity_id: int
    kind: EntityKind
    position: Position
    size: Size


class Simulation:
    """Single-snake simulation advanced by frame deltas.

    Each call to :meth:`update` runs one frame: input resolution, then the
    movement pipeline if the movement timer fired, then food spawning if
    the food timer fired. The two timers are independent and neither is
    reset when a round ends.
    """

    def __init__(self, config: SimulationConfig | None = None) -> None:
        cfg = config or SimulationConfig()
        self.config = cfg
        self.arena = Arena(width=cfg.arena_width, height=cfg.arena_height)
        self.rng = np.random.default_rng(cfg.seed)
        self.store = EntityStore()

        self.growth_events: EventQueue[GrowthEvent] = EventQueue()
        self.game_over_events: EventQueue[GameOverEvent] = EventQueue()
        self.movement_timer = IntervalTimer(cfg.movement_interval_ms)
        self.food_timer = IntervalTimer(cfg.food_interval_ms)
        self.food_spawner = FoodSpawner(self.arena, rng=self.rng)

        self.frame = 0
        self.tick = 0
        self.round = 1

        spawn_snake(self.store, cfg.head_position, cfg.tail_position)

    def decode(self, raw_keys: Iterable[str]) -> frozenset[LogicalKey]:
        """Decode raw key names with the configured layout."""
        return decode_keys(raw_keys, self.config.key_layout)

    def process_input(self, pressed: Collection[LogicalKey]) -> Direction | None:
        """Run one direction-resolution pass against the head."""
        return resolve_direction(self.store.head().head, pressed)

    def update(
        self,
        delta_ms: float,
        pressed: Collection[LogicalKey] = frozenset(),
    ) -> FrameReport:
        """Advance the simulation by one frame of *delta_ms* milliseconds."""
        self.frame += 1
        steered = self.process_input(pressed)
        tick = self.step() if self.movement_timer.tick(delta_ms) else None
        food_id = self.spawn_food() if self.food_timer.tick(delta_ms) else None
        return FrameReport(
            frame=self.frame, steered=steered, tick=tick, food_spawned=food_id,
        )

    def step(self) -> TickReport:
        """Run the movement pipeline once, regardless of the timer.

        Order: move, fatal checks, eating, growth, game over.
        """
        outcome = move_snake(self.store)
        self.tick += 1
        check_collisions(outcome, self.arena, self.game_over_events)
        eaten = eat_food(self.store, self.growth_events)
        grown = grow_snake(self.store, self.growth_events)
        ended = handle_game_over(
            self.store,
            self.game_over_events,
            self.config.head_position,
            self.config.tail_position,
        )
        if ended:
            self.round += 1
        return TickReport(
            tick=self.tick,
            head_position=outcome.head_position,
            eaten=eaten,
            grown=grown,
            game_over=tuple(e.reason for e in ended),
        )

    def spawn_food(self) -> int:
        return self.food_spawner.spawn(self.store)

    def renderables(self) -> list[Renderable]:
        """List every entity with its kind, cell, and logical size."""
        return [
            Renderable(
                entity_id=e.entity_id,
                kind=e.kind,
                position=e.position,
                size=e.size,
            )
            for e in self.store.entities()
        ]

    def occupancy(self) -> np.ndarray:
        """Return the arena as an ``int8`` array indexed ``[y, x]``."""
        return self.arena.occupancy(self._painted_cells())

    def get_state(self) -> dict:
        """Return the full, serializable simulation state."""
        return {
            "frame": self.frame,
            "tick": self.tick,
            "round": self.round,
            **self.store.to_dict(),
            "arena": self.arena.to_dict(self._painted_cells()),
        }

    def _painted_cells(self) -> list[tuple[Position, CellType]]:
        items = self.renderables()
        return [
            (r.position, kind.cell_type)
            for kind in _PAINT_ORDER
            for r in items
            if r.kind == kind
        ]
