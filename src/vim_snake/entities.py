"""Entity table holding snake segments and food."""

from __future__ import annotations

import enum
import itertools
from dataclasses import dataclass

from vim_snake.grid import CellType, Position, Size
from vim_snake.snake import SnakeHead

HEAD_SIZE = Size.square(0.8)
SEGMENT_SIZE = Size.square(0.65)
FOOD_SIZE = Size.square(0.8)


class EntityKind(str, enum.Enum):
    """What an entity renders as."""

    HEAD = "head"
    SEGMENT = "segment"
    FOOD = "food"

    @property
    def cell_type(self) -> CellType:
        return CellType[self.name]


@dataclass
class Entity:
    """Component record for one entity.

    Every entity has a position and size; the remaining fields are optional
    components. The head carries both the segment marker and a
    :class:`SnakeHead`.
    """

    entity_id: int
    position: Position
    size: Size
    segment: bool = False
    head: SnakeHead | None = None
    food: bool = False

    @property
    def kind(self) -> EntityKind:
        if self.head is not None:
            return EntityKind.HEAD
        if self.food:
            return EntityKind.FOOD
        return EntityKind.SEGMENT


class EntityStore:
    """Mapping of entity id to components, plus the ordered body chain.

    ``segments`` lists segment ids head first; it defines follow-the-leader
    order. ``last_tail_position`` is the cell the tail vacated on the most
    recent move, or ``None`` before the first move.
    """

    def __init__(self) -> None:
        self._entities: dict[int, Entity] = {}
        self._ids = itertools.count()
        self.segments: list[int] = []
        self.last_tail_position: Position | None = None

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def spawn(
        self,
        position: Position,
        size: Size,
        *,
        segment: bool = False,
        head: SnakeHead | None = None,
        food: bool = False,
    ) -> int:
        """Insert a new entity and return its id."""
        entity_id = next(self._ids)
        self._entities[entity_id] = Entity(
            entity_id=entity_id,
            position=Position(*position),
            size=size,
            segment=segment,
            head=head,
            food=food,
        )
        return entity_id

    def spawn_segment(self, position: Position) -> int:
        return self.spawn(position, SEGMENT_SIZE, segment=True)

    def spawn_food(self, position: Position) -> int:
        return self.spawn(position, FOOD_SIZE, food=True)

    def despawn(self, entity_id: int) -> Entity:
        """Remove an entity, raising ``KeyError`` if it does not exist."""
        try:
            return self._entities.pop(entity_id)
        except KeyError:
            raise KeyError(f"Entity {entity_id} does not exist.") from None

    def get(self, entity_id: int) -> Entity:
        try:
            return self._entities[entity_id]
        except KeyError:
            raise KeyError(f"Entity {entity_id} does not exist.") from None

    def position_of(self, entity_id: int) -> Position:
        return self.get(entity_id).position

    def set_position(self, entity_id: int, position: Position) -> None:
        self.get(entity_id).position = position

    def head(self) -> Entity:
        """Return the head entity.

        Raises ``LookupError`` when no head exists, which means the round
        was never started.
        """
        for entity in self._entities.values():
            if entity.head is not None:
                return entity
        raise LookupError("No snake head in the entity table.")

    def heads(self) -> list[Entity]:
        return [e for e in self._entities.values() if e.head is not None]

    def foods(self) -> list[Entity]:
        return [e for e in self._entities.values() if e.food]

    def segment_ids(self) -> list[int]:
        """Ids of every entity with the segment marker, chained or not."""
        return [e.entity_id for e in self._entities.values() if e.segment]

    def segment_positions(self) -> list[Position]:
        """Positions of the body chain, head first."""
        return [self.position_of(sid) for sid in self.segments]

    def entities(self) -> list[Entity]:
        return list(self._entities.values())

    def to_dict(self) -> dict:
        """Serialize the snake and food state to a dictionary."""
        head = self.heads()
        return {
            "snake": {
                "body": [list(p) for p in self.segment_positions()],
                "length": len(self.segments),
                **(head[0].head.to_dict() if head else {}),
            },
            "food": [list(f.position) for f in self.foods()],
            "last_tail_position": (
                list(self.last_tail_position)
                if self.last_tail_position is not None else None
            ),
        }
