"""Arena geometry for the snake simulation."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import NamedTuple

import numpy as np

ARENA_WIDTH = 50
ARENA_HEIGHT = 50


class Position(NamedTuple):
    """A grid cell. ``y`` grows upwards."""

    x: int
    y: int


class Size(NamedTuple):
    """Logical extent of a rendered entity, in cells."""

    width: float
    height: float

    @classmethod
    def square(cls, side: float) -> Size:
        return cls(side, side)


class CellType(enum.IntEnum):
    """Integer codes stored in the occupancy array."""

    EMPTY = 0
    SEGMENT = 1
    HEAD = 2
    FOOD = 3


class Arena:
    """Bounded, non-wrapping play field.

    Cells outside ``[0, width) x [0, height)`` are fatal for the head.
    """

    def __init__(
        self, width: int = ARENA_WIDTH, height: int = ARENA_HEIGHT,
    ) -> None:
        if width < 4 or height < 4:
            raise ValueError("Arena dimensions must be at least 4×4.")
        self.width = width
        self.height = height

    def in_bounds(self, position: Position) -> bool:
        """Check whether a position lies within the arena."""
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def occupancy(
        self, cells: Iterable[tuple[Position, CellType]],
    ) -> np.ndarray:
        """Paint *cells* into an ``(height, width)`` array indexed ``[y, x]``.

        Later entries overwrite earlier ones; out-of-bounds cells are skipped.
        """
        grid = np.zeros((self.height, self.width), dtype=np.int8)
        for position, cell_type in cells:
            if self.in_bounds(position):
                grid[position.y, position.x] = cell_type
        return grid

    def to_dict(self, cells: Iterable[tuple[Position, CellType]] = ()) -> dict:
        """Serialize arena dimensions and occupancy to a dictionary."""
        return {
            "width": self.width,
            "height": self.height,
            "cells": self.occupancy(cells).tolist(),
        }
