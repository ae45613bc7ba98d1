"""Simulation configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from vim_snake.controls import KEY_LAYOUTS
from vim_snake.grid import ARENA_HEIGHT, ARENA_WIDTH, Position
from vim_snake.rounds import HEAD_START, TAIL_START

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationConfig:
    """Arena, timing, and input settings for one simulation.

    Supports JSON serialization for reproducibility.
    """

    # Arena
    arena_width: int = ARENA_WIDTH
    arena_height: int = ARENA_HEIGHT

    # Timing
    movement_interval_ms: float = 150.0
    food_interval_ms: float = 1000.0
    frame_interval_ms: float = 1000.0 / 60.0

    # Starting snake
    head_start: tuple[int, int] = tuple(HEAD_START)
    tail_start: tuple[int, int] = tuple(TAIL_START)

    # Input
    key_layout: str = "vim"

    seed: int | None = None

    def __post_init__(self) -> None:
        if self.arena_width < 4 or self.arena_height < 4:
            raise ValueError("arena_width and arena_height must each be at least 4.")
        for name in ("movement_interval_ms", "food_interval_ms", "frame_interval_ms"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive.")
        if self.key_layout not in KEY_LAYOUTS:
            raise ValueError(
                f"key_layout must be one of {sorted(KEY_LAYOUTS)}."
            )

        # Normalise JSON lists back to tuples.
        object.__setattr__(self, "head_start", tuple(self.head_start))
        object.__setattr__(self, "tail_start", tuple(self.tail_start))
        for name in ("head_start", "tail_start"):
            x, y = getattr(self, name)
            if not (0 <= x < self.arena_width and 0 <= y < self.arena_height):
                raise ValueError(f"{name} {(x, y)} lies outside the arena.")
        if self.head_start == self.tail_start:
            raise ValueError("head_start and tail_start must differ.")

    @property
    def head_position(self) -> Position:
        return Position(*self.head_start)

    @property
    def tail_position(self) -> Position:
        return Position(*self.tail_start)

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> SimulationConfig:
        """Load config from a JSON file."""
        return cls(**json.loads(Path(path).read_text()))
