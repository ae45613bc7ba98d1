"""Pydantic models for API request/response schemas."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field

from vim_snake.grid import ARENA_HEIGHT, ARENA_WIDTH
from vim_snake.rounds import HEAD_START, TAIL_START


class SessionStatus(str, enum.Enum):
    """Lifecycle states for a hosted simulation."""

    RUNNING = "running"
    STOPPED = "stopped"


class CreateSessionRequest(BaseModel):
    """Request body for POST /sessions."""

    arena_width: int = Field(default=ARENA_WIDTH, ge=4, le=200)
    arena_height: int = Field(default=ARENA_HEIGHT, ge=4, le=200)
    movement_interval_ms: float = Field(default=150.0, ge=10, le=5000)
    food_interval_ms: float = Field(default=1000.0, ge=10, le=60000)
    frame_interval_ms: float = Field(default=1000.0 / 60.0, ge=5, le=1000)
    head_start: tuple[int, int] = tuple(HEAD_START)
    tail_start: tuple[int, int] = tuple(TAIL_START)
    key_layout: str = "vim"
    seed: int | None = None


class SessionSummary(BaseModel):
    """Compact session info for list endpoints."""

    session_id: str
    status: SessionStatus
    key_layout: str
    frame_interval_ms: float
    tick: int
    round: int
    length: int
