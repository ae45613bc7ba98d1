"""REST API route handlers for session lifecycle management."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from vim_snake.config import SimulationConfig
from vim_snake.server.models import CreateSessionRequest, SessionSummary

router = APIRouter(prefix="/sessions", tags=["sessions"])


def _get_manager(request: Request):
    return request.app.state.session_manager


@router.post("", status_code=201)
async def create_session(
    body: CreateSessionRequest, request: Request,
) -> SessionSummary:
    """Create and start a new simulation session."""
    manager = _get_manager(request)
    try:
        config = SimulationConfig(
            arena_width=body.arena_width,
            arena_height=body.arena_height,
            movement_interval_ms=body.movement_interval_ms,
            food_interval_ms=body.food_interval_ms,
            frame_interval_ms=body.frame_interval_ms,
            head_start=body.head_start,
            tail_start=body.tail_start,
            key_layout=body.key_layout,
            seed=body.seed,
        )
        session = manager.create_session(config)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return session.summary()


@router.get("")
async def list_sessions(request: Request) -> list[SessionSummary]:
    """List running sessions."""
    return _get_manager(request).list_sessions()


@router.get("/{session_id}")
async def get_session(session_id: str, request: Request) -> dict:
    """Get session metadata and the current simulation state."""
    session = _get_manager(request).get_session(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Session not found.")
    async with session.lock:
        result = session.summary().model_dump(mode="json")
        result["state"] = session.simulation.get_state()
    return result


@router.delete("/{session_id}", status_code=200)
async def stop_session(session_id: str, request: Request) -> dict:
    """Stop and remove a session."""
    try:
        await _get_manager(request).stop_session(session_id)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return {"status": "stopped", "session_id": session_id}
