"""WebSocket handlers for live play and watching."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from vim_snake.server.session_manager import SessionManager

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_manager(ws: WebSocket) -> SessionManager:
    return ws.app.state.session_manager


@ws_router.websocket("/sessions/{session_id}/play")
async def play(websocket: WebSocket, session_id: str) -> None:
    """Player WebSocket: send held keys, receive state on every change."""
    manager = _get_manager(websocket)
    session = manager.get_session(session_id)
    if session is None:
        await websocket.close(code=4004, reason="Session not found.")
        return

    await websocket.accept()
    session.players.append(websocket)
    logger.info("Player connected to session %s.", session_id)

    # Send an initial snapshot so the client can draw immediately.
    async with session.lock:
        state = session.simulation.get_state()
    await websocket.send_text(json.dumps(state, separators=(",", ":")))

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue

            keys = msg.get("keys")
            if not isinstance(keys, list):
                continue
            await manager.set_keys(
                session, [k for k in keys if isinstance(k, str)],
            )
    except WebSocketDisconnect:
        logger.info("Player disconnected from session %s.", session_id)
    finally:
        if websocket in session.players:
            session.players.remove(websocket)
        # Held keys are shared; release them once the last player leaves.
        if not session.players:
            await manager.set_keys(session, [])


@ws_router.websocket("/sessions/{session_id}/watch")
async def watch(websocket: WebSocket, session_id: str) -> None:
    """Watcher WebSocket: receive-only state stream."""
    manager = _get_manager(websocket)
    session = manager.get_session(session_id)
    if session is None:
        await websocket.close(code=4004, reason="Session not found.")
        return

    await websocket.accept()
    session.watchers.append(websocket)
    logger.info("Watcher connected to session %s.", session_id)

    async with session.lock:
        state = session.simulation.get_state()
    await websocket.send_text(json.dumps(state, separators=(",", ":")))

    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.info("Watcher disconnected from session %s.", session_id)
    finally:
        if websocket in session.watchers:
            session.watchers.remove(websocket)
