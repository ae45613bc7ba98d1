"""In-memory session registry and async frame loops."""

from __future__ import annotations

import asyncio
import json
import logging
import time
import uuid
from dataclasses import dataclass, field

from starlette.websockets import WebSocket, WebSocketState

from vim_snake.config import SimulationConfig
from vim_snake.server.models import SessionStatus, SessionSummary
from vim_snake.simulation import Simulation

logger = logging.getLogger(__name__)

_MAX_SESSIONS = 32


@dataclass
class Session:
    """A hosted simulation and its connected clients."""

    session_id: str
    simulation: Simulation
    status: SessionStatus = SessionStatus.RUNNING
    held_keys: frozenset[str] = frozenset()
    players: list[WebSocket] = field(default_factory=list)
    watchers: list[WebSocket] = field(default_factory=list)
    created_at: float = field(default_factory=time.monotonic)
    lock: asyncio.Lock = field(default_factory=asyncio.Lock)
    _task: asyncio.Task | None = field(default=None, repr=False)

    def summary(self) -> SessionSummary:
        sim = self.simulation
        return SessionSummary(
            session_id=self.session_id,
            status=self.status,
            key_layout=sim.config.key_layout,
            frame_interval_ms=sim.config.frame_interval_ms,
            tick=sim.tick,
            round=sim.round,
            length=len(sim.store.segments),
        )


class SessionManager:
    """Central registry running one frame loop per session."""

    def __init__(self, max_sessions: int = _MAX_SESSIONS) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1.")
        self._sessions: dict[str, Session] = {}
        self._max_sessions = max_sessions

    def create_session(self, config: SimulationConfig) -> Session:
        """Create a session and start its frame loop.

        Must be called from inside a running event loop.
        """
        if len(self._sessions) >= self._max_sessions:
            raise ValueError("Session limit reached. Try again later.")

        session_id = uuid.uuid4().hex[:12]
        session = Session(session_id=session_id, simulation=Simulation(config))
        self._sessions[session_id] = session
        session._task = asyncio.create_task(self._frame_loop(session))
        logger.info(
            "Session %s started (%dx%d, layout=%s).",
            session_id,
            config.arena_width,
            config.arena_height,
            config.key_layout,
        )
        return session

    def get_session(self, session_id: str) -> Session | None:
        return self._sessions.get(session_id)

    def list_sessions(self) -> list[SessionSummary]:
        return [s.summary() for s in self._sessions.values()]

    async def set_keys(self, session: Session, raw_keys: list[str]) -> None:
        """Replace the held-key set read by the next frame."""
        async with session.lock:
            session.held_keys = frozenset(raw_keys)

    async def stop_session(self, session_id: str) -> None:
        """Stop a session's frame loop, close its sockets, and forget it."""
        session = self._sessions.pop(session_id, None)
        if session is None:
            raise KeyError(f"Session {session_id} not found.")
        session.status = SessionStatus.STOPPED
        if session._task and not session._task.done():
            session._task.cancel()
            await asyncio.gather(session._task, return_exceptions=True)
        await self._close_connections(session)
        logger.info("Session %s stopped.", session_id)

    async def _frame_loop(self, session: Session) -> None:
        """Advance the simulation each frame, broadcasting changed state."""
        interval = session.simulation.config.frame_interval_ms / 1000.0
        last = time.monotonic()
        try:
            while session.status == SessionStatus.RUNNING:
                await asyncio.sleep(interval)
                now = time.monotonic()
                delta_ms = (now - last) * 1000.0
                last = now
                async with session.lock:
                    sim = session.simulation
                    report = sim.update(delta_ms, sim.decode(session.held_keys))
                    state = sim.get_state() if report.changed else None
                if state is not None:
                    await self._broadcast(session, state)
        except asyncio.CancelledError:
            logger.info("Frame loop cancelled for session %s.", session.session_id)
        except Exception:
            logger.exception("Frame loop error in session %s.", session.session_id)
            session.status = SessionStatus.STOPPED
            # A crashed session no longer counts against the limit.
            self._sessions.pop(session.session_id, None)
            await self._close_connections(session)

    async def _close_connections(self, session: Session) -> None:
        """Close every live player and watcher socket of a session."""
        for ws in [*session.players, *session.watchers]:
            try:
                if ws.client_state == WebSocketState.CONNECTED:
                    await ws.close(code=1000, reason="Session stopped.")
            except Exception:
                logger.warning(
                    "Failed closing socket in session %s.", session.session_id,
                )
        session.players.clear()
        session.watchers.clear()

    async def _broadcast(self, session: Session, state: dict) -> None:
        """Send state to all connected players and watchers."""
        payload = json.dumps(state, separators=(",", ":"))
        # Iterate over snapshots so disconnect handlers can mutate the live
        # lists without affecting this send loop.
        for sockets in (session.players, session.watchers):
            dead: list[WebSocket] = []
            for ws in list(sockets):
                try:
                    if ws.client_state == WebSocketState.CONNECTED:
                        await ws.send_text(payload)
                except Exception:
                    dead.append(ws)
            for ws in dead:
                if ws in sockets:
                    sockets.remove(ws)

    async def cleanup(self) -> None:
        """Stop every session."""
        for session_id in list(self._sessions):
            await self.stop_session(session_id)
        logger.info("SessionManager cleanup complete.")
