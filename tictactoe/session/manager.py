"""
Session Manager - Creates and manages game sessions.

LIFECYCLE:
1. Client starts a session -> ephemeral session (in-memory only)
2. During play:
   - Client taps cells / asks for a new game
   - Store validates and replaces the canonical state
   - Client re-renders the returned state
3. Client ends the session -> session destroyed, ALL state deleted

PERSISTENCE RULES:
- NO database
- Scores live only as long as the session
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
import uuid
import time

from ..engine_core.state import ApplicationState, Player
from .store import Store

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"  # Accepting actions
    ENDED = "ended"  # Client closed it
    ABANDONED = "abandoned"  # Cleaned up as stale


@dataclass
class Session:
    """
    An ephemeral game session.

    Contains:
    - The store holding the current application state
    - Seed and activity timestamps

    The session is destroyed when the client ends it.
    State is NOT persisted.
    """
    session_id: str
    store: Store
    created_at: float
    seed: int | None = None

    state: SessionState = SessionState.ACTIVE
    last_activity: float = field(default_factory=time.time)

    def is_active(self) -> bool:
        return self.state == SessionState.ACTIVE

    def touch(self):
        self.last_activity = time.time()


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions, each with its own store
    - Track active sessions
    - Clean up ended or idle sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def create_session(
        self,
        seed: int | None = None,
        first_player: Player | None = None,
    ) -> Session:
        """
        Create a new game session.

        Args:
            seed: Optional seed for the starting-player random source
            first_player: Who moves first in the first game (random if None)

        Returns:
            New Session with a fresh game in progress
        """
        session_id = str(uuid.uuid4())
        initial = ApplicationState(turn=first_player) if first_player else None
        session = Session(
            session_id=session_id,
            store=Store(state=initial, seed=seed),
            created_at=time.time(),
            seed=seed,
        )
        self._sessions[session_id] = session
        logger.info("Session %s created, player %s starts",
                    session_id, session.store.state.turn.value)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session and remove it from memory.

        Returns False if the session did not exist.
        """
        session = self._sessions.pop(session_id, None)
        if not session:
            return False

        if reason == "stale":
            session.state = SessionState.ABANDONED
        else:
            session.state = SessionState.ENDED
        logger.info("Session %s ended (%s)", session_id, reason)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_idle_seconds: int = 3600) -> int:
        """
        End sessions with no activity for max_idle_seconds.

        Returns the number of sessions removed.
        """
        current_time = time.time()
        stale = [
            sid for sid, session in self._sessions.items()
            if current_time - session.last_activity > max_idle_seconds
        ]
        for session_id in stale:
            self.end_session(session_id, reason="stale")
        return len(stale)
