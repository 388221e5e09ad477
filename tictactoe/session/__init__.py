"""
Session Module - Owns game state on behalf of a presentation client.

A session represents one sitting at the board:
- Created when a client starts playing
- Holds a Store with the current application state
- Keeps scores across any number of new games
- Destroyed when the client leaves

Sessions are EPHEMERAL: nothing is written to disk.
"""

from .store import Store
from .manager import SessionManager, Session, SessionState

__all__ = [
    "Store",
    "SessionManager",
    "Session",
    "SessionState",
]
