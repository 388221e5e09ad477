"""
API Module - HTTP interface for a presentation client.

The client:
1. Creates a session
2. Taps cells and starts new games
3. Renders the state returned by every call

All state is session-scoped. No accounts, no persistence.
"""

from .schemas import (
    # Requests
    CreateSessionRequest,
    TapRequest,
    # Responses
    GameStateResponse,
    SessionResponse,
    SessionListResponse,
    EndSessionResponse,
    HealthResponse,
    ErrorResponse,
    # Enums
    ErrorCode,
    GameStatus,
    PlayerName,
    SessionStatus,
)
from .service import APIService, game_state_response
from .app import create_app

__all__ = [
    "CreateSessionRequest",
    "TapRequest",
    "GameStateResponse",
    "SessionResponse",
    "SessionListResponse",
    "EndSessionResponse",
    "HealthResponse",
    "ErrorResponse",
    "ErrorCode",
    "GameStatus",
    "PlayerName",
    "SessionStatus",
    "APIService",
    "game_state_response",
    "create_app",
]
