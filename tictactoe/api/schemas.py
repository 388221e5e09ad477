"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between a presentation client
and the engine.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has ended
- INVALID_MOVE: Tap on an occupied cell or after the game finished
- VALIDATION_ERROR: Request body failed validation
- INTERNAL_ERROR: Unexpected engine failure
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class PlayerName(str, Enum):
    """Player identifiers as they appear on the wire."""
    ONE = "one"
    TWO = "two"


class GameStatus(str, Enum):
    """Game status values."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class SessionStatus(str, Enum):
    """Session status values."""
    ACTIVE = "active"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    INVALID_MOVE = "INVALID_MOVE"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to start a session."""
    seed: Optional[int] = Field(
        default=None,
        description="Seed for the starting-player random source (repeatable games)",
    )
    first_player: Optional[PlayerName] = Field(
        default=None,
        description="Who moves first in the first game; random if omitted",
    )


class TapRequest(BaseModel):
    """Request to tap a cell."""
    cell_index: int = Field(ge=0, le=8, description="Cell index, 0-8 row-major")


# =============================================================================
# Response Models
# =============================================================================

class GameStateResponse(BaseModel):
    """The application state as the client renders it."""
    session_id: str
    board: list[Optional[PlayerName]] = Field(description="9 cells, row-major; null is empty")
    turn: PlayerName
    status: GameStatus
    is_game_finished: bool
    winning_line: Optional[list[int]] = None
    winner: Optional[PlayerName] = None
    player1_score: int = 0
    player2_score: int = 0
    legal_cells: list[int] = Field(default_factory=list)
    changes: list[str] = Field(default_factory=list, description="What the last action did")

    model_config = {"from_attributes": True}


class SessionResponse(BaseModel):
    """Session information with the current game."""
    session_id: str
    status: SessionStatus
    created_at: float
    seed: Optional[int] = None
    game: GameStateResponse


class SessionListResponse(BaseModel):
    """List of active sessions."""
    sessions: list[str]
    count: int


class EndSessionResponse(BaseModel):
    """Response when a session is ended."""
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "healthy"
    version: str
    environment: str


class ErrorResponse(BaseModel):
    """Error response."""
    success: bool = False
    error: str
    error_code: ErrorCode
    details: Optional[dict] = None
