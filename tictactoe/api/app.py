"""
FastAPI Application - REST API for a presentation client.

Endpoints:
    GET    /api/v1/health                    Liveness and version
    POST   /api/v1/sessions                  Create game session
    GET    /api/v1/sessions                  List active sessions
    GET    /api/v1/sessions/{id}             Get session and current game
    DELETE /api/v1/sessions/{id}             End session
    GET    /api/v1/sessions/{id}/state       Get game state
    POST   /api/v1/sessions/{id}/tap         Tap a cell
    POST   /api/v1/sessions/{id}/new-game    Start the next game (scores kept)

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Optional, Union

from .. import __version__
from ..config import TICTACTOE_ENV, ALLOWED_ORIGINS


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    from fastapi import FastAPI, Query, Request
    from fastapi.exceptions import RequestValidationError
    from fastapi.middleware.cors import CORSMiddleware
    from fastapi.responses import JSONResponse

    from .service import APIService
    from .schemas import (
        CreateSessionRequest,
        TapRequest,
        GameStateResponse,
        SessionResponse,
        SessionListResponse,
        EndSessionResponse,
        HealthResponse,
        ErrorResponse,
        ErrorCode,
    )

    app = FastAPI(
        title="Tic-Tac-Toe Engine API",
        description="""
Dispatch surface for a tic-tac-toe presentation client.

Each session owns one application state. Tapping a cell or starting a
new game returns the whole successor state for the client to render.

## Error Codes

| Code | Description |
|------|-------------|
| `SESSION_NOT_FOUND` | Session does not exist |
| `INVALID_MOVE` | Cell occupied or game already finished |
| `VALIDATION_ERROR` | Request body is invalid |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService()

    # =========================================================================
    # Error helpers
    # =========================================================================

    status_for_code = {
        ErrorCode.SESSION_NOT_FOUND: 404,
        ErrorCode.INVALID_MOVE: 409,
        ErrorCode.VALIDATION_ERROR: 422,
        ErrorCode.INTERNAL_ERROR: 500,
    }

    def make_error_response(error: ErrorResponse) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_for_code[error.error_code],
            content=error.model_dump(mode="json"),
        )

    def respond(result):
        if isinstance(result, ErrorResponse):
            return make_error_response(result)
        return result

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return make_error_response(ErrorResponse(
            error="Request validation failed",
            error_code=ErrorCode.VALIDATION_ERROR,
            details={"errors": [
                {"loc": list(err.get("loc", [])), "msg": err.get("msg", "")}
                for err in exc.errors()
            ]},
        ))

    # =========================================================================
    # Health
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
    )
    async def health() -> HealthResponse:
        return HealthResponse(version=__version__, environment=TICTACTOE_ENV)

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        status_code=201,
        tags=["Sessions"],
        summary="Create a new game session",
    )
    async def create_session(body: Optional[CreateSessionRequest] = None) -> SessionResponse:
        """
        Create a new game session.

        The first game starts immediately with a randomly chosen player.
        Pass `seed` to make that choice repeatable.
        """
        return api_service.create_session(body or CreateSessionRequest())

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List active sessions",
    )
    async def list_sessions() -> SessionListResponse:
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session status",
    )
    async def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        return respond(api_service.get_session(session_id))

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    async def end_session(
        session_id: str,
        reason: str = Query(default="user_ended", description="Reason for ending"),
    ) -> EndSessionResponse:
        success = api_service.end_session(session_id, reason)
        return EndSessionResponse(success=success, session_id=session_id)

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/sessions/{session_id}/state",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Get the current game state",
    )
    async def get_state(session_id: str) -> Union[GameStateResponse, JSONResponse]:
        return respond(api_service.get_state(session_id))

    @app.post(
        "/api/v1/sessions/{session_id}/tap",
        response_model=GameStateResponse,
        responses={
            404: {"model": ErrorResponse, "description": "Session not found"},
            409: {"model": ErrorResponse, "description": "Cell occupied or game finished"},
        },
        tags=["Game"],
        summary="Tap a cell for the player whose turn it is",
    )
    async def tap(session_id: str, body: TapRequest) -> Union[GameStateResponse, JSONResponse]:
        return respond(api_service.tap(session_id, body))

    @app.post(
        "/api/v1/sessions/{session_id}/new-game",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Start the next game, keeping scores",
    )
    async def new_game(session_id: str) -> Union[GameStateResponse, JSONResponse]:
        return respond(api_service.new_game(session_id))

    return app
