"""
API Service - Business logic layer between the HTTP app and the engine.

The service:
1. Translates requests into store dispatches
2. Manages sessions
3. Formats engine state for the client

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Union
import logging

from ..engine_core.state import ApplicationState, Player
from ..engine_core.action import ActionResult
from ..engine_core.action_generator import legal_cells
from ..engine_core.reducer import INVALID_MOVE
from ..config import TICTACTOE_SESSION_IDLE_SECONDS
from ..session import SessionManager, Session
from .schemas import (
    CreateSessionRequest,
    TapRequest,
    GameStateResponse,
    SessionResponse,
    ErrorResponse,
    ErrorCode,
    GameStatus,
    PlayerName,
    SessionStatus,
)

logger = logging.getLogger(__name__)


@dataclass
class APIService:
    """
    Main API service for presentation clients.

    Usage:
        service = APIService()

        session = service.create_session(CreateSessionRequest(seed=7))
        state = service.tap(session.session_id, TapRequest(cell_index=4))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    # Sessions idle longer than this are dropped when a new one is created
    max_idle_seconds: int = TICTACTOE_SESSION_IDLE_SECONDS

    def create_session(self, request: CreateSessionRequest) -> SessionResponse:
        removed = self.session_manager.cleanup_stale_sessions(self.max_idle_seconds)
        if removed:
            logger.info("Dropped %d idle session(s)", removed)
        first_player = Player(request.first_player.value) if request.first_player else None
        session = self.session_manager.create_session(seed=request.seed, first_player=first_player)
        return self._session_response(session)

    def get_session(self, session_id: str) -> Union[SessionResponse, ErrorResponse]:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        return self._session_response(session)

    def get_state(self, session_id: str) -> Union[GameStateResponse, ErrorResponse]:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        return game_state_response(session_id, session.store.state)

    def tap(self, session_id: str, request: TapRequest) -> Union[GameStateResponse, ErrorResponse]:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        session.touch()
        return self._dispatch_result(session, session.store.tap(request.cell_index))

    def new_game(self, session_id: str) -> Union[GameStateResponse, ErrorResponse]:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._not_found(session_id)
        session.touch()
        return self._dispatch_result(session, session.store.new_game())

    def end_session(self, session_id: str, reason: str = "user_ended") -> bool:
        return self.session_manager.end_session(session_id, reason)

    def list_sessions(self) -> list[str]:
        return self.session_manager.list_active_sessions()

    # =========================================================================
    # Helpers
    # =========================================================================

    def _dispatch_result(
        self, session: Session, result: ActionResult
    ) -> Union[GameStateResponse, ErrorResponse]:
        if not result.success:
            code = ErrorCode.INVALID_MOVE if result.error_code == INVALID_MOVE else ErrorCode.INTERNAL_ERROR
            return ErrorResponse(
                error=result.error or "Action rejected",
                error_code=code,
                details={"session_id": session.session_id},
            )
        return game_state_response(session.session_id, result.new_state, result.state_changes)

    def _session_response(self, session: Session) -> SessionResponse:
        return SessionResponse(
            session_id=session.session_id,
            status=SessionStatus(session.state.value),
            created_at=session.created_at,
            seed=session.seed,
            game=game_state_response(session.session_id, session.store.state),
        )

    def _not_found(self, session_id: str) -> ErrorResponse:
        logger.warning("Session %s not found", session_id)
        return ErrorResponse(
            error=f"Session {session_id} not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
        )


def game_state_response(
    session_id: str,
    state: ApplicationState,
    changes: list[str] | None = None,
) -> GameStateResponse:
    """Convert an ApplicationState into its wire form."""
    return GameStateResponse(
        session_id=session_id,
        board=[PlayerName(cell.value) if cell else None for cell in state.board],
        turn=PlayerName(state.turn.value),
        status=GameStatus(state.status.value),
        is_game_finished=state.is_game_finished,
        winning_line=list(state.winning_line) if state.winning_line else None,
        winner=PlayerName(state.winner.value) if state.winner else None,
        player1_score=state.player1_score,
        player2_score=state.player2_score,
        legal_cells=legal_cells(state),
        changes=changes or [],
    )
