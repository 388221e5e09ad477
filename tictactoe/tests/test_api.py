"""
Tests for API layer.

Tests:
- API service methods
- Response conversion
- HTTP endpoints and error codes
"""

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from ..engine_core.state import ApplicationState, Player
from ..api.schemas import (
    CreateSessionRequest,
    TapRequest,
    ErrorResponse,
    ErrorCode,
    GameStatus,
    PlayerName,
    SessionStatus,
)
from ..api.service import APIService, game_state_response
from ..api.app import create_app
from .conftest import play


class TestAPIService:
    """Tests for APIService."""

    @pytest.fixture
    def service(self):
        return APIService()

    @pytest.fixture
    def session_id(self, service):
        response = service.create_session(CreateSessionRequest(seed=3, first_player="one"))
        return response.session_id

    def test_create_session(self, service):
        response = service.create_session(CreateSessionRequest(seed=3))

        assert response.session_id
        assert response.status == SessionStatus.ACTIVE
        assert response.seed == 3
        assert response.game.board == [None] * 9
        assert response.game.legal_cells == list(range(9))

    def test_get_nonexistent_session(self, service):
        response = service.get_session("nonexistent-id")

        assert isinstance(response, ErrorResponse)
        assert response.error_code == ErrorCode.SESSION_NOT_FOUND

    def test_tap(self, service, session_id):
        response = service.tap(session_id, TapRequest(cell_index=4))

        assert response.board[4] == PlayerName.ONE
        assert response.turn == PlayerName.TWO
        assert response.status == GameStatus.IN_PROGRESS
        assert 4 not in response.legal_cells
        assert response.changes

    def test_tap_occupied_cell(self, service, session_id):
        service.tap(session_id, TapRequest(cell_index=4))
        response = service.tap(session_id, TapRequest(cell_index=4))

        assert isinstance(response, ErrorResponse)
        assert response.error_code == ErrorCode.INVALID_MOVE

    def test_win_then_new_game(self, service, session_id):
        for cell in (0, 4, 1, 5, 2):
            response = service.tap(session_id, TapRequest(cell_index=cell))

        assert response.status == GameStatus.WON
        assert response.winner == PlayerName.ONE
        assert response.winning_line == [0, 1, 2]
        assert response.player1_score == 10
        assert response.legal_cells == []

        response = service.new_game(session_id)
        assert response.status == GameStatus.IN_PROGRESS
        assert response.board == [None] * 9
        assert response.player1_score == 10

    def test_end_session(self, service, session_id):
        assert service.end_session(session_id)
        assert session_id not in service.list_sessions()
        assert isinstance(service.get_state(session_id), ErrorResponse)

    def test_idle_sessions_dropped_on_create(self):
        service = APIService(max_idle_seconds=60)
        idle = service.create_session(CreateSessionRequest()).session_id
        service.session_manager.get_session(idle).last_activity -= 120

        fresh = service.create_session(CreateSessionRequest()).session_id

        assert service.list_sessions() == [fresh]
        assert isinstance(service.get_state(idle), ErrorResponse)

    def test_recent_sessions_kept_on_create(self, service, session_id):
        service.create_session(CreateSessionRequest())
        assert session_id in service.list_sessions()

    def test_game_state_response_for_draw(self):
        state = play(ApplicationState(turn=Player.TWO), 1, 0, 3, 2, 5, 4, 6, 7, 8)
        response = game_state_response("s", state)

        assert response.status == GameStatus.DRAW
        assert response.winner is None
        assert response.winning_line is None
        assert response.is_game_finished


class TestSchemas:
    """Tests for request validation."""

    @pytest.mark.parametrize("cell", [-1, 9])
    def test_tap_request_range(self, cell):
        with pytest.raises(ValidationError):
            TapRequest(cell_index=cell)

    def test_session_status_values(self):
        assert [s.value for s in SessionStatus] == ["active"]

    def test_error_response_dump(self):
        data = ErrorResponse(error="nope", error_code=ErrorCode.INVALID_MOVE).model_dump(mode="json")
        assert data == {
            "success": False,
            "error": "nope",
            "error_code": "INVALID_MOVE",
            "details": None,
        }


class TestHTTP:
    """Tests for the FastAPI app."""

    @pytest.fixture
    def service(self):
        return APIService()

    @pytest.fixture
    def client(self, service):
        return TestClient(create_app(service))

    @pytest.fixture
    def session_id(self, client):
        response = client.post("/api/v1/sessions", json={"seed": 1, "first_player": "one"})
        assert response.status_code == 201
        return response.json()["session_id"]

    def test_health(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_create_session_without_body(self, client):
        response = client.post("/api/v1/sessions")
        assert response.status_code == 201
        assert response.json()["game"]["status"] == "in_progress"

    def test_tap_and_state(self, client, session_id):
        response = client.post(f"/api/v1/sessions/{session_id}/tap", json={"cell_index": 0})
        assert response.status_code == 200
        assert response.json()["board"][0] == "one"

        state = client.get(f"/api/v1/sessions/{session_id}/state").json()
        assert state["turn"] == "two"

    def test_occupied_cell_is_conflict(self, client, session_id):
        client.post(f"/api/v1/sessions/{session_id}/tap", json={"cell_index": 0})
        response = client.post(f"/api/v1/sessions/{session_id}/tap", json={"cell_index": 0})

        assert response.status_code == 409
        assert response.json()["error_code"] == "INVALID_MOVE"

    def test_out_of_range_is_validation_error(self, client, session_id):
        response = client.post(f"/api/v1/sessions/{session_id}/tap", json={"cell_index": 12})

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_unknown_session(self, client):
        response = client.post("/api/v1/sessions/missing/tap", json={"cell_index": 0})

        assert response.status_code == 404
        assert response.json()["error_code"] == "SESSION_NOT_FOUND"

    def test_new_game_keeps_scores(self, client, session_id):
        for cell in (0, 4, 1, 5, 2):
            client.post(f"/api/v1/sessions/{session_id}/tap", json={"cell_index": cell})

        response = client.post(f"/api/v1/sessions/{session_id}/new-game")

        body = response.json()
        assert response.status_code == 200
        assert body["player1_score"] == 10
        assert body["board"] == [None] * 9

    def test_list_and_end_sessions(self, client, session_id):
        assert client.get("/api/v1/sessions").json()["count"] == 1

        response = client.delete(f"/api/v1/sessions/{session_id}")
        assert response.json() == {"success": True, "session_id": session_id}
        assert client.get(f"/api/v1/sessions/{session_id}").status_code == 404
