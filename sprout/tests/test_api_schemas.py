"""
Tests for API Pydantic schemas.

Validates that:
- Commands are selected by their "type" field
- Error codes cover every engine rejection
- Responses serialize with plain JSON types
- The OpenAPI document is generated
"""

import pytest
from pydantic import ValidationError


class TestCommandSchemas:
    """Tests for the command union."""

    def test_type_selects_command(self):
        """The type field picks the command model."""
        from sprout.api.schemas import CommandRequest, PlacePestCommand, SkipGrowPhaseCommand

        request = CommandRequest.model_validate(
            {"command": {"type": "place_pest", "player_id": "alice", "x": 1, "y": 2, "target_player_id": "bob"}}
        )
        assert isinstance(request.command, PlacePestCommand)
        assert request.command.draft_index is None

        request = CommandRequest.model_validate({"command": {"type": "skip_grow_phase", "player_id": "alice"}})
        assert isinstance(request.command, SkipGrowPhaseCommand)

    def test_unknown_type_rejected(self):
        from sprout.api.schemas import CommandRequest

        with pytest.raises(ValidationError):
            CommandRequest.model_validate({"command": {"type": "steal_card", "player_id": "alice"}})

    def test_missing_fields_rejected(self):
        from sprout.api.schemas import CommandRequest

        with pytest.raises(ValidationError):
            CommandRequest.model_validate({"command": {"type": "place_card", "player_id": "alice", "x": 0}})

    def test_engine_checks_ranges(self):
        """Negative coordinates pass validation so the engine can report OUT_OF_BOUNDS."""
        from sprout.api.schemas import PlaceCardCommand

        command = PlaceCardCommand(player_id="alice", draft_index=-1, x=-3, y=9)
        assert command.type == "place_card"

    def test_create_request_needs_players(self):
        from sprout.api.schemas import CreateGameRequest

        with pytest.raises(ValidationError):
            CreateGameRequest(player_ids=[])


class TestErrorSchemas:
    """Tests for error codes and error responses."""

    def test_every_engine_code_is_an_api_code(self):
        """Engine rejections map onto API error codes one to one."""
        from sprout.api.schemas import ErrorCode
        from sprout.engine_core.errors import ErrorCode as EngineErrorCode

        api_codes = {c.value for c in ErrorCode}
        for code in EngineErrorCode:
            assert code.value in api_codes

    def test_error_response_serializes(self):
        from sprout.api.schemas import ErrorCode, ErrorResponse

        response = ErrorResponse(error="Not bob's turn", error_code=ErrorCode.NOT_YOUR_TURN)

        data = response.model_dump(mode="json")
        assert data == {
            "error": "Not bob's turn",
            "error_code": "NOT_YOUR_TURN",
            "details": None,
            "api_version": "v1",
        }


class TestResponseSchemas:

    def test_card_info_kind_is_closed(self):
        from sprout.api.schemas import CardInfo

        with pytest.raises(ValidationError):
            CardInfo(card_id="x_1", kind="relic", name="X")

    def test_game_state_json(self):
        """A live game's state dumps to JSON-safe values."""
        from sprout.api.schemas import GameStatus
        from sprout.api.service import APIService
        from sprout.session import SessionManager

        service = APIService(session_manager=SessionManager())
        session = service.session_manager.create_session(["alice", "bob"], seed=1)

        data = service.get_game(session.session_id).model_dump(mode="json")

        assert data["status"] == GameStatus.ACTIVE.value
        assert data["players"][0]["resources"] == {"water": 1, "light": 1, "compost": 1}
        assert data["draft_zone"][0]["kind"] in ("plant", "pest", "action")


class TestOpenAPI:
    """The app builds a complete OpenAPI document."""

    def test_openapi_paths(self):
        from fastapi.openapi.utils import get_openapi
        from sprout.api.app import create_app

        app = create_app()
        schema = get_openapi(title=app.title, version=app.version, routes=app.routes)

        assert "/api/v1/games" in schema["paths"]
        assert "/api/v1/games/{game_id}/commands" in schema["paths"]
        assert "/api/v1/games/{game_id}/reset" in schema["paths"]
        assert "/health" in schema["paths"]
        components = schema["components"]["schemas"]
        assert "ErrorResponse" in components
        assert "PlacePestCommand" in components
