"""
Tests for the HTTP client.

The transport is a mocked requests.Session, so no server is needed.
"""

from unittest.mock import Mock

import pytest
import requests

from ..api.client import GameClient, GameClientError
from ..api.schemas import ErrorCode, GameStatus
from ..api.service import APIService
from ..session import SessionManager


def reply(status_code=200, body=None, reason="OK"):
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.reason = reason
    response.text = "" if body is None else str(body)
    if body is None:
        response.json.side_effect = ValueError("no json")
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def http():
    return Mock(spec=requests.Session)


@pytest.fixture
def client(http):
    return GameClient("http://engine.local/", session=http, timeout=2)


@pytest.fixture
def game_body():
    """A real GameStateResponse, dumped the way the server sends it."""
    service = APIService(session_manager=SessionManager())
    session = service.session_manager.create_session(["alice", "bob"], seed=5)
    return service.get_game(session.session_id).model_dump(mode="json")


class TestGameClient:
    """Requests sent and responses parsed."""

    def test_create_game(self, client, http, game_body):
        http.request.return_value = reply(body=game_body)

        game = client.create_game(["alice", "bob"], seed=5)

        assert game.status == GameStatus.ACTIVE
        assert game.current_player_id == "alice"
        http.request.assert_called_once_with(
            "POST",
            "http://engine.local/api/v1/games",
            json={"player_ids": ["alice", "bob"], "seed": 5, "bot_player_ids": [], "settings": None},
            timeout=2,
        )

    def test_place_card_sends_typed_command(self, client, http, game_body):
        http.request.return_value = reply(
            body={"success": True, "changes": ["alice placed Tree"], "bot_actions": [], "game_state": game_body}
        )

        result = client.place_card("g1", "alice", draft_index=0, x=2, y=3)

        assert result.changes == ["alice placed Tree"]
        method, url = http.request.call_args.args
        assert (method, url) == ("POST", "http://engine.local/api/v1/games/g1/commands")
        assert http.request.call_args.kwargs["json"] == {
            "command": {"type": "place_card", "player_id": "alice", "draft_index": 0, "x": 2, "y": 3}
        }

    def test_owed_pest_omits_draft_index(self, client, http, game_body):
        http.request.return_value = reply(
            body={"success": True, "changes": [], "bot_actions": [], "game_state": game_body}
        )

        client.place_pest("g1", "alice", 1, 1)

        command = http.request.call_args.kwargs["json"]["command"]
        assert command["type"] == "place_pest"
        assert command["draft_index"] is None

    def test_list_games(self, client, http):
        http.request.return_value = reply(body={"games": ["a", "b"], "count": 2})
        assert client.list_games() == ["a", "b"]

    def test_rule_violation_raises(self, client, http):
        http.request.return_value = reply(
            400,
            {"error": "Not bob's turn", "error_code": "NOT_YOUR_TURN", "details": None, "api_version": "v1"},
            reason="Bad Request",
        )

        with pytest.raises(GameClientError) as exc:
            client.next_turn("g1", "bob")

        assert exc.value.status_code == 400
        assert exc.value.error_code == ErrorCode.NOT_YOUR_TURN
        assert exc.value.message == "Not bob's turn"

    def test_unknown_error_code(self, client, http):
        http.request.return_value = reply(404, {"error": "gone", "error_code": "SOMETHING_NEW"})

        with pytest.raises(GameClientError) as exc:
            client.get_game("g1")

        assert exc.value.error_code is None
        assert exc.value.message == "gone"

    def test_non_json_error(self, client, http):
        http.request.return_value = reply(502, None, reason="Bad Gateway")

        with pytest.raises(GameClientError) as exc:
            client.health()

        assert exc.value.status_code == 502
        assert "UNKNOWN" in str(exc.value)

    def test_default_session(self):
        client = GameClient("http://engine.local")
        assert isinstance(client.http, requests.Session)
        assert client.base_url == "http://engine.local"
