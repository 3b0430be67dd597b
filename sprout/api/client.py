"""
HTTP client for the garden engine API.

Sends typed commands and parses responses into the same pydantic models
the server uses. Rule violations and missing games raise GameClientError
carrying the server's error code.
"""

from __future__ import annotations
from typing import Any, Optional

import requests

from .schemas import (
    Command,
    CommandRequest,
    CommandResponse,
    CreateGameRequest,
    ErrorCode,
    GameListResponse,
    GameStateResponse,
    GrowPlantCommand,
    HealthResponse,
    NextTurnCommand,
    PlaceCardCommand,
    PlacePestCommand,
    PlayActionCardCommand,
    SkipGrowPhaseCommand,
    SkipPlacePhaseCommand,
)

DEFAULT_TIMEOUT = 5


class GameClientError(Exception):
    """The server rejected a request."""

    def __init__(self, status_code: int, error_code: Optional[ErrorCode], message: str):
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        super().__init__(f"{status_code} {error_code.value if error_code else 'UNKNOWN'}: {message}")


class GameClient:
    """
    Typed client for /api/v1.

    Usage:
        client = GameClient("http://localhost:8000")
        game = client.create_game(["alice", "bob"], seed=7)
        client.place_card(game.game_id, "alice", draft_index=0, x=2, y=2)
    """

    def __init__(
        self,
        base_url: str,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url.rstrip("/")
        self.http = session or requests.Session()
        self.timeout = timeout

    # -------------------------------------------------------------------------
    # Games
    # -------------------------------------------------------------------------

    def health(self) -> HealthResponse:
        return HealthResponse.model_validate(self._request("GET", "/health"))

    def create_game(
        self,
        player_ids: list[str],
        seed: int | None = None,
        bot_player_ids: list[str] | None = None,
        settings: dict[str, Any] | None = None,
    ) -> GameStateResponse:
        request = CreateGameRequest(
            player_ids=player_ids,
            seed=seed,
            bot_player_ids=bot_player_ids or [],
            settings=settings,
        )
        data = self._request("POST", "/api/v1/games", json=request.model_dump(mode="json"))
        return GameStateResponse.model_validate(data)

    def list_games(self) -> list[str]:
        return GameListResponse.model_validate(self._request("GET", "/api/v1/games")).games

    def get_game(self, game_id: str) -> GameStateResponse:
        return GameStateResponse.model_validate(self._request("GET", f"/api/v1/games/{game_id}"))

    def end_game(self, game_id: str) -> None:
        self._request("DELETE", f"/api/v1/games/{game_id}")

    def reset_game(self, game_id: str, seed: int | None = None) -> GameStateResponse:
        data = self._request("POST", f"/api/v1/games/{game_id}/reset", json={"seed": seed})
        return GameStateResponse.model_validate(data)

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def send_command(self, game_id: str, command: Command) -> CommandResponse:
        body = CommandRequest(command=command).model_dump(mode="json")
        data = self._request("POST", f"/api/v1/games/{game_id}/commands", json=body)
        return CommandResponse.model_validate(data)

    def place_card(self, game_id: str, player_id: str, draft_index: int, x: int, y: int) -> CommandResponse:
        return self.send_command(
            game_id, PlaceCardCommand(player_id=player_id, draft_index=draft_index, x=x, y=y)
        )

    def grow_plant(self, game_id: str, player_id: str, x: int, y: int) -> CommandResponse:
        return self.send_command(game_id, GrowPlantCommand(player_id=player_id, x=x, y=y))

    def play_action_card(self, game_id: str, player_id: str, draft_index: int, x: int, y: int) -> CommandResponse:
        return self.send_command(
            game_id, PlayActionCardCommand(player_id=player_id, draft_index=draft_index, x=x, y=y)
        )

    def place_pest(
        self,
        game_id: str,
        player_id: str,
        x: int,
        y: int,
        draft_index: int | None = None,
        target_player_id: str | None = None,
    ) -> CommandResponse:
        return self.send_command(
            game_id,
            PlacePestCommand(
                player_id=player_id,
                x=x,
                y=y,
                draft_index=draft_index,
                target_player_id=target_player_id,
            ),
        )

    def skip_grow_phase(self, game_id: str, player_id: str) -> CommandResponse:
        return self.send_command(game_id, SkipGrowPhaseCommand(player_id=player_id))

    def skip_place_phase(self, game_id: str, player_id: str) -> CommandResponse:
        return self.send_command(game_id, SkipPlacePhaseCommand(player_id=player_id))

    def next_turn(self, game_id: str, player_id: str) -> CommandResponse:
        return self.send_command(game_id, NextTurnCommand(player_id=player_id))

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    def _request(self, method: str, path: str, json: Any = None) -> Any:
        response = self.http.request(method, f"{self.base_url}{path}", json=json, timeout=self.timeout)
        if response.status_code >= 400:
            raise self._error_from(response)
        return response.json()

    @staticmethod
    def _error_from(response: requests.Response) -> GameClientError:
        try:
            body = response.json()
        except ValueError:
            return GameClientError(response.status_code, None, response.text)
        code = body.get("error_code") if isinstance(body, dict) else None
        try:
            error_code = ErrorCode(code) if code else None
        except ValueError:
            error_code = None
        message = body.get("error", response.reason) if isinstance(body, dict) else response.reason
        return GameClientError(response.status_code, error_code, message)
