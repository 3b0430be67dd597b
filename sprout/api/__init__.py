"""
API Module - HTTP interface to the engine.

Exposes the engine via REST API:
1. Create, list, reset and end games
2. Send typed commands for the current player
3. Read full game state

All state is session-scoped. No persistent user accounts required.
"""

from .schemas import (
    # Requests
    CreateGameRequest,
    ResetGameRequest,
    CommandRequest,
    Command,
    # Responses
    GameStateResponse,
    CommandResponse,
    ErrorResponse,
    GameListResponse,
    HealthResponse,
    # Shared
    PlayerInfo,
    CardInfo,
    ErrorCode,
)
from .service import APIService, GameNotFoundError
from .client import GameClient, GameClientError
from .app import create_app

__all__ = [
    # Requests
    "CreateGameRequest",
    "ResetGameRequest",
    "CommandRequest",
    "Command",
    # Responses
    "GameStateResponse",
    "CommandResponse",
    "ErrorResponse",
    "GameListResponse",
    "HealthResponse",
    # Shared
    "PlayerInfo",
    "CardInfo",
    "ErrorCode",
    # Service
    "APIService",
    "GameNotFoundError",
    "GameClient",
    "GameClientError",
    "create_app",
]
