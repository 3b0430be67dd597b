"""
FastAPI Application - REST API for the garden engine.

Endpoints:
    POST   /api/v1/games                 Create a game
    GET    /api/v1/games                 List games
    GET    /api/v1/games/{id}            Get game state
    DELETE /api/v1/games/{id}            End a game
    POST   /api/v1/games/{id}/reset      New game with the same players
    POST   /api/v1/games/{id}/commands   Execute a typed command
    GET    /health                       Health check

Rule violations come back as HTTP 400 with an ErrorResponse carrying the
engine's error code; unknown games are 404.
"""

from typing import Optional, Union
import logging
import os

from .. import __version__

# Environment configuration
SPROUT_ENV = os.getenv("SPROUT_ENV", "development")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")

logger = logging.getLogger(__name__)


def create_app(service=None):
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    from fastapi import Body, FastAPI, Request
    from fastapi.encoders import jsonable_encoder
    from fastapi.exceptions import RequestValidationError
    from fastapi.middleware.cors import CORSMiddleware
    from fastapi.responses import JSONResponse

    from ..config import GameSettings
    from ..session import SessionManager
    from .service import APIService, GameNotFoundError
    from .schemas import (
        CommandRequest,
        CommandResponse,
        CreateGameRequest,
        EndGameResponse,
        ErrorCode,
        ErrorResponse,
        GameListResponse,
        GameStateResponse,
        HealthResponse,
        ResetGameRequest,
    )

    app = FastAPI(
        title="Sprout Garden Engine API",
        description="""
Multiplayer garden drafting game engine.

## Turn flow

Each player moves through `PLACE -> GROW -> [PEST] -> END`, then
`next_turn` hands over to the next player. Commands are sent to
`POST /api/v1/games/{id}/commands` with a `type` field selecting the
operation.

## Error Codes

| Code | Description |
|------|-------------|
| `NOT_YOUR_TURN` | Command from a player other than the current one |
| `WRONG_PHASE` | Operation not allowed in the player's current phase |
| `CELL_OCCUPIED` | Target cell already holds a tile |
| `INSUFFICIENT_RESOURCES` | Player cannot pay the cost |
| `GAME_NOT_FOUND` | Game does not exist |
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

    api_service = service or APIService(
        session_manager=SessionManager(settings=GameSettings.from_env())
    )

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Optional[dict] = None,
    ) -> JSONResponse:
        """Create a standardized error response."""
        return JSONResponse(
            status_code=status_code,
            content=ErrorResponse(
                error=message,
                error_code=error_code,
                details=details,
            ).model_dump(mode="json"),
        )

    def game_not_found(game_id: str) -> JSONResponse:
        return make_error_response(
            ErrorCode.GAME_NOT_FOUND,
            f"Game {game_id} not found",
            status_code=404,
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return make_error_response(
            ErrorCode.VALIDATION_ERROR,
            "Request validation failed",
            status_code=422,
            details={"errors": jsonable_encoder(exc.errors())},
        )

    # =========================================================================
    # Games
    # =========================================================================

    @app.post(
        "/api/v1/games",
        response_model=GameStateResponse,
        responses={400: {"model": ErrorResponse, "description": "Invalid players or settings"}},
        tags=["Games"],
        summary="Create a new game",
    )
    def create_game(request: CreateGameRequest) -> Union[GameStateResponse, JSONResponse]:
        """
        Create a new game.

        Seats listed in `bot_player_ids` are played by a random bot. If the
        first seat is a bot it moves before this call returns.
        """
        try:
            return api_service.create_game(request)
        except ValueError as e:
            return make_error_response(ErrorCode.VALIDATION_ERROR, str(e))

    @app.get(
        "/api/v1/games",
        response_model=GameListResponse,
        tags=["Games"],
        summary="List games",
    )
    def list_games() -> GameListResponse:
        games = api_service.list_games()
        return GameListResponse(games=games, count=len(games))

    @app.get(
        "/api/v1/games/{game_id}",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Get game state",
    )
    def get_game(game_id: str) -> Union[GameStateResponse, JSONResponse]:
        try:
            return api_service.get_game(game_id)
        except GameNotFoundError:
            return game_not_found(game_id)

    @app.delete(
        "/api/v1/games/{game_id}",
        response_model=EndGameResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="End a game",
    )
    def end_game(game_id: str) -> Union[EndGameResponse, JSONResponse]:
        """End a game and release it."""
        if not api_service.end_game(game_id):
            return game_not_found(game_id)
        return EndGameResponse(success=True, game_id=game_id)

    @app.post(
        "/api/v1/games/{game_id}/reset",
        response_model=GameStateResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Games"],
        summary="Restart a game with the same players",
    )
    def reset_game(
        game_id: str,
        request: Optional[ResetGameRequest] = Body(None),
    ) -> Union[GameStateResponse, JSONResponse]:
        try:
            return api_service.reset_game(game_id, seed=request.seed if request else None)
        except GameNotFoundError:
            return game_not_found(game_id)

    # =========================================================================
    # Commands
    # =========================================================================

    @app.post(
        "/api/v1/games/{game_id}/commands",
        response_model=CommandResponse,
        responses={
            400: {"model": ErrorResponse, "description": "Rule violation"},
            404: {"model": ErrorResponse, "description": "Game not found"},
        },
        tags=["Commands"],
        summary="Execute a command",
    )
    def execute_command(game_id: str, request: CommandRequest) -> Union[CommandResponse, JSONResponse]:
        """
        Execute one typed command for one player.

        A rejected command leaves the game unchanged and returns 400 with the
        engine's error code.
        """
        try:
            result = api_service.execute_command(game_id, request.command)
        except GameNotFoundError:
            return game_not_found(game_id)
        if isinstance(result, ErrorResponse):
            logger.info("Command rejected in %s: %s", game_id, result.error_code.value)
            return make_error_response(result.error_code, result.error, details=result.details)
        return result

    # =========================================================================
    # Health Check
    # =========================================================================

    @app.get(
        "/health",
        response_model=HealthResponse,
        tags=["System"],
        summary="Health check",
    )
    def health_check() -> HealthResponse:
        """Health check endpoint for load balancers."""
        return HealthResponse(
            status="healthy",
            service="sprout-engine",
            version=__version__,
        )

    @app.get("/", tags=["System"])
    def root():
        """Root endpoint with API info."""
        return {
            "name": "Sprout Garden Engine API",
            "version": __version__,
            "environment": SPROUT_ENV,
            "docs": "/api/docs",
            "health": "/health",
        }

    return app


app = create_app()
