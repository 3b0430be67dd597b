"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the exact contract between HTTP callers and the engine.
All responses include explicit types for OpenAPI schema generation.

Error Codes:
- Every rule violation code the engine produces (WRONG_PHASE, CELL_OCCUPIED, ...)
- GAME_NOT_FOUND: Game does not exist or has been ended
- VALIDATION_ERROR: Request body is malformed
- INTERNAL_ERROR: Unexpected server failure
"""

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class GameStatus(str, Enum):
    """Game status values."""
    ACTIVE = "active"
    GAME_OVER = "game_over"


class ErrorCode(str, Enum):
    """Structured error codes."""
    # Turn / phase
    GAME_OVER = "GAME_OVER"
    UNKNOWN_PLAYER = "UNKNOWN_PLAYER"
    NOT_YOUR_TURN = "NOT_YOUR_TURN"
    PLAYER_DONE = "PLAYER_DONE"
    WRONG_PHASE = "WRONG_PHASE"
    PLACEMENT_AVAILABLE = "PLACEMENT_AVAILABLE"

    # Placement
    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    CELL_OCCUPIED = "CELL_OCCUPIED"
    INVALID_DRAFT_INDEX = "INVALID_DRAFT_INDEX"
    WRONG_CARD_KIND = "WRONG_CARD_KIND"
    PEST_ON_PEST = "PEST_ON_PEST"

    # Resources
    INSUFFICIENT_RESOURCES = "INSUFFICIENT_RESOURCES"

    # Targets
    NOT_A_PLANT = "NOT_A_PLANT"
    ALREADY_GROWN = "ALREADY_GROWN"
    NO_GROWTH_COST = "NO_GROWTH_COST"
    EMPTY_TARGET = "EMPTY_TARGET"
    INVALID_TARGET = "INVALID_TARGET"
    PEST_ON_SELF = "PEST_ON_SELF"
    UNKNOWN_TARGET_PLAYER = "UNKNOWN_TARGET_PLAYER"
    TARGET_PLAYER_DONE = "TARGET_PLAYER_DONE"
    NO_PEST_SUPPLY = "NO_PEST_SUPPLY"

    # API
    GAME_NOT_FOUND = "GAME_NOT_FOUND"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class CardInfo(BaseModel):
    """A card in the draft zone or on a garden cell."""
    card_id: str
    kind: Literal["plant", "pest", "action"]
    name: str
    cost: dict[str, int] = Field(default_factory=dict, description="Growth cost for plants, play cost for actions")
    base_points: Optional[int] = None
    damage: Optional[int] = None
    grown: Optional[bool] = Field(None, description="Only set for plants")
    effect: str = ""
    description: str = ""

    model_config = {"from_attributes": True}


class PlayerInfo(BaseModel):
    """Player information for display."""
    player_id: str
    is_current_turn: bool = False
    is_bot: bool = False
    score: int = 0
    resources: dict[str, int] = Field(default_factory=dict)
    infestation: int = 0
    phase: str = Field(description="PLACE, GROW, PEST, END or DONE")
    pest_to_place: int = 0
    garden: list[list[Optional[CardInfo]]] = Field(
        default_factory=list, description="Rows of cells, indexed garden[y][x]"
    )

    model_config = {"from_attributes": True}


# =============================================================================
# Commands
# =============================================================================

class PlaceCardCommand(BaseModel):
    """Place a drafted plant on your own garden."""
    type: Literal["place_card"] = "place_card"
    player_id: str
    draft_index: int
    x: int
    y: int


class GrowPlantCommand(BaseModel):
    """Grow one of your plants."""
    type: Literal["grow_plant"] = "grow_plant"
    player_id: str
    x: int
    y: int


class PlayActionCardCommand(BaseModel):
    """Play a drafted action card on one of your tiles."""
    type: Literal["play_action_card"] = "play_action_card"
    player_id: str
    draft_index: int
    x: int
    y: int


class PlacePestCommand(BaseModel):
    """
    Place a pest.

    With draft_index: play a drafted pest on target_player_id's garden.
    Without: place an owed pest on your own garden.
    """
    type: Literal["place_pest"] = "place_pest"
    player_id: str
    x: int
    y: int
    draft_index: Optional[int] = None
    target_player_id: Optional[str] = None


class SkipGrowPhaseCommand(BaseModel):
    type: Literal["skip_grow_phase"] = "skip_grow_phase"
    player_id: str


class SkipPlacePhaseCommand(BaseModel):
    type: Literal["skip_place_phase"] = "skip_place_phase"
    player_id: str


class NextTurnCommand(BaseModel):
    type: Literal["next_turn"] = "next_turn"
    player_id: str


Command = Annotated[
    Union[
        PlaceCardCommand,
        GrowPlantCommand,
        PlayActionCardCommand,
        PlacePestCommand,
        SkipGrowPhaseCommand,
        SkipPlacePhaseCommand,
        NextTurnCommand,
    ],
    Field(discriminator="type"),
]


# =============================================================================
# Request Models
# =============================================================================

class CreateGameRequest(BaseModel):
    """Request to create a new game."""
    player_ids: list[str] = Field(..., min_length=1, description="Player ids in seating order")
    seed: Optional[int] = Field(None, description="Seed for reproducible games")
    bot_player_ids: list[str] = Field(
        default_factory=list, description="Seats played by a random bot"
    )
    settings: Optional[dict[str, Any]] = Field(
        None, description="Overrides for rule settings, e.g. {\"grid_size\": 4}"
    )


class ResetGameRequest(BaseModel):
    """Request to restart a game with the same players."""
    seed: Optional[int] = None


class CommandRequest(BaseModel):
    """Wrapper for one typed command."""
    command: Command


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class GameStateResponse(BaseModel):
    """Complete game state for display."""
    game_id: str
    status: GameStatus
    turn_number: int
    current_player_id: str
    players: list[PlayerInfo] = Field(default_factory=list)
    draft_zone: list[CardInfo] = Field(default_factory=list)
    deck_size: int = 0
    discard_size: int = 0
    winner: Optional[str] = None
    log: list[str] = Field(default_factory=list)
    api_version: str = "v1"


class CommandResponse(BaseModel):
    """Result of a successful command."""
    success: bool
    changes: list[str] = Field(default_factory=list)
    bot_actions: list[str] = Field(
        default_factory=list, description="Actions bots took after the command"
    )
    game_state: GameStateResponse
    api_version: str = "v1"


class GameListResponse(BaseModel):
    """Response listing games."""
    games: list[str]
    count: int


class EndGameResponse(BaseModel):
    """Response after ending a game."""
    success: bool
    game_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
