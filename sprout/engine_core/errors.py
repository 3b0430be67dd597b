"""
Rule violation errors.

Every rejected operation raises one of these before touching game state.
The reducer turns them into ActionResult failures; callers see the
message and the stable error code.
"""

from __future__ import annotations
from enum import Enum


class ErrorCode(str, Enum):
    """Stable reason codes for rejected operations."""
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


class ErrorCategory(str, Enum):
    TURN = "turn"
    PLACEMENT = "placement"
    RESOURCE = "resource"
    TARGET = "target"


class GameRuleError(Exception):
    """Base class for all rule violations."""

    category: ErrorCategory

    def __init__(self, code: ErrorCode, message: str):
        self.code = code
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code.value}: {self.message})"


class TurnError(GameRuleError):
    """Wrong player, wrong phase, player finished, or game over."""
    category = ErrorCategory.TURN


class PlacementError(GameRuleError):
    """Bad coordinates, occupied cell, or bad draft pick."""
    category = ErrorCategory.PLACEMENT


class ResourceError(GameRuleError):
    """The player cannot pay a cost."""
    category = ErrorCategory.RESOURCE


class TargetError(GameRuleError):
    """The chosen tile or player is not a valid target for the effect."""
    category = ErrorCategory.TARGET
