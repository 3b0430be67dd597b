"""
Engine Core - Deterministic game state management and effect resolution.

The engine is the runtime that:
1. Manages GameState (players, gardens, deck, draft zone)
2. Runs the per-player phase machine
3. Generates legal actions
4. Applies actions via the reducer
5. Resolves card effects through a dispatch table
"""

from .state import GameState, PlayerState, TurnPhase
from .cards import (
    ActionCard,
    ActionDefinition,
    CardKind,
    PestDefinition,
    PestTile,
    PlantDefinition,
    PlantTile,
    Resource,
)
from .action import Action, ActionType, ActionPayload, ActionResult
from .errors import ErrorCode, GameRuleError
from .reducer import Reducer
from .action_generator import ActionGenerator
from .effect_resolver import EffectResolver, EffectContext

__all__ = [
    "GameState",
    "PlayerState",
    "TurnPhase",
    "ActionCard",
    "ActionDefinition",
    "CardKind",
    "PestDefinition",
    "PestTile",
    "PlantDefinition",
    "PlantTile",
    "Resource",
    "Action",
    "ActionType",
    "ActionPayload",
    "ActionResult",
    "ErrorCode",
    "GameRuleError",
    "Reducer",
    "ActionGenerator",
    "EffectResolver",
    "EffectContext",
]
