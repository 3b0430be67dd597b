"""
Action System - Actions, payloads, and results.

Actions represent one rules-engine operation by one player:
1. Placement phase (place a plant, play an action card, place a drafted pest,
   skip when nothing can be placed)
2. Grow phase (grow a plant, skip)
3. Pest phase (place an owed pest)
4. End of turn (hand over to the next player)

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ActionType(Enum):
    """Types of actions in the system."""
    PLACE_CARD = "place_card"
    PLAY_ACTION_CARD = "play_action_card"
    SKIP_PLACE_PHASE = "skip_place_phase"
    GROW_PLANT = "grow_plant"
    SKIP_GROW_PHASE = "skip_grow_phase"
    PLACE_PEST = "place_pest"
    NEXT_TURN = "next_turn"


@dataclass
class ActionPayload:
    """
    Payload for an action - contains the action parameters.

    Different action types use different fields; validation happens in
    the reducer.
    """
    player_id: str
    draft_index: int | None = None
    x: int | None = None
    y: int | None = None
    target_player_id: str | None = None


@dataclass
class Action:
    """
    A complete action to be applied to the game state.

    Actions are:
    - Logged for replay
    - Validated before application
    - Applied atomically by the reducer
    """
    action_type: ActionType
    payload: ActionPayload

    @property
    def player_id(self) -> str:
        return self.payload.player_id

    @classmethod
    def place_card(cls, player_id: str, draft_index: int, x: int, y: int) -> Action:
        """Factory for placing a drafted plant on the player's own garden."""
        return cls(
            action_type=ActionType.PLACE_CARD,
            payload=ActionPayload(player_id=player_id, draft_index=draft_index, x=x, y=y),
        )

    @classmethod
    def play_action_card(cls, player_id: str, draft_index: int, x: int, y: int) -> Action:
        """Factory for playing a drafted action card on one of the player's tiles."""
        return cls(
            action_type=ActionType.PLAY_ACTION_CARD,
            payload=ActionPayload(player_id=player_id, draft_index=draft_index, x=x, y=y),
        )

    @classmethod
    def place_pest(
        cls,
        player_id: str,
        x: int,
        y: int,
        draft_index: int | None = None,
        target_player_id: str | None = None,
    ) -> Action:
        """
        Factory for pest placement.

        With draft_index, a drafted pest is played on an opponent. Without
        it, an owed pest is placed on the player's own garden.
        """
        return cls(
            action_type=ActionType.PLACE_PEST,
            payload=ActionPayload(
                player_id=player_id,
                draft_index=draft_index,
                x=x,
                y=y,
                target_player_id=target_player_id,
            ),
        )

    @classmethod
    def grow_plant(cls, player_id: str, x: int, y: int) -> Action:
        return cls(
            action_type=ActionType.GROW_PLANT,
            payload=ActionPayload(player_id=player_id, x=x, y=y),
        )

    @classmethod
    def skip_place_phase(cls, player_id: str) -> Action:
        return cls(action_type=ActionType.SKIP_PLACE_PHASE, payload=ActionPayload(player_id=player_id))

    @classmethod
    def skip_grow_phase(cls, player_id: str) -> Action:
        return cls(action_type=ActionType.SKIP_GROW_PHASE, payload=ActionPayload(player_id=player_id))

    @classmethod
    def next_turn(cls, player_id: str) -> Action:
        return cls(action_type=ActionType.NEXT_TURN, payload=ActionPayload(player_id=player_id))

    def describe(self) -> str:
        """Short human-readable form, used by the bot and the CLI."""
        p = self.payload
        parts = [self.action_type.value]
        if p.draft_index is not None:
            parts.append(f"draft[{p.draft_index}]")
        if p.x is not None and p.y is not None:
            parts.append(f"at ({p.x},{p.y})")
        if p.target_player_id:
            parts.append(f"on {p.target_player_id}")
        return " ".join(parts)


@dataclass
class ActionResult:
    """
    Result of applying an action.

    Contains:
    - Whether action succeeded
    - The state after the action (if succeeded)
    - Error message and stable error code (if failed)
    - Human-readable changes, also written to the game log
    """
    success: bool
    new_state: Any | None = None  # GameState
    error: str | None = None
    error_code: str | None = None

    state_changes: list[str] = field(default_factory=list)

    @classmethod
    def failure(cls, error: str, error_code: str | None = None) -> ActionResult:
        """Create a failure result."""
        return cls(success=False, error=error, error_code=error_code)

    @classmethod
    def success_with_state(cls, state: Any, changes: list[str] | None = None) -> ActionResult:
        """Create a success result with new state."""
        return cls(success=True, new_state=state, state_changes=changes or [])
