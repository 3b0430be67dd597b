"""
Turn phase state machine.

    PLACE -> GROW -> [PEST] -> END -> PLACE | DONE

Each player moves through these phases independently. DONE is absorbing:
once there, nothing moves the player again.
"""

from __future__ import annotations
import logging

from .errors import ErrorCode, TurnError
from .garden import is_full
from .state import PlayerState, TurnPhase

logger = logging.getLogger(__name__)


# Every edge the machine may take
TRANSITIONS: dict[TurnPhase, frozenset[TurnPhase]] = {
    TurnPhase.PLACE: frozenset({TurnPhase.GROW}),
    TurnPhase.GROW: frozenset({TurnPhase.PEST, TurnPhase.END}),
    TurnPhase.PEST: frozenset({TurnPhase.PEST, TurnPhase.END}),
    TurnPhase.END: frozenset({TurnPhase.PLACE, TurnPhase.DONE}),
    TurnPhase.DONE: frozenset(),
}


def is_player_done(player: PlayerState, max_infestations: int, supply_exhausted: bool = False) -> bool:
    """
    A player is done when their garden is full, their infestation hit the
    cap, or there is nothing left to draft.

    The last condition lets a game end once the deck and the draft zone run
    dry; without it players whose gardens still have room would keep
    skipping turns forever.
    """
    return (
        is_full(player.garden)
        or player.infestation >= max_infestations
        or supply_exhausted
    )


def advance_phase(
    player: PlayerState,
    *,
    max_infestations: int,
    supply_exhausted: bool = False,
    has_pest_supply: bool = True,
) -> TurnPhase:
    """
    Move a player one step along the machine and return the new phase.

    PEST only advances once every owed pest is placed. If pests are owed
    but none exist to place, the debt is dropped so the player cannot be
    stuck in PEST.
    """
    phase = player.phase
    if phase == TurnPhase.DONE:
        return phase

    if phase == TurnPhase.PLACE:
        player.phase = TurnPhase.GROW
    elif phase in (TurnPhase.GROW, TurnPhase.PEST):
        if player.pest_to_place > 0 and not has_pest_supply:
            logger.debug("Dropping %d owed pest(s) for %s: no pest supply", player.pest_to_place, player.player_id)
            player.pest_to_place = 0
        player.phase = TurnPhase.PEST if player.pest_to_place > 0 else TurnPhase.END
    elif phase == TurnPhase.END:
        if is_player_done(player, max_infestations, supply_exhausted):
            player.phase = TurnPhase.DONE
        else:
            player.phase = TurnPhase.PLACE

    return player.phase


def require_phase(player: PlayerState, phase: TurnPhase, operation: str) -> None:
    """Raise unless the player is active and in the given phase."""
    if player.is_done:
        raise TurnError(ErrorCode.PLAYER_DONE, f"{player.player_id} is done playing")
    if player.phase != phase:
        raise TurnError(
            ErrorCode.WRONG_PHASE,
            f"Cannot {operation} during {player.phase.value} phase (requires {phase.value})",
        )
