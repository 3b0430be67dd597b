"""
Turn/Round Coordinator.

Ends the current player's turn, hands control to the next player who is
still playing, and decides the winner once nobody is.
"""

from __future__ import annotations
import logging
import random

from ..config import GameSettings
from .cards import Resource
from .deck import DraftManager
from .phases import advance_phase
from .state import GameState, PlayerState

logger = logging.getLogger(__name__)


def find_next_active_player(state: GameState, after_id: str) -> tuple[str | None, bool]:
    """
    First player after `after_id` in seating order who is not DONE.

    The search wraps around and may land on `after_id` itself. Returns
    (player_id, wrapped); player_id is None when every player is DONE.
    """
    seating = state.seating
    start = seating.index(after_id)
    count = len(seating)
    for step in range(1, count + 1):
        index = (start + step) % count
        if not state.players[seating[index]].is_done:
            return seating[index], index <= start
    return None, False


def compute_winner(state: GameState) -> str | None:
    """
    Winner among the DONE players.

    Highest score wins; ties go to the lower infestation, then to the
    player seated first.
    """
    best: PlayerState | None = None
    for player in state.players.values():
        if not player.is_done:
            continue
        if best is None or (player.score, -player.infestation) > (best.score, -best.infestation):
            best = player
    return best.player_id if best else None


def grant_end_turn_resources(
    player: PlayerState,
    settings: GameSettings,
    rng: random.Random,
) -> dict[Resource, int]:
    """Give the player random resource units, capped at max_resources."""
    kinds = list(Resource)
    gained: dict[Resource, int] = {}
    for _ in range(settings.end_turn_resource_gain):
        resource = rng.choice(kinds)
        amount = player.gain(resource, 1, settings.max_resources)
        if amount:
            gained[resource] = gained.get(resource, 0) + amount
    return gained


def end_turn(
    state: GameState,
    settings: GameSettings,
    draft: DraftManager,
    rng: random.Random,
) -> list[str]:
    """
    Finish the current player's turn. The player must be in END.

    Returns the messages describing what happened.
    """
    player = state.current_player
    changes: list[str] = []

    phase = advance_phase(
        player,
        max_infestations=settings.max_infestations,
        supply_exhausted=draft.supply_exhausted(state),
    )
    if player.is_done:
        changes.append(f"{player.player_id} is done (score {player.score})")

    gained = grant_end_turn_resources(player, settings, rng)
    if gained:
        listed = ", ".join(f"+{n} {r.value}" for r, n in gained.items())
        changes.append(f"{player.player_id} gained {listed}")

    next_id, wrapped = find_next_active_player(state, player.player_id)
    if next_id is None:
        state.winner = compute_winner(state)
        changes.append(f"Game over! Winner: {state.winner}")
        logger.info("Game over after %d rounds, winner %s", state.current_turn, state.winner)
        return changes

    if wrapped:
        state.current_turn += 1
    state.current_player_id = next_id
    draft.refill(state)
    changes.append(f"Turn ended ({phase.value}). Next player: {next_id}")
    return changes
