"""
Garden Game Setup - Creates initial game state.

This module handles:
- Validating the player list
- Empty gardens and starting resources
- Generating and shuffling the deck with a seedable rng
- Dealing the first draft zone
"""

from __future__ import annotations
import random

from ...config import GameSettings
from ...engine_core.cards import Resource
from ...engine_core.deck import DraftManager, generate_deck
from ...engine_core.garden import empty_garden
from ...engine_core.state import GameState, PlayerState
from .cards import ACTION_LIBRARY, PEST_LIBRARY, PLANT_LIBRARY


def setup_garden_game(
    player_ids: list[str],
    settings: GameSettings,
    rng: random.Random,
) -> GameState:
    """
    Set up a new garden game.

    Args:
        player_ids: Player ids in seating order; the first player starts
        settings: Rule parameters
        rng: Random source for the deck shuffle

    Returns:
        Initial GameState ready for play
    """
    if len(player_ids) < settings.min_players:
        raise ValueError(f"At least {settings.min_players} players are required")
    if len(set(player_ids)) != len(player_ids):
        raise ValueError("Player ids must be unique")
    if any(not pid for pid in player_ids):
        raise ValueError("Player ids must be non-empty")

    players = {pid: _create_player(pid, settings) for pid in player_ids}
    deck = generate_deck(
        PLANT_LIBRARY,
        PEST_LIBRARY,
        ACTION_LIBRARY,
        len(player_ids),
        settings,
        rng,
    )

    total = len(deck)
    state = GameState(players=players, current_player_id=player_ids[0], deck=deck)
    DraftManager(settings).refill(state, allow_swarm=False)
    state.add_log(f"Game started with {', '.join(player_ids)}; {total} cards in the deck")
    return state


def _create_player(player_id: str, settings: GameSettings) -> PlayerState:
    return PlayerState(
        player_id=player_id,
        garden=empty_garden(settings.grid_size),
        resources={r: settings.starting_resources for r in Resource},
    )
