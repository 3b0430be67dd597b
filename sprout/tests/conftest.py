"""
Pytest fixtures for Sprout tests.
"""

import random

import pytest

from ..config import GameSettings
from ..engine_core.cards import Resource
from ..engine_core.effect_resolver import EffectResolver
from ..engine_core.garden import empty_garden
from ..engine_core.state import PlayerState
from ..games.garden import EFFECTS, GardenGame


@pytest.fixture
def settings() -> GameSettings:
    """Default rules: grid 5, max resources 20, max infestations 3, draft 5."""
    return GameSettings()


@pytest.fixture
def game(settings) -> GardenGame:
    """A seeded 2-player game, alice to move."""
    return GardenGame(["alice", "bob"], settings=settings, seed=42)


@pytest.fixture
def state(game):
    return game.state


@pytest.fixture
def alice(state) -> PlayerState:
    return state.players["alice"]


@pytest.fixture
def bob(state) -> PlayerState:
    return state.players["bob"]


@pytest.fixture
def resolver(settings) -> EffectResolver:
    return EffectResolver(effects=EFFECTS, max_resources=settings.max_resources)


@pytest.fixture
def lone_player(settings) -> PlayerState:
    """A player outside any game, for effect tests."""
    return PlayerState(
        player_id="solo",
        garden=empty_garden(settings.grid_size),
        resources={r: 0 for r in Resource},
    )


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
