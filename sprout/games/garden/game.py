"""
GardenGame - one game of the garden drafting rules engine.

A GardenGame owns its state, its rng and its reducer. Every operation
validates first and returns an ActionResult; a failed operation leaves
the state exactly as it was.
"""

from __future__ import annotations
import logging
import random

from ...config import DEFAULT_SETTINGS, GameSettings
from ...engine_core.action import Action, ActionResult
from ...engine_core.action_generator import ActionGenerator
from ...engine_core.effect_resolver import EffectResolver
from ...engine_core.reducer import Reducer
from ...engine_core.state import GameState
from .effects import EFFECTS
from .setup import setup_garden_game

logger = logging.getLogger(__name__)


class GardenGame:
    """
    Explicit owner of one game.

    The same seed with the same sequence of operations always produces the
    same game: the rng drives both the deck shuffle and end-of-turn
    resource grants.
    """

    def __init__(
        self,
        player_ids: list[str],
        settings: GameSettings | None = None,
        seed: int | None = None,
        rng: random.Random | None = None,
    ):
        self.player_ids = list(player_ids)
        self.settings = settings or DEFAULT_SETTINGS
        self.seed = seed
        self.rng = rng or random.Random(seed)
        self.resolver = EffectResolver(effects=EFFECTS, max_resources=self.settings.max_resources)
        self.reducer = Reducer(settings=self.settings, resolver=self.resolver, rng=self.rng)
        self.generator = ActionGenerator(settings=self.settings)
        self.state: GameState = setup_garden_game(self.player_ids, self.settings, self.rng)
        logger.debug("Created game for %s (seed=%s)", self.player_ids, seed)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def apply(self, action: Action) -> ActionResult:
        """Apply any action through the reducer."""
        return self.reducer.apply(self.state, action)

    def place_card(self, player_id: str, draft_index: int, x: int, y: int) -> ActionResult:
        return self.apply(Action.place_card(player_id, draft_index, x, y))

    def grow_plant(self, player_id: str, x: int, y: int) -> ActionResult:
        return self.apply(Action.grow_plant(player_id, x, y))

    def play_action_card(self, player_id: str, draft_index: int, x: int, y: int) -> ActionResult:
        return self.apply(Action.play_action_card(player_id, draft_index, x, y))

    def place_pest(
        self,
        player_id: str,
        x: int,
        y: int,
        draft_index: int | None = None,
        target_player_id: str | None = None,
    ) -> ActionResult:
        """Drafted pest when draft_index is given, owed pest otherwise."""
        return self.apply(Action.place_pest(player_id, x, y, draft_index, target_player_id))

    def skip_grow_phase(self, player_id: str) -> ActionResult:
        return self.apply(Action.skip_grow_phase(player_id))

    def skip_place_phase(self, player_id: str) -> ActionResult:
        return self.apply(Action.skip_place_phase(player_id))

    def next_turn(self, player_id: str) -> ActionResult:
        return self.apply(Action.next_turn(player_id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_game_over(self) -> bool:
        return self.state.is_game_over

    def get_winner(self) -> str | None:
        return self.state.winner

    def snapshot(self) -> GameState:
        """Deep copy of the current state, safe to keep."""
        return self.state.clone()

    def legal_actions(self) -> list[Action]:
        return self.generator.generate(self.state)
