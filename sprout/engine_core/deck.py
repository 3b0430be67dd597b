"""
Deck & Draft Manager.

Owns the deck lifecycle:
- Deck generation from the card catalogs, scaled by player count
- Uniform shuffle driven by an injected random.Random (seedable)
- Drawing from the top of the deck (end of the list)
- Keeping the shared draft zone filled to capacity while cards remain
- Supplying pest cards for owed-pest placements
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Sequence
import logging
import random

from ..config import GameSettings
from .cards import (
    ActionDefinition,
    DraftCard,
    PestDefinition,
    PestTile,
    PlantDefinition,
    instantiate,
    is_pest,
)
from .errors import ErrorCode, PlacementError
from .state import GameState

logger = logging.getLogger(__name__)


def shuffle(cards: list, rng: random.Random) -> list:
    """
    Shuffle in place and return the list.

    random.Random.shuffle is a Fisher-Yates shuffle, so every permutation
    is equally likely and a seeded rng always gives the same order.
    """
    rng.shuffle(cards)
    return cards


def generate_deck(
    plants: Sequence[PlantDefinition],
    pests: Sequence[PestDefinition],
    actions: Sequence[ActionDefinition],
    player_count: int,
    settings: GameSettings,
    rng: random.Random,
) -> list[DraftCard]:
    """
    Create every card instance for a game and shuffle them.

    Each catalog entry is copied `<kind>_copies_per_player * player_count`
    times. Instance ids are "<name>_<n>", unique within the deck.
    """
    counters: dict[str, int] = {}
    deck: list[DraftCard] = []

    def add_copies(definitions: Iterable, copies: int) -> None:
        for _ in range(copies):
            for definition in definitions:
                n = counters.get(definition.name, 0) + 1
                counters[definition.name] = n
                deck.append(instantiate(definition, f"{definition.name.lower()}_{n}"))

    add_copies(plants, settings.plant_copies_per_player * player_count)
    add_copies(pests, settings.pest_copies_per_player * player_count)
    add_copies(actions, settings.action_copies_per_player * player_count)

    return shuffle(deck, rng)


@dataclass
class DraftManager:
    """
    Moves cards from the deck into the draft zone and out again.

    Stateless apart from settings; all card zones live in GameState.
    """
    settings: GameSettings

    def draw(self, state: GameState) -> DraftCard | None:
        """Pop the top card of the deck, or None when it is empty."""
        if not state.deck:
            return None
        return state.deck.pop()

    def refill(self, state: GameState, allow_swarm: bool = True) -> list[DraftCard]:
        """
        Fill the draft zone up to capacity while the deck has cards.

        With swarm_on_refill enabled (and allow_swarm), a pest drawn here is
        not shown: every active player owes one more pest, the card goes back
        under the deck, and drawing continues. Once only pests are left in the
        deck they are shown like any other card.

        Returns the cards added to the draft zone.
        """
        swarm = allow_swarm and self.settings.swarm_on_refill
        added: list[DraftCard] = []

        while len(state.draft_zone) < self.settings.draft_size and state.deck:
            card = self.draw(state)
            if swarm and is_pest(card) and not all(is_pest(c) for c in state.deck):
                for player in state.players.values():
                    if not player.is_done:
                        player.pest_to_place += 1
                state.deck.insert(0, card)
                state.add_log(f"A {card.name} swarm arrives: every active player owes a pest")
                logger.debug("Swarm from %s; deck size %d", card.id, len(state.deck))
                continue
            state.draft_zone.append(card)
            added.append(card)

        if added:
            logger.debug("Draft refilled with %s", [c.id for c in added])
        return added

    def peek(self, state: GameState, index: int) -> DraftCard:
        """The draft card at index, or a PlacementError."""
        if not isinstance(index, int) or index < 0 or index >= len(state.draft_zone):
            raise PlacementError(
                ErrorCode.INVALID_DRAFT_INDEX,
                f"Invalid draft index {index} (draft zone holds {len(state.draft_zone)} cards)",
            )
        return state.draft_zone[index]

    def take(self, state: GameState, index: int) -> DraftCard:
        """Remove and return a draft card. Does not refill."""
        self.peek(state, index)
        return state.draft_zone.pop(index)

    def has_pest_supply(self, state: GameState) -> bool:
        return any(is_pest(c) for c in state.deck) or any(is_pest(c) for c in state.draft_zone)

    def take_pest(self, state: GameState) -> PestTile | None:
        """
        Take a pest card for an owed-pest placement.

        Prefers the topmost pest in the deck, then the first pest in the
        draft zone. The caller refills the draft zone afterwards.
        """
        for i in range(len(state.deck) - 1, -1, -1):
            if is_pest(state.deck[i]):
                return state.deck.pop(i)
        for i, card in enumerate(state.draft_zone):
            if is_pest(card):
                return state.draft_zone.pop(i)
        return None

    def supply_exhausted(self, state: GameState) -> bool:
        return not state.deck and not state.draft_zone
