"""
Action Generator - Generates all legal actions from a game state.

The action generator is used by:
1. Bots to enumerate possible moves
2. The reducer, to decide whether a placement phase may be skipped
3. Tests that walk whole games through reachable states

Design: Generates Action objects, not just action types.
This ensures all generated actions are fully specified.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator

from ..config import GameSettings
from .action import Action
from .cards import ActionCard, ActionTarget, PestTile, PlantTile, is_pest, is_plant
from .deck import DraftManager
from .garden import empty_cells, iter_tiles
from .state import GameState, Garden, PlayerState, TurnPhase


def pest_cells(garden: Garden) -> Iterator[tuple[int, int]]:
    """Cells a pest may land on: anything that is not already a pest."""
    for y, row in enumerate(garden):
        for x, cell in enumerate(row):
            if not is_pest(cell):
                yield x, y


def action_card_cells(player: PlayerState, card: ActionCard) -> Iterator[tuple[int, int]]:
    """Cells of the player's own garden the action card may target."""
    for x, y, tile in iter_tiles(player.garden):
        if card.definition.target == ActionTarget.GROWABLE_PLANT:
            if not (is_plant(tile) and not tile.grown and tile.definition.can_grow):
                continue
        yield x, y


def growable_cells(player: PlayerState) -> Iterator[tuple[int, int]]:
    """Ungrown plants with a growth cost the player can pay right now."""
    for x, y, tile in iter_tiles(player.garden):
        if (
            is_plant(tile)
            and not tile.grown
            and tile.definition.can_grow
            and player.can_afford(tile.definition.growth_cost)
        ):
            yield x, y


def pest_targets(state: GameState, player: PlayerState) -> list[PlayerState]:
    """Opponents a drafted pest may be played on."""
    return [p for p in state.opponents_of(player.player_id) if not p.is_done]


@dataclass
class ActionGenerator:
    """
    Generates legal actions for the current game state.

    Every action it returns is accepted by the reducer.
    """
    settings: GameSettings

    def generate(self, state: GameState) -> list[Action]:
        """
        Generate all legal actions for the current player.

        Returns a list of fully-specified Action objects.
        """
        if state.is_game_over:
            return []

        player = state.current_player
        pid = player.player_id

        if player.phase == TurnPhase.PLACE:
            actions = list(self._placements(state, player))
            if not actions:
                actions.append(Action.skip_place_phase(pid))
            return actions

        if player.phase == TurnPhase.GROW:
            actions = [Action.grow_plant(pid, x, y) for x, y in growable_cells(player)]
            actions.append(Action.skip_grow_phase(pid))
            return actions

        if player.phase == TurnPhase.PEST:
            if not DraftManager(self.settings).has_pest_supply(state):
                return []
            return [Action.place_pest(pid, x, y) for x, y in pest_cells(player.garden)]

        if player.phase == TurnPhase.END:
            return [Action.next_turn(pid)]

        return []

    def has_legal_placement(self, state: GameState, player: PlayerState) -> bool:
        """Whether any draft card can be placed or played right now."""
        return next(self._placements(state, player), None) is not None

    def _placements(self, state: GameState, player: PlayerState) -> Iterator[Action]:
        pid = player.player_id
        for index, card in enumerate(state.draft_zone):
            if isinstance(card, PlantTile):
                for x, y in empty_cells(player.garden):
                    yield Action.place_card(pid, index, x, y)
            elif isinstance(card, ActionCard):
                if not player.can_afford(card.definition.resource_cost):
                    continue
                for x, y in action_card_cells(player, card):
                    yield Action.play_action_card(pid, index, x, y)
            elif isinstance(card, PestTile):
                for target in pest_targets(state, player):
                    for x, y in pest_cells(target.garden):
                        yield Action.place_pest(pid, x, y, draft_index=index, target_player_id=target.player_id)
            else:
                raise TypeError(f"Unknown draft card type: {type(card).__name__}")
