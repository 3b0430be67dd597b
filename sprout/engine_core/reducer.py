"""
Reducer - Applies actions to game state.

The reducer is the single point of state mutation.
All state changes must go through apply().

Design principles:
- Validates before applying: every handler raises a GameRuleError before
  its first write, so a rejected action leaves the state untouched
- Returns ActionResult with success/failure and a stable error code
- Delegates card effects to EffectResolver
- Delegates end of turn to the round coordinator
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import random

from ..config import GameSettings
from .action import Action, ActionResult, ActionType
from .action_generator import ActionGenerator, pest_cells
from .cards import ActionCard, ActionTarget, PestTile, PlantTile, format_cost, is_pest, is_plant
from .deck import DraftManager
from .effect_resolver import EffectResolver
from .errors import ErrorCode, GameRuleError, PlacementError, ResourceError, TargetError, TurnError
from .garden import in_bounds, neighbors
from .phases import advance_phase, require_phase
from .rounds import end_turn
from .state import GameState, PlayerState, TurnPhase

logger = logging.getLogger(__name__)


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Holds no game state of its own; the rng drives end-of-turn resource
    grants and is the only source of randomness after setup.
    """
    settings: GameSettings
    resolver: EffectResolver
    rng: random.Random = field(default_factory=random.Random)

    def __post_init__(self):
        self.draft = DraftManager(self.settings)
        self.generator = ActionGenerator(self.settings)

    def apply(self, state: GameState, action: Action) -> ActionResult:
        """
        Apply an action to the game state.

        Returns ActionResult with the updated state or the rule violation.
        """
        handler = self._get_handler(action.action_type)
        try:
            player = self._validate_turn(state, action)
            changes = handler(state, player, action)
        except GameRuleError as e:
            logger.info("Rejected %s from %s: %s", action.action_type.value, action.player_id, e.code.value)
            return ActionResult.failure(e.message, error_code=e.code.value)

        for change in changes:
            state.add_log(change)
        return ActionResult.success_with_state(state, changes=changes)

    def _validate_turn(self, state: GameState, action: Action) -> PlayerState:
        """Checks shared by every action; phase checks live in the handlers."""
        if state.is_game_over:
            raise TurnError(ErrorCode.GAME_OVER, "Game is over - no actions allowed")
        player = state.get_player(action.player_id)
        if player is None:
            raise TurnError(ErrorCode.UNKNOWN_PLAYER, f"Unknown player {action.player_id}")
        if player.player_id != state.current_player_id:
            raise TurnError(ErrorCode.NOT_YOUR_TURN, f"Not {player.player_id}'s turn")
        return player

    def _get_handler(self, action_type: ActionType):
        """Get the handler function for an action type."""
        handlers = {
            ActionType.PLACE_CARD: self._handle_place_card,
            ActionType.PLAY_ACTION_CARD: self._handle_play_action_card,
            ActionType.SKIP_PLACE_PHASE: self._handle_skip_place_phase,
            ActionType.GROW_PLANT: self._handle_grow_plant,
            ActionType.SKIP_GROW_PHASE: self._handle_skip_grow_phase,
            ActionType.PLACE_PEST: self._handle_place_pest,
            ActionType.NEXT_TURN: self._handle_next_turn,
        }
        return handlers[action_type]

    # ------------------------------------------------------------------
    # Shared checks
    # ------------------------------------------------------------------

    def _check_cell(self, x, y) -> None:
        size = self.settings.grid_size
        valid = all(isinstance(v, int) and not isinstance(v, bool) for v in (x, y))
        if not valid or not in_bounds(x, y, size):
            raise PlacementError(
                ErrorCode.OUT_OF_BOUNDS,
                f"({x},{y}) is outside the {size}x{size} garden",
            )

    def _can_receive_pest(self, state: GameState, player: PlayerState) -> bool:
        """An owed pest can be placed: a pest card exists and a cell is free of pests."""
        return self.draft.has_pest_supply(state) and next(pest_cells(player.garden), None) is not None

    def _advance(self, state: GameState, player: PlayerState) -> TurnPhase:
        before = player.pest_to_place
        phase = advance_phase(
            player,
            max_infestations=self.settings.max_infestations,
            supply_exhausted=self.draft.supply_exhausted(state),
            has_pest_supply=self._can_receive_pest(state, player),
        )
        if before and not player.pest_to_place:
            state.add_log(f"{player.player_id} had {before} owed pest(s) cancelled: nowhere to place them")
        return phase

    # ------------------------------------------------------------------
    # Placement phase
    # ------------------------------------------------------------------

    def _handle_place_card(self, state: GameState, player: PlayerState, action: Action) -> list[str]:
        """Place a drafted plant on an empty cell of the player's own garden."""
        p = action.payload
        require_phase(player, TurnPhase.PLACE, "place a card")
        card = self.draft.peek(state, p.draft_index)
        if not isinstance(card, PlantTile):
            raise PlacementError(
                ErrorCode.WRONG_CARD_KIND,
                f"{card.name} is a {card.kind.value} card, not a plant",
            )
        self._check_cell(p.x, p.y)
        if player.tile_at(p.x, p.y) is not None:
            raise PlacementError(ErrorCode.CELL_OCCUPIED, f"({p.x},{p.y}) is already occupied")

        self.draft.take(state, p.draft_index)
        player.score += card.definition.base_points
        player.garden[p.y][p.x] = card
        self.draft.refill(state)
        self._advance(state, player)
        return [f"{player.player_id} placed {card.name} at ({p.x},{p.y}) (+{card.definition.base_points} points)"]

    def _handle_play_action_card(self, state: GameState, player: PlayerState, action: Action) -> list[str]:
        """Pay for a drafted action card and apply it to one of the player's tiles."""
        p = action.payload
        require_phase(player, TurnPhase.PLACE, "play an action card")
        card = self.draft.peek(state, p.draft_index)
        if not isinstance(card, ActionCard):
            raise PlacementError(
                ErrorCode.WRONG_CARD_KIND,
                f"{card.name} is a {card.kind.value} card, not an action",
            )
        cost = card.definition.resource_cost
        if not player.can_afford(cost):
            raise ResourceError(
                ErrorCode.INSUFFICIENT_RESOURCES,
                f"{card.name} costs {format_cost(cost)}",
            )
        self._check_cell(p.x, p.y)
        tile = player.tile_at(p.x, p.y)
        if tile is None:
            raise TargetError(ErrorCode.EMPTY_TARGET, f"No tile at ({p.x},{p.y})")
        if card.definition.target == ActionTarget.GROWABLE_PLANT:
            if not is_plant(tile) or tile.grown or not tile.definition.can_grow:
                raise TargetError(
                    ErrorCode.INVALID_TARGET,
                    f"{card.name} needs an ungrown plant that can grow, found {tile.name}",
                )

        self.draft.take(state, p.draft_index)
        player.spend(cost)
        notes = self.resolver.resolve_action(player, card, tile, neighbors(player.garden, p.x, p.y))
        state.discard.append(card)
        self.draft.refill(state)
        self._advance(state, player)
        summary = f"{player.player_id} played {card.name} on {tile.name} at ({p.x},{p.y})"
        if notes:
            summary += f": {'; '.join(notes)}"
        return [summary]

    def _handle_skip_place_phase(self, state: GameState, player: PlayerState, action: Action) -> list[str]:
        """Give up the placement phase. Only legal when nothing can be placed."""
        require_phase(player, TurnPhase.PLACE, "skip the placement phase")
        if self.generator.has_legal_placement(state, player):
            raise TurnError(ErrorCode.PLACEMENT_AVAILABLE, "A card in the draft zone can still be placed")

        message = f"{player.player_id} could not place anything"
        if state.draft_zone:
            burned = self.draft.take(state, 0)
            state.discard.append(burned)
            message += f" and discarded {burned.name}"
        self.draft.refill(state)
        self._advance(state, player)
        return [message]

    # ------------------------------------------------------------------
    # Pests
    # ------------------------------------------------------------------

    def _handle_place_pest(self, state: GameState, player: PlayerState, action: Action) -> list[str]:
        """
        Place a pest.

        A drafted pest (draft_index given) is played during PLACE on an
        active opponent. An owed pest is placed during PEST on the player's
        own garden and taken from the pest supply.
        """
        p = action.payload
        drafted = p.draft_index is not None

        if drafted:
            require_phase(player, TurnPhase.PLACE, "play a pest")
            card = self.draft.peek(state, p.draft_index)
            if not isinstance(card, PestTile):
                raise PlacementError(
                    ErrorCode.WRONG_CARD_KIND,
                    f"{card.name} is a {card.kind.value} card, not a pest",
                )
            if p.target_player_id is None or p.target_player_id == player.player_id:
                raise TargetError(ErrorCode.PEST_ON_SELF, "Drafted pests must be played on an opponent")
            target = state.get_player(p.target_player_id)
            if target is None:
                raise TargetError(ErrorCode.UNKNOWN_TARGET_PLAYER, f"Unknown player {p.target_player_id}")
            if target.is_done:
                raise TargetError(ErrorCode.TARGET_PLAYER_DONE, f"{target.player_id} is done playing")
        else:
            require_phase(player, TurnPhase.PEST, "place an owed pest")
            if p.target_player_id not in (None, player.player_id):
                raise TargetError(ErrorCode.INVALID_TARGET, "Owed pests go on your own garden")
            if not self.draft.has_pest_supply(state):
                raise TargetError(ErrorCode.NO_PEST_SUPPLY, "No pest cards left to place")
            target = player

        self._check_cell(p.x, p.y)
        existing = target.tile_at(p.x, p.y)
        if is_pest(existing):
            raise PlacementError(ErrorCode.PEST_ON_PEST, f"({p.x},{p.y}) already holds a {existing.name}")

        if drafted:
            pest = self.draft.take(state, p.draft_index)
        else:
            pest = self.draft.take_pest(state)

        around = neighbors(target.garden, p.x, p.y)
        message = f"{player.player_id} placed {pest.name} on {target.player_id}'s garden at ({p.x},{p.y})"
        if is_plant(existing):
            damage = pest.definition.damage
            target.score -= damage
            state.discard.append(existing)
            message += f", destroying {existing.name} (-{damage} points)"
            notes = self.resolver.resolve_spread(target, pest, around)
            if notes:
                message += f"; {'; '.join(notes)}"
        target.garden[p.y][p.x] = pest

        if any(is_pest(t) for t in around) and target.infestation < self.settings.max_infestations:
            target.infestation += 1
            message += f"; infestation now {target.infestation}"

        if not drafted:
            player.pest_to_place -= 1

        self.draft.refill(state)
        self._advance(state, player)
        return [message]

    # ------------------------------------------------------------------
    # Grow phase
    # ------------------------------------------------------------------

    def _handle_grow_plant(self, state: GameState, player: PlayerState, action: Action) -> list[str]:
        """Pay a plant's growth cost and run its growth effect."""
        p = action.payload
        require_phase(player, TurnPhase.GROW, "grow a plant")
        self._check_cell(p.x, p.y)
        tile = player.tile_at(p.x, p.y)
        if not is_plant(tile):
            raise TargetError(ErrorCode.NOT_A_PLANT, f"No plant at ({p.x},{p.y})")
        if tile.grown:
            raise TargetError(ErrorCode.ALREADY_GROWN, f"{tile.name} is already grown")
        cost = tile.definition.growth_cost
        if not tile.definition.can_grow:
            raise TargetError(ErrorCode.NO_GROWTH_COST, f"{tile.name} has no growth cost and cannot be grown")
        if not player.can_afford(cost):
            raise ResourceError(
                ErrorCode.INSUFFICIENT_RESOURCES,
                f"Growing {tile.name} costs {format_cost(cost)}",
            )

        player.spend(cost)
        notes = self.resolver.resolve_growth(player, tile, neighbors(player.garden, p.x, p.y))
        self._advance(state, player)
        summary = f"{player.player_id} grew {tile.name} at ({p.x},{p.y})"
        if notes:
            summary += f": {'; '.join(notes)}"
        return [summary]

    def _handle_skip_grow_phase(self, state: GameState, player: PlayerState, action: Action) -> list[str]:
        require_phase(player, TurnPhase.GROW, "skip the grow phase")
        self._advance(state, player)
        return [f"{player.player_id} skipped growing"]

    # ------------------------------------------------------------------
    # End of turn
    # ------------------------------------------------------------------

    def _handle_next_turn(self, state: GameState, player: PlayerState, action: Action) -> list[str]:
        require_phase(player, TurnPhase.END, "end the turn")
        return end_turn(state, self.settings, self.draft, self.rng)
