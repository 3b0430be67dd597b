"""
Effect Resolver - Dispatches card effects.

Every card kind has exactly one entry point here:
- resolve_growth: a plant is grown (self target)
- resolve_spread: a pest lands on a plant (target player's garden)
- resolve_action: an action card is played (own tile)

Effects are plain functions looked up by (CardKind, card name). They get
an EffectContext and may only touch the player state inside it. Costs are
paid by the reducer before resolution, so effects never re-check them.
Cards without a table entry simply have no effect.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Optional

from .cards import ActionCard, CardKind, PestTile, PlantTile, Resource, Tile, is_plant
from .errors import ErrorCode, TargetError
from .state import PlayerState


@dataclass
class EffectContext:
    """
    Everything an effect may read or write.

    player is the state the effect mutates: the grower, the pest's target,
    or the player of an action card. notes collects human-readable results
    for the game log.
    """
    player: PlayerState
    neighbors: list[Optional[Tile]]
    max_resources: int
    tile: Optional[Tile] = None
    resolver: Optional[EffectResolver] = None
    notes: list[str] = field(default_factory=list)

    def add_points(self, points: int) -> None:
        self.player.score += points

    def gain(self, resource: Resource, amount: int) -> int:
        return self.player.gain(resource, amount, self.max_resources)

    def plant_neighbors(self) -> list[PlantTile]:
        return [t for t in self.neighbors if is_plant(t)]

    def empty_neighbors(self) -> int:
        return sum(1 for t in self.neighbors if t is None)

    def note(self, message: str) -> None:
        self.notes.append(message)


EffectFn = Callable[[EffectContext], None]
EffectTable = dict[tuple[CardKind, str], EffectFn]


@dataclass
class EffectResolver:
    """
    Resolves effects through a table keyed by (kind, name).

    The resolver does not own any game state.
    """
    effects: EffectTable
    max_resources: int

    def lookup(self, kind: CardKind, name: str) -> EffectFn | None:
        return self.effects.get((kind, name))

    def resolve_growth(
        self,
        player: PlayerState,
        tile: PlantTile,
        neighbors: list[Optional[Tile]],
    ) -> list[str]:
        """
        Mark the plant grown and run its growth effect.

        This is the only place `grown` is set, so a growth effect can run
        at most once per tile.
        """
        if tile.grown:
            raise TargetError(ErrorCode.ALREADY_GROWN, f"{tile.name} is already grown")
        tile.grown = True
        return self._run(CardKind.PLANT, tile.name, player, neighbors, tile)

    def resolve_spread(
        self,
        target: PlayerState,
        pest: PestTile,
        neighbors: list[Optional[Tile]],
    ) -> list[str]:
        """Apply a pest's spread effect to the player whose garden it landed in."""
        return self._run(CardKind.PEST, pest.name, target, neighbors, pest)

    def resolve_action(
        self,
        player: PlayerState,
        card: ActionCard,
        target_tile: Tile,
        neighbors: list[Optional[Tile]],
    ) -> list[str]:
        """Apply an action card's immediate effect against one of the player's tiles."""
        return self._run(CardKind.ACTION, card.name, player, neighbors, target_tile)

    def _run(
        self,
        kind: CardKind,
        name: str,
        player: PlayerState,
        neighbors: list[Optional[Tile]],
        tile: Tile,
    ) -> list[str]:
        effect = self.lookup(kind, name)
        if not effect:
            return []
        context = EffectContext(
            player=player,
            neighbors=neighbors,
            max_resources=self.max_resources,
            tile=tile,
            resolver=self,
        )
        effect(context)
        return context.notes
