"""
Game State - Containers for players, zones and the shared draft.

Design principles:
- Mutated in place by the reducer, one operation at a time
- Validation happens before any mutation, so a rejected operation
  leaves the state exactly as it was
- snapshot()/clone() give callers a deep copy they can keep
"""

from __future__ import annotations
from dataclasses import dataclass, field
from copy import deepcopy
from enum import Enum
from typing import Iterator, Optional

from .cards import DraftCard, Resource, Tile, Cost


class TurnPhase(Enum):
    """Per-player phase. DONE is absorbing."""
    PLACE = "PLACE"
    GROW = "GROW"
    PEST = "PEST"
    END = "END"
    DONE = "DONE"


Garden = list[list[Optional[Tile]]]


@dataclass
class PlayerState:
    """
    State for a single player.

    resources is always kept within [0, max_resources]; use gain()
    and spend() rather than writing counts directly.
    """
    player_id: str
    garden: Garden
    score: int = 0
    resources: dict[Resource, int] = field(default_factory=dict)
    infestation: int = 0
    phase: TurnPhase = TurnPhase.PLACE
    pest_to_place: int = 0

    @property
    def is_done(self) -> bool:
        return self.phase == TurnPhase.DONE

    def tile_at(self, x: int, y: int) -> Tile | None:
        return self.garden[y][x]

    def can_afford(self, cost: Cost) -> bool:
        return all(self.resources.get(resource, 0) >= amount for resource, amount in cost.items())

    def spend(self, cost: Cost) -> None:
        """Pay a cost. Callers check can_afford() first."""
        for resource, amount in cost.items():
            self.resources[resource] -= amount

    def gain(self, resource: Resource, amount: int, cap: int) -> int:
        """Add resources up to the cap. Returns the amount actually gained."""
        before = self.resources.get(resource, 0)
        self.resources[resource] = min(cap, before + amount)
        return self.resources[resource] - before


@dataclass
class GameState:
    """
    Complete game state at a point in time.

    players keeps insertion order, which is the seating order.
    deck is a stack: the last element is the top card.
    """
    players: dict[str, PlayerState]
    current_player_id: str
    deck: list[DraftCard] = field(default_factory=list)
    draft_zone: list[DraftCard] = field(default_factory=list)
    discard: list[DraftCard] = field(default_factory=list)
    current_turn: int = 1
    log: list[str] = field(default_factory=list)
    winner: str | None = None

    @property
    def seating(self) -> list[str]:
        return list(self.players)

    @property
    def current_player(self) -> PlayerState:
        return self.players[self.current_player_id]

    @property
    def is_game_over(self) -> bool:
        return all(p.is_done for p in self.players.values())

    def get_player(self, player_id: str) -> PlayerState | None:
        return self.players.get(player_id)

    def opponents_of(self, player_id: str) -> list[PlayerState]:
        return [p for pid, p in self.players.items() if pid != player_id]

    def add_log(self, message: str) -> str:
        entry = f"[Turn {self.current_turn}] {message}"
        self.log.append(entry)
        return entry

    def iter_card_ids(self) -> Iterator[str]:
        """Every card instance id in every zone, with repeats if any exist."""
        for card in self.deck:
            yield card.id
        for card in self.draft_zone:
            yield card.id
        for card in self.discard:
            yield card.id
        for player in self.players.values():
            for row in player.garden:
                for tile in row:
                    if tile is not None:
                        yield tile.id

    def clone(self) -> GameState:
        """Deep copy the state. Card definitions stay shared."""
        return deepcopy(self)
