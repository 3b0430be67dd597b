"""
Card definitions and card instances.

Definitions are immutable data shared by every instance of the same card.
They carry no behavior: effects are looked up by (kind, name) in the
effect resolver's table.

Instances are what moves between zones (deck, draft zone, garden cell,
discard pile). Each has a unique id and a reference to its definition.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class Resource(Enum):
    """Resource kinds a player can hold."""
    WATER = "water"
    LIGHT = "light"
    COMPOST = "compost"


class CardKind(Enum):
    """Closed set of card variants."""
    PLANT = "plant"
    PEST = "pest"
    ACTION = "action"


Cost = dict[Resource, int]


class _Definition:
    """Definitions are shared by reference, even across deep copies of a state."""

    def __deepcopy__(self, memo):
        return self


@dataclass(frozen=True)
class PlantDefinition(_Definition):
    """A plant card: scores on placement, can be grown once for its effect."""
    name: str
    growth_cost: Cost = field(default_factory=dict)
    base_points: int = 0
    effect: str = ""
    description: str = ""

    @property
    def can_grow(self) -> bool:
        """Plants without a growth cost only ever score their base points."""
        return bool(self.growth_cost)


@dataclass(frozen=True)
class PestDefinition(_Definition):
    """A pest card: damages the plant it lands on."""
    name: str
    damage: int
    effect: str = ""
    description: str = ""


class ActionTarget(Enum):
    """What an action card may be aimed at on the player's own garden."""
    ANY_TILE = "any_tile"
    GROWABLE_PLANT = "growable_plant"  # ungrown plant with a growth cost


@dataclass(frozen=True)
class ActionDefinition(_Definition):
    """An action card: pay its cost, apply an immediate effect, discard."""
    name: str
    resource_cost: Cost = field(default_factory=dict)
    target: ActionTarget = ActionTarget.ANY_TILE
    effect: str = ""
    description: str = ""


@dataclass(eq=False)
class PlantTile:
    """A plant card instance. `grown` flips to True at most once."""
    id: str
    definition: PlantDefinition
    grown: bool = False

    kind = CardKind.PLANT

    @property
    def name(self) -> str:
        return self.definition.name


@dataclass(eq=False)
class PestTile:
    """A pest card instance."""
    id: str
    definition: PestDefinition

    kind = CardKind.PEST

    @property
    def name(self) -> str:
        return self.definition.name


@dataclass(eq=False)
class ActionCard:
    """An action card instance. Never placed on a garden."""
    id: str
    definition: ActionDefinition

    kind = CardKind.ACTION

    @property
    def name(self) -> str:
        return self.definition.name


Tile = Union[PlantTile, PestTile]
DraftCard = Union[PlantTile, PestTile, ActionCard]


def is_plant(tile: object) -> bool:
    return isinstance(tile, PlantTile)


def is_pest(tile: object) -> bool:
    return isinstance(tile, PestTile)


def instantiate(definition, card_id: str) -> DraftCard:
    """Create a card instance of the right variant for a definition."""
    if isinstance(definition, PlantDefinition):
        return PlantTile(id=card_id, definition=definition)
    elif isinstance(definition, PestDefinition):
        return PestTile(id=card_id, definition=definition)
    elif isinstance(definition, ActionDefinition):
        return ActionCard(id=card_id, definition=definition)
    else:
        raise TypeError(f"Unknown card definition type: {type(definition).__name__}")


def format_cost(cost: Cost) -> str:
    if not cost:
        return "free"
    return ", ".join(f"{amount} {resource.value}" for resource, amount in cost.items())
