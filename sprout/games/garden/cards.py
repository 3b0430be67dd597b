"""
Garden Cards - Plant, pest and action catalogs.

Card structure:
- Plants: growth cost, base points scored on placement, growth effect
- Pests: damage dealt when landing on a plant, optional spread effect
- Actions: resource cost, immediate effect

The effect text here is descriptive only; behavior lives in effects.py.
"""

from __future__ import annotations

from ...engine_core.cards import (
    ActionDefinition,
    ActionTarget,
    PestDefinition,
    PlantDefinition,
    Resource,
)

WATER = Resource.WATER
LIGHT = Resource.LIGHT
COMPOST = Resource.COMPOST


# ============================================================================
# Plants
# ============================================================================

LAVENDER = PlantDefinition(
    name="Lavender",
    growth_cost={WATER: 1, LIGHT: 1},
    base_points=2,
    effect="+1 point for each plant neighbor (excluding Lavender)",
    description="Thrives near other plants, but not near other Lavenders.",
)

SUNFLOWER = PlantDefinition(
    name="Sunflower",
    growth_cost={WATER: 1},
    base_points=2,
    effect="+2 light if at least 1 plant neighbor, +1 point",
    description="Loves light, even more when near other plants.",
)

MUSHROOM = PlantDefinition(
    name="Mushroom",
    growth_cost={COMPOST: 2},
    base_points=1,
    effect="+1 point if next to a Tree",
    description="Grows well near trees.",
)

TREE = PlantDefinition(
    name="Tree",
    growth_cost={},
    base_points=3,
    effect="No special effect",
    description="Strong and steady. Provides shade for some plants.",
)

DAISY = PlantDefinition(
    name="Daisy",
    growth_cost={WATER: 1, LIGHT: 1},
    base_points=1,
    effect="+1 point for each plant neighbor",
    description="Loves being around other plants.",
)

CACTUS = PlantDefinition(
    name="Cactus",
    growth_cost={LIGHT: 2},
    base_points=1,
    effect="+1 point for each empty adjacent space (no plants or pests)",
    description="Thrives in isolation from both plants and pests.",
)

BAMBOO = PlantDefinition(
    name="Bamboo",
    growth_cost={WATER: 1, COMPOST: 1},
    base_points=2,
    effect="+2 points for each adjacent Bamboo",
    description="Grows in clusters with other bamboo.",
)

VINE = PlantDefinition(
    name="Vine",
    growth_cost={WATER: 1, LIGHT: 1},
    base_points=0,
    effect="+1 point for each grown plant neighbor",
    description="Benefits from grown plants nearby.",
)

FERN = PlantDefinition(
    name="Fern",
    growth_cost={WATER: 1},
    base_points=1,
    effect="+1 light and +1 point if next to a Tree",
    description="Grows in tree shade.",
)

LEMON_TREE = PlantDefinition(
    name="LemonTree",
    growth_cost={WATER: 1, LIGHT: 1, COMPOST: 1},
    base_points=1,
    effect="+5 points and +1 pest to place",
    description="Beautiful but attracts pests.",
)

WATER_LILY = PlantDefinition(
    name="WaterLily",
    growth_cost={LIGHT: 1},
    base_points=1,
    effect="+1 water per empty space, +1 point",
    description="Collects water from open surroundings.",
)

HONEYSUCKLE = PlantDefinition(
    name="Honeysuckle",
    growth_cost={COMPOST: 1},
    base_points=1,
    effect="+1 water per plant neighbor, +1 point if 2 or more plant neighbors",
    description="Draws water from nearby plants.",
)

PUMPKIN = PlantDefinition(
    name="Pumpkin",
    growth_cost={WATER: 1, LIGHT: 1},
    base_points=2,
    effect="+1 compost (+3 if next to Mushroom) and +1 point",
    description="Thrives with fungi.",
)

BEAN_PLANT = PlantDefinition(
    name="BeanPlant",
    growth_cost={WATER: 1},
    base_points=1,
    effect="+1 compost per grown neighbor, +1 point if any grown neighbor",
    description="Improves soil around mature plants.",
)


# ============================================================================
# Pests
# ============================================================================

APHID = PestDefinition(
    name="Aphid",
    damage=1,
    effect="Reduces plant points by 1; -1 point per neighboring plant",
    description="Small but persistent pest that weakens plants.",
)

LOCUST = PestDefinition(
    name="Locust",
    damage=3,
    effect="Destroys plant completely",
    description="Devastating pest that completely destroys plants.",
)


# ============================================================================
# Actions
# ============================================================================

FERTILIZER = ActionDefinition(
    name="Fertilizer",
    resource_cost={COMPOST: 1},
    target=ActionTarget.GROWABLE_PLANT,
    effect="Grow a plant instantly without paying its growth cost",
    description="Rich nutrients that accelerate plant growth.",
)

WATERING = ActionDefinition(
    name="Watering",
    resource_cost={},
    effect="+3 water resources",
    description="Abundant water for your garden.",
)

PRUNING = ActionDefinition(
    name="Pruning",
    resource_cost={LIGHT: 1},
    effect="+2 points for each grown plant",
    description="Careful maintenance improves plant health.",
)

COMPOSTING = ActionDefinition(
    name="Composting",
    resource_cost={},
    effect="+2 compost resources",
    description="Natural fertilizer from organic waste.",
)

WEATHER_BOOST = ActionDefinition(
    name="WeatherBoost",
    resource_cost={},
    effect="+2 light resources and +1 point",
    description="Perfect weather conditions boost your garden.",
)


# ============================================================================
# Catalogs
# ============================================================================

PLANT_LIBRARY: tuple[PlantDefinition, ...] = (
    LAVENDER,
    SUNFLOWER,
    MUSHROOM,
    TREE,
    DAISY,
    CACTUS,
    BAMBOO,
    VINE,
    FERN,
    LEMON_TREE,
    WATER_LILY,
    HONEYSUCKLE,
    PUMPKIN,
    BEAN_PLANT,
)

PEST_LIBRARY: tuple[PestDefinition, ...] = (APHID, LOCUST)

ACTION_LIBRARY: tuple[ActionDefinition, ...] = (
    FERTILIZER,
    WATERING,
    PRUNING,
    COMPOSTING,
    WEATHER_BOOST,
)


def _by_name(catalog, name: str):
    for definition in catalog:
        if definition.name == name:
            return definition
    return None


def get_plant(name: str) -> PlantDefinition | None:
    """Look up a plant by name."""
    return _by_name(PLANT_LIBRARY, name)


def get_pest(name: str) -> PestDefinition | None:
    """Look up a pest by name."""
    return _by_name(PEST_LIBRARY, name)


def get_action(name: str) -> ActionDefinition | None:
    """Look up an action card by name."""
    return _by_name(ACTION_LIBRARY, name)
