"""
Garden card effects.

One function per card that does something beyond its base points. The
EFFECTS table maps (CardKind, name) to the function; cards missing from
the table (Tree, Locust) have no effect.
"""

from __future__ import annotations

from ...engine_core.cards import CardKind, Resource, is_plant
from ...engine_core.effect_resolver import EffectContext, EffectTable
from ...engine_core.errors import ErrorCode, TargetError
from ...engine_core.garden import iter_tiles


def _named(ctx: EffectContext, name: str) -> int:
    return sum(1 for t in ctx.neighbors if t is not None and t.name == name)


def _grown_plant_neighbors(ctx: EffectContext) -> int:
    return sum(1 for t in ctx.plant_neighbors() if t.grown)


# ============================================================================
# Plant growth
# ============================================================================

def lavender(ctx: EffectContext) -> None:
    points = sum(1 for t in ctx.plant_neighbors() if t.name != "Lavender")
    ctx.add_points(points)
    ctx.note(f"+{points} points from neighbors")


def sunflower(ctx: EffectContext) -> None:
    if ctx.plant_neighbors():
        gained = ctx.gain(Resource.LIGHT, 2)
        ctx.add_points(1)
        ctx.note(f"+{gained} light, +1 point")


def mushroom(ctx: EffectContext) -> None:
    if _named(ctx, "Tree"):
        ctx.add_points(1)
        ctx.note("+1 point next to a Tree")


def daisy(ctx: EffectContext) -> None:
    points = len(ctx.plant_neighbors())
    ctx.add_points(points)
    ctx.note(f"+{points} points from neighbors")


def cactus(ctx: EffectContext) -> None:
    points = ctx.empty_neighbors()
    ctx.add_points(points)
    ctx.note(f"+{points} points from empty space")


def bamboo(ctx: EffectContext) -> None:
    points = 2 * _named(ctx, "Bamboo")
    ctx.add_points(points)
    ctx.note(f"+{points} points from bamboo cluster")


def vine(ctx: EffectContext) -> None:
    points = _grown_plant_neighbors(ctx)
    ctx.add_points(points)
    ctx.note(f"+{points} points from grown neighbors")


def fern(ctx: EffectContext) -> None:
    if _named(ctx, "Tree"):
        gained = ctx.gain(Resource.LIGHT, 1)
        ctx.add_points(1)
        ctx.note(f"+{gained} light, +1 point in tree shade")


def lemon_tree(ctx: EffectContext) -> None:
    ctx.add_points(5)
    ctx.player.pest_to_place += 1
    ctx.note("+5 points, attracts a pest")


def water_lily(ctx: EffectContext) -> None:
    gained = ctx.gain(Resource.WATER, ctx.empty_neighbors())
    ctx.add_points(1)
    ctx.note(f"+{gained} water, +1 point")


def honeysuckle(ctx: EffectContext) -> None:
    plants = len(ctx.plant_neighbors())
    gained = ctx.gain(Resource.WATER, plants)
    message = f"+{gained} water"
    if plants >= 2:
        ctx.add_points(1)
        message += ", +1 point"
    ctx.note(message)


def pumpkin(ctx: EffectContext) -> None:
    amount = 3 if _named(ctx, "Mushroom") else 1
    gained = ctx.gain(Resource.COMPOST, amount)
    ctx.add_points(1)
    ctx.note(f"+{gained} compost, +1 point")


def bean_plant(ctx: EffectContext) -> None:
    grown = _grown_plant_neighbors(ctx)
    gained = ctx.gain(Resource.COMPOST, grown)
    message = f"+{gained} compost"
    if grown:
        ctx.add_points(1)
        message += ", +1 point"
    ctx.note(message)


# ============================================================================
# Pest spread
# ============================================================================

def aphid(ctx: EffectContext) -> None:
    """The infested player loses a point for every plant next to the aphid."""
    penalty = len(ctx.plant_neighbors())
    ctx.add_points(-penalty)
    ctx.note(f"-{penalty} points from aphid spread")


# ============================================================================
# Actions
# ============================================================================

def fertilizer(ctx: EffectContext) -> None:
    tile = ctx.tile
    if not is_plant(tile) or tile.grown or not tile.definition.can_grow:
        raise TargetError(ErrorCode.INVALID_TARGET, "Fertilizer needs an ungrown plant that can grow")
    ctx.note(f"fertilized {tile.name}")
    for note in ctx.resolver.resolve_growth(ctx.player, tile, ctx.neighbors):
        ctx.note(note)


def watering(ctx: EffectContext) -> None:
    gained = ctx.gain(Resource.WATER, 3)
    ctx.note(f"+{gained} water")


def pruning(ctx: EffectContext) -> None:
    grown = sum(1 for _, _, t in iter_tiles(ctx.player.garden) if is_plant(t) and t.grown)
    ctx.add_points(2 * grown)
    ctx.note(f"+{2 * grown} points from {grown} grown plants")


def composting(ctx: EffectContext) -> None:
    gained = ctx.gain(Resource.COMPOST, 2)
    ctx.note(f"+{gained} compost")


def weather_boost(ctx: EffectContext) -> None:
    gained = ctx.gain(Resource.LIGHT, 2)
    ctx.add_points(1)
    ctx.note(f"+{gained} light, +1 point")


EFFECTS: EffectTable = {
    (CardKind.PLANT, "Lavender"): lavender,
    (CardKind.PLANT, "Sunflower"): sunflower,
    (CardKind.PLANT, "Mushroom"): mushroom,
    (CardKind.PLANT, "Daisy"): daisy,
    (CardKind.PLANT, "Cactus"): cactus,
    (CardKind.PLANT, "Bamboo"): bamboo,
    (CardKind.PLANT, "Vine"): vine,
    (CardKind.PLANT, "Fern"): fern,
    (CardKind.PLANT, "LemonTree"): lemon_tree,
    (CardKind.PLANT, "WaterLily"): water_lily,
    (CardKind.PLANT, "Honeysuckle"): honeysuckle,
    (CardKind.PLANT, "Pumpkin"): pumpkin,
    (CardKind.PLANT, "BeanPlant"): bean_plant,
    (CardKind.PEST, "Aphid"): aphid,
    (CardKind.ACTION, "Fertilizer"): fertilizer,
    (CardKind.ACTION, "Watering"): watering,
    (CardKind.ACTION, "Pruning"): pruning,
    (CardKind.ACTION, "Composting"): composting,
    (CardKind.ACTION, "WeatherBoost"): weather_boost,
}
