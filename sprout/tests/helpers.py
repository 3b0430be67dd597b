"""
Helpers for arranging game states in tests.

Every helper moves existing card instances between zones, so the set of
card ids in a game never changes.
"""

from ..engine_core.cards import DraftCard, PlantTile
from ..engine_core.state import GameState


def pull_card(state: GameState, name: str) -> DraftCard:
    """Remove the first card with this name from the draft zone or the deck."""
    for zone in (state.draft_zone, state.deck):
        for card in zone:
            if card.name == name:
                zone.remove(card)
                return card
    raise LookupError(f"No {name} left in draft zone or deck")


def arrange_draft(state: GameState, *names: str, capacity: int = 5) -> list[DraftCard]:
    """
    Put cards with the given names at the front of the draft zone.

    Cards pushed past capacity go back on top of the deck.
    """
    chosen = [pull_card(state, name) for name in names]
    state.draft_zone[:0] = chosen
    while len(state.draft_zone) > capacity:
        state.deck.append(state.draft_zone.pop())
    return chosen


def put_tile(state: GameState, player_id: str, name: str, x: int, y: int, grown: bool = False):
    """Place a card from the supply straight onto a garden cell."""
    tile = pull_card(state, name)
    if isinstance(tile, PlantTile):
        tile.grown = grown
    state.players[player_id].garden[y][x] = tile
    return tile


def player_fingerprint(state: GameState, player_id: str) -> tuple:
    """Comparable summary of everything a rejected action must not change."""
    p = state.players[player_id]
    garden = tuple(
        tuple((t.id, getattr(t, "grown", None)) if t else None for t in row)
        for row in p.garden
    )
    return (
        p.score,
        tuple(sorted((r.value, n) for r, n in p.resources.items())),
        p.infestation,
        p.phase,
        p.pest_to_place,
        garden,
    )


def zone_fingerprint(state: GameState) -> tuple:
    return (
        tuple(c.id for c in state.deck),
        tuple(c.id for c in state.draft_zone),
        tuple(c.id for c in state.discard),
        state.current_player_id,
        state.current_turn,
        len(state.log),
    )


def state_fingerprint(state: GameState) -> tuple:
    return (zone_fingerprint(state),) + tuple(player_fingerprint(state, pid) for pid in state.players)
