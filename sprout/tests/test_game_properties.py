"""
Whole-game checks.

Seeded random bots play complete games; after every accepted operation
the state is checked against the rules that must always hold.
"""

from collections import Counter

import pytest

from ..bots import FirstLegalPolicy, RandomPolicy
from ..config import GameSettings
from ..engine_core.cards import is_plant
from ..engine_core.garden import iter_tiles
from ..engine_core.phases import TRANSITIONS
from ..engine_core.state import TurnPhase
from ..games.garden import GardenGame
from ..session import GameLoop, LoopState


class StateWatcher:
    """on_step callback comparing each state with the previous one."""

    def __init__(self, game: GardenGame):
        self.settings = game.settings
        self.total = sum(1 for _ in game.state.iter_card_ids())
        self.previous = self.capture(game)
        self.steps = 0

    def capture(self, game):
        return {
            pid: {
                "phase": p.phase,
                "score": p.score,
                "resources": dict(p.resources),
                "infestation": p.infestation,
                "grown": {(x, y): t.id for x, y, t in iter_tiles(p.garden) if is_plant(t) and t.grown},
            }
            for pid, p in game.state.players.items()
        }

    def __call__(self, game):
        state = game.state
        self.steps += 1

        ids = Counter(state.iter_card_ids())
        assert sum(ids.values()) == self.total
        assert all(n == 1 for n in ids.values())

        current = self.capture(game)
        for pid, player in state.players.items():
            before = self.previous[pid]
            assert all(0 <= n <= self.settings.max_resources for n in player.resources.values())
            assert 0 <= player.infestation <= self.settings.max_infestations
            assert player.pest_to_place >= 0

            if before["phase"] == TurnPhase.DONE:
                assert current[pid] == before
            elif player.phase != before["phase"]:
                assert player.phase in TRANSITIONS[before["phase"]]

            # a grown tile stays grown until a pest removes it from the garden
            for cell, tile_id in before["grown"].items():
                tile = player.garden[cell[1]][cell[0]]
                if tile is not None and tile.id == tile_id:
                    assert tile.grown

        if state.is_game_over:
            assert state.winner == expected_winner(state)
        self.previous = current


def expected_winner(state):
    best = max(p.score for p in state.players.values())
    leaders = [p for p in state.players.values() if p.score == best]
    fewest = min(p.infestation for p in leaders)
    return next(p.player_id for p in leaders if p.infestation == fewest)


def play(players, seed, settings=None, policies=None):
    game = GardenGame(players, settings=settings, seed=seed)
    watcher = StateWatcher(game)
    bots = policies or {pid: RandomPolicy(seed + i) for i, pid in enumerate(players)}
    result = GameLoop(game, bots, on_step=watcher).run(max_steps=5_000)
    return game, watcher, result


class TestRandomGames:
    """Random bots always finish and never break a rule."""

    @pytest.mark.parametrize("seed", [1, 2, 3, 7, 42])
    def test_two_player_games(self, seed):
        game, watcher, result = play(["alice", "bob"], seed)

        assert result.loop_state == LoopState.GAME_OVER
        assert watcher.steps == result.steps
        assert game.get_winner() in ("alice", "bob")

    def test_four_player_game(self):
        game, _, result = play(["a", "b", "c", "d"], 11)

        assert result.loop_state == LoopState.GAME_OVER
        assert sum(1 for _ in game.state.iter_card_ids()) == 78 * 4

    @pytest.mark.parametrize("seed", [5, 6])
    def test_swarm_variant(self, seed):
        settings = GameSettings(swarm_on_refill=True)
        _, _, result = play(["alice", "bob", "carol"], seed, settings=settings)
        assert result.loop_state == LoopState.GAME_OVER

    def test_small_garden(self):
        settings = GameSettings(grid_size=2)
        game, _, result = play(["alice", "bob"], 9, settings=settings)
        assert result.loop_state == LoopState.GAME_OVER
        assert game.state.deck

    def test_first_legal_bots(self):
        policies = {"alice": FirstLegalPolicy(), "bob": FirstLegalPolicy()}
        _, _, result = play(["alice", "bob"], 4, policies=policies)
        assert result.loop_state == LoopState.GAME_OVER


class TestDeterminism:
    """The same seed and the same operations give the same game."""

    def test_same_seed_same_log(self):
        first, _, _ = play(["alice", "bob"], 21)
        second, _, _ = play(["alice", "bob"], 21)

        assert first.state.log == second.state.log
        assert first.get_winner() == second.get_winner()

    def test_different_seed_different_deck(self):
        first = GardenGame(["alice", "bob"], seed=1)
        second = GardenGame(["alice", "bob"], seed=2)
        assert [c.id for c in first.state.deck] != [c.id for c in second.state.deck]

    def test_snapshot_is_independent(self):
        game = GardenGame(["alice", "bob"], seed=3)
        snapshot = game.snapshot()

        GameLoop(game, {"alice": RandomPolicy(0), "bob": RandomPolicy(1)}).run(max_steps=20)

        assert snapshot.current_turn == 1
        assert all(p.score == 0 for p in snapshot.players.values())
        assert len(snapshot.log) < len(game.state.log)
        assert snapshot.draft_zone[0] is not game.state.draft_zone[0]
