"""
Tests for sessions and the bot loop.
"""

import pytest

from ..bots import FirstLegalPolicy, RandomPolicy
from ..bots.policy import BotDecision, BotPolicy
from ..config import GameSettings
from ..engine_core.action import Action
from ..games.garden import GardenGame
from ..session import GameLoop, LoopState, SessionManager, SessionState


class TestSessionManager:
    """Session lifecycle."""

    @pytest.fixture
    def manager(self):
        return SessionManager()

    def test_create_and_get(self, manager):
        session = manager.create_session(["alice", "bob"], seed=1)

        assert manager.get_session(session.session_id) is session
        assert session.state == SessionState.ACTIVE
        assert session.game.settings is manager.settings
        assert not session.is_bot_turn()

    def test_separate_games(self, manager):
        """Two sessions never share state."""
        first = manager.create_session(["alice", "bob"], seed=1)
        second = manager.create_session(["alice", "bob"], seed=1)

        first.game.state.players["alice"].score = 10

        assert second.game.state.players["alice"].score == 0
        assert first.game is not second.game

    def test_custom_settings(self, manager):
        settings = GameSettings(grid_size=3)
        session = manager.create_session(["alice", "bob"], settings=settings)
        assert len(session.game.state.players["alice"].garden) == 3

    def test_bot_for_unknown_seat(self, manager):
        with pytest.raises(ValueError):
            manager.create_session(["alice", "bob"], bots={"carol": RandomPolicy(1)})

    def test_reset_keeps_players_and_settings(self, manager):
        settings = GameSettings(grid_size=4)
        session = manager.create_session(["alice", "bob"], seed=1, settings=settings)
        old_game = session.game

        assert manager.reset_session(session.session_id, seed=2) is session
        assert session.game is not old_game
        assert session.game.player_ids == ["alice", "bob"]
        assert session.game.settings is settings
        assert session.game.seed == 2

    def test_reset_unknown(self, manager):
        assert manager.reset_session("missing") is None

    def test_end_session(self, manager):
        session = manager.create_session(["alice", "bob"])

        assert manager.end_session(session.session_id)

        assert session.state == SessionState.ABANDONED
        assert manager.get_session(session.session_id) is None
        assert not manager.end_session(session.session_id)

    def test_list_active(self, manager):
        running = manager.create_session(["alice", "bob"])
        finished = manager.create_session(["carol", "dave"], seed=3)
        GameLoop(finished.game, {"carol": RandomPolicy(1), "dave": RandomPolicy(2)}).run()

        assert finished.state == SessionState.GAME_OVER
        assert manager.list_active_sessions() == [running.session_id]
        assert len(manager.list_sessions()) == 2

    def test_cleanup_removes_only_finished(self, manager):
        running = manager.create_session(["alice", "bob"])
        finished = manager.create_session(["carol", "dave"], seed=3)
        GameLoop(finished.game, {"carol": RandomPolicy(1), "dave": RandomPolicy(2)}).run()

        removed = manager.cleanup_stale_sessions(max_age_seconds=-1)

        assert removed == [finished.session_id]
        assert manager.get_session(running.session_id) is running


class TestGameLoop:
    """Bot loop driver."""

    def test_stops_for_human_seat(self):
        game = GardenGame(["alice", "bob"], seed=4)
        result = GameLoop(game, {"bob": RandomPolicy(1)}).run()

        assert result.loop_state == LoopState.WAITING_HUMAN_ACTION
        assert result.steps == 0
        assert result.bot_actions == []

    def test_plays_bot_turn(self):
        game = GardenGame(["bot", "alice"], seed=4)
        result = GameLoop(game, {"bot": FirstLegalPolicy()}).run()

        assert result.success
        assert result.loop_state == LoopState.WAITING_HUMAN_ACTION
        assert game.state.current_player_id == "alice"
        assert result.bot_actions[0].startswith("bot: ")

    def test_step_limit(self):
        game = GardenGame(["a", "b"], seed=4)
        result = GameLoop(game, {"a": RandomPolicy(1), "b": RandomPolicy(2)}).run(max_steps=3)

        assert not result.success
        assert result.loop_state == LoopState.STEP_LIMIT
        assert result.steps == 3

    def test_game_over(self):
        game = GardenGame(["a", "b"], seed=4)
        seen = []
        result = GameLoop(game, {"a": RandomPolicy(1), "b": RandomPolicy(2)}, on_step=seen.append).run()

        assert result.loop_state == LoopState.GAME_OVER
        assert result.winner == game.get_winner()
        assert len(seen) == result.steps
        assert GameLoop(game, {"a": RandomPolicy(1)}).step() is None

    def test_illegal_bot_action(self):
        class Cheater(BotPolicy):
            def select_action(self, state, legal_actions):
                return BotDecision(action=Action.next_turn("a"))

        game = GardenGame(["a", "b"], seed=4)
        with pytest.raises(RuntimeError, match="Cheater"):
            GameLoop(game, {"a": Cheater()}).step()


class TestPolicies:

    def test_random_policy_is_seeded(self):
        game = GardenGame(["a", "b"], seed=4)
        legal = game.legal_actions()
        first = RandomPolicy(7).select_action(game.state, legal)
        second = RandomPolicy(7).select_action(game.state, legal)
        assert first.action is second.action
        assert first.evaluated_actions == len(legal)

    @pytest.mark.parametrize("policy", [RandomPolicy(1), FirstLegalPolicy()])
    def test_no_actions(self, policy):
        with pytest.raises(ValueError):
            policy.select_action(None, [])
