"""
Game Loop - Drives bot-controlled seats.

The loop:
1. Ask the current seat's policy for a decision among the legal actions
2. Apply it through the game
3. Repeat until a human seat is up, the game ends, or a step limit is hit

Used by the simulator (every seat is a bot) and by tests that walk whole
games through reachable states.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import Callable

from ..bots import BotPolicy
from ..games.garden import GardenGame

logger = logging.getLogger(__name__)


class LoopState(Enum):
    """Why the loop stopped."""
    WAITING_HUMAN_ACTION = "waiting_human_action"
    GAME_OVER = "game_over"
    STEP_LIMIT = "step_limit"


@dataclass
class TurnResult:
    """Result of running the loop."""
    success: bool
    loop_state: LoopState
    steps: int = 0
    bot_actions: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    winner: str | None = None


class GameLoop:
    """
    The bot loop driver.

    Usage:
        loop = GameLoop(game, {"alice": RandomPolicy(1), "bob": RandomPolicy(2)})
        result = loop.run()
    """

    def __init__(
        self,
        game: GardenGame,
        bots: dict[str, BotPolicy],
        on_step: Callable[[GardenGame], None] | None = None,
    ):
        self.game = game
        self.bots = bots
        self.on_step = on_step

    def step(self) -> str | None:
        """
        Play one bot action for the current seat.

        Returns a description of the action, or None when the current seat
        has no bot or the game is over.
        """
        if self.game.is_game_over():
            return None
        player_id = self.game.state.current_player_id
        bot = self.bots.get(player_id)
        if bot is None:
            return None

        legal = self.game.legal_actions()
        decision = bot.select_action(self.game.state, legal)
        result = self.game.apply(decision.action)
        if not result.success:
            raise RuntimeError(
                f"{bot.get_name()} chose an illegal action for {player_id}: "
                f"{decision.action.describe()} ({result.error_code})"
            )
        if self.on_step:
            self.on_step(self.game)
        return f"{player_id}: {decision.action.describe()}"

    def run(self, max_steps: int = 10_000) -> TurnResult:
        """Run bot actions until a human seat is up or the game ends."""
        actions: list[str] = []
        for _ in range(max_steps):
            described = self.step()
            if described is None:
                break
            actions.append(described)
        else:
            logger.warning("Bot loop hit the step limit of %d", max_steps)
            return TurnResult(
                success=False,
                loop_state=LoopState.STEP_LIMIT,
                steps=len(actions),
                bot_actions=actions,
                errors=[f"Step limit {max_steps} reached"],
            )

        if self.game.is_game_over():
            return TurnResult(
                success=True,
                loop_state=LoopState.GAME_OVER,
                steps=len(actions),
                bot_actions=actions,
                winner=self.game.get_winner(),
            )
        return TurnResult(
            success=True,
            loop_state=LoopState.WAITING_HUMAN_ACTION,
            steps=len(actions),
            bot_actions=actions,
        )
