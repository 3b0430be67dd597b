"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to engine calls
2. Manages sessions (one GardenGame each)
3. Runs bot seats after every command
4. Formats responses

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging

from .schemas import (
    CardInfo,
    Command,
    CommandResponse,
    CreateGameRequest,
    ErrorCode,
    ErrorResponse,
    GameStateResponse,
    GameStatus,
    GrowPlantCommand,
    NextTurnCommand,
    PlaceCardCommand,
    PlacePestCommand,
    PlayActionCardCommand,
    PlayerInfo,
    SkipGrowPhaseCommand,
    SkipPlacePhaseCommand,
)
from ..bots import RandomPolicy
from ..config import GameSettings
from ..engine_core.action import Action
from ..engine_core.cards import ActionCard, DraftCard, PestTile, PlantTile
from ..session import GameLoop, Session, SessionManager

logger = logging.getLogger(__name__)


class GameNotFoundError(LookupError):
    """No session with the given id."""

    def __init__(self, game_id: str):
        self.game_id = game_id
        super().__init__(f"Game {game_id} not found")


def command_to_action(command: Command) -> Action:
    """Translate a typed API command into an engine action."""
    if isinstance(command, PlaceCardCommand):
        return Action.place_card(command.player_id, command.draft_index, command.x, command.y)
    elif isinstance(command, GrowPlantCommand):
        return Action.grow_plant(command.player_id, command.x, command.y)
    elif isinstance(command, PlayActionCardCommand):
        return Action.play_action_card(command.player_id, command.draft_index, command.x, command.y)
    elif isinstance(command, PlacePestCommand):
        return Action.place_pest(
            command.player_id,
            command.x,
            command.y,
            draft_index=command.draft_index,
            target_player_id=command.target_player_id,
        )
    elif isinstance(command, SkipGrowPhaseCommand):
        return Action.skip_grow_phase(command.player_id)
    elif isinstance(command, SkipPlacePhaseCommand):
        return Action.skip_place_phase(command.player_id)
    elif isinstance(command, NextTurnCommand):
        return Action.next_turn(command.player_id)
    else:
        raise TypeError(f"Unknown command type: {type(command).__name__}")


def card_to_info(card: DraftCard) -> CardInfo:
    """Convert a card instance to its API form."""
    definition = card.definition
    if isinstance(card, PlantTile):
        return CardInfo(
            card_id=card.id,
            kind="plant",
            name=card.name,
            cost={r.value: n for r, n in definition.growth_cost.items()},
            base_points=definition.base_points,
            grown=card.grown,
            effect=definition.effect,
            description=definition.description,
        )
    elif isinstance(card, PestTile):
        return CardInfo(
            card_id=card.id,
            kind="pest",
            name=card.name,
            damage=definition.damage,
            effect=definition.effect,
            description=definition.description,
        )
    elif isinstance(card, ActionCard):
        return CardInfo(
            card_id=card.id,
            kind="action",
            name=card.name,
            cost={r.value: n for r, n in definition.resource_cost.items()},
            effect=definition.effect,
            description=definition.description,
        )
    else:
        raise TypeError(f"Unknown card type: {type(card).__name__}")


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        # Create a game
        state = service.create_game(CreateGameRequest(player_ids=["alice", "bob"]))

        # Run a command
        result = service.execute_command(state.game_id, NextTurnCommand(player_id="alice"))
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def create_game(self, request: CreateGameRequest) -> GameStateResponse:
        """
        Create a new game.

        Raises ValueError for a bad player list or invalid settings.
        """
        settings = None
        if request.settings:
            settings = GameSettings.model_validate(
                {**self.session_manager.settings.model_dump(), **request.settings}
            )
        bots = {
            pid: RandomPolicy(seed=None if request.seed is None else request.seed + i)
            for i, pid in enumerate(request.bot_player_ids)
        }
        session = self.session_manager.create_session(
            request.player_ids,
            seed=request.seed,
            settings=settings,
            bots=bots,
        )
        with session.lock:
            self._run_bots(session)
            return self._game_to_response(session)

    def get_game(self, game_id: str) -> GameStateResponse:
        session = self._require_session(game_id)
        with session.lock:
            return self._game_to_response(session)

    def list_games(self) -> list[str]:
        return [s.session_id for s in self.session_manager.list_sessions()]

    def end_game(self, game_id: str) -> bool:
        return self.session_manager.end_session(game_id)

    def reset_game(self, game_id: str, seed: int | None = None) -> GameStateResponse:
        """Start over with the same players and settings."""
        session = self.session_manager.reset_session(game_id, seed=seed)
        if session is None:
            raise GameNotFoundError(game_id)
        with session.lock:
            self._run_bots(session)
            return self._game_to_response(session)

    def execute_command(self, game_id: str, command: Command) -> CommandResponse | ErrorResponse:
        """
        Apply one command to a game.

        Returns an ErrorResponse when the engine rejects the command; the
        game is unchanged in that case.
        """
        session = self._require_session(game_id)
        action = command_to_action(command)
        with session.lock:
            result = session.game.apply(action)
            if not result.success:
                return ErrorResponse(
                    error=result.error,
                    error_code=ErrorCode(result.error_code),
                    details={"command": command.type, "player_id": command.player_id},
                )
            bot_actions = self._run_bots(session)
            return CommandResponse(
                success=True,
                changes=result.state_changes,
                bot_actions=bot_actions,
                game_state=self._game_to_response(session),
            )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _require_session(self, game_id: str) -> Session:
        session = self.session_manager.get_session(game_id)
        if session is None:
            raise GameNotFoundError(game_id)
        return session

    def _run_bots(self, session: Session) -> list[str]:
        """Let bot seats play until a human seat is up. Caller holds the lock."""
        if not session.bots:
            return []
        result = GameLoop(session.game, session.bots).run()
        if not result.success:
            logger.warning("Bot loop stopped early in %s: %s", session.session_id, result.errors)
        return result.bot_actions

    def _game_to_response(self, session: Session) -> GameStateResponse:
        """Convert a session's game to GameStateResponse."""
        state = session.game.state
        players = [
            PlayerInfo(
                player_id=p.player_id,
                is_current_turn=p.player_id == state.current_player_id,
                is_bot=p.player_id in session.bots,
                score=p.score,
                resources={r.value: n for r, n in p.resources.items()},
                infestation=p.infestation,
                phase=p.phase.value,
                pest_to_place=p.pest_to_place,
                garden=[
                    [card_to_info(tile) if tile is not None else None for tile in row]
                    for row in p.garden
                ],
            )
            for p in state.players.values()
        ]
        return GameStateResponse(
            game_id=session.session_id,
            status=GameStatus.GAME_OVER if state.is_game_over else GameStatus.ACTIVE,
            turn_number=state.current_turn,
            current_player_id=state.current_player_id,
            players=players,
            draft_zone=[card_to_info(c) for c in state.draft_zone],
            deck_size=len(state.deck),
            discard_size=len(state.discard),
            winner=state.winner,
            log=list(state.log),
        )
