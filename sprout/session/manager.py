"""
Session Manager - Creates and manages game sessions.

LIFECYCLE:
1. Caller creates a session with a player list (and optionally a seed,
   settings overrides and bots for some seats)
2. During the game every command goes through session.game under
   session.lock
3. Reset starts a new game with the same players in the same session
4. Game ends or the session is ended -> removed from memory

PERSISTENCE RULES:
- In-memory only
- No module-level game: every game is an explicit GardenGame object
  held by exactly one session
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
import threading
import time
import uuid

from ..bots import BotPolicy
from ..config import GameSettings
from ..games.garden import GardenGame

logger = logging.getLogger(__name__)


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"  # Game in progress
    GAME_OVER = "game_over"  # Every player is done
    ABANDONED = "abandoned"  # Ended before the game finished


@dataclass
class Session:
    """
    An ephemeral game session.

    Contains:
    - The game object
    - Bots for automated seats
    - A lock that serializes commands against the game
    """
    session_id: str
    game: GardenGame
    created_at: float
    bots: dict[str, BotPolicy] = field(default_factory=dict)
    ended: bool = False
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    @property
    def state(self) -> SessionState:
        if self.game.is_game_over():
            return SessionState.GAME_OVER
        if self.ended:
            return SessionState.ABANDONED
        return SessionState.ACTIVE

    def is_active(self) -> bool:
        """Check if session is still active."""
        return self.state == SessionState.ACTIVE

    def is_bot_turn(self) -> bool:
        return self.game.state.current_player_id in self.bots


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions (one GardenGame each)
    - Look sessions up by id
    - Reset and end sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self, settings: GameSettings | None = None):
        self.settings = settings or GameSettings()
        self._sessions: dict[str, Session] = {}
        self._lock = threading.Lock()

    def create_session(
        self,
        player_ids: list[str],
        seed: int | None = None,
        settings: GameSettings | None = None,
        bots: dict[str, BotPolicy] | None = None,
    ) -> Session:
        """
        Create a new game session.

        Args:
            player_ids: Player ids in seating order
            seed: Seed for the game's rng
            settings: Rule settings (defaults to the manager's settings)
            bots: Policies for automated seats, keyed by player id

        Returns:
            New Session with the game already set up

        Raises:
            ValueError: bad player list or a bot for an unknown seat
        """
        bots = bots or {}
        unknown = set(bots) - set(player_ids)
        if unknown:
            raise ValueError(f"Bots given for unknown players: {sorted(unknown)}")

        game = GardenGame(player_ids, settings=settings or self.settings, seed=seed)
        session = Session(
            session_id=str(uuid.uuid4()),
            game=game,
            created_at=time.time(),
            bots=dict(bots),
        )
        with self._lock:
            self._sessions[session.session_id] = session
        logger.info("Created session %s for %s", session.session_id, player_ids)
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def reset_session(self, session_id: str, seed: int | None = None) -> Session | None:
        """Replace the session's game with a new one for the same players."""
        session = self.get_session(session_id)
        if session is None:
            return None
        with session.lock:
            old = session.game
            session.game = GardenGame(old.player_ids, settings=old.settings, seed=seed)
            session.ended = False
        logger.info("Reset session %s", session_id)
        return session

    def end_session(self, session_id: str) -> bool:
        """
        End a session and remove it from memory.

        Returns False if no such session exists.
        """
        with self._lock:
            session = self._sessions.pop(session_id, None)
        if session is None:
            return False
        session.ended = True
        logger.info("Ended session %s (%s)", session_id, session.state.value)
        return True

    def list_sessions(self) -> list[Session]:
        return list(self._sessions.values())

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [sid for sid, session in self._sessions.items() if session.is_active()]

    def cleanup_stale_sessions(self, max_age_seconds: int = 3600) -> list[str]:
        """
        Remove finished sessions older than max_age.

        Returns the removed session ids.
        """
        now = time.time()
        stale = [
            sid for sid, session in self._sessions.items()
            if now - session.created_at > max_age_seconds and not session.is_active()
        ]
        for sid in stale:
            self.end_session(sid)
        return stale
