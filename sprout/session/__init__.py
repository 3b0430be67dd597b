"""
Session Module - Manages ephemeral game sessions.

A session represents one play-through of a game:
- Created when a caller starts a game
- Holds the GardenGame and the bots for automated seats
- Serializes commands with a per-session lock
- Removed when ended

Sessions are EPHEMERAL: nothing is persisted.
"""

from .manager import SessionManager, Session, SessionState
from .game_loop import GameLoop, LoopState, TurnResult

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
    "GameLoop",
    "LoopState",
    "TurnResult",
]
