"""
Session Module - Manages in-memory game sessions.

A session represents one play-through of a game:
- Created when a game starts
- Holds the deck, players and position history
- Runs card draws and die-roll moves for its players
- Destroyed when the game ends

Sessions are EPHEMERAL: no persistence, no sharing between sessions.
"""

from .manager import SessionManager, Session, SessionState, MoveResult

__all__ = [
    "SessionManager",
    "Session",
    "SessionState",
    "MoveResult",
]
