"""
API Module - REST interface to game sessions.

Clients:
1. Create a session with the player names
2. Report die-roll moves
3. Draw cards when a player lands on a Draw Card space
4. Read back player state and position history

All state is session-scoped and in-memory.
"""

from .schemas import (
    # Requests
    CreateSessionRequest,
    DrawCardRequest,
    MoveRequest,
    # Responses
    SessionResponse,
    DrawResponse,
    MoveResponse,
    HistoryResponse,
    DeckCompositionResponse,
    ErrorResponse,
    # Shared
    PlayerInfo,
    CardInfo,
    DeckInfo,
    ErrorCode,
    SessionStatus,
)
from .service import APIService
from .app import create_app

__all__ = [
    # Requests
    "CreateSessionRequest",
    "DrawCardRequest",
    "MoveRequest",
    # Responses
    "SessionResponse",
    "DrawResponse",
    "MoveResponse",
    "HistoryResponse",
    "DeckCompositionResponse",
    "ErrorResponse",
    # Shared
    "PlayerInfo",
    "CardInfo",
    "DeckInfo",
    "ErrorCode",
    "SessionStatus",
    # Service
    "APIService",
    "create_app",
]
