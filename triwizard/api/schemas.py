"""
Pydantic Schemas for API - Request/response models for OpenAPI.

These models define the contract between clients and the engine.
All responses include explicit types for OpenAPI schema generation.

Error Codes:
- SESSION_NOT_FOUND: Session does not exist or has ended
- PLAYER_NOT_FOUND: No player with that name in the session
- EMPTY_DECK: No card could be drawn even after reshuffling
- VALIDATION_ERROR: Request parameters are invalid
"""

from enum import Enum
from typing import Optional, Any
from pydantic import BaseModel, Field


# =============================================================================
# Enums
# =============================================================================

class SessionStatus(str, Enum):
    """Session status values."""
    ACTIVE = "active"
    FAILED = "failed"
    COMPLETED = "completed"
    ABANDONED = "abandoned"


class ErrorCode(str, Enum):
    """Structured error codes."""
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    PLAYER_NOT_FOUND = "PLAYER_NOT_FOUND"
    EMPTY_DECK = "EMPTY_DECK"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


# =============================================================================
# Shared Models
# =============================================================================

class CardInfo(BaseModel):
    """Card information for display."""
    kind: str = Field(description="Effect kind, e.g. move_forward")
    magnitude: int = 0
    description: str


class PlayerInfo(BaseModel):
    """Player state for display."""
    name: str
    position: int
    direction: int = Field(1, description="+1 forward, -1 reversed")
    skip_next_turn: bool = False
    reroll_pending: bool = False
    protected: bool = False
    next_move_multiplier: float = 1.0


class DeckInfo(BaseModel):
    """Pile sizes."""
    remaining: int
    discarded: int


# =============================================================================
# Request Models
# =============================================================================

class CreateSessionRequest(BaseModel):
    """Request to create a new game session."""
    player_names: list[str] = Field(..., min_length=1, description="Unique names, in seating order")
    random_seed: Optional[int] = Field(None, description="Seed for a reproducible deck")


class DrawCardRequest(BaseModel):
    """Request to draw and apply a card."""
    player_name: str = Field(..., description="Player who landed on a Draw Card space")


class MoveRequest(BaseModel):
    """Request to move a player by a die roll."""
    player_name: str
    roll: int = Field(..., ge=0, description="Die roll before direction and multiplier")


# =============================================================================
# Response Models
# =============================================================================

class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str = Field(..., description="Human-readable error message")
    error_code: ErrorCode = Field(..., description="Machine-readable error code")
    details: Optional[dict[str, Any]] = Field(None, description="Additional error context")
    api_version: str = Field("v1", description="API version")


class SessionResponse(BaseModel):
    """Response containing session information."""
    session_id: str
    status: SessionStatus
    players: list[PlayerInfo] = Field(default_factory=list)
    deck: DeckInfo
    cards_drawn: int = 0
    random_seed: Optional[int] = None
    created_at: float = 0.0
    api_version: str = "v1"


class DrawResponse(BaseModel):
    """Result of drawing and applying a card."""
    session_id: str
    player_name: str
    card: CardInfo
    resolved: bool = Field(
        True, description="False when the card must be resolved by hand (see instructions)"
    )
    changes: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    rewound: dict[str, int] = Field(
        default_factory=dict, description="Positions set by a rewind, keyed by player name"
    )
    players: list[PlayerInfo] = Field(default_factory=list)
    deck: DeckInfo
    api_version: str = "v1"


class MoveResponse(BaseModel):
    """Result of a die-roll move."""
    session_id: str
    player_name: str
    roll: int
    spaces: int = Field(..., description="Spaces actually moved after direction and multiplier")
    position: int
    api_version: str = "v1"


class HistoryResponse(BaseModel):
    """Recorded positions per player."""
    session_id: str
    history: dict[str, list[int]] = Field(default_factory=dict)
    api_version: str = "v1"


class DeckCompositionEntry(BaseModel):
    """One line of the deck list."""
    card: CardInfo
    count: int


class DeckCompositionResponse(BaseModel):
    """The standard deck list."""
    entries: list[DeckCompositionEntry] = Field(default_factory=list)
    total: int = 0


class SessionListResponse(BaseModel):
    """Response listing active sessions."""
    sessions: list[str]
    count: int


class EndSessionResponse(BaseModel):
    """Response after ending a session."""
    success: bool
    session_id: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    service: str
    version: str
