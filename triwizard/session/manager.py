"""
Session Manager - Creates and manages game sessions.

A session is one play-through:
- Created with the player names (and an optional seed)
- Owns its own Deck, GameHistory, Players and EffectEngine
- Runs the draw -> apply -> discard -> record cycle for callers
- Destroyed when the game ends

Sessions are in-memory only. Nothing is shared between sessions.

Turn order is NOT decided here; callers say which player acts.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging
import os
import time
import uuid

from ..engine_core import Card, Deck, EffectEngine, EffectResult, EmptyDeckError, GameHistory, Player

logger = logging.getLogger(__name__)

SESSION_TTL_SECONDS = int(os.getenv("TRIWIZARD_SESSION_TTL", "3600"))


class SessionState(Enum):
    """State of a game session."""
    ACTIVE = "active"  # Game in progress
    FAILED = "failed"  # Deck ran dry, bookkeeping bug on the caller's side
    COMPLETED = "completed"  # Game finished normally
    ABANDONED = "abandoned"  # User quit or session went stale


@dataclass
class MoveResult:
    """Outcome of a die-roll move."""
    player_name: str
    roll: int
    spaces: int
    position: int


@dataclass
class Session:
    """
    An ephemeral game session.

    Contains:
    - The deck (draw and discard piles)
    - The players, in seating order
    - The shared position history
    - The effect engine
    """
    session_id: str
    created_at: float
    deck: Deck
    players: list[Player]
    history: GameHistory = field(default_factory=GameHistory)
    engine: EffectEngine = field(default_factory=EffectEngine)
    state: SessionState = SessionState.ACTIVE
    random_seed: int | None = None
    cards_drawn: int = 0

    def is_active(self) -> bool:
        return self.state == SessionState.ACTIVE

    def get_player(self, name: str) -> Player:
        """Get player by name. Raises KeyError if unknown."""
        for p in self.players:
            if p.name == name:
                return p
        raise KeyError(name)

    def record_all(self) -> None:
        """Record every player's current position."""
        for p in self.players:
            self.history.record(p, p.position)

    def move_by_roll(self, name: str, roll: int) -> MoveResult:
        """
        Move a player by a die roll.

        The roll is signed by the player's direction and scaled by any
        pending multiplier. The new position is always recorded.
        """
        player = self.get_player(name)
        spaces = player.move(roll * player.direction)
        self.history.record(player, player.position)
        logger.info("%s moving %d spaces to position %d", player.name, spaces, player.position)
        return MoveResult(
            player_name=player.name,
            roll=roll,
            spaces=spaces,
            position=player.position,
        )

    def draw_card(self, name: str) -> tuple[Card, EffectResult]:
        """
        Draw a card for a player, apply it, and discard it.

        Players whose position no longer matches their latest recorded
        position are recorded afterwards. Rewound players already sit
        on their latest entry, so they are not recorded twice.
        """
        player = self.get_player(name)
        try:
            card = self.deck.draw()
        except EmptyDeckError:
            self.state = SessionState.FAILED
            logger.error("Session %s: deck exhausted with %d cards drawn", self.session_id, self.cards_drawn)
            raise

        self.cards_drawn += 1
        result = self.engine.apply(card, player, self.players, self.history)
        self.deck.discard(card)
        self._sync_history()
        return card, result

    def _sync_history(self) -> None:
        for p in self.players:
            recorded = self.history.positions(p)
            if not recorded or recorded[-1] != p.position:
                self.history.record(p, p.position)


class SessionManager:
    """
    Manages game sessions.

    Responsibilities:
    - Create sessions
    - Track active sessions
    - Clean up finished and stale sessions

    No persistence - sessions are in-memory only.
    """

    def __init__(self):
        self._sessions: dict[str, Session] = {}

    def create_session(
        self,
        player_names: list[str],
        random_seed: int | None = None,
    ) -> Session:
        """
        Create a new game session.

        Args:
            player_names: Unique player names, in seating order
            random_seed: Seed for a reproducible deck

        Returns:
            New Session with every starting position recorded
        """
        if not player_names:
            raise ValueError("A session needs at least one player")
        if len(set(player_names)) != len(player_names):
            raise ValueError("Player names must be unique")

        session = Session(
            session_id=str(uuid.uuid4()),
            created_at=time.time(),
            deck=Deck(seed=random_seed),
            players=[Player(name=name) for name in player_names],
            random_seed=random_seed,
        )
        session.record_all()

        self._sessions[session.session_id] = session
        logger.info("Created session %s for %s", session.session_id, ", ".join(player_names))
        return session

    def get_session(self, session_id: str) -> Session | None:
        """Get a session by ID."""
        return self._sessions.get(session_id)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        """
        End a session and drop it from memory.

        Returns False if the session did not exist.
        """
        session = self._sessions.pop(session_id, None)
        if not session:
            return False

        if reason == "completed":
            session.state = SessionState.COMPLETED
        elif session.state != SessionState.FAILED:
            session.state = SessionState.ABANDONED
        logger.info("Ended session %s (%s)", session_id, reason)
        return True

    def list_active_sessions(self) -> list[str]:
        """List IDs of active sessions."""
        return [
            sid for sid, session in self._sessions.items()
            if session.is_active()
        ]

    def cleanup_stale_sessions(self, max_age_seconds: int = SESSION_TTL_SECONDS) -> list[str]:
        """
        End sessions older than max_age.

        Returns the IDs that were removed.
        """
        current_time = time.time()
        to_remove = [
            session_id for session_id, session in self._sessions.items()
            if current_time - session.created_at > max_age_seconds
        ]

        for session_id in to_remove:
            self.end_session(session_id, reason="stale")
        return to_remove
