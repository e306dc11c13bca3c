"""
API Service - Business logic layer between API and engine.

The service:
1. Translates API requests to session calls
2. Manages sessions
3. Turns engine errors into ErrorResponse values
4. Formats responses

This layer is framework-agnostic (can be used with FastAPI, Flask, etc.)
"""

from __future__ import annotations
from dataclasses import dataclass, field

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
    DeckCompositionEntry,
    ErrorResponse,
    # Shared
    PlayerInfo,
    CardInfo,
    DeckInfo,
    # Enums
    SessionStatus,
    ErrorCode,
)
from ..engine_core import Card, EmptyDeckError, Player, DECK_DISTRIBUTION
from ..session import SessionManager, Session


@dataclass
class APIService:
    """
    Main API service.

    Usage:
        service = APIService()

        session_response = service.create_session(request)
        draw_response = service.draw_card(session_id, DrawCardRequest(player_name="Harry"))

    Lookups that fail return an ErrorResponse instead of raising.
    """
    session_manager: SessionManager = field(default_factory=SessionManager)

    def create_session(self, request: CreateSessionRequest) -> SessionResponse | ErrorResponse:
        """Create a new game session."""
        try:
            session = self.session_manager.create_session(
                player_names=request.player_names,
                random_seed=request.random_seed,
            )
        except ValueError as e:
            return ErrorResponse(error=str(e), error_code=ErrorCode.VALIDATION_ERROR)
        return self._session_to_response(session)

    def get_session(self, session_id: str) -> SessionResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._session_not_found(session_id)
        return self._session_to_response(session)

    def end_session(self, session_id: str, reason: str = "completed") -> bool:
        return self.session_manager.end_session(session_id, reason)

    def list_sessions(self) -> list[str]:
        return self.session_manager.list_active_sessions()

    def draw_card(self, session_id: str, request: DrawCardRequest) -> DrawResponse | ErrorResponse:
        """Draw a card for a player, apply it, and discard it."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._session_not_found(session_id)

        try:
            card, result = session.draw_card(request.player_name)
        except KeyError:
            return self._player_not_found(request.player_name)
        except EmptyDeckError as e:
            return ErrorResponse(
                error=str(e),
                error_code=ErrorCode.EMPTY_DECK,
                details={"cards_drawn": session.cards_drawn},
            )

        return DrawResponse(
            session_id=session_id,
            player_name=result.player_name,
            card=_card_info(card),
            resolved=result.resolved,
            changes=result.changes,
            instructions=result.instructions,
            rewound=result.rewound,
            players=[_player_info(p) for p in session.players],
            deck=_deck_info(session),
        )

    def move_player(self, session_id: str, request: MoveRequest) -> MoveResponse | ErrorResponse:
        """Move a player by a die roll."""
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._session_not_found(session_id)

        try:
            move = session.move_by_roll(request.player_name, request.roll)
        except KeyError:
            return self._player_not_found(request.player_name)

        return MoveResponse(
            session_id=session_id,
            player_name=move.player_name,
            roll=move.roll,
            spaces=move.spaces,
            position=move.position,
        )

    def get_history(self, session_id: str) -> HistoryResponse | ErrorResponse:
        session = self.session_manager.get_session(session_id)
        if not session:
            return self._session_not_found(session_id)

        return HistoryResponse(
            session_id=session_id,
            history={p.name: session.history.positions(p) for p in session.players},
        )

    def get_deck_composition(self) -> DeckCompositionResponse:
        """The standard deck list, in table order."""
        entries = [
            DeckCompositionEntry(card=_card_info(Card(kind, magnitude)), count=copies)
            for kind, magnitude, copies in DECK_DISTRIBUTION
        ]
        return DeckCompositionResponse(
            entries=entries,
            total=sum(e.count for e in entries),
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _session_to_response(self, session: Session) -> SessionResponse:
        return SessionResponse(
            session_id=session.session_id,
            status=SessionStatus(session.state.value),
            players=[_player_info(p) for p in session.players],
            deck=_deck_info(session),
            cards_drawn=session.cards_drawn,
            random_seed=session.random_seed,
            created_at=session.created_at,
        )

    def _session_not_found(self, session_id: str) -> ErrorResponse:
        return ErrorResponse(
            error=f"Session {session_id} not found",
            error_code=ErrorCode.SESSION_NOT_FOUND,
        )

    def _player_not_found(self, name: str) -> ErrorResponse:
        return ErrorResponse(
            error=f"Player {name} not found",
            error_code=ErrorCode.PLAYER_NOT_FOUND,
        )


def _card_info(card: Card) -> CardInfo:
    return CardInfo(
        kind=card.kind.value,
        magnitude=card.magnitude,
        description=card.description,
    )


def _player_info(player: Player) -> PlayerInfo:
    return PlayerInfo(
        name=player.name,
        position=player.position,
        direction=player.direction,
        skip_next_turn=player.skip_next_turn,
        reroll_pending=player.reroll_pending,
        protected=player.protected,
        next_move_multiplier=float(player.next_move_multiplier),
    )


def _deck_info(session: Session) -> DeckInfo:
    return DeckInfo(
        remaining=session.deck.remaining_count(),
        discarded=session.deck.discarded_count(),
    )
