"""
FastAPI Application - REST API for game sessions.

Endpoints:
    GET    /api/v1/health                       Health check
    GET    /api/v1/deck/composition             Standard deck list
    POST   /api/v1/sessions                     Create game session
    GET    /api/v1/sessions                     List active sessions
    GET    /api/v1/sessions/{id}                Get session status
    DELETE /api/v1/sessions/{id}                End session
    POST   /api/v1/sessions/{id}/draw           Draw and apply a card
    POST   /api/v1/sessions/{id}/move           Move a player by a die roll
    GET    /api/v1/sessions/{id}/history        Recorded positions

All responses are JSON with explicit Pydantic schemas.
"""

from typing import Annotated, Optional, Union
import os

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .. import __version__
from ..logging_utils import configure_logging
from .service import APIService
from .schemas import (
    # Request models
    CreateSessionRequest,
    DrawCardRequest,
    MoveRequest,
    # Response models
    SessionResponse,
    DrawResponse,
    MoveResponse,
    HistoryResponse,
    DeckCompositionResponse,
    ErrorResponse,
    SessionListResponse,
    EndSessionResponse,
    HealthResponse,
    # Enums
    ErrorCode,
)

# Environment configuration
TRIWIZARD_ENV = os.getenv("TRIWIZARD_ENV", "development")
ALLOWED_ORIGINS = os.getenv("ALLOWED_ORIGINS", "*").split(",")

_STATUS_CODES = {
    ErrorCode.SESSION_NOT_FOUND: 404,
    ErrorCode.PLAYER_NOT_FOUND: 404,
    ErrorCode.EMPTY_DECK: 409,
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.INTERNAL_ERROR: 500,
}


def create_app(service: Optional[APIService] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        service: Optional APIService instance (creates new if not provided)

    Returns:
        FastAPI application instance
    """
    configure_logging()

    app = FastAPI(
        title="Triwizard Card Engine API",
        description="""
Effect-card engine for a race-style board game.

## Card Flow

1. `POST /sessions` with the player names (and a seed for reproducible decks)
2. `POST /sessions/{id}/move` after every die roll
3. `POST /sessions/{id}/draw` when a player lands on a Draw Card space
4. If `resolved=false`, resolve the card at the table using `instructions`

## Error Codes

| Code | Description |
|------|-------------|
| `SESSION_NOT_FOUND` | Session does not exist |
| `PLAYER_NOT_FOUND` | No player with that name |
| `EMPTY_DECK` | No card left even after reshuffling |
| `VALIDATION_ERROR` | Invalid request |
        """,
        version=__version__,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_service = service or APIService()

    # =========================================================================
    # Error helpers
    # =========================================================================

    def make_error_response(error: ErrorResponse) -> JSONResponse:
        """Turn a service error into a JSON response with the right status."""
        return JSONResponse(
            status_code=_STATUS_CODES.get(error.error_code, 400),
            content=error.model_dump(mode="json"),
        )

    # =========================================================================
    # Meta Endpoints
    # =========================================================================

    @app.get(
        "/api/v1/health",
        response_model=HealthResponse,
        tags=["Meta"],
        summary="Health check",
    )
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", service="triwizard", version=__version__)

    @app.get(
        "/api/v1/deck/composition",
        response_model=DeckCompositionResponse,
        tags=["Meta"],
        summary="List the standard 48-card deck",
    )
    async def deck_composition() -> DeckCompositionResponse:
        return api_service.get_deck_composition()

    # =========================================================================
    # Session Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions",
        response_model=SessionResponse,
        responses={400: {"model": ErrorResponse, "description": "Invalid player names"}},
        tags=["Sessions"],
        summary="Create a new game session",
    )
    async def create_session(body: CreateSessionRequest) -> Union[SessionResponse, JSONResponse]:
        """
        Create a new game session.

        Every player's starting position (0) is recorded immediately.
        """
        response = api_service.create_session(body)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.get(
        "/api/v1/sessions",
        response_model=SessionListResponse,
        tags=["Sessions"],
        summary="List active sessions",
    )
    async def list_sessions() -> SessionListResponse:
        sessions = api_service.list_sessions()
        return SessionListResponse(sessions=sessions, count=len(sessions))

    @app.get(
        "/api/v1/sessions/{session_id}",
        response_model=SessionResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Sessions"],
        summary="Get session status",
    )
    async def get_session(session_id: str) -> Union[SessionResponse, JSONResponse]:
        response = api_service.get_session(session_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.delete(
        "/api/v1/sessions/{session_id}",
        response_model=EndSessionResponse,
        tags=["Sessions"],
        summary="End a game session",
    )
    async def end_session(
        session_id: str,
        reason: Annotated[str, Query(description="Reason for ending")] = "completed",
    ) -> EndSessionResponse:
        success = api_service.end_session(session_id, reason)
        return EndSessionResponse(success=success, session_id=session_id)

    # =========================================================================
    # Game Endpoints
    # =========================================================================

    @app.post(
        "/api/v1/sessions/{session_id}/draw",
        response_model=DrawResponse,
        responses={
            404: {"model": ErrorResponse, "description": "Session or player not found"},
            409: {"model": ErrorResponse, "description": "Deck exhausted"},
        },
        tags=["Game"],
        summary="Draw a card and apply its effect",
    )
    async def draw_card(
        session_id: str,
        body: DrawCardRequest,
    ) -> Union[DrawResponse, JSONResponse]:
        """
        Draw the top card for a player, apply it, and discard it.

        Positions changed by the card are recorded in the session history.
        """
        response = api_service.draw_card(session_id, body)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.post(
        "/api/v1/sessions/{session_id}/move",
        response_model=MoveResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Move a player by a die roll",
    )
    async def move_player(
        session_id: str,
        body: MoveRequest,
    ) -> Union[MoveResponse, JSONResponse]:
        response = api_service.move_player(session_id, body)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    @app.get(
        "/api/v1/sessions/{session_id}/history",
        response_model=HistoryResponse,
        responses={404: {"model": ErrorResponse}},
        tags=["Game"],
        summary="Get recorded positions",
    )
    async def get_history(session_id: str) -> Union[HistoryResponse, JSONResponse]:
        response = api_service.get_history(session_id)
        if isinstance(response, ErrorResponse):
            return make_error_response(response)
        return response

    return app


# For running directly: uvicorn triwizard.api.app:app
app = create_app()
