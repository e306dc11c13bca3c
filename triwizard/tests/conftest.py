"""
Pytest fixtures for Triwizard tests.
"""

import pytest

from triwizard.engine_core import Deck, EffectEngine, GameHistory, Player
from triwizard.api.service import APIService


@pytest.fixture
def deck() -> Deck:
    """Seeded standard deck."""
    return Deck(seed=1234)


@pytest.fixture
def harry() -> Player:
    return Player(name="Harry")


@pytest.fixture
def cedric() -> Player:
    return Player(name="Cedric")


@pytest.fixture
def players(harry, cedric) -> list[Player]:
    return [harry, cedric]


@pytest.fixture
def history(players) -> GameHistory:
    """History with every starting position recorded."""
    history = GameHistory()
    for p in players:
        history.record(p, p.position)
    return history


@pytest.fixture
def engine() -> EffectEngine:
    return EffectEngine()


@pytest.fixture
def service() -> APIService:
    """Create a fresh API service."""
    return APIService()
