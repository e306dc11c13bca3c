"""
Engine Core - Deck lifecycle and effect application.

The engine is the runtime that:
1. Builds and shuffles the effect deck
2. Hands cards out and takes them back (draw / discard)
3. Applies card effects to player state
4. Keeps the position history used by the rewind card
"""

from .cards import Card, EffectKind, DECK_DISTRIBUTION, build_standard_cards
from .deck import Deck, EmptyDeckError
from .state import Player, GameHistory
from .effect_engine import EffectEngine, EffectResult

__all__ = [
    "Card",
    "EffectKind",
    "DECK_DISTRIBUTION",
    "build_standard_cards",
    "Deck",
    "EmptyDeckError",
    "Player",
    "GameHistory",
    "EffectEngine",
    "EffectResult",
]
