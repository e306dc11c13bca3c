"""
Deck - Draw pile and discard pile for the effect cards.

Lifecycle:
- Built once per session from the standard distribution, then shuffled
- draw() takes from the front of the draw pile
- discard() puts cards back on the discard pile
- When the draw pile runs out, the discard pile is shuffled back in

Cards are never created or destroyed after construction; they only
move between the draw pile, the discard pile, and the table.
"""

from __future__ import annotations
from collections import Counter
import logging
import random

from .cards import Card, build_standard_cards

logger = logging.getLogger(__name__)


class EmptyDeckError(RuntimeError):
    """
    Raised when no card can be drawn even after reshuffling.

    This only happens when every card is held by callers, which means
    cards were drawn without being discarded. Not recoverable.
    """


class Deck:
    """
    Effect card deck with reshuffle-on-empty.

    Randomness comes from the injected `rng` (or a Random built from
    `seed`), so a seeded deck always deals the same sequence.
    """

    def __init__(
        self,
        cards: list[Card] | None = None,
        rng: random.Random | None = None,
        seed: int | None = None,
    ):
        self._rng = rng or random.Random(seed)
        self.draw_pile: list[Card] = list(cards) if cards is not None else build_standard_cards()
        self.discard_pile: list[Card] = []
        self.shuffle()

    def shuffle(self) -> None:
        """Shuffle the draw pile in place."""
        self._rng.shuffle(self.draw_pile)

    def draw(self) -> Card:
        """
        Draw the top card.

        Refills the draw pile from the discard pile first if it is empty.
        """
        if not self.draw_pile:
            self._reshuffle_discards()

        if not self.draw_pile:
            raise EmptyDeckError("No cards available to draw")

        return self.draw_pile.pop(0)

    def discard(self, card: Card) -> None:
        """Put a card on the discard pile."""
        self.discard_pile.append(card)

    def remaining_count(self) -> int:
        return len(self.draw_pile)

    def discarded_count(self) -> int:
        return len(self.discard_pile)

    def composition(self) -> Counter:
        """Count of every card currently owned by the deck (both piles)."""
        return Counter(self.draw_pile) + Counter(self.discard_pile)

    def _reshuffle_discards(self) -> None:
        if not self.discard_pile:
            return
        logger.debug("Draw pile empty, reshuffling %d discarded cards", len(self.discard_pile))
        self.draw_pile.extend(self.discard_pile)
        self.discard_pile.clear()
        self.shuffle()
