"""
Tests for the deck and card definitions.

Tests:
- Standard composition
- Card descriptions
- Draw / discard / reshuffle lifecycle
- Card conservation across draw and discard sequences
- Seeded determinism
"""

from collections import Counter
import random

import pytest

from triwizard.engine_core.cards import (
    Card,
    EffectKind,
    DECK_DISTRIBUTION,
    STANDARD_DECK_SIZE,
    build_standard_cards,
)
from triwizard.engine_core.deck import Deck, EmptyDeckError


class TestComposition:
    """Tests for the standard 48-card list."""

    def test_standard_deck_has_48_cards(self):
        assert STANDARD_DECK_SIZE == 48
        assert len(build_standard_cards()) == 48

    def test_counts_match_distribution(self):
        """Each (kind, magnitude) appears exactly as listed."""
        counts = Counter(build_standard_cards())

        assert counts[Card(EffectKind.MOVE_FORWARD, 1)] == 6
        assert counts[Card(EffectKind.MOVE_FORWARD, 2)] == 4
        assert counts[Card(EffectKind.MOVE_FORWARD, 3)] == 2
        assert counts[Card(EffectKind.MOVE_BACK, 1)] == 5
        assert counts[Card(EffectKind.MOVE_BACK, 2)] == 3
        assert counts[Card(EffectKind.SKIP_TURN)] == 5
        assert counts[Card(EffectKind.REROLL)] == 5
        assert counts[Card(EffectKind.TELEPORT)] == 3
        assert counts[Card(EffectKind.SWAP_POSITIONS)] == 3
        assert counts[Card(EffectKind.PROTECT)] == 3
        assert counts[Card(EffectKind.DOUBLE_NEXT_MOVE)] == 2
        assert counts[Card(EffectKind.HALVE_NEXT_MOVE)] == 2
        assert counts[Card(EffectKind.REVERSE_DIRECTION)] == 2
        assert counts[Card(EffectKind.FREE_HOME)] == 1
        assert counts[Card(EffectKind.BLOCK_OPPONENT)] == 1
        assert counts[Card(EffectKind.REWIND_ALL)] == 1
        assert len(counts) == len(DECK_DISTRIBUTION)

    def test_every_kind_is_in_the_deck(self):
        kinds = {kind for kind, _, _ in DECK_DISTRIBUTION}
        assert kinds == set(EffectKind)

    def test_new_deck_holds_standard_cards(self, deck):
        assert deck.remaining_count() == 48
        assert deck.discarded_count() == 0
        assert deck.composition() == Counter(build_standard_cards())


class TestCardDescription:
    """Tests for rendered card text."""

    def test_magnitude_is_substituted(self):
        assert Card(EffectKind.MOVE_FORWARD, 4).description == "Move forward 4 spaces"
        assert Card(EffectKind.MOVE_BACK, 2).description == "Move back 2 spaces"

    def test_no_placeholder_left_behind(self):
        """Cards without a magnitude render their text unchanged."""
        assert Card(EffectKind.SKIP_TURN, 0).description == "Skip your next turn"
        for card in build_standard_cards():
            assert "{" not in card.description

    def test_str_is_description(self):
        card = Card(EffectKind.REWIND_ALL)
        assert str(card) == card.description

    def test_uses_magnitude(self):
        assert EffectKind.MOVE_FORWARD.uses_magnitude
        assert EffectKind.MOVE_BACK.uses_magnitude
        assert not EffectKind.REROLL.uses_magnitude

    def test_cards_are_immutable(self):
        card = Card(EffectKind.MOVE_FORWARD, 1)
        with pytest.raises(AttributeError):
            card.magnitude = 3


class TestDrawDiscard:
    """Tests for the draw pile lifecycle."""

    def test_draw_takes_first_card(self):
        cards = [Card(EffectKind.MOVE_FORWARD, 1), Card(EffectKind.SKIP_TURN)]
        deck = Deck(cards=cards, seed=0)
        first = deck.draw_pile[0]

        assert deck.draw() == first
        assert deck.remaining_count() == 1

    def test_discard_appends(self, deck):
        card = deck.draw()
        deck.discard(card)

        assert deck.discarded_count() == 1
        assert deck.discard_pile[-1] == card

    def test_draw_48_then_empty(self, deck):
        """Drawing every card without discarding exhausts the deck."""
        for _ in range(48):
            deck.draw()

        assert deck.remaining_count() == 0
        with pytest.raises(EmptyDeckError):
            deck.draw()

    def test_draw_reshuffles_discard_pile(self, deck):
        """An empty draw pile is refilled from the discard pile."""
        drawn = [deck.draw() for _ in range(48)]
        deck.discard(drawn[0])
        deck.discard(drawn[1])

        card = deck.draw()

        assert card in (drawn[0], drawn[1])
        assert deck.discarded_count() == 0
        assert deck.remaining_count() == 1

    def test_empty_deck_from_empty_list(self):
        deck = Deck(cards=[], seed=0)
        with pytest.raises(EmptyDeckError):
            deck.draw()

    def test_shuffle_keeps_cards(self, deck):
        before = Counter(deck.draw_pile)
        deck.shuffle()
        assert Counter(deck.draw_pile) == before


class TestConservation:
    """Cards are never created or destroyed."""

    def test_random_draw_discard_sequence(self, deck):
        rng = random.Random(7)
        held = []
        expected = Counter(build_standard_cards())

        for _ in range(500):
            if held and (rng.random() < 0.5 or len(held) == 48):
                deck.discard(held.pop(rng.randrange(len(held))))
            else:
                held.append(deck.draw())

            assert deck.composition() + Counter(held) == expected
            assert deck.remaining_count() + deck.discarded_count() + len(held) == 48


class TestDeterminism:
    """Seeded decks deal the same sequence."""

    def test_same_seed_same_order(self):
        first = Deck(seed=99)
        second = Deck(seed=99)
        assert [first.draw() for _ in range(48)] == [second.draw() for _ in range(48)]

    def test_injected_rng_matches_seed(self):
        from_seed = Deck(seed=5)
        from_rng = Deck(rng=random.Random(5))
        assert from_seed.draw_pile == from_rng.draw_pile

    def test_initial_build_is_shuffled(self):
        """Construction shuffles once (standard list order is not kept)."""
        deck = Deck(seed=3)
        assert deck.draw_pile != build_standard_cards()
