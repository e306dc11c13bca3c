"""
Tests for session management.

Tests:
- Session lifecycle
- Die-roll movement and history recording
- Draw -> apply -> discard -> record cycle
- Deck exhaustion
"""

import pytest

from triwizard.engine_core import Card, Deck, EffectKind, EmptyDeckError
from triwizard.session import SessionManager, SessionState


@pytest.fixture
def manager():
    return SessionManager()


@pytest.fixture
def session(manager):
    return manager.create_session(["Harry", "Cedric"], random_seed=42)


class TestSessionManager:
    """Tests for SessionManager."""

    def test_create_session_records_start(self, session):
        assert session.is_active()
        assert [p.name for p in session.players] == ["Harry", "Cedric"]
        for p in session.players:
            assert session.history.positions(p) == [0]
        assert session.deck.remaining_count() == 48

    def test_duplicate_names_rejected(self, manager):
        with pytest.raises(ValueError):
            manager.create_session(["Harry", "Harry"])

    def test_no_players_rejected(self, manager):
        with pytest.raises(ValueError):
            manager.create_session([])

    def test_get_and_end_session(self, manager, session):
        assert manager.get_session(session.session_id) is session

        assert manager.end_session(session.session_id)
        assert session.state == SessionState.COMPLETED
        assert manager.get_session(session.session_id) is None
        assert not manager.end_session(session.session_id)

    def test_abandon_session(self, manager, session):
        manager.end_session(session.session_id, reason="user_ended")
        assert session.state == SessionState.ABANDONED

    def test_list_active_sessions(self, manager):
        ids = {manager.create_session(["A", "B"]).session_id for _ in range(3)}
        assert set(manager.list_active_sessions()) == ids

    def test_cleanup_stale_sessions(self, manager, session):
        removed = manager.cleanup_stale_sessions(max_age_seconds=-1)

        assert removed == [session.session_id]
        assert manager.get_session(session.session_id) is None
        assert session.state == SessionState.ABANDONED

    def test_fresh_sessions_survive_cleanup(self, manager, session):
        assert manager.cleanup_stale_sessions(max_age_seconds=3600) == []
        assert manager.get_session(session.session_id) is session

    def test_sessions_do_not_share_state(self, manager):
        first = manager.create_session(["Harry"], random_seed=1)
        second = manager.create_session(["Harry"], random_seed=1)

        first.move_by_roll("Harry", 4)

        assert second.get_player("Harry").position == 0
        assert first.deck is not second.deck


class TestMoveByRoll:
    """Tests for die-roll movement."""

    def test_move_records_position(self, session):
        move = session.move_by_roll("Harry", 4)

        assert move.spaces == 4
        assert move.position == 4
        harry = session.get_player("Harry")
        assert session.history.positions(harry) == [0, 4]

    def test_reversed_player_moves_backward(self, session):
        harry = session.get_player("Harry")
        harry.reverse_direction()

        move = session.move_by_roll("Harry", 3)

        assert move.spaces == -3
        assert harry.position == -3

    def test_multiplier_applies_to_roll(self, session):
        session.deck = Deck(cards=[Card(EffectKind.HALVE_NEXT_MOVE)], seed=0)
        session.draw_card("Harry")

        move = session.move_by_roll("Harry", 5)

        assert move.spaces == 2
        assert session.move_by_roll("Harry", 5).spaces == 5

    def test_unknown_player(self, session):
        with pytest.raises(KeyError):
            session.move_by_roll("Viktor", 3)


class TestDrawCard:
    """Tests for the card cycle."""

    def test_draw_applies_and_discards(self, session):
        session.deck = Deck(cards=[Card(EffectKind.MOVE_FORWARD, 3)], seed=0)

        card, result = session.draw_card("Harry")

        harry = session.get_player("Harry")
        assert card == Card(EffectKind.MOVE_FORWARD, 3)
        assert harry.position == 3
        assert session.history.positions(harry) == [0, 3]
        assert session.deck.discarded_count() == 1
        assert session.deck.remaining_count() == 0
        assert session.cards_drawn == 1

    def test_flag_card_does_not_record(self, session):
        session.deck = Deck(cards=[Card(EffectKind.SKIP_TURN)], seed=0)

        session.draw_card("Harry")

        harry = session.get_player("Harry")
        assert harry.skip_next_turn
        assert session.history.positions(harry) == [0]

    def test_rewind_through_session(self, session):
        session.move_by_roll("Harry", 4)
        session.move_by_roll("Cedric", 2)
        session.deck = Deck(cards=[Card(EffectKind.REWIND_ALL)], seed=0)

        _, result = session.draw_card("Harry")

        harry = session.get_player("Harry")
        cedric = session.get_player("Cedric")
        assert harry.position == 0
        assert cedric.position == 0
        assert result.rewound == {"Harry": 0, "Cedric": 0}
        # Rewound players already sit on their latest entry
        assert session.history.positions(harry) == [0]
        assert session.history.positions(cedric) == [0]

    def test_full_deck_cycles(self, session):
        """More draws than cards works while every card is discarded."""
        for i in range(100):
            session.draw_card(session.players[i % 2].name)

        assert session.deck.remaining_count() + session.deck.discarded_count() == 48
        assert session.cards_drawn == 100

    def test_empty_deck_fails_session(self, session):
        session.deck = Deck(cards=[], seed=0)

        with pytest.raises(EmptyDeckError):
            session.draw_card("Harry")

        assert session.state == SessionState.FAILED
        assert not session.is_active()

    def test_unknown_player_draws_nothing(self, session):
        with pytest.raises(KeyError):
            session.draw_card("Viktor")
        assert session.deck.remaining_count() == 48
