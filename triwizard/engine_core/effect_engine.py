"""
Effect Engine - Applies a drawn card to the game.

This module handles:
- Movement cards (forward / back)
- Turn modifiers (skip, reroll, protection, next-move multipliers)
- Direction reversal
- Rewind, which reverts every player using the shared history

Dispatch is a table keyed on EffectKind. Each handler is a short
function of (card, acting player, all players, history) that mutates
state in place and reports what happened in an EffectResult.

Teleport, swap, free-home and block cards are not resolved here:
the engine has no board geometry, so those return an instruction
for the table to resolve the card by hand.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Callable, Sequence
import logging

from .cards import Card, EffectKind
from .state import Player, GameHistory

logger = logging.getLogger(__name__)


@dataclass
class EffectResult:
    """
    What applying a card did.

    Contains:
    - Human-readable state changes (one per affected player for rewind)
    - Instructions for cards the engine leaves to the table
    - Positions set by rewind, keyed by player name
    """
    card: Card
    player_name: str
    changes: list[str] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    rewound: dict[str, int] = field(default_factory=dict)

    @property
    def resolved(self) -> bool:
        """False when the table still has to resolve the card."""
        return not self.instructions


Handler = Callable[[Card, Player, Sequence[Player], GameHistory, EffectResult], None]


class EffectEngine:
    """
    Stateless effect applier.

    The engine never owns players or history; both are passed in on
    every call so that rewind can reach every player.
    """

    def __init__(self):
        self._handlers: dict[EffectKind, Handler] = {
            EffectKind.MOVE_FORWARD: self._move_forward,
            EffectKind.MOVE_BACK: self._move_back,
            EffectKind.SKIP_TURN: self._skip_turn,
            EffectKind.REROLL: self._reroll,
            EffectKind.PROTECT: self._protect,
            EffectKind.DOUBLE_NEXT_MOVE: self._double_next_move,
            EffectKind.HALVE_NEXT_MOVE: self._halve_next_move,
            EffectKind.REVERSE_DIRECTION: self._reverse_direction,
            EffectKind.REWIND_ALL: self._rewind_all,
            EffectKind.TELEPORT: self._manual,
            EffectKind.SWAP_POSITIONS: self._manual,
            EffectKind.FREE_HOME: self._manual,
            EffectKind.BLOCK_OPPONENT: self._manual,
        }

    def handles(self, kind: EffectKind) -> bool:
        return kind in self._handlers

    def apply(
        self,
        card: Card,
        acting_player: Player,
        all_players: Sequence[Player],
        history: GameHistory,
    ) -> EffectResult:
        """
        Apply a card's effect.

        Mutates `acting_player` (and, for rewind, every player with
        enough history). Returns an EffectResult describing the changes.
        """
        handler = self._handlers.get(card.kind)
        if handler is None:
            raise ValueError(f"No handler for effect kind: {card.kind}")

        result = EffectResult(card=card, player_name=acting_player.name)
        handler(card, acting_player, all_players, history, result)

        logger.info("%s drew: %s", acting_player.name, card.description)
        return result

    # =========================================================================
    # Movement
    # =========================================================================

    def _move_forward(self, card, player, all_players, history, result):
        player.set_position(player.position + card.magnitude)
        result.changes.append(
            f"{player.name} moved forward {card.magnitude} to position {player.position}"
        )

    def _move_back(self, card, player, all_players, history, result):
        player.set_position(player.position - card.magnitude)
        result.changes.append(
            f"{player.name} moved back {card.magnitude} to position {player.position}"
        )

    # =========================================================================
    # Turn modifiers
    # =========================================================================

    def _skip_turn(self, card, player, all_players, history, result):
        player.skip_next_turn = True
        result.changes.append(f"{player.name} will skip their next turn")

    def _reroll(self, card, player, all_players, history, result):
        player.reroll_pending = True
        result.changes.append(f"{player.name} may reroll")

    def _protect(self, card, player, all_players, history, result):
        player.protected = True
        result.changes.append(f"{player.name} is protected")

    def _double_next_move(self, card, player, all_players, history, result):
        player.next_move_multiplier = Fraction(2)
        result.changes.append(f"{player.name}'s next move is doubled")

    def _halve_next_move(self, card, player, all_players, history, result):
        player.next_move_multiplier = Fraction(1, 2)
        result.changes.append(f"{player.name}'s next move is halved")

    def _reverse_direction(self, card, player, all_players, history, result):
        player.reverse_direction()
        label = "forward" if player.direction > 0 else "backward"
        result.changes.append(f"{player.name} now moves {label}")

    # =========================================================================
    # Rewind
    # =========================================================================

    def _rewind_all(self, card, player, all_players, history, result):
        """
        Revert every player to their previous recorded position.

        Walks the history rather than `all_players`; players with one
        or no recorded position are left alone.
        """
        by_name = {p.name: p for p in all_players}
        for recorded in history.players():
            previous = history.rewind_one(recorded)
            if previous is None:
                continue
            target = by_name.get(recorded.name, recorded)
            target.set_position(previous)
            result.rewound[target.name] = previous
            message = f"{target.name} returned to position {previous}"
            result.changes.append(message)
            logger.info(message)

        if result.rewound:
            logger.info("Time reversed! All players returned to their previous positions.")

    # =========================================================================
    # Left to the table
    # =========================================================================

    def _manual(self, card, player, all_players, history, result):
        result.instructions.append(f"{player.name}: {card.description}")
