"""
Effect Cards - Card values, effect kinds, and the standard deck list.

Card structure:
- Effect kind (closed set, see EffectKind)
- Magnitude (spaces to move for movement cards, 0 otherwise)

The description shown to players is derived from the kind's
template; it is never stored on the card.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class EffectKind(Enum):
    """Every effect a card can carry."""
    MOVE_FORWARD = "move_forward"
    MOVE_BACK = "move_back"
    SKIP_TURN = "skip_turn"
    REROLL = "reroll"
    TELEPORT = "teleport"
    SWAP_POSITIONS = "swap_positions"
    PROTECT = "protect"
    DOUBLE_NEXT_MOVE = "double_next_move"
    HALVE_NEXT_MOVE = "halve_next_move"
    REVERSE_DIRECTION = "reverse_direction"
    FREE_HOME = "free_home"
    BLOCK_OPPONENT = "block_opponent"
    REWIND_ALL = "rewind_all"

    @property
    def template(self) -> str:
        """Description template; `{magnitude}` is substituted per card."""
        return _TEMPLATES[self]

    @property
    def uses_magnitude(self) -> bool:
        return "{magnitude}" in _TEMPLATES[self]


_TEMPLATES: dict[EffectKind, str] = {
    EffectKind.MOVE_FORWARD: "Move forward {magnitude} spaces",
    EffectKind.MOVE_BACK: "Move back {magnitude} spaces",
    EffectKind.SKIP_TURN: "Skip your next turn",
    EffectKind.REROLL: "Reroll the die and move again",
    EffectKind.TELEPORT: "Teleport to any Draw Card space",
    EffectKind.SWAP_POSITIONS: "Swap positions with another player",
    EffectKind.PROTECT: "Protection from next bad card",
    EffectKind.DOUBLE_NEXT_MOVE: "Your next move is doubled",
    EffectKind.HALVE_NEXT_MOVE: "Your next move is halved (round down)",
    EffectKind.REVERSE_DIRECTION: "Reverse your movement direction",
    EffectKind.FREE_HOME: "Move one piece directly to home",
    EffectKind.BLOCK_OPPONENT: "Block another player's next move",
    EffectKind.REWIND_ALL: "Time reversal - all players return to their previous positions",
}


@dataclass(frozen=True)
class Card:
    """
    A single effect card.

    Cards are plain values: two MOVE_FORWARD(2) cards compare equal,
    which is what the deck's multiset bookkeeping relies on.
    """
    kind: EffectKind
    magnitude: int = 0

    @property
    def description(self) -> str:
        return self.kind.template.format(magnitude=self.magnitude)

    def __str__(self) -> str:
        return self.description


# Standard 48-card distribution: (kind, magnitude, copies)
DECK_DISTRIBUTION: list[tuple[EffectKind, int, int]] = [
    (EffectKind.MOVE_FORWARD, 1, 6),
    (EffectKind.MOVE_FORWARD, 2, 4),
    (EffectKind.MOVE_FORWARD, 3, 2),
    (EffectKind.MOVE_BACK, 1, 5),
    (EffectKind.MOVE_BACK, 2, 3),
    (EffectKind.SKIP_TURN, 0, 5),
    (EffectKind.REROLL, 0, 5),
    (EffectKind.TELEPORT, 0, 3),
    (EffectKind.SWAP_POSITIONS, 0, 3),
    (EffectKind.PROTECT, 0, 3),
    (EffectKind.DOUBLE_NEXT_MOVE, 0, 2),
    (EffectKind.HALVE_NEXT_MOVE, 0, 2),
    (EffectKind.REVERSE_DIRECTION, 0, 2),
    (EffectKind.FREE_HOME, 0, 1),
    (EffectKind.BLOCK_OPPONENT, 0, 1),
    (EffectKind.REWIND_ALL, 0, 1),
]

STANDARD_DECK_SIZE = sum(copies for _, _, copies in DECK_DISTRIBUTION)


def build_standard_cards() -> list[Card]:
    """Create the unshuffled standard card list."""
    cards = []
    for kind, magnitude, copies in DECK_DISTRIBUTION:
        for _ in range(copies):
            cards.append(Card(kind=kind, magnitude=magnitude))
    return cards
