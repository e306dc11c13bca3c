"""
Player State and Game History.

Design principles:
- Mutable: effects change players in place
- Players are identified by name (unique within a game)
- History is a plain ledger; whoever moves a player records it
"""

from __future__ import annotations
from dataclasses import dataclass, field
from fractions import Fraction
import math


@dataclass(eq=False)
class Player:
    """
    State for a single player.

    Pending-effect flags are set by cards and consumed by whoever
    runs the turn (skip, reroll, protection). The next-move multiplier
    is consumed by move().
    """
    name: str
    position: int = 0

    # Pending effects
    skip_next_turn: bool = False
    reroll_pending: bool = False
    protected: bool = False
    next_move_multiplier: Fraction = field(default_factory=lambda: Fraction(1))

    # +1 forward, -1 reversed
    direction: int = 1

    def __hash__(self):
        return hash(self.name)

    def __eq__(self, other):
        if not isinstance(other, Player):
            return False
        return self.name == other.name

    def move(self, delta: int) -> int:
        """
        Move by `delta` scaled by the pending multiplier.

        Fractional results round down (toward negative infinity).
        The multiplier is used up by this move.

        Returns the number of spaces actually moved.
        """
        spaces = math.floor(delta * self.next_move_multiplier)
        self.position += spaces
        self.next_move_multiplier = Fraction(1)
        return spaces

    def set_position(self, position: int) -> None:
        self.position = position

    def reverse_direction(self) -> None:
        self.direction *= -1


class GameHistory:
    """
    Per-player ledger of recorded positions.

    Append-only, except rewind_one() which drops the latest entry.
    Recording is the caller's job: every time a position changes,
    call record(player, player.position).
    """

    def __init__(self):
        self._positions: dict[Player, list[int]] = {}

    def record(self, player: Player, position: int) -> None:
        """Append a position, creating the player's ledger on first use."""
        self._positions.setdefault(player, []).append(position)

    def rewind_one(self, player: Player) -> int | None:
        """
        Drop the latest entry and return the one before it.

        Returns None (and changes nothing) when fewer than two
        positions are recorded.
        """
        positions = self._positions.get(player)
        if not positions or len(positions) <= 1:
            return None
        positions.pop()
        return positions[-1]

    def positions(self, player: Player) -> list[int]:
        """Copy of the recorded positions for a player."""
        return list(self._positions.get(player, []))

    def players(self) -> list[Player]:
        """Players with a ledger, in first-recorded order."""
        return list(self._positions)

    def __contains__(self, player: object) -> bool:
        return player in self._positions

    def __len__(self) -> int:
        return len(self._positions)
