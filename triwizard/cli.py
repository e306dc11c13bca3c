"""
Triwizard CLI - Command-line interface for the engine.

Usage:
    triwizard deck                          Print the standard deck list
    triwizard demo [--seed N] [--draws N]   Play a short seeded demo
"""

import argparse
import random
import sys

from .logging_utils import configure_logging


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Triwizard - Card Effect Engine",
        prog="triwizard",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: INFO)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("deck", help="Print the standard deck list")

    demo_parser = subparsers.add_parser("demo", help="Play a short seeded demo")
    demo_parser.add_argument("--seed", type=int, default=None, help="Deck and dice seed")
    demo_parser.add_argument("--draws", type=int, default=6, help="Number of cards to draw")
    demo_parser.add_argument(
        "--players", nargs="+", default=["Harry", "Cedric"], help="Player names"
    )

    args = parser.parse_args(argv)
    configure_logging(level=args.log_level)

    if args.command == "deck":
        cmd_deck(args)
    elif args.command == "demo":
        cmd_demo(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_deck(args):
    """Print the standard deck list."""
    from .engine_core import Card, DECK_DISTRIBUTION

    total = 0
    for kind, magnitude, copies in DECK_DISTRIBUTION:
        print(f"{copies:>3} x {Card(kind, magnitude).description}")
        total += copies
    print(f"{total:>3} cards")


def cmd_demo(args):
    """Alternate die rolls and card draws between players."""
    from .session import SessionManager

    manager = SessionManager()
    try:
        session = manager.create_session(args.players, random_seed=args.seed)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    dice = random.Random(args.seed)
    for i in range(args.draws):
        player = session.players[i % len(session.players)]
        move = session.move_by_roll(player.name, dice.randint(1, 6))
        print(f"{move.player_name} rolled {move.roll}, now at {move.position}")

        card, result = session.draw_card(player.name)
        print(f"{player.name} drew: {card.description}")
        for line in result.changes + result.instructions:
            print(f"  - {line}")

    print("\nPositions:")
    for p in session.players:
        print(f"  {p.name}: {p.position}")
    print(f"\nCards remaining in draw pile: {session.deck.remaining_count()}")
    print(f"Cards in discard pile: {session.deck.discarded_count()}")

    manager.end_session(session.session_id)


if __name__ == "__main__":
    main()
