"""
Main script for TicTacToe.

Play in the terminal against another human, against the computer,
or watch the computer play itself:

    python main.py                     # asks who plays
    python main.py --computer circle   # you are cross and start
    python main.py --computer both     # computer vs computer
"""

import argparse
import logging
import sys
from typing import List, Optional

from logic.board import Cell, Player
from logic.config import GameConfig
from logic.game_state import GameState
from ui import ConsoleGame, ask_yes_no


COMPUTER_CHOICES = {
    "none": [],
    "cross": [Cell.CROSS],
    "circle": [Cell.CIRCLE],
    "both": [Cell.CROSS, Cell.CIRCLE],
}


def setup_logging(verbose: bool = False):
    """Configure logging for the whole program."""
    level = GameConfig.VERBOSE_LOG_LEVEL if verbose else GameConfig.LOG_LEVEL
    logging.basicConfig(level=level, format=GameConfig.LOG_FORMAT)


def ask_computer_players(read=input) -> List[Player]:
    """Ask which player (if any) the computer should control."""
    if not ask_yes_no("Play against the computer?", read):
        return []

    first_player = GameState.new().current_player
    if ask_yes_no("Should the computer start?", read):
        return [first_player]
    return [first_player.opposite()]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Tic Tac Toe")
    parser.add_argument(
        "--computer",
        choices=sorted(COMPUTER_CHOICES),
        default=None,
        help="Which player the computer controls (asked if not given)"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=GameConfig.SEARCH_WORKERS,
        help="Worker processes for the computer's search (0 = none)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug output from the AI"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    if args.workers < 0:
        print("ERROR: --workers must be 0 or more")
        return 2

    try:
        if args.computer is None:
            computer_players = ask_computer_players()
        else:
            computer_players = COMPUTER_CHOICES[args.computer]

        game = ConsoleGame(computer_players, workers=args.workers)
        game.run()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
