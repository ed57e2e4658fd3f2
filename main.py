"""
Entry point for Tic-rng-toe.

Run this script to play tic-tac-toe against a computer that picks its
cells at random!
"""

import logging

from tic_rng_toe.config import GameConfig
from tic_rng_toe.console import ConsoleUI
from tic_rng_toe.random_player import RandomPlayer
from tic_rng_toe.turn_controller import TurnController

logger = logging.getLogger(__name__)


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Tic-rng-toe")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the computer's random picks (replay a game)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log game events to stderr"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=GameConfig.LOG_FORMAT
    )

    ui = ConsoleUI()
    controller = TurnController(opponent=RandomPlayer.from_seed(args.seed))

    ui.show_welcome()

    try:
        outcome = controller.play(input, ui.show_report, ui.show_prompt)
        logger.debug("Finished with %s", outcome.value)
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
