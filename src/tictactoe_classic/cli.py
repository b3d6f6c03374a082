"""
Command-line interface for a two-player terminal game.
"""

import argparse
import logging
from typing import List, Optional

from tictactoe_classic.api import play_session
from tictactoe_classic.utils.config import Config, DEFAULT_LOG_LEVEL, LOG_LEVELS

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play two-player tic-tac-toe in the terminal"
    )
    parser.add_argument(
        "--log-level", "-l",
        type=str.upper,
        choices=LOG_LEVELS,
        default=DEFAULT_LOG_LEVEL,
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Draw the board with plain ASCII characters",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    config = Config(log_level=args.log_level, ascii_board=args.ascii)
    config.configure_logging()

    try:
        final = play_session(ascii_board=config.ascii_board)
    except KeyboardInterrupt:
        print("\nInterrupted - bye.")
        return 130

    logger.info("Exited with status %s", final.status.name)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
