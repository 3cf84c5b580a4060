"""Command-line entry point: ``game-of-life BOARD_FILE STEPS``."""

import argparse
import sys

from loguru import logger

from game_of_life import engine
from game_of_life.config import Config
from game_of_life.errors import LifeError
from game_of_life.parsers import PARSERS
from game_of_life.settings import Settings, load_settings

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def configure_logging(settings: Settings) -> None:
    logger.remove()  # Remove default handler
    logger.add(sys.stderr, level=settings.log_level)
    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(settings.log_file, rotation="10 MB", retention="30 days", level="DEBUG")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="game-of-life",
        description="Run Conway's Game of Life on a bounded board read from a file",
    )
    # Positionals are collected loosely so a wrong count is reported as an ArgumentCountError
    parser.add_argument("args", nargs="*", metavar="BOARD_FILE STEPS")
    parser.add_argument(
        "--format", "-f",
        dest="board_format",
        choices=["auto", *sorted(PARSERS)],
        default=None,
        help="Board file format (default: from the file suffix, .rle means RLE)"
    )
    parser.add_argument("--config", "-c", default=None, help="TOML settings file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log level (default: INFO)"
    )
    parser.add_argument(
        "--display", "-d",
        action="store_true",
        help="Animate the board in a pygame window after printing"
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
    except (OSError, ValueError, TypeError) as exc:
        print(f"error: unable to load settings {args.config!r}: {exc}", file=sys.stderr)
        return 1
    if args.log_level:
        settings.log_level = args.log_level
    if args.board_format:
        settings.board_format = args.board_format
    if settings.board_format != "auto" and settings.board_format not in PARSERS:
        print(f"error: unknown board format {settings.board_format!r}", file=sys.stderr)
        return 1
    if settings.log_level not in LOG_LEVELS:
        print(f"error: unknown log level {settings.log_level!r}", file=sys.stderr)
        return 1
    try:
        configure_logging(settings)
    except OSError as exc:
        print(f"error: unable to open log file {str(settings.log_file)!r}: {exc}", file=sys.stderr)
        return 1

    try:
        config = Config.from_argv(["game-of-life", *args.args], board_format=settings.board_format)
        final_board = engine.run(config)
    except LifeError as exc:
        logger.debug(f"{type(exc).__name__}: {exc}")
        print(f"error: {type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    if args.display:
        from game_of_life.display import run_display

        run_display(final_board, settings.display)

    return 0


if __name__ == "__main__":
    sys.exit(main())
