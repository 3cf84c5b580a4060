from pathlib import Path
from typing import Sequence

from loguru import logger

from game_of_life.errors import ArgumentCountError, FileAccessError, StepCountError
from game_of_life.parsers import Parser, parser_for, parser_for_path

EXPECTED_ARGS = 3  # program, board file, step count


class Config:
    """Everything needed to run a simulation: the board text, a parser and a step count."""

    def __init__(self, starting_board: str, steps: int, parser: Parser):
        self.starting_board = starting_board
        self.steps = steps
        self.parser = parser

    @classmethod
    def from_argv(cls, argv: Sequence[str], board_format: str = "auto") -> "Config":
        """
        Build a Config from ``[program, board_file, steps]``.

        Raises:
            ArgumentCountError: argv does not hold exactly three entries.
            FileAccessError: the board file cannot be read.
            StepCountError: steps is not an integer, or is negative.
        """
        if len(argv) != EXPECTED_ARGS:
            raise ArgumentCountError(len(argv), EXPECTED_ARGS)

        file_name, steps_arg = argv[1], argv[2]
        try:
            starting_board = Path(file_name).read_text(encoding="utf-8").strip()
        except (OSError, UnicodeDecodeError):
            raise FileAccessError(file_name) from None

        steps = parse_steps(steps_arg)

        if board_format == "auto":
            parser = parser_for_path(file_name)
        else:
            parser = parser_for(board_format)

        logger.debug(f"Loaded {file_name} ({len(starting_board)} chars), {steps} steps, parser={parser.name}")
        return cls(starting_board, steps, parser)

    def __repr__(self) -> str:
        return f"Config(steps={self.steps}, parser={self.parser.name!r}, board_chars={len(self.starting_board)})"


def parse_steps(value: str) -> int:
    try:
        steps = int(value)
    except ValueError:
        raise StepCountError(None) from None
    if steps < 0:
        raise StepCountError(steps)
    return steps
