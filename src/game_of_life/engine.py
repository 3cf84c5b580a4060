import sys
from typing import Iterator, TextIO

from loguru import logger

from game_of_life.board import Board
from game_of_life.config import Config


def generations(board: Board, steps: int) -> Iterator[Board]:
    """Yield the initial board followed by ``steps`` successive generations."""
    yield board
    for _ in range(steps):
        board = board.step()
        yield board


def run(config: Config, out: TextIO | None = None) -> Board:
    """
    Parse the configured board and print every generation to ``out``.

    The board is parsed before anything is printed, so a ParseError leaves
    ``out`` untouched. Returns the final generation.
    """
    out = out if out is not None else sys.stdout
    board = config.parser.parse_board(config.starting_board)
    logger.info(f"Running {board!r} for {config.steps} steps")

    for iteration, current in enumerate(generations(board, config.steps)):
        if iteration == 0:
            print("Initial board:", file=out)
        else:
            print(f"Board after step {iteration}:", file=out)
        print(current.render(), file=out)
        logger.debug(f"Generation {iteration}: alive={current.alive_count()}")
        board = current

    return board
