from __future__ import annotations

import io

import pytest

from game_of_life.board import Board
from game_of_life.config import Config
from game_of_life.engine import generations, run
from game_of_life.errors import RowCountMismatchError
from game_of_life.parsers import MassingillParser, RleParser

BLINKER = "3\n. . .\n1 1 1\n. . ."


def test_generations_yields_initial_board_plus_steps() -> None:
    board = MassingillParser().parse_board(BLINKER)

    boards = list(generations(board, 3))

    assert len(boards) == 4
    assert boards[0] is board
    assert boards[2] == board


def test_zero_steps_yields_only_initial_board() -> None:
    board = Board.empty(2, 2)

    assert list(generations(board, 0)) == [board]


def test_run_prints_steps_plus_one_boards() -> None:
    out = io.StringIO()

    final = run(Config(BLINKER, 2, MassingillParser()), out)

    text = out.getvalue()
    assert text.startswith("Initial board:\n. . .\n1 1 1\n. . .\n")
    assert "Board after step 1:\n. 1 .\n. 1 .\n. 1 .\n" in text
    assert "Board after step 2:" in text
    assert "Board after step 3:" not in text
    assert final == MassingillParser().parse_board(BLINKER)


def test_parse_failure_prints_nothing() -> None:
    out = io.StringIO()
    config = Config("x = 1, y = 2\no!", 5, RleParser())

    with pytest.raises(RowCountMismatchError):
        run(config, out)

    assert out.getvalue() == ""
