"""Behaviour of Board: indexing, neighbor counting, stepping and rendering."""

from __future__ import annotations

import pytest

from game_of_life.board import Board, Cell
from game_of_life.parsers import MassingillParser

A, D = Cell.ALIVE, Cell.DEAD

TEST_BOARD = """\
4
1 . 1 .
. . . .
1 1 1 1
. 1 . 1"""


def parse(text: str) -> Board:
    return MassingillParser().parse_board(text)


def test_parse_returns_correct_board() -> None:
    board = parse("2\n1 .\n. 1")

    assert board.get(0, 0) is A
    assert board.get(1, 0) is D
    assert board.get(0, 1) is D
    assert board.get(1, 1) is A
    assert board.width == 2
    assert board.height == 2


def test_cells_are_stored_row_major() -> None:
    board = Board(3, 2, [D, A, D, D, D, A])

    assert board.get(0, 1) is A
    assert board.get(1, 2) is A
    board.set(1, 0, A)
    assert board.cells[3] is A


def test_constructor_rejects_wrong_cell_count() -> None:
    with pytest.raises(ValueError):
        Board(2, 2, [A, D, A])


@pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (4, 0), (0, 4)])
def test_out_of_range_access_fails_fast(row: int, col: int) -> None:
    board = parse(TEST_BOARD)

    with pytest.raises(IndexError):
        board.get(row, col)
    with pytest.raises(IndexError):
        board.set(row, col, A)


@pytest.mark.parametrize(
    "row, col, expected",
    [(0, 0, 0), (1, 1, 5), (2, 2, 4), (2, 1, 3), (3, 3, 2), (0, 3, 1)],
)
def test_neighbor_count(row: int, col: int, expected: int) -> None:
    assert parse(TEST_BOARD).neighbor_count(row, col) == expected


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_neighbor_count_is_within_bounds(seed: int) -> None:
    board = Board.random(7, 5, seed=seed)

    for r in range(board.height):
        for c in range(board.width):
            assert 0 <= board.neighbor_count(r, c) <= 8


def test_neighbor_count_of_fully_alive_interior_is_eight() -> None:
    board = Board(3, 3, [A] * 9)

    assert board.neighbor_count(1, 1) == 8
    # Corners only see three in-bounds neighbors
    assert board.neighbor_count(0, 0) == 3


def test_step_computes_next_board() -> None:
    expected = parse("4\n. . . .\n1 . . 1\n1 1 . 1\n1 1 . 1")

    assert parse(TEST_BOARD).step() == expected


def test_step_does_not_modify_receiver() -> None:
    board = parse(TEST_BOARD)
    before = list(board.cells)

    board.step()

    assert board.cells == before


def test_block_is_still_life() -> None:
    board = parse("4\n. . . .\n. 1 1 .\n. 1 1 .\n. . . .")

    assert board.step() == board


def test_blinker_has_period_two() -> None:
    horizontal = parse("5\n. . . . .\n. . . . .\n. 1 1 1 .\n. . . . .\n. . . . .")
    vertical = parse("5\n. . . . .\n. . 1 . .\n. . 1 . .\n. . 1 . .\n. . . . .")

    assert horizontal.step() == vertical
    assert horizontal.step().step() == horizontal


def test_edges_do_not_wrap() -> None:
    board = parse("3\n1 1 1\n. . .\n. . .")

    # With wrap-around the bottom row would see the top row too
    assert board.step() == parse("3\n. 1 .\n. 1 .\n. . .")


def test_empty_board_steps_to_empty_board() -> None:
    board = Board(0, 0, [])

    assert board.step() == board
    assert board.render() == ""


def test_render() -> None:
    board = parse("2\n1 .\n. 1")

    assert board.render() == "1 .\n. 1\n"
    assert str(board) == board.render()


def test_from_rows_and_empty() -> None:
    board = Board.from_rows([[A, D, D], [D, D, A]])

    assert (board.width, board.height) == (3, 2)
    assert board.alive_count() == 2
    assert Board.empty(3, 2).alive_count() == 0


def test_fingerprint_tracks_contents() -> None:
    board = parse(TEST_BOARD)

    assert board.fingerprint() == parse(TEST_BOARD).fingerprint()
    assert board.fingerprint() != board.step().fingerprint()


def test_random_is_deterministic_for_a_seed() -> None:
    assert Board.random(6, 4, seed=42) == Board.random(6, 4, seed=42)
