import numpy as np

from game_of_life.board import Board, Cell


def to_array(board: Board) -> np.ndarray:
    flat = np.fromiter(
        (cell is Cell.ALIVE for cell in board.cells), dtype=np.uint8, count=len(board.cells)
    )
    return flat.reshape((board.height, board.width))


def from_array(data: np.ndarray) -> Board:
    rows, cols = data.shape
    cells = [Cell.ALIVE if value else Cell.DEAD for value in data.flat]
    return Board(cols, rows, cells)


def evolve(data: np.ndarray) -> np.ndarray:
    # Zero padding rather than np.roll: edges are bounded, nothing wraps around
    data = data.astype(np.uint8)
    rows, cols = data.shape
    padded = np.pad(data, 1, mode="constant", constant_values=0)
    neighbors = sum(
        padded[1 + dr : 1 + dr + rows, 1 + dc : 1 + dc + cols]
        for dr in (-1, 0, 1)
        for dc in (-1, 0, 1)
        if not (dr == 0 and dc == 0)
    )

    new_state = (data == 1) & (neighbors == 2) | (neighbors == 3)
    return new_state.astype(np.uint8)
