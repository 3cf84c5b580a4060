import hashlib
import random
from enum import Enum
from typing import Iterable, List, Sequence


class Cell(Enum):
    """A single grid position. The value is the token used when rendering."""

    ALIVE = "1"
    DEAD = "."


NEIGHBOR_OFFSETS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if not (dr == 0 and dc == 0)
)


class Board:
    """A fixed-size grid of Cells stored row-major in a flat list.

    Edges are bounded: positions outside the grid never count as neighbors.
    """

    def __init__(self, width: int, height: int, cells: Iterable[Cell]):
        if width < 0 or height < 0:
            raise ValueError(f"Board dimensions must be non-negative, got {width}×{height}")
        self.width = width
        self.height = height
        self.cells: List[Cell] = list(cells)
        if len(self.cells) != width * height:
            raise ValueError(
                f"Board {width}×{height} needs {width * height} cells, got {len(self.cells)}"
            )

    @classmethod
    def empty(cls, width: int, height: int) -> "Board":
        return cls(width, height, [Cell.DEAD] * (width * height))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> "Board":
        height = len(rows)
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise ValueError("All rows must have the same length")
        return cls(width, height, [cell for row in rows for cell in row])

    @classmethod
    def random(cls, width: int, height: int, seed: int | None = None) -> "Board":
        rng = random.Random(seed)
        cells = [Cell.ALIVE if rng.randint(0, 1) else Cell.DEAD for _ in range(width * height)]
        return cls(width, height, cells)

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(
                f"({row}, {col}) is outside a {self.width}×{self.height} board"
            )
        return row * self.width + col

    def get(self, row: int, col: int) -> Cell:
        return self.cells[self._index(row, col)]

    def set(self, row: int, col: int, cell: Cell) -> None:
        self.cells[self._index(row, col)] = cell

    def neighbor_count(self, row: int, col: int) -> int:
        """Count Alive cells among the in-bounds positions around (row, col)."""
        self._index(row, col)
        count = 0
        for dr, dc in NEIGHBOR_OFFSETS:
            r, c = row + dr, col + dc
            if 0 <= r < self.height and 0 <= c < self.width:
                if self.cells[r * self.width + c] is Cell.ALIVE:
                    count += 1
        return count

    def step(self) -> "Board":
        """Return the next generation (B3/S23). This board is left untouched."""
        next_gen = Board.empty(self.width, self.height)
        for r in range(self.height):
            for c in range(self.width):
                num_neighbors = self.neighbor_count(r, c)
                if num_neighbors == 3:
                    new_state = Cell.ALIVE
                elif num_neighbors == 2 and self.get(r, c) is Cell.ALIVE:
                    new_state = Cell.ALIVE
                else:
                    new_state = Cell.DEAD
                next_gen.set(r, c, new_state)
        return next_gen

    def alive_count(self) -> int:
        return sum(1 for cell in self.cells if cell is Cell.ALIVE)

    def fingerprint(self) -> str:
        """Return SHA-256 hex digest of the grid as a flat string of 0s and 1s"""
        flat_str = "".join("1" if cell is Cell.ALIVE else "0" for cell in self.cells)
        return hashlib.sha256(flat_str.encode("utf-8")).hexdigest()

    def render(self) -> str:
        lines = []
        for r in range(self.height):
            row = self.cells[r * self.width : (r + 1) * self.width]
            lines.append(" ".join(cell.value for cell in row) + "\n")
        return "".join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and self.cells == other.cells
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board({self.width}×{self.height}, alive={self.alive_count()})"
