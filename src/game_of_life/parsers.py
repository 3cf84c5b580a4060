"""
Board parsers.

Each parser turns the full text of a board file into a :class:`Board` or raises
a :class:`~game_of_life.errors.ParseError` subclass describing what was wrong.
Parsers never touch the filesystem; reading the file is the caller's job.

Two formats are supported:

- ``massingill``: a size line ``n`` followed by ``n`` rows of ``n``
  space-separated tokens, ``1`` for a live cell and anything else (usually
  ``.``) for a dead one::

      6
      . . . . . .
      1 1 1 . . .
      . . . . . .
      . . . . 1 .
      . . . . 1 .
      . . . . 1 .

- ``rle``: the run-length encoded pattern format used by most Life software::

      #N Glider
      x = 3, y = 3, rule = B3/S23
      bob$2bo$3o!
"""

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Tuple, Type

from loguru import logger

from game_of_life.board import Board, Cell
from game_of_life.errors import (
    InvalidDimensionError,
    InvalidHeaderError,
    InvalidSymbolError,
    RowCountMismatchError,
    SizeMismatchError,
    UnexpectedEndOfInputError,
)


class Parser(ABC):
    """Converts the text representation of a board into a Board."""

    name: str = ""

    @abstractmethod
    def parse_board(self, text: str) -> Board:
        """
        Parse ``text`` into a Board.

        Raises:
            ParseError: the text does not describe a valid board.
        """


class MassingillParser(Parser):
    """Square fixed-grid format: a size line, then one token per cell."""

    name = "massingill"

    def parse_board(self, text: str) -> Board:
        lines = text.splitlines()
        if not lines:
            raise UnexpectedEndOfInputError("missing board size line")

        size_line = lines[0].strip()
        if not size_line.isdecimal():
            raise InvalidDimensionError(size_line)
        size = int(size_line)

        cells = [
            Cell.ALIVE if token == "1" else Cell.DEAD
            for line in lines[1:]
            for token in line.split()
        ]
        if len(cells) != size * size:
            raise SizeMismatchError(len(cells), size * size)

        logger.debug(f"Parsed {size}×{size} board in massingill format")
        return Board(size, size, cells)


HEADER_FIELD_RE = re.compile(r"^\s*(?P<key>[A-Za-z]+)\s*=\s*(?P<value>.*?)\s*$")
RLE_TAGS = {"b": Cell.DEAD, "o": Cell.ALIVE}


class RleParser(Parser):
    """Run-length encoded patterns (``x = 36, y = 9`` header plus ``b/o/$/!`` body)."""

    name = "rle"

    def parse_board(self, text: str) -> Board:
        lines = [line for line in text.splitlines() if not line.lstrip().startswith("#")]
        while lines and not lines[0].strip():
            lines.pop(0)
        if not lines:
            raise UnexpectedEndOfInputError("missing RLE header line")

        cols, rows = self.parse_header(lines[0])
        decoded = self.decode_body("".join(lines[1:]), cols, rows)

        if decoded.row_count != rows:
            raise RowCountMismatchError(decoded.row_count, rows)
        if decoded.cell_count != rows * cols:
            raise SizeMismatchError(decoded.cell_count, rows * cols)

        logger.debug(f"Parsed {cols}×{rows} board in rle format")
        return Board(cols, rows, [cell for row in decoded.rows for cell in row])

    @staticmethod
    def parse_header(line: str) -> Tuple[int, int]:
        """Return ``(cols, rows)`` from an ``x = <cols>, y = <rows>[, rule = ...]`` line."""
        fields: Dict[str, str] = {}
        for part in line.split(","):
            match = HEADER_FIELD_RE.match(part)
            if match:
                fields[match.group("key").lower()] = match.group("value")

        dimensions = []
        for key in ("x", "y"):
            value = fields.get(key)
            if value is None or not value.isdecimal():
                raise InvalidHeaderError(key, line)
            dimensions.append(int(value))
        return dimensions[0], dimensions[1]

    @staticmethod
    def decode_body(body: str, cols: int, rows: int) -> "DecodedBody":
        """
        Expand the encoded body into rows padded with dead cells up to ``cols``.

        Only cells inside the declared ``cols``×``rows`` area are stored; runs
        past it are counted, so an oversized count cannot exhaust memory and
        still surfaces as a row or size mismatch.
        """
        decoded = DecodedBody()
        current: List[Cell] = []
        current_len = 0
        count = ""
        seen_token = False

        def end_row() -> None:
            decoded.cell_count += max(current_len, cols)
            if decoded.row_count < rows:
                decoded.rows.append(current + [Cell.DEAD] * (cols - len(current)))
            decoded.row_count += 1

        for position, char in enumerate(body):
            if char.isspace():
                continue
            if char.isdecimal():
                count += char
                continue

            has_count = bool(count)
            repeat = int(count) if has_count else 1
            count = ""
            if char in RLE_TAGS:
                current_len += repeat
                if current_len <= cols and decoded.row_count < rows:
                    current.extend([RLE_TAGS[char]] * repeat)
            elif char == "$":
                end_row()
                empty_rows = repeat - 1
                decoded.cell_count += empty_rows * cols
                for _ in range(min(empty_rows, max(rows - decoded.row_count, 0))):
                    decoded.rows.append([Cell.DEAD] * cols)
                decoded.row_count += empty_rows
                current, current_len = [], 0
            elif char == "!":
                if has_count:
                    raise InvalidSymbolError(char, position)
                if seen_token:
                    end_row()
                return decoded
            else:
                raise InvalidSymbolError(char, position)
            seen_token = True

        if count:
            raise InvalidSymbolError(count, len(body))
        raise UnexpectedEndOfInputError("RLE body has no '!' terminator")


class DecodedBody:
    """Rows kept from an RLE body plus the row and cell totals it actually encoded."""

    def __init__(self):
        self.rows: List[List[Cell]] = []
        self.row_count = 0
        self.cell_count = 0


PARSERS: Dict[str, Type[Parser]] = {
    MassingillParser.name: MassingillParser,
    RleParser.name: RleParser,
}


def parser_for(name: str) -> Parser:
    try:
        return PARSERS[name.lower()]()
    except KeyError:
        raise ValueError(
            f"Unknown board format {name!r}, choose from {', '.join(sorted(PARSERS))}"
        ) from None


def parser_for_path(path: str | Path) -> Parser:
    """Pick a parser from the file suffix: ``.rle`` is RLE, anything else massingill."""
    if Path(path).suffix.lower() == ".rle":
        return RleParser()
    return MassingillParser()
