"""Error taxonomy for board parsing and run configuration."""


class LifeError(Exception):
    """Base class for every failure the simulator reports to a user."""


# ——— Parse errors ———
class ParseError(LifeError):
    """Input text could not be turned into a Board."""


class UnexpectedEndOfInputError(ParseError):
    def __init__(self, detail: str = "input ended before the board was complete"):
        self.detail = detail
        super().__init__(f"unexpected end of input: {detail}")


class InvalidDimensionError(ParseError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid board dimension {value!r}, expected a non-negative integer")


class InvalidHeaderError(ParseError):
    def __init__(self, field: str, line: str | None = None):
        self.field = field
        self.line = line
        message = f"invalid header: missing or unparsable field {field!r}"
        if line is not None:
            message += f" in {line!r}"
        super().__init__(message)


class RowCountMismatchError(ParseError):
    def __init__(self, found: int, expected: int):
        self.found = found
        self.expected = expected
        super().__init__(f"found {found} rows, header declared {expected}")


class SizeMismatchError(ParseError):
    def __init__(self, found: int, expected: int):
        self.found = found
        self.expected = expected
        super().__init__(f"found {found} cells, expected {expected}")


class InvalidSymbolError(ParseError):
    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        super().__init__(f"invalid symbol {symbol!r} at body position {position}")


# ——— Configuration errors ———
class ConfigError(LifeError):
    """Command-line arguments or the referenced file were unusable."""


class ArgumentCountError(ConfigError):
    def __init__(self, found: int, expected: int):
        self.found = found
        self.expected = expected
        super().__init__(f"found {found} arguments, expected {expected}")


class FileAccessError(ConfigError):
    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(f"unable to read board file {file_name!r}")


class StepCountError(ConfigError):
    def __init__(self, found: int | None):
        self.found = found
        if found is None:
            super().__init__("step count must be a non-negative integer")
        else:
            super().__init__(f"step count must be non-negative, got {found}")
