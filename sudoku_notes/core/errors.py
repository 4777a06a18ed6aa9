"""Errors raised by the board, candidate and search structures."""


class SudokuError(Exception):
    """Base class for precondition violations."""


class CoordinateOutOfRange(SudokuError, IndexError):
    """Raised when a cell coordinate is not an integer in [0, 8]."""

    def __init__(self, x: int, y: int):
        super().__init__(f"x and y must both be integers in 0-8 (x = {x!r}, y = {y!r})")
        self.x = x
        self.y = y


class DigitOutOfRange(SudokuError, ValueError):
    """Raised when a digit is not an integer in the range accepted at that call site."""

    def __init__(self, value: int, low: int = 0, high: int = 9):
        super().__init__(f"Value must be an integer {low}-{high}, got {value!r}")
        self.value = value
        self.low = low
        self.high = high


class SearchTimeout(TimeoutError):
    """Raised by a search that ran past its deadline."""
