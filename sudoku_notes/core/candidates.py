"""Per-cell candidate tracking with 9-bit masks."""

from __future__ import annotations
from typing import Iterator, List

from .board import GRID_SIZE, NUM_CELLS, is_integral, validate_coordinates
from .errors import DigitOutOfRange

ALL_CANDIDATES = 0b111_111_111

# Number of set bits for every 9-bit mask
POPCOUNT = tuple(bin(mask).count("1") for mask in range(ALL_CANDIDATES + 1))


def _validate_digit(digit: int) -> None:
    if not is_integral(digit) or digit < 1 or digit > GRID_SIZE:
        raise DigitOutOfRange(digit, low=1)


class CandidateSet:
    """
    The digits 1-9 still placeable in one cell.

    Bit (d - 1) of the mask is set when digit d is possible. The number of
    set bits is cached next to the mask; only the methods of this class
    write either of them, and each write updates both.
    """

    def __init__(self):
        self._mask = ALL_CANDIDATES
        self._count = GRID_SIZE

    @property
    def mask(self) -> int:
        """The raw 9-bit candidate mask."""
        return self._mask

    def count(self) -> int:
        """Number of digits still possible."""
        return self._count

    def is_possible(self, digit: int) -> bool:
        """Check if digit (1-9) is still a candidate."""
        _validate_digit(digit)
        return (self._mask >> (digit - 1)) & 1 != 0

    def note(self, digit: int, possible: bool) -> None:
        """
        Mark digit as possible or impossible.

        The count follows the change of the mask itself, so noting a digit
        that is already in the requested state leaves the count alone.
        """
        _validate_digit(digit)
        old_mask = self._mask
        bit = 1 << (digit - 1)
        if possible:
            self._mask |= bit
        else:
            self._mask &= ~bit

        if self._mask > old_mask:
            self._count += 1
        elif self._mask < old_mask:
            self._count -= 1

    def values(self) -> Iterator[int]:
        """Yield the possible digits in ascending order."""
        mask = self._mask
        for digit in range(1, GRID_SIZE + 1):
            if mask & (1 << (digit - 1)):
                yield digit

    def reset(self) -> None:
        """Make every digit possible again."""
        self._mask = ALL_CANDIDATES
        self._count = GRID_SIZE

    def restrict(self, allowed: int) -> None:
        """Keep only the candidates also present in the allowed mask."""
        self._mask &= allowed
        self._count = POPCOUNT[self._mask]

    def __len__(self) -> int:
        return self._count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CandidateSet):
            return False
        return self._mask == other._mask

    def __repr__(self) -> str:
        return f"CandidateSet({list(self.values())})"


class CandidateGrid:
    """One CandidateSet per board cell, in x + 9*y order."""

    def __init__(self):
        self.cells: List[CandidateSet] = [CandidateSet() for _ in range(NUM_CELLS)]

    def get(self, x: int, y: int) -> CandidateSet:
        """Get the candidate set of cell (x, y)."""
        validate_coordinates(x, y)
        return self.cells[x + y * GRID_SIZE]

    def reset(self) -> None:
        """Make every digit possible in every cell."""
        for cell in self.cells:
            cell.reset()
