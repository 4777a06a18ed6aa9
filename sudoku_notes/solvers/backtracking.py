"""Resumable depth-first search enumerating every solution of a puzzle."""

from __future__ import annotations
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from ..core.board import SudokuBoard
from ..core.candidates import CandidateGrid
from ..core.errors import SearchTimeout
from .propagation import advance, is_dead_end

logger = logging.getLogger(__name__)


class SearchState(Enum):
    """Lifecycle of a BacktrackingSearch."""
    PENDING = "pending"
    EXPLORING = "exploring"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class Change:
    """A digit placed by the search itself rather than given as a clue."""
    x: int
    y: int
    value: int


class BacktrackingSearch:
    """
    Lazy iterator over all solutions of a puzzle.

    The stack of speculative Changes is the only state kept between calls
    to ``next()``. Every call rebuilds the working board from the original
    puzzle plus that stack, so the position of the search is fully described
    by the stack.

    At each node the board is driven to its naked-single fixpoint. A node
    whose board is invalid or has an empty cell without candidates is
    abandoned: the top Change is popped and its cell is retried with the next
    larger candidate. Otherwise the first empty cell in row-major order is
    branched on, smallest candidate first. When a full board is reached it is
    returned and the stack is kept, so the following call resumes at the
    sibling of that leaf.

    Nothing is computed until the first ``next()``. Solutions come out in a
    fixed order, each exactly once, and the iteration always ends.

    A ``deadline`` (a ``time.perf_counter()`` value) makes ``next()`` raise
    SearchTimeout once it has passed. The search keeps its place, so a later
    ``next()`` with a new deadline continues where it stopped.
    """

    def __init__(self, board: SudokuBoard, deadline: Optional[float] = None):
        self.original = board.copy()
        self.state = SearchState.PENDING
        self.board: Optional[SudokuBoard] = None
        self.candidates = CandidateGrid()
        self._stack: List[Change] = []
        self._resume: Optional[Change] = None
        self.deadline = deadline

        # Counters
        self.steps = 0
        self.branches = 0
        self.backtracks = 0
        self.placements = 0

    @property
    def changes(self) -> Tuple[Change, ...]:
        """The current path from the original puzzle, oldest Change first."""
        return tuple(self._stack)

    def __iter__(self) -> Iterator[SudokuBoard]:
        return self

    def __next__(self) -> SudokuBoard:
        if self.state is SearchState.EXHAUSTED:
            raise StopIteration

        resume, self._resume = self._resume, None
        if self.state is SearchState.FOUND:
            if not self._stack:
                self._exhaust()
                raise StopIteration
            resume = self._stack.pop()

        self.state = SearchState.EXPLORING
        self.steps += 1
        self._rebuild()

        while True:
            if self.deadline is not None and time.perf_counter() > self.deadline:
                self._resume = resume
                raise SearchTimeout(f"Deadline passed at depth {len(self._stack)}")

            self.placements += advance(self.board, self.candidates)

            if not self.board.is_valid() or is_dead_end(self.board, self.candidates):
                resume = self._backtrack()
                if resume is None:
                    raise StopIteration
                continue

            if not self.board.has_empty_cells():
                self.state = SearchState.FOUND
                logger.debug("Solution found at depth %d", len(self._stack))
                return self.board.copy()

            if not self._branch(resume):
                resume = self._backtrack()
                if resume is None:
                    raise StopIteration
                continue

            resume = None

    def _rebuild(self) -> None:
        """Reset the working board to the original puzzle plus the stack."""
        self.board = self.original.copy()
        for change in self._stack:
            self.board.set(change.x, change.y, change.value)
        self.candidates.reset()

    def _branch(self, resume: Optional[Change]) -> bool:
        """
        Push a Change for the next untried candidate.

        Without a resume point the first empty cell is used and any candidate
        may be taken. With one, only candidates of the resumed cell that are
        larger than the value already explored there qualify.

        Returns:
            False if the resumed cell has no larger candidate left.
        """
        if resume is None:
            x, y = self._first_empty_cell()
            floor = 0
        else:
            x, y, floor = resume.x, resume.y, resume.value
            if not self.board.is_empty(x, y):
                return False

        value = next((v for v in self.candidates.get(x, y).values() if v > floor), None)
        if value is None:
            return False

        self._stack.append(Change(x, y, value))
        self.board.set(x, y, value)
        self.branches += 1
        logger.debug("Branch (%d, %d) = %d at depth %d", x, y, value, len(self._stack))
        return True

    def _backtrack(self) -> Optional[Change]:
        """Pop the most recent Change and rebuild, or exhaust the search."""
        if not self._stack:
            self._exhaust()
            return None

        change = self._stack.pop()
        self.backtracks += 1
        logger.debug("Backtrack from (%d, %d) = %d", change.x, change.y, change.value)
        self._rebuild()
        return change

    def _exhaust(self) -> None:
        self.state = SearchState.EXHAUSTED
        self.board = None
        logger.debug(
            "Search exhausted after %d steps, %d branches, %d backtracks",
            self.steps, self.branches, self.backtracks
        )

    def _first_empty_cell(self) -> Tuple[int, int]:
        # Row-major: y outer, x inner
        return self.board.get_empty_cells()[0]


def solve_all(board: SudokuBoard) -> Iterator[SudokuBoard]:
    """
    Lazily enumerate every solution of a puzzle.

    An invalid or unsolvable puzzle gives an empty sequence.
    """
    return BacktrackingSearch(board)


def solve_one(board: SudokuBoard) -> Optional[SudokuBoard]:
    """Return the first solution of a puzzle, or None if it has none."""
    return next(solve_all(board), None)
