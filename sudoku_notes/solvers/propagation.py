"""Naked-single constraint propagation over a CandidateGrid."""

from __future__ import annotations

from ..core.board import SudokuBoard, GRID_SIZE, BOX_SIZE
from ..core.candidates import CandidateGrid, ALL_CANDIDATES


def propagate(candidates: CandidateGrid, board: SudokuBoard) -> None:
    """
    Remove from every empty cell the digits placed in its row, column and box.

    One exclusion mask is built per row, column and box first; each mask has
    the bits of that unit's placed digits cleared. Every empty cell then
    ANDs its candidate mask with its three unit masks. Candidate sets of
    filled cells are left untouched and carry no meaning.
    """
    cells = board.grid.tolist()

    rows = [ALL_CANDIDATES] * GRID_SIZE
    cols = [ALL_CANDIDATES] * GRID_SIZE
    boxes = [ALL_CANDIDATES] * GRID_SIZE

    for y in range(GRID_SIZE):
        row = cells[y]
        for x in range(GRID_SIZE):
            value = row[x]
            if value:
                bit = ~(1 << (value - 1))
                rows[y] &= bit
                cols[x] &= bit
                boxes[_box_index(x, y)] &= bit

    for y in range(GRID_SIZE):
        row = cells[y]
        for x in range(GRID_SIZE):
            if row[x] == 0:
                allowed = rows[y] & cols[x] & boxes[_box_index(x, y)]
                candidates.cells[x + y * GRID_SIZE].restrict(allowed)


def commit_forced_singles(board: SudokuBoard, candidates: CandidateGrid) -> int:
    """
    Fill every empty cell that has exactly one candidate.

    Returns:
        Number of cells filled by this pass.
    """
    cells = board.grid.tolist()
    committed = 0
    for y in range(GRID_SIZE):
        for x in range(GRID_SIZE):
            note = candidates.cells[x + y * GRID_SIZE]
            if note.count() == 1 and cells[y][x] == 0:
                board.set(x, y, next(note.values()))
                committed += 1
    return committed


def advance(board: SudokuBoard, candidates: CandidateGrid) -> int:
    """
    Propagate and commit naked singles until no cell is forced any more.

    Each pass either fills at least one cell or stops, so at most 81
    passes are made. The candidate grid is reset before every pass.

    Returns:
        Total number of cells filled.
    """
    total = 0
    while True:
        candidates.reset()
        propagate(candidates, board)
        committed = commit_forced_singles(board, candidates)
        if committed == 0:
            return total
        total += committed


def is_dead_end(board: SudokuBoard, candidates: CandidateGrid) -> bool:
    """Check if some empty cell has no candidate left."""
    cells = board.grid.tolist()
    for y in range(GRID_SIZE):
        for x in range(GRID_SIZE):
            if cells[y][x] == 0 and candidates.cells[x + y * GRID_SIZE].count() == 0:
                return True
    return False


def _box_index(x: int, y: int) -> int:
    return (y // BOX_SIZE) * BOX_SIZE + x // BOX_SIZE
