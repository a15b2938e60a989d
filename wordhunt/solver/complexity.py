"""
Cost model for tracing a word on the board.

Every function here is pure. The search folds the per-step contributions into
a candidate's complexity as the path grows; the selector uses the reward and
similarity tables.
"""

from typing import AbstractSet, Dict, Sequence, Tuple

from .board import Board
from .config import SolverConfig
from .models import Cell, PathStep


def is_diagonal_move(prev: Cell, cell: Cell) -> bool:
    """True if both row and column change between the two cells."""
    return prev.row != cell.row and prev.col != cell.col


def count_ambiguity(
    board: Board,
    prev: Cell,
    cell: Cell,
    visited: AbstractSet[Cell],
) -> Tuple[int, int]:
    """
    Count the tiles a player could confuse with `cell` when moving from `prev`.

    Looks at the in-bounds, unvisited neighbors of `prev` that carry the same
    letter as `cell`, excluding `cell` itself.

    Returns:
        (ambiguity, rank) where rank is how many such tiles come before `cell`
        in neighbor scan order
    """
    letter = board.letter_at(cell)
    ambiguity = 0
    rank = 0
    for n in board.neighbors(prev):
        if n == cell:
            rank = ambiguity
        elif n not in visited and board.letter_at(n) == letter:
            ambiguity += 1
    return ambiguity, rank


def diagonal_contribution(step: PathStep, config: SolverConfig) -> int:
    return config.diag_complexity if step.is_diagonal else 0


def ambiguity_contribution(step: PathStep, config: SolverConfig) -> int:
    return step.ambiguity * config.ambiguity_complexity


def step_complexity(step: PathStep, config: SolverConfig) -> int:
    """Total cost added by extending a path with `step`."""
    return diagonal_contribution(step, config) + ambiguity_contribution(step, config)


def _lookup_clamped(table: Dict[int, int], key: int) -> int:
    # Keys outside the table take the nearest defined tier
    if not table:
        return 0
    if key in table:
        return table[key]
    keys = sorted(table)
    if key > keys[-1]:
        return table[keys[-1]]
    if key < keys[0]:
        return table[keys[0]]
    lower = max(k for k in keys if k < key)
    return table[lower]


def reward(length: int, table: Dict[int, int]) -> int:
    """Points for a word of the given length. Unscored lengths clamp to the nearest tier."""
    return _lookup_clamped(table, length)


def similarity_bonus(shared: int, table: Dict[int, int]) -> int:
    """Complexity reduction for sharing `shared` leading cells with a chosen word."""
    return _lookup_clamped(table, shared)


def shared_prefix_length(a: Sequence[PathStep], b: Sequence[PathStep]) -> int:
    """Number of leading steps on the same cells (letters are not compared)."""
    i = 0
    limit = min(len(a), len(b))
    while i < limit and a[i].cell == b[i].cell:
        i += 1
    return i
