"""Text rendering for word lists and word paths."""

from typing import Dict, List

from ..solver.board import Board
from ..solver.models import Candidate, PathStep

COLORS: Dict[str, str] = {
    "default": "\033[1;30m",
    "purple": "\033[1;35m",
    "blue": "\033[1;34m",
    "red": "\033[1;31m",
}
RESET = "\033[0m"


def step_color(step: PathStep) -> str:
    """
    Color name for a letter on a path.

    Ambiguous steps are blue when the right tile is the first lookalike in scan
    order and red otherwise; diagonal moves are purple.
    """
    if step.ambiguity:
        return "blue" if step.ambiguity_rank == 0 else "red"
    if step.is_diagonal:
        return "purple"
    return "default"


def render_word(candidate: Candidate, color: bool = True) -> str:
    if not color:
        return candidate.word
    parts = [f"{COLORS[step_color(step)]}{step.letter}" for step in candidate.path]
    return "".join(parts) + RESET


def render_word_list(candidates: List[Candidate], color: bool = True) -> str:
    """One word per line, with a blank line wherever the starting cell changes."""
    lines: List[str] = []
    prev_start = None
    for candidate in candidates:
        start = candidate.path[0].cell
        if prev_start is not None and start != prev_start:
            lines.append("")
        lines.append(render_word(candidate, color=color))
        prev_start = start
    return "\n".join(lines)


def render_path(board: Board, candidate: Candidate) -> str:
    """
    Draw a word's path on the board.

    Cells on the path show their 1-based position in the word; other cells show '.'.
    """
    order = {step.cell: i + 1 for i, step in enumerate(candidate.path)}
    width = len(str(len(candidate.path)))
    lines = []
    for r in range(board.size):
        row = []
        for c in range(board.size):
            index = order.get((r, c))
            row.append(str(index).rjust(width) if index else ".".rjust(width))
        lines.append(" ".join(row))
    return "\n".join(lines)
