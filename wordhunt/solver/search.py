"""Trie-pruned backtracking search for every dictionary word on a board."""

import logging
from typing import List, Optional, Set

from .board import Board
from .complexity import count_ambiguity, is_diagonal_move, reward, step_complexity
from .config import SolverConfig
from .lexicon import Lexicon, LexiconNode
from .models import Candidate, Cell, PathStep

log = logging.getLogger("wordhunt")


def find_candidates(
    board: Board,
    lexicon: Lexicon,
    config: Optional[SolverConfig] = None,
) -> List[Candidate]:
    """
    Enumerate every self-avoiding path on the board that spells a dictionary word.

    Starts a depth-first search at each cell in row-major order. Each word is
    reported once, for the first path that reaches it; the word's terminal flag
    in the lexicon is cleared at that point, so later paths spelling the same
    word are skipped. This consumes the lexicon.

    Returns:
        Candidates in discovery order
    """
    config = config or SolverConfig()
    candidates: List[Candidate] = []

    for start in board.cells():
        node = lexicon.child_for(lexicon.root, board.letter_at(start))
        if node is None:
            continue
        path = [PathStep(cell=start, letter=board.letter_at(start))]
        visited = {start}
        _extend(board, lexicon, config, node, path, visited, config.base_complexity, candidates)

    log.info("Found %d words on board %s", len(candidates), board.letters)
    return candidates


def _extend(
    board: Board,
    lexicon: Lexicon,
    config: SolverConfig,
    node: LexiconNode,
    path: List[PathStep],
    visited: Set[Cell],
    complexity: int,
    out: List[Candidate],
) -> None:
    if len(path) >= config.min_word_length and lexicon.is_terminal_word(node):
        out.append(Candidate(
            path=list(path),
            complexity=complexity,
            reward=reward(len(path), config.reward_table),
            discovery_index=len(out),
        ))
        lexicon.clear_terminal(node)

    prev = path[-1].cell
    for cell in board.neighbors(prev):
        if cell in visited:
            continue
        letter = board.letter_at(cell)
        child = lexicon.child_for(node, letter)
        if child is None:
            continue

        ambiguity, rank = count_ambiguity(board, prev, cell, visited)
        step = PathStep(
            cell=cell,
            letter=letter,
            is_diagonal=is_diagonal_move(prev, cell),
            ambiguity=ambiguity,
            ambiguity_rank=rank,
        )

        path.append(step)
        visited.add(cell)
        _extend(board, lexicon, config, child, path, visited,
                complexity + step_complexity(step, config), out)
        visited.remove(cell)
        path.pop()
