"""
Greedy word selection under a complexity budget.

Each round picks the unchosen candidate with the best reward-to-net-cost
ratio, charges its net cost against the budget, then lowers the cost of every
other candidate whose path starts on the same cells as the pick. Words that
trace almost the same path as something already chosen become cheap, so they
tend to get picked next.
"""

import logging
from typing import List, Optional

from .complexity import shared_prefix_length, similarity_bonus
from .config import SolverConfig
from .models import Candidate, SelectionResult

log = logging.getLogger("wordhunt")


def find_best_ratio(candidates: List[Candidate]) -> Optional[Candidate]:
    """Unchosen candidate with the strictly highest reward / net cost; first wins ties."""
    best: Optional[Candidate] = None
    best_ratio = 0.0

    for candidate in candidates:
        if candidate.chosen:
            continue
        ratio = candidate.reward / candidate.net_cost
        if best is None or ratio > best_ratio:
            best = candidate
            best_ratio = ratio

    return best


def relax(candidates: List[Candidate], chosen: Candidate, config: SolverConfig) -> None:
    """Lower the net cost of unchosen candidates that share a path prefix with `chosen`."""
    for candidate in candidates:
        if candidate.chosen:
            continue
        shared = shared_prefix_length(candidate.path, chosen.path)
        bonus = similarity_bonus(shared, config.similarity_bonus)
        # Reductions only grow, and net cost never drops below 1
        candidate.complexity_reduction = min(
            candidate.complexity - 1,
            max(candidate.complexity_reduction, bonus),
        )


def select_words(
    candidates: List[Candidate],
    config: Optional[SolverConfig] = None,
    budget: Optional[int] = None,
) -> SelectionResult:
    """
    Choose a subset of candidates to present, spending at most the complexity budget.

    The candidate whose cost crosses the budget is still taken in full.
    Candidates are mutated in place (`chosen`, `complexity_reduction`).

    Args:
        candidates: Candidates in discovery order
        config: Solver configuration (budget and similarity table)
        budget: Overrides config.complexity_budget when given

    Returns:
        SelectionResult with the chosen candidates in discovery order
    """
    config = config or SolverConfig()
    remaining = config.complexity_budget if budget is None else budget
    selection_order: List[str] = []

    while remaining > 0:
        best = find_best_ratio(candidates)
        if best is None:
            break

        best.chosen = True
        remaining -= best.net_cost
        selection_order.append(best.word)
        log.debug("Chose %s (net cost %d, %d budget left)", best.word, best.net_cost, remaining)

        relax(candidates, best, config)

    chosen = [c for c in candidates if c.chosen]
    log.info("Selected %d of %d words", len(chosen), len(candidates))

    return SelectionResult(
        chosen=chosen,
        selection_order=selection_order,
        remaining_budget=remaining,
    )


def unchosen_by_length(candidates: List[Candidate]) -> List[Candidate]:
    """Candidates left out of the selection, longest first (stable within a length)."""
    return sorted((c for c in candidates if not c.chosen), key=lambda c: c.length, reverse=True)


def reset_selection(candidates: List[Candidate]) -> None:
    """Clear selection state so the same candidates can be selected again."""
    for candidate in candidates:
        candidate.chosen = False
        candidate.complexity_reduction = 0
