"""
Simpler ways of picking and ordering words, kept as baselines for the greedy selector.

- dfs: every word in discovery order (fast to enter, but rarely gets past the top row)
- length: longest words first (high value per word, slow to enter)
- goal: the longest words needed to reach a share of the total reward, in discovery order
"""

from typing import List, Optional

from .config import SolverConfig
from .models import Candidate, SelectionResult
from .selector import select_words


def order_by_discovery(candidates: List[Candidate], min_length: int = 3) -> List[Candidate]:
    """All candidates of at least `min_length` letters, in discovery order."""
    min_length = max(min_length, 3)
    return [c for c in candidates if c.length >= min_length]


def order_by_length(candidates: List[Candidate]) -> List[Candidate]:
    """All candidates, longest first."""
    return sorted(candidates, key=lambda c: c.length, reverse=True)


def select_by_goal(candidates: List[Candidate], percent_goal: int = 25) -> List[Candidate]:
    """
    Take the longest words until their reward reaches `percent_goal` of the total.

    Raises:
        ValueError: If percent_goal is outside 0..100
    """
    if not 0 <= percent_goal <= 100:
        raise ValueError(f"percent_goal must be between 0 and 100, got {percent_goal}")

    total = sum(c.reward for c in candidates)
    goal = total * percent_goal // 100

    picked = set()
    points = 0
    for candidate in order_by_length(candidates):
        if points >= goal:
            break
        picked.add(candidate.discovery_index)
        points += candidate.reward

    return [c for c in candidates if c.discovery_index in picked]


def apply_strategy(
    candidates: List[Candidate],
    config: Optional[SolverConfig] = None,
    budget: Optional[int] = None,
) -> SelectionResult:
    """Run the configured strategy and mark its picks as chosen."""
    config = config or SolverConfig()

    if config.strategy == "greedy":
        return select_words(candidates, config, budget=budget)

    if config.strategy == "dfs":
        picked = order_by_discovery(candidates, config.min_word_length)
    elif config.strategy == "length":
        picked = order_by_length(candidates)
    else:
        picked = select_by_goal(candidates, config.goal_percent)

    for candidate in picked:
        candidate.chosen = True

    return SelectionResult(
        chosen=picked,
        selection_order=[c.word for c in picked],
        remaining_budget=config.complexity_budget if budget is None else budget,
    )
