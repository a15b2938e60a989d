"""Solver configuration and scoring tables."""

from pathlib import Path
from typing import Dict, Literal

import yaml
from pydantic import BaseModel, Field, field_validator


# Points by word length
REFERENCE_REWARDS: Dict[int, int] = {
    3: 100, 4: 400, 5: 800, 6: 1400, 7: 1800,
    8: 2200, 9: 2600, 10: 3000, 11: 3400, 12: 3800,
}

# Scoring used by the earliest solver, which valued long words far higher
LEGACY_REWARDS: Dict[int, int] = {
    3: 100, 4: 400, 5: 800, 6: 1400, 7: 1800,
    8: 2200, 9: 3600, 10: 100000, 11: 100000, 12: 100000,
}

REWARD_SCHEMES: Dict[str, Dict[int, int]] = {
    "reference": REFERENCE_REWARDS,
    "legacy": LEGACY_REWARDS,
}

# Complexity reduction by number of leading cells shared with a chosen word
SIMILARITY_BONUS: Dict[int, int] = {
    0: 0, 1: 0, 2: 0, 3: 5, 4: 10, 5: 50,
    6: 1000, 7: 1000, 8: 1000, 9: 1000, 10: 1000,
}

Strategy = Literal["greedy", "dfs", "length", "goal"]


class SolverConfig(BaseModel):
    """
    Tunable constants for the search and selection stages.

    Attributes:
        board_size: Board dimension N (the board holds N*N letters)
        min_word_length: Shortest path that counts as a word
        complexity_budget: Total net complexity the selector may spend
        base_complexity: Cost every word starts with
        diag_complexity: Cost added per diagonal move
        ambiguity_complexity: Cost added per confusable same-letter neighbor
        reward_table: Points by word length, or the name of a preset scheme
        similarity_bonus: Complexity reduction by shared path prefix length
        strategy: How the final list is picked and ordered
        goal_percent: Share of total reward targeted by the "goal" strategy
    """
    board_size: int = Field(default=4, ge=1)
    min_word_length: int = Field(default=3, ge=1)
    complexity_budget: int = 1000
    base_complexity: int = Field(default=50, ge=1)
    diag_complexity: int = Field(default=10, ge=0)
    ambiguity_complexity: int = Field(default=10, ge=0)
    reward_table: Dict[int, int] = Field(default_factory=lambda: dict(REFERENCE_REWARDS))
    similarity_bonus: Dict[int, int] = Field(default_factory=lambda: dict(SIMILARITY_BONUS))
    strategy: Strategy = "greedy"
    goal_percent: int = Field(default=25, ge=0, le=100)

    @field_validator("reward_table", mode="before")
    @classmethod
    def _resolve_reward_scheme(cls, value):
        if isinstance(value, str):
            if value not in REWARD_SCHEMES:
                raise ValueError(
                    f"Unknown reward scheme '{value}' "
                    f"(expected one of: {', '.join(sorted(REWARD_SCHEMES))})"
                )
            return dict(REWARD_SCHEMES[value])
        return value

    @field_validator("reward_table", "similarity_bonus")
    @classmethod
    def _check_table(cls, table: Dict[int, int]) -> Dict[int, int]:
        for key, value in table.items():
            if key < 0 or value < 0:
                raise ValueError(f"Table entries must be non-negative, got {key}: {value}")
        return dict(sorted(table.items()))


def load_config(config_path: str | Path) -> SolverConfig:
    """Load solver configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return SolverConfig(**data)
