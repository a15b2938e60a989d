"""Word discovery and selection for word-search boards."""

from .models import Cell, PathStep, Candidate, SelectionResult, WordListStats, ProgressReport, InvalidBoardSize
from .config import SolverConfig, load_config, REFERENCE_REWARDS, LEGACY_REWARDS, REWARD_SCHEMES, SIMILARITY_BONUS
from .lexicon import Lexicon, LexiconNode
from .board import Board, DIRECTIONS
from .complexity import (
    is_diagonal_move,
    count_ambiguity,
    diagonal_contribution,
    ambiguity_contribution,
    reward,
    similarity_bonus,
    shared_prefix_length,
)
from .search import find_candidates
from .selector import select_words, unchosen_by_length, reset_selection
from .strategies import order_by_discovery, order_by_length, select_by_goal, apply_strategy
from .stats import word_list_stats, score_progress
from .data import load_word_list, load_lexicon
from .solve import solve, SolveResult

__all__ = [
    # Models
    "Cell",
    "PathStep",
    "Candidate",
    "SelectionResult",
    "WordListStats",
    "ProgressReport",
    "InvalidBoardSize",
    # Configuration
    "SolverConfig",
    "load_config",
    "REFERENCE_REWARDS",
    "LEGACY_REWARDS",
    "REWARD_SCHEMES",
    "SIMILARITY_BONUS",
    # Lexicon and board
    "Lexicon",
    "LexiconNode",
    "Board",
    "DIRECTIONS",
    # Complexity model
    "is_diagonal_move",
    "count_ambiguity",
    "diagonal_contribution",
    "ambiguity_contribution",
    "reward",
    "similarity_bonus",
    "shared_prefix_length",
    # Search and selection
    "find_candidates",
    "select_words",
    "unchosen_by_length",
    "reset_selection",
    "order_by_discovery",
    "order_by_length",
    "select_by_goal",
    "apply_strategy",
    # Stats
    "word_list_stats",
    "score_progress",
    # Dictionary
    "load_word_list",
    "load_lexicon",
    # Pipeline
    "solve",
    "SolveResult",
]
