"""End-to-end pipeline: board and dictionary in, chosen word list out."""

from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .board import Board
from .config import SolverConfig
from .lexicon import Lexicon
from .models import Candidate, SelectionResult, WordListStats
from .search import find_candidates
from .selector import unchosen_by_length
from .stats import word_list_stats
from .strategies import apply_strategy


class SolveResult(BaseModel):
    """Everything found and chosen for one board."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    board: Board
    candidates: List[Candidate] = Field(default_factory=list)
    selection: SelectionResult = Field(default_factory=SelectionResult)
    all_stats: WordListStats = Field(default_factory=WordListStats)
    chosen_stats: WordListStats = Field(default_factory=WordListStats)

    @property
    def chosen(self) -> List[Candidate]:
        return self.selection.chosen

    @property
    def unchosen(self) -> List[Candidate]:
        """Words left out, longest first."""
        return unchosen_by_length(self.candidates)


def solve(
    board: Board | str,
    words: Lexicon | Iterable[str],
    config: Optional[SolverConfig] = None,
) -> SolveResult:
    """
    Find every word on the board and choose which ones to present.

    Args:
        board: A Board, or its letters as a string
        words: A fresh Lexicon (it is consumed by the search) or an iterable of words
        config: Solver configuration

    Returns:
        SolveResult with candidates in discovery order and the selection

    Raises:
        InvalidBoardSize: If a board string has the wrong number of letters
    """
    config = config or SolverConfig()

    if isinstance(board, str):
        board = Board.from_string(board, size=config.board_size)
    lexicon = words if isinstance(words, Lexicon) else Lexicon.from_words(words)

    candidates = find_candidates(board, lexicon, config)
    selection = apply_strategy(candidates, config)

    return SolveResult(
        board=board,
        candidates=candidates,
        selection=selection,
        all_stats=word_list_stats(candidates),
        chosen_stats=word_list_stats(selection.chosen),
    )
