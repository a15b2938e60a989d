"""Data models for word discovery and selection."""

from typing import List, NamedTuple
from pydantic import BaseModel, Field, model_validator


class InvalidBoardSize(ValueError):
    """Raised when a board's letter sequence is not exactly N*N long."""


class Cell(NamedTuple):
    """A (row, col) position on the board."""
    row: int
    col: int


class PathStep(NamedTuple):
    """A single cell on a word's path, annotated relative to the previous step."""
    cell: Cell
    letter: str
    is_diagonal: bool = False
    ambiguity: int = 0  # other free same-letter neighbors of the previous cell
    ambiguity_rank: int = 0  # 0 if this was the first such neighbor in scan order


class Candidate(BaseModel):
    """A discovered dictionary word with its board path and cost/reward metadata."""
    path: List[PathStep] = Field(..., min_length=1)
    complexity: int = Field(..., ge=1)
    complexity_reduction: int = Field(default=0, ge=0)
    reward: int = Field(default=0, ge=0)
    chosen: bool = False
    discovery_index: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_reduction(self) -> "Candidate":
        if self.complexity_reduction >= self.complexity:
            raise ValueError(
                f"complexity_reduction ({self.complexity_reduction}) must stay "
                f"below complexity ({self.complexity})"
            )
        return self

    @property
    def word(self) -> str:
        """The word spelled by the path."""
        return "".join(step.letter for step in self.path)

    @property
    def length(self) -> int:
        return len(self.path)

    @property
    def cells(self) -> List[Cell]:
        return [step.cell for step in self.path]

    @property
    def net_cost(self) -> int:
        """Complexity left to pay once similarity reductions are applied."""
        return self.complexity - self.complexity_reduction

    def __str__(self) -> str:
        return self.word


class SelectionResult(BaseModel):
    """Result of running the selector over a candidate list."""
    chosen: List[Candidate] = Field(default_factory=list)  # discovery order
    selection_order: List[str] = Field(default_factory=list)  # words in pick order
    remaining_budget: int = 0

    @property
    def words(self) -> List[str]:
        return [c.word for c in self.chosen]

    @property
    def total_reward(self) -> int:
        return sum(c.reward for c in self.chosen)


class WordListStats(BaseModel):
    """Aggregate numbers for a list of candidates."""
    num_words: int = 0
    total_reward: int = 0
    total_complexity: int = 0


class ProgressReport(BaseModel):
    """How far a player got through a presented word list."""
    reward: int = 0
    similarity: int = 0
    num_words: int = 0
    reached_end: bool = False
