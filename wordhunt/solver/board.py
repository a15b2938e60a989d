"""Immutable square letter grid with 8-directional adjacency."""

from typing import Iterator, List, Sequence, Tuple

from .models import Cell, InvalidBoardSize


# Neighbor scan order, clockwise starting from up-right
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 1), (0, 1), (1, 1), (1, 0),
    (1, -1), (0, -1), (-1, -1), (-1, 0),
)


class Board:
    """N x N letter grid. Letters are stored upper-cased and never change."""

    __slots__ = ("_size", "_rows")

    def __init__(self, rows: Sequence[Sequence[str]]):
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise InvalidBoardSize(f"Board rows must all have length {size}")
        self._size = size
        self._rows: Tuple[Tuple[str, ...], ...] = tuple(
            tuple(letter.upper() for letter in row) for row in rows
        )

    @classmethod
    def from_letters(cls, letters: Sequence[str], size: int = 4) -> "Board":
        """
        Build a board from a flattened row-major sequence of N*N letters.

        Raises:
            InvalidBoardSize: If the sequence length is not size * size
        """
        if len(letters) != size * size:
            raise InvalidBoardSize(
                f"Board needs {size * size} letters for a {size}x{size} grid, got {len(letters)}"
            )
        return cls([letters[r * size:(r + 1) * size] for r in range(size)])

    @classmethod
    def from_string(cls, text: str, size: int = 4) -> "Board":
        """Build a board from a string such as 'oatrihpshtnrenei' (whitespace ignored)."""
        return cls.from_letters("".join(text.split()), size=size)

    @property
    def size(self) -> int:
        return self._size

    def in_bounds(self, cell: Cell) -> bool:
        return 0 <= cell.row < self._size and 0 <= cell.col < self._size

    def letter_at(self, cell: Cell) -> str:
        return self._rows[cell.row][cell.col]

    def neighbors(self, cell: Cell) -> Iterator[Cell]:
        """In-bounds adjacent cells in DIRECTIONS order."""
        for dr, dc in DIRECTIONS:
            n = Cell(cell.row + dr, cell.col + dc)
            if self.in_bounds(n):
                yield n

    def cells(self) -> Iterator[Cell]:
        """All cells in row-major order."""
        for r in range(self._size):
            for c in range(self._size):
                yield Cell(r, c)

    @property
    def letters(self) -> str:
        return "".join("".join(row) for row in self._rows)

    def rows(self) -> List[str]:
        return ["".join(row) for row in self._rows]

    def render(self) -> str:
        """Render the board to a string grid."""
        return "\n".join(" ".join(row) for row in self._rows)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board({self.letters!r}, size={self._size})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)
