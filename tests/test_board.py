"""Tests for the letter grid."""

import pytest

from wordhunt.solver import Board, Cell, InvalidBoardSize


BOARD = "oatrihpshtnrenei"


class TestConstruction:
    """Test building boards from letters."""

    def test_from_string_upper_cases(self):
        """Letters are normalized to upper case."""
        board = Board.from_string(BOARD)
        assert board.size == 4
        assert board.letters == BOARD.upper()
        assert board.rows() == ["OATR", "IHPS", "HTNR", "ENEI"]

    def test_whitespace_is_ignored(self):
        """Rows may be separated by spaces or newlines."""
        board = Board.from_string("oatr ihps\nhtnr enei")
        assert board == Board.from_string(BOARD)

    def test_wrong_length_raises(self):
        """Anything but N*N letters is rejected."""
        with pytest.raises(InvalidBoardSize, match="16 letters"):
            Board.from_string("oatrihps")

    def test_invalid_size_is_value_error(self):
        """InvalidBoardSize can be caught as a ValueError."""
        with pytest.raises(ValueError):
            Board.from_letters(list("abcdefghijklmnopq"))

    def test_other_sizes(self):
        """A 5x5 board takes 25 letters."""
        board = Board.from_string("a" * 25, size=5)
        assert board.size == 5
        assert len(list(board.cells())) == 25

    def test_ragged_rows_raise(self):
        """Rows must form a square."""
        with pytest.raises(InvalidBoardSize):
            Board(["abc", "de", "fgh"])

    def test_empty_board(self):
        """A board with no rows has no cells."""
        board = Board([])
        assert board.size == 0
        assert list(board.cells()) == []


class TestQueries:
    """Test lookups and adjacency."""

    @pytest.fixture
    def board(self):
        return Board.from_string(BOARD)

    def test_letter_at(self, board):
        assert board.letter_at(Cell(0, 0)) == "O"
        assert board.letter_at(Cell(3, 3)) == "I"
        assert board.letter_at(Cell(2, 1)) == "T"

    def test_in_bounds(self, board):
        assert board.in_bounds(Cell(0, 0))
        assert board.in_bounds(Cell(3, 3))
        assert not board.in_bounds(Cell(-1, 0))
        assert not board.in_bounds(Cell(0, 4))

    def test_corner_neighbors(self, board):
        """A corner has three neighbors, in clockwise scan order."""
        assert list(board.neighbors(Cell(0, 0))) == [Cell(0, 1), Cell(1, 1), Cell(1, 0)]

    def test_center_neighbors_order(self, board):
        """An inner cell has all eight neighbors, starting up-right."""
        assert list(board.neighbors(Cell(1, 1))) == [
            Cell(0, 2), Cell(1, 2), Cell(2, 2), Cell(2, 1),
            Cell(2, 0), Cell(1, 0), Cell(0, 0), Cell(0, 1),
        ]

    def test_cells_row_major(self, board):
        cells = list(board.cells())
        assert cells[0] == Cell(0, 0)
        assert cells[1] == Cell(0, 1)
        assert cells[4] == Cell(1, 0)
        assert cells[-1] == Cell(3, 3)

    def test_render(self, board):
        assert board.render().splitlines()[0] == "O A T R"
        assert str(board) == board.render()
