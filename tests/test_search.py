"""Tests for the board word search."""

import pytest

from wordhunt.solver import Board, Cell, Lexicon, SolverConfig, find_candidates


SAMPLE_BOARD = "oatrihpshtnrenei"

# A few hundred common words is plenty to exercise the search on a 4x4 board
RICH_WORDS = [
    "hat", "hit", "tin", "ten", "net", "nit", "tip", "pit", "rent", "tent",
    "then", "thin", "spit", "tint", "into", "pint", "hint", "oath", "path",
    "pats", "rant", "teen", "tree", "inert", "enter", "tenet", "stern",
    "print", "spent", "spine", "snip", "spin", "rein", "rene", "nene",
    "tenner", "thine", "ninth", "inhere", "hah", "oat", "tao", "pht",
    "sprint", "spinner", "tine", "nine", "neinei", "hath", "ohs", "aha",
]


def search(board, words, **config):
    return find_candidates(Board.from_string(board), Lexicon.from_words(words), SolverConfig(**config))


class TestScenarios:
    """Known boards with known answers."""

    def test_sample_board_minimal_dictionary(self):
        """Only HAT forms a connected path on the sample board."""
        candidates = search(SAMPLE_BOARD, ["hat", "rip", "pine", "shirt"])
        assert [c.word for c in candidates] == ["HAT"]
        assert candidates[0].cells == [Cell(1, 1), Cell(0, 1), Cell(0, 2)]

    def test_straight_line_word(self):
        """C-A-T in a row costs only the base complexity."""
        candidates = search("catbdfghjklmnpqr", ["cat"])
        assert len(candidates) == 1
        cat = candidates[0]
        assert cat.word == "CAT"
        assert cat.length == 3
        assert cat.complexity == 50
        assert cat.reward == 100
        assert cat.complexity_reduction == 0
        assert cat.chosen is False

    def test_diagonal_moves_add_cost(self):
        """Two diagonal moves add the diagonal cost twice."""
        candidates = search("cxxxxaxxxxtxxxxx", ["cat"])
        assert len(candidates) == 1
        assert candidates[0].complexity == 50 + 10 + 10
        assert all(step.is_diagonal for step in candidates[0].path[1:])

    def test_ambiguous_neighbors_add_cost(self):
        """Lookalike tiles next to the previous cell add the ambiguity cost."""
        # c a t x
        # c a t x
        candidates = search("catxcatxxxxxxxxx", ["cat"])
        assert len(candidates) == 1
        cat = candidates[0]
        assert cat.cells == [Cell(0, 0), Cell(0, 1), Cell(0, 2)]
        assert [step.ambiguity for step in cat.path] == [0, 1, 1]
        assert cat.complexity == 50 + 10 + 10

    def test_custom_costs(self):
        """Cost constants come from the configuration."""
        candidates = search("cxxxxaxxxxtxxxxx", ["cat"], base_complexity=20, diag_complexity=3)
        assert candidates[0].complexity == 26

    def test_custom_reward_table(self):
        candidates = search("catbdfghjklmnpqr", ["cat"], reward_table={3: 7})
        assert candidates[0].reward == 7


class TestUniqueness:
    """Each word is reported once, for the first path found."""

    def test_first_path_wins(self):
        """CAT appears twice; only the path starting top-left is kept."""
        candidates = search("catxcatxxxxxxxxx", ["cat"])
        assert [c.word for c in candidates] == ["CAT"]
        assert candidates[0].path[0].cell == Cell(0, 0)

    def test_rich_dictionary_has_unique_words(self):
        candidates = search(SAMPLE_BOARD, RICH_WORDS)
        words = [c.word for c in candidates]
        assert len(words) == len(set(words))

    def test_lexicon_is_consumed(self):
        """A second search with the same lexicon finds nothing new."""
        board = Board.from_string(SAMPLE_BOARD)
        lexicon = Lexicon.from_words(RICH_WORDS)
        first = find_candidates(board, lexicon)
        assert first
        assert find_candidates(board, lexicon) == []


class TestPathInvariants:
    """Properties every candidate path must satisfy."""

    @pytest.fixture
    def candidates(self):
        return search(SAMPLE_BOARD, RICH_WORDS)

    def test_paths_are_self_avoiding(self, candidates):
        for c in candidates:
            assert len(set(c.cells)) == len(c.cells), c.word

    def test_paths_are_adjacent(self, candidates):
        for c in candidates:
            for a, b in zip(c.cells, c.cells[1:]):
                assert max(abs(a.row - b.row), abs(a.col - b.col)) == 1, c.word

    def test_paths_spell_board_letters(self, candidates):
        board = Board.from_string(SAMPLE_BOARD)
        for c in candidates:
            assert all(board.letter_at(step.cell) == step.letter for step in c.path)

    def test_words_are_in_dictionary(self, candidates):
        dictionary = {w.upper() for w in RICH_WORDS}
        assert all(c.word in dictionary for c in candidates)

    def test_minimum_length(self, candidates):
        assert all(c.length >= 3 for c in candidates)

    def test_complexity_at_least_base(self, candidates):
        assert all(c.complexity >= 50 for c in candidates)

    def test_discovery_index_is_sequential(self, candidates):
        assert [c.discovery_index for c in candidates] == list(range(len(candidates)))


class TestEdgeCases:
    """Empty inputs and length limits."""

    def test_empty_dictionary(self):
        assert search(SAMPLE_BOARD, []) == []

    def test_empty_board(self):
        assert find_candidates(Board([]), Lexicon.from_words(["cat"])) == []

    def test_short_words_are_skipped(self):
        """Two-letter words are not reported at the default minimum length."""
        assert search("catbdfghjklmnpqr", ["at", "ca"]) == []

    def test_min_word_length_is_configurable(self):
        candidates = search("catbdfghjklmnpqr", ["at", "cat"], min_word_length=2)
        assert sorted(c.word for c in candidates) == ["AT", "CAT"]
