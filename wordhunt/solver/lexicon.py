"""Prefix tree over the dictionary used to prune the board search."""

from typing import Dict, Iterable, Optional


class LexiconNode:
    """Single node in the prefix tree. Each node owns its children."""

    __slots__ = ("children", "is_terminal")

    def __init__(self):
        self.children: Dict[str, "LexiconNode"] = {}
        self.is_terminal: bool = False


class Lexicon:
    """
    Prefix tree with word-termination marking.

    Terminal flags are consumed by the board search on first discovery of a
    word (see `clear_terminal`), so a Lexicon backs a single search pass.
    Build a fresh one for each board.
    """

    def __init__(self):
        self._root = LexiconNode()
        self._size = 0

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "Lexicon":
        lexicon = cls()
        for word in words:
            lexicon.insert(word)
        return lexicon

    @property
    def root(self) -> LexiconNode:
        """Entry node for traversal."""
        return self._root

    def insert(self, word: str) -> None:
        """Add a word, creating intermediate nodes as needed. Duplicates are ignored."""
        word = word.strip().upper()
        if not word:
            return

        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = LexiconNode()
            node = child

        if not node.is_terminal:
            node.is_terminal = True
            self._size += 1

    @staticmethod
    def child_for(node: LexiconNode, ch: str) -> Optional[LexiconNode]:
        """Child of `node` for `ch`, or None when no dictionary word continues that way."""
        return node.children.get(ch)

    @staticmethod
    def is_terminal_word(node: LexiconNode) -> bool:
        return node.is_terminal

    @staticmethod
    def clear_terminal(node: LexiconNode) -> None:
        """Consume the terminal flag so the word is reported only once."""
        node.is_terminal = False

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix.upper()) is not None

    def __contains__(self, word: str) -> bool:
        node = self._walk(word.upper())
        return node is not None and node.is_terminal

    def __len__(self) -> int:
        """Number of distinct words inserted."""
        return self._size

    def _walk(self, s: str) -> Optional[LexiconNode]:
        node = self._root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node
