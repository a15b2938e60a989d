"""Dictionary file loading."""

import logging
from pathlib import Path
from typing import List, Optional

from ..config import SolverConfig
from ..lexicon import Lexicon

log = logging.getLogger("wordhunt")


def load_word_list(path: str | Path, min_length: int = 1, max_length: Optional[int] = None) -> List[str]:
    """
    Read one word per line, upper-cased.

    Blank lines, entries with non-letters, and entries outside
    [min_length, max_length] are skipped. Duplicates keep their first position.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dictionary file not found: {path}")

    words: List[str] = []
    seen = set()
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            word = line.strip().upper()
            if not word or not word.isalpha():
                continue
            if len(word) < min_length or (max_length is not None and len(word) > max_length):
                continue
            if word not in seen:
                seen.add(word)
                words.append(word)

    log.info("Loaded %s words from %s", f"{len(words):,}", path)
    return words


def load_lexicon(path: str | Path, config: Optional[SolverConfig] = None) -> Lexicon:
    """Build a Lexicon from a word list file, keeping only words that can fit on the board."""
    config = config or SolverConfig()
    words = load_word_list(
        path,
        min_length=config.min_word_length,
        max_length=config.board_size * config.board_size,
    )
    return Lexicon.from_words(words)
