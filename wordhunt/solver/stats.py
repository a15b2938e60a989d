"""Word list statistics and player progress scoring."""

from typing import List

from .models import Candidate, ProgressReport, WordListStats


def word_list_stats(candidates: List[Candidate]) -> WordListStats:
    """Count words and sum their rewards and complexities."""
    return WordListStats(
        num_words=len(candidates),
        total_reward=sum(c.reward for c in candidates),
        total_complexity=sum(c.complexity for c in candidates),
    )


def word_similarity(word: str, prev_word: str) -> int:
    """Number of leading letters two words share."""
    i = 0
    limit = min(len(word), len(prev_word))
    while i < limit and word[i] == prev_word[i]:
        i += 1
    return i


def score_progress(presented: List[Candidate], last_reached: str) -> ProgressReport:
    """
    Score a player who entered the list in order up to and including `last_reached`.

    Similarity sums how many leading letters each word shares with the one
    entered before it. If `last_reached` is not on the list, every word counts
    and `reached_end` is set.
    """
    last_reached = last_reached.strip().upper()
    report = ProgressReport()
    last_word = ""

    for candidate in presented:
        word = candidate.word
        report.reward += candidate.reward
        report.similarity += word_similarity(word, last_word)
        report.num_words += 1
        last_word = word
        if word == last_reached:
            return report

    report.reached_end = True
    return report
