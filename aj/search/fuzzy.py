"""Fuzzy subsequence matching with alignment scoring.

A text matches when every query character appears in it, in order. The score
rewards matches at the start of the text, right after a path separator, on a
camelCase hump and in consecutive runs, and penalises unmatched characters.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

FIRST_CHAR_BONUS = 10
SEPARATOR_BONUS = 20
CAMEL_CASE_BONUS = 20
ADJACENT_BONUS = 5
LEADING_PENALTY = -5
MAX_LEADING_PENALTY = -15

SEPARATORS = frozenset("/-_. \\")


@dataclass
class Match:
    """A text that matched the query."""

    text: str
    index: int  # position in the searched sequence
    score: int
    positions: list[int] = field(default_factory=list)


def _position_bonus(text: str, i: int) -> int:
    if i == 0:
        return FIRST_CHAR_BONUS
    prev, char = text[i - 1], text[i]
    bonus = 0
    if prev in SEPARATORS:
        bonus += SEPARATOR_BONUS
    if prev.islower() and char.isupper():
        bonus += CAMEL_CASE_BONUS
    return bonus


def _latest_positions(query: list[str], haystack: list[str]) -> Optional[list[int]]:
    """Latest index each query char can take while the rest still fits."""
    latest = [0] * len(query)
    j = len(haystack) - 1
    for k in range(len(query) - 1, -1, -1):
        while j >= 0 and haystack[j] != query[k]:
            j -= 1
        if j < 0:
            return None
        latest[k] = j
        j -= 1
    return latest


def fuzzy_match(query: str, text: str, case_sensitive: bool = False) -> Optional[Match]:
    """Match query against text and score the alignment.

    Returns None when query is empty or not a subsequence of text.
    """
    if not query:
        return None

    # Fold per character so haystack indexes line up with text.
    needle = list(query) if case_sensitive else [c.lower() for c in query]
    haystack = list(text) if case_sensitive else [c.lower() for c in text]

    latest = _latest_positions(needle, haystack)
    if latest is None:
        return None

    positions: list[int] = []
    score = 0
    adjacent = 0
    start = 0
    for k, char in enumerate(needle):
        best_i = -1
        best_score = -1
        for i in range(start, latest[k] + 1):
            if haystack[i] != char:
                continue
            candidate = _position_bonus(text, i)
            if positions and i == positions[-1] + 1:
                candidate += adjacent + ADJACENT_BONUS
            if candidate > best_score:
                best_i, best_score = i, candidate
        if positions and best_i == positions[-1] + 1:
            adjacent += ADJACENT_BONUS
        else:
            adjacent = 0
        positions.append(best_i)
        score += best_score
        start = best_i + 1

    score += max(positions[0] * LEADING_PENALTY, MAX_LEADING_PENALTY)
    score -= len(text) - len(positions)
    return Match(text=text, index=-1, score=score, positions=positions)


def fuzzy_find(query: str, texts: Iterable[str], case_sensitive: bool = False) -> list[Match]:
    """Match query against every text.

    Returns the matches sorted by score, best first. Equal scores keep the
    input order.
    """
    matches = []
    for index, text in enumerate(texts):
        match = fuzzy_match(query, text, case_sensitive)
        if match is not None:
            match.index = index
            matches.append(match)
    matches.sort(key=lambda m: -m.score)
    return matches
