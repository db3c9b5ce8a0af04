"""Pick a jump target from the weight store for a fuzzy query."""

from dataclasses import dataclass

from .search import fuzzy_find
from .store import WeightStore
from .utils import log_debug

SENTINEL = "."
MAX_CANDIDATES = 10


@dataclass
class Candidate:
    """A store path that fuzzy-matched the query."""

    path: str
    score: int
    weight: float


def rank(
    query: str,
    store: WeightStore,
    limit: int = MAX_CANDIDATES,
    case_sensitive: bool = False,
) -> list[Candidate]:
    """Fuzzy-rank store paths against query, best alignment first, at most limit."""
    matches = fuzzy_find(query, store.paths(), case_sensitive)
    return [
        Candidate(path=m.text, score=m.score, weight=store.weight(m.text))
        for m in matches[:limit]
    ]


def resolve(
    query: str,
    store: WeightStore,
    limit: int = MAX_CANDIDATES,
    case_sensitive: bool = False,
) -> str:
    """Return the heaviest path among the top fuzzy candidates.

    Only a strictly greater weight replaces the current best, which starts
    at weight 0 with SENTINEL. Ties therefore go to the better fuzzy rank,
    and a query whose candidates all weigh 0 resolves to SENTINEL.
    """
    best_choice = SENTINEL
    max_weight = 0.0
    for candidate in rank(query, store, limit, case_sensitive):
        log_debug(f"  {candidate.score:>5} {candidate.weight:>9.3f} {candidate.path}")
        if candidate.weight > max_weight:
            max_weight = candidate.weight
            best_choice = candidate.path
    return best_choice
