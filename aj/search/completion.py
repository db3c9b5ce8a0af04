"""Completion item building shared by shell completion callbacks."""

from click.shell_completion import CompletionItem

from ..store import WeightStore


def complete_paths_with_fuzzy(
    incomplete: str,
    store: WeightStore,
    rank_fn,
    limit: int,
    case_sensitive: bool = False,
) -> list:
    """Build completion items for stored paths.

    With no input the heaviest paths are offered. Otherwise rank_fn orders
    the fuzzy candidates and the best alignments come first.
    """
    if not incomplete:
        heaviest = sorted(store.items(), key=lambda item: -item[1])[:limit]
        return [
            CompletionItem(path, help=f"weight {weight:.1f}")
            for path, weight in heaviest
        ]

    return [
        CompletionItem(c.path, help=f"weight {c.weight:.1f}")
        for c in rank_fn(incomplete, store, limit, case_sensitive)
    ]
