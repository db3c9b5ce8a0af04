"""Shell completion functions for the aj CLI."""

from .config import ConfigError, get_data_path, get_max_candidates, is_case_sensitive
from .search.completion import complete_paths_with_fuzzy
from .store import WeightStore


def complete_directory(ctx, param, incomplete: str) -> list:
    """Shell completion for the DIRECTORY query: stored paths, fuzzy-ranked.

    Read-only: the store is never saved from completion.
    """
    from .matcher import rank

    try:
        data_path = get_data_path()
    except ConfigError:
        return []

    if not data_path.exists():
        return []

    store = WeightStore()
    if store.load(data_path, quiet=True):
        return []

    return complete_paths_with_fuzzy(
        incomplete=incomplete,
        store=store,
        rank_fn=rank,
        limit=get_max_candidates(),
        case_sensitive=is_case_sensitive(),
    )
