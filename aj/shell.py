"""Shell integration snippets for aj."""

from pathlib import Path

import yaml

# Load snippets from YAML
_SHELLS_PATH = Path(__file__).parent / "shells.yaml"


def load_snippets() -> dict:
    """Load shell snippets from shells.yaml."""
    with open(_SHELLS_PATH) as f:
        return yaml.safe_load(f)


def supported_shells() -> list[str]:
    return sorted(load_snippets())


def get_snippet(shell: str) -> str:
    """Return the integration code for shell.

    Raises ValueError for shells without a snippet.
    """
    snippets = load_snippets()
    if shell not in snippets:
        raise ValueError(
            f"Unsupported shell: {shell} (choose from {', '.join(sorted(snippets))})"
        )
    return snippets[shell]
