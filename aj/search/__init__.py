"""Search and completion functionality for aj.

This package contains:
- fuzzy.py: Fuzzy subsequence matching and scoring
- completion.py: Completion item building for the DIRECTORY argument
"""

from .fuzzy import Match, fuzzy_find, fuzzy_match

__all__ = ["Match", "fuzzy_find", "fuzzy_match"]
