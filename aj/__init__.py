"""aj - weighted directory jumping."""

__version__ = "0.1.0"
