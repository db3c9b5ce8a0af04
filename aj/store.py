"""Persisted path -> weight store.

The backing file holds one record per line::

    <weight with 3 decimals>,<path>

The first comma separates weight from path, so paths may contain commas.
"""

import math
import os
import stat
import tempfile
from pathlib import Path
from typing import Iterator, Optional

from .utils import log_debug, log_verbose, log_warning

# Energy added in quadrature on every repeated visit.
VISIT_ENERGY = 100.0


class StoreError(Exception):
    """Raised when the store cannot be written back durably."""


def parse_weight(field: str) -> Optional[float]:
    """Parse a weight field; None when it is not a finite, non-negative float."""
    try:
        weight = float(field)
    except ValueError:
        return None
    if not math.isfinite(weight) or weight < 0:
        return None
    # -0.0 would be written back as "-0.000"
    return weight + 0.0


def format_record(path: str, weight: float) -> str:
    return f"{weight:.3f},{path}\n"


class WeightStore:
    """Mapping of visited paths to accumulated weights.

    A store is bound to a file by load(). If the file cannot be opened the
    store stays empty and save() does nothing.
    """

    def __init__(self, atomic: bool = True):
        self._weights: dict[str, float] = {}
        self._path: Optional[Path] = None
        self.atomic = atomic

    @classmethod
    def open(cls, path: Path, atomic: bool = True) -> "WeightStore":
        """Create a store and load it from path.

        Use as a context manager to save on a clean exit::

            with WeightStore.open(path) as store:
                store.add("/tmp")
        """
        store = cls(atomic=atomic)
        error = store.load(path)
        if error:
            log_warning(error)
        return store

    def __enter__(self) -> "WeightStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.save()

    @property
    def path(self) -> Optional[Path]:
        return self._path

    @property
    def persistable(self) -> bool:
        return self._path is not None

    def load(self, path: Path, quiet: bool = False) -> Optional[str]:
        """Read records from path, creating an empty file if it is missing.

        Returns an error message when the file cannot be opened or created,
        None on success. quiet suppresses warnings about malformed lines.
        """
        warn = (lambda message: None) if quiet else log_warning
        path = Path(path)
        try:
            if not path.exists():
                path.parent.mkdir(parents=True, exist_ok=True)
                path.touch()
                log_verbose(f"Created store {path}")
            content = path.read_text(encoding="utf-8", errors="surrogateescape")
        except OSError as e:
            return f"could not open store {path}: {e}"

        self._path = path

        lines = content.split("\n")
        # A final segment without newline is an incomplete write.
        if lines[-1]:
            warn(f"{path}: dropping unterminated last line")
        for lineno, line in enumerate(lines[:-1], 1):
            if not line:
                continue
            weight_field, sep, entry = line.partition(",")
            if not sep:
                warn(f"{path}:{lineno}: no comma, line skipped")
                continue
            weight = parse_weight(weight_field)
            if weight is None:
                warn(f"{path}:{lineno}: bad weight {weight_field!r}, using 0")
                weight = 0.0
            self._weights[entry] = weight

        log_debug(f"Loaded {len(self._weights)} entries from {path}")
        return None

    def add(self, path: str) -> float:
        """Record a visit and return the new weight.

        A new path starts at 0; every later visit applies
        sqrt(weight**2 + VISIT_ENERGY).
        """
        if path not in self._weights:
            self._weights[path] = 0.0
        else:
            self._weights[path] = math.sqrt(self._weights[path] ** 2 + VISIT_ENERGY)
        return self._weights[path]

    def save(self) -> None:
        """Rewrite the whole backing file."""
        if self._path is None:
            return
        data = "".join(format_record(p, w) for p, w in self._weights.items())
        if self.atomic:
            self._replace(data)
        else:
            self._rewrite(data)
        log_debug(f"Saved {len(self._weights)} entries to {self._path}")

    def _replace(self, data: str) -> None:
        # Replace the symlink target, not the link itself.
        target = self._path.resolve()
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", errors="surrogateescape") as f:
                if target.exists():
                    os.chmod(f.fileno(), stat.S_IMODE(target.stat().st_mode))
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, target)
        except OSError as e:
            raise StoreError(f"could not save store {self._path}: {e}") from e
        finally:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)

    def _rewrite(self, data: str) -> None:
        try:
            with open(self._path, "w", encoding="utf-8", errors="surrogateescape") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
        except OSError as e:
            raise StoreError(f"could not save store {self._path}: {e}") from e

    def weight(self, path: str) -> float:
        return self._weights.get(path, 0.0)

    def paths(self) -> list[str]:
        return list(self._weights)

    def weights(self) -> list[float]:
        """Weights in the same order as paths()."""
        return list(self._weights.values())

    def items(self) -> list[tuple[str, float]]:
        return list(self._weights.items())

    def __contains__(self, path: object) -> bool:
        return path in self._weights

    def __len__(self) -> int:
        return len(self._weights)

    def __iter__(self) -> Iterator[str]:
        return iter(self._weights)
