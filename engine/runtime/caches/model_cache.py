"""Per-model in-memory cache for decoded matrices and DQI grids.

This is intentionally placed under :mod:`engine.runtime` to keep the codec and
slicing modules cache-free and script-friendly.

Notes
-----
- Process-local. Entries live as long as the owning model; there is no eviction.
- Concurrent misses on one key share a single in-flight decode. Misses on
  different keys decode in parallel; the table lock is never held while
  reading from disk.
- Hits read the table without locking. Entries are inserted only once fully
  decoded, so a hit always sees a complete value.
- Failures are handed to every waiter of that decode and are not stored.
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import Future
from pathlib import Path
from threading import Lock
from typing import Callable, Dict, Generic, Iterable, List, Optional, TypeVar, Union

from engine.contracts.choices import (
    DQI_MATRIX_NAMES,
    DQI_MATRIX_SUFFIX,
    NUMERIC_MATRIX_NAMES,
    NUMERIC_MATRIX_SUFFIX,
)
from engine.contracts.errors import UnknownMatrixError
from engine.core.matrix import DqiGrid, Matrix
from engine.io.readers.base import model_file
from engine.io.readers.dqi_reader import load_dqi_grid
from engine.io.readers.matrix_reader import load_matrix


logger = logging.getLogger(__name__)

T = TypeVar("T")
Loader = Callable[[Path], T]


class CoalescingTable(Generic[T]):
    """Memo table keyed by name with at-most-one concurrent load per key."""

    def __init__(self, label: str, names: Iterable[str], loader: Callable[[str], T]):
        self.label = label
        self._names = frozenset(names)
        self._loader = loader
        self._lock = Lock()
        self._store: Dict[str, T] = {}
        self._inflight: Dict[str, Future] = {}

    def get(self, name: str) -> T:
        if name not in self._names:
            raise UnknownMatrixError(name)

        value = self._store.get(name)
        if value is not None:
            return value

        with self._lock:
            value = self._store.get(name)
            if value is not None:
                return value
            fut = self._inflight.get(name)
            owner = fut is None
            if owner:
                fut = Future()
                self._inflight[name] = fut

        if not owner:
            logger.debug("%s %s: waiting for in-flight load", self.label, name)
            return fut.result()

        return self._load(name, fut)

    def _load(self, name: str, fut: Future) -> T:
        t0 = time.perf_counter()
        try:
            value = self._loader(name)
        except BaseException as e:
            with self._lock:
                self._inflight.pop(name, None)
            fut.set_exception(e)
            logger.warning("%s %s: load failed: %s", self.label, name, e)
            raise

        with self._lock:
            self._store[name] = value
            self._inflight.pop(name, None)
        fut.set_result(value)
        logger.info("%s %s: loaded in %.1fms", self.label, name, (time.perf_counter() - t0) * 1000)
        return value

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._store)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()


class ModelCache:
    """Numeric and DQI memo tables for the files of one model folder.

    ``matrix_loader`` / ``grid_loader`` receive the resolved file path and are
    injectable so tests can count or fail decodes.
    """

    def __init__(
        self,
        folder: Union[str, Path],
        *,
        matrix_loader: Loader[Matrix] = load_matrix,
        grid_loader: Loader[DqiGrid] = load_dqi_grid,
        label: Optional[str] = None,
    ):
        self.folder = Path(folder)
        label = label or self.folder.name
        self._matrix_loader = matrix_loader
        self._grid_loader = grid_loader
        self._numeric: CoalescingTable[Matrix] = CoalescingTable(
            f"[{label}] matrix", NUMERIC_MATRIX_NAMES, self._load_matrix
        )
        self._dqi: CoalescingTable[DqiGrid] = CoalescingTable(
            f"[{label}] dqi", DQI_MATRIX_NAMES, self._load_grid
        )

    def _load_matrix(self, name: str) -> Matrix:
        return self._matrix_loader(model_file(self.folder, name, NUMERIC_MATRIX_SUFFIX))

    def _load_grid(self, name: str) -> DqiGrid:
        return self._grid_loader(model_file(self.folder, name, DQI_MATRIX_SUFFIX))

    def get_matrix(self, name: str) -> Matrix:
        return self._numeric.get(name)

    def get_dqi_grid(self, name: str) -> DqiGrid:
        return self._dqi.get(name)

    def cached_names(self) -> Dict[str, List[str]]:
        return {"numeric": self._numeric.names(), "dqi": self._dqi.names()}

    def clear(self) -> None:
        """Drop all entries (tests and admin tooling)."""
        self._numeric.clear()
        self._dqi.clear()

    def __repr__(self) -> str:
        return f"ModelCache(folder={str(self.folder)!r})"


__all__ = ["CoalescingTable", "ModelCache"]
