from __future__ import annotations

"""In-memory matrix value types.

Conventions
-----------
- ``Matrix.data`` is 1D, row-major, float64: element (i, j) is ``data[i * cols + j]``.
- Arrays are frozen (``writeable = False``) at construction; views handed out by
  ``row``/``col``/``slice_2d`` share the same buffer and are frozen as well.
- A DQI grid is a tuple of tuples of strings. Rows may differ in length.
"""

from dataclasses import dataclass
from typing import Any, Tuple, TypeAlias

import numpy as np


DqiGrid: TypeAlias = Tuple[Tuple[str, ...], ...]


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


@dataclass(frozen=True, eq=False)
class Matrix:
    """Dense, row-major matrix of float64 values."""

    rows: int
    cols: int
    data: np.ndarray

    def __post_init__(self) -> None:
        rows = int(self.rows)
        cols = int(self.cols)
        if rows < 0 or cols < 0:
            raise ValueError(f"Matrix dimensions must be non-negative; got {rows}x{cols}")

        data = np.asarray(self.data, dtype=np.float64)
        if data.ndim != 1:
            raise ValueError(f"Matrix data must be 1D (row-major); got shape {data.shape}")
        if data.shape[0] != rows * cols:
            raise ValueError(
                f"Matrix data length {data.shape[0]} does not match {rows}x{cols} = {rows * cols}"
            )

        if data.flags.writeable:
            data = _frozen(data.copy() if data is self.data else data)

        object.__setattr__(self, "rows", rows)
        object.__setattr__(self, "cols", cols)
        object.__setattr__(self, "data", data)

    @classmethod
    def from_array(cls, arr: Any) -> "Matrix":
        """Build a matrix from a 2D array-like (copied)."""
        a = np.array(arr, dtype=np.float64)
        if a.ndim != 2:
            raise ValueError(f"Expected a 2D array; got shape {a.shape}")
        n_rows, n_cols = a.shape
        return cls(n_rows, n_cols, np.ascontiguousarray(a).reshape(-1))

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    def slice_2d(self) -> np.ndarray:
        return _frozen(self.data.reshape(self.rows, self.cols))

    def row(self, i: int) -> np.ndarray:
        start = i * self.cols
        return self.data[start : start + self.cols]

    def col(self, j: int) -> np.ndarray:
        return self.data[j :: self.cols] if self.cols else self.data[:0]

    def get(self, i: int, j: int) -> float:
        return float(self.data[i * self.cols + j])

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols})"
