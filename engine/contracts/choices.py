from __future__ import annotations

"""Closed name sets for the matrices a model serves.

Design intent:
- Keep this file dependency-free (stdlib + typing only).
- Any name outside these sets is a client addressing error, never a cache miss.
"""

from typing import Literal, TypeAlias


# -----------------------------
# Numeric matrices (<name>.bin)
# -----------------------------
NumericMatrixName: TypeAlias = Literal["A", "B", "C", "D", "L", "U"]

NUMERIC_MATRIX_NAMES: tuple[str, ...] = ("A", "B", "C", "D", "L", "U")
NUMERIC_MATRIX_SUFFIX = ".bin"


# -----------------------------
# Data-quality grids (<name>.csv)
# -----------------------------
DqiMatrixName: TypeAlias = Literal["B_dqi", "D_dqi", "U_dqi"]

DQI_MATRIX_NAMES: tuple[str, ...] = ("B_dqi", "D_dqi", "U_dqi")
DQI_MATRIX_SUFFIX = ".csv"


def is_numeric_matrix(name: str) -> bool:
    return name in NUMERIC_MATRIX_NAMES


def is_dqi_matrix(name: str) -> bool:
    return name in DQI_MATRIX_NAMES


__all__ = [
    "NumericMatrixName",
    "NUMERIC_MATRIX_NAMES",
    "NUMERIC_MATRIX_SUFFIX",
    "DqiMatrixName",
    "DQI_MATRIX_NAMES",
    "DQI_MATRIX_SUFFIX",
    "is_numeric_matrix",
    "is_dqi_matrix",
]
