"""Public Engine API.

This module is the **stable public surface** for the matrix cache and slicing
logic. Prefer importing from here instead of reaching into internal subpackages:

    from engine.api import get_matrix, select_slice

The backend and scripts may depend on this module.
"""

from __future__ import annotations

from engine.core.json_safety import finite_or_none
from engine.core.matrix import DqiGrid, Matrix
from engine.core.model import Model
from engine.core.slicing import select_dqi_slice, select_matrix_slice, select_slice
from engine.io.readers import decode_dqi_grid, decode_matrix, encode_matrix, load_dqi_grid, load_matrix
from engine.runtime.caches import ModelCache
from engine.runtime.model_registry import ModelRegistry


def get_matrix(model: Model, name: str) -> Matrix:
    """Return numeric matrix ``name`` of ``model``, decoding it on first use."""
    return model.matrix(name)


def get_dqi_grid(model: Model, name: str) -> DqiGrid:
    """Return DQI grid ``name`` of ``model``, decoding it on first use."""
    return model.dqi_grid(name)


__all__ = [
    "get_matrix",
    "get_dqi_grid",
    "select_slice",
    "select_matrix_slice",
    "select_dqi_slice",
    "finite_or_none",
    "decode_matrix",
    "decode_dqi_grid",
    "encode_matrix",
    "load_matrix",
    "load_dqi_grid",
    "DqiGrid",
    "Matrix",
    "Model",
    "ModelCache",
    "ModelRegistry",
]
