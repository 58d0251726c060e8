from __future__ import annotations

"""Binary matrix reader (``<name>.bin``).

Layout (v1), shared with the data-preparation pipeline:

    offset 0   uint32 LE   rows
    offset 4   uint32 LE   cols
    offset 8   float64 LE  rows * cols values, row-major

Nothing may follow the value block.
"""

from pathlib import Path
from typing import Union

import numpy as np

from engine.contracts.errors import MalformedMatrixError, MatrixLoadError
from engine.core.matrix import Matrix


HEADER_DTYPE = np.dtype("<u4")
VALUE_DTYPE = np.dtype("<f8")
HEADER_SIZE = 2 * HEADER_DTYPE.itemsize

BytesLike = Union[bytes, bytearray, memoryview]


def decode_matrix(payload: BytesLike) -> Matrix:
    """Decode a v1 binary matrix payload."""

    size = len(payload)
    if size < HEADER_SIZE:
        raise MalformedMatrixError(
            f"Matrix payload too short for header: {size} < {HEADER_SIZE} bytes"
        )

    rows, cols = (int(v) for v in np.frombuffer(payload, dtype=HEADER_DTYPE, count=2))
    n_values = rows * cols
    expected = HEADER_SIZE + n_values * VALUE_DTYPE.itemsize
    if size < expected:
        raise MalformedMatrixError(
            f"Matrix payload truncated: {rows}x{cols} needs {expected} bytes, got {size}"
        )
    if size > expected:
        raise MalformedMatrixError(
            f"Matrix payload has {size - expected} trailing bytes after {rows}x{cols} values"
        )

    if n_values == 0:
        return Matrix(rows, cols, np.empty(0, dtype=np.float64))

    values = np.frombuffer(payload, dtype=VALUE_DTYPE, count=n_values, offset=HEADER_SIZE)
    return Matrix(rows, cols, values.astype(np.float64, copy=False))


def encode_matrix(matrix: Matrix) -> bytes:
    """Encode a matrix in the v1 layout (inverse of :func:`decode_matrix`)."""

    header = np.array([matrix.rows, matrix.cols], dtype=HEADER_DTYPE)
    return header.tobytes() + np.asarray(matrix.data, dtype=VALUE_DTYPE).tobytes()


def load_matrix(file_path: Union[str, Path]) -> Matrix:
    path = Path(file_path)
    try:
        payload = path.read_bytes()
    except OSError as e:
        raise MatrixLoadError(f"Could not read matrix file {path.name}: {e}") from e
    try:
        return decode_matrix(payload)
    except MalformedMatrixError as e:
        raise MalformedMatrixError(f"{path.name}: {e}") from e
