"""Engine contracts.

This package contains the closed name sets, error taxonomy and Pydantic
metadata models shared by the engine and the backend.

Export policy:
- Keep module imports explicit in most of the codebase:
    from engine.contracts.errors import UnknownMatrixError
- The names re-exported here are intended as a small set of convenience
  imports for callers that prefer a single namespace.
"""

from .choices import (
    DQI_MATRIX_NAMES,
    NUMERIC_MATRIX_NAMES,
    DqiMatrixName,
    NumericMatrixName,
)
from .errors import (
    ColumnOutOfBoundsError,
    MalformedGridError,
    MalformedMatrixError,
    MatrixLoadError,
    MatrixServiceError,
    RowOutOfBoundsError,
    UnknownMatrixError,
    UnknownModelError,
)
from .model_meta import DemandInfo, Indicator, ModelInfo, Sector

__all__ = [
    "DQI_MATRIX_NAMES",
    "NUMERIC_MATRIX_NAMES",
    "DqiMatrixName",
    "NumericMatrixName",
    "ColumnOutOfBoundsError",
    "MalformedGridError",
    "MalformedMatrixError",
    "MatrixLoadError",
    "MatrixServiceError",
    "RowOutOfBoundsError",
    "UnknownMatrixError",
    "UnknownModelError",
    "DemandInfo",
    "Indicator",
    "ModelInfo",
    "Sector",
]
