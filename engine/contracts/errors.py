"""Engine error types.

These are raised by the codec, cache and slicing layers and are kept
HTTP-agnostic. The backend maps them to responses in global exception
handlers (see ``backend/app/main.py``).
"""

from __future__ import annotations


class MatrixServiceError(Exception):
    """Base class for all engine errors."""


class UnknownModelError(MatrixServiceError, LookupError):
    """Raised when a model id is not registered."""

    def __init__(self, model_id: str):
        self.model_id = model_id
        super().__init__(f"Unknown model: {model_id}")


class UnknownMatrixError(MatrixServiceError, LookupError):
    """Raised when a matrix name is outside the numeric or DQI name sets."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown matrix: {name}")


class MatrixLoadError(MatrixServiceError):
    """Raised when a matrix or grid file cannot be read or decoded.

    Load failures are never cached; the next request retries the decode.
    """


class MalformedMatrixError(MatrixLoadError, ValueError):
    """Binary matrix payload does not match the declared layout."""


class MalformedGridError(MatrixLoadError, ValueError):
    """DQI grid text could not be parsed."""


class IndexOutOfBoundsError(MatrixServiceError, IndexError):
    """Base class for selector errors against decoded dimensions."""

    axis = "index"

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"{self.axis.capitalize()} out of bounds: {index} (size {size})")


class RowOutOfBoundsError(IndexOutOfBoundsError):
    axis = "row"


class ColumnOutOfBoundsError(IndexOutOfBoundsError):
    axis = "column"
