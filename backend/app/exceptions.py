"""Backend-only exception types.

These are used to keep service code HTTP-agnostic while still allowing routers
or global exception handlers to map errors to appropriate HTTP responses.
"""

from __future__ import annotations


class InvalidIndexError(ValueError):
    """Raised when a row/col query parameter is not a non-negative integer."""

    def __init__(self, name: str, raw: str):
        self.name = name
        self.raw = raw
        super().__init__(f"Invalid index: {name}={raw}")


class UnknownSectorError(LookupError):
    """Raised when a sector id is not part of the model."""

    def __init__(self, model_id: str, sector_id: str):
        self.model_id = model_id
        self.sector_id = sector_id
        super().__init__(f"Unknown sector {sector_id!r} in model {model_id!r}")
