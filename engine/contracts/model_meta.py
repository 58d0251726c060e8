from __future__ import annotations

"""Model metadata contracts (sectors, indicators, final-demand vectors).

These lists are produced by the data-preparation pipeline next to the matrix
files and are read-only for the API.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class _Meta(BaseModel):
    model_config = ConfigDict(frozen=True)


class Sector(_Meta):
    id: str
    index: int
    name: Optional[str] = None
    code: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None


class Indicator(_Meta):
    id: str
    index: int
    name: Optional[str] = None
    code: Optional[str] = None
    unit: Optional[str] = None
    group: Optional[str] = None
    simple_unit: Optional[str] = None
    simple_name: Optional[str] = None


class DemandInfo(_Meta):
    id: str
    year: Optional[int] = None
    type: Optional[str] = None
    system: Optional[str] = None
    location: Optional[str] = None


class ModelInfo(_Meta):
    id: str
    name: str
    description: Optional[str] = None
