from __future__ import annotations

"""Model metadata tables (``sectors.csv``, ``indicators.csv``, ``demands.csv``).

The tables carry a header row; column names are matched case-insensitively and
unknown columns are ignored. A missing table yields an empty list.
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

import pandas as pd
from pydantic import BaseModel

from engine.contracts.errors import MatrixLoadError
from engine.contracts.model_meta import DemandInfo, Indicator, Sector


logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

SECTORS_FILE = "sectors.csv"
INDICATORS_FILE = "indicators.csv"
DEMANDS_FILE = "demands.csv"


def _snake(col: Any) -> str:
    s = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", str(col).strip())
    return re.sub(r"[\s\-]+", "_", s).lower()


def _clean(value: Any) -> Optional[Any]:
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return value


def read_meta_table(path: Union[str, Path], model_cls: Type[M]) -> List[M]:
    """Read a metadata CSV into a list of ``model_cls`` rows."""

    path = Path(path)
    if not path.exists():
        logger.debug("No metadata table at %s", path)
        return []

    try:
        df = pd.read_csv(path.as_posix(), dtype=str, keep_default_na=False, encoding="utf-8-sig")
    except (OSError, ValueError) as e:
        raise MatrixLoadError(f"Could not read metadata table {path.name}: {e}") from e

    df.columns = [_snake(c) for c in df.columns]
    fields = set(model_cls.model_fields)
    keep = [c for c in df.columns if c in fields]

    out: List[M] = []
    for i, record in enumerate(df[keep].to_dict(orient="records")):
        data: Dict[str, Any] = {k: _clean(v) for k, v in record.items() if _clean(v) not in (None, "")}
        if "index" in fields and "index" not in data:
            data["index"] = i
        try:
            out.append(model_cls(**data))
        except ValueError as e:
            raise MatrixLoadError(f"{path.name} row {i + 1}: {e}") from e
    return out


def read_sectors(folder: Union[str, Path]) -> List[Sector]:
    return read_meta_table(Path(folder) / SECTORS_FILE, Sector)


def read_indicators(folder: Union[str, Path]) -> List[Indicator]:
    return read_meta_table(Path(folder) / INDICATORS_FILE, Indicator)


def read_demand_infos(folder: Union[str, Path]) -> List[DemandInfo]:
    return read_meta_table(Path(folder) / DEMANDS_FILE, DemandInfo)
