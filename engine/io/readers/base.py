from __future__ import annotations

"""Shared reader helpers."""

from pathlib import Path
from typing import Union


def model_file(folder: Union[str, Path], name: str, suffix: str) -> Path:
    """Location of ``<name><suffix>`` inside a model folder."""
    return Path(folder) / f"{name}{suffix}"
