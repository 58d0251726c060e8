"""Environment configuration for the backend.

All settings come from environment variables so the same image runs in dev and
in containers.
"""

from __future__ import annotations

import logging
import os
from typing import List


def get_data_root() -> str:
    """Read-only model data root; one sub-folder per model."""
    return os.path.abspath(os.getenv("DATA_ROOT", "./data"))


def get_cors_origins() -> List[str]:
    """Extra CORS origins (comma-separated ``CORS_ORIGINS``)."""
    return [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]


def get_log_level() -> int:
    name = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
