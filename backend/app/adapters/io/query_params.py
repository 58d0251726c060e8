"""Parsing of row/column selectors from request query strings."""

from __future__ import annotations

import re
from typing import Optional

from ...exceptions import InvalidIndexError


_INDEX_RE = re.compile(r"[0-9]+")


def parse_index(name: str, raw: Optional[str]) -> Optional[int]:
    """Parse an optional non-negative index parameter.

    Absent or empty -> None. Anything but a plain non-negative integer raises
    :class:`InvalidIndexError`.
    """
    if raw is None or raw == "":
        return None
    if not _INDEX_RE.fullmatch(raw):
        raise InvalidIndexError(name, raw)
    return int(raw)
