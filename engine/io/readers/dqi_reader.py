from __future__ import annotations

"""DQI grid reader (``<name>.csv``).

Data-quality indicator codes are stored as comma-separated text with standard
double-quote escaping. Rows may have different lengths and are kept as parsed;
blank lines are skipped. A quote is only valid as the first character of a
field (opening a quoted field) or doubled inside a quoted field.
"""

import csv
import io
from pathlib import Path
from typing import Union

from engine.contracts.errors import MalformedGridError, MatrixLoadError
from engine.core.matrix import DqiGrid


BytesLike = Union[bytes, bytearray, memoryview]


def _check_bare_quotes(text: str) -> None:
    """Raise on a quote inside an unquoted field (e.g. ``a,b"c``)."""

    line = 1
    field_start = True
    in_quotes = False
    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if in_quotes:
            if ch == '"':
                if i + 1 < n and text[i + 1] == '"':
                    i += 1
                else:
                    in_quotes = False
                    field_start = False
            elif ch == "\n":
                line += 1
        elif ch == '"':
            if not field_start:
                raise MalformedGridError(f"DQI grid line {line}: bare quote in unquoted field")
            in_quotes = True
        elif ch in ",\r\n":
            field_start = True
            if ch == "\n":
                line += 1
        else:
            field_start = False
        i += 1


def decode_dqi_grid(payload: BytesLike) -> DqiGrid:
    """Decode DQI grid text into a tuple of row tuples."""

    try:
        text = bytes(payload).decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise MalformedGridError(f"DQI grid is not valid UTF-8: {e}") from e

    _check_bare_quotes(text)
    reader = csv.reader(io.StringIO(text, newline=""), strict=True)
    try:
        return tuple(tuple(record) for record in reader if record)
    except csv.Error as e:
        raise MalformedGridError(f"DQI grid line {reader.line_num}: {e}") from e


def load_dqi_grid(file_path: Union[str, Path]) -> DqiGrid:
    path = Path(file_path)
    try:
        payload = path.read_bytes()
    except OSError as e:
        raise MatrixLoadError(f"Could not read DQI file {path.name}: {e}") from e
    try:
        return decode_dqi_grid(payload)
    except MalformedGridError as e:
        raise MalformedGridError(f"{path.name}: {e}") from e
