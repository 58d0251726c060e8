from __future__ import annotations

"""JSON-safety helpers.

Response payloads must contain only finite JSON numbers. Matrix coefficients
produced upstream may hold NaN or +/-inf, which are emitted as ``null``.
"""

from typing import Any, List

import numpy as np


def finite_or_none(values: List[Any]) -> List[Any]:
    """Replace non-finite numbers in a (nested) list of floats with None.

    Lists that are already finite are returned unchanged.
    """

    a = np.asarray(values, dtype=float)
    finite = np.isfinite(a)
    if finite.all():
        return values
    out = a.astype(object)
    out[~finite] = None
    return out.tolist()
