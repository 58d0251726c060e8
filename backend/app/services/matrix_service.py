"""Matrix slice service: cache fetch + selection, no HTTP concerns."""

from typing import Any, List, Optional

from engine.api import Model, finite_or_none, get_dqi_grid, get_matrix, select_dqi_slice, select_matrix_slice
from engine.contracts.choices import is_dqi_matrix, is_numeric_matrix
from engine.contracts.errors import UnknownMatrixError


def matrix_slice(
    model: Model,
    name: str,
    row: Optional[int] = None,
    col: Optional[int] = None,
) -> List[Any]:
    """
    Return the full matrix, one row or one column of ``model``'s matrix ``name``.

    Numeric matrices yield floats (non-finite values as None); DQI grids yield
    strings. Bounds are checked after the fetch, against the decoded dimensions.
    """
    if is_numeric_matrix(name):
        matrix = get_matrix(model, name)
        return finite_or_none(select_matrix_slice(matrix, row=row, col=col))

    if is_dqi_matrix(name):
        grid = get_dqi_grid(model, name)
        return select_dqi_slice(grid, row=row, col=col)

    raise UnknownMatrixError(name)
