from __future__ import annotations

"""Row / column / full selection over decoded matrices and DQI grids.

Selector rules
--------------
- ``None`` means "not supplied"; ``0`` is a real index.
- ``col`` takes precedence over ``row`` when both are given.
- Indices are checked against the decoded dimensions; negative indices are out
  of bounds (no wrap-around).
- DQI rows may differ in length, so a column selection checks every row.

Outputs are plain lists so they can be handed straight to a JSON encoder.
"""

from typing import List, Optional, Union

from engine.contracts.errors import ColumnOutOfBoundsError, RowOutOfBoundsError
from engine.core.matrix import DqiGrid, Matrix


MatrixSlice = Union[List[float], List[List[float]]]
DqiSlice = Union[List[str], List[List[str]]]


def _check(index: int, size: int, error: type) -> int:
    i = int(index)
    if i < 0 or i >= size:
        raise error(i, size)
    return i


def select_matrix_slice(
    matrix: Matrix,
    row: Optional[int] = None,
    col: Optional[int] = None,
) -> MatrixSlice:
    if col is not None:
        j = _check(col, matrix.cols, ColumnOutOfBoundsError)
        return matrix.col(j).tolist()

    if row is not None:
        i = _check(row, matrix.rows, RowOutOfBoundsError)
        return matrix.row(i).tolist()

    return matrix.slice_2d().tolist()


def select_dqi_slice(
    grid: DqiGrid,
    row: Optional[int] = None,
    col: Optional[int] = None,
) -> DqiSlice:
    if col is not None:
        j = int(col)
        if j < 0:
            raise ColumnOutOfBoundsError(j, 0)
        vals: List[str] = []
        for cells in grid:
            if not cells or len(cells) <= j:
                raise ColumnOutOfBoundsError(j, len(cells) if cells else 0)
            vals.append(cells[j])
        return vals

    if row is not None:
        i = _check(row, len(grid), RowOutOfBoundsError)
        return list(grid[i])

    return [list(cells) for cells in grid]


def select_slice(
    data: Union[Matrix, DqiGrid],
    row: Optional[int] = None,
    col: Optional[int] = None,
) -> Union[MatrixSlice, DqiSlice]:
    """Dispatch to :func:`select_matrix_slice` or :func:`select_dqi_slice`."""
    if isinstance(data, Matrix):
        return select_matrix_slice(data, row=row, col=col)
    return select_dqi_slice(data, row=row, col=col)
