from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from engine.api import Model

from ..adapters.io.query_params import parse_index
from ..dependencies import get_model
from ..services.matrix_service import matrix_slice

router = APIRouter()


@router.get("/{model}/matrix/{matrix}")
def get_matrix_endpoint(
    matrix: str,
    row: Optional[str] = Query(None, description="Row index; returns a single row"),
    col: Optional[str] = Query(None, description="Column index; takes precedence over row"),
    m: Model = Depends(get_model),
):
    """
    Serve a numeric matrix (A, B, C, D, L, U) or DQI grid (B_dqi, D_dqi, U_dqi).

    Without selectors the full matrix is returned as a list of rows.
    """
    col_idx = parse_index("col", col)
    row_idx = parse_index("row", row)
    return JSONResponse(matrix_slice(m, matrix, row=row_idx, col=col_idx))
