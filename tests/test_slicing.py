"""Row / column / full selection with bounds checks."""

import pytest

from engine.contracts.errors import ColumnOutOfBoundsError, RowOutOfBoundsError
from engine.core.matrix import Matrix
from engine.core.slicing import select_dqi_slice, select_matrix_slice, select_slice

from io_helpers import m3x4


@pytest.fixture
def M() -> Matrix:
    return Matrix.from_array(m3x4())


RAGGED = (("a0", "b0", "c0"), ("a1", "b1"))


class TestMatrixSlice:

    def test_row(self, M: Matrix) -> None:
        assert select_matrix_slice(M, row=1) == [10.0, 11.0, 12.0, 13.0]

    def test_col(self, M: Matrix) -> None:
        assert select_matrix_slice(M, col=2) == [2.0, 12.0, 22.0]

    def test_full(self, M: Matrix) -> None:
        full = select_matrix_slice(M)
        assert len(full) == 3
        assert all(len(r) == 4 for r in full)
        assert full == m3x4().tolist()

    def test_col_takes_precedence_over_row(self, M: Matrix) -> None:
        assert select_matrix_slice(M, row=1, col=2) == select_matrix_slice(M, col=2)

    def test_zero_is_a_selector(self, M: Matrix) -> None:
        assert select_matrix_slice(M, row=0) == [0.0, 1.0, 2.0, 3.0]
        assert select_matrix_slice(M, col=0) == [0.0, 10.0, 20.0]

    def test_row_out_of_bounds(self, M: Matrix) -> None:
        with pytest.raises(RowOutOfBoundsError):
            select_matrix_slice(M, row=3)

    def test_col_out_of_bounds(self, M: Matrix) -> None:
        with pytest.raises(ColumnOutOfBoundsError):
            select_matrix_slice(M, col=4)

    def test_col_bounds_checked_even_with_valid_row(self, M: Matrix) -> None:
        with pytest.raises(ColumnOutOfBoundsError):
            select_matrix_slice(M, row=0, col=4)

    def test_negative_indices_do_not_wrap(self, M: Matrix) -> None:
        with pytest.raises(RowOutOfBoundsError):
            select_matrix_slice(M, row=-1)
        with pytest.raises(ColumnOutOfBoundsError):
            select_matrix_slice(M, col=-1)


class TestDqiSlice:

    def test_column_needs_every_row(self) -> None:
        with pytest.raises(ColumnOutOfBoundsError):
            select_dqi_slice(RAGGED, col=2)

    def test_column_within_shortest_row(self) -> None:
        assert select_dqi_slice(RAGGED, col=1) == ["b0", "b1"]

    def test_empty_row_fails_column_selection(self) -> None:
        with pytest.raises(ColumnOutOfBoundsError):
            select_dqi_slice((("a",), ()), col=0)

    def test_row(self) -> None:
        assert select_dqi_slice(RAGGED, row=1) == ["a1", "b1"]

    def test_row_out_of_bounds(self) -> None:
        with pytest.raises(RowOutOfBoundsError):
            select_dqi_slice(RAGGED, row=2)

    def test_full_keeps_ragged_shape(self) -> None:
        assert select_dqi_slice(RAGGED) == [["a0", "b0", "c0"], ["a1", "b1"]]

    def test_col_takes_precedence_over_row(self) -> None:
        assert select_dqi_slice(RAGGED, row=1, col=0) == ["a0", "a1"]


class TestDispatch:

    def test_dispatches_on_type(self, M: Matrix) -> None:
        assert select_slice(M, row=2) == [20.0, 21.0, 22.0, 23.0]
        assert select_slice(RAGGED, row=0) == ["a0", "b0", "c0"]
