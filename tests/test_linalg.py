"""Tests for gf2tools.linalg (pivot lookup, reduction, rank/kernel/image)."""
import numpy as np
import pytest
from sympy import GF
from sympy.polys.matrices import DomainMatrix

from gf2tools.linalg import (
    RowOperation,
    apply_row_operations,
    echelon_form,
    get_pivot,
    image,
    is_reduced_echelon,
    kernel,
    mul_vector,
    pivot_columns,
    rank,
    transpose,
)


def _random_rows(rng, n_rows, n_cols, density=0.4):
    return (rng.random((n_rows, n_cols)) < density).astype(int).tolist()


def _sympy_rref(rows):
    """Independent RREF over GF(2) from sympy's DomainMatrix."""
    K = GF(2)
    dM = DomainMatrix([[K(a) for a in row] for row in rows], (len(rows), len(rows[0])), K)
    R, pivots = dM.rref()
    return [[int(a) % 2 for a in row] for row in R.to_Matrix().tolist()], list(pivots)


# --- pivot ---

def test_get_pivot_first_nonzero():
    assert get_pivot([0, 0, 1, 1]) == 2


def test_get_pivot_zero_row():
    assert get_pivot([0, 0, 0]) is None


def test_get_pivot_empty_row():
    assert get_pivot([]) is None


def test_pivot_columns():
    assert pivot_columns([[1, 0], [0, 0], [0, 1]]) == [0, None, 1]


# --- is_reduced_echelon ---

@pytest.mark.parametrize(
    "rows, expected",
    [
        ([[1, 0, 0, 1], [0, 1, 0, 1]], True),
        ([[1, 1, 0, 1], [0, 1, 0, 1]], False),  # pivot column 1 also set in row 0
        ([[0, 0], [1, 0]], False),  # zero row above a nonzero row
        ([[0, 1], [1, 0]], False),  # pivots decrease
        ([[1, 0], [1, 0]], False),  # repeated pivot column
        ([[1, 0, 1], [0, 1, 1], [0, 0, 0]], True),
        ([[0, 1]], True),
        ([[0, 0, 0]], True),
        ([], True),
        ([[], []], True),
    ],
)
def test_is_reduced_echelon(rows, expected):
    assert is_reduced_echelon(rows) is expected


# --- echelon_form ---

def test_echelon_form_2x2():
    reduced, ops = echelon_form([[1, 0], [1, 1]])
    assert reduced == [[1, 0], [0, 1]]
    assert ops == [(1, 0)]
    assert ops[0] == RowOperation(target=1, source=0)


def test_echelon_form_duplicate_row():
    reduced, ops = echelon_form([[1, 0, 0, 0], [0, 1, 0, 1], [0, 1, 0, 1]])
    assert reduced == [[1, 0, 0, 0], [0, 1, 0, 1], [0, 0, 0, 0]]
    assert ops == [(2, 1)]


def test_echelon_form_swap_is_three_additions():
    reduced, ops = echelon_form([[0, 1], [1, 0]])
    assert reduced == [[1, 0], [0, 1]]
    assert ops == [(0, 1), (1, 0), (0, 1)]


def test_echelon_form_swap_then_eliminate():
    rows = [[0, 1, 1], [1, 1, 0], [1, 0, 1]]
    reduced, ops = echelon_form(rows)
    assert reduced == [[1, 0, 1], [0, 1, 1], [0, 0, 0]]
    assert ops == [(0, 1), (1, 0), (0, 1), (2, 0), (0, 1), (2, 1)]


def test_echelon_form_does_not_mutate_input():
    rows = [[0, 1], [1, 1]]
    echelon_form(rows)
    assert rows == [[0, 1], [1, 1]]


def test_echelon_form_zero_matrix():
    reduced, ops = echelon_form([[0, 0], [0, 0]])
    assert reduced == [[0, 0], [0, 0]]
    assert ops == []


def test_echelon_form_columns_exhausted_before_rows():
    # 4 rows, 2 columns: reduction stops once both pivots are placed
    reduced, ops = echelon_form([[1, 1], [0, 1], [1, 0], [1, 1]])
    assert reduced == [[1, 0], [0, 1], [0, 0], [0, 0]]
    assert apply_row_operations([[1, 1], [0, 1], [1, 0], [1, 1]], ops) == reduced


def test_echelon_form_degenerate_shapes():
    assert echelon_form([]) == ([], [])
    assert echelon_form([[], []]) == ([[], []], [])


def test_echelon_form_idempotent():
    reduced, _ = echelon_form([[1, 1, 0], [1, 0, 1], [0, 1, 1]])
    again, ops = echelon_form(reduced)
    assert again == reduced
    assert ops == []


def test_echelon_form_random_properties():
    rng = np.random.default_rng(2024)
    for n_rows in (1, 3, 6):
        for n_cols in (1, 4, 7):
            for _ in range(20):
                rows = _random_rows(rng, n_rows, n_cols)
                reduced, ops = echelon_form(rows)
                assert is_reduced_echelon(reduced)
                assert apply_row_operations(rows, ops) == reduced
                again, ops2 = echelon_form(reduced)
                assert again == reduced and ops2 == []


def test_echelon_form_matches_sympy():
    rng = np.random.default_rng(7)
    for _ in range(50):
        rows = _random_rows(rng, 5, 6, density=0.5)
        reduced, _ = echelon_form(rows)
        expected, pivots = _sympy_rref(rows)
        assert reduced == expected
        assert rank(reduced) == len(pivots)


# --- apply_row_operations ---

def test_apply_row_operations_accepts_plain_tuples():
    assert apply_row_operations([[1, 0], [1, 1]], [(1, 0)]) == [[1, 0], [0, 1]]


def test_apply_row_operations_out_of_range():
    with pytest.raises(IndexError, match="#1"):
        apply_row_operations([[1, 0], [0, 1]], [(0, 1), (2, 0)])


# --- rank ---

def test_rank_full():
    assert rank([[1, 0, 0, 0], [0, 1, 0, 1]]) == 2


def test_rank_repeated_pivot_column():
    # counted as distinct pivot columns, not nonzero rows
    assert rank([[1, 0, 0, 0], [1, 0, 0, 0]]) == 1


def test_rank_empty():
    assert rank([]) == 0
    assert rank([[], []]) == 0


# --- kernel ---

def test_kernel_two_free_columns():
    assert kernel([[1, 0, 0, 0], [0, 1, 0, 1]]) == [[0, 0, 1, 0], [0, 1, 0, 1]]


def test_kernel_free_column_between_pivots():
    assert kernel([[1, 1, 0], [0, 0, 1]]) == [[1, 1, 0]]


def test_kernel_leading_free_column():
    assert kernel([[0, 1]]) == [[1, 0]]


def test_kernel_full_rank_is_empty():
    assert kernel([[1, 0], [0, 1]]) == []


def test_kernel_no_rows_is_standard_basis():
    assert kernel([], ncols=3) == [[1, 0, 0], [0, 1, 0], [0, 0, 1]]


def test_kernel_no_columns():
    assert kernel([[], []]) == []
    assert kernel([]) == []


def test_kernel_annihilated_by_rref():
    rng = np.random.default_rng(11)
    for _ in range(40):
        rows = _random_rows(rng, 4, 7)
        reduced, _ = echelon_form(rows)
        basis = kernel(reduced)
        assert rank(reduced) + len(basis) == 7
        for v in basis:
            assert mul_vector(reduced, v) == [0] * 4
            assert mul_vector(rows, v) == [0] * 4


# --- image ---

def test_image_drops_zero_rows():
    assert image([[1, 0, 0, 0], [0, 0, 0, 0]]) == [[1, 0, 0, 0]]


def test_image_keeps_row_order():
    assert image([[1, 0, 1], [0, 1, 1], [0, 0, 0]]) == [[1, 0, 1], [0, 1, 1]]


def test_image_empty():
    assert image([]) == []
    assert image([[], []]) == []


# --- helpers ---

def test_mul_vector_length_mismatch():
    with pytest.raises(ValueError, match="length"):
        mul_vector([[1, 0, 1]], [1, 1])


def test_transpose():
    assert transpose([[1, 0, 1], [0, 1, 1]]) == [[1, 0], [0, 1], [1, 1]]
    assert transpose([], ncols=2) == [[], []]
