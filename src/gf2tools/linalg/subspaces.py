"""
Rank, kernel and image of a matrix already in reduced row echelon form.

None of these functions reduce their input. Callers holding an arbitrary
matrix go through gf2tools.matrix.Matrix, which checks is_reduced_echelon
first and reduces only when needed.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from gf2tools.field import GF2, Field
from gf2tools.linalg.pivot import get_pivot, pivot_columns


def _width(rows: Sequence[Sequence], ncols: Optional[int]) -> int:
    if ncols is not None:
        return ncols
    return len(rows[0]) if rows else 0


def rank(rows: Sequence[Sequence], field: Field = GF2) -> int:
    """Number of distinct pivot columns."""
    seen: set[int] = set()
    count = 0
    for p in pivot_columns(rows, field):
        if p is not None and p not in seen:
            seen.add(p)
            count += 1
    return count


def _bind_pivots(rows: Sequence[Sequence], n_cols: int, field: Field) -> tuple[Dict[int, int], List[int]]:
    """
    Split columns into pivot columns (bound to the row holding their pivot)
    and free columns, scanning left to right with a row cursor.
    """
    pivots: Dict[int, int] = {}
    free: List[int] = []
    r = 0
    for j in range(n_cols):
        if r < len(rows) and not field.is_zero(rows[r][j]):
            pivots[j] = r
            r += 1
        else:
            free.append(j)
    return pivots, free


def kernel(
    rows: Sequence[Sequence],
    field: Field = GF2,
    ncols: Optional[int] = None,
) -> List[list]:
    """
    Basis of the null space, one vector per free column.

    For free column f the vector has a one at f; each pivot column p (bound
    to row p_row) gets the sum over c != p of rows[p_row][c] * v[c].

    ncols is only needed when rows is empty.
    """
    n_cols = _width(rows, ncols)
    pivots, free = _bind_pivots(rows, n_cols, field)

    basis: List[list] = []
    for f in free:
        v = [field.zero] * n_cols
        v[f] = field.one
        for p in sorted(pivots, reverse=True):
            row = rows[pivots[p]]
            acc = field.zero
            for c in range(n_cols):
                if c != p:
                    acc = field.add(acc, field.mul(row[c], v[c]))
            v[p] = acc
        basis.append(v)
    return basis


def image(rows: Sequence[Sequence], field: Field = GF2) -> List[list]:
    """
    Nonzero rows, in order. For an RREF input this is a basis of the row
    space, which is what gf2tools calls the image.
    """
    return [list(row) for row in rows if get_pivot(row, field) is not None]


def mul_vector(rows: Sequence[Sequence], vector: Sequence, field: Field = GF2) -> List:
    """Matrix-vector product over the field."""
    out = []
    for i, row in enumerate(rows):
        if len(row) != len(vector):
            raise ValueError(
                f"Row {i} has length {len(row)} but the vector has length {len(vector)}."
            )
        acc = field.zero
        for a, b in zip(row, vector):
            acc = field.add(acc, field.mul(a, b))
        out.append(acc)
    return out


def transpose(rows: Sequence[Sequence], ncols: Optional[int] = None) -> List[list]:
    n_cols = _width(rows, ncols)
    return [[row[j] for row in rows] for j in range(n_cols)]
