"""Reduced row echelon form over GF(2), with a replayable row-operation log."""
from __future__ import annotations

import logging
from typing import Iterable, List, NamedTuple, Sequence, Tuple

from gf2tools.field import GF2, Field
from gf2tools.linalg.pivot import get_pivot

logger = logging.getLogger(__name__)


class RowOperation(NamedTuple):
    """
    rows[target] <- rows[target] + rows[source]   (XOR over GF(2))

    A swap of rows a and b is logged as the three records
    (a, b), (b, a), (a, b).
    """

    target: int
    source: int


def _add_row(work: List[list], target: int, source: int, field: Field) -> None:
    src = work[source]
    work[target] = [field.add(a, b) for a, b in zip(work[target], src)]


def _record(work: List[list], ops: List[RowOperation], target: int, source: int, field: Field) -> None:
    _add_row(work, target, source, field)
    ops.append(RowOperation(target, source))


def _swap(work: List[list], ops: List[RowOperation], a: int, b: int, field: Field) -> None:
    _record(work, ops, a, b, field)
    _record(work, ops, b, a, field)
    _record(work, ops, a, b, field)


def is_reduced_echelon(rows: Sequence[Sequence], field: Field = GF2) -> bool:
    """
    True iff rows are in reduced row echelon form:

      - zero rows trail every nonzero row,
      - pivot columns increase from one nonzero row to the next,
      - each pivot column is nonzero only in its own row.
    """
    prev_pivot = 0
    seen_zero_row = False
    for i, row in enumerate(rows):
        p = get_pivot(row, field)
        if p is None:
            seen_zero_row = True
            continue
        if p < prev_pivot or seen_zero_row:
            return False
        for k, other in enumerate(rows):
            if k != i and not field.is_zero(other[p]):
                return False
        prev_pivot = p
    return True


def echelon_form(
    rows: Sequence[Sequence],
    field: Field = GF2,
) -> Tuple[List[list], List[RowOperation]]:
    """
    Gauss-Jordan elimination over GF(2).

    Returns (reduced_rows, operations). Elimination clears every other row
    at the pivot column, above and below, so a single left-to-right pass
    yields the fully reduced form. If the columns run out before the rows
    do, the partially processed matrix is already final.

    Replaying operations over rows with apply_row_operations reproduces
    reduced_rows exactly.
    """
    work = [list(row) for row in rows]
    ops: List[RowOperation] = []
    n_rows = len(work)
    n_cols = len(work[0]) if work else 0

    lead = 0
    for r in range(n_rows):
        if lead >= n_cols:
            logger.debug("columns exhausted at row %d of %d", r, n_rows)
            break

        # Find a row at or below r with a nonzero entry in column lead
        i = r
        while field.is_zero(work[i][lead]):
            i += 1
            if i == n_rows:
                i = r
                lead += 1
                if lead == n_cols:
                    logger.debug("echelon_form %dx%d: %d operations", n_rows, n_cols, len(ops))
                    return work, ops

        if i != r:
            _swap(work, ops, r, i, field)

        for k in range(n_rows):
            if k != r and not field.is_zero(work[k][lead]):
                _record(work, ops, k, r, field)

        lead += 1

    logger.debug("echelon_form %dx%d: %d operations", n_rows, n_cols, len(ops))
    return work, ops


def apply_row_operations(
    rows: Sequence[Sequence],
    operations: Iterable[Tuple[int, int]],
    field: Field = GF2,
) -> List[list]:
    """
    Replay (target, source) records over a copy of rows.
    Raises IndexError if a record names a row that does not exist.
    """
    work = [list(row) for row in rows]
    n_rows = len(work)
    for step, (target, source) in enumerate(operations):
        if not (0 <= target < n_rows and 0 <= source < n_rows):
            raise IndexError(
                f"Row operation #{step} ({target}, {source}) is out of range "
                f"for a matrix with {n_rows} rows."
            )
        _add_row(work, target, source, field)
    return work
