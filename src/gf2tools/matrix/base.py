from __future__ import annotations

import logging
import os
from typing import Any, Generic, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from gf2tools.field import Field
from gf2tools.field.base import T
from gf2tools.linalg import echelon, subspaces
from gf2tools.linalg.pivot import get_pivot as _get_pivot

logger = logging.getLogger(__name__)


GF2TOOLS_VALIDATE = os.environ.get("GF2TOOLS_VALIDATE", "1").strip().lower() not in (
    "0",
    "false",
    "no",
    "off",
)


def _check_rows(
    rows: Sequence[Sequence[Any]],
    field: Field,
    ncols: Optional[int],
    validate: bool,
) -> Tuple[Tuple[Tuple[Any, ...], ...], int]:
    """
    Copy rows into a tuple of tuples, enforcing rectangularity and
    (if validate) field membership. Returns (rows, ncols).
    """
    rows = [tuple(row) for row in rows]
    if rows:
        width = len(rows[0])
        if ncols is not None and ncols != width:
            raise ValueError(f"ncols={ncols} given but row 0 has length {width}.")
    else:
        width = 0 if ncols is None else ncols
        if width < 0:
            raise ValueError(f"ncols must be >= 0, got {ncols}.")

    for i, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(
                f"Matrix rows must have equal length: row {i} has length "
                f"{len(row)}, expected {width}."
            )

    if validate:
        checked = []
        for i, row in enumerate(rows):
            out = []
            for j, a in enumerate(row):
                try:
                    out.append(field.coerce(a))
                except ValueError as e:
                    raise ValueError(f"Entry ({i}, {j}): {e}") from e
            checked.append(tuple(out))
        rows = checked

    return tuple(rows), width


class Matrix(Generic[T]):
    """
    Rectangular matrix over a Field, read-only after construction.

    Anything that changes the entries (reduction, replaying row operations,
    transposing) returns a new matrix. rank(), kernel() and image() check
    is_reduced_echelon() first and only reduce when it fails.
    """

    def __init__(
        self,
        rows: Iterable[Sequence[Any]],
        field: Field[T],
        *,
        ncols: Optional[int] = None,
        validate: Optional[bool] = None,
    ) -> None:
        if validate is None:
            validate = GF2TOOLS_VALIDATE
        self._field = field
        self._rows, self._ncols = _check_rows(list(rows), field, ncols, validate)

    def _wrap(self, rows: Sequence[Sequence[T]], ncols: Optional[int] = None) -> "Matrix[T]":
        # rows come from our own algorithms: already rectangular and in the field
        out = object.__new__(type(self))
        out._field = self._field
        out._rows = tuple(tuple(row) for row in rows)
        if ncols is None:
            ncols = len(out._rows[0]) if out._rows else 0
        out._ncols = ncols
        return out

    # ---------------------------------------------------------------------------
    # Accessors
    # ---------------------------------------------------------------------------

    @property
    def field(self) -> Field[T]:
        return self._field

    def elements(self) -> Tuple[Tuple[T, ...], ...]:
        return self._rows

    def nrows(self) -> int:
        return len(self._rows)

    def ncols(self) -> int:
        return self._ncols

    @property
    def shape(self) -> Tuple[int, int]:
        return self.nrows(), self.ncols()

    @staticmethod
    def get_pivot(row: Sequence[Any], field: Optional[Field] = None) -> Optional[int]:
        if field is None:
            return _get_pivot(row)
        return _get_pivot(row, field)

    def to_array(self, dtype: Any = np.uint8) -> np.ndarray:
        return np.array(self._rows, dtype=dtype).reshape(self.shape)

    # ---------------------------------------------------------------------------
    # Reduction
    # ---------------------------------------------------------------------------

    def is_reduced_echelon(self) -> bool:
        return echelon.is_reduced_echelon(self._rows, self._field)

    def echelon_form(self) -> Tuple["Matrix[T]", List[echelon.RowOperation]]:
        reduced, ops = echelon.echelon_form(self._rows, self._field)
        return self._wrap(reduced, self._ncols), ops

    def apply(self, operations: Iterable[Tuple[int, int]]) -> "Matrix[T]":
        """Replay (target, source) row additions, returning a new matrix."""
        rows = echelon.apply_row_operations(self._rows, operations, self._field)
        return self._wrap(rows, self._ncols)

    def _reduced_rows(self) -> Sequence[Sequence[T]]:
        if self.is_reduced_echelon():
            logger.debug("%dx%d matrix already in RREF, skipping reduction", *self.shape)
            return self._rows
        reduced, _ = echelon.echelon_form(self._rows, self._field)
        return reduced

    # ---------------------------------------------------------------------------
    # Derived quantities
    # ---------------------------------------------------------------------------

    def rank(self) -> int:
        return subspaces.rank(self._reduced_rows(), self._field)

    def kernel(self) -> List[List[T]]:
        return subspaces.kernel(self._reduced_rows(), self._field, ncols=self._ncols)

    def image(self) -> List[List[T]]:
        return subspaces.image(self._reduced_rows(), self._field)

    def mul_vector(self, vector: Sequence[Any]) -> List[T]:
        return subspaces.mul_vector(self._rows, vector, self._field)

    def transpose(self) -> "Matrix[T]":
        return self._wrap(subspaces.transpose(self._rows, self._ncols), self.nrows())

    # ---------------------------------------------------------------------------
    # Value semantics
    # ---------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self._field == other._field
            and self.shape == other.shape
            and self._rows == other._rows
        )

    def __hash__(self) -> int:
        return hash((self._field, self.shape, self._rows))

    def __repr__(self) -> str:
        rows = [list(row) for row in self._rows]
        if not rows and self._ncols:
            return f"{type(self).__name__}({rows!r}, ncols={self._ncols})"
        return f"{type(self).__name__}({rows!r})"

    def __str__(self) -> str:
        return "\n".join(" ".join(str(a) for a in row) for row in self._rows)
