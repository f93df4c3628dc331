from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

import numpy as np

from gf2tools.field import GF2
from gf2tools.matrix.base import Matrix


class GF2Matrix(Matrix[int]):
    """
    Matrix over GF(2) with entries stored as the ints 0 and 1.

    >>> M = GF2Matrix([[1, 0], [1, 1]])
    >>> R, ops = M.echelon_form()
    >>> R.elements(), ops
    (((1, 0), (0, 1)), [RowOperation(target=1, source=0)])
    """

    def __init__(
        self,
        rows: Iterable[Sequence[Any]] = (),
        *,
        ncols: Optional[int] = None,
        validate: Optional[bool] = None,
    ) -> None:
        super().__init__(rows, GF2, ncols=ncols, validate=validate)

    @classmethod
    def identity(cls, n: int) -> "GF2Matrix":
        return cls([[1 if i == j else 0 for j in range(n)] for i in range(n)], ncols=n)

    @classmethod
    def zeros(cls, nrows: int, ncols: int) -> "GF2Matrix":
        return cls([[0] * ncols for _ in range(nrows)], ncols=ncols)

    @classmethod
    def from_array(cls, array: Any, *, validate: Optional[bool] = None) -> "GF2Matrix":
        """Build from a 2-D numpy array (or anything np.asarray accepts)."""
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise ValueError(f"Expected a 2-D array, got shape {arr.shape}.")
        return cls(arr.tolist(), ncols=arr.shape[1], validate=validate)

    def __str__(self) -> str:
        return "\n".join("".join(str(a) for a in row) for row in self._rows)
