from __future__ import annotations

from typing import Optional, Sequence

from gf2tools.field import GF2, Field


def get_pivot(row: Sequence, field: Field = GF2) -> Optional[int]:
    """
    Column index of the first nonzero entry of row, or None if the row
    is all zero (or empty).
    """
    for j, a in enumerate(row):
        if not field.is_zero(a):
            return j
    return None


def pivot_columns(rows: Sequence[Sequence], field: Field = GF2) -> list[Optional[int]]:
    """Pivot of every row, in row order."""
    return [get_pivot(row, field) for row in rows]
