from .pivot import get_pivot, pivot_columns
from .echelon import (
    RowOperation,
    is_reduced_echelon,
    echelon_form,
    apply_row_operations,
)
from .subspaces import rank, kernel, image, mul_vector, transpose

__all__ = [
    "get_pivot",
    "pivot_columns",
    "RowOperation",
    "is_reduced_echelon",
    "echelon_form",
    "apply_row_operations",
    "rank",
    "kernel",
    "image",
    "mul_vector",
    "transpose",
]
