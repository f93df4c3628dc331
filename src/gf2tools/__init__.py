"""
gf2tools: reduced row echelon form over GF(2) with a replayable row-operation
log, plus rank, kernel and image (row space) built on it.
"""
import logging

from .field import Field, FieldElement, BinaryField, GF2
from .matrix import Matrix, GF2Matrix

# Reduction and extraction on plain row lists
from .linalg.pivot import get_pivot, pivot_columns
from .linalg.echelon import (
    RowOperation,
    is_reduced_echelon,
    echelon_form,
    apply_row_operations,
)
from .linalg.subspaces import rank, kernel, image, mul_vector, transpose

# Graph bridge (networkx)
from .graphs.cycles import incidence_matrix, cycle_space_basis, cut_space_basis

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Fields
    "Field",
    "FieldElement",
    "BinaryField",
    "GF2",
    # Matrices
    "Matrix",
    "GF2Matrix",
    # Linalg
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
    # Graphs
    "incidence_matrix",
    "cycle_space_basis",
    "cut_space_basis",
]
