from .cycles import incidence_matrix, cycle_space_basis, cut_space_basis

__all__ = [
    "incidence_matrix",
    "cycle_space_basis",
    "cut_space_basis",
]
