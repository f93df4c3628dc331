from .base import GF2TOOLS_VALIDATE, Matrix
from .gf2 import GF2Matrix

__all__ = [
    "GF2TOOLS_VALIDATE",
    "Matrix",
    "GF2Matrix",
]
