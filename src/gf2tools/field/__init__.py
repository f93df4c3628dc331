from .base import Field, FieldElement
from .binary import GF2, BinaryField

__all__ = [
    "Field",
    "FieldElement",
    "GF2",
    "BinaryField",
]
