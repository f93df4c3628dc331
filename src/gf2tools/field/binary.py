from __future__ import annotations

from typing import Any

from gf2tools.field.base import Field


class BinaryField(Field[int]):
    """GF(2) on plain ints: addition is XOR, multiplication is AND."""

    name = "GF(2)"

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    def is_zero(self, a: int) -> bool:
        return a == 0

    def add(self, a: int, b: int) -> int:
        return a ^ b

    def mul(self, a: int, b: int) -> int:
        return a & b

    def coerce(self, a: Any) -> int:
        # bools and numpy integers compare equal to 0/1
        if a == 0:
            return 0
        if a == 1:
            return 1
        raise ValueError(f"{a!r} is not an element of {self.name}.")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, BinaryField)

    def __hash__(self) -> int:
        return hash(self.name)


GF2 = BinaryField()
