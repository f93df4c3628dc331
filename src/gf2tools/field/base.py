from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Protocol, TypeVar


class FieldElement(Protocol):
    """
    What the elimination code needs from a matrix entry:
    equality, a total order and an XOR-style combination.
    The zero test lives on the Field, so plain ints qualify.
    """

    def __eq__(self, other: object) -> bool: ...

    def __lt__(self, other: Any) -> bool: ...

    def __xor__(self, other: Any) -> Any: ...


T = TypeVar("T", bound=FieldElement)


class Field(ABC, Generic[T]):
    """
    Arithmetic over a finite field whose elements have type T.

    The reduction and extraction routines in gf2tools.linalg only talk to
    entries through a Field, so a new field needs a new subclass and nothing
    else.
    """

    name: str = "field"

    @property
    @abstractmethod
    def zero(self) -> T:
        ...

    @property
    @abstractmethod
    def one(self) -> T:
        ...

    @abstractmethod
    def is_zero(self, a: T) -> bool:
        ...

    @abstractmethod
    def add(self, a: T, b: T) -> T:
        """Field addition (XOR-style combination)."""

    @abstractmethod
    def mul(self, a: T, b: T) -> T:
        ...

    @abstractmethod
    def coerce(self, a: Any) -> T:
        """
        Normalize a into the field.
        Raises ValueError if a is not an element.
        """

    def __contains__(self, a: Any) -> bool:
        try:
            self.coerce(a)
        except (TypeError, ValueError):
            return False
        return True

    def __repr__(self) -> str:
        return self.name
