"""Positional tuple — a fixed-length, order-sensitive composite value.

A :class:`PositionalTuple` is the flat replacement for a chain of nested
dictionaries::

    sales[PositionalTuple.of("North", 2023, "Widget A")] = 1500.0

Equality and hashing are element-wise and positional, so two tuples
built from the same values in the same order are interchangeable as
dictionary keys.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, TypeVar, overload

from ax_tuple.core.casting import TypeMarker, checked_cast
from ax_tuple.exceptions import TupleIndexError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PositionalTuple:
    """Immutable, ordered sequence of heterogeneous values."""

    elements: tuple[Any, ...]
    """The stored values, in construction order."""

    def __post_init__(self) -> None:
        # Accept any iterable through the plain constructor too.
        if not isinstance(self.elements, tuple):
            object.__setattr__(self, "elements", tuple(self.elements))

    @classmethod
    def of(cls, *values: Any) -> PositionalTuple:
        """Build a tuple from zero or more values."""
        return cls(values)

    # -- Access -------------------------------------------------------------

    def get_object(self, index: int) -> Any:
        """Return the element at *index*.

        Raises
        ------
        TupleIndexError
            When *index* is negative or not smaller than :meth:`size`.
            Negative indices never wrap around.
        """
        if index < 0 or index >= len(self.elements):
            raise TupleIndexError(
                f"Index {index} out of range for tuple of size "
                f"{len(self.elements)}.",
            )
        return self.elements[index]

    @overload
    def get(self, index: int) -> Any: ...

    @overload
    def get(self, index: int, type_: type[T]) -> T: ...

    @overload
    def get(self, index: int, type_: tuple[type[Any], ...]) -> Any: ...

    def get(self, index: int, type_: TypeMarker | None = None) -> Any:
        """Return the element at *index*, optionally checked against *type_*.

        Raises
        ------
        TupleIndexError
            On a bad index.
        TupleTypeError
            When *type_* is given and the element is not an instance of it.
        """
        value = self.get_object(index)
        if type_ is None:
            return value
        return checked_cast(value, type_, location=f"index {index}")

    def size(self) -> int:
        """Return the number of elements."""
        return len(self.elements)

    def to_string(self) -> str:
        return str(self)

    # -- Dunder -------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.elements)

    def __str__(self) -> str:
        return "[" + ", ".join(str(element) for element in self.elements) + "]"
