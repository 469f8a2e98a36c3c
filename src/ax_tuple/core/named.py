"""Named tuple — a fixed set of string-keyed values.

Unlike :class:`~ax_tuple.core.positional.PositionalTuple`, key order is
irrelevant for equality and hashing: two instances holding the same
key-value pairs are equal regardless of how their source mappings were
built.  Insertion order is kept for display only.

The factory copies the supplied mapping into a read-only view, so the
caller may keep mutating its own dictionary without affecting the tuple.
"""

from __future__ import annotations

from collections.abc import ItemsView, Iterator, KeysView, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, TypeVar, overload

from ax_tuple.core.casting import TypeMarker, checked_cast

T = TypeVar("T")


@dataclass(frozen=True, slots=True, eq=False)
class NamedTuple:
    """Immutable mapping of string keys to heterogeneous values."""

    fields: Mapping[str, Any]
    """Read-only view over the owned copy of the key-value pairs."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    @classmethod
    def of(cls, mapping: Mapping[str, Any]) -> NamedTuple:
        """Build a named tuple from a prepared key-value mapping.

        Keys and values are not validated.  The pairs are copied, so
        later changes to *mapping* are not observed.
        """
        return cls(mapping)

    # -- Access -------------------------------------------------------------

    def get_object(self, key: str) -> Any:
        """Return the value for *key*, or ``None`` when it is absent."""
        return self.fields.get(key)

    @overload
    def get(self, key: str) -> Any: ...

    @overload
    def get(self, key: str, type_: type[T]) -> T | None: ...

    @overload
    def get(self, key: str, type_: tuple[type[Any], ...]) -> Any: ...

    def get(self, key: str, type_: TypeMarker | None = None) -> Any:
        """Return the value for *key*, optionally checked against *type_*.

        A missing key yields ``None`` whether or not *type_* is given.

        Raises
        ------
        TupleTypeError
            When the key is present and its value is not an instance
            of *type_*.
        """
        value = self.get_object(key)
        if type_ is None:
            return value
        return checked_cast(value, type_, location=f"key {key!r}")

    def size(self) -> int:
        """Return the number of key-value pairs."""
        return len(self.fields)

    def keys(self) -> KeysView[str]:
        return self.fields.keys()

    def items(self) -> ItemsView[str, Any]:
        return self.fields.items()

    def to_string(self) -> str:
        return str(self)

    # -- Dunder -------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, NamedTuple):
            return NotImplemented
        return dict(self.fields) == dict(other.fields)

    def __hash__(self) -> int:
        return hash(frozenset(self.fields.items()))

    def __str__(self) -> str:
        pairs = ", ".join(f"{key}={value}" for key, value in self.fields.items())
        return "{" + pairs + "}"

    def __repr__(self) -> str:
        return f"NamedTuple(fields={dict(self.fields)!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        # mappingproxy cannot be pickled; rebuild from a plain dict.
        return (type(self), (dict(self.fields),))
