"""Runtime-checked retrieval shared by both tuple types."""

from __future__ import annotations

from typing import Any, TypeVar

from ax_tuple.exceptions import TupleTypeError

T = TypeVar("T")

TypeMarker = type[Any] | tuple[type[Any], ...]
"""A class, an ABC, or a tuple of either — anything ``isinstance`` accepts."""


def describe_type(type_: TypeMarker) -> str:
    """Render a type marker for error messages (``int``, ``int | float``)."""
    if isinstance(type_, tuple):
        return " | ".join(describe_type(t) for t in type_)
    return getattr(type_, "__qualname__", repr(type_))


def checked_cast(value: Any, type_: TypeMarker, *, location: str) -> Any:
    """Return *value* unchanged if it is an instance of *type_*.

    ``None`` stands for an absent value and passes any valid marker.
    Nothing is ever converted: a mismatch, or a marker ``isinstance``
    rejects, raises :class:`TupleTypeError`.

    Parameters
    ----------
    value:
        The stored element.
    type_:
        Expected type, as accepted by :func:`isinstance`.
    location:
        Human-readable position used in the message
        (e.g. ``"index 0"`` or ``"key 'Year'"``).
    """
    try:
        isinstance(None, type_)
    except TypeError as exc:
        raise TupleTypeError(
            f"Invalid type marker {type_!r} for value at {location}.",
            hint="Use a class, an ABC, or a tuple of classes; not a parameterised generic.",
        ) from exc
    if value is None or isinstance(value, type_):
        return value
    raise TupleTypeError(
        f"Value at {location} is {type(value).__qualname__}, "
        f"not {describe_type(type_)}.",
        hint="Request the stored type, or omit the type to get the raw value.",
    )
