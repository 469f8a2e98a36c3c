"""Custom exception hierarchy for ax-tuple.

Every error raised by the package inherits from :class:`AxTupleError`.
Accessor errors additionally inherit from the matching built-in
(``IndexError`` / ``TypeError``) so callers may catch either.

Hierarchy
---------
AxTupleError
├── TupleIndexError      (also IndexError)
├── TupleTypeError       (also TypeError)
├── DemoSelectionError
└── EnvironmentError
"""

from __future__ import annotations


class AxTupleError(Exception):
    """Base exception for all ax-tuple errors.

    The CLI error boundary renders any subclass as a clean message,
    followed by the optional hint.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Accessors -------------------------------------------------------------

class TupleIndexError(AxTupleError, IndexError):
    """Raised when a positional index falls outside ``[0, size)``."""


class TupleTypeError(AxTupleError, TypeError):
    """Raised when a stored value does not match the requested type."""


# --- CLI -------------------------------------------------------------------

class DemoSelectionError(AxTupleError):
    """Raised when the interactive demo picker is cancelled."""


class EnvironmentError(AxTupleError):
    """Raised when an optional runtime dependency is not available."""
