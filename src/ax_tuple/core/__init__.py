"""Core layer — the tuple value types.

Rules
-----
* No ``print()`` calls.
* No I/O of any kind.
* No imports from ``cli`` or ``demo``.
* Instances are immutable once constructed.
"""

from ax_tuple.core.named import NamedTuple
from ax_tuple.core.positional import PositionalTuple

__all__: list[str] = ["NamedTuple", "PositionalTuple"]
