"""ax-tuple — immutable positional and named tuples for composite keys.

Both types are hashable value objects intended to replace nested
dictionaries with flat, tuple-keyed ones.
"""

from ax_tuple.core.named import NamedTuple
from ax_tuple.core.positional import PositionalTuple
from ax_tuple.version import __version__

__all__: list[str] = ["NamedTuple", "PositionalTuple", "__version__"]
