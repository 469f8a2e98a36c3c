"""Allow ``python -m ax_tuple`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m ax_tuple`` behaves identically to the ``ax-tuple``
console script.
"""

from __future__ import annotations

from ax_tuple.cli.app import cli

if __name__ == "__main__":
    cli()
