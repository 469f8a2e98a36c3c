"""Rendering for the ``ax-tuple demo`` command.

Each comparison stores the sample sales twice, once in nested
dictionaries and once in a flat tuple-keyed dictionary, and prints the
records read back from both.  Records are shown as a Rich table when
Rich is installed, otherwise as plain report lines.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import Any

from ax_tuple.cli.console import out, rich_available
from ax_tuple.demo.sales import (
    SAMPLE_SALES,
    SalesRecord,
    build_named,
    build_nested,
    build_positional,
    format_record,
    iter_named,
    iter_nested,
    iter_positional,
)
from ax_tuple.exceptions import DemoSelectionError, EnvironmentError

_RULE = "=" * 40


def _import_questionary() -> Any:
    """Import questionary lazily for interactive selection."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------

def _banner(title: str) -> None:
    out.print(_RULE)
    out.print(f"   {title}")
    out.print(_RULE)
    out.print()


def _print_records(title: str, records: Iterable[SalesRecord]) -> None:
    """Print *records* under a scenario heading."""
    out.print(f"--- {title} ---")
    if not rich_available():
        for rec in records:
            print(format_record(rec), file=sys.stdout)
        return

    from rich.table import Table

    table = Table(
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("Region", justify="left")
    table.add_column("Year", justify="right")
    table.add_column("Product", justify="left")
    table.add_column("Sales", justify="right")
    for rec in records:
        table.add_row(rec.region, str(rec.year), rec.product, f"${rec.sales:.2f}")
    out.print(table)


# ---------------------------------------------------------------------------
# Comparisons
# ---------------------------------------------------------------------------

def show_positional_comparison() -> None:
    """Nested dicts versus a dict keyed by :class:`PositionalTuple`."""
    _print_records("Scenario 1: Nested dicts", iter_nested(build_nested(SAMPLE_SALES)))
    out.print()
    _print_records(
        "Scenario 2: Flat dict with PositionalTuple key",
        iter_positional(build_positional(SAMPLE_SALES)),
    )


def show_named_comparison() -> None:
    """Nested dicts versus a dict keyed by :class:`NamedTuple`."""
    _print_records("Scenario 1: Nested dicts", iter_nested(build_nested(SAMPLE_SALES)))
    out.print()
    _print_records(
        "Scenario 2: Flat dict with NamedTuple key",
        iter_named(build_named(SAMPLE_SALES)),
    )


def run_demo(which: str = "all") -> None:
    """Run one comparison (``positional`` / ``named``) or both (``all``)."""
    if which in ("positional", "all"):
        _banner("Ax-Tuple Demonstration Runner")
        show_positional_comparison()
        out.print()
    if which in ("named", "all"):
        _banner("Ax-NamedTuple Demonstration Runner")
        show_named_comparison()
        out.print()
    _banner("Demonstration Completed")


# ---------------------------------------------------------------------------
# Interactive picker
# ---------------------------------------------------------------------------

def prompt_demo_selection() -> str:
    """Ask which comparison to run.

    Raises
    ------
    DemoSelectionError
        If the user cancels the prompt (Esc / None return).
    """
    questionary = _import_questionary()

    choices = [
        questionary.Choice(title="Positional tuple keys", value="positional"),
        questionary.Choice(title="Named tuple keys", value="named"),
        questionary.Choice(title="Both", value="all"),
    ]
    selected: str | None = questionary.select(
        "Select demonstration:",
        choices=choices,
        use_arrow_keys=True,
        use_shortcuts=False,
    ).ask()  # Returns None on Ctrl+C / Esc

    if selected is None:
        raise DemoSelectionError(
            "No demonstration selected.",
            hint="Use arrow keys to pick a demonstration, then press Enter.",
        )
    return selected
