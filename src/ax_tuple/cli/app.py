"""CLI application entry point and command routing for ax-tuple.

This module is the **sole error boundary** for the entire application.
It catches :class:`~ax_tuple.exceptions.AxTupleError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.
"""

from __future__ import annotations

import argparse
import sys

from ax_tuple.cli import exit_codes
from ax_tuple.cli.console import console
from ax_tuple.exceptions import AxTupleError
from ax_tuple.version import __version__

DEMO_CHOICES: tuple[str, ...] = ("positional", "named", "all")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``ax-tuple demo [positional|named|all] [--interactive]``
    * ``ax-tuple doctor``
    * ``ax-tuple --version``
    """
    parser = argparse.ArgumentParser(
        prog="ax-tuple",
        description="Immutable positional and named tuples for composite keys.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    subparsers = parser.add_subparsers(dest="command")

    demo = subparsers.add_parser(
        "demo",
        help="Compare nested dicts with tuple-keyed dicts.",
    )
    demo.add_argument(
        "which",
        nargs="?",
        choices=DEMO_CHOICES,
        default="all",
        help="Which comparison to run (default: all).",
    )
    demo.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Pick the comparison from an interactive menu.",
    )

    subparsers.add_parser("doctor", help="Run environment diagnostics.")
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_demo(which: str, *, interactive: bool) -> int:
    """Dispatch the ``demo`` command."""
    from ax_tuple.cli.demo import prompt_demo_selection, run_demo

    if interactive:
        which = prompt_demo_selection()
    run_demo(which)
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from ax_tuple.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the ax-tuple CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    if args.command == "doctor":
        return _handle_doctor()

    return _handle_demo(args.which, interactive=args.interactive)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except AxTupleError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
