"""Demonstration entry point for record-parse.

Parses a few example lines under both failure policies and renders the
results as a table.  With no arguments the built-in examples are used;
any positional strings replace them and are shown under both policies.

This module is the **sole error boundary** for the application.  It
catches :class:`~record_parse.exceptions.RecordParseError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, rendering a
short message and returning a well-defined exit code.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from record_parse.cli import exit_codes
from record_parse.cli.console import configure_logging, console, rich_available
from record_parse.core.models import Record
from record_parse.core.policies import parse_strict, parse_with_default
from record_parse.exceptions import ParseError, RecordParseError
from record_parse.version import __version__

DEFAULT_POLICY: str = "default"
STRICT_POLICY: str = "strict"

BUILTIN_EXAMPLES: tuple[tuple[str, str], ...] = (
    ("Mark,20", DEFAULT_POLICY),
    ("Gerald,70", DEFAULT_POLICY),
    ("Mark,20", STRICT_POLICY),
)
"""(input, policy) pairs shown when no text is given."""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="record-parse",
        description="Demonstrate NAME,AGE parsing under both failure policies.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log fallback decisions at DEBUG level.",
    )
    parser.add_argument(
        "texts",
        nargs="*",
        metavar="TEXT",
        help="Lines to parse (e.g. 'Mark,20'). Defaults to built-in examples.",
    )
    return parser


# ---------------------------------------------------------------------------
# Row construction (no rendering)
# ---------------------------------------------------------------------------

def describe(result: Record | ParseError) -> str:
    """Return a one-line description of a parse result."""
    if isinstance(result, ParseError):
        return f"{type(result).__name__}: {result}"
    return repr(result)


def run_policy(text: str, policy: str) -> Record | ParseError:
    """Parse *text* under the named *policy*."""
    if policy == DEFAULT_POLICY:
        return parse_with_default(text)
    if policy == STRICT_POLICY:
        return parse_strict(text)
    raise RecordParseError(f"Unknown policy: {policy!r}")


def build_rows(texts: Sequence[str]) -> list[tuple[str, str, str]]:
    """Return ``(input, policy, result)`` rows for display."""
    if texts:
        pairs = [(text, policy) for text in texts for policy in (DEFAULT_POLICY, STRICT_POLICY)]
    else:
        pairs = list(BUILTIN_EXAMPLES)
    return [(text, policy, describe(run_policy(text, policy))) for text, policy in pairs]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def _print_plain_table(rows: list[tuple[str, str, str]]) -> None:
    """Render rows without Rich."""
    print("\nrecord-parse demo", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Input':<16} {'Policy':<8} Result", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for text, policy, result in rows:
        print(f"{text!r:<16} {policy:<8} {result}", file=sys.stderr)
    print(file=sys.stderr)


def _print_rich_table(rows: list[tuple[str, str, str]]) -> None:
    from rich.markup import escape
    from rich.table import Table

    table = Table(
        title="record-parse demo",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Input", style="bold", min_width=12)
    table.add_column("Policy", justify="center", min_width=8)
    table.add_column("Result", min_width=20)

    for text, policy, result in rows:
        style = "green" if result.startswith("Record(") else "red"
        table.add_row(escape(repr(text)), policy, f"[{style}]{escape(result)}[/{style}]")

    console.print()
    console.print(table)
    console.print()


def render_rows(rows: list[tuple[str, str, str]]) -> None:
    if rich_available():
        _print_rich_table(rows)
    else:
        _print_plain_table(rows)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the demo.

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

    configure_logging(args.verbose)
    render_rows(build_rows(args.texts))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except RecordParseError as exc:
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
