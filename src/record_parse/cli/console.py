"""CLI console helpers with optional Rich support.

Rich is imported lazily so that ``--help`` and ``--version`` keep
working when it is not installed; output then falls back to plain
``print`` on stderr.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

from record_parse.exceptions import RichUnavailableError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``RichUnavailableError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise RichUnavailableError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


def rich_available() -> bool:
    """Return whether Rich can be imported."""
    try:
        _load_rich_console_class()
    except RichUnavailableError:
        return False
    return True


_cli_handler: logging.Handler | None = None
"""Handler installed by :func:`configure_logging`, if any."""


def configure_logging(verbose: bool) -> None:
    """Send package DEBUG records to stderr, via Rich when available.

    Does nothing unless *verbose*; repeated calls install one handler.
    """
    global _cli_handler

    if not verbose:
        return
    package_logger = logging.getLogger("record_parse")
    package_logger.setLevel(logging.DEBUG)
    if _cli_handler is not None and _cli_handler in package_logger.handlers:
        return

    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    else:
        handler = RichHandler(console=get_rich_console(), show_path=False)

    _cli_handler = handler
    package_logger.addHandler(handler)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except RichUnavailableError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()
