"""CLI console helpers with optional Rich support.

This module avoids module-level imports of Rich so that bootstrap paths
(``--help``, ``--version``) keep working when Rich is not installed.
Diagnostics go to stderr; :func:`emit` writes command results to stdout
so they can be piped.
"""

from __future__ import annotations

import sys
from typing import Any

from scriptkit.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stderr."""
    console_class = _load_rich_console_class()
    return console_class(stderr=True)


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()


def emit(text: str) -> None:
    """Write a command result to stdout, unstyled."""
    sys.stdout.write(text)
    if not text.endswith("\n"):
        sys.stdout.write("\n")


def escape(text: object) -> str:
    """Escape *text* for interpolation into a Rich markup string.

    The plain-stderr fallback prints markup verbatim, so without Rich
    the text is returned unchanged.
    """
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return str(text)
    return rich_escape(str(text))
