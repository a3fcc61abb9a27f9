"""Logging setup for the ``scriptkit`` logger hierarchy.

Library modules only ever call ``logging.getLogger(__name__)``; handlers
are attached here, once, by the CLI entry point (or by a script that
wants scriptkit's diagnostics on its terminal).

Rich is used for rendering when importable.  Without it a plain
stderr ``StreamHandler`` is installed, mirroring the console proxy in
:mod:`scriptkit.cli.console`.
"""

from __future__ import annotations

import logging

__all__ = ["LOGGER_NAME", "setup_logging"]

LOGGER_NAME = "scriptkit"

_PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"

_handler: logging.Handler | None = None


def _build_handler() -> logging.Handler:
    try:
        from rich.console import Console
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler: logging.Handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
        return handler

    return RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )


def setup_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the ``scriptkit`` logger.

    Idempotent: repeated calls only change the level.
    """
    global _handler

    root = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = level.upper()
    root.setLevel(level)

    if _handler is None:
        _handler = _build_handler()
        root.addHandler(_handler)

    return root
