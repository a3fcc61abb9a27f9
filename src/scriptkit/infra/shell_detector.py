"""Infrastructure: locate the shell that commands will run under.

:func:`~scriptkit.infra.shell.run_shell` relies on ``subprocess`` picking
the platform shell (``/bin/sh`` on POSIX, ``%COMSPEC%`` on Windows)
unless an explicit executable is configured.  This module resolves that
same binary up front so that ``scriptkit doctor`` can report it.

Rules
-----
* Detection via :func:`shutil.which` only, no subprocess.
* No ``print()``; callers handle user-facing output.
"""

from __future__ import annotations

import os
import platform
import shutil
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ShellStatus:
    """Result of a shell detection probe.

    Attributes
    ----------
    found : bool
        Whether the shell binary was located.
    path : Path | None
        Absolute path to the shell binary, or ``None``.
    requested : str
        The executable name or path that was looked up.
    """

    found: bool
    path: Path | None
    requested: str


def default_shell() -> str:
    """Return the shell ``subprocess`` uses when none is configured."""
    if platform.system().lower() == "windows":
        return os.environ.get("COMSPEC", "cmd.exe")
    return "/bin/sh"


def detect_shell(shell_executable: str | None = None) -> ShellStatus:
    """Probe for *shell_executable*, or the platform default shell.

    Returns a :class:`ShellStatus` regardless of the outcome; the
    caller decides whether to abort or merely warn.
    """
    requested = shell_executable or default_shell()
    result = shutil.which(requested)

    if result is not None:
        return ShellStatus(found=True, path=Path(result).resolve(), requested=requested)
    return ShellStatus(found=False, path=None, requested=requested)
