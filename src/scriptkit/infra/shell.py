"""Infrastructure: run shell commands and capture their output.

A non-zero exit status is **not** an error here: scripts inspect the
output (or :attr:`ShellResult.returncode`) themselves.  Only a command
that cannot be started at all (missing working directory, missing
shell executable) raises :class:`~scriptkit.exceptions.ShellCommandError`.

Rules
-----
* No ``print()``: verbose mode routes output through logging and lets
  the child's stderr through to the terminal.
* Raw ``OSError`` never escapes this module.
* A cancelled :func:`run_shell_async` leaves no child process behind.
"""

from __future__ import annotations

import asyncio
import logging
import os
import signal
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path

from scriptkit.exceptions import ShellCommandError
from scriptkit.infra.ansi import strip_ansi

logger = logging.getLogger(__name__)

_POSIX = not sys.platform.startswith("win")


@dataclass(frozen=True, slots=True)
class ShellResult:
    """Outcome of a single shell invocation."""

    command: str
    returncode: int
    output: str
    """Captured stdout, ANSI-stripped and trimmed."""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_shell(
    command: str,
    cwd: str | Path | None = None,
    *,
    verbose: bool = False,
    shell_executable: str | None = None,
) -> ShellResult:
    """Run *command* through the system shell.

    Parameters
    ----------
    command:
        Command line passed verbatim to the shell.
    cwd:
        Working directory.  ``None`` (or empty) uses the current one.
    verbose:
        When ``True`` the child's stderr is not captured and the cleaned
        stdout is logged at ``INFO``.
    shell_executable:
        Explicit shell binary (e.g. ``/bin/bash``).  ``None`` uses the
        platform default.

    Raises
    ------
    ShellCommandError
        When the shell cannot be started in *cwd*.
    """
    workdir = Path(cwd) if cwd else None
    try:
        completed = subprocess.run(
            command,
            shell=True,
            cwd=workdir,
            executable=shell_executable,
            stdout=subprocess.PIPE,
            stderr=None if verbose else subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        raise ShellCommandError(
            f"Could not run {command!r}: {exc}",
            hint=(
                f"Check that {workdir} exists and is a directory."
                if workdir is not None
                else "Check that the configured shell executable exists."
            ),
        ) from exc

    output = strip_ansi(completed.stdout or "").strip()

    if completed.returncode != 0:
        logger.debug("Command %r exited with status %d", command, completed.returncode)
    if verbose and output:
        logger.info("%s", output)

    return ShellResult(command=command, returncode=completed.returncode, output=output)


def run_shell_command(
    command: str,
    cwd: str | Path | None = None,
    *,
    verbose: bool = False,
    shell_executable: str | None = None,
) -> str:
    """Run *command* and return its cleaned stdout.

    Convenience wrapper over :func:`run_shell` for scripts that only
    care about the text.
    """
    return run_shell(
        command,
        cwd,
        verbose=verbose,
        shell_executable=shell_executable,
    ).output


async def run_shell_async(
    command: str,
    cwd: str | Path | None = None,
    *,
    shell_executable: str | None = None,
) -> ShellResult:
    """Run *command* through the system shell without blocking the loop.

    Same execution and output cleaning as :func:`run_shell` (stderr is
    captured).  When the awaiting task is cancelled, for instance by a
    step timeout, the shell and every process it started are killed
    before the cancellation propagates.

    Raises
    ------
    ShellCommandError
        When the shell cannot be started in *cwd*.
    """
    workdir = Path(cwd) if cwd else None
    try:
        process = await asyncio.create_subprocess_shell(
            command,
            cwd=workdir,
            executable=shell_executable,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            start_new_session=_POSIX,
        )
    except OSError as exc:
        raise ShellCommandError(
            f"Could not run {command!r}: {exc}",
            hint=(
                f"Check that {workdir} exists and is a directory."
                if workdir is not None
                else "Check that the configured shell executable exists."
            ),
        ) from exc

    try:
        stdout, _stderr = await process.communicate()
    except asyncio.CancelledError:
        _kill_process_tree(process)
        await process.wait()
        logger.debug("Command %r cancelled; process killed", command)
        raise

    output = strip_ansi(stdout.decode("utf-8", errors="replace")).strip()
    returncode = process.returncode if process.returncode is not None else -1
    if returncode != 0:
        logger.debug("Command %r exited with status %d", command, returncode)

    return ShellResult(command=command, returncode=returncode, output=output)


def _kill_process_tree(process: asyncio.subprocess.Process) -> None:
    if process.returncode is not None:
        return
    try:
        if _POSIX:
            # The child leads its own session, so its pid is the group id.
            os.killpg(process.pid, signal.SIGKILL)
        else:
            process.kill()
    except ProcessLookupError:
        pass
