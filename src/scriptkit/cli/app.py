"""CLI application entry point and command routing for scriptkit.

This module is the **sole error boundary** for the entire application.
It catches :class:`~scriptkit.exceptions.ScriptKitError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; all work is delegated to the core and
  infrastructure layers.
* Command results go to stdout via :func:`~scriptkit.cli.console.emit`;
  diagnostics go to stderr via the console proxy or logging.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

from scriptkit.cli import exit_codes
from scriptkit.cli.console import console, emit, escape
from scriptkit.config import Settings
from scriptkit.exceptions import ScriptKitError
from scriptkit.logging_config import setup_logging
from scriptkit.version import __version__

logger = logging.getLogger(__name__)

_LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Commands:
    * ``scriptkit args [--get NAME] [--has TOKEN] -- TOKENS...``
    * ``scriptkit sh COMMAND [--cwd DIR] [--verbose]``
    * ``scriptkit b64 TEXT [--decode]``
    * ``scriptkit each --command CMD [--keep-going] [--timeout S] DIR...``
    * ``scriptkit doctor``
    """
    parser = argparse.ArgumentParser(
        prog="scriptkit",
        description="Script helpers: argument inspection, shell, files, base64.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=_LOG_LEVELS,
        help="Logging level for diagnostics (default: $SCRIPTKIT_LOG_LEVEL or WARNING).",
    )
    sub = parser.add_subparsers(dest="command", metavar="COMMAND")

    args_cmd = sub.add_parser("args", help="Classify raw tokens into flags and bare tokens.")
    args_cmd.add_argument("--get", metavar="NAME", help="Print only the value of --NAME=VALUE.")
    args_cmd.add_argument("--has", metavar="TOKEN", help="Print whether TOKEN was passed verbatim.")
    args_cmd.add_argument("tokens", nargs="*", help="Tokens to classify; put them after --.")

    sh_cmd = sub.add_parser("sh", help="Run a shell command and print its cleaned output.")
    sh_cmd.add_argument("shell_command", metavar="COMMAND")
    sh_cmd.add_argument("--cwd", default=None, help="Directory to run the command in.")
    sh_cmd.add_argument("--verbose", action="store_true", help="Show the command's stderr.")

    b64_cmd = sub.add_parser("b64", help="Base64 encode (or decode) text.")
    b64_cmd.add_argument("text")
    b64_cmd.add_argument("-d", "--decode", action="store_true")

    each_cmd = sub.add_parser("each", help="Run a command in each directory, one at a time.")
    each_cmd.add_argument("directories", nargs="+", metavar="DIR")
    each_cmd.add_argument("-c", "--command", dest="each_command", required=True, metavar="CMD")
    each_cmd.add_argument(
        "--keep-going",
        action="store_true",
        help="Skip missing directories and failing commands instead of stopping.",
    )
    each_cmd.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to allow per directory (default: $SCRIPTKIT_STEP_TIMEOUT or none).",
    )

    sub.add_parser("doctor", help="Run environment diagnostics.")
    return parser


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_args(args: argparse.Namespace) -> int:
    """Classify the given tokens with the argument model."""
    from scriptkit.core.arguments import parse_arguments

    parsed = parse_arguments(args.tokens)

    if args.get is not None:
        value = parsed.get_flag(args.get)
        if value is None:
            return exit_codes.GENERAL_ERROR
        emit(json.dumps(value) if isinstance(value, bool) else value)
        return exit_codes.SUCCESS

    if args.has is not None:
        present = parsed.has_bare_token(args.has)
        emit("true" if present else "false")
        return exit_codes.SUCCESS if present else exit_codes.GENERAL_ERROR

    emit(
        json.dumps(
            {"flags": dict(parsed.flags), "tokens": list(parsed.get_raw_tokens())},
            indent=2,
        )
    )
    return exit_codes.SUCCESS


def _handle_sh(args: argparse.Namespace, settings: Settings) -> int:
    """Run one shell command and print its output."""
    from scriptkit.infra.shell import run_shell

    result = run_shell(
        args.shell_command,
        args.cwd,
        verbose=args.verbose,
        shell_executable=settings.shell_executable,
    )
    if result.output:
        emit(result.output)
    return exit_codes.SUCCESS if result.ok else exit_codes.GENERAL_ERROR


def _handle_b64(args: argparse.Namespace) -> int:
    from scriptkit.infra.codec import base64_transcode

    emit(base64_transcode(args.text, decode=args.decode))
    return exit_codes.SUCCESS


def _handle_each(args: argparse.Namespace, settings: Settings) -> int:
    """Drive the sequential iteration controller over directories.

    Each directory is visited only after the previous command finished.
    A missing directory or a failing command stops the run unless
    ``--keep-going`` was given.  On timeout the running command is
    killed and the run stops.
    """
    from scriptkit.core.iteration import iterate_async
    from scriptkit.core.models import Step
    from scriptkit.infra.filesystem import is_dir
    from scriptkit.infra.shell import run_shell_async

    failures: list[str] = []

    async def _step(directory: str, _index: Any) -> Step:
        if not is_dir(directory):
            failures.append(directory)
            console.print(f"[yellow]Missing directory:[/yellow] {escape(directory)}")
            return Step.CONTINUE if args.keep_going else Step.STOP

        console.print(f"[bold]→ {escape(directory)}[/bold]")
        result = await run_shell_async(
            args.each_command,
            directory,
            shell_executable=settings.shell_executable,
        )
        if result.output:
            emit(result.output)
        if not result.ok:
            failures.append(directory)
            console.print(
                f"[red]Command exited with status {result.returncode}[/red] in {escape(directory)}"
            )
            return Step.CONTINUE if args.keep_going else Step.STOP
        return Step.CONTINUE

    timeout = args.timeout if args.timeout is not None else settings.step_timeout
    outcome = asyncio.run(
        iterate_async(args.directories, _step, step_timeout=timeout),
    )

    if outcome.timed_out:
        console.print(f"[red]Timed out after {timeout}s.[/red]")
    if outcome.stopped or outcome.timed_out:
        console.print(
            f"[yellow]Stopped after {outcome.processed} of {outcome.total} directories.[/yellow]"
        )
        return exit_codes.GENERAL_ERROR
    if failures:
        return exit_codes.GENERAL_ERROR
    return exit_codes.SUCCESS


def _handle_doctor(settings: Settings) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from scriptkit.cli.doctor import run_doctor

    return run_doctor(settings.shell_executable)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """Run the scriptkit CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.
    settings:
        Runtime settings.  Defaults to :meth:`Settings.from_env`.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if settings is None:
        settings = Settings.from_env()
    setup_logging(args.log_level or settings.log_level)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    logger.debug("Dispatching %r", args.command)

    if args.command == "args":
        return _handle_args(args)
    if args.command == "sh":
        return _handle_sh(args, settings)
    if args.command == "b64":
        return _handle_b64(args)
    if args.command == "each":
        return _handle_each(args, settings)
    return _handle_doctor(settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Loads a local ``.env`` file, then wraps :func:`main` and guarantees
    the process never exits with a raw stack trace during normal usage.
    """
    from dotenv import load_dotenv

    load_dotenv()
    try:
        code = main()
        sys.exit(code)
    except ScriptKitError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(exc)}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(exc)}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
