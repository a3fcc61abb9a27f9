"""``scriptkit doctor`` — environment diagnostics command.

Gathers system information and renders a Rich table summarising
whether the runtime environment can run scriptkit's helpers.

This module lives in the CLI layer; it may import from ``infra``
and ``core``, and it renders via Rich when available.
"""

from __future__ import annotations

import platform
import sys

from scriptkit.cli import exit_codes
from scriptkit.cli.console import console
from scriptkit.infra.shell_detector import detect_shell
from scriptkit.version import __version__


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _rich_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Rich row.

    Rich is optional for output, so a missing install is a warning.
    """
    try:
        import rich  # noqa: F401
    except ImportError:
        return "rich", "NOT INSTALLED", "[yellow]WARN[/yellow]"

    try:
        from importlib.metadata import PackageNotFoundError, version

        return "rich", version("rich"), "[green]OK[/green]"
    except PackageNotFoundError:
        return "rich", "unknown", "[green]OK[/green]"


def _shell_check(shell_executable: str | None = None) -> tuple[str, str, str]:
    """Return (label, value, status) for the shell row."""
    status_obj = detect_shell(shell_executable)
    if status_obj.found:
        return "shell", str(status_obj.path), "[green]OK[/green]"
    return "shell", f"{status_obj.requested} not found", "[red]FAIL[/red]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _scriptkit_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the scriptkit version row."""
    return "scriptkit", __version__, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[tuple[str, str, str]]) -> None:
    """Render doctor output without Rich."""
    print("\nscriptkit doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<32} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(shell_executable: str | None = None) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = [
        _scriptkit_version_check(),
        _python_version_check(),
        _rich_check(),
        _shell_check(shell_executable),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        summary = "Some checks failed." if has_failure else "All checks passed."
        print(summary, file=sys.stderr)
    else:
        table = Table(
            title="scriptkit doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
        if has_failure:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            console.print("[bold green]All checks passed.[/bold green]")

    return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS
