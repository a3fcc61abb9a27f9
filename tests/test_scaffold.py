"""Smoke tests — verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

import scriptkit
from scriptkit import __version__
from scriptkit.cli import exit_codes
from scriptkit.cli.app import main
from scriptkit.exceptions import (
    Base64DecodeError,
    EnvironmentError,
    FilesystemError,
    ScriptKitError,
    ShellCommandError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Public surface
# ---------------------------------------------------------------------------

class TestPublicSurface:
    @pytest.mark.parametrize("name", scriptkit.__all__)
    def test_exported_names_resolve(self, name: str) -> None:
        assert getattr(scriptkit, name) is not None


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            ShellCommandError,
            FilesystemError,
            Base64DecodeError,
            EnvironmentError,
                ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[ScriptKitError]
    ) -> None:
        assert issubclass(exc_class, ScriptKitError)

    def test_hint_is_stored(self) -> None:
        err = ScriptKitError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        err = ScriptKitError("boom")
        assert err.hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_success_is_zero(self) -> None:
        assert exit_codes.SUCCESS == 0

    def test_general_error_is_one(self) -> None:
        assert exit_codes.GENERAL_ERROR == 1

    def test_keyboard_interrupt_is_130(self) -> None:
        assert exit_codes.KEYBOARD_INTERRUPT == 130

    def test_unexpected_error_is_two(self) -> None:
        assert exit_codes.UNEXPECTED_ERROR == 2


# ---------------------------------------------------------------------------
# CLI routing
# ---------------------------------------------------------------------------

class TestCLIRouting:
    def test_no_args_returns_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        """No arguments should print help and exit 0."""
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "scriptkit" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_unknown_command_exits_with_usage_error(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["frobnicate"])
        assert exc_info.value.code == 2

    @patch("scriptkit.cli.doctor.run_doctor", return_value=exit_codes.SUCCESS)
    def test_doctor_returns_success(self, _mock_doc: object) -> None:
        code = main(["doctor"])
        assert code == exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    @pytest.mark.parametrize(
        ("raised", "expected"),
        [
            (ShellCommandError("nope", hint="check cwd"), exit_codes.GENERAL_ERROR),
            (KeyboardInterrupt(), exit_codes.KEYBOARD_INTERRUPT),
            (RuntimeError("kaboom"), exit_codes.UNEXPECTED_ERROR),
        ],
    )
    def test_cli_maps_exceptions_to_exit_codes(
        self,
        raised: BaseException,
        expected: int,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        from scriptkit.cli import app as app_module

        with patch.object(app_module, "main", side_effect=raised):
            with pytest.raises(SystemExit) as exc_info:
                app_module.cli()
        assert exc_info.value.code == expected

    def test_cli_renders_hint(self, capsys: pytest.CaptureFixture[str]) -> None:
        from scriptkit.cli import app as app_module

        err = ShellCommandError("nope", hint="check cwd")
        with patch.object(app_module, "main", side_effect=err):
            with pytest.raises(SystemExit):
                app_module.cli()
        captured = capsys.readouterr()
        assert "nope" in captured.err
        assert "check cwd" in captured.err

    def test_cli_exits_with_main_return_code(self) -> None:
        from scriptkit.cli import app as app_module

        with patch.object(app_module, "main", return_value=exit_codes.SUCCESS):
            with pytest.raises(SystemExit) as exc_info:
                app_module.cli()
        assert exc_info.value.code == exit_codes.SUCCESS

    def test_cli_renders_bracketed_messages_literally(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        from scriptkit.cli import app as app_module

        err = ShellCommandError("bad [/bold] dir", hint="see [/red]")
        with patch.object(app_module, "main", side_effect=err):
            with pytest.raises(SystemExit) as exc_info:
                app_module.cli()
        captured = capsys.readouterr()
        assert exc_info.value.code == exit_codes.GENERAL_ERROR
        assert "bad [/bold] dir" in captured.err
        assert "see [/red]" in captured.err
