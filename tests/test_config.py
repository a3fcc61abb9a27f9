"""Tests for environment-driven settings (config.py)."""

from __future__ import annotations

import pytest

from scriptkit.config import (
    DEFAULT_LOG_LEVEL,
    ENV_LOG_LEVEL,
    ENV_SHELL,
    ENV_STEP_TIMEOUT,
    Settings,
)


class TestSettingsFromEnv:
    def test_defaults_with_empty_environment(self) -> None:
        settings = Settings.from_env({})
        assert settings == Settings()
        assert settings.log_level == DEFAULT_LOG_LEVEL
        assert settings.step_timeout is None
        assert settings.shell_executable is None

    def test_reads_all_values(self) -> None:
        settings = Settings.from_env(
            {
                ENV_LOG_LEVEL: "debug",
                ENV_STEP_TIMEOUT: "2.5",
                ENV_SHELL: "/bin/bash",
            }
        )
        assert settings.log_level == "DEBUG"
        assert settings.step_timeout == 2.5
        assert settings.shell_executable == "/bin/bash"

    def test_unknown_log_level_falls_back(self) -> None:
        assert Settings.from_env({ENV_LOG_LEVEL: "chatty"}).log_level == DEFAULT_LOG_LEVEL

    @pytest.mark.parametrize("raw", ["", "   ", "soon", "0", "-3"])
    def test_unusable_timeouts_mean_no_timeout(self, raw: str) -> None:
        assert Settings.from_env({ENV_STEP_TIMEOUT: raw}).step_timeout is None

    def test_blank_shell_means_platform_default(self) -> None:
        assert Settings.from_env({ENV_SHELL: "  "}).shell_executable is None

    def test_reads_process_environment_by_default(
        self, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv(ENV_STEP_TIMEOUT, "9")
        assert Settings.from_env().step_timeout == 9.0

    def test_settings_are_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Settings().log_level = "DEBUG"  # type: ignore[misc]
