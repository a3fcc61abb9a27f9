"""Runtime settings read from the environment.

Values come from ``SCRIPTKIT_*`` environment variables.  The CLI loads a
local ``.env`` file (via python-dotenv) before calling
:meth:`Settings.from_env`; library callers construct :class:`Settings`
explicitly or read the environment as-is.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

ENV_LOG_LEVEL = "SCRIPTKIT_LOG_LEVEL"
ENV_STEP_TIMEOUT = "SCRIPTKIT_STEP_TIMEOUT"
ENV_SHELL = "SCRIPTKIT_SHELL"

DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable runtime configuration."""

    log_level: str = DEFAULT_LOG_LEVEL
    """Name of the ``logging`` level for the ``scriptkit`` logger."""

    step_timeout: float | None = None
    """Per-step timeout in seconds for ``scriptkit each``; ``None`` waits forever."""

    shell_executable: str | None = None
    """Shell binary used for commands; ``None`` is the platform default."""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *environ* (defaults to ``os.environ``)."""
        env = os.environ if environ is None else environ

        level = env.get(ENV_LOG_LEVEL, "").strip().upper() or DEFAULT_LOG_LEVEL
        if not isinstance(logging.getLevelName(level), int):
            logger.warning("Ignoring unknown %s=%r", ENV_LOG_LEVEL, level)
            level = DEFAULT_LOG_LEVEL

        return cls(
            log_level=level,
            step_timeout=_parse_timeout(env.get(ENV_STEP_TIMEOUT)),
            shell_executable=env.get(ENV_SHELL, "").strip() or None,
        )


def _parse_timeout(raw: str | None) -> float | None:
    """Return a positive float, or ``None`` for blank/invalid values."""
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r", ENV_STEP_TIMEOUT, raw)
        return None
    return value if value > 0 else None
