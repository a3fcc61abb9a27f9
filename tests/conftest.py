"""Shared pytest fixtures and configuration for the scriptkit test suite.

Guidelines
----------
* No internet access in any test.
* Shell tests only run harmless built-ins (``echo``, ``printf``, ``exit``).
* Core tests must be pure — no side effects.
* Filesystem tests stay inside ``tmp_path``.
"""

from __future__ import annotations

import pytest

from scriptkit.config import Settings


@pytest.fixture
def settings() -> Settings:
    """Default settings, independent of the caller's environment."""
    return Settings()
