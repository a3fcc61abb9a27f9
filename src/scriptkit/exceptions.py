"""Custom exception hierarchy for scriptkit.

All exceptions that cross layer boundaries must inherit from
:class:`ScriptKitError`.  Raw OS and codec exceptions (``OSError``,
``subprocess`` failures, ``binascii.Error``) must NEVER propagate beyond
the infrastructure layer. They are caught and re-raised as a typed
subclass defined here.

The core layer (argument model, iteration controller) raises none of
these for documented inputs.

Hierarchy
---------
ScriptKitError
├── ShellCommandError
├── FilesystemError
├── Base64DecodeError
└── EnvironmentError
"""

from __future__ import annotations


class ScriptKitError(Exception):
    """Base exception for all scriptkit errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Shell -----------------------------------------------------------------

class ShellCommandError(ScriptKitError):
    """Raised when a shell command cannot be started at all."""


# --- Filesystem ------------------------------------------------------------

class FilesystemError(ScriptKitError):
    """Raised when a directory or file cannot be created or written."""


# --- Codec -----------------------------------------------------------------

class Base64DecodeError(ScriptKitError):
    """Raised when input text is not valid base64."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(ScriptKitError):
    """Raised when a required runtime dependency is not available."""
