"""Infrastructure layer — operating-system integration.

This layer wraps the shell, the filesystem and text codecs.  Every raw
OS or codec exception must be caught here and re-raised as a
:class:`~scriptkit.exceptions.ScriptKitError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from scriptkit.infra.ansi import strip_ansi
from scriptkit.infra.codec import base64_transcode
from scriptkit.infra.filesystem import create_dir, is_dir, is_file, path_exists, read_file, write_file
from scriptkit.infra.shell import ShellResult, run_shell, run_shell_async, run_shell_command
from scriptkit.infra.shell_detector import ShellStatus, default_shell, detect_shell

__all__: list[str] = [
    "ShellResult",
    "ShellStatus",
    "base64_transcode",
    "create_dir",
    "default_shell",
    "detect_shell",
    "is_dir",
    "is_file",
    "path_exists",
    "read_file",
    "run_shell",
    "run_shell_async",
    "run_shell_command",
    "strip_ansi",
]
