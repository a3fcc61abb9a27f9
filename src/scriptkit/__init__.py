"""scriptkit — helpers for writing command-line scripts.

Classifies process arguments, walks lists and mappings one step at a
time, and wraps the shell, the filesystem and base64 behind small,
synchronous-feeling calls.
"""

from scriptkit.core import (
    IterationResult,
    ParsedArguments,
    Step,
    continuation_step,
    iterate,
    iterate_async,
    parse_arguments,
)
from scriptkit.exceptions import ScriptKitError
from scriptkit.infra import (
    base64_transcode,
    create_dir,
    is_dir,
    is_file,
    path_exists,
    read_file,
    run_shell,
    run_shell_async,
    run_shell_command,
    strip_ansi,
    write_file,
)
from scriptkit.version import __version__

__all__: list[str] = [
    "IterationResult",
    "ParsedArguments",
    "ScriptKitError",
    "Step",
    "__version__",
    "base64_transcode",
    "continuation_step",
    "create_dir",
    "is_dir",
    "is_file",
    "iterate",
    "iterate_async",
    "parse_arguments",
    "path_exists",
    "read_file",
    "run_shell",
    "run_shell_async",
    "run_shell_command",
    "strip_ansi",
    "write_file",
]
