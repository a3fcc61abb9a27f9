"""Infrastructure: filesystem conveniences for scripts.

Queries (:func:`path_exists`, :func:`is_file`, :func:`read_file`) never
raise for a missing path.  Mutations raise
:class:`~scriptkit.exceptions.FilesystemError` when the OS refuses them.
"""

from __future__ import annotations

import logging
from pathlib import Path

from scriptkit.exceptions import FilesystemError

logger = logging.getLogger(__name__)

_ENCODING = "utf-8"

PathLike = str | Path


def path_exists(path: PathLike | None) -> bool:
    """Return whether *path* exists, as a file or a directory."""
    if not path:
        return False
    try:
        return Path(path).exists()
    except (OSError, ValueError):
        # Permission errors, embedded NUL bytes and the like.
        return False


def is_file(path: PathLike | None) -> bool:
    """Return whether *path* exists and is a regular file."""
    if not path or not path_exists(path):
        return False
    try:
        return Path(path).is_file()
    except OSError:
        return False


def is_dir(path: PathLike | None) -> bool:
    """Return whether *path* exists and is a directory."""
    if not path or not path_exists(path):
        return False
    try:
        return Path(path).is_dir()
    except OSError:
        return False


def create_dir(path: PathLike) -> None:
    """Create *path* and any missing parents.  No-op when it exists."""
    if path_exists(path):
        return
    try:
        Path(path).mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(f"Could not create directory {path}: {exc}") from exc
    logger.debug("Created directory %s", path)


def read_file(path: PathLike) -> str | None:
    """Return the UTF-8 contents of *path*, or ``None`` if it is missing."""
    if not path_exists(path):
        return None
    try:
        return Path(path).read_text(encoding=_ENCODING)
    except OSError as exc:
        raise FilesystemError(f"Could not read {path}: {exc}") from exc


def write_file(path: PathLike, content: str) -> None:
    """Write *content* to *path* as UTF-8, replacing any existing file."""
    try:
        Path(path).write_text(content, encoding=_ENCODING)
    except OSError as exc:
        raise FilesystemError(
            f"Could not write {path}: {exc}",
            hint="Create the parent directory first with create_dir().",
        ) from exc
