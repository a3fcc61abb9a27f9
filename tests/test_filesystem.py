"""Tests for filesystem helpers (infra/filesystem.py).

Every test works inside ``tmp_path``.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from scriptkit.exceptions import FilesystemError
from scriptkit.infra.filesystem import (
    create_dir,
    is_dir,
    is_file,
    path_exists,
    read_file,
    write_file,
)


class TestPathQueries:
    def test_existing_file_and_dir(self, tmp_path: Path) -> None:
        target = tmp_path / "a.txt"
        target.write_text("hi", encoding="utf-8")

        assert path_exists(target)
        assert path_exists(str(tmp_path))
        assert is_file(target)
        assert not is_file(tmp_path)
        assert is_dir(tmp_path)
        assert not is_dir(target)

    def test_missing_path(self, tmp_path: Path) -> None:
        missing = tmp_path / "missing"
        assert not path_exists(missing)
        assert not is_file(missing)
        assert not is_dir(missing)

    @pytest.mark.parametrize("path", ["", None])
    def test_empty_path_is_never_present(self, path: str | None) -> None:
        assert path_exists(path) is False
        assert is_file(path) is False

    def test_nul_byte_path_does_not_raise(self) -> None:
        assert path_exists("bad\0path") is False

    @pytest.mark.parametrize("query", [is_file, is_dir])
    def test_os_error_from_type_check_is_false(self, query: object, tmp_path: Path) -> None:
        with patch("scriptkit.infra.filesystem.Path.is_file", side_effect=PermissionError("denied")), \
                patch("scriptkit.infra.filesystem.Path.is_dir", side_effect=PermissionError("denied")):
            assert query(tmp_path) is False  # type: ignore[operator]


class TestCreateDir:
    def test_creates_nested_directories(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b" / "c"
        create_dir(target)
        assert target.is_dir()

    def test_existing_directory_is_a_no_op(self, tmp_path: Path) -> None:
        create_dir(tmp_path)
        assert tmp_path.is_dir()

    def test_failure_is_wrapped(self, tmp_path: Path) -> None:
        with patch("scriptkit.infra.filesystem.Path.mkdir", side_effect=PermissionError("denied")):
            with pytest.raises(FilesystemError, match="denied"):
                create_dir(tmp_path / "locked")


class TestReadWrite:
    def test_round_trip_utf8(self, tmp_path: Path) -> None:
        target = tmp_path / "notes.txt"
        write_file(target, "héllo ✓")
        assert read_file(target) == "héllo ✓"
        assert target.read_bytes() == "héllo ✓".encode("utf-8")

    def test_write_overwrites(self, tmp_path: Path) -> None:
        target = tmp_path / "notes.txt"
        write_file(target, "one")
        write_file(str(target), "two")
        assert read_file(target) == "two"

    def test_read_missing_returns_none(self, tmp_path: Path) -> None:
        assert read_file(tmp_path / "missing.txt") is None

    def test_write_into_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FilesystemError) as exc_info:
            write_file(tmp_path / "no" / "such" / "file.txt", "x")
        assert exc_info.value.hint is not None

    def test_read_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FilesystemError):
            read_file(tmp_path)
