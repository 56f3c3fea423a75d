from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest

from changelog_version.platform.files import LocalFileSystem


class TestLocalFileSystem:
    def test_write_replaces_existing_content(self, tmp_path: Path) -> None:
        path = tmp_path / "CHANGELOG.md"
        path.write_text("old", encoding="utf-8")

        LocalFileSystem().write_text(path, "new")

        assert path.read_text(encoding="utf-8") == "new"

    @pytest.mark.skipif(os.name == "nt", reason="POSIX permission bits")
    def test_write_keeps_file_mode(self, tmp_path: Path) -> None:
        path = tmp_path / "CHANGELOG.md"
        path.write_text("# [UNRELEASED]\n", encoding="utf-8")
        path.chmod(0o644)

        LocalFileSystem().write_text(path, "# 1.2.3\n")

        assert stat.S_IMODE(path.stat().st_mode) == 0o644

    @pytest.mark.skipif(os.name == "nt", reason="symlinks need privileges on Windows")
    def test_write_through_symlink_updates_target(self, tmp_path: Path) -> None:
        target = tmp_path / "real.md"
        target.write_text("# [UNRELEASED]\n", encoding="utf-8")
        link = tmp_path / "CHANGELOG.md"
        link.symlink_to(target)

        LocalFileSystem().write_text(link, "# 1.2.3\n")

        assert link.is_symlink()
        assert target.read_text(encoding="utf-8") == "# 1.2.3\n"

    def test_write_in_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            LocalFileSystem().write_text(tmp_path / "missing" / "CHANGELOG.md", "x")

    def test_round_trip_preserves_line_endings(self, tmp_path: Path) -> None:
        fs = LocalFileSystem()
        path = tmp_path / "CHANGELOG.md"

        fs.write_text(path, "# [UNRELEASED]\r\n\r\n- fix\r\n")

        assert fs.read_text(path) == "# [UNRELEASED]\r\n\r\n- fix\r\n"

    def test_touch_creates_empty_file(self, tmp_path: Path) -> None:
        fs = LocalFileSystem()
        path = tmp_path / "CHANGELOG.md"

        assert not fs.exists(path)
        fs.touch(path)

        assert fs.exists(path)
        assert path.read_text(encoding="utf-8") == ""

    def test_touch_in_missing_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            LocalFileSystem().touch(tmp_path / "missing" / "CHANGELOG.md")

    def test_read_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            LocalFileSystem().read_text(tmp_path / "package.json")
