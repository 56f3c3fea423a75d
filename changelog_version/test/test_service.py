"""End-to-end tests for the ChangelogVersion facade."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from changelog_version import ChangelogVersion
from changelog_version.core.config import ConfigParseFailed, MappingConfigProvider
from changelog_version.core.result import Err, Ok
from changelog_version.stampers.errors import UnreleasedEntryNotFound


def _y2k() -> datetime:
    return datetime(2000, 1, 1)


def test_release_scenario(tmp_path: Path) -> None:
    (tmp_path / "CHANGELOG.md").write_text(
        "\n# Changelog\n\n## [UNRELEASED]\n\n- I have a change!\n", encoding="utf-8"
    )
    (tmp_path / "package.json").write_text('{"version":"1.2.3"}', encoding="utf-8")

    result = ChangelogVersion({"projectRoot": tmp_path}, now=_y2k).release()

    assert isinstance(result, Ok)
    assert (tmp_path / "CHANGELOG.md").read_text(encoding="utf-8") == (
        "\n# Changelog\n\n## 1.2.3 - Sat Jan 01 2000 00:00:00\n\n- I have a change!\n"
    )


def test_verify_failure_scenario(tmp_path: Path) -> None:
    (tmp_path / "CHANGELOG.md").write_text("# DIFFERENT_TAG", encoding="utf-8")

    result = ChangelogVersion({"projectRoot": tmp_path, "unreleasedTag": "THIS_IS_A_TAG"}).verify()

    assert isinstance(result, Err)
    assert isinstance(result.error, UnreleasedEntryNotFound)


def test_prepare_on_empty_project(tmp_path: Path) -> None:
    result = ChangelogVersion({"projectRoot": tmp_path}).prepare()

    assert result == Ok(True)
    assert (tmp_path / "CHANGELOG.md").read_text(encoding="utf-8") == "# [UNRELEASED]\n\n"


def test_prepare_then_release_cycle(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text('{"version":"2.0.0"}', encoding="utf-8")
    (tmp_path / ".changelog.py").write_text(
        'newUnreleasedText = "## [UNRELEASED]\\n\\n"\ndateFormat = "isoDate"\n',
        encoding="utf-8",
    )
    cv = ChangelogVersion({"projectRoot": tmp_path}, now=_y2k)

    assert cv.prepare() == Ok(True)
    assert cv.verify() == Ok(None)
    assert isinstance(cv.release(), Ok)
    assert isinstance(cv.verify(), Err)

    assert (tmp_path / "CHANGELOG.md").read_text(encoding="utf-8") == "## 2.0.0 - 2000-01-01\n\n"


def test_config_failure_is_returned_before_any_io(tmp_path: Path) -> None:
    def broken() -> str:
        raise RuntimeError("boom")

    cv = ChangelogVersion(
        {"projectRoot": tmp_path},
        provider=MappingConfigProvider({"changelogFile": broken}),
    )

    result = cv.prepare()

    assert isinstance(result, Err)
    assert isinstance(result.error, ConfigParseFailed)
    assert not (tmp_path / "CHANGELOG.md").exists()
