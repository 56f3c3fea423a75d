from __future__ import annotations

from pathlib import Path

from changelog_version.core.options import ResolvedOptions
from changelog_version.core.result import Err, Ok
from changelog_version.stampers.errors import FileReadFailed, UnreleasedEntryNotFound
from changelog_version.stampers.verify import EntryVerifier


def _verifier(tmp_path: Path, **options: object) -> EntryVerifier:
    return EntryVerifier(ResolvedOptions.from_mapping({"projectRoot": tmp_path, **options}))


def test_tag_present(tmp_path: Path) -> None:
    (tmp_path / "CHANGELOG.md").write_text("# [UNRELEASED]\n\n- x\n", encoding="utf-8")

    assert _verifier(tmp_path).verify() == Ok(None)


def test_tag_missing(tmp_path: Path) -> None:
    (tmp_path / "CHANGELOG.md").write_text("# DIFFERENT_TAG", encoding="utf-8")

    result = _verifier(tmp_path, unreleasedTag="THIS_IS_A_TAG").verify()

    assert isinstance(result, Err)
    assert isinstance(result.error, UnreleasedEntryNotFound)
    assert '"THIS_IS_A_TAG"' in result.error.message
    assert "changelog-version prepare" in result.error.message


def test_custom_failure_message_is_used_verbatim(tmp_path: Path) -> None:
    (tmp_path / "CHANGELOG.md").write_text("", encoding="utf-8")

    result = _verifier(tmp_path, requireUnreleasedEntryFailMsg="Write release notes!").verify()

    assert isinstance(result, Err)
    assert result.error.message == "Write release notes!"


def test_verify_does_not_modify_the_file(tmp_path: Path) -> None:
    path = tmp_path / "CHANGELOG.md"
    path.write_text("# nothing", encoding="utf-8")
    before = path.stat().st_mtime_ns

    _verifier(tmp_path).verify()

    assert path.read_text(encoding="utf-8") == "# nothing"
    assert path.stat().st_mtime_ns == before


def test_missing_changelog_is_a_read_failure(tmp_path: Path) -> None:
    result = _verifier(tmp_path).verify()

    assert isinstance(result, Err)
    assert isinstance(result.error, FileReadFailed)
    assert result.error.role == "changelog"
