"""Tests for changelog_version.core.errors module."""

from changelog_version.core.errors import ErrorCode


class TestErrorCodeValues:
    def test_ok_is_zero(self) -> None:
        assert ErrorCode.OK == 0

    def test_failure_codes_are_distinct(self) -> None:
        codes = {ErrorCode.NO_COMMAND, ErrorCode.ENTRY_NOT_FOUND, ErrorCode.FAILURE}
        assert len(codes) == 3
        assert ErrorCode.OK not in codes

    def test_str_is_readable(self) -> None:
        assert str(ErrorCode.ENTRY_NOT_FOUND) == "entry not found"
