from __future__ import annotations

from datetime import datetime, timezone

import pytest

from changelog_version.platform.dates import format_date

Y2K = datetime(2000, 1, 1)


def test_default_mask() -> None:
    assert format_date(Y2K, "default") == "Sat Jan 01 2000 00:00:00"


def test_empty_mask_means_default() -> None:
    assert format_date(Y2K, "") == "Sat Jan 01 2000 00:00:00"
    assert format_date(Y2K) == "Sat Jan 01 2000 00:00:00"


@pytest.mark.parametrize(
    ("mask", "expected"),
    [
        ("shortDate", "3/7/21"),
        ("mediumDate", "Mar 7, 2021"),
        ("longDate", "March 7, 2021"),
        ("fullDate", "Sunday, March 7, 2021"),
        ("shortTime", "2:05 PM"),
        ("mediumTime", "2:05:09 PM"),
        ("isoDate", "2021-03-07"),
        ("isoTime", "14:05:09"),
    ],
)
def test_named_masks(mask: str, expected: str) -> None:
    assert format_date(datetime(2021, 3, 7, 14, 5, 9), mask) == expected


def test_midnight_is_twelve_am() -> None:
    assert format_date(Y2K, "shortTime") == "12:00 AM"


def test_iso_utc_date_time() -> None:
    stamp = datetime(2021, 3, 7, 14, 5, 9, tzinfo=timezone.utc)
    assert format_date(stamp, "isoUtcDateTime") == "2021-03-07T14:05:09Z"


def test_strftime_pattern() -> None:
    assert format_date(Y2K, "%Y/%m/%d") == "2000/01/01"


def test_epoch_seconds_are_accepted() -> None:
    expected = datetime.fromtimestamp(946684800).strftime("%Y-%m-%d")
    assert format_date(946684800, "isoDate") == expected
