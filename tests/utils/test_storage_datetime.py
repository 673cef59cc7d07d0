"""Tests for the store timestamp helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from activity_api.utils import (
    ZERO_DATETIME,
    ensure_utc,
    storage_to_rfc3339,
    to_storage_datetime,
)


def test_zero_sentinel_has_no_date() -> None:
    assert storage_to_rfc3339(ZERO_DATETIME) is None


@pytest.mark.parametrize("value", [None, ""])
def test_missing_value_has_no_date(value) -> None:
    assert storage_to_rfc3339(value) is None


def test_stored_value_is_rendered_as_rfc3339() -> None:
    assert storage_to_rfc3339("2021-03-04 05:06:07") == "2021-03-04T05:06:07"


def test_unparseable_value_is_logged_and_dropped(caplog) -> None:
    with caplog.at_level("WARNING"):
        assert storage_to_rfc3339("yesterday") is None
    assert "yesterday" in caplog.text


def test_aware_datetimes_are_stored_in_gmt() -> None:
    lima = timezone(timedelta(hours=-5))
    value = datetime(2022, 1, 1, 19, 30, tzinfo=lima)

    assert to_storage_datetime(value) == "2022-01-02 00:30:00"


def test_naive_datetimes_are_treated_as_gmt() -> None:
    value = datetime(2022, 1, 1, 8, 0)

    assert ensure_utc(value) == datetime(2022, 1, 1, 8, 0, tzinfo=timezone.utc)
    assert to_storage_datetime(value) == "2022-01-01 08:00:00"
