"""Helpers for the timestamp format used by the activity store."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Final

MYSQL_DATETIME_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"
RFC3339_FORMAT: Final[str] = "%Y-%m-%dT%H:%M:%S"
ZERO_DATETIME: Final[str] = "0000-00-00 00:00:00"

logger = logging.getLogger(__name__)


def now_gmt() -> datetime:
    """Return the current time as an aware UTC datetime."""

    return datetime.now(tz=timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Normalize ``value`` so it is expressed in UTC.

    Naive values are assumed to already be in GMT, which is how the store
    records them.
    """

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_storage_datetime(value: datetime) -> str:
    """Render ``value`` in the store's ``YYYY-MM-DD HH:MM:SS`` GMT format."""

    return ensure_utc(value).strftime(MYSQL_DATETIME_FORMAT)


def now_storage_datetime() -> str:
    """Return the current GMT time in storage format."""

    return to_storage_datetime(now_gmt())


def storage_to_rfc3339(value: str | None) -> str | None:
    """Convert a stored timestamp into an RFC 3339 date-time string.

    The zero sentinel (and empty values) mean the date was never set and
    yield ``None``. Values that cannot be parsed are logged and also yield
    ``None`` so a single bad row never breaks a feed page.
    """

    if not value or value == ZERO_DATETIME:
        return None

    try:
        parsed = datetime.strptime(value.strip(), MYSQL_DATETIME_FORMAT)
    except ValueError:
        logger.warning("Unparseable stored timestamp %r; reporting no date", value)
        return None
    return parsed.strftime(RFC3339_FORMAT)


__all__ = [
    "MYSQL_DATETIME_FORMAT",
    "RFC3339_FORMAT",
    "ZERO_DATETIME",
    "ensure_utc",
    "now_gmt",
    "now_storage_datetime",
    "storage_to_rfc3339",
    "to_storage_datetime",
]
