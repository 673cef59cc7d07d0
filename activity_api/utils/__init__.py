"""Utility helpers for reusable functionality."""

from .datetime import (
    MYSQL_DATETIME_FORMAT,
    RFC3339_FORMAT,
    ZERO_DATETIME,
    ensure_utc,
    now_gmt,
    now_storage_datetime,
    storage_to_rfc3339,
    to_storage_datetime,
)

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
