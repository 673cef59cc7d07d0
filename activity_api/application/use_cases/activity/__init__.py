"""Use cases for the activity stream."""

from .create_activity import create_activity
from .get_activity import get_activity
from .list_activities import list_activities
from .query import (
    ActivityListFilters,
    resolve_show_hidden,
    spam_filter_for_status,
    translate_list_filters,
)

__all__ = [
    "ActivityListFilters",
    "create_activity",
    "get_activity",
    "list_activities",
    "resolve_show_hidden",
    "spam_filter_for_status",
    "translate_list_filters",
]
