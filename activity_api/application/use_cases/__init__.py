"""Aggregate application use cases."""

from .activity import create_activity, get_activity, list_activities
from .activity_types import list_activity_types
from .users import authenticate_user, create_user

__all__ = [
    "authenticate_user",
    "create_activity",
    "create_user",
    "get_activity",
    "list_activities",
    "list_activity_types",
]
