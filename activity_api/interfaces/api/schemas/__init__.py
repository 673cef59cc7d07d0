"""Request and response schemas of the HTTP API."""

from .activity import ActivityCreate, ActivityCreated, ActivityRead, ActivityTypeRead
from .auth import Token

__all__ = [
    "ActivityCreate",
    "ActivityCreated",
    "ActivityRead",
    "ActivityTypeRead",
    "Token",
]
