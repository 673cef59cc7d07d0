"""Repository implementations for infrastructure layer."""

from .activity_repository import ActivityRepository
from .group_repository import GroupMembershipRepository
from .user_repository import UserRepository

__all__ = [
    "ActivityRepository",
    "GroupMembershipRepository",
    "UserRepository",
]
