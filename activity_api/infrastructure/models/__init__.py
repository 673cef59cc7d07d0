"""ORM models used by the application infrastructure."""

from .activity import ActivityMetaModel, ActivityModel
from .role import RoleModel
from .social import FriendshipModel, GroupMemberModel
from .user import UserModel

__all__ = [
    "ActivityMetaModel",
    "ActivityModel",
    "FriendshipModel",
    "GroupMemberModel",
    "RoleModel",
    "UserModel",
]
