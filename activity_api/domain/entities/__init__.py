"""Domain entities exposed by the application."""

from .activity import (
    COMMENT_TYPE,
    GROUPS_COMPONENT,
    INITIATOR_META_KEY,
    STATUS_PUBLISHED,
    STATUS_SPAM,
    VISIBILITY_META_KEY,
    ActivityDraft,
    ActivityRecord,
)
from .activity_query import (
    FIELDS_ALL,
    FIELDS_IDS,
    SORT_ASC,
    SORT_DESC,
    ActivityFilter,
    ActivityFilterBuilder,
    ActivityQueryArgs,
    ActivityQueryResult,
    SpamFilter,
)
from .activity_tag import (
    DEFAULT_TAG_CATALOG,
    GROUP_TAG_CATALOG,
    SCOPE_FRIENDS,
    SCOPE_GROUP,
    SCOPE_JUST_ME,
    TagType,
)
from .role import Role
from .user import User

__all__ = [
    "COMMENT_TYPE",
    "DEFAULT_TAG_CATALOG",
    "FIELDS_ALL",
    "FIELDS_IDS",
    "GROUPS_COMPONENT",
    "GROUP_TAG_CATALOG",
    "INITIATOR_META_KEY",
    "SCOPE_FRIENDS",
    "SCOPE_GROUP",
    "SCOPE_JUST_ME",
    "SORT_ASC",
    "SORT_DESC",
    "STATUS_PUBLISHED",
    "STATUS_SPAM",
    "VISIBILITY_META_KEY",
    "ActivityDraft",
    "ActivityFilter",
    "ActivityFilterBuilder",
    "ActivityQueryArgs",
    "ActivityQueryResult",
    "ActivityRecord",
    "Role",
    "SpamFilter",
    "TagType",
    "User",
]
