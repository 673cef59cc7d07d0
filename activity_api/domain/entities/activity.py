"""Domain entities describing activity stream records."""

from __future__ import annotations

from dataclasses import dataclass, field

COMMENT_TYPE = "activity_comment"
GROUPS_COMPONENT = "groups"

STATUS_PUBLISHED = "published"
STATUS_SPAM = "spam"

VISIBILITY_META_KEY = "bbwall-activity-privacy"
INITIATOR_META_KEY = "buddyboss_wall_initiator"


@dataclass
class ActivityRecord:
    """A stored activity entry as returned by the activity store."""

    id: int
    user_id: int
    display_name: str
    component: str
    type: str
    content: str
    date_recorded: str
    primary_link: str
    item_id: int
    secondary_item_id: int
    is_spam: bool
    action: str
    hide_sitewide: bool = False
    meta: dict[str, str] = field(default_factory=dict)

    def is_comment(self) -> bool:
        """Return ``True`` when the record is a reply to another activity."""

        return self.type == COMMENT_TYPE

    @property
    def parent_id(self) -> int:
        return self.item_id if self.is_comment() else 0

    @property
    def status(self) -> str:
        return STATUS_SPAM if self.is_spam else STATUS_PUBLISHED


@dataclass
class ActivityDraft:
    """Writable fields of an activity about to be inserted.

    ``None`` means the field was not supplied and the store default applies.
    """

    component: str | None = None
    type: str | None = None
    content: str | None = None
    item_id: int | None = None
    secondary_item_id: int | None = None

    def is_comment(self) -> bool:
        return self.type == COMMENT_TYPE


__all__ = [
    "COMMENT_TYPE",
    "GROUPS_COMPONENT",
    "INITIATOR_META_KEY",
    "STATUS_PUBLISHED",
    "STATUS_SPAM",
    "VISIBILITY_META_KEY",
    "ActivityDraft",
    "ActivityRecord",
]
