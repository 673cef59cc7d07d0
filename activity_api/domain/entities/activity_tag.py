"""Domain entity and static catalogs for activity tag types."""

from __future__ import annotations

from dataclasses import dataclass

SCOPE_JUST_ME = "just-me"
SCOPE_FRIENDS = "friends"
SCOPE_GROUP = "group"


@dataclass(frozen=True)
class TagType:
    """A tag that can be attached to an activity, with its display name."""

    type: str
    name: str


DEFAULT_TAG_CATALOG: tuple[TagType, ...] = (
    TagType(type="tag_zaji", name="杂记"),
    TagType(type="tag_origin", name="原创"),
    TagType(type="tag_food", name="美食"),
    TagType(type="tag_trip", name="旅游"),
    TagType(type="tag_finance", name="财务"),
    TagType(type="tag_others", name="其他"),
)

# Groups only offer the general purpose tag.
GROUP_TAG_CATALOG: tuple[TagType, ...] = (DEFAULT_TAG_CATALOG[0],)


__all__ = [
    "DEFAULT_TAG_CATALOG",
    "GROUP_TAG_CATALOG",
    "SCOPE_FRIENDS",
    "SCOPE_GROUP",
    "SCOPE_JUST_ME",
    "TagType",
]
