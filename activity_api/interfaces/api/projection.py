"""Shape stored records into their public API representation.

Projection is a pure function of the record, the requested context and the
collaborators passed in; nothing is read from module state.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from activity_api.domain.entities import ActivityRecord, TagType
from activity_api.utils import storage_to_rfc3339

CONTEXT_VIEW = "view"
CONTEXT_EDIT = "edit"

_VIEW_EDIT = (CONTEXT_VIEW, CONTEXT_EDIT)

# Contexts declared by the activity schema. Properties missing here
# (author_id, author_name, avatar_url) are not schema properties and are
# never filtered out.
ACTIVITY_FIELD_CONTEXTS: Mapping[str, tuple[str, ...]] = {
    "id": _VIEW_EDIT,
    "visibility": (CONTEXT_EDIT,),
    "prime_association": _VIEW_EDIT,
    "secondary_association": _VIEW_EDIT,
    "author": _VIEW_EDIT,
    "link": _VIEW_EDIT,
    "component": _VIEW_EDIT,
    "type": _VIEW_EDIT,
    "title": _VIEW_EDIT,
    "content": _VIEW_EDIT,
    "date": _VIEW_EDIT,
    "status": _VIEW_EDIT,
    "parent": _VIEW_EDIT,
}

TAG_FIELD_CONTEXTS: Mapping[str, tuple[str, ...]] = {
    "type": _VIEW_EDIT,
    "name": _VIEW_EDIT,
}

AvatarResolver = Callable[[int], str]


def label_activity_type(activity_type: str, labels: Mapping[str, str]) -> str:
    """Return the display label for ``activity_type``; unmapped codes pass through."""

    return labels.get(activity_type, activity_type)


def filter_by_context(
    data: Mapping[str, Any],
    context: str,
    field_contexts: Mapping[str, tuple[str, ...]],
) -> dict[str, Any]:
    """Drop schema properties that are not declared for ``context``."""

    return {
        key: value
        for key, value in data.items()
        if key not in field_contexts or context in field_contexts[key]
    }


@dataclass(frozen=True)
class ActivityLinkBuilder:
    """Build absolute hypermedia links for activity resources."""

    site_url: str
    namespace: str
    rest_base: str
    author_resource_path: str

    def collection_url(self) -> str:
        return f"{self.site_url.rstrip('/')}/{self.namespace.strip('/')}/{self.rest_base.strip('/')}"

    def item_url(self, activity_id: int) -> str:
        return f"{self.collection_url()}/{activity_id}"

    def author_url(self, user_id: int) -> str:
        return f"{self.site_url.rstrip('/')}/{self.author_resource_path.strip('/')}/{user_id}"

    def links_for(self, record: ActivityRecord) -> dict[str, list[dict[str, str]]]:
        links = {
            "self": [{"href": self.item_url(record.id)}],
            "collection": [{"href": self.collection_url()}],
            "author": [{"href": self.author_url(record.user_id)}],
        }
        if record.is_comment():
            links["up"] = [{"href": self.item_url(record.item_id)}]
        return links


def project_activity(
    record: ActivityRecord,
    context: str = CONTEXT_VIEW,
    *,
    avatar_url: AvatarResolver,
    type_labels: Mapping[str, str],
    links: ActivityLinkBuilder,
) -> dict[str, Any]:
    """Return the public representation of ``record`` for ``context``."""

    data = {
        "author_id": record.user_id,
        "author_name": record.display_name,
        "avatar_url": avatar_url(record.user_id),
        "component": record.component,
        "content": record.content,
        "date": storage_to_rfc3339(record.date_recorded),
        "id": record.id,
        "link": record.primary_link,
        "parent": record.parent_id,
        "prime_association": record.item_id,
        "secondary_association": record.secondary_item_id,
        "status": record.status,
        "title": record.action,
        "type": label_activity_type(record.type, type_labels),
    }
    data = filter_by_context(data, context or CONTEXT_VIEW, ACTIVITY_FIELD_CONTEXTS)
    data["_links"] = links.links_for(record)
    return data


@dataclass(frozen=True)
class ActivityPresenter:
    """Bind the projection collaborators of one request."""

    avatar_url: AvatarResolver
    type_labels: Mapping[str, str]
    links: ActivityLinkBuilder

    def present(self, record: ActivityRecord, context: str = CONTEXT_VIEW) -> dict[str, Any]:
        return project_activity(
            record,
            context,
            avatar_url=self.avatar_url,
            type_labels=self.type_labels,
            links=self.links,
        )

    def present_many(
        self, records: list[ActivityRecord], context: str = CONTEXT_VIEW
    ) -> list[dict[str, Any]]:
        prefetch = getattr(self.avatar_url, "prefetch", None)
        if prefetch is not None:
            prefetch([record.user_id for record in records])
        return [self.present(record, context) for record in records]


def project_tag(tag: TagType, context: str = CONTEXT_VIEW) -> dict[str, Any]:
    return filter_by_context(
        {"type": tag.type, "name": tag.name}, context or CONTEXT_VIEW, TAG_FIELD_CONTEXTS
    )


__all__ = [
    "ACTIVITY_FIELD_CONTEXTS",
    "CONTEXT_EDIT",
    "CONTEXT_VIEW",
    "TAG_FIELD_CONTEXTS",
    "ActivityLinkBuilder",
    "ActivityPresenter",
    "AvatarResolver",
    "filter_by_context",
    "label_activity_type",
    "project_activity",
    "project_tag",
]
