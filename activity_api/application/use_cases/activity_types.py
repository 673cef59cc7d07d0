"""Use case for listing the activity tag catalog."""

from activity_api.domain.entities import (
    DEFAULT_TAG_CATALOG,
    GROUP_TAG_CATALOG,
    SCOPE_GROUP,
    TagType,
)
from activity_api.i18n import _


def list_activity_types(scope: str | None = None) -> list[TagType]:
    """Return the tags offered for ``scope``, in catalog order.

    Group streams get the reduced catalog; every other scope, including a
    missing one, gets the full catalog.
    """

    catalog = GROUP_TAG_CATALOG if scope == SCOPE_GROUP else DEFAULT_TAG_CATALOG
    return [TagType(type=tag.type, name=_(tag.name)) for tag in catalog]


__all__ = ["list_activity_types"]
