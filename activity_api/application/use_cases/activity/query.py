"""Translate validated list parameters into activity store query arguments."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime

from activity_api.domain.entities import (
    FIELDS_ALL,
    GROUPS_COMPONENT,
    SCOPE_JUST_ME,
    SORT_DESC,
    STATUS_PUBLISHED,
    STATUS_SPAM,
    ActivityFilterBuilder,
    ActivityQueryArgs,
    SpamFilter,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActivityListFilters:
    """Validated and defaulted parameters of one list request."""

    page: int = 1
    per_page: int = 20
    order: str = SORT_DESC
    exclude: tuple[int, ...] = ()
    include: tuple[int, ...] = ()
    author: tuple[int, ...] = ()
    status: str = STATUS_PUBLISHED
    component: str | None = None
    type: str | None = None
    search: str = ""
    after: datetime | None = None
    primary_id: tuple[int, ...] = ()
    secondary_id: tuple[int, ...] = ()
    scope: str = SCOPE_JUST_ME


def spam_filter_for_status(status: str) -> SpamFilter:
    return SpamFilter.SPAM_ONLY if status == STATUS_SPAM else SpamFilter.HAM_ONLY


def resolve_show_hidden(
    filters: ActivityListFilters,
    *,
    acting_user_id: int,
    is_group_member: Callable[[int, Iterable[int]], bool],
    has_moderation_capability: Callable[[], bool],
) -> bool:
    """Decide whether hidden group activity may be returned.

    Only group streams qualify, and only for members of every requested
    group or for moderators. Must be evaluated for each request with the
    current acting user.
    """

    if filters.component != GROUPS_COMPONENT:
        return False
    if is_group_member(acting_user_id, filters.primary_id):
        logger.info(
            "Showing hidden activity of groups %s to member %s",
            list(filters.primary_id),
            acting_user_id,
        )
        return True
    if has_moderation_capability():
        logger.info("Showing hidden group activity to moderator %s", acting_user_id)
        return True
    return False


def translate_list_filters(
    filters: ActivityListFilters,
    *,
    acting_user_id: int,
    show_hidden: bool = False,
) -> ActivityQueryArgs:
    """Build the store query for ``filters``."""

    criteria = (
        ActivityFilterBuilder()
        .with_component(filters.component)
        .with_type(filters.type)
        .with_authors(filters.author)
        .with_primary_ids(filters.primary_id)
        .with_secondary_ids(filters.secondary_id)
        .build()
    )

    # The scope is seen from the requested author when there is one.
    scope_user_id = filters.author[0] if filters.author else acting_user_id

    args = ActivityQueryArgs(
        page=filters.page,
        per_page=filters.per_page,
        sort=filters.order,
        include=tuple(filters.include),
        exclude=tuple(filters.exclude),
        search_terms=filters.search,
        scope=filters.scope,
        scope_user_id=scope_user_id,
        spam=spam_filter_for_status(filters.status),
        since=filters.after,
        filter=criteria,
        # Bounded id lookups do not need a COUNT query.
        count_total=not filters.include,
        fields=FIELDS_ALL,
        show_hidden=show_hidden,
        update_meta_cache=True,
    )
    logger.debug("Activity list query arguments: %s", args)
    return args


__all__ = [
    "ActivityListFilters",
    "resolve_show_hidden",
    "spam_filter_for_status",
    "translate_list_filters",
]
