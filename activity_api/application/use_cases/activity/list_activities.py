"""Use case for listing activity stream entries."""

from __future__ import annotations

from collections.abc import Callable

from activity_api.domain.entities import ActivityQueryResult

from .ports import ActivityStore, GroupMembership
from .query import ActivityListFilters, resolve_show_hidden, translate_list_filters


def list_activities(
    store: ActivityStore,
    filters: ActivityListFilters,
    *,
    acting_user_id: int,
    memberships: GroupMembership,
    has_moderation_capability: Callable[[], bool],
) -> ActivityQueryResult:
    """Return the page of activities matching ``filters``."""

    show_hidden = resolve_show_hidden(
        filters,
        acting_user_id=acting_user_id,
        is_group_member=memberships.is_member_of_all,
        has_moderation_capability=has_moderation_capability,
    )
    args = translate_list_filters(
        filters, acting_user_id=acting_user_id, show_hidden=show_hidden
    )
    return store.query(args)


__all__ = ["list_activities"]
