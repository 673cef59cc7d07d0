"""Value objects describing a query against the activity store."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from .activity import ActivityRecord

FIELDS_ALL = "all"
FIELDS_IDS = "ids"

SORT_ASC = "asc"
SORT_DESC = "desc"


class SpamFilter(str, Enum):
    """Which side of the spam flag a query should return."""

    HAM_ONLY = "ham_only"
    SPAM_ONLY = "spam_only"
    ALL = "all"


@dataclass(frozen=True)
class ActivityFilter:
    """Column filters combined with ``AND``; empty members are not applied."""

    object: str | None = None
    action: str | None = None
    user_ids: tuple[int, ...] = ()
    primary_ids: tuple[int, ...] = ()
    secondary_ids: tuple[int, ...] = ()

    def is_empty(self) -> bool:
        return not (
            self.object
            or self.action
            or self.user_ids
            or self.primary_ids
            or self.secondary_ids
        )


class ActivityFilterBuilder:
    """Accumulate filter criteria one named step at a time.

    Every setter merges into the same structure, so setting the type after
    the component keeps both.
    """

    def __init__(self) -> None:
        self._object: str | None = None
        self._action: str | None = None
        self._user_ids: tuple[int, ...] = ()
        self._primary_ids: tuple[int, ...] = ()
        self._secondary_ids: tuple[int, ...] = ()

    def with_component(self, component: str | None) -> ActivityFilterBuilder:
        if component:
            self._object = component
        return self

    def with_type(self, activity_type: str | None) -> ActivityFilterBuilder:
        if activity_type:
            self._action = activity_type
        return self

    def with_authors(self, user_ids: Iterable[int]) -> ActivityFilterBuilder:
        ids = tuple(user_ids)
        if ids:
            self._user_ids = ids
        return self

    def with_primary_ids(self, item_ids: Iterable[int]) -> ActivityFilterBuilder:
        ids = tuple(item_ids)
        if ids:
            self._primary_ids = ids
        return self

    def with_secondary_ids(self, item_ids: Iterable[int]) -> ActivityFilterBuilder:
        ids = tuple(item_ids)
        if ids:
            self._secondary_ids = ids
        return self

    def build(self) -> ActivityFilter:
        return ActivityFilter(
            object=self._object,
            action=self._action,
            user_ids=self._user_ids,
            primary_ids=self._primary_ids,
            secondary_ids=self._secondary_ids,
        )


@dataclass(frozen=True)
class ActivityQueryArgs:
    """Complete set of arguments sent to the activity store for one query."""

    page: int | None = 1
    per_page: int | None = 20
    sort: str = SORT_DESC
    include: tuple[int, ...] = ()
    exclude: tuple[int, ...] = ()
    search_terms: str = ""
    scope: str | None = None
    scope_user_id: int = 0
    spam: SpamFilter = SpamFilter.HAM_ONLY
    since: datetime | None = None
    filter: ActivityFilter = field(default_factory=ActivityFilter)
    count_total: bool = True
    fields: str = FIELDS_ALL
    show_hidden: bool = False
    update_meta_cache: bool = True


@dataclass
class ActivityQueryResult:
    """Page of records returned by the store, plus the total when counted."""

    items: list[ActivityRecord] = field(default_factory=list)
    total: int | None = None
    ids: list[int] = field(default_factory=list)


__all__ = [
    "FIELDS_ALL",
    "FIELDS_IDS",
    "SORT_ASC",
    "SORT_DESC",
    "ActivityFilter",
    "ActivityFilterBuilder",
    "ActivityQueryArgs",
    "ActivityQueryResult",
    "SpamFilter",
]
