"""Collaborator interfaces the activity use cases depend on."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from activity_api.domain.entities import (
    ActivityDraft,
    ActivityQueryArgs,
    ActivityQueryResult,
)


class ActivityStore(Protocol):
    def query(self, args: ActivityQueryArgs) -> ActivityQueryResult: ...

    def add(self, draft: ActivityDraft, *, user_id: int) -> int: ...

    def update_meta(self, activity_id: int, key: str, value: object) -> None: ...

    def set_visibility(
        self, visibility: str, acting_user_id: int, activity_id: int
    ) -> None: ...

    def commit(self) -> None: ...

    def rollback(self) -> None: ...


class GroupMembership(Protocol):
    def is_member_of_all(self, user_id: int, group_ids: Iterable[int]) -> bool: ...


__all__ = ["ActivityStore", "GroupMembership"]
