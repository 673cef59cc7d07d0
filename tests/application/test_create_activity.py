"""Tests for the create activity use case."""

from __future__ import annotations

import pytest

from activity_api.application.use_cases.activity import create_activity
from activity_api.domain.entities import (
    COMMENT_TYPE,
    INITIATOR_META_KEY,
    ActivityDraft,
)
from activity_api.domain.errors import ActivityConflictError, ActivityStoreError


class _StubStore:
    def __init__(self, *, fail_on: str | None = None) -> None:
        self.fail_on = fail_on
        self.calls: list[tuple] = []
        self.committed = False
        self.rolled_back = False

    def _record(self, name: str, *args) -> None:
        self.calls.append((name, *args))
        if self.fail_on == name:
            raise ActivityStoreError(f"{name} failed")

    def query(self, args):
        raise AssertionError("create must not query")

    def add(self, draft, *, user_id):
        self._record("add", draft, user_id)
        return 31

    def update_meta(self, activity_id, key, value):
        self._record("update_meta", activity_id, key, value)

    def set_visibility(self, visibility, acting_user_id, activity_id):
        self._record("set_visibility", visibility, acting_user_id, activity_id)

    def commit(self):
        self._record("commit")
        self.committed = True

    def rollback(self):
        self.rolled_back = True


def test_supplied_id_is_a_conflict_without_writes() -> None:
    store = _StubStore()

    with pytest.raises(ActivityConflictError):
        create_activity(store, ActivityDraft(content="hi"), acting_user_id=3, requested_id=12)

    assert store.calls == []


def test_zero_id_is_treated_as_absent() -> None:
    store = _StubStore()

    assert create_activity(store, ActivityDraft(content="hi"), acting_user_id=3, requested_id=0) == 31


def test_typed_activity_records_visibility_and_initiator() -> None:
    store = _StubStore()
    draft = ActivityDraft(component="activity", type="activity_update", content="hello")

    activity_id = create_activity(store, draft, acting_user_id=3, visibility="friends")

    assert activity_id == 31
    assert store.calls == [
        ("add", draft, 3),
        ("set_visibility", "friends", 3, 31),
        ("update_meta", 31, INITIATOR_META_KEY, 3),
        ("commit",),
    ]


def test_initiator_is_recorded_without_visibility() -> None:
    store = _StubStore()

    create_activity(store, ActivityDraft(type="activity_update"), acting_user_id=4)

    assert [call[0] for call in store.calls] == ["add", "update_meta", "commit"]


@pytest.mark.parametrize("visibility", [None, "onlyme"])
def test_comments_never_get_side_effects(visibility) -> None:
    store = _StubStore()

    create_activity(
        store,
        ActivityDraft(type=COMMENT_TYPE, item_id=42, content="reply"),
        acting_user_id=3,
        visibility=visibility,
    )

    assert [call[0] for call in store.calls] == ["add", "commit"]


def test_untyped_activity_skips_side_effects() -> None:
    store = _StubStore()

    create_activity(store, ActivityDraft(content="plain"), acting_user_id=3, visibility="public")

    assert [call[0] for call in store.calls] == ["add", "commit"]


def test_side_effect_failure_rolls_back_the_insert() -> None:
    store = _StubStore(fail_on="update_meta")

    with pytest.raises(ActivityStoreError):
        create_activity(store, ActivityDraft(type="activity_update"), acting_user_id=3)

    assert store.rolled_back is True
    assert store.committed is False
