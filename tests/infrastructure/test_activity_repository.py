"""Tests for the SQLAlchemy activity store."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from activity_api.domain.entities import (
    FIELDS_IDS,
    INITIATOR_META_KEY,
    ActivityDraft,
    ActivityFilter,
    ActivityQueryArgs,
    SpamFilter,
)
from activity_api.infrastructure.models import (
    ActivityModel,
    FriendshipModel,
    GroupMemberModel,
    RoleModel,
    UserModel,
)
from activity_api.infrastructure.repositories import (
    ActivityRepository,
    GroupMembershipRepository,
)


def _add_user(session, user_id: int, name: str) -> None:
    role = session.query(RoleModel).filter_by(alias="member").first()
    if role is None:
        role = RoleModel(name="Member", alias="member")
        session.add(role)
        session.flush()
    session.add(
        UserModel(
            id=user_id,
            role_id=role.id,
            name=name,
            email=f"{name.lower()}@example.com",
            password="hash",
            is_active=True,
        )
    )


def _add_activity(session, **values) -> int:
    defaults = dict(
        user_id=1,
        component="activity",
        type="activity_update",
        action="",
        content="",
        primary_link="",
        item_id=0,
        secondary_item_id=0,
        date_recorded="2024-01-01 00:00:00",
        hide_sitewide=False,
        is_spam=False,
    )
    defaults.update(values)
    model = ActivityModel(**defaults)
    session.add(model)
    session.flush()
    return model.id


@pytest.fixture()
def store(session):
    _add_user(session, 1, "Ana")
    _add_user(session, 2, "Bruno")
    _add_user(session, 3, "Carla")
    session.commit()
    return ActivityRepository(session)


def _ids(store: ActivityRepository, **kwargs) -> list[int]:
    return [record.id for record in store.query(ActivityQueryArgs(**kwargs)).items]


def test_spam_and_hidden_filters(store, session) -> None:
    ham = _add_activity(session)
    spam = _add_activity(session, is_spam=True)
    hidden = _add_activity(session, hide_sitewide=True)
    session.commit()

    assert _ids(store) == [ham]
    assert _ids(store, spam=SpamFilter.SPAM_ONLY) == [spam]
    assert set(_ids(store, spam=SpamFilter.ALL, show_hidden=True)) == {ham, spam, hidden}


def test_records_carry_display_name_and_meta(store, session) -> None:
    activity_id = _add_activity(session, user_id=2)
    store.update_meta(activity_id, INITIATOR_META_KEY, 2)
    store.commit()

    (record,) = store.query(ActivityQueryArgs()).items

    assert record.display_name == "Bruno"
    assert record.meta == {INITIATOR_META_KEY: "2"}


def test_filter_columns_are_combined(store, session) -> None:
    match = _add_activity(session, component="groups", item_id=5, secondary_item_id=6, user_id=2)
    _add_activity(session, component="groups", item_id=5, secondary_item_id=7, user_id=2)
    _add_activity(session, component="groups", item_id=8, user_id=2)
    _add_activity(session, component="activity", item_id=5, user_id=2)
    session.commit()

    criteria = ActivityFilter(
        object="groups",
        action="activity_update",
        user_ids=(2,),
        primary_ids=(5,),
        secondary_ids=(6,),
    )

    assert _ids(store, filter=criteria) == [match]


def test_pagination_order_and_total(store, session) -> None:
    ids = [
        _add_activity(session, date_recorded=f"2024-01-0{day} 00:00:00")
        for day in range(1, 6)
    ]
    session.commit()

    result = store.query(ActivityQueryArgs(page=2, per_page=2))
    assert [record.id for record in result.items] == [ids[2], ids[1]]
    assert result.total == 5

    ascending = store.query(ActivityQueryArgs(page=1, per_page=2, sort="asc", count_total=False))
    assert [record.id for record in ascending.items] == ids[:2]
    assert ascending.total is None


def test_include_exclude_search_and_since(store, session) -> None:
    old = _add_activity(session, content="hello 100% world", date_recorded="2023-12-31 23:00:00")
    new = _add_activity(session, content="hello there", date_recorded="2024-02-01 10:00:00")
    other = _add_activity(session, content="bye", date_recorded="2024-02-02 10:00:00")
    session.commit()

    assert _ids(store, include=(old, other)) == [other, old]
    assert _ids(store, exclude=(other,)) == [new, old]
    assert _ids(store, search_terms="100%") == [old]
    since = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert _ids(store, since=since) == [other, new]


def test_ids_only_queries(store, session) -> None:
    first = _add_activity(session)
    second = _add_activity(session)
    session.commit()

    result = store.query(ActivityQueryArgs(fields=FIELDS_IDS))

    assert result.items == []
    assert sorted(result.ids) == [first, second]


def test_scopes(store, session) -> None:
    own = _add_activity(session, user_id=1)
    friend = _add_activity(session, user_id=2)
    group = _add_activity(session, user_id=3, component="groups", item_id=20)
    _add_activity(session, user_id=3, component="groups", item_id=21)
    session.add(FriendshipModel(initiator_user_id=2, friend_user_id=1, is_confirmed=True))
    session.add(GroupMemberModel(group_id=20, user_id=1))
    session.add(GroupMemberModel(group_id=21, user_id=1, is_banned=True))
    session.commit()

    assert _ids(store, scope="just-me", scope_user_id=1) == [own]
    assert _ids(store, scope="friends", scope_user_id=1) == [friend]
    assert _ids(store, scope="group", scope_user_id=1) == [group]
    assert len(_ids(store, scope="just-me", scope_user_id=0)) == 4


def test_add_fills_store_defaults(store) -> None:
    activity_id = store.add(ActivityDraft(content="draft"), user_id=3)
    store.commit()

    (record,) = store.query(ActivityQueryArgs(include=(activity_id,))).items

    assert record.user_id == 3
    assert record.content == "draft"
    assert record.component == ""
    assert record.item_id == 0
    assert record.is_spam is False
    assert record.date_recorded != "0000-00-00 00:00:00"


def test_rollback_discards_uncommitted_insert(store) -> None:
    store.add(ActivityDraft(content="lost"), user_id=1)
    store.rollback()

    assert store.query(ActivityQueryArgs()).total == 0


def test_group_membership_requires_every_group(session) -> None:
    memberships = GroupMembershipRepository(session)
    memberships.add_member(1, 7)
    memberships.add_member(2, 7)
    memberships.add_member(3, 7, is_confirmed=False)

    assert memberships.is_member_of_all(7, [1])
    assert memberships.is_member_of_all(7, [1, 2])
    assert not memberships.is_member_of_all(7, [1, 3])
    assert not memberships.is_member_of_all(7, [])
    assert not memberships.is_member_of_all(0, [1])
