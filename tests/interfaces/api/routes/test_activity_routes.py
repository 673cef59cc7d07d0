"""Integration tests for the activity and tag type endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient
from sqlalchemy import select

from activity_api.application.permissions import (
    ActivityPermissionPolicy,
    require_authenticated,
)
from activity_api.application.use_cases.users import create_user
from activity_api.domain.entities import INITIATOR_META_KEY, VISIBILITY_META_KEY
from activity_api.domain.errors import ActivityStoreError
from activity_api.infrastructure.database import SessionLocal
from activity_api.infrastructure.models import ActivityMetaModel, ActivityModel
from activity_api.infrastructure.repositories import GroupMembershipRepository
from activity_api.interfaces.api.dependencies import (
    get_activity_store,
    get_permission_policy,
)
from main import create_app

BASE = "/buddypress/v1/activity"
TYPES = "/buddypress/v1/types"


@pytest.fixture()
def app(database):
    return create_app()


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def _member(email: str, role: str = "member") -> int:
    with SessionLocal() as session:
        return create_user(
            session, name=email.split("@")[0].title(), email=email, password="Secret123", role_alias=role
        ).id


def _token(client: TestClient, email: str) -> dict[str, str]:
    response = client.post("/auth/token", data={"username": email, "password": "Secret123"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def _activity(**values) -> int:
    defaults = dict(
        user_id=0,
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
    with SessionLocal() as session:
        model = ActivityModel(**defaults)
        session.add(model)
        session.commit()
        return model.id


def _meta(activity_id: int, key: str) -> str | None:
    with SessionLocal() as session:
        return session.scalar(
            select(ActivityMetaModel.meta_value).where(
                ActivityMetaModel.activity_id == activity_id,
                ActivityMetaModel.meta_key == key,
            )
        )


def test_list_returns_projected_items_and_totals(client: TestClient) -> None:
    author = _member("ana@example.com")
    first = _activity(user_id=author, content="first", date_recorded="2024-01-01 10:00:00")
    second = _activity(user_id=author, content="second", date_recorded="2024-01-02 10:00:00")
    _activity(user_id=author, content="junk", is_spam=True)

    response = client.get(BASE)

    assert response.status_code == 200
    items = response.json()
    assert [item["id"] for item in items] == [second, first]
    assert items[0]["author_name"] == "Ana"
    assert items[0]["date"] == "2024-01-02T10:00:00"
    assert items[0]["status"] == "published"
    assert items[0]["avatar_url"].startswith("https://www.gravatar.com/avatar/")
    assert items[0]["_links"]["self"] == [{"href": f"http://example.test{BASE}/{second}"}]
    assert "visibility" not in items[0]
    assert response.headers["X-WP-Total"] == "2"
    assert response.headers["X-WP-TotalPages"] == "1"


def test_list_filters(client: TestClient) -> None:
    spam = _activity(is_spam=True)
    group_post = _activity(component="groups", item_id=4, type="activity_update")
    _activity(component="groups", item_id=5)
    _activity(component="activity", type="new_member")

    assert [item["id"] for item in client.get(BASE, params={"status": "spam"}).json()] == [spam]

    response = client.get(BASE, params={"component": "groups", "primary_id": "4,9"})
    assert [item["id"] for item in response.json()] == [group_post]

    response = client.get(BASE, params={"type": "New_Member"})
    assert [item["type"] for item in response.json()] == ["new_member"]


def test_per_page_has_no_upper_bound(client: TestClient) -> None:
    _activity()

    response = client.get(BASE, params={"per_page": "150"})

    assert response.status_code == 200
    assert len(response.json()) == 1
    assert response.headers["X-WP-TotalPages"] == "1"


def test_include_skips_total_headers(client: TestClient) -> None:
    first = _activity()
    second = _activity()
    _activity()

    response = client.get(BASE, params=[("include", str(first)), ("include", str(second))])

    assert sorted(item["id"] for item in response.json()) == [first, second]
    assert "X-WP-Total" not in response.headers


@pytest.mark.parametrize(
    "params",
    [
        {"component": "not-a-component"},
        {"status": "draft"},
        {"order": "sideways"},
        {"scope": "everyone"},
        {"per_page": "0"},
        {"page": "0"},
        {"author": "abc"},
        {"after": "not a date"},
        {"context": "embed"},
    ],
)
def test_invalid_list_parameters_are_rejected(client: TestClient, params) -> None:
    response = client.get(BASE, params=params)

    assert response.status_code == 422


def test_hidden_group_activity_is_shown_to_members_only(client: TestClient) -> None:
    member = _member("member@example.com")
    _member("outsider@example.com")
    _member("mod@example.com", role="moderator")
    with SessionLocal() as session:
        GroupMembershipRepository(session).add_member(7, member)
    hidden = _activity(user_id=member, component="groups", item_id=7, hide_sitewide=True)
    params = {"component": "groups", "primary_id": "7", "scope": "group"}

    # Anonymous callers have no scope user and no override.
    assert client.get(BASE, params=params).json() == []

    as_member = client.get(BASE, params=params, headers=_token(client, "member@example.com"))
    assert [item["id"] for item in as_member.json()] == [hidden]

    as_outsider = client.get(BASE, params=params, headers=_token(client, "outsider@example.com"))
    assert as_outsider.json() == []

    by_author = {"component": "groups", "primary_id": "7", "author": str(member)}
    as_moderator = client.get(BASE, params=by_author, headers=_token(client, "mod@example.com"))
    assert [item["id"] for item in as_moderator.json()] == [hidden]

    as_outsider = client.get(BASE, params=by_author, headers=_token(client, "outsider@example.com"))
    assert as_outsider.json() == []


def test_get_item_wraps_single_record(client: TestClient) -> None:
    comment = _activity(type="activity_comment", item_id=42, is_spam=True, hide_sitewide=True)

    response = client.get(f"{BASE}/{comment}", params={"context": "edit"})

    assert response.status_code == 200
    (item,) = response.json()
    assert item["id"] == comment
    assert item["parent"] == 42
    assert item["status"] == "spam"
    assert item["_links"]["up"] == [{"href": f"http://example.test{BASE}/42"}]


def test_get_missing_item_is_not_found(client: TestClient) -> None:
    response = client.get(f"{BASE}/999")

    assert response.status_code == 404


def test_create_returns_id_and_records_side_effects(client: TestClient) -> None:
    author = _member("poster@example.com")

    response = client.post(
        BASE,
        json={
            "component": "activity",
            "type": "activity_update",
            "content": "Hello",
            "prime_association": 3,
            "visibility": "friends",
            "unknown": "ignored",
        },
        headers=_token(client, "poster@example.com"),
    )

    assert response.status_code == 200
    activity_id = response.json()["id"]
    assert response.json() == {"id": activity_id}
    assert _meta(activity_id, VISIBILITY_META_KEY) == "friends"
    assert _meta(activity_id, INITIATOR_META_KEY) == str(author)

    (item,) = client.get(f"{BASE}/{activity_id}").json()
    assert item["author_id"] == author
    assert item["content"] == "Hello"
    assert item["prime_association"] == 3
    assert item["date"] is not None


def test_create_comment_has_no_side_effects(client: TestClient) -> None:
    response = client.post(
        BASE,
        json={"type": "activity_comment", "prime_association": 8, "visibility": "public"},
    )

    activity_id = response.json()["id"]
    assert _meta(activity_id, VISIBILITY_META_KEY) is None
    assert _meta(activity_id, INITIATOR_META_KEY) is None


def test_create_with_id_is_a_conflict(client: TestClient) -> None:
    response = client.post(BASE, json={"id": 5, "content": "mine"})

    assert response.status_code == 409
    assert client.get(BASE).json() == []


@pytest.mark.parametrize(
    "payload",
    [{"component": "nowhere"}, {"visibility": "secret"}, {"prime_association": "x"}],
)
def test_create_validates_body(client: TestClient, payload) -> None:
    assert client.post(BASE, json=payload).status_code == 422


def test_stricter_policy_denies_anonymous_create(app) -> None:
    app.dependency_overrides[get_permission_policy] = lambda: ActivityPermissionPolicy(
        create_item=require_authenticated
    )
    with TestClient(app) as client:
        response = client.post(BASE, json={"content": "hi"})

    assert response.status_code == 403
    assert "logged in" in response.json()["detail"]


class _FailingStore:
    def query(self, args):
        raise ActivityStoreError("database went away")


def test_store_failure_is_an_internal_error(app) -> None:
    app.dependency_overrides[get_activity_store] = lambda: _FailingStore()
    with TestClient(app) as client:
        response = client.get(BASE)

    assert response.status_code == 500
    assert response.json()["detail"] == "The activity store could not complete the request."


@pytest.mark.parametrize(("scope", "expected"), [("group", 1), ("just-me", 6), (None, 6)])
def test_types_catalog(client: TestClient, scope, expected) -> None:
    params = {"scope": scope, "page": 3, "per_page": 1} if scope else {}

    response = client.get(TYPES, params=params)

    assert response.status_code == 200
    tags = response.json()
    assert len(tags) == expected
    assert tags[0] == {"type": "tag_zaji", "name": "杂记"}


@pytest.mark.parametrize("scope", ["everyone", "Group"])
def test_types_rejects_unknown_scope(client: TestClient, scope) -> None:
    response = client.get(TYPES, params={"scope": scope})

    assert response.status_code == 422
