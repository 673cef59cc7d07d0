"""FastAPI dependency utilities."""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import datetime
from typing import Literal

from fastapi import Depends, HTTPException, Query, status
from fastapi.exceptions import RequestValidationError
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from activity_api.application.permissions import (
    DEFAULT_PERMISSION_POLICY,
    ActivityPermissionPolicy,
)
from activity_api.application.use_cases.activity import ActivityListFilters
from activity_api.config import Settings, get_settings
from activity_api.domain.entities import User
from activity_api.infrastructure.avatars import GravatarAvatarResolver
from activity_api.infrastructure.catalogs import registered_component_ids
from activity_api.infrastructure.database import get_db
from activity_api.infrastructure.repositories import (
    ActivityRepository,
    GroupMembershipRepository,
    UserRepository,
)
from activity_api.infrastructure.security import decode_access_token
from activity_api.interfaces.api.projection import ActivityLinkBuilder, ActivityPresenter

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=False)

settings = get_settings()

_KEY_PATTERN = re.compile(r"[^a-z0-9_\-]")
_ID_SEPARATOR = re.compile(r"[\s,]+")


def _credentials_error(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_current_user(token: str, db: Session) -> User:
    """Resolve the authenticated user for the provided token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _credentials_error() from exc

    email = payload.get("sub")
    if not isinstance(email, str):
        raise _credentials_error()

    user = UserRepository(db).get_by_email(email)
    if user is None:
        raise _credentials_error("User not found")
    if not user.is_active:
        raise _credentials_error("Inactive user")
    return user


def get_optional_user(
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User | None:
    """Return the bearer of the request token, or ``None`` for anonymous calls.

    A token that is supplied but cannot be validated is still rejected.
    """

    if not token:
        return None
    return resolve_current_user(token, db)


def get_permission_policy() -> ActivityPermissionPolicy:
    return DEFAULT_PERMISSION_POLICY


def get_activity_store(db: Session = Depends(get_db)) -> ActivityRepository:
    return ActivityRepository(db)


def get_group_memberships(db: Session = Depends(get_db)) -> GroupMembershipRepository:
    return GroupMembershipRepository(db)


def get_activity_presenter(
    db: Session = Depends(get_db),
    app_settings: Settings = Depends(get_settings),
) -> ActivityPresenter:
    """Wire the projection collaborators for the current request."""

    return ActivityPresenter(
        avatar_url=GravatarAvatarResolver(UserRepository(db), app_settings),
        type_labels=app_settings.activity_type_labels,
        links=ActivityLinkBuilder(
            site_url=app_settings.site_url,
            namespace=app_settings.api_namespace,
            rest_base=app_settings.activity_rest_base,
            author_resource_path=app_settings.author_resource_path,
        ),
    )


def sanitize_key(value: str | None) -> str | None:
    """Lower-case ``value`` and strip characters not allowed in keys."""

    if value is None:
        return None
    return _KEY_PATTERN.sub("", value.lower())


def parse_id_list(values: Sequence[str] | None, *, name: str) -> tuple[int, ...]:
    """Parse repeated and comma separated id values, keeping first occurrences."""

    ids: list[int] = []
    for raw in values or ():
        for chunk in _ID_SEPARATOR.split(raw.strip()):
            if not chunk:
                continue
            try:
                ids.append(abs(int(chunk)))
            except ValueError:
                raise RequestValidationError(
                    [
                        {
                            "type": "int_parsing",
                            "loc": ("query", name),
                            "msg": f"{name} must be a list of integer ids",
                            "input": raw,
                        }
                    ]
                ) from None
    return tuple(dict.fromkeys(ids))


def ensure_registered_component(
    component: str | None, app_settings: Settings, *, loc: tuple[str, ...]
) -> None:
    """Raise a validation error when ``component`` is not a registered component."""

    if component is None:
        return
    allowed = registered_component_ids(app_settings)
    if component not in allowed:
        raise RequestValidationError(
            [
                {
                    "type": "enum",
                    "loc": loc,
                    "msg": f"Input should be one of: {', '.join(sorted(allowed))}",
                    "input": component,
                }
            ]
        )


def get_activity_list_filters(
    page: int = Query(1, ge=1, description="Current page of the collection."),
    per_page: int = Query(
        settings.default_per_page,
        ge=1,
        description="Maximum number of items to be returned in result set.",
    ),
    order: Literal["asc", "desc"] = Query(
        "desc", description="Order sort attribute ascending or descending."
    ),
    exclude: list[str] | None = Query(
        None, description="Ensure result set excludes specific IDs."
    ),
    include: list[str] | None = Query(
        None, description="Ensure result set includes specific IDs."
    ),
    author: list[str] | None = Query(
        None, description="Limit result set to items created by specific authors."
    ),
    status_: Literal["published", "spam"] = Query(
        "published", alias="status", description="Limit result set to items with a specific status."
    ),
    component: str | None = Query(
        None, description="Limit result set to items with a specific active component."
    ),
    type_: str | None = Query(
        None, alias="type", description="Limit result set to items with a specific activity type."
    ),
    search: str = Query("", description="Limit result set to items that match this search query."),
    after: datetime | None = Query(
        None, description="Limit result set to items published after a given ISO8601 compliant date."
    ),
    primary_id: list[str] | None = Query(
        None, description="Limit result set to items with a specific prime association."
    ),
    secondary_id: list[str] | None = Query(
        None, description="Limit result set to items with a specific secondary association."
    ),
    scope: Literal["just-me", "friends", "group"] = Query(
        "just-me", description="Limit result set to items with a specific scope."
    ),
    app_settings: Settings = Depends(get_settings),
) -> ActivityListFilters:
    """Validate the list query string and collect it into filters."""

    component = sanitize_key(component) or None
    ensure_registered_component(component, app_settings, loc=("query", "component"))
    return ActivityListFilters(
        page=page,
        per_page=per_page,
        order=order,
        exclude=parse_id_list(exclude, name="exclude"),
        include=parse_id_list(include, name="include"),
        author=parse_id_list(author, name="author"),
        status=status_,
        component=component,
        type=sanitize_key(type_) or None,
        search=search,
        after=after,
        primary_id=parse_id_list(primary_id, name="primary_id"),
        secondary_id=parse_id_list(secondary_id, name="secondary_id"),
        scope=scope,
    )


__all__ = [
    "ensure_registered_component",
    "get_activity_list_filters",
    "get_activity_presenter",
    "get_activity_store",
    "get_group_memberships",
    "get_optional_user",
    "get_permission_policy",
    "oauth2_scheme",
    "parse_id_list",
    "resolve_current_user",
    "sanitize_key",
]
