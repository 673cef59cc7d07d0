"""Endpoints for listing, reading and posting activity stream entries."""

from __future__ import annotations

import math
from dataclasses import asdict
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status
from fastapi.exceptions import RequestValidationError

from activity_api.application.permissions import (
    ACTION_CREATE,
    ACTION_GET,
    ACTION_LIST,
    ActivityPermissionPolicy,
    PermissionRequest,
    ensure_permitted,
)
from activity_api.application.use_cases.activity import (
    ActivityListFilters,
    create_activity as create_activity_uc,
    get_activity as get_activity_uc,
    list_activities as list_activities_uc,
)
from activity_api.config import get_settings
from activity_api.domain.entities import ActivityDraft, User
from activity_api.domain.errors import ActivityConflictError, ActivityNotFoundError
from activity_api.infrastructure.catalogs import visibility_option_keys
from activity_api.infrastructure.repositories import (
    ActivityRepository,
    GroupMembershipRepository,
)
from activity_api.interfaces.api.dependencies import (
    ensure_registered_component,
    get_activity_list_filters,
    get_activity_presenter,
    get_activity_store,
    get_group_memberships,
    get_optional_user,
    get_permission_policy,
)
from activity_api.interfaces.api.projection import CONTEXT_VIEW, ActivityPresenter
from activity_api.interfaces.api.schemas import ActivityCreate, ActivityCreated, ActivityRead

settings = get_settings()

router = APIRouter(
    prefix=f"/{settings.api_namespace.strip('/')}/{settings.activity_rest_base.strip('/')}",
    tags=["activity"],
)

TOTAL_HEADER = "X-WP-Total"
TOTAL_PAGES_HEADER = "X-WP-TotalPages"

ContextParam = Literal["view", "edit"]


def _permission_request(
    action: str, user: User | None, params: dict | None = None
) -> PermissionRequest:
    return PermissionRequest(action=action, user=user, params=params or {})


def _ensure_visibility_option(visibility: str | None) -> None:
    if visibility is None:
        return
    allowed = visibility_option_keys(settings)
    if visibility not in allowed:
        raise RequestValidationError(
            [
                {
                    "type": "enum",
                    "loc": ("body", "visibility"),
                    "msg": f"Input should be one of: {', '.join(sorted(allowed))}",
                    "input": visibility,
                }
            ]
        )


@router.get("", response_model=list[ActivityRead])
def list_activity_items(
    response: Response,
    filters: ActivityListFilters = Depends(get_activity_list_filters),
    context: ContextParam = Query(
        CONTEXT_VIEW, description="Scope under which the request is made."
    ),
    store: ActivityRepository = Depends(get_activity_store),
    memberships: GroupMembershipRepository = Depends(get_group_memberships),
    presenter: ActivityPresenter = Depends(get_activity_presenter),
    policy: ActivityPermissionPolicy = Depends(get_permission_policy),
    current_user: User | None = Depends(get_optional_user),
) -> list[ActivityRead]:
    """Return a page of activities matching the query string."""

    ensure_permitted(policy, _permission_request(ACTION_LIST, current_user, asdict(filters)))

    result = list_activities_uc(
        store,
        filters,
        acting_user_id=current_user.id if current_user else 0,
        memberships=memberships,
        has_moderation_capability=lambda: (
            current_user is not None
            and current_user.can_moderate(settings.moderator_roles)
        ),
    )

    if result.total is not None:
        response.headers[TOTAL_HEADER] = str(result.total)
        response.headers[TOTAL_PAGES_HEADER] = str(
            math.ceil(result.total / filters.per_page)
        )

    return presenter.present_many(result.items, context)


@router.post("", response_model=ActivityCreated)
def create_activity_item(
    payload: ActivityCreate,
    store: ActivityRepository = Depends(get_activity_store),
    policy: ActivityPermissionPolicy = Depends(get_permission_policy),
    current_user: User | None = Depends(get_optional_user),
) -> ActivityCreated:
    """Post a new activity and return only its identifier."""

    ensure_registered_component(payload.component, settings, loc=("body", "component"))
    _ensure_visibility_option(payload.visibility)
    ensure_permitted(
        policy,
        _permission_request(ACTION_CREATE, current_user, payload.model_dump(exclude_none=True)),
    )

    draft = ActivityDraft(
        component=payload.component,
        type=payload.type,
        content=payload.content,
        item_id=payload.prime_association,
        secondary_item_id=payload.secondary_association,
    )

    try:
        activity_id = create_activity_uc(
            store,
            draft,
            acting_user_id=current_user.id if current_user else 0,
            requested_id=payload.id,
            visibility=payload.visibility,
        )
    except ActivityConflictError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc

    return ActivityCreated(id=activity_id)


@router.get("/{activity_id}", response_model=list[ActivityRead])
def read_activity_item(
    activity_id: int = Path(..., ge=0, description="A unique numeric ID for the activity."),
    context: ContextParam = Query(
        CONTEXT_VIEW, description="Scope under which the request is made."
    ),
    store: ActivityRepository = Depends(get_activity_store),
    presenter: ActivityPresenter = Depends(get_activity_presenter),
    policy: ActivityPermissionPolicy = Depends(get_permission_policy),
    current_user: User | None = Depends(get_optional_user),
) -> list[ActivityRead]:
    """Return the activity identified by ``activity_id`` wrapped in a list."""

    ensure_permitted(
        policy, _permission_request(ACTION_GET, current_user, {"id": activity_id})
    )

    try:
        record = get_activity_uc(store, activity_id)
    except ActivityNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Invalid activity id."
        ) from exc

    return [presenter.present(record, context)]


__all__ = ["router"]
