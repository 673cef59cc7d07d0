"""Endpoint listing the tags activities can be filed under."""

from typing import Literal

from fastapi import APIRouter, Depends, Query

from activity_api.application.permissions import (
    ACTION_LIST_TYPES,
    ActivityPermissionPolicy,
    PermissionRequest,
    ensure_permitted,
)
from activity_api.application.use_cases.activity_types import list_activity_types
from activity_api.config import get_settings
from activity_api.domain.entities import User
from activity_api.interfaces.api.dependencies import get_optional_user, get_permission_policy
from activity_api.interfaces.api.projection import CONTEXT_VIEW, project_tag
from activity_api.interfaces.api.schemas import ActivityTypeRead

settings = get_settings()

router = APIRouter(prefix=f"/{settings.api_namespace.strip('/')}", tags=["activity_types"])


@router.get(f"/{settings.types_rest_base.strip('/')}", response_model=list[ActivityTypeRead])
def list_activity_type_items(
    scope: Literal["just-me", "friends", "group"] = Query(
        "just-me", description="Limit result set to tags offered for a scope."
    ),
    context: Literal["view", "edit"] = Query(
        CONTEXT_VIEW, description="Scope under which the request is made."
    ),
    # Validated only. The catalog is never paginated.
    page: int = Query(1, ge=1),
    per_page: int = Query(settings.default_per_page, ge=1),
    search: str | None = Query(None),
    policy: ActivityPermissionPolicy = Depends(get_permission_policy),
    current_user: User | None = Depends(get_optional_user),
) -> list[ActivityTypeRead]:
    """Return the ordered tag catalog for ``scope``."""

    ensure_permitted(
        policy,
        PermissionRequest(action=ACTION_LIST_TYPES, user=current_user, params={"scope": scope}),
    )
    return [ActivityTypeRead(**project_tag(tag, context)) for tag in list_activity_types(scope)]


__all__ = ["router"]
