"""Pluggable permission predicates for the activity endpoints.

Each endpoint consults one predicate before touching the store. The
defaults allow everything; a stricter :class:`ActivityPermissionPolicy` can
be supplied without changing any query logic.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from activity_api.domain.entities import User
from activity_api.domain.errors import ActivityPermissionError

ACTION_LIST = "list"
ACTION_GET = "get"
ACTION_CREATE = "create"
ACTION_LIST_TYPES = "list_types"


@dataclass(frozen=True)
class PermissionRequest:
    """What a predicate gets to look at."""

    action: str
    user: User | None
    params: Mapping[str, Any] = field(default_factory=dict)

    @property
    def user_id(self) -> int:
        return self.user.id if self.user is not None else 0


@dataclass(frozen=True)
class PermissionDecision:
    allowed: bool
    reason: str | None = None

    @classmethod
    def allow(cls) -> PermissionDecision:
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> PermissionDecision:
        return cls(allowed=False, reason=reason)


PermissionCheck = Callable[[PermissionRequest], PermissionDecision]


def allow_all(request: PermissionRequest) -> PermissionDecision:
    return PermissionDecision.allow()


def require_authenticated(request: PermissionRequest) -> PermissionDecision:
    """Deny anonymous callers."""

    if request.user is None:
        return PermissionDecision.deny("Sorry, you must be logged in to do that.")
    return PermissionDecision.allow()


@dataclass(frozen=True)
class ActivityPermissionPolicy:
    """One predicate per endpoint action."""

    list_items: PermissionCheck = allow_all
    get_item: PermissionCheck = allow_all
    create_item: PermissionCheck = allow_all
    list_types: PermissionCheck = allow_all

    def check_for(self, action: str) -> PermissionCheck:
        checks: dict[str, PermissionCheck] = {
            ACTION_LIST: self.list_items,
            ACTION_GET: self.get_item,
            ACTION_CREATE: self.create_item,
            ACTION_LIST_TYPES: self.list_types,
        }
        try:
            return checks[action]
        except KeyError as exc:
            raise ValueError(f"Unknown activity action '{action}'") from exc


def ensure_permitted(policy: ActivityPermissionPolicy, request: PermissionRequest) -> None:
    """Raise :class:`ActivityPermissionError` when the policy refuses ``request``."""

    decision = policy.check_for(request.action)(request)
    if not decision.allowed:
        raise ActivityPermissionError(
            decision.reason or "Sorry, you are not allowed to do that."
        )


DEFAULT_PERMISSION_POLICY = ActivityPermissionPolicy()


__all__ = [
    "ACTION_CREATE",
    "ACTION_GET",
    "ACTION_LIST",
    "ACTION_LIST_TYPES",
    "DEFAULT_PERMISSION_POLICY",
    "ActivityPermissionPolicy",
    "PermissionCheck",
    "PermissionDecision",
    "PermissionRequest",
    "allow_all",
    "ensure_permitted",
    "require_authenticated",
]
