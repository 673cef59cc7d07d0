"""Use case for checking member credentials."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto

from sqlalchemy.orm import Session

from activity_api.domain.entities import User
from activity_api.infrastructure.repositories import UserRepository
from activity_api.infrastructure.security import verify_password

logger = logging.getLogger(__name__)


class AuthenticationStatus(Enum):
    SUCCESS = auto()
    INVALID_CREDENTIALS = auto()
    INACTIVE = auto()


@dataclass(frozen=True)
class AuthenticationResult:
    """Outcome of a sign-in attempt; ``user`` is set once the password matched."""

    status: AuthenticationStatus
    user: User | None = None


def authenticate_user(session: Session, email: str, password: str) -> AuthenticationResult:
    """Check ``password`` for the member registered under ``email``.

    E-mail addresses are matched case-insensitively. Unknown addresses and
    wrong passwords are reported the same way.
    """

    member = UserRepository(session).get_by_email(email.strip().lower())
    if member is None or not verify_password(password, member.password):
        logger.info("Rejected sign-in for %s", email)
        return AuthenticationResult(AuthenticationStatus.INVALID_CREDENTIALS)
    if not member.is_active:
        logger.info("Inactive member %s tried to sign in", member.id)
        return AuthenticationResult(AuthenticationStatus.INACTIVE, member)
    return AuthenticationResult(AuthenticationStatus.SUCCESS, member)


__all__ = ["AuthenticationResult", "AuthenticationStatus", "authenticate_user"]
