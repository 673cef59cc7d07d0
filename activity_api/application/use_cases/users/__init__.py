"""Use cases for managing users."""

from .authenticate_user import AuthenticationResult, AuthenticationStatus, authenticate_user
from .create_user import DEFAULT_ROLE_ALIAS, create_user

__all__ = [
    "AuthenticationResult",
    "AuthenticationStatus",
    "DEFAULT_ROLE_ALIAS",
    "authenticate_user",
    "create_user",
]
