"""Use case for registering site members."""

from sqlalchemy.orm import Session

from activity_api.domain.entities import User
from activity_api.infrastructure.repositories import UserRepository
from activity_api.infrastructure.security import get_password_hash

DEFAULT_ROLE_ALIAS = "member"


def create_user(
    session: Session,
    *,
    name: str,
    email: str,
    password: str,
    role_alias: str = DEFAULT_ROLE_ALIAS,
) -> User:
    """Create a new member ensuring unique email addresses."""

    repository = UserRepository(session)

    normalized_email = email.strip().lower()
    if repository.get_by_email(normalized_email):
        raise ValueError("The email address is already registered")

    return repository.create(
        name=name.strip(),
        email=normalized_email,
        password_hash=get_password_hash(password),
        role_alias=role_alias.strip().lower() or DEFAULT_ROLE_ALIAS,
    )
