"""Domain entity representing a member of the site."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from .role import Role


@dataclass
class User:
    """Core attributes describing an authenticated member."""

    id: int
    role: Role
    name: str
    email: str
    password: str
    is_active: bool
    created_at: datetime | None

    def has_role(self, alias: str) -> bool:
        """Return ``True`` when the user's role alias matches ``alias``."""

        return self.role.alias.lower() == alias.lower()

    def can_moderate(self, moderator_roles: Iterable[str]) -> bool:
        """Return ``True`` when the user's role grants the moderation capability."""

        return any(self.has_role(alias) for alias in moderator_roles)


__all__ = ["User"]
