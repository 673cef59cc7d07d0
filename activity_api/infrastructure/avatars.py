"""Avatar URL resolution for activity authors."""

from __future__ import annotations

from hashlib import md5
from urllib.parse import urlencode

from activity_api.config import Settings
from activity_api.infrastructure.repositories import UserRepository


def gravatar_url(
    email: str, *, base_url: str, size: int, default: str
) -> str:
    """Return the Gravatar image URL for ``email``."""

    digest = md5(email.strip().lower().encode("utf-8"), usedforsecurity=False).hexdigest()
    query = urlencode({"s": size, "d": default, "r": "g"})
    return f"{base_url.rstrip('/')}/{digest}?{query}"


class GravatarAvatarResolver:
    """Resolve author avatars from member e-mail addresses.

    Lookups are memoized for the lifetime of the resolver, which is one
    request.
    """

    def __init__(self, users: UserRepository, settings: Settings) -> None:
        self._users = users
        self._base_url = settings.avatar_base_url
        self._size = settings.avatar_size
        self._default = settings.avatar_default
        self._emails: dict[int, str] = {}

    def prefetch(self, user_ids: list[int]) -> None:
        missing = [user_id for user_id in set(user_ids) if user_id not in self._emails]
        self._emails.update(self._users.get_emails(missing))

    def __call__(self, user_id: int) -> str:
        if user_id not in self._emails:
            self.prefetch([user_id])
        # Unknown authors still get the service's fallback image.
        email = self._emails.get(user_id, "")
        return gravatar_url(
            email, base_url=self._base_url, size=self._size, default=self._default
        )


__all__ = ["GravatarAvatarResolver", "gravatar_url"]
