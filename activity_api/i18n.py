"""Localized string lookup backed by gettext catalogs."""

from __future__ import annotations

import gettext
from functools import lru_cache

from activity_api.config import get_settings

DOMAIN = "activity_api"


@lru_cache(maxsize=1)
def get_translations() -> gettext.NullTranslations:
    """Return the catalog for the configured locale.

    Missing catalogs fall back to the untranslated message ids.
    """

    settings = get_settings()
    return gettext.translation(
        DOMAIN,
        localedir=settings.locale_dir,
        languages=[settings.locale],
        fallback=True,
    )


def _(message: str) -> str:
    return get_translations().gettext(message)


__all__ = ["DOMAIN", "_", "get_translations"]
