"""Registries the API validates requests against."""

from activity_api.config import Settings


def registered_component_ids(settings: Settings) -> frozenset[str]:
    """Return the identifiers of the components activities may belong to."""

    return frozenset(settings.component_ids)


def visibility_option_keys(settings: Settings) -> frozenset[str]:
    """Return the visibility tokens accepted when creating an activity."""

    return frozenset(settings.visibility_options)


__all__ = ["registered_component_ids", "visibility_option_keys"]
