"""Use case for retrieving a single activity."""

from activity_api.domain.entities import (
    ActivityQueryArgs,
    ActivityRecord,
    SpamFilter,
)
from activity_api.domain.errors import ActivityNotFoundError

from .ports import ActivityStore


def get_activity(store: ActivityStore, activity_id: int) -> ActivityRecord:
    """Return the activity identified by ``activity_id`` or raise an error.

    The lookup matches on the id alone: list filters such as the spam flag,
    hidden entries and scope do not apply.
    """

    result = store.query(
        ActivityQueryArgs(
            page=None,
            per_page=None,
            include=(activity_id,),
            spam=SpamFilter.ALL,
            show_hidden=True,
            count_total=False,
        )
    )
    if not result.items:
        raise ActivityNotFoundError(activity_id)
    return result.items[0]


__all__ = ["get_activity"]
