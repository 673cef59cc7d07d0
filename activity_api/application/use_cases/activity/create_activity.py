"""Use case for posting a new activity."""

from __future__ import annotations

import logging

from activity_api.domain.entities import INITIATOR_META_KEY, ActivityDraft
from activity_api.domain.errors import ActivityConflictError, ActivityStoreError
from activity_api.i18n import _

from .ports import ActivityStore

logger = logging.getLogger(__name__)


def create_activity(
    store: ActivityStore,
    draft: ActivityDraft,
    *,
    acting_user_id: int,
    requested_id: int | None = None,
    visibility: str | None = None,
) -> int:
    """Store ``draft`` and return the new activity id.

    Only the id is returned, not the projected activity. Non-comment
    activities with a type also get the acting user recorded as initiator
    and, when requested, a visibility. The insert and this metadata share
    one transaction: if any write fails, nothing is kept.
    """

    if requested_id:
        raise ActivityConflictError(_("Cannot create existing resource."))

    try:
        activity_id = store.add(draft, user_id=acting_user_id)
        if draft.type is not None and not draft.is_comment():
            if visibility:
                store.set_visibility(visibility, acting_user_id, activity_id)
            store.update_meta(activity_id, INITIATOR_META_KEY, acting_user_id)
        store.commit()
    except ActivityStoreError:
        store.rollback()
        logger.exception("Creating activity for user %s failed; rolled back", acting_user_id)
        raise

    logger.info("User %s created activity %s", acting_user_id, activity_id)
    return activity_id


__all__ = ["create_activity"]
