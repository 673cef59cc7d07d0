"""Persistence layer for activity stream entries."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from sqlalchemy.sql import ColumnElement, Select

from activity_api.domain.entities import (
    FIELDS_IDS,
    GROUPS_COMPONENT,
    SCOPE_FRIENDS,
    SCOPE_GROUP,
    SCOPE_JUST_ME,
    SORT_ASC,
    VISIBILITY_META_KEY,
    ActivityDraft,
    ActivityQueryArgs,
    ActivityQueryResult,
    ActivityRecord,
    SpamFilter,
)
from activity_api.domain.errors import ActivityStoreError
from activity_api.infrastructure.models import (
    ActivityMetaModel,
    ActivityModel,
    FriendshipModel,
    GroupMemberModel,
    UserModel,
)
from activity_api.utils import now_storage_datetime, to_storage_datetime

logger = logging.getLogger(__name__)


class ActivityRepository:
    """Query and write activity entries.

    Writes only flush; callers decide when the unit of work is committed so
    an insert and its metadata succeed or fail together.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def query(self, args: ActivityQueryArgs) -> ActivityQueryResult:
        """Return the page of activities selected by ``args``."""

        try:
            conditions = self._conditions(args)
            result = ActivityQueryResult()

            if args.fields == FIELDS_IDS:
                statement = self._paginate(
                    self._order(select(ActivityModel.id).where(*conditions), args),
                    args,
                )
                result.ids = list(self.session.scalars(statement).all())
            else:
                statement = select(ActivityModel, UserModel.name).outerjoin(
                    UserModel, UserModel.id == ActivityModel.user_id
                )
                if args.update_meta_cache:
                    statement = statement.options(selectinload(ActivityModel.meta))
                statement = self._paginate(
                    self._order(statement.where(*conditions), args), args
                )
                result.items = [
                    self._to_entity(model, display_name, with_meta=args.update_meta_cache)
                    for model, display_name in self.session.execute(statement).all()
                ]

            if args.count_total:
                count_statement = (
                    select(func.count()).select_from(ActivityModel).where(*conditions)
                )
                result.total = int(self.session.scalar(count_statement) or 0)
        except SQLAlchemyError as exc:
            logger.exception("Activity query failed: %s", exc)
            raise ActivityStoreError("The activity store could not run the query") from exc

        return result

    def add(self, draft: ActivityDraft, *, user_id: int) -> int:
        """Insert ``draft`` authored by ``user_id`` and return its new id."""

        model = ActivityModel(
            user_id=user_id,
            component=draft.component or "",
            type=draft.type or "",
            content=draft.content or "",
            item_id=draft.item_id or 0,
            secondary_item_id=draft.secondary_item_id or 0,
            action="",
            primary_link="",
            date_recorded=now_storage_datetime(),
            hide_sitewide=False,
            is_spam=False,
        )
        try:
            self.session.add(model)
            self.session.flush()
        except SQLAlchemyError as exc:
            raise ActivityStoreError("The activity could not be stored") from exc
        return model.id

    def update_meta(self, activity_id: int, key: str, value: object) -> None:
        """Create or replace the metadata value stored under ``key``."""

        try:
            meta = self.session.scalar(
                select(ActivityMetaModel).where(
                    ActivityMetaModel.activity_id == activity_id,
                    ActivityMetaModel.meta_key == key,
                )
            )
            if meta is None:
                meta = ActivityMetaModel(activity_id=activity_id, meta_key=key)
                self.session.add(meta)
            meta.meta_value = "" if value is None else str(value)
            self.session.flush()
        except SQLAlchemyError as exc:
            raise ActivityStoreError(
                f"Metadata '{key}' could not be stored for activity {activity_id}"
            ) from exc

    def set_visibility(self, visibility: str, acting_user_id: int, activity_id: int) -> None:
        """Record who may see ``activity_id``."""

        logger.debug(
            "User %s sets visibility '%s' on activity %s",
            acting_user_id,
            visibility,
            activity_id,
        )
        self.update_meta(activity_id, VISIBILITY_META_KEY, visibility)

    def commit(self) -> None:
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            raise ActivityStoreError("The activity transaction could not be committed") from exc

    def rollback(self) -> None:
        self.session.rollback()

    def _conditions(self, args: ActivityQueryArgs) -> list[ColumnElement[bool]]:
        conditions: list[ColumnElement[bool]] = []

        if args.spam is SpamFilter.HAM_ONLY:
            conditions.append(ActivityModel.is_spam.is_(False))
        elif args.spam is SpamFilter.SPAM_ONLY:
            conditions.append(ActivityModel.is_spam.is_(True))

        if not args.show_hidden:
            conditions.append(ActivityModel.hide_sitewide.is_(False))

        if args.include:
            conditions.append(ActivityModel.id.in_(args.include))
        if args.exclude:
            conditions.append(ActivityModel.id.not_in(args.exclude))

        criteria = args.filter
        if criteria.object:
            conditions.append(ActivityModel.component == criteria.object)
        if criteria.action:
            conditions.append(ActivityModel.type == criteria.action)
        if criteria.user_ids:
            conditions.append(ActivityModel.user_id.in_(criteria.user_ids))
        if criteria.primary_ids:
            conditions.append(ActivityModel.item_id.in_(criteria.primary_ids))
        if criteria.secondary_ids:
            conditions.append(ActivityModel.secondary_item_id.in_(criteria.secondary_ids))

        if args.since is not None:
            conditions.append(ActivityModel.date_recorded > to_storage_datetime(args.since))

        if args.search_terms:
            conditions.append(
                ActivityModel.content.contains(args.search_terms, autoescape=True)
            )

        scope_condition = self._scope_condition(args.scope, args.scope_user_id)
        if scope_condition is not None:
            conditions.append(scope_condition)

        return conditions

    @staticmethod
    def _scope_condition(scope: str | None, user_id: int) -> ColumnElement[bool] | None:
        if not scope or not user_id:
            return None

        if scope == SCOPE_JUST_ME:
            return ActivityModel.user_id == user_id

        if scope == SCOPE_FRIENDS:
            friends_of_initiator = select(FriendshipModel.friend_user_id).where(
                FriendshipModel.initiator_user_id == user_id,
                FriendshipModel.is_confirmed.is_(True),
            )
            friends_of_friend = select(FriendshipModel.initiator_user_id).where(
                FriendshipModel.friend_user_id == user_id,
                FriendshipModel.is_confirmed.is_(True),
            )
            return ActivityModel.user_id.in_(friends_of_initiator.union(friends_of_friend))

        if scope == SCOPE_GROUP:
            member_groups = select(GroupMemberModel.group_id).where(
                GroupMemberModel.user_id == user_id,
                GroupMemberModel.is_confirmed.is_(True),
                GroupMemberModel.is_banned.is_(False),
            )
            return (ActivityModel.component == GROUPS_COMPONENT) & ActivityModel.item_id.in_(
                member_groups
            )

        logger.debug("Ignoring unknown activity scope '%s'", scope)
        return None

    @staticmethod
    def _order(statement: Select, args: ActivityQueryArgs) -> Select:
        if args.sort == SORT_ASC:
            return statement.order_by(ActivityModel.date_recorded.asc(), ActivityModel.id.asc())
        return statement.order_by(ActivityModel.date_recorded.desc(), ActivityModel.id.desc())

    @staticmethod
    def _paginate(statement: Select, args: ActivityQueryArgs) -> Select:
        if args.per_page:
            page = max(args.page or 1, 1)
            statement = statement.offset((page - 1) * args.per_page).limit(args.per_page)
        return statement

    @staticmethod
    def _to_entity(
        model: ActivityModel, display_name: str | None, *, with_meta: bool
    ) -> ActivityRecord:
        meta: dict[str, str] = {}
        if with_meta:
            meta = {entry.meta_key: entry.meta_value or "" for entry in model.meta}
        return ActivityRecord(
            id=model.id,
            user_id=model.user_id,
            display_name=display_name or "",
            component=model.component,
            type=model.type,
            content=model.content,
            date_recorded=model.date_recorded,
            primary_link=model.primary_link,
            item_id=model.item_id,
            secondary_item_id=model.secondary_item_id,
            is_spam=bool(model.is_spam),
            action=model.action,
            hide_sitewide=bool(model.hide_sitewide),
            meta=meta,
        )


__all__ = ["ActivityRepository"]
