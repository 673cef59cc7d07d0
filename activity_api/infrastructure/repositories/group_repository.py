"""Persistence layer for group membership lookups."""

from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from activity_api.domain.errors import ActivityStoreError
from activity_api.infrastructure.models import GroupMemberModel


class GroupMembershipRepository:
    """Answer whether users belong to groups."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def is_member_of_all(self, user_id: int, group_ids: Iterable[int]) -> bool:
        """Return ``True`` when ``user_id`` belongs to every group in ``group_ids``.

        Anonymous users (id ``0``) and empty group lists never match.
        """

        wanted = {int(group_id) for group_id in group_ids if group_id}
        if not user_id or not wanted:
            return False

        statement = select(func.count(func.distinct(GroupMemberModel.group_id))).where(
            GroupMemberModel.user_id == user_id,
            GroupMemberModel.group_id.in_(wanted),
            GroupMemberModel.is_confirmed.is_(True),
            GroupMemberModel.is_banned.is_(False),
        )
        try:
            matched = self.session.scalar(statement) or 0
        except SQLAlchemyError as exc:
            raise ActivityStoreError("Group membership could not be checked") from exc
        return matched == len(wanted)

    def add_member(
        self, group_id: int, user_id: int, *, is_confirmed: bool = True
    ) -> None:
        model = GroupMemberModel(
            group_id=group_id, user_id=user_id, is_confirmed=is_confirmed
        )
        self.session.add(model)
        self.session.commit()


__all__ = ["GroupMembershipRepository"]
