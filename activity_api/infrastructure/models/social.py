"""SQLAlchemy models for group membership and friendships."""

from sqlalchemy import Boolean, Column, Integer, UniqueConstraint
from sqlalchemy.sql import expression

from activity_api.infrastructure.database import Base


class GroupMemberModel(Base):
    """Membership of a user in a group."""

    __tablename__ = "group_member"
    __table_args__ = (
        UniqueConstraint("group_id", "user_id", name="uq_group_member"),
    )

    id = Column(Integer, primary_key=True, index=True)
    group_id = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    is_confirmed = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    is_banned = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )


class FriendshipModel(Base):
    """Friendship between two users; only confirmed rows count."""

    __tablename__ = "friendship"
    __table_args__ = (
        UniqueConstraint(
            "initiator_user_id", "friend_user_id", name="uq_friendship_pair"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    initiator_user_id = Column(Integer, nullable=False, index=True)
    friend_user_id = Column(Integer, nullable=False, index=True)
    is_confirmed = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )


__all__ = ["FriendshipModel", "GroupMemberModel"]
