"""SQLAlchemy models for activity stream entries and their metadata."""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import expression

from activity_api.infrastructure.database import Base
from activity_api.utils import ZERO_DATETIME


class ActivityModel(Base):
    """Database representation of an activity stream entry."""

    __tablename__ = "activity"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, default=0, index=True)
    component = Column(String(75), nullable=False, default="", index=True)
    type = Column(String(75), nullable=False, default="", index=True)
    action = Column(Text, nullable=False, default="")
    content = Column(Text, nullable=False, default="")
    primary_link = Column(String(255), nullable=False, default="")
    item_id = Column(Integer, nullable=False, default=0, index=True)
    secondary_item_id = Column(Integer, nullable=False, default=0, index=True)
    # Stored as GMT text; the zero sentinel marks an unset date.
    date_recorded = Column(
        String(19), nullable=False, default=ZERO_DATETIME, index=True
    )
    hide_sitewide = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
    )
    is_spam = Column(
        Boolean,
        nullable=False,
        default=False,
        server_default=expression.false(),
        index=True,
    )
    meta = relationship(
        "ActivityMetaModel",
        back_populates="activity",
        cascade="all, delete-orphan",
        passive_deletes=True,
        lazy="select",
    )


class ActivityMetaModel(Base):
    """Key/value metadata attached to an activity."""

    __tablename__ = "activity_meta"
    __table_args__ = (
        UniqueConstraint("activity_id", "meta_key", name="uq_activity_meta_key"),
    )

    id = Column(Integer, primary_key=True, index=True)
    activity_id = Column(
        Integer,
        ForeignKey("activity.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    meta_key = Column(String(255), nullable=False)
    meta_value = Column(Text, nullable=True)
    activity = relationship("ActivityModel", back_populates="meta")


__all__ = ["ActivityMetaModel", "ActivityModel"]
