"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    SmallInteger,
    String,
    UniqueConstraint,
)

from issuewatch.infrastructure.database import Base
from issuewatch.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation of a (user, issue) notification."""

    __tablename__ = "notification"
    __table_args__ = (
        UniqueConstraint("user_id", "issue_id", name="uq_notification_user_issue"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    repo_id = Column(Integer, ForeignKey("repository.id"), nullable=False, index=True)
    status = Column(SmallInteger, nullable=False, index=True)
    source = Column(SmallInteger, nullable=False, index=True)
    issue_id = Column(Integer, ForeignKey("issue.id"), nullable=False, index=True)
    commit_id = Column(String(64), nullable=True, index=True)
    comment_id = Column(Integer, nullable=False, default=0)
    updated_by = Column(Integer, nullable=False, index=True)
    created_at = Column(
        DateTime(), nullable=False, default=now_in_app_naive_datetime, index=True
    )
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
        index=True,
    )


__all__ = ["NotificationModel"]
