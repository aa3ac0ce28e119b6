"""SQLAlchemy models for issue and repository watches."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    UniqueConstraint,
    func,
)

from issuewatch.infrastructure.database import Base


class IssueWatchModel(Base):
    """Per-issue subscription; ``is_watching=False`` is an explicit unwatch."""

    __tablename__ = "issue_watch"
    __table_args__ = (
        UniqueConstraint("user_id", "issue_id", name="uq_issue_watch_user_issue"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    issue_id = Column(Integer, ForeignKey("issue.id"), nullable=False, index=True)
    is_watching = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


class WatchModel(Base):
    """Repository-level subscription."""

    __tablename__ = "watch"
    __table_args__ = (UniqueConstraint("user_id", "repo_id", name="uq_watch_user_repo"),)

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    repo_id = Column(Integer, ForeignKey("repository.id"), nullable=False, index=True)
