"""SQLAlchemy models for issues and comments."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)

from issuewatch.infrastructure.database import Base


class IssueModel(Base):
    """Database representation of an issue or pull request."""

    __tablename__ = "issue"
    __table_args__ = (UniqueConstraint("repo_id", "index", name="uq_issue_repo_index"),)

    id = Column(Integer, primary_key=True, index=True)
    repo_id = Column(Integer, ForeignKey("repository.id"), nullable=False, index=True)
    index = Column(Integer, nullable=False)
    poster_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    is_pull = Column(Boolean, nullable=False, default=False, index=True)
    is_closed = Column(Boolean, nullable=False, default=False, index=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())


class CommentModel(Base):
    """Database representation of an issue comment."""

    __tablename__ = "comment"

    id = Column(Integer, primary_key=True, index=True)
    issue_id = Column(Integer, ForeignKey("issue.id"), nullable=False, index=True)
    poster_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    content = Column(Text, nullable=False, default="")
    created_at = Column(DateTime, nullable=False, server_default=func.now(), index=True)
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())
