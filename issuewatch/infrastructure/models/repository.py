"""SQLAlchemy models for repositories, their units and collaborators."""

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    SmallInteger,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from issuewatch.infrastructure.database import Base


class RepositoryModel(Base):
    """Database representation of a repository."""

    __tablename__ = "repository"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    owner_name = Column(String(50), nullable=False)
    name = Column(String(100), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    is_private = Column(Boolean, nullable=False, default=False, index=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=True, onupdate=func.now())

    units = relationship(
        "RepoUnitModel",
        back_populates="repository",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class RepoUnitModel(Base):
    """A capability area enabled on a repository."""

    __tablename__ = "repo_unit"
    __table_args__ = (UniqueConstraint("repo_id", "type", name="uq_repo_unit_type"),)

    id = Column(Integer, primary_key=True, index=True)
    repo_id = Column(
        Integer,
        ForeignKey("repository.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type = Column(SmallInteger, nullable=False, index=True)

    repository = relationship("RepositoryModel", back_populates="units")


class CollaborationModel(Base):
    """Explicit access granted to a user on a repository."""

    __tablename__ = "collaboration"
    __table_args__ = (
        UniqueConstraint("repo_id", "user_id", name="uq_collaboration_repo_user"),
    )

    id = Column(Integer, primary_key=True, index=True)
    repo_id = Column(
        Integer,
        ForeignKey("repository.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    mode = Column(SmallInteger, nullable=False, default=1)
