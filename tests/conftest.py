"""Shared fixtures: an in-memory database and factories for its rows."""

from __future__ import annotations

import itertools
import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["APP_URL"] = "https://tracker.example.com"
os.environ["MAX_IN_SIZE"] = "50"

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from issuewatch.config import reset_settings_cache
from issuewatch.domain.entities import (
    AccessMode,
    NotificationSource,
    NotificationStatus,
    UnitType,
)
from issuewatch.infrastructure.database import initialize_database
from issuewatch.infrastructure.models import (
    CollaborationModel,
    CommentModel,
    IssueModel,
    IssueWatchModel,
    NotificationModel,
    RepoUnitModel,
    RepositoryModel,
    UserModel,
    WatchModel,
)
from issuewatch.utils import now_in_app_naive_datetime

reset_settings_cache()


@pytest.fixture()
def engine():
    """Return a fresh in-memory SQLite engine with every table created."""

    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    initialize_database(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture()
def session(engine):
    session_factory = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


class Factory:
    """Insert rows directly through the ORM models and commit them."""

    def __init__(self, session) -> None:
        self.session = session
        self._issue_index = itertools.count(1)

    def _save(self, model):
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return model

    def user(self, name: str = "user", *, is_active: bool = True, is_admin: bool = False):
        return self._save(
            UserModel(
                name=name,
                email=f"{name}@example.com",
                is_active=is_active,
                is_admin=is_admin,
            )
        )

    def repository(
        self,
        owner,
        name: str = "repo",
        *,
        private: bool = False,
        units=(UnitType.CODE, UnitType.ISSUES, UnitType.PULL_REQUESTS),
    ):
        repository = self._save(
            RepositoryModel(
                owner_id=owner.id,
                owner_name=owner.name,
                name=name,
                description="",
                is_private=private,
            )
        )
        for unit in units:
            self.session.add(RepoUnitModel(repo_id=repository.id, type=int(unit)))
        self.session.commit()
        return repository

    def collaborator(self, repository, user, mode: AccessMode = AccessMode.READ):
        return self._save(
            CollaborationModel(repo_id=repository.id, user_id=user.id, mode=int(mode))
        )

    def issue(self, repository, poster, *, title: str = "Crash on start", is_pull: bool = False):
        return self._save(
            IssueModel(
                repo_id=repository.id,
                index=next(self._issue_index),
                poster_id=poster.id,
                title=title,
                is_pull=is_pull,
            )
        )

    def comment(self, issue, poster, content: str = "+1"):
        return self._save(
            CommentModel(issue_id=issue.id, poster_id=poster.id, content=content)
        )

    def watch_issue(self, user, issue, *, is_watching: bool = True):
        return self._save(
            IssueWatchModel(user_id=user.id, issue_id=issue.id, is_watching=is_watching)
        )

    def watch_repo(self, user, repository):
        return self._save(WatchModel(user_id=user.id, repo_id=repository.id))

    def notification(
        self,
        user,
        issue,
        *,
        status: NotificationStatus = NotificationStatus.UNREAD,
        comment_id: int = 0,
        updated_by: int | None = None,
        updated_at=None,
    ):
        now = updated_at or now_in_app_naive_datetime()
        return self._save(
            NotificationModel(
                user_id=user.id,
                repo_id=issue.repo_id,
                issue_id=issue.id,
                status=int(status),
                source=int(
                    NotificationSource.PULL_REQUEST
                    if issue.is_pull
                    else NotificationSource.ISSUE
                ),
                comment_id=comment_id,
                updated_by=updated_by if updated_by is not None else issue.poster_id,
                created_at=now,
                updated_at=now,
            )
        )


@pytest.fixture()
def factory(session) -> Factory:
    return Factory(session)
