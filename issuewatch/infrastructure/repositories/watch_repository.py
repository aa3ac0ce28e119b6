"""Read access to issue and repository watch subscriptions."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from issuewatch.domain.entities import IssueWatch, Watch
from issuewatch.infrastructure.models import IssueWatchModel, WatchModel


class WatchRepository:
    """Query the watchers of an issue or a repository."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_issue_watchers(self, issue_id: int) -> Sequence[IssueWatch]:
        """Return every issue-level watch entry, including explicit unwatches."""

        query = (
            self.session.query(IssueWatchModel)
            .filter(IssueWatchModel.issue_id == issue_id)
            .order_by(IssueWatchModel.id)
        )
        return [
            IssueWatch(
                user_id=model.user_id,
                issue_id=model.issue_id,
                is_watching=model.is_watching,
            )
            for model in query.all()
        ]

    def list_repo_watchers(self, repo_id: int) -> Sequence[Watch]:
        query = (
            self.session.query(WatchModel)
            .filter(WatchModel.repo_id == repo_id)
            .order_by(WatchModel.id)
        )
        return [Watch(user_id=model.user_id, repo_id=model.repo_id) for model in query.all()]


__all__ = ["WatchRepository"]
