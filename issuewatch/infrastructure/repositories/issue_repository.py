"""Persistence layer for issues and pull requests."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from issuewatch.domain.entities import Issue
from issuewatch.domain.exceptions import NotFoundError
from issuewatch.infrastructure.models import IssueModel


class IssueRepository:
    """Read issue entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, issue_id: int) -> Issue | None:
        model = self.session.get(IssueModel, issue_id)
        return self._to_entity(model) if model else None

    def get_or_raise(self, issue_id: int) -> Issue:
        issue = self.get(issue_id)
        if issue is None:
            raise NotFoundError("issue", issue_id)
        return issue

    def list_by_ids(self, issue_ids: Iterable[int]) -> Sequence[Issue]:
        ids = list(issue_ids)
        if not ids:
            return []
        query = self.session.query(IssueModel).filter(IssueModel.id.in_(ids))
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: IssueModel) -> Issue:
        return Issue(
            id=model.id,
            repo_id=model.repo_id,
            index=model.index,
            poster_id=model.poster_id,
            title=model.title,
            is_pull=model.is_pull,
            is_closed=model.is_closed,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["IssueRepository"]
