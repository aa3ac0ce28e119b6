"""Persistence layer for issue comments."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from issuewatch.domain.entities import Comment
from issuewatch.domain.exceptions import NotFoundError
from issuewatch.infrastructure.models import CommentModel


class CommentRepository:
    """Read comment entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, comment_id: int) -> Comment | None:
        model = self.session.get(CommentModel, comment_id)
        return self._to_entity(model) if model else None

    def get_or_raise(self, comment_id: int) -> Comment:
        comment = self.get(comment_id)
        if comment is None:
            raise NotFoundError("comment", comment_id)
        return comment

    def list_by_ids(self, comment_ids: Iterable[int]) -> Sequence[Comment]:
        ids = list(comment_ids)
        if not ids:
            return []
        query = self.session.query(CommentModel).filter(CommentModel.id.in_(ids))
        return [self._to_entity(model) for model in query.all()]

    def list_latest_by_issue_ids(self, issue_ids: Iterable[int]) -> dict[int, Comment]:
        """Return the newest comment of every issue in ``issue_ids`` that has one."""

        ids = list(issue_ids)
        if not ids:
            return {}
        latest = (
            select(func.max(CommentModel.id))
            .where(CommentModel.issue_id.in_(ids))
            .group_by(CommentModel.issue_id)
        )
        query = self.session.query(CommentModel).filter(CommentModel.id.in_(latest))
        return {model.issue_id: self._to_entity(model) for model in query.all()}

    @staticmethod
    def _to_entity(model: CommentModel) -> Comment:
        return Comment(
            id=model.id,
            issue_id=model.issue_id,
            poster_id=model.poster_id,
            content=model.content or "",
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["CommentRepository"]
