"""Persistence layer for repositories."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sqlalchemy.orm import Session

from issuewatch.domain.entities import Repository
from issuewatch.domain.exceptions import NotFoundError
from issuewatch.infrastructure.models import RepositoryModel


class RepoRepository:
    """Read repository entities."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, repo_id: int) -> Repository | None:
        model = self.session.get(RepositoryModel, repo_id)
        return self._to_entity(model) if model else None

    def get_or_raise(self, repo_id: int) -> Repository:
        repository = self.get(repo_id)
        if repository is None:
            raise NotFoundError("repository", repo_id)
        return repository

    def list_by_ids(self, repo_ids: Iterable[int]) -> Sequence[Repository]:
        ids = list(repo_ids)
        if not ids:
            return []
        query = self.session.query(RepositoryModel).filter(RepositoryModel.id.in_(ids))
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: RepositoryModel) -> Repository:
        return Repository(
            id=model.id,
            owner_id=model.owner_id,
            owner_name=model.owner_name,
            name=model.name,
            description=model.description or "",
            is_private=model.is_private,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


__all__ = ["RepoRepository"]
