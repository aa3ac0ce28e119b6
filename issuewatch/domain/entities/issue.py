"""Domain entity representing an issue or pull request."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from .association import UNRESOLVED, Association, Resolved, resolved_value
from .repository import Repository


@dataclass(frozen=True)
class Issue:
    """Issue or pull request that users can watch and comment on.

    ``repo_ref`` carries the owning repository once a loader attached it;
    URL helpers need it to build paths.
    """

    id: int
    repo_id: int
    index: int
    poster_id: int
    title: str
    is_pull: bool = False
    is_closed: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
    repo_ref: Association[Repository] = UNRESOLVED

    @property
    def repo(self) -> Repository | None:
        return resolved_value(self.repo_ref)

    def with_repo(self, repository: Repository | None) -> "Issue":
        if repository is None:
            return self
        return replace(self, repo_ref=Resolved(repository))

    def _require_repo(self) -> Repository:
        repository = self.repo
        if repository is None:
            raise ValueError(f"repository of issue {self.id} is not loaded")
        return repository

    def html_url(self, app_url: str) -> str:
        kind = "pulls" if self.is_pull else "issues"
        return f"{self._require_repo().html_url(app_url)}/{kind}/{self.index}"

    def api_url(self, app_url: str) -> str:
        kind = "pulls" if self.is_pull else "issues"
        return f"{self._require_repo().api_url(app_url)}/{kind}/{self.index}"


__all__ = ["Issue"]
