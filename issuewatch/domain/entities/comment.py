"""Domain entity representing an issue comment."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from .association import UNRESOLVED, Association, Resolved, resolved_value
from .issue import Issue


@dataclass(frozen=True)
class Comment:
    """Comment posted on an issue or pull request."""

    id: int
    issue_id: int
    poster_id: int
    content: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
    issue_ref: Association[Issue] = UNRESOLVED

    @property
    def issue(self) -> Issue | None:
        return resolved_value(self.issue_ref)

    def with_issue(self, issue: Issue | None) -> "Comment":
        if issue is None:
            return self
        return replace(self, issue_ref=Resolved(issue))

    def html_url(self, app_url: str, issue: Issue | None = None) -> str:
        """Return the anchor of this comment inside the issue page."""

        owner = issue or self.issue
        if owner is None:
            raise ValueError(f"issue of comment {self.id} is not loaded")
        return f"{owner.html_url(app_url)}#issuecomment-{self.id}"

    def api_url(self, app_url: str, issue: Issue | None = None) -> str:
        owner = issue or self.issue
        if owner is None or owner.repo is None:
            raise ValueError(f"issue of comment {self.id} is not loaded")
        return f"{owner.repo.api_url(app_url)}/issues/comments/{self.id}"


__all__ = ["Comment"]
