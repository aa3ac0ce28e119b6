"""Domain entity representing a per-user issue notification."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from enum import IntEnum

from issuewatch.domain.conditions import And, Eq, NotificationField, Range, and_

from .association import UNRESOLVED, Association, Resolved, resolved_value
from .comment import Comment
from .issue import Issue
from .repository import Repository
from .user import User


class NotificationStatus(IntEnum):
    """Read state of a notification."""

    UNREAD = 1
    READ = 2
    PINNED = 3


class NotificationSource(IntEnum):
    """Kind of subject a notification points at."""

    ISSUE = 1
    PULL_REQUEST = 2
    COMMIT = 3

    @classmethod
    def for_issue(cls, issue: Issue) -> "NotificationSource":
        return cls.PULL_REQUEST if issue.is_pull else cls.ISSUE


@dataclass(frozen=True)
class Notification:
    """Relationship between one user and one issue plus its read state.

    Associations start unresolved and are attached by the batch loader, which
    returns new records instead of mutating the ones it was given.
    """

    id: int | None
    user_id: int
    repo_id: int
    issue_id: int
    status: NotificationStatus
    source: NotificationSource
    updated_by: int
    comment_id: int = 0
    commit_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    issue_ref: Association[Issue] = UNRESOLVED
    repository_ref: Association[Repository] = UNRESOLVED
    comment_ref: Association[Comment] = UNRESOLVED
    user_ref: Association[User] = UNRESOLVED

    @property
    def issue(self) -> Issue | None:
        return resolved_value(self.issue_ref)

    @property
    def repository(self) -> Repository | None:
        return resolved_value(self.repository_ref)

    @property
    def comment(self) -> Comment | None:
        return resolved_value(self.comment_ref)

    @property
    def user(self) -> User | None:
        return resolved_value(self.user_ref)

    @property
    def is_unread(self) -> bool:
        return self.status not in (NotificationStatus.READ, NotificationStatus.PINNED)

    @property
    def is_pinned(self) -> bool:
        return self.status == NotificationStatus.PINNED

    def with_issue(self, issue: Issue) -> "Notification":
        return replace(self, issue_ref=Resolved(issue))

    def with_repository(self, repository: Repository) -> "Notification":
        return replace(self, repository_ref=Resolved(repository))

    def with_comment(self, comment: Comment) -> "Notification":
        return replace(self, comment_ref=Resolved(comment))

    def with_user(self, user: User) -> "Notification":
        return replace(self, user_ref=Resolved(user))

    def api_url(self, app_url: str) -> str:
        """Return the API location of this notification thread."""

        return f"{app_url}api/v1/notifications/threads/{self.id}"

    def html_url(self, app_url: str) -> str:
        """Return the comment anchor when loaded, otherwise the issue page."""

        if self.comment is not None:
            return self.comment.html_url(app_url, self.issue)
        if self.issue is None:
            raise ValueError(f"issue of notification {self.id} is not loaded")
        return self.issue.html_url(app_url)


@dataclass(frozen=True)
class FindNotificationOptions:
    """Filters for notification queries. Zero or ``None`` values are ignored."""

    user_id: int = 0
    repo_id: int = 0
    issue_id: int = 0
    status: NotificationStatus | None = None
    updated_after: datetime | None = None
    updated_before: datetime | None = None

    def to_condition(self) -> And:
        """Build the conjunction of every constrained field."""

        return and_(
            Eq(NotificationField.USER_ID, self.user_id) if self.user_id else None,
            Eq(NotificationField.REPO_ID, self.repo_id) if self.repo_id else None,
            Eq(NotificationField.ISSUE_ID, self.issue_id) if self.issue_id else None,
            Eq(NotificationField.STATUS, self.status) if self.status else None,
            Range(
                NotificationField.UPDATED_AT,
                lower=self.updated_after,
                upper=self.updated_before,
            )
            if self.updated_after or self.updated_before
            else None,
        )


__all__ = [
    "FindNotificationOptions",
    "Notification",
    "NotificationSource",
    "NotificationStatus",
]
