"""Create or merge the notification of one user for one issue."""

from __future__ import annotations

from dataclasses import dataclass, replace

from sqlalchemy.orm import Session

from issuewatch.domain.entities import (
    Issue,
    Notification,
    NotificationSource,
    NotificationStatus,
)
from issuewatch.infrastructure.repositories import NotificationRepository


@dataclass(frozen=True)
class UpsertResult:
    notification: Notification
    created: bool


def merge_notification(
    existing: Notification, *, comment_id: int, actor_id: int
) -> Notification:
    """Apply new activity to an existing record.

    A read notification resurfaces as unread and points at the new comment.
    Unread and pinned notifications keep their comment so the oldest unseen
    activity is not skipped; only ``updated_by`` changes.
    """

    if existing.status == NotificationStatus.READ:
        return replace(
            existing,
            status=NotificationStatus.UNREAD,
            comment_id=comment_id,
            updated_by=actor_id,
        )
    return replace(existing, updated_by=actor_id)


def notify_user(
    session: Session,
    *,
    user_id: int,
    issue: Issue,
    comment_id: int,
    actor_id: int,
    existing: Notification | None = None,
    lookup: bool = True,
) -> UpsertResult:
    """Insert or merge the notification of ``user_id`` for ``issue``.

    ``existing`` is the record already loaded for this pair, if any. When it
    is not given and ``lookup`` is true the store is queried; callers that
    preloaded every record of the issue pass ``lookup=False``.
    """

    repository = NotificationRepository(session)
    if existing is None and lookup:
        existing = repository.get_by_user_and_issue(user_id, issue.id)

    if existing is None:
        notification = Notification(
            id=None,
            user_id=user_id,
            repo_id=issue.repo_id,
            issue_id=issue.id,
            status=NotificationStatus.UNREAD,
            source=NotificationSource.for_issue(issue),
            updated_by=actor_id,
            comment_id=comment_id,
        )
        return UpsertResult(repository.create(notification), created=True)

    merged = merge_notification(existing, comment_id=comment_id, actor_id=actor_id)
    return UpsertResult(repository.update(merged), created=False)


__all__ = ["UpsertResult", "merge_notification", "notify_user"]
