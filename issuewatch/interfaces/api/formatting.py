"""Map notification records to their API representation."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from issuewatch.domain.entities import (
    Comment,
    Notification,
    NotificationSource,
    Repository,
)
from issuewatch.interfaces.api.schemas import (
    NotificationSubject,
    NotificationThread,
    RepositorySummary,
)

_SUBJECT_TYPES = {
    NotificationSource.ISSUE: "Issue",
    NotificationSource.PULL_REQUEST: "Pull",
    NotificationSource.COMMIT: "Commit",
}


def repository_to_summary(repository: Repository, app_url: str) -> RepositorySummary:
    # Recipients only ever get notified with read access, so nothing more is exposed.
    return RepositorySummary(
        id=repository.id,
        name=repository.name,
        full_name=repository.full_name,
        owner=repository.owner_name,
        description=repository.description,
        private=repository.is_private,
        html_url=repository.html_url(app_url),
        url=repository.api_url(app_url),
    )


def _subject(
    notification: Notification, app_url: str, latest_comment: Comment | None
) -> NotificationSubject:
    subject = NotificationSubject(type=_SUBJECT_TYPES[notification.source])
    if notification.source == NotificationSource.COMMIT:
        subject.title = notification.commit_id or ""
        return subject

    issue = notification.issue
    if issue is None:
        return subject
    subject.title = issue.title
    if issue.repo is not None:
        subject.url = issue.api_url(app_url)
        if latest_comment is not None:
            subject.latest_comment_url = latest_comment.api_url(app_url, issue)
    return subject


def notification_to_thread(
    notification: Notification,
    app_url: str,
    *,
    latest_comment: Comment | None = None,
) -> NotificationThread:
    """Return the thread representation of ``notification``.

    ``latest_comment`` is the newest comment of the notification's issue, if
    the caller loaded it.
    """

    repository = notification.repository
    return NotificationThread(
        id=notification.id or 0,
        unread=notification.is_unread,
        pinned=notification.is_pinned,
        updated_at=notification.updated_at,
        url=notification.api_url(app_url),
        repository=repository_to_summary(repository, app_url) if repository else None,
        subject=_subject(notification, app_url, latest_comment),
    )


def notifications_to_threads(
    notifications: Sequence[Notification],
    app_url: str,
    *,
    latest_comments: Mapping[int, Comment] | None = None,
) -> list[NotificationThread]:
    latest_comments = latest_comments or {}
    return [
        notification_to_thread(
            notification,
            app_url,
            latest_comment=latest_comments.get(notification.issue_id),
        )
        for notification in notifications
    ]


__all__ = [
    "notification_to_thread",
    "notifications_to_threads",
    "repository_to_summary",
]
