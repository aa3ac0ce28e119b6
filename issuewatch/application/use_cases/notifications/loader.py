"""Attach repositories, issues, comments and users to notification lists.

Each loader collects the distinct keys of the records still missing an
association, fetches them in rounds of at most ``max_in_size`` ids and
returns new records. Records passed in are never modified.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from sqlalchemy.orm import Session

from issuewatch.config import get_settings
from issuewatch.domain.entities import (
    Comment,
    Notification,
    Repository,
    is_resolved,
)
from issuewatch.domain.exceptions import NotFoundError
from issuewatch.infrastructure.repositories import (
    CommentRepository,
    IssueRepository,
    RepoRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _max_in_size(max_in_size: int | None) -> int:
    size = max_in_size if max_in_size is not None else get_settings().max_in_size
    if size <= 0:
        raise ValueError("max_in_size must be positive")
    return size


def _distinct(ids: Iterable[int]) -> list[int]:
    return list(dict.fromkeys(ids))


def fetch_in_batches(
    ids: Sequence[int],
    fetch: Callable[[list[int]], Iterable[T]],
    *,
    key: Callable[[T], int],
    max_in_size: int,
) -> dict[int, T]:
    """Call ``fetch`` on consecutive slices of ``ids`` and index the rows by ``key``."""

    found: dict[int, T] = {}
    for start in range(0, len(ids), max_in_size):
        chunk = list(ids[start : start + max_in_size])
        logger.debug("Batch lookup of %d ids", len(chunk))
        for row in fetch(chunk):
            found[key(row)] = row
    return found


def load_repositories(
    session: Session,
    notifications: Sequence[Notification],
    *,
    max_in_size: int | None = None,
) -> tuple[list[Notification], list[Repository]]:
    """Attach repositories and return them once each, in first-reference order."""

    if not notifications:
        return [], []

    pending = _distinct(
        n.repo_id for n in notifications if not is_resolved(n.repository_ref)
    )
    repositories = fetch_in_batches(
        pending,
        RepoRepository(session).list_by_ids,
        key=lambda repository: repository.id,
        max_in_size=_max_in_size(max_in_size),
    )

    loaded: list[Notification] = []
    distinct: dict[int, Repository] = {}
    for notification in notifications:
        if not is_resolved(notification.repository_ref):
            repository = repositories.get(notification.repo_id)
            if repository is None:
                raise NotFoundError("repository", notification.repo_id)
            notification = notification.with_repository(repository)
        distinct.setdefault(notification.repository.id, notification.repository)
        loaded.append(notification)
    return loaded, list(distinct.values())


def load_issues(
    session: Session,
    notifications: Sequence[Notification],
    *,
    max_in_size: int | None = None,
) -> list[Notification]:
    """Attach issues, linking each issue to the record's loaded repository."""

    if not notifications:
        return []

    pending = _distinct(
        n.issue_id for n in notifications if not is_resolved(n.issue_ref)
    )
    issues = fetch_in_batches(
        pending,
        IssueRepository(session).list_by_ids,
        key=lambda issue: issue.id,
        max_in_size=_max_in_size(max_in_size),
    )

    loaded: list[Notification] = []
    for notification in notifications:
        if not is_resolved(notification.issue_ref):
            issue = issues.get(notification.issue_id)
            if issue is None:
                raise NotFoundError("issue", notification.issue_id)
            notification = notification.with_issue(
                issue.with_repo(notification.repository)
            )
        loaded.append(notification)
    return loaded


def load_comments(
    session: Session,
    notifications: Sequence[Notification],
    *,
    max_in_size: int | None = None,
) -> list[Notification]:
    """Attach comments, linking each comment to the record's loaded issue.

    Records without a comment, or whose comment no longer exists, are left
    unresolved.
    """

    if not notifications:
        return []

    pending = _distinct(
        n.comment_id
        for n in notifications
        if n.comment_id > 0 and not is_resolved(n.comment_ref)
    )
    comments = fetch_in_batches(
        pending,
        CommentRepository(session).list_by_ids,
        key=lambda comment: comment.id,
        max_in_size=_max_in_size(max_in_size),
    )

    loaded: list[Notification] = []
    for notification in notifications:
        comment = comments.get(notification.comment_id)
        if (
            notification.comment_id > 0
            and not is_resolved(notification.comment_ref)
            and comment is not None
        ):
            notification = notification.with_comment(comment.with_issue(notification.issue))
        loaded.append(notification)
    return loaded


def load_users(
    session: Session,
    notifications: Sequence[Notification],
    *,
    max_in_size: int | None = None,
) -> list[Notification]:
    """Attach the recipient of every record."""

    if not notifications:
        return []

    pending = _distinct(n.user_id for n in notifications if not is_resolved(n.user_ref))
    users = fetch_in_batches(
        pending,
        UserRepository(session).list_by_ids,
        key=lambda user: user.id,
        max_in_size=_max_in_size(max_in_size),
    )

    loaded: list[Notification] = []
    for notification in notifications:
        if not is_resolved(notification.user_ref):
            user = users.get(notification.user_id)
            if user is None:
                raise NotFoundError("user", notification.user_id)
            notification = notification.with_user(user)
        loaded.append(notification)
    return loaded


def load_notification_list(
    session: Session,
    notifications: Sequence[Notification],
    *,
    max_in_size: int | None = None,
) -> list[Notification]:
    """Run every batch loader, repositories first so issues can link to them."""

    loaded, _ = load_repositories(session, notifications, max_in_size=max_in_size)
    loaded = load_issues(session, loaded, max_in_size=max_in_size)
    loaded = load_comments(session, loaded, max_in_size=max_in_size)
    return load_users(session, loaded, max_in_size=max_in_size)


def load_attributes(session: Session, notification: Notification) -> Notification:
    """Load the associations of a single record that are still unresolved.

    A comment that no longer exists is left unresolved.
    """

    if not is_resolved(notification.repository_ref):
        notification = notification.with_repository(
            RepoRepository(session).get_or_raise(notification.repo_id)
        )
    if not is_resolved(notification.issue_ref):
        issue = IssueRepository(session).get_or_raise(notification.issue_id)
        notification = notification.with_issue(issue.with_repo(notification.repository))
    if not is_resolved(notification.user_ref):
        notification = notification.with_user(
            UserRepository(session).get_or_raise(notification.user_id)
        )
    if notification.comment_id > 0 and not is_resolved(notification.comment_ref):
        comment = CommentRepository(session).get(notification.comment_id)
        if comment is not None:
            notification = notification.with_comment(
                comment.with_issue(notification.issue)
            )
    return notification


def load_latest_comments(
    session: Session,
    notifications: Sequence[Notification],
    *,
    max_in_size: int | None = None,
) -> dict[int, Comment]:
    """Return the newest comment of each referenced issue, keyed by issue id."""

    issue_ids = _distinct(n.issue_id for n in notifications)
    issues = {n.issue_id: n.issue for n in notifications if n.issue is not None}
    repository = CommentRepository(session)
    size = _max_in_size(max_in_size)

    latest: dict[int, Comment] = {}
    for start in range(0, len(issue_ids), size):
        chunk = issue_ids[start : start + size]
        for issue_id, comment in repository.list_latest_by_issue_ids(chunk).items():
            latest[issue_id] = comment.with_issue(issues.get(issue_id))
    return latest


__all__ = [
    "fetch_in_batches",
    "load_attributes",
    "load_comments",
    "load_issues",
    "load_latest_comments",
    "load_notification_list",
    "load_repositories",
    "load_users",
]
