"""Distribute one issue event to every interested user."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from issuewatch.infrastructure.database import transaction
from issuewatch.infrastructure.permissions import UnitPermissionChecker
from issuewatch.infrastructure.repositories import (
    IssueRepository,
    NotificationRepository,
    RepoRepository,
    WatchRepository,
)

from .recipients import resolve_recipients
from .upsert import notify_user

logger = logging.getLogger(__name__)


@dataclass
class FanOutResult:
    """User ids whose notification was inserted or merged by one event."""

    issue_id: int
    created: list[int] = field(default_factory=list)
    updated: list[int] = field(default_factory=list)

    @property
    def recipients(self) -> list[int]:
        return [*self.created, *self.updated]


def create_or_update_issue_notifications(
    session: Session, issue_id: int, comment_id: int, actor_id: int
) -> FanOutResult:
    """Create or update the notification of every watcher of ``issue_id``.

    Everything runs in one transaction: if any lookup or write fails, no
    notification of this event is persisted and the error propagates.
    """

    logger.debug(
        "Fan-out for issue %s (comment %s, actor %s)", issue_id, comment_id, actor_id
    )
    try:
        with transaction(session):
            result = _apply_issue_event(session, issue_id, comment_id, actor_id)
    except Exception:
        logger.warning("Fan-out for issue %s rolled back", issue_id)
        raise

    logger.info(
        "Fan-out for issue %s: %d created, %d updated",
        issue_id,
        len(result.created),
        len(result.updated),
    )
    return result


def _apply_issue_event(
    session: Session, issue_id: int, comment_id: int, actor_id: int
) -> FanOutResult:
    watches = WatchRepository(session)
    issue_watches = watches.list_issue_watchers(issue_id)
    issue = IssueRepository(session).get_or_raise(issue_id)
    repository = RepoRepository(session).get_or_raise(issue.repo_id)
    issue = issue.with_repo(repository)
    repo_watches = watches.list_repo_watchers(issue.repo_id)

    existing = {
        notification.user_id: notification
        for notification in NotificationRepository(session).list_by_issue(issue.id)
    }

    checker = UnitPermissionChecker(session)

    def can_read_unit(user_id: int, unit_type) -> bool:
        return checker.check_unit_user(repository, user_id, unit_type)

    result = FanOutResult(issue_id=issue.id)
    for user_id in resolve_recipients(
        issue, issue_watches, repo_watches, actor_id, can_read_unit
    ):
        outcome = notify_user(
            session,
            user_id=user_id,
            issue=issue,
            comment_id=comment_id,
            actor_id=actor_id,
            existing=existing.get(user_id),
            lookup=False,
        )
        (result.created if outcome.created else result.updated).append(user_id)
    return result


__all__ = ["FanOutResult", "create_or_update_issue_notifications"]
