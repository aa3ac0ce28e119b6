"""Tests for the notification merge rules and the upsert engine."""

from __future__ import annotations

import pytest

from issuewatch.application.use_cases.notifications import (
    merge_notification,
    notify_user,
)
from issuewatch.domain.entities import (
    Notification,
    NotificationSource,
    NotificationStatus,
)
from issuewatch.infrastructure.repositories import IssueRepository, NotificationRepository


def _record(status: NotificationStatus, comment_id: int = 10) -> Notification:
    return Notification(
        id=1,
        user_id=3,
        repo_id=1,
        issue_id=5,
        status=status,
        source=NotificationSource.ISSUE,
        updated_by=1,
        comment_id=comment_id,
    )


def test_read_record_resurfaces_with_new_comment() -> None:
    merged = merge_notification(_record(NotificationStatus.READ), comment_id=30, actor_id=2)

    assert merged.status == NotificationStatus.UNREAD
    assert merged.comment_id == 30
    assert merged.updated_by == 2


@pytest.mark.parametrize("status", [NotificationStatus.UNREAD, NotificationStatus.PINNED])
def test_unseen_records_keep_their_comment(status) -> None:
    merged = merge_notification(_record(status), comment_id=20, actor_id=2)

    assert merged.status == status
    assert merged.comment_id == 10
    assert merged.updated_by == 2


def test_notify_user_inserts_unread_record(session, factory) -> None:
    owner = factory.user("owner")
    watcher = factory.user("watcher")
    repository = factory.repository(owner)
    pull = factory.issue(repository, owner, is_pull=True)
    issue = IssueRepository(session).get(pull.id)

    outcome = notify_user(
        session, user_id=watcher.id, issue=issue, comment_id=0, actor_id=owner.id
    )
    session.commit()

    assert outcome.created is True
    stored = NotificationRepository(session).get_by_user_and_issue(watcher.id, pull.id)
    assert stored is not None
    assert stored.status == NotificationStatus.UNREAD
    assert stored.source == NotificationSource.PULL_REQUEST
    assert stored.repo_id == repository.id
    assert stored.updated_by == owner.id
    assert stored.comment_id == 0


def test_notify_user_looks_up_existing_record(session, factory) -> None:
    owner = factory.user("owner")
    watcher = factory.user("watcher")
    repository = factory.repository(owner)
    issue_row = factory.issue(repository, owner)
    existing = factory.notification(
        watcher, issue_row, status=NotificationStatus.READ, comment_id=4
    )
    issue = IssueRepository(session).get(issue_row.id)

    outcome = notify_user(
        session, user_id=watcher.id, issue=issue, comment_id=9, actor_id=owner.id
    )

    assert outcome.created is False
    assert outcome.notification.id == existing.id
    assert outcome.notification.status == NotificationStatus.UNREAD
    assert outcome.notification.comment_id == 9
