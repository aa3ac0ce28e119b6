"""Read and change the status of notifications."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import replace

from sqlalchemy.orm import Session

from issuewatch.domain.entities import (
    FindNotificationOptions,
    Notification,
    NotificationStatus,
)
from issuewatch.domain.exceptions import NotificationPermissionError
from issuewatch.infrastructure.database import transaction
from issuewatch.infrastructure.repositories import NotificationRepository

logger = logging.getLogger(__name__)


def find_notifications(
    session: Session, options: FindNotificationOptions
) -> Sequence[Notification]:
    """Return the notifications matching every constrained field of ``options``."""

    return NotificationRepository(session).find(options.to_condition())


def notifications_for_user(
    session: Session,
    user_id: int,
    statuses: Sequence[NotificationStatus],
    page: int = 0,
    per_page: int = 0,
) -> Sequence[Notification]:
    """Return the notifications of ``user_id`` having one of ``statuses``.

    An empty ``statuses`` returns nothing. Pagination applies only when both
    ``page`` and ``per_page`` are positive.
    """

    if not statuses:
        return []

    limit = offset = None
    if page > 0 and per_page > 0:
        limit = per_page
        offset = (page - 1) * per_page
    return NotificationRepository(session).list_for_user(
        user_id, statuses, limit=limit, offset=offset
    )


def get_notification(session: Session, notification_id: int) -> Notification:
    return NotificationRepository(session).get_or_raise(notification_id)


def set_notification_status(
    session: Session,
    notification_id: int,
    acting_user_id: int,
    status: NotificationStatus,
) -> Notification:
    """Overwrite the status of a notification owned by ``acting_user_id``."""

    with transaction(session):
        repository = NotificationRepository(session)
        notification = repository.get_or_raise(notification_id)
        if notification.user_id != acting_user_id:
            logger.warning(
                "User %s tried to change notification %s of user %s",
                acting_user_id,
                notification_id,
                notification.user_id,
            )
            raise NotificationPermissionError(
                notification_id, notification.user_id, acting_user_id
            )
        return repository.update(replace(notification, status=status))


def set_notification_read_if_unread(
    session: Session, user_id: int, issue_id: int
) -> Notification | None:
    """Mark the notification of ``user_id`` on ``issue_id`` read if it is unread.

    Missing or non-unread notifications are left alone; this is called
    speculatively whenever a user views an issue.
    """

    with transaction(session):
        repository = NotificationRepository(session)
        notification = repository.get_by_user_and_issue(user_id, issue_id)
        if notification is None or notification.status != NotificationStatus.UNREAD:
            return None
        return repository.update(
            replace(notification, status=NotificationStatus.READ)
        )


def update_notification_statuses(
    session: Session,
    user_id: int,
    current: NotificationStatus,
    desired: NotificationStatus,
    *,
    updated_by: int | None = None,
) -> int:
    """Move all of a user's ``current`` notifications to ``desired`` at once."""

    with transaction(session):
        return NotificationRepository(session).update_statuses(
            user_id,
            current,
            desired,
            updated_by=updated_by if updated_by is not None else user_id,
        )


def count_notifications(
    session: Session, user_id: int, status: NotificationStatus
) -> int:
    return NotificationRepository(session).count(user_id, status)


__all__ = [
    "count_notifications",
    "find_notifications",
    "get_notification",
    "notifications_for_user",
    "set_notification_read_if_unread",
    "set_notification_status",
    "update_notification_statuses",
]
