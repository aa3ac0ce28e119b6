"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Iterable

from sqlalchemy.orm import Session

from issuewatch.domain.conditions import Condition
from issuewatch.domain.entities import (
    Notification,
    NotificationSource,
    NotificationStatus,
)
from issuewatch.domain.exceptions import NotFoundError
from issuewatch.infrastructure.conditions import to_clause
from issuewatch.infrastructure.models import NotificationModel
from issuewatch.utils import ensure_app_timezone, now_in_app_naive_datetime


class NotificationRepository:
    """Provide query and write operations for :class:`Notification` records.

    Writes are flushed but never committed; callers own the transaction.
    Every write bumps ``updated_at`` so list views re-order touched records.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def find(self, condition: Condition) -> Sequence[Notification]:
        query = (
            self.session.query(NotificationModel)
            .filter(to_clause(condition))
            .order_by(NotificationModel.updated_at.desc(), NotificationModel.id.desc())
        )
        return [self._to_entity(model) for model in query.all()]

    def list_for_user(
        self,
        user_id: int,
        statuses: Iterable[NotificationStatus],
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> Sequence[Notification]:
        status_values = [int(status) for status in statuses]
        if not status_values:
            return []
        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.status.in_(status_values))
            .order_by(NotificationModel.updated_at.desc(), NotificationModel.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        if offset:
            query = query.offset(offset)
        return [self._to_entity(model) for model in query.all()]

    def list_by_issue(self, issue_id: int) -> Sequence[Notification]:
        query = self.session.query(NotificationModel).filter(
            NotificationModel.issue_id == issue_id
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def get_or_raise(self, notification_id: int) -> Notification:
        notification = self.get(notification_id)
        if notification is None:
            raise NotFoundError("notification", notification_id)
        return notification

    def get_by_user_and_issue(self, user_id: int, issue_id: int) -> Notification | None:
        model = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.issue_id == issue_id)
            .one_or_none()
        )
        return self._to_entity(model) if model else None

    def create(self, notification: Notification) -> Notification:
        now = now_in_app_naive_datetime()
        model = NotificationModel(
            user_id=notification.user_id,
            repo_id=notification.repo_id,
            status=int(notification.status),
            source=int(notification.source),
            issue_id=notification.issue_id,
            commit_id=notification.commit_id,
            comment_id=notification.comment_id or 0,
            updated_by=notification.updated_by,
            created_at=now,
            updated_at=now,
        )
        self.session.add(model)
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, notification: Notification) -> Notification:
        """Persist the mutable fields of ``notification``.

        ``created_at`` and the foreign keys are left untouched.
        """

        if notification.id is None:
            raise ValueError("Notification id is required for updates")
        model = self.session.get(NotificationModel, notification.id)
        if model is None:
            raise NotFoundError("notification", notification.id)
        model.status = int(notification.status)
        model.comment_id = notification.comment_id or 0
        model.commit_id = notification.commit_id
        model.updated_by = notification.updated_by
        model.updated_at = now_in_app_naive_datetime()
        self.session.flush()
        self.session.refresh(model)
        return self._to_entity(model)

    def update_statuses(
        self,
        user_id: int,
        current: NotificationStatus,
        desired: NotificationStatus,
        *,
        updated_by: int,
    ) -> int:
        """Move every ``current`` notification of ``user_id`` to ``desired``.

        Runs as a single UPDATE statement and returns the number of rows hit.
        """

        return (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.status == int(current))
            .update(
                {
                    NotificationModel.status: int(desired),
                    NotificationModel.updated_by: updated_by,
                    NotificationModel.updated_at: now_in_app_naive_datetime(),
                },
                synchronize_session="fetch",
            )
        )

    def count(self, user_id: int, status: NotificationStatus) -> int:
        return (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .filter(NotificationModel.status == int(status))
            .count()
        )

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            repo_id=model.repo_id,
            issue_id=model.issue_id,
            status=NotificationStatus(model.status),
            source=NotificationSource(model.source),
            updated_by=model.updated_by,
            comment_id=model.comment_id or 0,
            commit_id=model.commit_id,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["NotificationRepository"]
