"""Errors raised by the notification domain."""

from __future__ import annotations


class NotificationError(Exception):
    """Base class for every error raised by this package."""


class NotFoundError(NotificationError):
    """A notification, issue, repository, user or comment does not exist."""

    def __init__(self, kind: str, entity_id: int) -> None:
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} does not exist [id: {entity_id}]")


class NotificationPermissionError(NotificationError):
    """The acting user does not own the notification being changed."""

    def __init__(self, notification_id: int, owner_id: int, user_id: int) -> None:
        self.notification_id = notification_id
        self.owner_id = owner_id
        self.user_id = user_id
        super().__init__(
            f"can't change notification of another user: {owner_id}, {user_id}"
        )


class StoreFailureError(NotificationError):
    """The backing store failed while running a query or committing."""


__all__ = [
    "NotFoundError",
    "NotificationError",
    "NotificationPermissionError",
    "StoreFailureError",
]
