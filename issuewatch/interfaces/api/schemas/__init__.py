from .notification import (
    NotificationCount,
    NotificationSubject,
    NotificationThread,
    NotificationsMarkedRead,
    RepositoryPermissions,
    RepositorySummary,
)

__all__ = [
    "NotificationCount",
    "NotificationSubject",
    "NotificationThread",
    "NotificationsMarkedRead",
    "RepositoryPermissions",
    "RepositorySummary",
]
