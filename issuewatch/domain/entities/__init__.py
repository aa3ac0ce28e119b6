"""Domain entities for issue notifications."""

from .association import (
    UNRESOLVED,
    Association,
    Resolved,
    Unresolved,
    is_resolved,
    resolved_value,
)
from .comment import Comment
from .issue import Issue
from .notification import (
    FindNotificationOptions,
    Notification,
    NotificationSource,
    NotificationStatus,
)
from .repository import AccessMode, Repository, UnitType
from .user import User
from .watch import IssueWatch, Watch

__all__ = [
    "AccessMode",
    "Association",
    "Comment",
    "FindNotificationOptions",
    "Issue",
    "IssueWatch",
    "Notification",
    "NotificationSource",
    "NotificationStatus",
    "Repository",
    "Resolved",
    "UNRESOLVED",
    "UnitType",
    "Unresolved",
    "User",
    "Watch",
    "is_resolved",
    "resolved_value",
]
