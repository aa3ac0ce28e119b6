"""Notification fan-out, loading and status use cases."""

from .fan_out import FanOutResult, create_or_update_issue_notifications
from .loader import (
    load_attributes,
    load_comments,
    load_issues,
    load_latest_comments,
    load_notification_list,
    load_repositories,
    load_users,
)
from .recipients import resolve_recipients, unit_type_for
from .status import (
    count_notifications,
    find_notifications,
    get_notification,
    notifications_for_user,
    set_notification_read_if_unread,
    set_notification_status,
    update_notification_statuses,
)
from .upsert import UpsertResult, merge_notification, notify_user

__all__ = [
    "FanOutResult",
    "UpsertResult",
    "count_notifications",
    "create_or_update_issue_notifications",
    "find_notifications",
    "get_notification",
    "load_attributes",
    "load_comments",
    "load_issues",
    "load_latest_comments",
    "load_notification_list",
    "load_repositories",
    "load_users",
    "merge_notification",
    "notifications_for_user",
    "notify_user",
    "resolve_recipients",
    "set_notification_read_if_unread",
    "set_notification_status",
    "unit_type_for",
    "update_notification_statuses",
]
