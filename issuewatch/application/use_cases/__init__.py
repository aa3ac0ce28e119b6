"""Aggregate application use cases."""

from .notifications import (
    create_or_update_issue_notifications,
    load_notification_list,
    notifications_for_user,
    set_notification_status,
)

__all__ = [
    "create_or_update_issue_notifications",
    "load_notification_list",
    "notifications_for_user",
    "set_notification_status",
]
