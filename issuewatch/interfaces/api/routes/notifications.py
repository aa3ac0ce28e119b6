"""Endpoints exposing the authenticated user's notification threads."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from issuewatch.application.use_cases.notifications import (
    count_notifications,
    get_notification,
    load_attributes,
    load_latest_comments,
    load_notification_list,
    notifications_for_user,
    set_notification_status,
    update_notification_statuses,
)
from issuewatch.config import Settings
from issuewatch.domain.entities import NotificationStatus, User
from issuewatch.infrastructure.database import get_db
from issuewatch.interfaces.api.dependencies import (
    get_app_settings,
    get_current_active_user,
)
from issuewatch.interfaces.api.formatting import (
    notification_to_thread,
    notifications_to_threads,
)
from issuewatch.interfaces.api.schemas import (
    NotificationCount,
    NotificationThread,
    NotificationsMarkedRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])

DEFAULT_STATUS_TYPES = (NotificationStatus.UNREAD, NotificationStatus.PINNED)


def parse_status(value: str) -> NotificationStatus:
    try:
        return NotificationStatus[value.strip().upper()]
    except KeyError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Unknown notification status: {value}",
        ) from exc


def parse_status_types(
    status_types: list[str] | None, include_all: bool
) -> list[NotificationStatus]:
    if include_all:
        return list(NotificationStatus)
    if not status_types:
        return list(DEFAULT_STATUS_TYPES)
    return list(dict.fromkeys(parse_status(value) for value in status_types))


@router.get("", response_model=list[NotificationThread])
def list_notifications(
    status_types: list[str] | None = Query(None, alias="status-types"),
    include_all: bool = Query(False, alias="all"),
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=50),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    settings: Settings = Depends(get_app_settings),
) -> list[NotificationThread]:
    """Return the current user's notification threads, most recently updated first."""

    statuses = parse_status_types(status_types, include_all)
    notifications = notifications_for_user(db, current_user.id, statuses, page, limit)
    notifications = load_notification_list(db, notifications)
    latest = load_latest_comments(db, notifications)
    return notifications_to_threads(notifications, settings.app_url, latest_comments=latest)


@router.put("", response_model=NotificationsMarkedRead)
def mark_all_notifications(
    to_status: str = Query("read", alias="to-status"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationsMarkedRead:
    """Move every unread notification of the current user to ``to-status``."""

    updated = update_notification_statuses(
        db,
        current_user.id,
        NotificationStatus.UNREAD,
        parse_status(to_status),
        updated_by=current_user.id,
    )
    return NotificationsMarkedRead(updated=updated)


@router.get("/new", response_model=NotificationCount)
def count_new_notifications(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> NotificationCount:
    return NotificationCount(
        new=count_notifications(db, current_user.id, NotificationStatus.UNREAD)
    )


@router.get("/threads/{notification_id}", response_model=NotificationThread)
def read_notification_thread(
    notification_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    settings: Settings = Depends(get_app_settings),
) -> NotificationThread:
    notification = get_notification(db, notification_id)
    if notification.user_id != current_user.id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    notification = load_attributes(db, notification)
    latest = load_latest_comments(db, [notification])
    return notification_to_thread(
        notification, settings.app_url, latest_comment=latest.get(notification.issue_id)
    )


@router.patch("/threads/{notification_id}", response_model=NotificationThread)
def update_notification_thread(
    notification_id: int,
    to_status: str = Query("read", alias="to-status"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
    settings: Settings = Depends(get_app_settings),
) -> NotificationThread:
    """Set the status of one of the current user's notifications."""

    notification = set_notification_status(
        db, notification_id, current_user.id, parse_status(to_status)
    )
    notification = load_attributes(db, notification)
    latest = load_latest_comments(db, [notification])
    return notification_to_thread(
        notification, settings.app_url, latest_comment=latest.get(notification.issue_id)
    )


__all__ = ["router"]
