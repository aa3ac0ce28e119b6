"""Pydantic models describing notification threads."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class RepositoryPermissions(BaseModel):
    admin: bool = False
    push: bool = False
    pull: bool = True


class RepositorySummary(BaseModel):
    """Repository as seen by a user with read access."""

    id: int
    name: str
    full_name: str
    owner: str
    description: str = ""
    private: bool
    html_url: str
    url: str
    permissions: RepositoryPermissions = Field(default_factory=RepositoryPermissions)


class NotificationSubject(BaseModel):
    """What a notification thread is about."""

    type: Literal["Issue", "Pull", "Commit"]
    title: str = ""
    url: str = ""
    latest_comment_url: str = ""


class NotificationThread(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    unread: bool
    pinned: bool
    updated_at: datetime | None = None
    url: str
    repository: RepositorySummary | None = None
    subject: NotificationSubject


class NotificationCount(BaseModel):
    new: int


class NotificationsMarkedRead(BaseModel):
    updated: int


__all__ = [
    "NotificationCount",
    "NotificationSubject",
    "NotificationThread",
    "NotificationsMarkedRead",
    "RepositoryPermissions",
    "RepositorySummary",
]
