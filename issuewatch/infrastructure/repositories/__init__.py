"""Repository implementations for infrastructure layer."""

from .comment_repository import CommentRepository
from .issue_repository import IssueRepository
from .notification_repository import NotificationRepository
from .repo_repository import RepoRepository
from .user_repository import UserRepository
from .watch_repository import WatchRepository

__all__ = [
    "CommentRepository",
    "IssueRepository",
    "NotificationRepository",
    "RepoRepository",
    "UserRepository",
    "WatchRepository",
]
