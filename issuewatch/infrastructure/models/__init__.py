"""ORM models used by the application infrastructure."""

from .issue import CommentModel, IssueModel
from .notification import NotificationModel
from .repository import CollaborationModel, RepoUnitModel, RepositoryModel
from .user import UserModel
from .watch import IssueWatchModel, WatchModel

__all__ = [
    "CollaborationModel",
    "CommentModel",
    "IssueModel",
    "IssueWatchModel",
    "NotificationModel",
    "RepoUnitModel",
    "RepositoryModel",
    "UserModel",
    "WatchModel",
]
