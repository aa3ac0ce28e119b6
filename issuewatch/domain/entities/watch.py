"""Watch subscriptions on issues and repositories."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IssueWatch:
    """Issue-level subscription. ``is_watching=False`` records an explicit unwatch."""

    user_id: int
    issue_id: int
    is_watching: bool = True


@dataclass(frozen=True)
class Watch:
    """Repository-level subscription."""

    user_id: int
    repo_id: int


__all__ = ["IssueWatch", "Watch"]
