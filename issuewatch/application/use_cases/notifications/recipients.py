"""Resolve who receives a notification for an issue event."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from issuewatch.domain.entities import Issue, IssueWatch, UnitType, Watch

CanReadUnit = Callable[[int, UnitType], bool]


def unit_type_for(issue: Issue) -> UnitType:
    """Return the repository unit a watcher needs to read ``issue``."""

    return UnitType.PULL_REQUESTS if issue.is_pull else UnitType.ISSUES


def resolve_recipients(
    issue: Issue,
    issue_watches: Iterable[IssueWatch],
    repo_watches: Iterable[Watch],
    actor_id: int,
    can_read_unit: CanReadUnit,
) -> Iterator[int]:
    """Yield each user that must be notified about activity on ``issue``.

    Issue-level watches are processed before repository-level ones. An
    explicit unwatch on the issue marks the user as decided without notifying,
    so a repository watch for the same user is skipped later. Repository
    watchers are only notified when ``can_read_unit`` allows them to read the
    issue's unit. ``actor_id`` is never yielded and every user is yielded at
    most once.

    Ids are produced lazily so callers can write each notification as soon
    as the recipient is decided.
    """

    decided: set[int] = set()
    unit_type = unit_type_for(issue)

    for watch in issue_watches:
        if not watch.is_watching:
            decided.add(watch.user_id)
            continue
        if watch.user_id == actor_id or watch.user_id in decided:
            continue
        decided.add(watch.user_id)
        yield watch.user_id

    for watch in repo_watches:
        if watch.user_id == actor_id or watch.user_id in decided:
            continue
        if not can_read_unit(watch.user_id, unit_type):
            continue
        decided.add(watch.user_id)
        yield watch.user_id


__all__ = ["CanReadUnit", "resolve_recipients", "unit_type_for"]
