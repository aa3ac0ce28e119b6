"""Tests for the batched association loaders."""

from __future__ import annotations

import pytest

from issuewatch.application.use_cases.notifications import (
    load_attributes,
    load_comments,
    load_issues,
    load_latest_comments,
    load_notification_list,
    load_repositories,
    notifications_for_user,
)
from issuewatch.domain.entities import NotificationStatus, is_resolved
from issuewatch.domain.exceptions import NotFoundError
from issuewatch.infrastructure.repositories import (
    CommentRepository,
    IssueRepository,
    NotificationRepository,
    RepoRepository,
)

ALL_STATUSES = list(NotificationStatus)


@pytest.fixture()
def inbox(session, factory):
    """Five notifications for one user spread over two repositories."""

    reader = factory.user("reader")
    owner = factory.user("owner")
    first = factory.repository(owner, "first")
    second = factory.repository(owner, "second")
    issues = [
        factory.issue(first, owner, title="one"),
        factory.issue(first, owner, title="two"),
        factory.issue(second, owner, title="three", is_pull=True),
        factory.issue(second, owner, title="four"),
        factory.issue(first, owner, title="five"),
    ]
    comment = factory.comment(issues[0], owner)
    factory.notification(reader, issues[0], comment_id=comment.id)
    for issue in issues[1:]:
        factory.notification(reader, issue)
    notifications = notifications_for_user(session, reader.id, ALL_STATUSES)
    return {
        "reader": reader,
        "repositories": [first, second],
        "issues": issues,
        "comment": comment,
        "notifications": list(notifications),
    }


def _spy(monkeypatch, repository_class):
    batches: list[list[int]] = []
    original = repository_class.list_by_ids

    def list_by_ids(self, ids):
        ids = list(ids)
        batches.append(ids)
        return original(self, ids)

    monkeypatch.setattr(repository_class, "list_by_ids", list_by_ids)
    return batches


def test_load_repositories_fetches_each_repository_once(session, inbox, monkeypatch) -> None:
    batches = _spy(monkeypatch, RepoRepository)

    loaded, repositories = load_repositories(session, inbox["notifications"])

    assert len(batches) == 1
    assert sorted(batches[0]) == sorted(r.id for r in inbox["repositories"])
    assert len(repositories) == 2
    assert len({r.id for r in repositories}) == 2
    assert all(n.repository.id == n.repo_id for n in loaded)


def test_lookups_respect_max_in_size(session, inbox, monkeypatch) -> None:
    batches = _spy(monkeypatch, IssueRepository)

    load_issues(session, inbox["notifications"], max_in_size=2)

    assert [len(batch) for batch in batches] == [2, 2, 1]
    assert sorted(i for batch in batches for i in batch) == sorted(
        issue.id for issue in inbox["issues"]
    )


def test_loaders_do_not_mutate_input(session, inbox) -> None:
    original = inbox["notifications"]

    loaded = load_notification_list(session, original)

    assert all(not is_resolved(n.repository_ref) for n in original)
    assert all(not is_resolved(n.issue_ref) for n in original)
    assert all(n.repository is not None and n.issue is not None for n in loaded)
    assert all(n.user.id == inbox["reader"].id for n in loaded)


def test_already_resolved_associations_are_skipped(session, inbox, monkeypatch) -> None:
    loaded, _ = load_repositories(session, inbox["notifications"])
    batches = _spy(monkeypatch, RepoRepository)

    again, repositories = load_repositories(session, loaded)

    assert batches == []
    assert len(repositories) == 2
    assert [n.repository for n in again] == [n.repository for n in loaded]


def test_issues_and_comments_are_back_linked(session, inbox) -> None:
    loaded = load_notification_list(session, inbox["notifications"])

    for notification in loaded:
        assert notification.issue.repo == notification.repository

    with_comment = [n for n in loaded if n.comment_id]
    assert len(with_comment) == 1
    assert with_comment[0].comment.id == inbox["comment"].id
    assert with_comment[0].comment.issue == with_comment[0].issue
    assert all(n.comment is None for n in loaded if not n.comment_id)


def test_deleted_comment_stays_unresolved(session, factory, inbox) -> None:
    owner = factory.user("someone")
    repository = factory.repository(owner, "third")
    issue = factory.issue(repository, owner)
    factory.notification(inbox["reader"], issue, comment_id=999)
    notification = NotificationRepository(session).get_by_user_and_issue(
        inbox["reader"].id, issue.id
    )

    (loaded,) = load_comments(session, [notification])

    assert not is_resolved(loaded.comment_ref)

    single = load_attributes(session, notification)
    assert single.issue.id == issue.id
    assert not is_resolved(single.comment_ref)


def test_missing_repository_raises_not_found(session, inbox, monkeypatch) -> None:
    monkeypatch.setattr(RepoRepository, "list_by_ids", lambda self, ids: [])

    with pytest.raises(NotFoundError):
        load_repositories(session, inbox["notifications"])


def test_empty_list_loads_nothing(session) -> None:
    assert load_repositories(session, []) == ([], [])
    assert load_issues(session, []) == []
    assert load_comments(session, []) == []


def test_load_attributes_for_single_record(session, inbox) -> None:
    notification = next(n for n in inbox["notifications"] if n.comment_id)

    loaded = load_attributes(session, notification)

    assert loaded.repository.id == notification.repo_id
    assert loaded.issue.repo == loaded.repository
    assert loaded.user.id == inbox["reader"].id
    assert loaded.comment.issue == loaded.issue


def test_load_latest_comments_picks_newest_per_issue(session, factory, inbox, monkeypatch) -> None:
    first_issue = inbox["issues"][0]
    newest = factory.comment(first_issue, inbox["reader"], "newer")
    loaded = load_notification_list(session, inbox["notifications"])
    calls: list[list[int]] = []
    original = CommentRepository.list_latest_by_issue_ids

    def spy(self, issue_ids):
        calls.append(list(issue_ids))
        return original(self, issue_ids)

    monkeypatch.setattr(CommentRepository, "list_latest_by_issue_ids", spy)

    latest = load_latest_comments(session, loaded, max_in_size=3)

    assert [len(chunk) for chunk in calls] == [3, 2]
    assert set(latest) == {first_issue.id}
    assert latest[first_issue.id].id == newest.id
    assert latest[first_issue.id].issue.id == first_issue.id
