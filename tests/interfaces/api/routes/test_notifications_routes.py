"""Integration tests for the notification endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("httpx")
from fastapi.testclient import TestClient

from issuewatch.application.use_cases.notifications import (
    create_or_update_issue_notifications,
)
from issuewatch.domain.entities import NotificationStatus
from issuewatch.infrastructure.database import get_db
from issuewatch.infrastructure.models import NotificationModel
from issuewatch.infrastructure.security import create_access_token
from issuewatch.main import create_app


@pytest.fixture()
def client(session):
    """Return a test client whose requests share the test session."""

    app = create_app()

    def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def scenario(session, factory):
    author = factory.user("author")
    watcher = factory.user("watcher")
    repository = factory.repository(author, "tools")
    issue = factory.issue(repository, author, title="Crash on start")
    pull = factory.issue(repository, author, title="Add cache", is_pull=True)
    factory.watch_repo(watcher, repository)
    comment = factory.comment(issue, author, "details")
    create_or_update_issue_notifications(session, issue.id, comment.id, author.id)
    create_or_update_issue_notifications(session, pull.id, 0, author.id)
    return {
        "author": author,
        "watcher": watcher,
        "issue": issue,
        "pull": pull,
        "comment": comment,
        "headers": {"Authorization": f"Bearer {create_access_token(watcher.id)}"},
    }


def _notification_id(session, user_id, issue_id) -> int:
    return (
        session.query(NotificationModel.id)
        .filter(NotificationModel.user_id == user_id)
        .filter(NotificationModel.issue_id == issue_id)
        .scalar()
    )


def test_requires_authentication(client: TestClient) -> None:
    response = client.get("/notifications")

    assert response.status_code == 401


def test_list_notifications(client: TestClient, scenario) -> None:
    response = client.get("/notifications", headers=scenario["headers"])

    assert response.status_code == 200
    threads = response.json()
    assert len(threads) == 2
    by_type = {thread["subject"]["type"]: thread for thread in threads}
    assert set(by_type) == {"Issue", "Pull"}
    issue_thread = by_type["Issue"]
    assert issue_thread["unread"] is True
    assert issue_thread["repository"]["full_name"] == "author/tools"
    assert issue_thread["subject"]["title"] == "Crash on start"
    assert issue_thread["subject"]["latest_comment_url"].endswith(
        f"/issues/comments/{scenario['comment'].id}"
    )
    assert issue_thread["url"] == (
        f"https://tracker.example.com/api/v1/notifications/threads/{issue_thread['id']}"
    )


def test_unknown_status_type_is_rejected(client: TestClient, scenario) -> None:
    response = client.get(
        "/notifications", params={"status-types": "archived"}, headers=scenario["headers"]
    )

    assert response.status_code == 422


def test_patch_thread_and_count(client: TestClient, session, scenario) -> None:
    notification_id = _notification_id(session, scenario["watcher"].id, scenario["issue"].id)

    assert client.get("/notifications/new", headers=scenario["headers"]).json() == {"new": 2}
    response = client.patch(
        f"/notifications/threads/{notification_id}",
        params={"to-status": "pinned"},
        headers=scenario["headers"],
    )

    assert response.status_code == 200
    assert response.json()["pinned"] is True
    assert response.json()["unread"] is False
    assert client.get("/notifications/new", headers=scenario["headers"]).json() == {"new": 1}

    read_only = client.get(
        "/notifications", params={"status-types": "read"}, headers=scenario["headers"]
    )
    assert read_only.json() == []
    everything = client.get("/notifications", params={"all": "true"}, headers=scenario["headers"])
    assert len(everything.json()) == 2


def test_other_users_thread_is_forbidden(client: TestClient, session, scenario) -> None:
    notification_id = _notification_id(session, scenario["watcher"].id, scenario["issue"].id)
    headers = {"Authorization": f"Bearer {create_access_token(scenario['author'].id)}"}

    assert client.get(f"/notifications/threads/{notification_id}", headers=headers).status_code == 403
    patch = client.patch(
        f"/notifications/threads/{notification_id}",
        params={"to-status": "read"},
        headers=headers,
    )
    assert patch.status_code == 403


def test_missing_thread_is_not_found(client: TestClient, scenario) -> None:
    response = client.get("/notifications/threads/9999", headers=scenario["headers"])

    assert response.status_code == 404


def test_read_thread(client: TestClient, session, scenario) -> None:
    notification_id = _notification_id(session, scenario["watcher"].id, scenario["pull"].id)

    response = client.get(f"/notifications/threads/{notification_id}", headers=scenario["headers"])

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == notification_id
    assert body["subject"]["type"] == "Pull"
    assert body["subject"]["url"].endswith("/pulls/2")


def test_mark_all_read(client: TestClient, session, scenario) -> None:
    response = client.put("/notifications", headers=scenario["headers"])

    assert response.status_code == 200
    assert response.json() == {"updated": 2}
    statuses = {
        status
        for (status,) in session.query(NotificationModel.status).filter(
            NotificationModel.user_id == scenario["watcher"].id
        )
    }
    assert statuses == {int(NotificationStatus.READ)}


def test_patch_thread_includes_latest_comment(client: TestClient, session, scenario) -> None:
    notification_id = _notification_id(session, scenario["watcher"].id, scenario["issue"].id)
    url = f"/notifications/threads/{notification_id}"

    shown = client.get(url, headers=scenario["headers"]).json()
    patched = client.patch(url, params={"to-status": "read"}, headers=scenario["headers"])

    assert patched.status_code == 200
    assert patched.json()["subject"] == shown["subject"]
    assert patched.json()["subject"]["latest_comment_url"].endswith(
        f"/issues/comments/{scenario['comment'].id}"
    )


def test_thread_with_deleted_comment_still_renders(client: TestClient, session, scenario) -> None:
    notification_id = _notification_id(session, scenario["watcher"].id, scenario["issue"].id)
    session.query(NotificationModel).filter(NotificationModel.id == notification_id).update(
        {NotificationModel.comment_id: 9999}
    )
    session.commit()

    response = client.get(f"/notifications/threads/{notification_id}", headers=scenario["headers"])

    assert response.status_code == 200
    assert response.json()["subject"]["title"] == "Crash on start"
