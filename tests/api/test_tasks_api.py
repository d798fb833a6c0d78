"""End-to-end task API tests (SQLite test database, identity headers)."""

import pytest
from httpx import AsyncClient

from tests.factories import identity_headers

pytestmark = pytest.mark.requires_db


async def _create(client: AsyncClient, user, **body) -> dict:
    body.setdefault("title", "Cut reel")
    response = await client.post("/api/v1/tasks", json=body, headers=identity_headers(user))
    assert response.status_code == 201, response.text
    return response.json()


async def test_missing_identity_is_401(client: AsyncClient, users) -> None:
    response = await client.get("/api/v1/tasks")
    assert response.status_code == 401
    assert response.json()["error"] == "AUTHENTICATION_ERROR"


async def test_unknown_role_is_401(client: AsyncClient, users) -> None:
    headers = identity_headers(users["team"]) | {"X-User-Role": "owner"}
    response = await client.get("/api/v1/tasks", headers=headers)
    assert response.status_code == 401


@pytest.mark.parametrize("raw", [b"\xb2", b"12\xb9", b"-3", b"0"])
async def test_non_ascii_or_non_positive_user_id_is_401(
    client: AsyncClient, users, raw: bytes
) -> None:
    headers = identity_headers(users["team"]) | {"X-User-ID": raw}
    response = await client.get("/api/v1/tasks", headers=headers)
    assert response.status_code == 401
    assert response.json()["error"] == "AUTHENTICATION_ERROR"


async def test_team_create_is_approved(client: AsyncClient, users) -> None:
    data = await _create(
        client, users["team"], priority="high", assigned_to_id=users["team2"].id
    )
    assert data["review_status"] == "approved"
    assert data["priority"] == "high"
    assert data["status"] == "todo"
    assert data["assigned_to_id"] == users["team2"].id
    assert data["created_by_id"] == users["team"].id
    assert data["version"] == 1


async def test_guest_create_notifies_both_admins(client: AsyncClient, users) -> None:
    data = await _create(client, users["guest"], title="Drone b-roll", priority="urgent")
    assert data["review_status"] == "pending"
    assert data["priority"] == "medium"

    for key in ("admin", "manager"):
        response = await client.get(
            "/api/v1/notifications", headers=identity_headers(users[key])
        )
        items = response.json()
        assert len(items) == 1
        assert items[0]["type"] == "GUEST_TASK_CREATED"
        assert items[0]["metadata"]["task_id"] == data["id"]
        assert items[0]["metadata"]["guest_name"] == "Guest One"

    other = await client.get(
        "/api/v1/notifications", headers=identity_headers(users["other_admin"])
    )
    assert other.json() == []


async def test_empty_title_is_400(client: AsyncClient, users) -> None:
    response = await client.post(
        "/api/v1/tasks", json={"title": "  "}, headers=identity_headers(users["team"])
    )
    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert body["details"]["field"] == "title"


async def test_get_and_list_tasks(client: AsyncClient, users) -> None:
    first = await _create(client, users["team"], title="First")
    second = await _create(client, users["admin"], title="Second")
    headers = identity_headers(users["guest"])

    one = await client.get(f"/api/v1/tasks/{first['id']}", headers=headers)
    assert one.status_code == 200
    assert one.json()["title"] == "First"

    listed = await client.get("/api/v1/tasks", headers=headers)
    assert {t["id"] for t in listed.json()} == {first["id"], second["id"]}

    filtered = await client.get("/api/v1/tasks?status=done", headers=headers)
    assert filtered.json() == []

    bad = await client.get("/api/v1/tasks?status=blocked", headers=headers)
    assert bad.status_code == 400


async def test_other_institution_sees_not_found(client: AsyncClient, users) -> None:
    task = await _create(client, users["team"])
    headers = identity_headers(users["other_admin"])
    assert (await client.get(f"/api/v1/tasks/{task['id']}", headers=headers)).status_code == 404
    patched = await client.patch(
        f"/api/v1/tasks/{task['id']}", json={"title": "x"}, headers=headers
    )
    assert patched.status_code == 404
    assert (await client.get("/api/v1/tasks", headers=headers)).json() == []


async def test_team_status_flow(client: AsyncClient, users) -> None:
    task = await _create(client, users["team"])
    headers = identity_headers(users["team"])
    url = f"/api/v1/tasks/{task['id']}/status"

    skipped = await client.post(url, json={"status": "done"}, headers=headers)
    assert skipped.status_code == 403
    assert skipped.json()["details"]["rule"] == "can_transition_status"

    for status in ("in_progress", "review", "done"):
        response = await client.post(url, json={"status": status}, headers=headers)
        assert response.status_code == 200, response.text
        assert response.json()["status"] == status

    reopen = await client.post(url, json={"status": "todo"}, headers=headers)
    assert reopen.status_code == 403

    admin_reopen = await client.post(
        url, json={"status": "todo"}, headers=identity_headers(users["admin"])
    )
    assert admin_reopen.status_code == 200
    assert admin_reopen.json()["version"] == 5


async def test_assignee_moves_admin_task_along_board(client: AsyncClient, users) -> None:
    task = await _create(client, users["admin"], assigned_to_id=users["team"].id)
    headers = identity_headers(users["team"])

    moved = await client.post(
        f"/api/v1/tasks/{task['id']}/status", json={"status": "in_progress"}, headers=headers
    )
    assert moved.status_code == 200, moved.text
    assert moved.json()["status"] == "in_progress"
    assert moved.json()["created_by_id"] == users["admin"].id

    patched = await client.patch(
        f"/api/v1/tasks/{task['id']}", json={"status": "review"}, headers=headers
    )
    assert patched.status_code == 403
    assert patched.json()["details"]["rule"] == "can_modify_entity"


async def test_guest_cannot_use_status_route(client: AsyncClient, users) -> None:
    task = await _create(client, users["guest"])
    response = await client.post(
        f"/api/v1/tasks/{task['id']}/status",
        json={"status": "in_progress"},
        headers=identity_headers(users["guest"]),
    )
    assert response.status_code == 403
    assert response.json()["details"]["rule"] == "can_transition_status"


async def test_guest_priority_update_is_forbidden_and_nothing_saved(
    client: AsyncClient, users
) -> None:
    task = await _create(client, users["guest"], title="Poster")
    headers = identity_headers(users["guest"])

    response = await client.patch(
        f"/api/v1/tasks/{task['id']}",
        json={"title": "Poster v2", "priority": "high"},
        headers=headers,
    )
    assert response.status_code == 403
    assert response.json()["details"]["field"] == "priority"

    unchanged = (await client.get(f"/api/v1/tasks/{task['id']}", headers=headers)).json()
    assert unchanged["title"] == "Poster"
    assert unchanged["version"] == 1


async def test_patch_rejects_immutable_field(client: AsyncClient, users) -> None:
    task = await _create(client, users["admin"])
    response = await client.patch(
        f"/api/v1/tasks/{task['id']}",
        json={"created_by_id": 99},
        headers=identity_headers(users["admin"]),
    )
    assert response.status_code == 400
    assert response.json()["details"]["field"] == "created_by_id"


async def test_patch_updates_fields(client: AsyncClient, users) -> None:
    task = await _create(client, users["team"])
    response = await client.patch(
        f"/api/v1/tasks/{task['id']}",
        json={"description": "Vertical cut", "due_date": "2026-05-01T10:00:00Z"},
        headers=identity_headers(users["team"]),
    )
    assert response.status_code == 200
    data = response.json()
    assert data["description"] == "Vertical cut"
    assert data["due_date"].startswith("2026-05-01T10:00:00")
    assert data["version"] == 2


async def test_review_approval_notifies_creator(client: AsyncClient, users) -> None:
    task = await _create(client, users["guest"], title="Drone b-roll")
    url = f"/api/v1/tasks/{task['id']}/review"

    denied = await client.patch(
        url, json={"review_status": "approved"}, headers=identity_headers(users["team"])
    )
    assert denied.status_code == 403

    invalid = await client.patch(
        url, json={"review_status": "maybe"}, headers=identity_headers(users["admin"])
    )
    assert invalid.status_code == 400

    approved = await client.patch(
        url, json={"review_status": "approved"}, headers=identity_headers(users["admin"])
    )
    assert approved.status_code == 200
    assert approved.json()["review_status"] == "approved"

    inbox = await client.get(
        "/api/v1/notifications", headers=identity_headers(users["guest"])
    )
    items = inbox.json()
    assert len(items) == 1
    assert items[0]["type"] == "TASK_REVIEW_DECIDED"
    assert items[0]["metadata"] == {
        "task_id": task["id"],
        "decision": "approved",
        "reviewed_by_id": users["admin"].id,
    }


async def test_assign(client: AsyncClient, users) -> None:
    task = await _create(client, users["guest"])
    url = f"/api/v1/tasks/{task['id']}/assign"

    guest = await client.post(
        url, json={"assigned_to_id": users["team"].id}, headers=identity_headers(users["guest"])
    )
    assert guest.status_code == 403

    admin = await client.post(
        url, json={"assigned_to_id": users["team"].id}, headers=identity_headers(users["admin"])
    )
    assert admin.status_code == 200
    assert admin.json()["assigned_to_id"] == users["team"].id


async def test_permissions_endpoint(client: AsyncClient, users) -> None:
    task = await _create(client, users["team"])
    response = await client.get(
        f"/api/v1/tasks/{task['id']}/permissions", headers=identity_headers(users["team"])
    )
    assert response.status_code == 200
    assert response.json() == {
        "task_id": task["id"],
        "can_edit": True,
        "can_delete": True,
        "can_set_priority": True,
        "can_assign": True,
        "can_review": False,
        "allowed_status_targets": ["in_progress"],
    }


async def test_delete(client: AsyncClient, users) -> None:
    task = await _create(client, users["team"])
    url = f"/api/v1/tasks/{task['id']}"

    denied = await client.delete(url, headers=identity_headers(users["team2"]))
    assert denied.status_code == 403

    deleted = await client.delete(url, headers=identity_headers(users["team"]))
    assert deleted.status_code == 204
    assert (await client.get(url, headers=identity_headers(users["team"]))).status_code == 404
