"""User and notification repository tests against the SQLite test database."""

import pytest

from taskdesk.domain.entities.notification import NotificationEvent
from taskdesk.domain.enums import NotificationType, Role
from taskdesk.infrastructure.persistence.repositories import (
    NotificationRepository,
    UserRepository,
)
from taskdesk.infrastructure.services import DatabaseNotificationDispatcher

pytestmark = pytest.mark.requires_db


async def test_list_admins_is_institution_scoped(db_session) -> None:
    repo = UserRepository(db_session)
    admin = await repo.create_user("admin@thaiba.com", "Admin User", Role.ADMIN, 1)
    manager = await repo.create_user("manager@thaiba.com", "Manager", Role.ADMIN, 1)
    await repo.create_user("john@thaiba.com", "John Doe", Role.TEAM, 1)
    await repo.create_user("admin@other.org", "Other Admin", Role.ADMIN, 2)

    admins = await repo.list_admins(1)

    assert [a.id for a in admins] == [admin.id, manager.id]
    assert admins[0].to_actor().role == Role.ADMIN


async def test_get_user_by_id_and_email(db_session) -> None:
    repo = UserRepository(db_session)
    created = await repo.create_user("jane@thaiba.com", "Jane Smith", Role.TEAM, 1)
    assert (await repo.get_by_id(created.id)).email == "jane@thaiba.com"
    assert (await repo.get_by_email("jane@thaiba.com")).id == created.id
    assert await repo.get_by_id(999) is None


async def test_notification_lifecycle(db_session) -> None:
    repo = NotificationRepository(db_session)
    first = await repo.create_notification(7, "TASK_REVIEW_DECIDED", "Task approved", "...")
    second = await repo.create_notification(
        7, "TASK_REVIEW_DECIDED", "Task rejected", "...", metadata={"task_id": 3}
    )
    await repo.create_notification(8, "TASK_REVIEW_DECIDED", "Task approved", "...")

    listed = await repo.list_for_user(7)
    assert [n.id for n in listed] == [second.id, first.id]
    assert listed[0].metadata == {"task_id": 3}
    assert not listed[0].read

    assert await repo.get_for_user(first.id, 8) is None
    marked = await repo.set_read(first.id, True)
    assert marked.read is True
    assert [n.id for n in await repo.list_for_user(7, read=False)] == [second.id]
    assert [n.id for n in await repo.list_for_user(7, read=True)] == [first.id]

    assert await repo.delete_notification(first.id) is True
    assert await repo.get_for_user(first.id, 7) is None
    assert await repo.set_read(first.id, False) is None


async def test_dispatcher_persists_one_row_per_event(db_session) -> None:
    repo = NotificationRepository(db_session)
    events = [
        NotificationEvent(
            recipient_id=admin_id,
            type=NotificationType.GUEST_TASK_CREATED,
            title="New task request",
            body='Guest One submitted "Drone b-roll" for review.',
            metadata={"task_id": 12, "guest_id": 6, "guest_name": "Guest One"},
        )
        for admin_id in (1, 2)
    ]

    await DatabaseNotificationDispatcher(repo).dispatch(events)

    for admin_id in (1, 2):
        stored = await repo.list_for_user(admin_id)
        assert len(stored) == 1
        assert stored[0].type == "GUEST_TASK_CREATED"
        assert stored[0].metadata["task_id"] == 12
