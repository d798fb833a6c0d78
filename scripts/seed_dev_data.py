"""Seed dev data: the demo institution's users and a few tasks.

Users are created by email when missing. Tasks are created through TaskService
(so the guest request notifies the admins) only when the institution has no
tasks yet, which makes the script safe to re-run.

Usage:
    python -m scripts.seed_dev_data

Requires: DATABASE_URL (defaults to the local SQLite file). Tables are created
if missing.
"""

from __future__ import annotations

import asyncio
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

from taskdesk.application.dtos.task import TaskCreate
from taskdesk.application.dtos.user import UserResult
from taskdesk.application.use_cases.tasks import TaskService
from taskdesk.domain.enums import Role, TaskStatus
from taskdesk.infrastructure.persistence.database import dispose_engine, init_models
from taskdesk.infrastructure.persistence.repositories import (
    NotificationRepository,
    TaskRepository,
    UserRepository,
)
from taskdesk.infrastructure.services import DatabaseNotificationDispatcher
from taskdesk.shared.utils.datetime import utc_now

INSTITUTION_ID = 1

USERS = [
    ("admin@thaiba.com", "Admin User", Role.ADMIN),
    ("manager@thaiba.com", "Manager", Role.ADMIN),
    ("john@thaiba.com", "John Doe", Role.TEAM),
    ("jane@thaiba.com", "Jane Smith", Role.TEAM),
    ("mike@thaiba.com", "Mike Johnson", Role.TEAM),
    ("guest1@thaiba.com", "Guest One", Role.GUEST),
    ("guest2@thaiba.com", "Guest Two", Role.GUEST),
]


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_* when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def _ensure_users(user_repo: UserRepository) -> dict[str, UserResult]:
    users: dict[str, UserResult] = {}
    for email, full_name, role in USERS:
        existing = await user_repo.get_by_email(email)
        if existing:
            users[email] = existing
            continue
        users[email] = await user_repo.create_user(
            email=email, full_name=full_name, role=role, institution_id=INSTITUTION_ID
        )
        print(f"  Created user {email} ({role.value})")
    return users


async def _seed_tasks(task_svc: TaskService, users: dict[str, UserResult]) -> None:
    admin = users["admin@thaiba.com"].to_actor()
    john = users["john@thaiba.com"].to_actor()
    guest = users["guest1@thaiba.com"].to_actor()
    now = utc_now()

    campaign = await task_svc.create_task(
        admin,
        TaskCreate(
            title="Finalize Q4 Marketing Campaign Video",
            description="Cut, grade, and master. Export in 4K.",
            priority="high",
            assigned_to_id=john.id,
            due_date=now + timedelta(days=1),
        ),
    )
    await task_svc.change_status(admin, campaign.id, TaskStatus.IN_PROGRESS)

    await task_svc.create_task(
        john,
        TaskCreate(
            title="Create video content for Instagram",
            priority="medium",
            assigned_to_id=users["jane@thaiba.com"].id,
            due_date=now + timedelta(days=2),
        ),
    )

    await task_svc.create_task(
        guest,
        TaskCreate(
            title="Guest request: drone b-roll from campus",
            description="Sample guest submission requiring approval.",
        ),
    )


async def run() -> None:
    _load_env()
    await init_models()
    from taskdesk.infrastructure.persistence import database as db_mod

    async with db_mod.AsyncSessionLocal() as session:
        async with session.begin():
            user_repo = UserRepository(session)
            task_repo = TaskRepository(session)
            users = await _ensure_users(user_repo)
            if await task_repo.list_tasks(INSTITUTION_ID, limit=1):
                print("  Tasks already present; skipping task seed")
            else:
                task_svc = TaskService(
                    task_repo=task_repo,
                    user_repo=user_repo,
                    dispatcher=DatabaseNotificationDispatcher(
                        NotificationRepository(session)
                    ),
                )
                await _seed_tasks(task_svc, users)
                print("  Created demo tasks")

    await dispose_engine()
    print("Seed completed.")


def main() -> None:
    asyncio.run(run())


if __name__ == "__main__":
    main()
