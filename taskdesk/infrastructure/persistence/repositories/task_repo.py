"""Task repository. Implements ITaskRepository with optimistic locking on version."""

from __future__ import annotations

from dataclasses import replace

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from taskdesk.domain.entities.task import TaskEntity
from taskdesk.domain.enums import ReviewStatus, TaskPriority, TaskStatus
from taskdesk.infrastructure.persistence.models.task import Task
from taskdesk.shared.utils.datetime import ensure_utc


def _to_entity(t: Task) -> TaskEntity:
    """Map Task ORM to TaskEntity."""
    return TaskEntity(
        id=t.id,
        title=t.title,
        description=t.description,
        status=TaskStatus(t.status),
        priority=TaskPriority(t.priority),
        assigned_to_id=t.assigned_to_id,
        created_by_id=t.created_by_id,
        institution_id=t.institution_id,
        due_date=ensure_utc(t.due_date),
        review_status=ReviewStatus(t.review_status),
        created_at=ensure_utc(t.created_at),
        updated_at=ensure_utc(t.updated_at),
        version=t.version,
    )


def _mutable_columns(task: TaskEntity) -> dict:
    return {
        "title": task.title,
        "description": task.description,
        "status": task.status.value,
        "priority": task.priority.value,
        "assigned_to_id": task.assigned_to_id,
        "due_date": task.due_date,
        "review_status": task.review_status.value,
        "updated_at": task.updated_at,
    }


class TaskRepository:
    """Task repository. Implements ITaskRepository."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_task(self, task_id: int) -> TaskEntity | None:
        """Return task by ID, always re-read from the database."""
        result = await self.db.execute(
            select(Task)
            .where(Task.id == task_id)
            .execution_options(populate_existing=True)
        )
        row = result.scalar_one_or_none()
        return _to_entity(row) if row else None

    async def add_task(self, task: TaskEntity) -> TaskEntity:
        """Insert the task; the database assigns the id."""
        orm = Task(
            institution_id=task.institution_id,
            created_by_id=task.created_by_id,
            created_at=task.created_at,
            version=1,
            **_mutable_columns(task),
        )
        self.db.add(orm)
        await self.db.flush()
        await self.db.refresh(orm)
        return _to_entity(orm)

    async def save_task(
        self, task: TaskEntity, expected_version: int
    ) -> TaskEntity | None:
        """Update the task only if it is still at expected_version (optimistic lock).

        Returns the saved task, or None if another request won the race.
        """
        new_version = expected_version + 1
        stmt = (
            update(Task)
            .where(Task.id == task.id, Task.version == expected_version)
            .values(version=new_version, **_mutable_columns(task))
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)
        if result.rowcount != 1:
            return None
        return replace(task, version=new_version)

    async def delete_task(self, task_id: int) -> bool:
        result = await self.db.execute(delete(Task).where(Task.id == task_id))
        return result.rowcount == 1

    async def list_tasks(
        self,
        institution_id: int,
        status: TaskStatus | None = None,
        review_status: ReviewStatus | None = None,
        limit: int = 100,
    ) -> list[TaskEntity]:
        """Return institution tasks, newest first, optionally filtered."""
        stmt = select(Task).where(Task.institution_id == institution_id)
        if status is not None:
            stmt = stmt.where(Task.status == status.value)
        if review_status is not None:
            stmt = stmt.where(Task.review_status == review_status.value)
        stmt = stmt.order_by(Task.created_at.desc(), Task.id.desc()).limit(limit)
        result = await self.db.execute(stmt)
        return [_to_entity(t) for t in result.scalars().all()]
