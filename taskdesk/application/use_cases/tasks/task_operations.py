"""Task operations: run the task workflow against storage and dispatch its notifications.

Each mutation is read -> evaluate -> compare-and-swap write. When another
request saved the task in between, the whole cycle is retried against the
fresh state; notifications go out only after a successful write.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from taskdesk.application.dtos.outcome import Outcome
from taskdesk.application.dtos.task import (
    TaskCreate,
    TaskDelta,
    TaskMutation,
    TaskPermissions,
)
from taskdesk.application.interfaces.repositories import ITaskRepository, IUserRepository
from taskdesk.application.interfaces.services import INotificationDispatcher
from taskdesk.application.use_cases.tasks.task_workflow import TaskWorkflow
from taskdesk.domain.entities.actor import ActorEntity
from taskdesk.domain.entities.notification import NotificationEvent
from taskdesk.domain.entities.task import TaskEntity
from taskdesk.domain.enums import ReviewStatus, Role, TaskStatus
from taskdesk.domain.exceptions import (
    ResourceNotFoundException,
    TaskVersionConflictException,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_SAVE_ATTEMPTS = 3


class TaskService:
    """Create, query, mutate and delete tasks for an actor (institution-scoped)."""

    def __init__(
        self,
        task_repo: ITaskRepository,
        user_repo: IUserRepository,
        dispatcher: INotificationDispatcher,
        workflow: TaskWorkflow | None = None,
        max_save_attempts: int = DEFAULT_MAX_SAVE_ATTEMPTS,
    ) -> None:
        self.task_repo = task_repo
        self.user_repo = user_repo
        self.dispatcher = dispatcher
        self.workflow = workflow or TaskWorkflow()
        self.max_save_attempts = max(1, max_save_attempts)

    async def get_task(self, actor: ActorEntity, task_id: int) -> TaskEntity:
        """Return the task if it exists in the actor's institution."""
        task = await self.task_repo.get_task(task_id)
        if task is None or not task.belongs_to_institution(actor.institution_id):
            raise ResourceNotFoundException("task", task_id)
        return task

    async def list_tasks(
        self,
        actor: ActorEntity,
        status: TaskStatus | None = None,
        review_status: ReviewStatus | None = None,
        limit: int = 100,
    ) -> list[TaskEntity]:
        """Return the actor's institution tasks, newest first."""
        return await self.task_repo.list_tasks(
            actor.institution_id,
            status=status,
            review_status=review_status,
            limit=limit,
        )

    async def create_task(self, actor: ActorEntity, data: TaskCreate) -> TaskEntity:
        """Create a task; guest submissions notify every admin of the institution."""
        admins: list[ActorEntity] = []
        if actor.role == Role.GUEST:
            users = await self.user_repo.list_admins(actor.institution_id)
            admins = [u.to_actor() for u in users]
        mutation = self.workflow.create_task(actor, data, admins).unwrap()
        saved = await self.task_repo.add_task(mutation.task)
        await self._dispatch([e.for_task(saved.id) for e in mutation.notifications])
        logger.info(
            "Task %s created by user %s (role=%s, review_status=%s, notified=%d)",
            saved.id,
            actor.id,
            actor.role.value,
            saved.review_status.value,
            len(mutation.notifications),
        )
        return saved

    async def update_task(
        self, actor: ActorEntity, task_id: int, delta: TaskDelta
    ) -> TaskEntity:
        """Apply a sparse delta (all-or-nothing)."""
        return await self._mutate(
            task_id, lambda task: self.workflow.update_task(actor, task, delta)
        )

    async def change_status(
        self, actor: ActorEntity, task_id: int, status: Any
    ) -> TaskEntity:
        return await self._mutate(
            task_id, lambda task: self.workflow.change_status(actor, task, status)
        )

    async def decide_review(
        self, actor: ActorEntity, task_id: int, review_status: Any
    ) -> TaskEntity:
        return await self._mutate(
            task_id,
            lambda task: self.workflow.decide_review(actor, task, review_status),
        )

    async def assign(
        self, actor: ActorEntity, task_id: int, assigned_to_id: Any
    ) -> TaskEntity:
        return await self._mutate(
            task_id, lambda task: self.workflow.assign(actor, task, assigned_to_id)
        )

    async def delete_task(self, actor: ActorEntity, task_id: int) -> None:
        """Delete the task if the actor created it or is an admin."""
        task = await self.task_repo.get_task(task_id)
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        deletion = self.workflow.delete_task(actor, task).unwrap()
        await self.task_repo.delete_task(deletion.task_id)
        logger.info("Task %s deleted by user %s", task_id, actor.id)

    async def get_permissions(
        self, actor: ActorEntity, task_id: int
    ) -> TaskPermissions:
        """Return what the actor may do to the task."""
        task = await self.task_repo.get_task(task_id)
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        return self.workflow.describe_permissions(actor, task).unwrap()

    async def _mutate(
        self,
        task_id: int,
        decide: Callable[[TaskEntity], Outcome[TaskMutation]],
    ) -> TaskEntity:
        """Read, evaluate and compare-and-swap; retry the cycle on version conflict."""
        for attempt in range(1, self.max_save_attempts + 1):
            current = await self.task_repo.get_task(task_id)
            if current is None:
                raise ResourceNotFoundException("task", task_id)
            mutation = decide(current).unwrap()
            saved = await self.task_repo.save_task(
                mutation.task, expected_version=current.version
            )
            if saved is not None:
                await self._dispatch(mutation.notifications)
                changed = mutation.changed_fields(current)
                logger.info(
                    "Task %s updated (fields=%s, version=%d)",
                    task_id,
                    ",".join(changed) or "-",
                    saved.version,
                )
                return saved
            logger.warning(
                "Task %s version conflict (attempt %d/%d)",
                task_id,
                attempt,
                self.max_save_attempts,
            )
        raise TaskVersionConflictException(task_id, self.max_save_attempts)

    async def _dispatch(self, events: list[NotificationEvent]) -> None:
        if events:
            await self.dispatcher.dispatch(events)
