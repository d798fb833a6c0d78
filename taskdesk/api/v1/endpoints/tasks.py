"""Task API: thin routes delegating to TaskService."""

from enum import Enum
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from taskdesk.api.v1.dependencies import (
    get_current_actor,
    get_task_service,
    get_task_service_for_write,
)
from taskdesk.application.dtos.task import TaskCreate
from taskdesk.application.use_cases.tasks import TaskService
from taskdesk.core.config import get_settings
from taskdesk.core.limiter import limit_writes
from taskdesk.domain.entities.actor import ActorEntity
from taskdesk.domain.enums import ReviewStatus, TaskStatus
from taskdesk.domain.exceptions import ValidationException
from taskdesk.schemas.task import (
    TaskAssignRequest,
    TaskCreateRequest,
    TaskPermissionsResponse,
    TaskResponse,
    TaskReviewRequest,
    TaskStatusRequest,
    TaskUpdateRequest,
)

router = APIRouter()


def _filter_value[E: Enum](enum_cls: type[E], value: str | None, name: str) -> E | None:
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationException(
            f"Invalid {name} filter: {value!r}", field=name
        ) from None


@router.get("", response_model=list[TaskResponse])
async def list_tasks(
    actor: Annotated[ActorEntity, Depends(get_current_actor)],
    task_svc: Annotated[TaskService, Depends(get_task_service)],
    status: str | None = Query(None, description="Filter by workflow status"),
    review_status: str | None = Query(None, description="Filter by review status"),
    limit: int | None = Query(None, ge=1, description="Max items (capped by TASK_LIST_MAX_LIMIT)"),
):
    """List tasks of the caller's institution, newest first."""
    settings = get_settings()
    effective_limit = min(
        limit or settings.task_list_default_limit, settings.task_list_max_limit
    )
    tasks = await task_svc.list_tasks(
        actor,
        status=_filter_value(TaskStatus, status, "status"),
        review_status=_filter_value(ReviewStatus, review_status, "review_status"),
        limit=effective_limit,
    )
    return [TaskResponse.model_validate(t) for t in tasks]


@router.post("", response_model=TaskResponse, status_code=201)
@limit_writes
async def create_task(
    request: Request,
    body: TaskCreateRequest,
    actor: Annotated[ActorEntity, Depends(get_current_actor)],
    task_svc: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Create a task. Guest submissions start pending review and notify admins."""
    cmd = TaskCreate(
        title=body.title,
        description=body.description,
        priority=body.priority,
        assigned_to_id=body.assigned_to_id,
        due_date=body.due_date,
        institution_id=body.institution_id,
    )
    created = await task_svc.create_task(actor, cmd)
    return TaskResponse.model_validate(created)


@router.get("/{task_id}", response_model=TaskResponse)
async def get_task(
    task_id: int,
    actor: Annotated[ActorEntity, Depends(get_current_actor)],
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Get a task by id (institution-scoped)."""
    task = await task_svc.get_task(actor, task_id)
    return TaskResponse.model_validate(task)


@router.get("/{task_id}/permissions", response_model=TaskPermissionsResponse)
async def get_task_permissions(
    task_id: int,
    actor: Annotated[ActorEntity, Depends(get_current_actor)],
    task_svc: Annotated[TaskService, Depends(get_task_service)],
):
    """Return what the caller may do to the task (for enabling UI controls)."""
    permissions = await task_svc.get_permissions(actor, task_id)
    return TaskPermissionsResponse.model_validate(permissions)


@router.patch("/{task_id}", response_model=TaskResponse)
@limit_writes
async def update_task(
    request: Request,
    task_id: int,
    body: TaskUpdateRequest,
    actor: Annotated[ActorEntity, Depends(get_current_actor)],
    task_svc: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Apply a sparse update. One disallowed field rejects the whole request."""
    updated = await task_svc.update_task(actor, task_id, body.to_delta())
    return TaskResponse.model_validate(updated)


@router.post("/{task_id}/status", response_model=TaskResponse)
@limit_writes
async def change_task_status(
    request: Request,
    task_id: int,
    body: TaskStatusRequest,
    actor: Annotated[ActorEntity, Depends(get_current_actor)],
    task_svc: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Move the task to another workflow status."""
    updated = await task_svc.change_status(actor, task_id, body.status)
    return TaskResponse.model_validate(updated)


@router.patch("/{task_id}/review", response_model=TaskResponse)
@limit_writes
async def decide_task_review(
    request: Request,
    task_id: int,
    body: TaskReviewRequest,
    actor: Annotated[ActorEntity, Depends(get_current_actor)],
    task_svc: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Approve or reject a task (admins only); the creator is notified."""
    updated = await task_svc.decide_review(actor, task_id, body.review_status)
    return TaskResponse.model_validate(updated)


@router.post("/{task_id}/assign", response_model=TaskResponse)
@limit_writes
async def assign_task(
    request: Request,
    task_id: int,
    body: TaskAssignRequest,
    actor: Annotated[ActorEntity, Depends(get_current_actor)],
    task_svc: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Assign or unassign the task (team and admin)."""
    updated = await task_svc.assign(actor, task_id, body.assigned_to_id)
    return TaskResponse.model_validate(updated)


@router.delete("/{task_id}", status_code=204)
@limit_writes
async def delete_task(
    request: Request,
    task_id: int,
    actor: Annotated[ActorEntity, Depends(get_current_actor)],
    task_svc: Annotated[TaskService, Depends(get_task_service_for_write)],
):
    """Delete the task (creator or admin)."""
    await task_svc.delete_task(actor, task_id)
