"""Notification API: the caller's own in-app notifications."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from taskdesk.api.v1.dependencies import (
    get_current_actor,
    get_notification_service,
    get_notification_service_for_write,
)
from taskdesk.application.use_cases.notifications import NotificationService
from taskdesk.core.limiter import limit_writes
from taskdesk.domain.entities.actor import ActorEntity
from taskdesk.schemas.notification import NotificationResponse

router = APIRouter()


@router.get("", response_model=list[NotificationResponse])
async def list_notifications(
    actor: Annotated[ActorEntity, Depends(get_current_actor)],
    notification_svc: Annotated[NotificationService, Depends(get_notification_service)],
    read: bool | None = Query(None, description="Filter by read flag"),
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
):
    """List the caller's notifications, newest first."""
    items = await notification_svc.list_notifications(
        actor, read=read, limit=limit, offset=offset
    )
    return [NotificationResponse.model_validate(n) for n in items]


@router.post("/{notification_id}/read", response_model=NotificationResponse)
@limit_writes
async def mark_notification_read(
    request: Request,
    notification_id: int,
    actor: Annotated[ActorEntity, Depends(get_current_actor)],
    notification_svc: Annotated[
        NotificationService, Depends(get_notification_service_for_write)
    ],
):
    updated = await notification_svc.set_read(actor, notification_id, True)
    return NotificationResponse.model_validate(updated)


@router.delete("/{notification_id}/read", response_model=NotificationResponse)
@limit_writes
async def mark_notification_unread(
    request: Request,
    notification_id: int,
    actor: Annotated[ActorEntity, Depends(get_current_actor)],
    notification_svc: Annotated[
        NotificationService, Depends(get_notification_service_for_write)
    ],
):
    updated = await notification_svc.set_read(actor, notification_id, False)
    return NotificationResponse.model_validate(updated)


@router.delete("/{notification_id}", status_code=204)
@limit_writes
async def delete_notification(
    request: Request,
    notification_id: int,
    actor: Annotated[ActorEntity, Depends(get_current_actor)],
    notification_svc: Annotated[
        NotificationService, Depends(get_notification_service_for_write)
    ],
):
    """Delete one of the caller's notifications."""
    await notification_svc.delete_notification(actor, notification_id)
