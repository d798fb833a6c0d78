"""Notification API schemas."""

from typing import Any

from pydantic import AwareDatetime, BaseModel, ConfigDict


class NotificationResponse(BaseModel):
    """In-app notification addressed to the caller."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    type: str
    title: str
    message: str
    read: bool
    metadata: dict[str, Any] | None = None
    created_at: AwareDatetime
