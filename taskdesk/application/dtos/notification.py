"""DTOs for persisted notifications (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class NotificationResult:
    """Notification as stored for its recipient."""

    id: int
    user_id: int
    type: str
    title: str
    message: str
    read: bool
    metadata: dict[str, Any] | None
    created_at: datetime
