"""Task ORM model."""

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from taskdesk.infrastructure.persistence.database import Base
from taskdesk.infrastructure.persistence.models.mixins import (
    InstitutionMixin,
    IntegerIdMixin,
    TimestampMixin,
    VersionedMixin,
)


class Task(IntegerIdMixin, InstitutionMixin, TimestampMixin, VersionedMixin, Base):
    """Task with workflow status and admin review status. Table: task."""

    __tablename__ = "task"

    title: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(32), nullable=False, default="todo", server_default="todo"
    )
    priority: Mapped[str] = mapped_column(
        String(16), nullable=False, default="medium", server_default="medium"
    )
    review_status: Mapped[str] = mapped_column(
        String(16), nullable=False, default="approved", server_default="approved"
    )
    assigned_to_id: Mapped[int | None] = mapped_column(
        Integer, nullable=True, index=True
    )
    created_by_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    due_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )

    __table_args__ = (
        Index("ix_task_institution_status", "institution_id", "status"),
        Index("ix_task_institution_review", "institution_id", "review_status"),
    )
