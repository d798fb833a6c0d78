"""User ORM model."""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from taskdesk.infrastructure.persistence.database import Base
from taskdesk.infrastructure.persistence.models.mixins import (
    InstitutionMixin,
    IntegerIdMixin,
    TimestampMixin,
)


class User(IntegerIdMixin, InstitutionMixin, TimestampMixin, Base):
    """Institution member. Table: app_user. role is one of admin, team, guest."""

    __tablename__ = "app_user"

    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    full_name: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(16), nullable=False)

    __table_args__ = (Index("ix_app_user_institution_role", "institution_id", "role"),)
