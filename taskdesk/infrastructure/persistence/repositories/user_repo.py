"""User repository. Implements IUserRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskdesk.application.dtos.user import UserResult
from taskdesk.domain.enums import Role
from taskdesk.infrastructure.persistence.models.user import User


def _to_result(u: User) -> UserResult:
    """Map User ORM to UserResult DTO."""
    return UserResult(
        id=u.id,
        email=u.email,
        full_name=u.full_name,
        role=Role(u.role),
        institution_id=u.institution_id,
    )


class UserRepository:
    """User repository. Implements IUserRepository."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get_by_id(self, user_id: int) -> UserResult | None:
        result = await self.db.execute(select(User).where(User.id == user_id))
        row = result.scalar_one_or_none()
        return _to_result(row) if row else None

    async def get_by_email(self, email: str) -> UserResult | None:
        result = await self.db.execute(select(User).where(User.email == email))
        row = result.scalar_one_or_none()
        return _to_result(row) if row else None

    async def list_admins(self, institution_id: int) -> list[UserResult]:
        """Return admin users of the institution, ordered by id."""
        result = await self.db.execute(
            select(User)
            .where(User.institution_id == institution_id, User.role == Role.ADMIN.value)
            .order_by(User.id)
        )
        return [_to_result(u) for u in result.scalars().all()]

    async def create_user(
        self, email: str, full_name: str, role: Role, institution_id: int
    ) -> UserResult:
        user = User(
            email=email,
            full_name=full_name,
            role=role.value,
            institution_id=institution_id,
        )
        self.db.add(user)
        await self.db.flush()
        await self.db.refresh(user)
        return _to_result(user)
