"""
User repository implementation.
"""

from typing import List, Optional, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from fieldops.application.interfaces.repositories import UserRepositoryInterface
from fieldops.domain.entities.user import User
from fieldops.infrastructure.database.models.role import RoleModel
from fieldops.infrastructure.database.models.user import UserModel


class UserRepository(UserRepositoryInterface):
    """User lookups backing technician resolution and the authorization gate."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID, including the role name."""
        result = await self.session.execute(
            select(UserModel)
            .options(selectinload(UserModel.role))
            .where(UserModel.id == user_id)
        )
        model = result.scalar_one_or_none()
        return self._model_to_entity(model) if model else None

    async def get_many(self, user_ids: Sequence[UUID]) -> List[User]:
        """Get every user whose ID is in ``user_ids``."""
        if not user_ids:
            return []
        result = await self.session.execute(
            select(UserModel)
            .options(selectinload(UserModel.role))
            .where(UserModel.id.in_(list(user_ids)))
        )
        return [self._model_to_entity(model) for model in result.scalars().all()]

    async def get_role_name(self, user_id: UUID) -> Optional[str]:
        """Get the name of a user's role."""
        result = await self.session.execute(
            select(RoleModel.name)
            .join(UserModel, UserModel.role_id == RoleModel.id)
            .where(UserModel.id == user_id)
        )
        return result.scalar_one_or_none()

    def _model_to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            company_id=model.company_id,
            role_name=model.role.name if model.role else None,
        )
