from typing import Any, Dict, List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shopfront.core.errors import ConflictError
from shopfront.db.models.user import User as UserModel
from shopfront.domains.identity.entities import Role, User


class UserRepository:
    """Credential store: user rows looked up by exact id or email"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, user: User) -> User:
        db_user = UserModel(
            id=user.id,
            email=user.email,
            password_hash=user.password_hash,
            role=user.role.value,
        )

        self.session.add(db_user)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise ConflictError("A user with this email already exists")
        await self.session.refresh(db_user)
        return self._to_domain(db_user)

    async def get_by_id(self, user_id: str) -> Optional[User]:
        result = await self.session.execute(select(UserModel).where(UserModel.id == user_id))
        db_user = result.scalar_one_or_none()
        return self._to_domain(db_user) if db_user else None

    async def get_by_email(self, email: str) -> Optional[User]:
        result = await self.session.execute(select(UserModel).where(UserModel.email == email))
        db_user = result.scalar_one_or_none()
        return self._to_domain(db_user) if db_user else None

    async def get_all(self) -> List[User]:
        result = await self.session.execute(select(UserModel).order_by(UserModel.created_at))
        return [self._to_domain(u) for u in result.scalars().all()]

    async def email_exists(self, email: str, exclude_id: Optional[str] = None) -> bool:
        query = select(UserModel.id).where(UserModel.email == email)
        if exclude_id is not None:
            query = query.where(UserModel.id != exclude_id)
        result = await self.session.execute(query.limit(1))
        return result.scalar_one_or_none() is not None

    async def admin_exists(self) -> bool:
        result = await self.session.execute(
            select(UserModel.id).where(UserModel.role == Role.admin.value).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def update(self, user_id: str, values: Dict[str, Any]) -> bool:
        """Apply a partial update; ``updated_at`` is bumped"""
        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(**values, updated_at=func.now())
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise ConflictError("A user with this email already exists")
        return result.rowcount > 0

    async def delete(self, user_id: str) -> bool:
        result = await self.session.execute(delete(UserModel).where(UserModel.id == user_id))
        await self.session.commit()
        return result.rowcount > 0

    def _to_domain(self, db_user: UserModel) -> User:
        return User(
            id=db_user.id,
            email=db_user.email,
            password_hash=db_user.password_hash,
            role=Role(db_user.role),
            created_at=db_user.created_at,
            updated_at=db_user.updated_at,
        )
