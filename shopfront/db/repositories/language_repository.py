from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shopfront.core.errors import ConflictError
from shopfront.db.models.language import Language


class LanguageRepository:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_all(self) -> List[Language]:
        result = await self.session.execute(select(Language).order_by(Language.id))
        return list(result.scalars().all())

    async def get_id_by_code(self, code: str) -> Optional[int]:
        result = await self.session.execute(select(Language.id).where(Language.code == code))
        return result.scalar_one_or_none()

    async def code_exists(self, code: str) -> bool:
        return await self.get_id_by_code(code) is not None

    async def get_active(self) -> List[Tuple[int, str]]:
        """(id, code) of every active language"""
        result = await self.session.execute(
            select(Language.id, Language.code).where(Language.is_active.is_(True)).order_by(Language.id)
        )
        return [(row.id, row.code) for row in result.all()]

    async def create(self, code: str, name: str, is_active: bool) -> Language:
        language = Language(code=code, name=name, is_active=is_active)
        self.session.add(language)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise ConflictError(f"Language code '{code}' already exists")
        await self.session.refresh(language)
        return language

    async def update(self, language_id: int, values: Dict[str, Any]) -> bool:
        result = await self.session.execute(
            update(Language).where(Language.id == language_id).values(**values)
        )
        await self.session.commit()
        return result.rowcount > 0

    async def delete(self, language_id: int) -> bool:
        # translations go with it through ON DELETE CASCADE
        result = await self.session.execute(delete(Language).where(Language.id == language_id))
        await self.session.commit()
        return result.rowcount > 0
