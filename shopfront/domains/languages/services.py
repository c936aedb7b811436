import logging
from typing import List, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from shopfront.core.errors import ConflictError, NotFoundError, ValidationError
from shopfront.db.models.language import Language
from shopfront.db.repositories.language_repository import LanguageRepository
from shopfront.domains.languages.schemas import LanguageCreate, LanguageUpdate

logger = logging.getLogger(__name__)


class LanguageService:
    def __init__(self, session: AsyncSession):
        self.session = session
        self.language_repository = LanguageRepository(session)

    async def list_languages(self) -> List[Language]:
        return await self.language_repository.get_all()

    async def resolve(self, code: str) -> int:
        """Language id for a code; an unknown code is a client error"""
        language_id = await self.language_repository.get_id_by_code(code)
        if language_id is None:
            raise NotFoundError(f"Language code '{code}' not found")
        return language_id

    async def active_languages(self) -> List[Tuple[int, str]]:
        return await self.language_repository.get_active()

    async def create_language(self, data: LanguageCreate) -> Language:
        if await self.language_repository.code_exists(data.code):
            raise ConflictError(f"Language code '{data.code}' already exists")

        language = await self.language_repository.create(data.code, data.name, data.is_active)
        logger.info("Created language %s (%s)", language.code, language.id)
        return language

    async def update_language(self, language_id: int, data: LanguageUpdate) -> None:
        values = data.model_dump(exclude_none=True)
        if not values:
            raise ValidationError("No update data provided")

        if not await self.language_repository.update(language_id, values):
            raise NotFoundError("Language not found")
        logger.info("Updated language %s (%s)", language_id, ", ".join(sorted(values)))

    async def delete_language(self, language_id: int) -> None:
        if not await self.language_repository.delete(language_id):
            raise NotFoundError("Language not found")
        logger.info("Deleted language %s and its translations", language_id)
