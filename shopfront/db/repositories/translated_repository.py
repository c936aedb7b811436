"""Shared persistence for entities with one translation row per language.

A parent table (products, blog_posts) is paired with a translation table
keyed by (parent id, language id). Each write here commits on its own, so a
parent insert followed by translation inserts is not atomic.
"""

import logging
from typing import Any, ClassVar, Dict, Optional, Tuple

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from shopfront.core.errors import StoreError

logger = logging.getLogger(__name__)


def _upsert_insert(dialect_name: str):
    if dialect_name == "postgresql":
        from sqlalchemy.dialects.postgresql import insert as pg_insert
        return pg_insert
    if dialect_name == "sqlite":
        from sqlalchemy.dialects.sqlite import insert as sqlite_insert
        return sqlite_insert
    raise StoreError(f"Translation upsert is not supported on {dialect_name}")


class TranslatedEntityRepository:
    model: ClassVar[Any]
    translation_model: ClassVar[Any]
    parent_key: ClassVar[str]
    text_fields: ClassVar[Tuple[str, ...]]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_image_url(self, entity_id: str) -> Tuple[bool, Optional[str]]:
        """Return (found, main_image_url) for the parent row"""
        result = await self.session.execute(
            select(self.model.main_image_url).where(self.model.id == entity_id)
        )
        row = result.one_or_none()
        if row is None:
            return False, None
        return True, row.main_image_url

    async def create(self, values: Dict[str, Any]) -> None:
        await self.session.execute(insert(self.model).values(**values))
        await self.session.commit()

    async def update(self, entity_id: str, values: Dict[str, Any]) -> bool:
        result = await self.session.execute(
            update(self.model)
            .where(self.model.id == entity_id)
            .values(**values, updated_at=func.now())
        )
        await self.session.commit()
        return result.rowcount > 0

    async def delete(self, entity_id: str) -> bool:
        result = await self.session.execute(delete(self.model).where(self.model.id == entity_id))
        await self.session.commit()
        return result.rowcount > 0

    def _translation_values(self, entity_id: str, language_id: int, fields: Dict[str, Optional[str]]):
        values = {self.parent_key: entity_id, "language_id": language_id}
        values.update({name: fields.get(name) for name in self.text_fields})
        return values

    async def add_translation(self, entity_id: str, language_id: int, fields: Dict[str, Optional[str]]) -> None:
        await self.session.execute(
            insert(self.translation_model).values(**self._translation_values(entity_id, language_id, fields))
        )
        await self.session.commit()

    async def upsert_translation(self, entity_id: str, language_id: int, fields: Dict[str, Optional[str]]) -> None:
        """Insert the translation or overwrite all of its text fields"""
        dialect_insert = _upsert_insert(self.session.get_bind().dialect.name)
        stmt = dialect_insert(self.translation_model).values(
            **self._translation_values(entity_id, language_id, fields)
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[self.parent_key, "language_id"],
            set_={name: stmt.excluded[name] for name in self.text_fields},
        )
        await self.session.execute(stmt)
        await self.session.commit()
