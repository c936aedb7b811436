"""CRUD shared by products and blog posts.

Each entity is a parent row plus at most one translation row per language.
Reads join the parent to the translation of the requested language; writes
touch the blob store, the parent row and the translation rows one after the
other, each step committed separately. A failure part way leaves the earlier
steps in place (a parent without some translations, or an unreferenced blob).
"""

import logging
import uuid
from typing import Any, ClassVar, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from shopfront.core.errors import NotFoundError, StoreError
from shopfront.db.repositories.translated_repository import TranslatedEntityRepository
from shopfront.domains.languages.services import LanguageService
from shopfront.domains.multilingual.commands import (
    CreatedEntity, EntityChanges, EntityDraft, ImageUpload
)
from shopfront.infrastructure.storage import BlobStore

logger = logging.getLogger(__name__)


class MultilingualService:
    repository_class: ClassVar[type]
    # a translation is only created when this field is present
    required_text_field: ClassVar[str]
    entity_label: ClassVar[str]

    def __init__(
        self,
        session: AsyncSession,
        blob_store: Optional[BlobStore] = None,
        default_language: str = "en",
    ):
        self.session = session
        self.repository: TranslatedEntityRepository = self.repository_class(session)
        self.languages = LanguageService(session)
        self.blob_store = blob_store
        self.default_language = default_language

    async def language_id(self, lang: Optional[str]) -> int:
        return await self.languages.resolve(lang or self.default_language)

    def not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.entity_label} not found")

    def default_slug(self, draft: EntityDraft, code: str, fields: Dict[str, Optional[str]]) -> str:
        raise NotImplementedError

    def new_row_values(self, draft: EntityDraft) -> Dict[str, Any]:
        return draft.parent_values()

    async def create(self, draft: EntityDraft) -> CreatedEntity:
        entity_id = str(uuid.uuid4())

        image_url = None
        if draft.image is not None:
            image_url = await self._store_image(entity_id, draft.image)

        await self.repository.create(
            {"id": entity_id, "main_image_url": image_url, **self.new_row_values(draft)}
        )

        created_in = []
        for language_id, code in await self.languages.active_languages():
            fields = dict(draft.translations.get(code) or {})
            if not fields.get(self.required_text_field):
                continue
            if not fields.get("slug"):
                fields["slug"] = self.default_slug(draft, code, fields)
            await self.repository.add_translation(entity_id, language_id, fields)
            created_in.append(code)

        logger.info(
            "Created %s %s with translations [%s]",
            self.entity_label.lower(), entity_id, ", ".join(created_in),
        )
        return CreatedEntity(id=entity_id, image_url=image_url)

    async def update(self, entity_id: str, changes: EntityChanges) -> None:
        """Apply supplied fields only.

        ``delete_image`` wins over a new upload. A translation is rewritten as
        a whole (absent fields become null) when any of its fields is sent.
        """
        found, current_image_url = await self.repository.get_image_url(entity_id)
        if not found:
            raise self.not_found()

        values = changes.parent_values()
        if changes.delete_image:
            await self._delete_image(current_image_url)
            values["main_image_url"] = ""
        elif changes.image is not None:
            values["main_image_url"] = await self._store_image(entity_id, changes.image)

        # nothing to write means no updated_at bump either
        if values:
            await self.repository.update(entity_id, values)

        text_fields = self.repository.text_fields
        for language_id, code in await self.languages.active_languages():
            fields = changes.translations.get(code) or {}
            if any(fields.get(name) for name in text_fields):
                await self.repository.upsert_translation(entity_id, language_id, fields)

        logger.info("Updated %s %s", self.entity_label.lower(), entity_id)

    async def delete(self, entity_id: str) -> None:
        found, image_url = await self.repository.get_image_url(entity_id)
        if not found:
            raise self.not_found()

        await self._delete_image(image_url)
        # translation rows are removed by ON DELETE CASCADE
        await self.repository.delete(entity_id)
        logger.info("Deleted %s %s", self.entity_label.lower(), entity_id)

    async def _store_image(self, entity_id: str, image: ImageUpload) -> str:
        if self.blob_store is None:
            raise StoreError("Blob store is not configured")
        return await self.blob_store.put(f"{entity_id}_{image.filename}", image.data, image.content_type)

    async def _delete_image(self, image_url: Optional[str]) -> None:
        name = BlobStore.name_from_url(image_url)
        if name is None:
            return
        if self.blob_store is None:
            raise StoreError("Blob store is not configured")
        await self.blob_store.delete(name)
