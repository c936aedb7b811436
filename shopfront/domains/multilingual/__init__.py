from shopfront.domains.multilingual.commands import (
    CreatedEntity, EntityChanges, EntityDraft, ImageUpload, Translations
)
from shopfront.domains.multilingual.services import MultilingualService

__all__ = [
    "CreatedEntity", "EntityChanges", "EntityDraft", "ImageUpload", "Translations",
    "MultilingualService",
]
