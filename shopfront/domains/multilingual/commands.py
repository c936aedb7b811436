"""Validated write commands for multilingual entities.

The HTTP layer turns multipart forms into these objects; services never see
the wire format. Translations are keyed by language code, each holding only
the text fields that were actually sent.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

Translations = Dict[str, Dict[str, Optional[str]]]


@dataclass(frozen=True)
class ImageUpload:
    filename: str
    data: bytes
    content_type: Optional[str] = None


@dataclass(kw_only=True)
class EntityDraft:
    """Base for create commands"""

    image: Optional[ImageUpload] = None
    translations: Translations = field(default_factory=dict)

    def parent_values(self) -> Dict[str, Any]:
        raise NotImplementedError


@dataclass(kw_only=True)
class EntityChanges:
    """Base for update commands; ``parent_values`` holds only supplied fields"""

    image: Optional[ImageUpload] = None
    delete_image: bool = False
    translations: Translations = field(default_factory=dict)

    def parent_values(self) -> Dict[str, Any]:
        raise NotImplementedError


@dataclass(frozen=True)
class CreatedEntity:
    id: str
    image_url: Optional[str]
