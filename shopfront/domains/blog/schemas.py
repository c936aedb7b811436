from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel

from shopfront.domains.multilingual.commands import EntityChanges, EntityDraft

BLOG_TEXT_FIELDS = ("title", "content", "slug")


@dataclass(kw_only=True)
class BlogPostDraft(EntityDraft):
    # injected from the caller's identity, never read from the form
    author_id: str
    is_published: bool = False

    def parent_values(self) -> Dict[str, Any]:
        return {"author_id": self.author_id, "is_published": self.is_published}


@dataclass(kw_only=True)
class BlogPostChanges(EntityChanges):
    is_published: Optional[bool] = None

    def parent_values(self) -> Dict[str, Any]:
        if self.is_published is None:
            return {}
        return {"is_published": self.is_published}


class BlogPostResponse(BaseModel):
    id: str
    author_id: Optional[str] = None
    author_email: Optional[str] = None
    main_image_url: Optional[str] = None
    published_at: Optional[datetime] = None
    is_published: bool
    title: Optional[str] = None
    content: Optional[str] = None
    slug: Optional[str] = None


class BlogPostCreatedResponse(BaseModel):
    message: str
    post_id: str
    image_url: Optional[str] = None
