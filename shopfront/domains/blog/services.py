import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from shopfront.core.errors import ValidationError
from shopfront.db.repositories.blog_repository import BlogPostRepository
from shopfront.domains.blog.schemas import BlogPostDraft
from shopfront.domains.multilingual.commands import CreatedEntity
from shopfront.domains.multilingual.services import MultilingualService


def title_slug(title: str, code: str) -> str:
    """``"Hello  World"``, ``"en"`` -> ``"hello-world-en"``"""
    base = re.sub(r"\s+", "-", title.strip().lower())
    return f"{base}-{code}"


class BlogService(MultilingualService):
    repository_class = BlogPostRepository
    required_text_field = "title"
    entity_label = "Blog post"

    repository: BlogPostRepository

    def default_slug(self, draft: BlogPostDraft, code: str, fields: Dict[str, Optional[str]]) -> str:
        return title_slug(fields["title"], code)

    def new_row_values(self, draft: BlogPostDraft) -> Dict[str, Any]:
        return {**draft.parent_values(), "published_at": datetime.now(timezone.utc)}

    async def create(self, draft: BlogPostDraft) -> CreatedEntity:
        if not draft.author_id:
            raise ValidationError("Author id is required")
        return await super().create(draft)

    async def list_posts(self, lang: Optional[str] = None) -> List[Dict[str, Any]]:
        """Published posts in the language, newest first"""
        language_id = await self.language_id(lang)
        return await self.repository.list_published(language_id)

    async def get_post_by_slug(self, slug: str, lang: Optional[str] = None) -> Dict[str, Any]:
        language_id = await self.language_id(lang)
        post = await self.repository.get_published_by_slug(slug, language_id)
        if post is None:
            raise self.not_found()
        return post
