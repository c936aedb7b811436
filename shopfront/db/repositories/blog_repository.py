from typing import Any, Dict, List, Optional

from sqlalchemy import select

from shopfront.db.models.blog import BlogPost, BlogPostTranslation
from shopfront.db.models.user import User
from shopfront.db.repositories.translated_repository import TranslatedEntityRepository


class BlogPostRepository(TranslatedEntityRepository):
    model = BlogPost
    translation_model = BlogPostTranslation
    parent_key = "blog_post_id"
    text_fields = ("title", "content", "slug")

    def _published(self, language_id: int):
        # unpublished posts never leave this query, even by direct slug
        return (
            select(
                BlogPost.id,
                BlogPost.author_id,
                BlogPost.main_image_url,
                BlogPost.published_at,
                BlogPost.is_published,
                BlogPostTranslation.title,
                BlogPostTranslation.content,
                BlogPostTranslation.slug,
                User.email.label("author_email"),
            )
            .join(BlogPostTranslation, BlogPostTranslation.blog_post_id == BlogPost.id)
            .outerjoin(User, User.id == BlogPost.author_id)
            .where(
                BlogPostTranslation.language_id == language_id,
                BlogPost.is_published.is_(True),
            )
        )

    async def list_published(self, language_id: int) -> List[Dict[str, Any]]:
        result = await self.session.execute(
            self._published(language_id).order_by(BlogPost.published_at.desc())
        )
        return [dict(row) for row in result.mappings().all()]

    async def get_published_by_slug(self, slug: str, language_id: int) -> Optional[Dict[str, Any]]:
        result = await self.session.execute(
            self._published(language_id).where(BlogPostTranslation.slug == slug).limit(1)
        )
        row = result.mappings().first()
        return dict(row) if row else None
