from shopfront.domains.blog.schemas import (
    BLOG_TEXT_FIELDS, BlogPostChanges, BlogPostCreatedResponse, BlogPostDraft, BlogPostResponse
)
from shopfront.domains.blog.services import BlogService

__all__ = [
    "BLOG_TEXT_FIELDS", "BlogPostChanges", "BlogPostCreatedResponse", "BlogPostDraft",
    "BlogPostResponse", "BlogService",
]
