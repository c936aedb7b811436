from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, status

from shopfront.api.deps import get_blog_service, get_blog_writer
from shopfront.api.http.forms import blog_changes_from_form, blog_draft_from_form
from shopfront.core.auth import require_editor
from shopfront.domains.blog.schemas import BlogPostCreatedResponse, BlogPostResponse
from shopfront.domains.blog.services import BlogService
from shopfront.domains.identity.entities import Identity
from shopfront.domains.schemas import MessageResponse

router = APIRouter(tags=["blog"])


@router.get("/api/blog", response_model=List[BlogPostResponse])
async def get_blog_posts(
    lang: Optional[str] = Query(None),
    blog_service: BlogService = Depends(get_blog_service),
):
    return await blog_service.list_posts(lang)


@router.get("/api/blog/{slug}", response_model=BlogPostResponse)
async def get_blog_post(
    slug: str,
    lang: Optional[str] = Query(None),
    blog_service: BlogService = Depends(get_blog_service),
):
    """A published post by its slug in the requested language"""
    return await blog_service.get_post_by_slug(slug, lang)


@router.post(
    "/api/admin/blog",
    response_model=BlogPostCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_blog_post(
    request: Request,
    editor: Identity = Depends(require_editor),
    blog_service: BlogService = Depends(get_blog_writer),
):
    draft = await blog_draft_from_form(await request.form(), author_id=editor.user_id)
    created = await blog_service.create(draft)
    return BlogPostCreatedResponse(
        message="Blog post created successfully",
        post_id=created.id,
        image_url=created.image_url,
    )


@router.put("/api/admin/blog/{post_id}", response_model=MessageResponse)
async def update_blog_post(
    post_id: str,
    request: Request,
    _editor: Identity = Depends(require_editor),
    blog_service: BlogService = Depends(get_blog_writer),
):
    changes = await blog_changes_from_form(await request.form())
    await blog_service.update(post_id, changes)
    return MessageResponse(message="Blog post updated successfully")


@router.delete("/api/admin/blog/{post_id}", response_model=MessageResponse)
async def delete_blog_post(
    post_id: str,
    _editor: Identity = Depends(require_editor),
    blog_service: BlogService = Depends(get_blog_writer),
):
    await blog_service.delete(post_id)
    return MessageResponse(message="Blog post deleted successfully")
