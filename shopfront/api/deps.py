"""Service providers for route handlers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shopfront.core.auth import get_token_service
from shopfront.core.config import Settings, get_settings
from shopfront.core.db import get_db
from shopfront.core.security import TokenService
from shopfront.domains.blog.services import BlogService
from shopfront.domains.catalog.services import ProductService
from shopfront.domains.identity.services import IdentityService
from shopfront.domains.languages.services import LanguageService
from shopfront.infrastructure.storage import BlobStore, get_blob_store


def get_identity_service(
    db: AsyncSession = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
) -> IdentityService:
    return IdentityService(db, tokens)


def get_language_service(db: AsyncSession = Depends(get_db)) -> LanguageService:
    return LanguageService(db)


def get_product_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> ProductService:
    """Read-side service; writes go through ``get_product_writer``"""
    return ProductService(db, default_language=settings.default_language)


def get_product_writer(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
    blob_store: BlobStore = Depends(get_blob_store),
) -> ProductService:
    return ProductService(db, blob_store, default_language=settings.default_language)


def get_blog_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> BlogService:
    return BlogService(db, default_language=settings.default_language)


def get_blog_writer(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
    blob_store: BlobStore = Depends(get_blob_store),
) -> BlogService:
    return BlogService(db, blob_store, default_language=settings.default_language)
