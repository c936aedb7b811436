"""Shared fixtures: a throwaway SQLite database, local blob storage and an
ASGI client wired to them through dependency overrides."""

from datetime import timedelta
from typing import Dict, Optional

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

import shopfront.db.models  # noqa: F401
from shopfront.core.config import Settings, get_settings
from shopfront.core.db import Base, create_engine_for, get_db
from shopfront.core.security import TokenService, get_password_hash
from shopfront.db.repositories.language_repository import LanguageRepository
from shopfront.db.repositories.user_repository import UserRepository
from shopfront.domains.identity.entities import Role, User
from shopfront.infrastructure.storage import LocalBlobStore, get_blob_store
from shopfront.main import create_app

TEST_JWT_SECRET = "test-jwt-secret-for-testing-only"

ADMIN_EMAIL = "admin@example.com"
EDITOR_EMAIL = "editor@example.com"
PASSWORD = "SecurePassword123!"


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        jwt_secret=TEST_JWT_SECRET,
        default_language="en",
        storage_backend="local",
        media_root=str(tmp_path / "media"),
        media_url_path="/media",
        cors_origins="http://localhost:3000",
    )


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(secret=TEST_JWT_SECRET)


@pytest.fixture
async def test_db_engine(api_settings):
    """File-backed SQLite so every session sees the same data."""
    engine = create_engine_for(api_settings.database_url)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(test_db_engine):
    return async_sessionmaker(test_db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def blob_store(api_settings) -> LocalBlobStore:
    return LocalBlobStore(api_settings.media_root, api_settings.blob_base_url)


@pytest.fixture
def app(api_settings, session_maker, blob_store):
    app = create_app(settings=api_settings)

    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: api_settings
    app.dependency_overrides[get_blob_store] = lambda: blob_store
    return app


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


async def create_user(session: AsyncSession, email: str, role: Role, password: str = PASSWORD) -> User:
    user = User(
        id=f"{role.value}-{email.split('@')[0]}",
        email=email,
        password_hash=get_password_hash(password),
        role=role,
    )
    return await UserRepository(session).create(user)


def bearer(tokens: TokenService, user: User, expires_delta: Optional[timedelta] = None) -> Dict[str, str]:
    token = tokens.issue(user.id, user.email, user.role, expires_delta=expires_delta)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def admin_user(db_session) -> User:
    return await create_user(db_session, ADMIN_EMAIL, Role.admin)


@pytest.fixture
async def editor_user(db_session) -> User:
    return await create_user(db_session, EDITOR_EMAIL, Role.editor)


@pytest.fixture
def admin_headers(tokens, admin_user) -> Dict[str, str]:
    return bearer(tokens, admin_user)


@pytest.fixture
def editor_headers(tokens, editor_user) -> Dict[str, str]:
    return bearer(tokens, editor_user)


@pytest.fixture
async def languages(db_session) -> Dict[str, int]:
    """English and French active, German inactive; maps code to id"""
    repository = LanguageRepository(db_session)
    seeded = {}
    for code, name, is_active in (
        ("en", "English", True),
        ("fr", "French", True),
        ("de", "German", False),
    ):
        language = await repository.create(code, name, is_active)
        seeded[code] = language.id
    return seeded
