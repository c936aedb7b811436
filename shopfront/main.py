import logging
import sys
from functools import lru_cache
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from shopfront.api.exception_handlers import setup_exception_handlers
from shopfront.api.router import api_router
from shopfront.core.config import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Console logging with timestamps and module names.

    Level for ``shopfront`` modules comes from settings; chatty third-party
    loggers stay at WARNING.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    logging.getLogger("shopfront").setLevel(log_level)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("botocore").setLevel(logging.WARNING)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application; ``settings`` overrides the environment in tests"""
    _configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="Shopfront",
        description="Multilingual product catalog and blog backend",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        max_age=86400,
    )

    setup_exception_handlers(app)
    app.include_router(api_router)

    # uploaded images for the local backend; the S3 backend serves its own URLs
    if settings.storage_backend == "local":
        app.mount(
            settings.media_url_path,
            StaticFiles(directory=settings.media_root, check_dir=False),
            name="media",
        )

    return app


app = create_app()
