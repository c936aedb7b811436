from shopfront.api.http.health import router as health_router
from shopfront.api.http.auth import router as auth_router
from shopfront.api.http.users import router as users_router
from shopfront.api.http.languages import router as languages_router
from shopfront.api.http.products import router as products_router
from shopfront.api.http.blog import router as blog_router

__all__ = [
    "health_router",
    "auth_router",
    "users_router",
    "languages_router",
    "products_router",
    "blog_router",
]
