from fastapi import APIRouter

from shopfront.api.http import (
    auth_router, blog_router, health_router, languages_router, products_router, users_router
)

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(auth_router)
api_router.include_router(products_router)
api_router.include_router(blog_router)
api_router.include_router(languages_router)
api_router.include_router(users_router)
