from shopfront.db.repositories.user_repository import UserRepository
from shopfront.db.repositories.language_repository import LanguageRepository
from shopfront.db.repositories.product_repository import ProductRepository
from shopfront.db.repositories.blog_repository import BlogPostRepository

__all__ = [
    "UserRepository",
    "LanguageRepository",
    "ProductRepository",
    "BlogPostRepository",
]
