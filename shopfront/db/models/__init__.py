from shopfront.db.models.user import User
from shopfront.db.models.language import Language
from shopfront.db.models.product import Product, ProductTranslation
from shopfront.db.models.blog import BlogPost, BlogPostTranslation

__all__ = [
    "User",
    "Language",
    "Product",
    "ProductTranslation",
    "BlogPost",
    "BlogPostTranslation",
]
