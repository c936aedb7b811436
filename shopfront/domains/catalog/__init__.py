from shopfront.domains.catalog.schemas import (
    PRODUCT_TEXT_FIELDS, ProductChanges, ProductCreatedResponse, ProductDraft, ProductResponse
)
from shopfront.domains.catalog.services import ProductService

__all__ = [
    "PRODUCT_TEXT_FIELDS", "ProductChanges", "ProductCreatedResponse", "ProductDraft",
    "ProductResponse", "ProductService",
]
