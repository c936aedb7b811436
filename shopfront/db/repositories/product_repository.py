from typing import Any, Dict, List, Optional

from sqlalchemy import select

from shopfront.db.models.product import Product, ProductTranslation
from shopfront.db.repositories.translated_repository import TranslatedEntityRepository


class ProductRepository(TranslatedEntityRepository):
    model = Product
    translation_model = ProductTranslation
    parent_key = "product_id"
    text_fields = ("name", "description", "slug")

    def _localized(self, language_id: int):
        return (
            select(
                Product.id,
                Product.sku,
                Product.price,
                Product.main_image_url,
                Product.category,
                Product.status,
                ProductTranslation.name,
                ProductTranslation.description,
                ProductTranslation.slug,
            )
            .join(ProductTranslation, ProductTranslation.product_id == Product.id)
            .where(ProductTranslation.language_id == language_id)
        )

    async def list_for_language(self, language_id: int) -> List[Dict[str, Any]]:
        """Products that have a translation in the language, newest first"""
        result = await self.session.execute(
            self._localized(language_id).order_by(Product.created_at.desc(), Product.id)
        )
        return [dict(row) for row in result.mappings().all()]

    async def get_for_language(self, product_id: str, language_id: int) -> Optional[Dict[str, Any]]:
        result = await self.session.execute(
            self._localized(language_id).where(Product.id == product_id)
        )
        row = result.mappings().one_or_none()
        return dict(row) if row else None
