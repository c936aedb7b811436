import logging
from typing import Any, Dict, List, Optional

from shopfront.db.repositories.product_repository import ProductRepository
from shopfront.domains.catalog.schemas import ProductDraft
from shopfront.domains.multilingual.services import MultilingualService

logger = logging.getLogger(__name__)


class ProductService(MultilingualService):
    repository_class = ProductRepository
    required_text_field = "name"
    entity_label = "Product"

    repository: ProductRepository

    def default_slug(self, draft: ProductDraft, code: str, fields: Dict[str, Optional[str]]) -> str:
        return f"{draft.sku}-{code}"

    async def list_products(self, lang: Optional[str] = None) -> List[Dict[str, Any]]:
        language_id = await self.language_id(lang)
        return await self.repository.list_for_language(language_id)

    async def get_product(self, product_id: str, lang: Optional[str] = None) -> Dict[str, Any]:
        language_id = await self.language_id(lang)
        product = await self.repository.get_for_language(product_id, language_id)
        if product is None:
            raise self.not_found()
        return product
