from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel

from shopfront.domains.multilingual.commands import EntityChanges, EntityDraft

PRODUCT_TEXT_FIELDS = ("name", "description", "slug")


@dataclass(kw_only=True)
class ProductDraft(EntityDraft):
    sku: str
    price: Decimal
    category: Optional[str] = None
    status: Optional[str] = None

    def parent_values(self) -> Dict[str, Any]:
        return {
            "sku": self.sku,
            "price": self.price,
            "category": self.category,
            "status": self.status,
        }


@dataclass(kw_only=True)
class ProductChanges(EntityChanges):
    """None means "not sent"; an empty string is a value"""

    price: Optional[Decimal] = None
    category: Optional[str] = None
    status: Optional[str] = None

    def parent_values(self) -> Dict[str, Any]:
        values = {"price": self.price, "category": self.category, "status": self.status}
        return {k: v for k, v in values.items() if v is not None}


class ProductResponse(BaseModel):
    """A product joined with its translation in the requested language"""
    id: str
    sku: str
    price: float
    main_image_url: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    slug: Optional[str] = None


class ProductCreatedResponse(BaseModel):
    message: str
    product_id: str
    image_url: Optional[str] = None
