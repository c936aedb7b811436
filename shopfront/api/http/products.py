from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, status

from shopfront.api.deps import get_product_service, get_product_writer
from shopfront.api.http.forms import product_changes_from_form, product_draft_from_form
from shopfront.core.auth import require_admin
from shopfront.domains.catalog.schemas import ProductCreatedResponse, ProductResponse
from shopfront.domains.catalog.services import ProductService
from shopfront.domains.identity.entities import Identity
from shopfront.domains.schemas import MessageResponse

router = APIRouter(tags=["products"])


@router.get("/api/products", response_model=List[ProductResponse])
async def get_products(
    lang: Optional[str] = Query(None, description="Language code, defaults to the site language"),
    product_service: ProductService = Depends(get_product_service),
):
    """Products that have a translation in the requested language"""
    return await product_service.list_products(lang)


@router.get("/api/products/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str,
    lang: Optional[str] = Query(None),
    product_service: ProductService = Depends(get_product_service),
):
    return await product_service.get_product(product_id, lang)


@router.post(
    "/api/admin/products",
    response_model=ProductCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    request: Request,
    _admin: Identity = Depends(require_admin),
    product_service: ProductService = Depends(get_product_writer),
):
    """Create a product from multipart form data.

    Required: ``sku``, ``price``. Optional: ``category``, ``status``,
    ``image`` and ``name_<code>``/``description_<code>``/``slug_<code>``
    for each active language.
    """
    draft = await product_draft_from_form(await request.form())
    created = await product_service.create(draft)
    return ProductCreatedResponse(
        message="Product created successfully",
        product_id=created.id,
        image_url=created.image_url,
    )


@router.put("/api/admin/products/{product_id}", response_model=MessageResponse)
async def update_product(
    product_id: str,
    request: Request,
    _admin: Identity = Depends(require_admin),
    product_service: ProductService = Depends(get_product_writer),
):
    changes = await product_changes_from_form(await request.form())
    await product_service.update(product_id, changes)
    return MessageResponse(message="Product updated successfully")


@router.delete("/api/admin/products/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: str,
    _admin: Identity = Depends(require_admin),
    product_service: ProductService = Depends(get_product_writer),
):
    await product_service.delete(product_id)
    return MessageResponse(message="Product deleted successfully")
