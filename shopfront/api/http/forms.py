"""Multipart form parsing for product and blog writes.

Per-language fields are named ``<field>_<code>`` (``name_en``,
``title_fr``...). Parsing yields command objects; empty translation values
count as not sent.
"""

from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Iterable, Optional

from starlette.datastructures import FormData, UploadFile

from shopfront.core.errors import ValidationError
from shopfront.domains.blog.schemas import BLOG_TEXT_FIELDS, BlogPostChanges, BlogPostDraft
from shopfront.domains.catalog.schemas import PRODUCT_TEXT_FIELDS, ProductChanges, ProductDraft
from shopfront.domains.multilingual.commands import ImageUpload, Translations


def read_text(form: FormData, key: str) -> Optional[str]:
    value = form.get(key)
    if value is None or isinstance(value, UploadFile):
        return None
    return str(value)


def read_flag(form: FormData, key: str) -> Optional[bool]:
    value = read_text(form, key)
    if value is None or value == "":
        return None
    return value.strip().lower() == "true"


def read_price(form: FormData, key: str = "price") -> Optional[Decimal]:
    value = read_text(form, key)
    if value is None or value.strip() == "":
        return None
    try:
        price = Decimal(value.strip())
    except InvalidOperation:
        raise ValidationError("Price must be a number")
    if not price.is_finite():
        raise ValidationError("Price must be a number")
    return price


async def read_image(form: FormData, key: str = "image") -> Optional[ImageUpload]:
    upload = form.get(key)
    # browsers send an empty part when no file was chosen
    if not isinstance(upload, UploadFile) or not upload.filename:
        return None
    data = await upload.read()
    return ImageUpload(
        filename=Path(upload.filename).name,
        data=data,
        content_type=upload.content_type,
    )


def read_translations(form: FormData, fields: Iterable[str]) -> Translations:
    translations: Translations = {}
    for key in form.keys():
        for name in fields:
            prefix = f"{name}_"
            if not key.startswith(prefix) or len(key) == len(prefix):
                continue
            value = read_text(form, key)
            if value:
                translations.setdefault(key[len(prefix):], {})[name] = value
    return translations


async def product_draft_from_form(form: FormData) -> ProductDraft:
    sku = (read_text(form, "sku") or "").strip()
    price = read_price(form)
    if not sku or price is None:
        raise ValidationError("SKU and price are required")

    return ProductDraft(
        sku=sku,
        price=price,
        category=read_text(form, "category"),
        status=read_text(form, "status"),
        image=await read_image(form),
        translations=read_translations(form, PRODUCT_TEXT_FIELDS),
    )


async def product_changes_from_form(form: FormData) -> ProductChanges:
    return ProductChanges(
        price=read_price(form),
        category=read_text(form, "category"),
        status=read_text(form, "status"),
        image=await read_image(form),
        delete_image=read_flag(form, "delete_image") is True,
        translations=read_translations(form, PRODUCT_TEXT_FIELDS),
    )


async def blog_draft_from_form(form: FormData, author_id: str) -> BlogPostDraft:
    return BlogPostDraft(
        author_id=author_id,
        is_published=read_flag(form, "is_published") is True,
        image=await read_image(form),
        translations=read_translations(form, BLOG_TEXT_FIELDS),
    )


async def blog_changes_from_form(form: FormData) -> BlogPostChanges:
    return BlogPostChanges(
        is_published=read_flag(form, "is_published"),
        image=await read_image(form),
        delete_image=read_flag(form, "delete_image") is True,
        translations=read_translations(form, BLOG_TEXT_FIELDS),
    )
