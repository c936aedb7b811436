from typing import List

from fastapi import APIRouter, Depends, status

from shopfront.api.deps import get_language_service
from shopfront.core.auth import require_admin
from shopfront.domains.identity.entities import Identity
from shopfront.domains.languages.schemas import LanguageCreate, LanguageResponse, LanguageUpdate
from shopfront.domains.languages.services import LanguageService
from shopfront.domains.schemas import MessageResponse

router = APIRouter(tags=["languages"])


@router.get("/api/languages", response_model=List[LanguageResponse])
async def get_languages(language_service: LanguageService = Depends(get_language_service)):
    return await language_service.list_languages()


@router.post(
    "/api/admin/languages",
    response_model=LanguageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_language(
    data: LanguageCreate,
    _admin: Identity = Depends(require_admin),
    language_service: LanguageService = Depends(get_language_service),
):
    return await language_service.create_language(data)


@router.put("/api/admin/languages/{language_id}", response_model=MessageResponse)
async def update_language(
    language_id: int,
    data: LanguageUpdate,
    _admin: Identity = Depends(require_admin),
    language_service: LanguageService = Depends(get_language_service),
):
    await language_service.update_language(language_id, data)
    return MessageResponse(message="Language updated successfully")


@router.delete("/api/admin/languages/{language_id}", response_model=MessageResponse)
async def delete_language(
    language_id: int,
    _admin: Identity = Depends(require_admin),
    language_service: LanguageService = Depends(get_language_service),
):
    """Delete a language together with every translation written in it"""
    await language_service.delete_language(language_id)
    return MessageResponse(message="Language deleted successfully")
