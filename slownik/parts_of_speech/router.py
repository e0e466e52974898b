import logging

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from slownik.auth.dependencies import require_admin
from slownik.database import get_db
from slownik.exceptions import AppException, InternalServerException
from slownik.parts_of_speech.dependencies import get_part_of_speech_service
from slownik.parts_of_speech.schemas import (
    PartOfSpeechCreate,
    PartOfSpeechEnvelope,
    PartOfSpeechListResponse,
    PartOfSpeechUpdate,
)
from slownik.parts_of_speech.service import PartOfSpeechService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/parts-of-speech", tags=["Parts of speech"])
admin_router = APIRouter(
    prefix="/admin/parts-of-speech",
    tags=["Admin: Parts of speech"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=PartOfSpeechListResponse)
async def list_parts_of_speech(
    service: PartOfSpeechService = Depends(get_part_of_speech_service),
    db: AsyncSession = Depends(get_db)
):
    return PartOfSpeechListResponse(parts=await service.list_parts(db))


@admin_router.get("", response_model=PartOfSpeechListResponse)
async def list_parts_of_speech_admin(
    service: PartOfSpeechService = Depends(get_part_of_speech_service),
    db: AsyncSession = Depends(get_db)
):
    return PartOfSpeechListResponse(parts=await service.list_parts(db))


@admin_router.post("", response_model=PartOfSpeechEnvelope, status_code=status.HTTP_201_CREATED)
async def create_part_of_speech(
    data: PartOfSpeechCreate,
    service: PartOfSpeechService = Depends(get_part_of_speech_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Add a part of speech

    - **label**: display label (required)
    - **value**: optional slug-form value, derived from the label when empty
    - **order**: sort position (default 0)
    """
    try:
        return PartOfSpeechEnvelope(part=await service.create_part(data, db))
    except AppException:
        raise
    except Exception:
        logger.exception("Create part of speech error")
        raise InternalServerException()


@admin_router.patch("/{part_id}", response_model=PartOfSpeechEnvelope)
async def update_part_of_speech(
    data: PartOfSpeechUpdate,
    part_id: int = Path(..., description="Part of speech ID"),
    service: PartOfSpeechService = Depends(get_part_of_speech_service),
    db: AsyncSession = Depends(get_db)
):
    try:
        return PartOfSpeechEnvelope(part=await service.update_part(part_id, data, db))
    except AppException:
        raise
    except Exception:
        logger.exception("Update part of speech error")
        raise InternalServerException()


@admin_router.delete("/{part_id}")
async def delete_part_of_speech(
    part_id: int = Path(..., description="Part of speech ID"),
    service: PartOfSpeechService = Depends(get_part_of_speech_service),
    db: AsyncSession = Depends(get_db)
):
    try:
        await service.delete_part(part_id, db)
    except AppException:
        raise
    except Exception:
        logger.exception("Delete part of speech error")
        raise InternalServerException()
    return {"success": True}
