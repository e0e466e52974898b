import logging
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from slownik.auth.dependencies import require_admin
from slownik.config import settings
from slownik.database import get_db
from slownik.entries import constants
from slownik.entries.dependencies import get_entry_service
from slownik.entries.models import EntryStatus
from slownik.entries.schemas import EntryEnvelope, EntryResponse, EntryUpdate
from slownik.entries.service import EntryService
from slownik.exceptions import AppException, InternalServerException
from slownik.pagination import PaginatedResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/admin/entries",
    tags=["Admin: Entries"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=PaginatedResponse[EntryResponse])
async def list_entries(
    status: Optional[EntryStatus] = Query(None, description="DRAFT, APPROVED or REJECTED"),
    search: Optional[str] = Query(None, max_length=200, description="Word or alternative translation"),
    page: int = Query(1, ge=1),
    size: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, description=f"Page size, capped at {constants.MAX_ENTRIES_PAGE_SIZE}"),
    service: EntryService = Depends(get_entry_service),
    db: AsyncSession = Depends(get_db)
):
    """
    List entries for the admin dashboard

    - **status**: optional status filter
    - **search**: matches source/target word substrings and exact alternative translations
    - **page** / **size**: pagination, most recently updated first
    """
    return await service.list_entries(db, page=page, size=size, status=status, search=search)


@router.get("/{entry_id}", response_model=EntryEnvelope)
async def get_entry(
    entry_id: int = Path(..., description="Entry ID"),
    service: EntryService = Depends(get_entry_service),
    db: AsyncSession = Depends(get_db)
):
    return EntryEnvelope(entry=await service.get_entry(entry_id, db))


@router.patch("/{entry_id}", response_model=EntryEnvelope)
async def update_entry(
    data: EntryUpdate,
    entry_id: int = Path(..., description="Entry ID"),
    service: EntryService = Depends(get_entry_service),
    db: AsyncSession = Depends(get_db)
):
    """Edit an entry, its status and its example sentences"""
    try:
        return EntryEnvelope(entry=await service.update_entry(entry_id, data, db))
    except AppException:
        raise
    except Exception:
        logger.exception("Admin entry update error")
        raise InternalServerException()
