from typing import Optional

from fastapi import APIRouter, Depends, Query, Path
from sqlalchemy.ext.asyncio import AsyncSession

from slownik.constants.languages import Language
from slownik.database import get_db
from slownik.dictionary.dependencies import get_dictionary_service
from slownik.dictionary.schemas import (
    DictionaryIndexResponse,
    EntryDetailResponse,
    FeaturedEntryResponse,
    RecentEntriesResponse,
    SearchResponse,
)
from slownik.dictionary.service import DictionaryService

router = APIRouter(prefix="/dictionary", tags=["Dictionary"])
search_router = APIRouter(tags=["Dictionary"])


@router.get("/index", response_model=DictionaryIndexResponse)
async def get_dictionary_index(
    service: DictionaryService = Depends(get_dictionary_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Alphabetical list of all approved entries with the letters that start them
    """
    return await service.get_index(db)


@router.get("/featured", response_model=FeaturedEntryResponse)
async def get_featured_entry(
    service: DictionaryService = Depends(get_dictionary_service),
    db: AsyncSession = Depends(get_db)
):
    """Latest approved entry with an example sentence, or ``null``"""
    return FeaturedEntryResponse(entry=await service.get_featured(db))


@router.get("/recent", response_model=RecentEntriesResponse)
async def get_recent_entries(
    limit: int = Query(5, ge=1, le=20, description="Number of entries (max 20)"),
    service: DictionaryService = Depends(get_dictionary_service),
    db: AsyncSession = Depends(get_db)
):
    return RecentEntriesResponse(entries=await service.get_recent(db, limit))


@router.get("/{slug}", response_model=EntryDetailResponse)
async def get_entry_by_slug(
    slug: str = Path(..., min_length=1, max_length=255, description="Entry slug"),
    service: DictionaryService = Depends(get_dictionary_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Approved entry by slug; older entries without a stored slug are matched by
    the slug derived from their source word
    """
    return EntryDetailResponse(entry=await service.get_by_slug(slug, db))


@search_router.get("/search", response_model=SearchResponse)
async def search_entries(
    q: Optional[str] = Query(None, max_length=100, description="Search term"),
    lang: Optional[Language] = Query(None, description="SILESIAN or POLISH"),
    category: Optional[str] = Query(None, max_length=200, description="Category slug"),
    limit: int = Query(10, ge=1, le=100, description="Maximum number of results"),
    service: DictionaryService = Depends(get_dictionary_service),
    db: AsyncSession = Depends(get_db)
):
    """
    Search approved entries

    - **q**: substring of the Silesian or Polish word, or an exact alternative translation
    - **lang**: entries with this language on either side
    - **category**: category slug
    """
    return await service.search(db, query=q, lang=lang, category=category, limit=limit)
