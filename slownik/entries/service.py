"""
Service layer for administrator access to dictionary entries
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from slownik.categories.models import Category
from slownik.entries import constants
from slownik.entries.exceptions import (
    EntryNotFoundException,
    EntrySlugConflictException,
    EntryValidationException,
)
from slownik.entries.models import DictionaryEntry, EntryStatus, ExampleSentence
from slownik.entries.schemas import EntryResponse, EntryUpdate, ExampleSentencePayload
from slownik.entries.utils import clean_translations, entry_search_clause, next_approved_at
from slownik.pagination import PaginatedResponse, get_offset, paginate
from slownik.utils.slugs import slug_or_fallback

logger = logging.getLogger(__name__)

ENTRY_LOAD_OPTIONS = (
    selectinload(DictionaryEntry.category),
    selectinload(DictionaryEntry.example_sentences),
)


async def slug_exists(db: AsyncSession, slug: str, exclude_id: Optional[int] = None) -> bool:
    """True when another entry already stores ``slug``"""
    query = select(DictionaryEntry.id).where(DictionaryEntry.slug == slug)
    if exclude_id is not None:
        query = query.where(DictionaryEntry.id != exclude_id)
    result = await db.execute(query.limit(1))
    return result.first() is not None


def _clean_optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


def _clean_sentences(sentences: List[ExampleSentencePayload]) -> List[ExampleSentencePayload]:
    cleaned = []
    for sentence in sentences:
        source_text = (sentence.source_text or "").strip()
        translated_text = (sentence.translated_text or "").strip()
        if not source_text or not translated_text:
            continue
        cleaned.append(sentence.model_copy(update={
            "source_text": source_text,
            "translated_text": translated_text,
            "context": _clean_optional(sentence.context),
        }))
    return cleaned


class EntryService:
    """Service for entry listing and editing"""

    async def _load_entry(self, entry_id: int, db: AsyncSession) -> DictionaryEntry:
        result = await db.execute(
            select(DictionaryEntry)
            .options(*ENTRY_LOAD_OPTIONS)
            .where(DictionaryEntry.id == entry_id)
            .execution_options(populate_existing=True)
        )
        entry = result.scalar_one_or_none()
        if not entry:
            raise EntryNotFoundException()
        return entry

    async def list_entries(
        self,
        db: AsyncSession,
        page: int = 1,
        size: int = constants.MAX_ENTRIES_PAGE_SIZE,
        status: Optional[EntryStatus] = None,
        search: Optional[str] = None,
    ) -> PaginatedResponse[EntryResponse]:
        """
        Entries filtered by status and/or a search term, most recently updated first.

        The page size is capped at ``MAX_ENTRIES_PAGE_SIZE`` whatever the caller asks for.
        """
        size = min(size, constants.MAX_ENTRIES_PAGE_SIZE)
        conditions = []
        if status is not None:
            conditions.append(DictionaryEntry.status == status)
        term = (search or "").strip()
        if term:
            conditions.append(entry_search_clause(term))

        count_result = await db.execute(
            select(func.count(DictionaryEntry.id)).where(*conditions)
        )
        total = count_result.scalar() or 0

        result = await db.execute(
            select(DictionaryEntry)
            .options(*ENTRY_LOAD_OPTIONS)
            .where(*conditions)
            .order_by(DictionaryEntry.updated_at.desc(), DictionaryEntry.id.desc())
            .offset(get_offset(page, size))
            .limit(size)
        )
        items = [EntryResponse.model_validate(entry) for entry in result.scalars().all()]
        return paginate(items, total, page, size)

    async def get_entry(self, entry_id: int, db: AsyncSession) -> EntryResponse:
        return EntryResponse.model_validate(await self._load_entry(entry_id, db))

    async def update_entry(self, entry_id: int, data: EntryUpdate, db: AsyncSession) -> EntryResponse:
        """
        Replace an entry's fields and reconcile its example sentences.

        Sentences with a known id are updated, ones without an id are created, the
        rest are deleted; ``order`` is renumbered from 1 in payload order.

        Raises:
            EntryValidationException: missing words or unknown category
            EntryNotFoundException: no such entry
            EntrySlugConflictException: slug used by another entry
        """
        if not data.source_word or not data.target_word:
            raise EntryValidationException()

        entry = await self._load_entry(entry_id, db)

        if await db.get(Category, data.category_id) is None:
            raise EntryValidationException(constants.ENTRY_INVALID_CATEGORY)

        requested_slug = slug_or_fallback((data.slug or "").strip() or data.source_word, data.source_word)
        if requested_slug != entry.slug and await slug_exists(db, requested_slug, exclude_id=entry.id):
            raise EntrySlugConflictException()

        previous_status = entry.status
        entry.source_word = data.source_word
        entry.source_lang = data.source_lang
        entry.target_word = data.target_word
        entry.target_lang = data.target_lang
        entry.slug = requested_slug
        entry.pronunciation = _clean_optional(data.pronunciation)
        entry.part_of_speech = _clean_optional(data.part_of_speech)
        entry.notes = _clean_optional(data.notes)
        entry.category_id = data.category_id
        entry.status = data.status
        entry.alternative_translations = clean_translations(data.alternative_translations)
        entry.approved_at = next_approved_at(data.status, entry.approved_at, datetime.now(timezone.utc))

        existing = {sentence.id: sentence for sentence in entry.example_sentences}
        reconciled = []
        for position, payload in enumerate(_clean_sentences(data.example_sentences), start=1):
            sentence = existing.pop(payload.id, None) if payload.id is not None else None
            if sentence is None:
                sentence = ExampleSentence()
            sentence.source_text = payload.source_text
            sentence.translated_text = payload.translated_text
            sentence.context = payload.context
            sentence.order = position
            reconciled.append(sentence)
        # sentences left in ``existing`` are orphaned and deleted on flush
        entry.example_sentences = reconciled

        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            logger.warning("Slug collision while updating entry %s (%s)", entry_id, requested_slug)
            raise EntrySlugConflictException()

        if previous_status != data.status:
            logger.info("Entry %s status %s -> %s", entry_id, previous_status.value, data.status.value)

        return EntryResponse.model_validate(await self._load_entry(entry_id, db))
