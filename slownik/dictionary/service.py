import logging
from typing import List, Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from slownik.categories.models import Category
from slownik.categories.schemas import CategorySummary
from slownik.constants.languages import Language
from slownik.dictionary.exceptions import PublicEntryNotFoundException, SearchFilterRequiredException
from slownik.dictionary.schemas import (
    DictionaryIndexResponse,
    PublicEntry,
    PublicExampleSentence,
    SearchResponse,
    ShowcaseEntry,
)
from slownik.dictionary.utils import index_letters, polish_sort_key
from slownik.entries.models import DictionaryEntry, EntryStatus, ExampleSentence
from slownik.entries.utils import entry_search_clause, entry_slug
from slownik.utils.slugs import slugify

logger = logging.getLogger(__name__)

INDEX_EXAMPLES_PER_ENTRY = 3

_NEWEST_APPROVED_FIRST = (
    DictionaryEntry.approved_at.desc().nulls_last(),
    DictionaryEntry.updated_at.desc(),
    DictionaryEntry.id.desc(),
)


def _approved_entries():
    return (
        select(DictionaryEntry)
        .options(
            selectinload(DictionaryEntry.category),
            selectinload(DictionaryEntry.example_sentences),
        )
        .where(DictionaryEntry.status == EntryStatus.APPROVED)
    )


def _to_example(sentence: ExampleSentence) -> PublicExampleSentence:
    return PublicExampleSentence(
        source_text=sentence.source_text,
        translated_text=sentence.translated_text,
        context=sentence.context,
    )


def to_public_entry(entry: DictionaryEntry, example_limit: Optional[int] = None) -> PublicEntry:
    sentences = entry.example_sentences
    if example_limit is not None:
        sentences = sentences[:example_limit]
    return PublicEntry(
        id=entry.id,
        slug=entry_slug(entry),
        source_word=entry.source_word,
        target_word=entry.target_word,
        source_lang=entry.source_lang,
        target_lang=entry.target_lang,
        pronunciation=entry.pronunciation,
        part_of_speech=entry.part_of_speech,
        notes=entry.notes,
        alternative_translations=entry.alternative_translations or [],
        category=CategorySummary.model_validate(entry.category),
        example_sentences=[_to_example(sentence) for sentence in sentences],
    )


def to_showcase_entry(entry: DictionaryEntry) -> ShowcaseEntry:
    first_example = entry.example_sentences[0] if entry.example_sentences else None
    return ShowcaseEntry(
        id=entry.id,
        slug=entry_slug(entry),
        source_word=entry.source_word,
        target_word=entry.target_word,
        source_lang=entry.source_lang,
        target_lang=entry.target_lang,
        category=CategorySummary.model_validate(entry.category),
        pronunciation=entry.pronunciation,
        part_of_speech=entry.part_of_speech,
        notes=entry.notes,
        example_sentence=_to_example(first_example) if first_example else None,
    )


class DictionaryService:
    """Read-only access to approved entries for visitors"""

    async def get_index(self, db: AsyncSession) -> DictionaryIndexResponse:
        """All approved entries alphabetically, plus their initial letters"""
        result = await db.execute(_approved_entries())
        entries = sorted(result.scalars().all(), key=lambda entry: polish_sort_key(entry.source_word))
        return DictionaryIndexResponse(
            entries=[to_public_entry(entry, INDEX_EXAMPLES_PER_ENTRY) for entry in entries],
            total=len(entries),
            letters=index_letters(entry.source_word for entry in entries),
        )

    async def get_by_slug(self, slug: str, db: AsyncSession) -> PublicEntry:
        """
        Approved entry by slug.

        Rows created before slugs were stored have none; for those the requested
        slug is compared with ``slugify(source_word)`` across all approved
        entries, which costs one full scan per miss.
        """
        normalized = slug.strip().lower()

        result = await db.execute(_approved_entries().where(DictionaryEntry.slug == normalized))
        entry = result.scalars().first()

        if entry is None:
            result = await db.execute(_approved_entries().order_by(DictionaryEntry.id.asc()))
            entry = next(
                (item for item in result.scalars().all() if slugify(item.source_word) == normalized),
                None,
            )
            if entry is not None:
                logger.debug("Slug %s resolved by fallback scan to entry %s", normalized, entry.id)

        if entry is None:
            raise PublicEntryNotFoundException()
        return to_public_entry(entry)

    async def get_featured(self, db: AsyncSession) -> Optional[ShowcaseEntry]:
        """Most recently approved entry that has at least one example"""
        result = await db.execute(
            _approved_entries()
            .where(DictionaryEntry.example_sentences.any())
            .order_by(*_NEWEST_APPROVED_FIRST)
            .limit(1)
        )
        entry = result.scalars().first()
        return to_showcase_entry(entry) if entry else None

    async def get_recent(self, db: AsyncSession, limit: int = 5) -> List[ShowcaseEntry]:
        result = await db.execute(
            _approved_entries().order_by(*_NEWEST_APPROVED_FIRST).limit(limit)
        )
        return [to_showcase_entry(entry) for entry in result.scalars().all()]

    async def search(
        self,
        db: AsyncSession,
        query: Optional[str] = None,
        lang: Optional[Language] = None,
        category: Optional[str] = None,
        limit: int = 10,
    ) -> SearchResponse:
        """
        Search approved entries

        At least one of ``query``, ``lang`` and ``category`` (a category slug) is required.
        """
        term = (query or "").strip()
        if not term and not lang and not category:
            raise SearchFilterRequiredException()

        statement = _approved_entries()
        if term:
            statement = statement.where(entry_search_clause(term))
        if lang:
            statement = statement.where(
                or_(DictionaryEntry.source_lang == lang, DictionaryEntry.target_lang == lang)
            )
        if category:
            statement = statement.join(Category, DictionaryEntry.category_id == Category.id).where(
                Category.slug == category
            )

        result = await db.execute(statement.order_by(*_NEWEST_APPROVED_FIRST).limit(limit))
        results = [to_public_entry(entry) for entry in result.scalars().all()]
        return SearchResponse(results=results, total=len(results), query=term or None)
