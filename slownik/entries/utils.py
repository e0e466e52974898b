import json
from datetime import datetime
from typing import Iterable, List, Optional

from sqlalchemy import Text, cast, or_

from slownik.entries.models import DictionaryEntry, EntryStatus
from slownik.utils.slugs import slugify


def entry_slug(entry: DictionaryEntry) -> str:
    """Stored slug, or the one derived from the source word for legacy rows"""
    return entry.slug or slugify(entry.source_word)


def next_approved_at(
    status: EntryStatus,
    current: Optional[datetime],
    now: datetime,
) -> Optional[datetime]:
    """
    Approval timestamp after a status change.

    Entering APPROVED keeps an existing timestamp or stamps ``now``; entering
    REJECTED clears it; DRAFT leaves it as it was.
    """
    if status == EntryStatus.APPROVED:
        return current or now
    if status == EntryStatus.REJECTED:
        return None
    return current


def clean_translations(values: Optional[Iterable[str]]) -> List[str]:
    return [value.strip() for value in (values or []) if value and value.strip()]


def alternative_translation_clause(term: str):
    """Exact, case-sensitive membership of ``term`` in the JSON list column"""
    encoded = json.dumps(term, ensure_ascii=False)
    return cast(DictionaryEntry.alternative_translations, Text).contains(encoded, autoescape=True)


def entry_search_clause(term: str):
    """Substring match on either word, or an exact alternative translation"""
    return or_(
        DictionaryEntry.source_word.ilike(f"%{term}%"),
        DictionaryEntry.target_word.ilike(f"%{term}%"),
        alternative_translation_clause(term),
    )
