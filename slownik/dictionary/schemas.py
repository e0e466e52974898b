from typing import Optional, List

from slownik.categories.schemas import CategorySummary
from slownik.constants.languages import Language
from slownik.models import CustomModel


class PublicExampleSentence(CustomModel):
    source_text: str
    translated_text: str
    context: Optional[str] = None


class PublicEntry(CustomModel):
    """Approved entry as shown to visitors"""
    id: int
    slug: str
    source_word: str
    target_word: str
    source_lang: Language
    target_lang: Language
    pronunciation: Optional[str] = None
    part_of_speech: Optional[str] = None
    notes: Optional[str] = None
    alternative_translations: List[str] = []
    category: CategorySummary
    example_sentences: List[PublicExampleSentence] = []


class ShowcaseEntry(CustomModel):
    """Entry card for the home page: one example only"""
    id: int
    slug: str
    source_word: str
    target_word: str
    source_lang: Language
    target_lang: Language
    category: CategorySummary
    pronunciation: Optional[str] = None
    part_of_speech: Optional[str] = None
    notes: Optional[str] = None
    example_sentence: Optional[PublicExampleSentence] = None


class DictionaryIndexResponse(CustomModel):
    entries: List[PublicEntry]
    total: int
    letters: List[str]


class EntryDetailResponse(CustomModel):
    entry: PublicEntry


class FeaturedEntryResponse(CustomModel):
    entry: Optional[ShowcaseEntry] = None


class RecentEntriesResponse(CustomModel):
    entries: List[ShowcaseEntry]


class SearchResponse(CustomModel):
    results: List[PublicEntry]
    total: int
    query: Optional[str] = None
