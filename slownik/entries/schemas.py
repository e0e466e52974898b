from datetime import datetime
from pydantic import Field, validator
from typing import Optional, List

from slownik.categories.schemas import CategorySummary
from slownik.constants.languages import Language
from slownik.entries.models import EntryStatus
from slownik.models import CustomModel, RequestModel


class ExampleSentenceResponse(CustomModel):
    id: int
    source_text: str
    translated_text: str
    context: Optional[str] = None
    order: int


class EntryResponse(CustomModel):
    """Full entry as seen by administrators"""
    id: int
    source_word: str
    source_lang: Language
    target_word: str
    target_lang: Language
    slug: Optional[str] = None
    pronunciation: Optional[str] = None
    part_of_speech: Optional[str] = None
    notes: Optional[str] = None
    status: EntryStatus
    category: CategorySummary
    alternative_translations: List[str] = []
    example_sentences: List[ExampleSentenceResponse] = []
    approved_at: Optional[datetime] = None
    approved_by: Optional[str] = None
    submitted_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EntryEnvelope(CustomModel):
    entry: EntryResponse


class ExampleSentencePayload(RequestModel):
    """Existing sentences carry their id; sentences without one are created"""
    id: Optional[int] = None
    source_text: str = ""
    translated_text: str = ""
    context: Optional[str] = None


class EntryUpdate(RequestModel):
    """Full replacement of an entry's editable fields"""
    source_word: str = Field(..., max_length=255)
    source_lang: Language
    target_word: str = Field(..., max_length=255)
    target_lang: Language
    slug: Optional[str] = Field(None, max_length=255)
    pronunciation: Optional[str] = Field(None, max_length=255)
    part_of_speech: Optional[str] = Field(None, max_length=100)
    notes: Optional[str] = None
    category_id: int
    status: EntryStatus
    alternative_translations: List[str] = Field(default_factory=list)
    example_sentences: List[ExampleSentencePayload] = Field(default_factory=list)

    @validator("source_word", "target_word")
    def strip_words(cls, v):
        return v.strip()
