from pydantic import Field
from typing import Optional, List

from slownik.models import CustomModel, RequestModel


class PartOfSpeechResponse(CustomModel):
    id: int
    label: str
    value: str
    order: int


class PartOfSpeechCreate(RequestModel):
    label: str = Field(..., max_length=100)
    value: Optional[str] = Field(None, max_length=100, description="Slug-form value; derived from the label when empty")
    order: Optional[int] = None


class PartOfSpeechUpdate(RequestModel):
    label: Optional[str] = Field(None, max_length=100)
    value: Optional[str] = Field(None, max_length=100)
    order: Optional[int] = None


class PartOfSpeechEnvelope(CustomModel):
    part: PartOfSpeechResponse


class PartOfSpeechListResponse(CustomModel):
    parts: List[PartOfSpeechResponse]
