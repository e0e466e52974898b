from datetime import datetime
from pydantic import Field, validator
from typing import Optional, List, Literal

from slownik.categories.schemas import CategorySummary
from slownik.constants.languages import Language
from slownik.models import CustomModel, RequestModel
from slownik.submissions.models import SubmissionStatus


class SubmissionExample(RequestModel):
    source_text: str = ""
    translated_text: str = ""
    context: Optional[str] = None


class SubmissionCreate(RequestModel):
    """
    Public word proposal.

    ``target_word`` may hold several comma-separated translations; the first one
    is the primary, the rest are kept as alternatives.
    """
    source_word: str = Field("", max_length=255)
    source_lang: Language = Language.SILESIAN
    target_word: str = Field("", max_length=1000)
    target_lang: Language = Language.POLISH
    pronunciation: Optional[str] = Field(None, max_length=255)
    part_of_speech: Optional[str] = Field(None, max_length=100)
    category_id: Optional[int] = None
    new_category_name: Optional[str] = Field(None, max_length=200)
    example_sentences: List[SubmissionExample] = Field(default_factory=list)
    submitter_name: Optional[str] = Field(None, max_length=255)
    submitter_email: Optional[str] = Field(None, max_length=255)
    notes: Optional[str] = Field(None, max_length=5000)

    @validator("source_word", "target_word")
    def strip_words(cls, v):
        return (v or "").strip()


class SubmissionCreatedResponse(CustomModel):
    success: bool = True
    submission_id: int
    message: str


class SubmissionResponse(CustomModel):
    id: int
    source_word: str
    source_lang: Language
    target_word: str
    target_lang: Language
    pronunciation: Optional[str] = None
    part_of_speech: Optional[str] = None
    category_id: int
    category: Optional[CategorySummary] = None
    example_sentences: List[str] = []
    submitter_name: Optional[str] = None
    submitter_email: Optional[str] = None
    notes: Optional[str] = None
    status: SubmissionStatus
    reviewed_at: Optional[datetime] = None
    reviewed_by: Optional[str] = None
    review_notes: Optional[str] = None
    created_at: Optional[datetime] = None


class SubmissionListResponse(CustomModel):
    submissions: List[SubmissionResponse]
    total: int


class ReviewRequest(RequestModel):
    action: Literal["approve", "reject"]
    review_notes: Optional[str] = None
    admin_id: str = Field(..., max_length=255, description="Reviewer identity")

    @validator("admin_id")
    def admin_id_not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("adminId is required")
        return v


class ApproveResponse(CustomModel):
    success: bool = True
    message: str
    entry_id: int


class RejectResponse(CustomModel):
    success: bool = True
    message: str
    submission: SubmissionResponse
