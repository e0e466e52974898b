from datetime import datetime
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def datetime_to_iso_str(dt: datetime) -> str:
    """Convert datetime to an ISO-8601 UTC string"""
    if not dt.tzinfo:
        dt = dt.replace(tzinfo=ZoneInfo("UTC"))
    return dt.astimezone(ZoneInfo("UTC")).isoformat()


class CustomModel(BaseModel):
    """Custom base model with global configurations (camelCase on the wire)"""
    model_config = ConfigDict(
        json_encoders={datetime: datetime_to_iso_str},
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CustomModel):
    """Base model for request bodies: unknown fields are rejected"""
    model_config = ConfigDict(extra="forbid")


# Import all SQLAlchemy models to ensure they are registered with Base.metadata
# This is needed for Alembic to detect all models
from slownik.categories.models import Category, CategoryType
from slownik.parts_of_speech.models import PartOfSpeech
from slownik.entries.models import DictionaryEntry, ExampleSentence, EntryStatus
from slownik.submissions.models import PublicSubmission, SubmissionStatus
