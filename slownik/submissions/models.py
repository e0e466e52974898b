import enum

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum, JSON, Index
from sqlalchemy.orm import relationship

from slownik.constants.languages import Language
from slownik.database import Base
from slownik.orm_mixins import CreatedAtMixin


class SubmissionStatus(str, enum.Enum):
    """Review state of a public proposal"""
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class PublicSubmission(Base, CreatedAtMixin):
    """Word proposal sent by a visitor; kept as history after review"""
    __tablename__ = "public_submissions"

    id = Column(Integer, primary_key=True, index=True)
    source_word = Column(String(255), nullable=False)
    source_lang = Column(Enum(Language, name="language"), nullable=False, default=Language.SILESIAN)
    target_word = Column(String(255), nullable=False)
    target_lang = Column(Enum(Language, name="language"), nullable=False, default=Language.POLISH)
    pronunciation = Column(String(255), nullable=True)
    part_of_speech = Column(String(100), nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    # "source | translation" strings
    example_sentences = Column(JSON, nullable=False, default=list)
    submitter_name = Column(String(255), nullable=True)
    submitter_email = Column(String(255), nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(Enum(SubmissionStatus, name="submission_status"), nullable=False, default=SubmissionStatus.PENDING)
    reviewed_at = Column(DateTime(timezone=True), nullable=True)
    reviewed_by = Column(String(255), nullable=True)
    review_notes = Column(Text, nullable=True)

    # Relationships
    category = relationship("Category", back_populates="submissions")

    __table_args__ = (
        Index("ix_public_submissions_status_created_at", "status", "created_at"),
    )
