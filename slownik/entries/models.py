import enum

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, Enum, JSON, Index
from sqlalchemy.orm import relationship

from slownik.constants.languages import Language
from slownik.database import Base
from slownik.orm_mixins import TimestampMixin


class EntryStatus(str, enum.Enum):
    """Publication status of a dictionary entry"""
    DRAFT = "DRAFT"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class DictionaryEntry(Base, TimestampMixin):
    """Published bilingual dictionary record"""
    __tablename__ = "dictionary_entries"

    id = Column(Integer, primary_key=True, index=True)
    source_word = Column(String(255), nullable=False)
    source_lang = Column(Enum(Language, name="language"), nullable=False, default=Language.SILESIAN)
    target_word = Column(String(255), nullable=False)
    target_lang = Column(Enum(Language, name="language"), nullable=False, default=Language.POLISH)
    # Nullable for legacy rows; readers derive it from source_word when missing
    slug = Column(String(255), nullable=True, unique=True)
    pronunciation = Column(String(255), nullable=True)
    # Free text, matched against PartOfSpeech.value but not a foreign key
    part_of_speech = Column(String(100), nullable=True)
    notes = Column(Text, nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    status = Column(Enum(EntryStatus, name="entry_status"), nullable=False, default=EntryStatus.DRAFT)
    alternative_translations = Column(JSON, nullable=False, default=list)
    approved_at = Column(DateTime(timezone=True), nullable=True)
    approved_by = Column(String(255), nullable=True)
    submitted_by = Column(String(255), nullable=True)

    # Relationships
    category = relationship("Category", back_populates="entries")
    example_sentences = relationship(
        "ExampleSentence",
        back_populates="entry",
        cascade="all, delete-orphan",
        order_by="ExampleSentence.order",
    )

    __table_args__ = (
        Index("ix_dictionary_entries_status_updated_at", "status", "updated_at"),
        Index("ix_dictionary_entries_source_word", "source_word"),
    )


class ExampleSentence(Base):
    """Usage example owned by exactly one entry"""
    __tablename__ = "example_sentences"

    id = Column(Integer, primary_key=True, index=True)
    entry_id = Column(Integer, ForeignKey("dictionary_entries.id", ondelete="CASCADE"), nullable=False, index=True)
    source_text = Column(Text, nullable=False)
    translated_text = Column(Text, nullable=False)
    context = Column(Text, nullable=True)
    order = Column(Integer, nullable=False, default=1)

    # Relationships
    entry = relationship("DictionaryEntry", back_populates="example_sentences")
