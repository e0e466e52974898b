import enum

from sqlalchemy import Column, Integer, String, Text, Enum
from sqlalchemy.orm import relationship

from slownik.database import Base
from slownik.orm_mixins import TimestampMixin


class CategoryType(str, enum.Enum):
    """Traditional trades vs. modern technology"""
    TRADITIONAL = "TRADITIONAL"
    MODERN = "MODERN"


class Category(Base, TimestampMixin):
    """Thematic category of dictionary entries"""
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(200), nullable=False, unique=True)
    slug = Column(String(200), nullable=False, unique=True)
    description = Column(Text, nullable=True)
    type = Column(Enum(CategoryType, name="category_type"), default=CategoryType.TRADITIONAL, nullable=False)

    # Relationships
    entries = relationship("DictionaryEntry", back_populates="category")
    submissions = relationship("PublicSubmission", back_populates="category")
