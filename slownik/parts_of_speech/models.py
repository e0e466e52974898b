from sqlalchemy import Column, Integer, String

from slownik.database import Base
from slownik.orm_mixins import TimestampMixin


class PartOfSpeech(Base, TimestampMixin):
    """Parts-of-speech taxonomy; entries refer to ``value`` as plain text"""
    __tablename__ = "parts_of_speech"

    id = Column(Integer, primary_key=True, index=True)
    label = Column(String(100), nullable=False)
    value = Column(String(100), nullable=False, unique=True)
    order = Column(Integer, nullable=False, default=0)
