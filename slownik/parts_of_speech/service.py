from typing import List

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from slownik.entries.models import DictionaryEntry
from slownik.parts_of_speech import constants
from slownik.parts_of_speech.exceptions import (
    PartOfSpeechConflictException,
    PartOfSpeechInUseException,
    PartOfSpeechNotFoundException,
    PartOfSpeechValidationException,
)
from slownik.parts_of_speech.models import PartOfSpeech
from slownik.parts_of_speech.schemas import (
    PartOfSpeechCreate,
    PartOfSpeechResponse,
    PartOfSpeechUpdate,
)
from slownik.utils.slugs import slugify


class PartOfSpeechService:
    """Service for the parts-of-speech registry"""

    async def _get(self, part_id: int, db: AsyncSession) -> PartOfSpeech:
        part = await db.get(PartOfSpeech, part_id)
        if not part:
            raise PartOfSpeechNotFoundException()
        return part

    async def _value_taken(self, value: str, db: AsyncSession, exclude_id: int = None) -> bool:
        query = select(PartOfSpeech.id).where(PartOfSpeech.value == value)
        if exclude_id is not None:
            query = query.where(PartOfSpeech.id != exclude_id)
        result = await db.execute(query)
        return result.first() is not None

    async def list_parts(self, db: AsyncSession) -> List[PartOfSpeechResponse]:
        result = await db.execute(
            select(PartOfSpeech).order_by(PartOfSpeech.order.asc(), PartOfSpeech.label.asc())
        )
        return [PartOfSpeechResponse.model_validate(part) for part in result.scalars().all()]

    async def create_part(self, data: PartOfSpeechCreate, db: AsyncSession) -> PartOfSpeechResponse:
        label = (data.label or "").strip()
        if not label:
            raise PartOfSpeechValidationException(constants.PART_LABEL_REQUIRED)

        value = slugify((data.value or "").strip() or label)
        if not value:
            raise PartOfSpeechValidationException(constants.PART_VALUE_INVALID)

        if await self._value_taken(value, db):
            raise PartOfSpeechConflictException()

        part = PartOfSpeech(label=label, value=value, order=data.order or 0)
        db.add(part)
        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise PartOfSpeechConflictException()
        await db.refresh(part)
        return PartOfSpeechResponse.model_validate(part)

    async def update_part(self, part_id: int, data: PartOfSpeechUpdate, db: AsyncSession) -> PartOfSpeechResponse:
        """
        Partial update. A supplied ``value`` is re-slugified (an empty one falls back
        to the label) and checked for uniqueness against the other rows.
        """
        part = await self._get(part_id, db)
        label = data.label.strip() if data.label is not None else None

        if data.value is not None:
            value = slugify(data.value.strip() or label or part.label)
            if not value:
                raise PartOfSpeechValidationException(constants.PART_VALUE_INVALID)
            if value != part.value and await self._value_taken(value, db, exclude_id=part_id):
                raise PartOfSpeechConflictException()
            part.value = value

        if label is not None:
            if not label:
                raise PartOfSpeechValidationException(constants.PART_LABEL_EMPTY)
            part.label = label

        if data.order is not None:
            part.order = data.order

        try:
            await db.commit()
        except IntegrityError:
            await db.rollback()
            raise PartOfSpeechConflictException()
        await db.refresh(part)
        return PartOfSpeechResponse.model_validate(part)

    async def delete_part(self, part_id: int, db: AsyncSession) -> None:
        """Delete unless an entry's free-text part of speech still equals the value"""
        part = await self._get(part_id, db)

        linked = await db.execute(
            select(func.count(DictionaryEntry.id)).where(DictionaryEntry.part_of_speech == part.value)
        )
        if (linked.scalar() or 0) > 0:
            raise PartOfSpeechInUseException()

        await db.delete(part)
        await db.commit()
