import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from slownik.categories.models import Category
from slownik.categories.service import CategoryService
from slownik.submissions import constants
from slownik.submissions.exceptions import (
    DuplicateSubmissionException,
    SubmissionValidationException,
)
from slownik.submissions.models import PublicSubmission, SubmissionStatus
from slownik.submissions.schemas import SubmissionCreate, SubmissionResponse
from slownik.submissions.utils import build_submission_notes, encode_example, split_target_words

logger = logging.getLogger(__name__)


def _clean_optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


class SubmissionService:
    """Public intake of word proposals and their admin listing"""

    def __init__(self, category_service: Optional[CategoryService] = None):
        self.category_service = category_service or CategoryService()

    async def _resolve_category(self, data: SubmissionCreate, db: AsyncSession):
        """Returns ``(category, proposed_name)``; the name is set only for free-text categories"""
        if data.category_id is not None:
            category = await db.get(Category, data.category_id)
            if category is None:
                raise SubmissionValidationException(constants.SUBMISSION_INVALID_CATEGORY)
            return category, None

        proposed = (data.new_category_name or "").strip()
        if not proposed:
            raise SubmissionValidationException()

        category, created = await self.category_service.get_or_create_by_name(proposed, db)
        if created:
            logger.info("Category %s created from a public submission", category.slug)
        return category, proposed

    async def create_submission(self, data: SubmissionCreate, db: AsyncSession) -> PublicSubmission:
        """
        Validate and store a proposal as PENDING.

        Raises:
            SubmissionValidationException: missing word, category or example
            DuplicateSubmissionException: same words already pending review
        """
        target_word, alternatives = split_target_words(data.target_word)
        if not data.source_word or not target_word:
            raise SubmissionValidationException()
        if data.category_id is None and not (data.new_category_name or "").strip():
            raise SubmissionValidationException()

        examples = [
            encode_example(example.source_text.strip(), example.translated_text.strip())
            for example in data.example_sentences
            if example.source_text.strip() and example.translated_text.strip()
        ]
        if not examples:
            raise SubmissionValidationException(constants.SUBMISSION_EXAMPLE_REQUIRED)

        category, proposed_category = await self._resolve_category(data, db)

        duplicate = await db.execute(
            select(PublicSubmission.id).where(
                func.lower(PublicSubmission.source_word) == data.source_word.lower(),
                func.lower(PublicSubmission.target_word) == target_word.lower(),
                PublicSubmission.status == SubmissionStatus.PENDING,
            ).limit(1)
        )
        if duplicate.first() is not None:
            raise DuplicateSubmissionException()

        submission = PublicSubmission(
            source_word=data.source_word,
            source_lang=data.source_lang,
            target_word=target_word,
            target_lang=data.target_lang,
            pronunciation=_clean_optional(data.pronunciation),
            part_of_speech=_clean_optional(data.part_of_speech),
            category_id=category.id,
            example_sentences=examples,
            submitter_name=_clean_optional(data.submitter_name),
            submitter_email=_clean_optional(data.submitter_email),
            notes=build_submission_notes(data.notes, proposed_category, alternatives),
            status=SubmissionStatus.PENDING,
        )
        db.add(submission)
        await db.commit()
        await db.refresh(submission)

        logger.info("Submission %s created for %s", submission.id, submission.source_word)
        return submission

    async def list_submissions(
        self,
        db: AsyncSession,
        status: Optional[SubmissionStatus] = None,
        limit: int = constants.DEFAULT_SUBMISSIONS_LIMIT,
    ) -> List[SubmissionResponse]:
        """Newest first, with the category summary"""
        limit = min(limit, constants.MAX_SUBMISSIONS_LIMIT)
        query = select(PublicSubmission).options(selectinload(PublicSubmission.category))
        if status is not None:
            query = query.where(PublicSubmission.status == status)
        result = await db.execute(
            query.order_by(PublicSubmission.created_at.desc(), PublicSubmission.id.desc()).limit(limit)
        )
        return [SubmissionResponse.model_validate(submission) for submission in result.scalars().all()]
