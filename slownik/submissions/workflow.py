"""
Review of public submissions: approval promotes a submission to a dictionary entry,
rejection only closes it. Both transitions start from PENDING and are final.
"""
import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from slownik.entries.models import DictionaryEntry, EntryStatus, ExampleSentence
from slownik.entries.service import slug_exists
from slownik.submissions import constants
from slownik.submissions.exceptions import (
    SlugAllocationException,
    SubmissionAlreadyReviewedException,
    SubmissionNotFoundException,
)
from slownik.submissions.models import PublicSubmission, SubmissionStatus
from slownik.submissions.schemas import SubmissionResponse
from slownik.submissions.utils import parse_alternative_translations, parse_example
from slownik.utils.slugs import resolve_unique_slug

logger = logging.getLogger(__name__)


def _close_pending(submission_id: int, status: SubmissionStatus, reviewer: str,
                   review_notes: Optional[str], reviewed_at: datetime):
    """UPDATE that only matches while the submission is still PENDING"""
    return (
        update(PublicSubmission)
        .where(
            PublicSubmission.id == submission_id,
            PublicSubmission.status == SubmissionStatus.PENDING,
        )
        .values(
            status=status,
            reviewed_at=reviewed_at,
            reviewed_by=reviewer,
            review_notes=review_notes,
        )
        .execution_options(synchronize_session=False)
    )


def build_entry(submission: PublicSubmission, slug: str, reviewer: str, now: datetime) -> DictionaryEntry:
    """Approved entry carrying the submission's words, examples and alternatives"""
    sentences = []
    for position, encoded in enumerate(submission.example_sentences or [], start=1):
        source_text, translated_text = parse_example(encoded)
        sentences.append(ExampleSentence(
            source_text=source_text,
            translated_text=translated_text,
            context=None,
            order=position,
        ))

    return DictionaryEntry(
        source_word=submission.source_word,
        source_lang=submission.source_lang,
        target_word=submission.target_word,
        target_lang=submission.target_lang,
        slug=slug,
        pronunciation=submission.pronunciation,
        part_of_speech=submission.part_of_speech,
        category_id=submission.category_id,
        status=EntryStatus.APPROVED,
        alternative_translations=parse_alternative_translations(submission.notes),
        approved_at=now,
        approved_by=reviewer,
        submitted_by=submission.submitter_email or submission.submitter_name,
        example_sentences=sentences,
    )


class ReviewWorkflow:
    """Approve or reject PENDING submissions"""

    def __init__(self, max_attempts: int = constants.MAX_APPROVE_ATTEMPTS):
        self.max_attempts = max_attempts

    async def _get_submission(self, submission_id: int, db: AsyncSession) -> PublicSubmission:
        result = await db.execute(
            select(PublicSubmission)
            .options(selectinload(PublicSubmission.category))
            .where(PublicSubmission.id == submission_id)
            .execution_options(populate_existing=True)
        )
        submission = result.scalar_one_or_none()
        if not submission:
            raise SubmissionNotFoundException()
        return submission

    async def _get_pending(self, submission_id: int, db: AsyncSession) -> PublicSubmission:
        submission = await self._get_submission(submission_id, db)
        if submission.status != SubmissionStatus.PENDING:
            raise SubmissionAlreadyReviewedException()
        return submission

    async def _promote(self, submission: PublicSubmission, reviewer: str,
                       review_notes: Optional[str], db: AsyncSession) -> int:
        now = datetime.now(timezone.utc)

        async def taken(candidate: str) -> bool:
            return await slug_exists(db, candidate)

        slug = await resolve_unique_slug(submission.source_word, taken)
        entry = build_entry(submission, slug, reviewer, now)
        db.add(entry)
        await db.flush()

        closed = await db.execute(
            _close_pending(submission.id, SubmissionStatus.APPROVED, reviewer, review_notes, now)
        )
        if closed.rowcount != 1:
            # another reviewer got there first
            await db.rollback()
            raise SubmissionAlreadyReviewedException()

        await db.commit()
        return entry.id

    async def approve(self, submission_id: int, reviewer: str, review_notes: Optional[str],
                      db: AsyncSession) -> int:
        """
        Create the dictionary entry for a PENDING submission and mark it APPROVED.

        Entry insert and status change share one transaction. A slug taken by a
        concurrent writer between probe and insert rolls everything back and the
        whole promotion is retried, up to ``max_attempts`` times.

        Returns:
            id of the new entry

        Raises:
            SubmissionNotFoundException: no such submission
            SubmissionAlreadyReviewedException: not PENDING (anymore)
            SlugAllocationException: retries exhausted
        """
        for attempt in range(1, self.max_attempts + 1):
            submission = await self._get_pending(submission_id, db)
            try:
                entry_id = await self._promote(submission, reviewer, review_notes, db)
            except IntegrityError:
                await db.rollback()
                logger.warning(
                    "Approval of submission %s collided on insert (attempt %s/%s)",
                    submission_id, attempt, self.max_attempts,
                )
                continue

            logger.info("Submission %s approved by %s as entry %s", submission_id, reviewer, entry_id)
            return entry_id

        raise SlugAllocationException()

    async def reject(self, submission_id: int, reviewer: str, review_notes: Optional[str],
                     db: AsyncSession) -> SubmissionResponse:
        """Mark a PENDING submission REJECTED; no entry is created"""
        closed = await db.execute(
            _close_pending(
                submission_id,
                SubmissionStatus.REJECTED,
                reviewer,
                review_notes,
                datetime.now(timezone.utc),
            )
        )
        if closed.rowcount != 1:
            await db.rollback()
            # tells "missing" from "already reviewed"
            await self._get_pending(submission_id, db)
            raise SubmissionAlreadyReviewedException()

        await db.commit()
        logger.info("Submission %s rejected by %s", submission_id, reviewer)
        return SubmissionResponse.model_validate(await self._get_submission(submission_id, db))
