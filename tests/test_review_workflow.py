import pytest
from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from slownik.entries.models import DictionaryEntry, EntryStatus
from slownik.entries.service import slug_exists
from slownik.submissions.exceptions import (
    SlugAllocationException,
    SubmissionAlreadyReviewedException,
    SubmissionNotFoundException,
)
from slownik.submissions.models import PublicSubmission, SubmissionStatus
from slownik.submissions.workflow import ReviewWorkflow

from tests.conftest import make_category, make_entry, make_submission


async def _count_entries(db):
    result = await db.execute(select(func.count(DictionaryEntry.id)))
    return result.scalar()


async def _reload_submission(db, submission_id):
    result = await db.execute(
        select(PublicSubmission)
        .where(PublicSubmission.id == submission_id)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one()


async def test_approve_creates_exactly_one_entry(db_session):
    category = await make_category(db_session)
    submission = await make_submission(
        db_session,
        category,
        examples=["Już fajront | Już koniec pracy", "Fajront na dzisiej | Koniec na dziś"],
        notes="Słyszane na grubie\nAlternatywne tłumaczenia: koniec zmiany, fajrant",
        submitter_name="Jan",
        submitter_email="jan@example.com",
        pronunciation="fajront",
        part_of_speech="rzeczownik",
    )

    entry_id = await ReviewWorkflow().approve(submission.id, "admin-1", "Dobre", db_session)

    result = await db_session.execute(
        select(DictionaryEntry)
        .options(selectinload(DictionaryEntry.example_sentences))
        .where(DictionaryEntry.id == entry_id)
        .execution_options(populate_existing=True)
    )
    entry = result.scalar_one()

    assert await _count_entries(db_session) == 1
    assert entry.status == EntryStatus.APPROVED
    assert entry.slug == "fajront"
    assert entry.approved_at is not None
    assert entry.approved_by == "admin-1"
    assert entry.submitted_by == "jan@example.com"
    assert entry.pronunciation == "fajront"
    assert entry.part_of_speech == "rzeczownik"
    assert entry.alternative_translations == ["koniec zmiany", "fajrant"]
    assert [(s.source_text, s.translated_text, s.order) for s in entry.example_sentences] == [
        ("Już fajront", "Już koniec pracy", 1),
        ("Fajront na dzisiej", "Koniec na dziś", 2),
    ]

    reviewed = await _reload_submission(db_session, submission.id)
    assert reviewed.status == SubmissionStatus.APPROVED
    assert reviewed.reviewed_by == "admin-1"
    assert reviewed.review_notes == "Dobre"
    assert reviewed.reviewed_at is not None


async def test_second_review_is_a_conflict_and_changes_nothing(db_session):
    category = await make_category(db_session)
    submission = await make_submission(db_session, category)
    workflow = ReviewWorkflow()
    await workflow.approve(submission.id, "admin-1", None, db_session)

    with pytest.raises(SubmissionAlreadyReviewedException):
        await workflow.approve(submission.id, "admin-2", None, db_session)
    with pytest.raises(SubmissionAlreadyReviewedException):
        await workflow.reject(submission.id, "admin-2", "nie", db_session)

    reviewed = await _reload_submission(db_session, submission.id)
    assert reviewed.status == SubmissionStatus.APPROVED
    assert reviewed.reviewed_by == "admin-1"
    assert await _count_entries(db_session) == 1


async def test_reject_records_review_without_entry(db_session):
    category = await make_category(db_session)
    submission = await make_submission(db_session, category)

    response = await ReviewWorkflow().reject(submission.id, "admin-1", "Duplikat", db_session)

    assert response.status == SubmissionStatus.REJECTED
    assert response.reviewed_by == "admin-1"
    assert response.review_notes == "Duplikat"
    assert response.reviewed_at is not None
    assert await _count_entries(db_session) == 0


async def test_review_of_unknown_submission_is_not_found(db_session):
    workflow = ReviewWorkflow()
    with pytest.raises(SubmissionNotFoundException):
        await workflow.approve(404, "admin-1", None, db_session)
    with pytest.raises(SubmissionNotFoundException):
        await workflow.reject(404, "admin-1", None, db_session)


async def test_approve_picks_next_free_slug(db_session):
    category = await make_category(db_session)
    await make_entry(db_session, category, source_word="fajront", target_word="koniec", slug="fajront")
    await make_entry(db_session, category, source_word="Fajront", target_word="fajrant", slug="fajront-2")
    submission = await make_submission(db_session, category)

    entry_id = await ReviewWorkflow().approve(submission.id, "admin-1", None, db_session)

    entry = await db_session.get(DictionaryEntry, entry_id)
    assert entry.slug == "fajront-3"


async def test_approve_gives_up_after_repeated_collisions(db_session, monkeypatch):
    category = await make_category(db_session)
    await make_entry(db_session, category, source_word="fajront", target_word="koniec", slug="fajront")
    submission = await make_submission(db_session, category)
    submission_id = submission.id

    async def never_taken(db, slug, exclude_id=None):
        return False

    # the probe always reports "free" so every insert hits the unique constraint
    monkeypatch.setattr("slownik.submissions.workflow.slug_exists", never_taken)

    with pytest.raises(SlugAllocationException):
        await ReviewWorkflow(max_attempts=2).approve(submission_id, "admin-1", None, db_session)

    reviewed = await _reload_submission(db_session, submission_id)
    assert reviewed.status == SubmissionStatus.PENDING
    assert await _count_entries(db_session) == 1


async def test_promotion_loses_to_a_concurrent_reject(database, db_session):
    category = await make_category(db_session)
    submission = await make_submission(db_session, category)
    submission_id = submission.id
    workflow = ReviewWorkflow()

    stale = await workflow._get_pending(submission_id, db_session)
    await db_session.commit()

    async with database.sessionmaker() as other_session:
        await workflow.reject(submission_id, "admin-2", "Duplikat", other_session)

    with pytest.raises(SubmissionAlreadyReviewedException):
        await workflow._promote(stale, "admin-1", None, db_session)

    assert await _count_entries(db_session) == 0
    reviewed = await _reload_submission(db_session, submission_id)
    assert reviewed.status == SubmissionStatus.REJECTED
    assert reviewed.reviewed_by == "admin-2"


async def test_approve_retries_after_one_collision(db_session, monkeypatch):
    category = await make_category(db_session)
    await make_entry(db_session, category, source_word="fajront", target_word="koniec", slug="fajront")
    submission = await make_submission(db_session, category)
    submission_id = submission.id
    probes = []

    async def stale_once(db, slug, exclude_id=None):
        probes.append(slug)
        if len(probes) == 1:
            return False
        return await slug_exists(db, slug, exclude_id)

    # the first probe misses the existing row so the first insert collides
    monkeypatch.setattr("slownik.submissions.workflow.slug_exists", stale_once)

    entry_id = await ReviewWorkflow(max_attempts=2).approve(submission_id, "admin-1", None, db_session)

    entry = await db_session.get(DictionaryEntry, entry_id)
    assert entry.slug == "fajront-2"
    assert probes == ["fajront", "fajront", "fajront-2"]
    assert await _count_entries(db_session) == 2
    reviewed = await _reload_submission(db_session, submission_id)
    assert reviewed.status == SubmissionStatus.APPROVED
