from datetime import datetime, timezone

import pytest

from slownik.constants.languages import Language
from slownik.entries.exceptions import EntrySlugConflictException, EntryValidationException
from slownik.entries.models import EntryStatus
from slownik.entries.schemas import EntryUpdate, ExampleSentencePayload
from slownik.entries.service import EntryService
from slownik.entries.utils import next_approved_at

from tests.conftest import make_category, make_entry


def _update(category_id, status=EntryStatus.DRAFT, **overrides):
    data = dict(
        source_word="šichta",
        source_lang=Language.SILESIAN,
        target_word="zmiana robocza",
        target_lang=Language.POLISH,
        category_id=category_id,
        status=status,
    )
    data.update(overrides)
    return EntryUpdate(**data)


def test_next_approved_at_rules():
    earlier = datetime(2024, 5, 1, tzinfo=timezone.utc)
    now = datetime(2024, 6, 1, tzinfo=timezone.utc)

    assert next_approved_at(EntryStatus.APPROVED, None, now) == now
    assert next_approved_at(EntryStatus.APPROVED, earlier, now) == earlier
    assert next_approved_at(EntryStatus.REJECTED, earlier, now) is None
    assert next_approved_at(EntryStatus.DRAFT, earlier, now) == earlier
    assert next_approved_at(EntryStatus.DRAFT, None, now) is None


async def test_status_transitions_maintain_approved_at(db_session):
    category = await make_category(db_session)
    entry = await make_entry(db_session, category, status=EntryStatus.DRAFT)
    service = EntryService()

    approved = await service.update_entry(entry.id, _update(category.id, EntryStatus.APPROVED), db_session)
    assert approved.approved_at is not None

    approved_again = await service.update_entry(entry.id, _update(category.id, EntryStatus.APPROVED), db_session)
    assert approved_again.approved_at == approved.approved_at

    drafted = await service.update_entry(entry.id, _update(category.id, EntryStatus.DRAFT), db_session)
    assert drafted.approved_at == approved.approved_at

    rejected = await service.update_entry(entry.id, _update(category.id, EntryStatus.REJECTED), db_session)
    assert rejected.approved_at is None


async def test_update_reconciles_example_sentences(db_session):
    category = await make_category(db_session)
    entry = await make_entry(
        db_session,
        category,
        examples=[("jedno", "jeden"), ("dwa", "dwa"), ("trzy", "trzy")],
    )
    service = EntryService()
    first, second, third = (await service.get_entry(entry.id, db_session)).example_sentences

    payload = _update(
        category.id,
        EntryStatus.APPROVED,
        example_sentences=[
            ExampleSentencePayload(id=second.id, source_text=" dwa! ", translated_text="dwa!"),
            ExampleSentencePayload(source_text="nowe", translated_text="nowe", context="gruba"),
            ExampleSentencePayload(source_text="   ", translated_text="pominięte"),
            ExampleSentencePayload(id=first.id, source_text="jedno", translated_text="jeden"),
        ],
    )
    updated = await service.update_entry(entry.id, payload, db_session)

    sentences = updated.example_sentences
    assert [s.order for s in sentences] == [1, 2, 3]
    assert [s.source_text for s in sentences] == ["dwa!", "nowe", "jedno"]
    assert sentences[0].id == second.id
    assert sentences[2].id == first.id
    assert sentences[1].context == "gruba"
    assert third.id not in {s.id for s in sentences}


async def test_update_cleans_translations_and_derives_slug(db_session):
    category = await make_category(db_session)
    entry = await make_entry(db_session, category, slug=None)

    updated = await EntryService().update_entry(
        entry.id,
        _update(
            category.id,
            source_word="  Šichta nocno ",
            slug="?!",
            alternative_translations=[" zmiana ", "", "  "],
        ),
        db_session,
    )

    assert updated.source_word == "Šichta nocno"
    assert updated.slug == "šichta-nocno"
    assert updated.alternative_translations == ["zmiana"]


async def test_update_rejects_slug_of_another_entry(db_session):
    category = await make_category(db_session)
    await make_entry(db_session, category, source_word="šichta", slug="šichta")
    other = await make_entry(db_session, category, source_word="pyrlik", target_word="młotek", slug="pyrlik")

    with pytest.raises(EntrySlugConflictException):
        await EntryService().update_entry(
            other.id,
            _update(category.id, source_word="pyrlik", target_word="młotek", slug="Šichta"),
            db_session,
        )


async def test_update_keeps_own_slug(db_session):
    category = await make_category(db_session)
    entry = await make_entry(db_session, category, source_word="pyrlik", target_word="młotek", slug="pyrlik")

    updated = await EntryService().update_entry(
        entry.id,
        _update(category.id, source_word="pyrlik", target_word="młotek górniczy"),
        db_session,
    )
    assert updated.slug == "pyrlik"
    assert updated.target_word == "młotek górniczy"


async def test_update_requires_words_and_existing_category(db_session):
    category = await make_category(db_session)
    entry = await make_entry(db_session, category)
    service = EntryService()

    with pytest.raises(EntryValidationException):
        await service.update_entry(entry.id, _update(category.id, target_word="   "), db_session)
    with pytest.raises(EntryValidationException):
        await service.update_entry(entry.id, _update(category.id + 100), db_session)


async def test_list_entries_filters_and_caps_page_size(db_session):
    category = await make_category(db_session)
    await make_entry(db_session, category, alternative_translations=["szychta"])
    await make_entry(
        db_session, category, source_word="pyrlik", target_word="młotek", slug="pyrlik",
        status=EntryStatus.DRAFT,
    )
    service = EntryService()

    by_alternative = await service.list_entries(db_session, search="szychta")
    assert [item.source_word for item in by_alternative.items] == ["šichta"]

    drafts = await service.list_entries(db_session, status=EntryStatus.DRAFT)
    assert [item.source_word for item in drafts.items] == ["pyrlik"]

    everything = await service.list_entries(db_session, size=1000)
    assert everything.size == 200
    assert everything.total == 2
