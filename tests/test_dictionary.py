from datetime import datetime, timedelta, timezone

import pytest

from slownik.categories.models import CategoryType
from slownik.constants.languages import Language
from slownik.dictionary.exceptions import PublicEntryNotFoundException, SearchFilterRequiredException
from slownik.dictionary.service import DictionaryService
from slownik.dictionary.utils import extract_initial_letter, index_letters, polish_sort_key
from slownik.entries.models import EntryStatus

from tests.conftest import make_category, make_entry


def test_polish_sort_key_orders_diacritics_after_base_letter():
    words = ["żuraw", "zgrzewarka", "łopata", "lutownica", "ślusarz", "szychta", "ćwiek", "cyna"]
    assert sorted(words, key=polish_sort_key) == [
        "cyna", "ćwiek", "lutownica", "łopata", "szychta", "ślusarz", "zgrzewarka", "żuraw",
    ]


def test_index_letters():
    assert index_letters(["šichta", "Łopata", "lina", "", "śruba", "sztygar"]) == ["#", "L", "Ł", "S", "Š", "Ś"]
    assert extract_initial_letter("  ôma") == "Ô"


async def test_get_by_slug_uses_stored_then_derived_slug(db_session):
    category = await make_category(db_session)
    await make_entry(db_session, category, source_word="Pyrlik górniczy", target_word="młotek", slug=None)
    await make_entry(db_session, category, slug="šichta", examples=[("Idã na šichtã", "Idę na zmianę")])
    service = DictionaryService()

    stored = await service.get_by_slug("  ŠICHTA ", db_session)
    assert stored.slug == "šichta"
    assert stored.example_sentences[0].source_text == "Idã na šichtã"

    derived = await service.get_by_slug("pyrlik-górniczy", db_session)
    assert derived.slug == "pyrlik-górniczy"
    assert derived.source_word == "Pyrlik górniczy"


async def test_get_by_slug_ignores_unapproved_entries(db_session):
    category = await make_category(db_session)
    await make_entry(db_session, category, slug="šichta", status=EntryStatus.DRAFT)

    with pytest.raises(PublicEntryNotFoundException):
        await DictionaryService().get_by_slug("šichta", db_session)


async def test_featured_and_recent(db_session):
    category = await make_category(db_session)
    now = datetime.now(timezone.utc)
    await make_entry(
        db_session, category, source_word="huta", target_word="zakład hutniczy", slug="huta",
        approved_at=now - timedelta(hours=2), examples=[("W hucie", "W hucie")],
    )
    await make_entry(
        db_session, category, source_word="pyrlik", target_word="młotek", slug="pyrlik",
        approved_at=now - timedelta(hours=1),
    )
    await make_entry(
        db_session, category, source_word="fajront", target_word="koniec", slug="fajront",
        approved_at=now, status=EntryStatus.REJECTED, examples=[("Fajront", "Koniec")],
    )
    service = DictionaryService()

    featured = await service.get_featured(db_session)
    assert featured.slug == "huta"
    assert featured.example_sentence.source_text == "W hucie"

    recent = await service.get_recent(db_session, limit=5)
    assert [entry.slug for entry in recent] == ["pyrlik", "huta"]
    assert recent[0].example_sentence is None


async def test_featured_is_none_without_examples(db_session):
    category = await make_category(db_session)
    await make_entry(db_session, category)
    assert await DictionaryService().get_featured(db_session) is None


async def test_index_sorted_alphabetically_with_three_examples(db_session):
    category = await make_category(db_session)
    await make_entry(db_session, category, source_word="żuraw", target_word="dźwig", slug="żuraw")
    await make_entry(
        db_session, category, source_word="łopata", target_word="szufla", slug="łopata",
        examples=[("a", "a"), ("b", "b"), ("c", "c"), ("d", "d")],
    )
    await make_entry(db_session, category, source_word="lina", target_word="lina", slug="lina")

    index = await DictionaryService().get_index(db_session)

    assert [entry.source_word for entry in index.entries] == ["lina", "łopata", "żuraw"]
    assert len(index.entries[1].example_sentences) == 3
    assert index.total == 3
    assert index.letters == ["L", "Ł", "Ż"]


async def test_search_filters(db_session):
    mining = await make_category(db_session)
    it = await make_category(db_session, name="Informatyka", slug="informatyka", category_type=CategoryType.MODERN)
    await make_entry(db_session, mining, alternative_translations=["szychta"])
    await make_entry(db_session, it, source_word="router", target_word="ruter", slug="router")
    service = DictionaryService()

    with pytest.raises(SearchFilterRequiredException):
        await service.search(db_session, query="   ")

    by_word = await service.search(db_session, query="ZMIANA")
    assert [entry.slug for entry in by_word.results] == ["šichta"]
    assert by_word.query == "ZMIANA"

    by_alternative = await service.search(db_session, query="szychta")
    assert by_alternative.total == 1

    assert (await service.search(db_session, query="szych")).total == 0

    by_category = await service.search(db_session, category="informatyka")
    assert [entry.source_word for entry in by_category.results] == ["router"]

    by_lang = await service.search(db_session, lang=Language.POLISH)
    assert by_lang.total == 2
