import asyncio

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.pool import NullPool

from slownik.categories.models import Category, CategoryType
from slownik.config import settings
from slownik.constants.languages import Language
from slownik.database import Database
from slownik.entries.models import DictionaryEntry, EntryStatus, ExampleSentence
from slownik.main import create_app
from slownik.submissions.models import PublicSubmission, SubmissionStatus

ADMIN_EMAIL = "Admin@Example.com"
ADMIN_PASSWORD = "pyrlik-123"


@pytest.fixture(autouse=True)
def admin_credentials(monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_EMAIL", ADMIN_EMAIL)
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", ADMIN_PASSWORD)
    monkeypatch.setattr(settings, "ADMIN_SESSION_SECRET", "test-secret")
    monkeypatch.setattr(settings, "AUTO_MIGRATE_ON_STARTUP", False)


def _run_sync(coro):
    # private loop, leaves the thread's current event loop alone
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


@pytest.fixture
def database(tmp_path):
    """File-backed SQLite database; NullPool so each event loop opens its own connections"""
    db = Database(f"sqlite:///{tmp_path / 'slownik.db'}", poolclass=NullPool)
    _run_sync(db.create_all())
    yield db
    _run_sync(db.dispose())


@pytest_asyncio.fixture
async def db_session(database):
    async with database.sessionmaker() as session:
        yield session


@pytest.fixture
def client(database):
    with TestClient(create_app(database)) as test_client:
        yield test_client


@pytest.fixture
def admin_client(client):
    response = client.post("/api/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client


async def make_category(db, name="Górnictwo", slug="gornictwo", category_type=CategoryType.TRADITIONAL):
    category = Category(name=name, slug=slug, type=category_type)
    db.add(category)
    await db.commit()
    return category


async def make_entry(db, category, source_word="šichta", target_word="zmiana robocza",
                     slug="šichta", status=EntryStatus.APPROVED, examples=(), **fields):
    entry = DictionaryEntry(
        source_word=source_word,
        source_lang=Language.SILESIAN,
        target_word=target_word,
        target_lang=Language.POLISH,
        slug=slug,
        category_id=category.id,
        status=status,
        alternative_translations=fields.pop("alternative_translations", []),
        example_sentences=[
            ExampleSentence(source_text=source, translated_text=translated, order=position)
            for position, (source, translated) in enumerate(examples, start=1)
        ],
        **fields,
    )
    db.add(entry)
    await db.commit()
    return entry


async def make_submission(db, category, source_word="fajront", target_word="koniec pracy",
                          examples=("Już fajront | Już koniec pracy",), **fields):
    submission = PublicSubmission(
        source_word=source_word,
        source_lang=Language.SILESIAN,
        target_word=target_word,
        target_lang=Language.POLISH,
        category_id=category.id,
        example_sentences=list(examples),
        status=SubmissionStatus.PENDING,
        **fields,
    )
    db.add(submission)
    await db.commit()
    return submission
