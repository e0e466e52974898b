#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Script to seed categories, parts of speech, sample entries and submissions.

Safe to run repeatedly: rows are matched by slug / value and updated in place.
"""
import sys
import os
import codecs
from datetime import datetime, timedelta, timezone

# Set UTF-8 encoding for Windows console
if sys.platform == "win32":
    sys.stdout = codecs.getwriter("utf-8")(sys.stdout.buffer, "strict")
    sys.stderr = codecs.getwriter("utf-8")(sys.stderr.buffer, "strict")

# Add project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Import all models first to register them with SQLAlchemy
import slownik.models  # This will register all models

from sqlalchemy import create_engine, func
from sqlalchemy.orm import Session
from slownik.categories.models import Category, CategoryType
from slownik.config import get_database_url, settings
from slownik.constants.languages import Language
from slownik.entries.models import DictionaryEntry, EntryStatus, ExampleSentence
from slownik.parts_of_speech.models import PartOfSpeech
from slownik.submissions.models import PublicSubmission, SubmissionStatus
from slownik.submissions.utils import encode_example
from slownik.utils.slugs import slugify


CATEGORIES = [
    ("Górnictwo", "gornictwo", "Terminologia związana z pracą w kopalniach i górnictwem", CategoryType.TRADITIONAL),
    ("Hutnictwo", "hutnictwo", "Słownictwo hutnicze i metalurgiczne", CategoryType.TRADITIONAL),
    ("Inżynieria", "inzynieria", "Pojęcia techniczne z zakresu inżynierii i mechaniki", CategoryType.TRADITIONAL),
    ("Produkcja", "produkcja", "Wyrażenia używane w zakładach produkcyjnych", CategoryType.TRADITIONAL),
    ("Informatyka", "informatyka", "Nowoczesna terminologia IT i cyfrowa", CategoryType.MODERN),
    ("Elektronika", "elektronika", "Słownictwo związane z elektroniką i układami elektrycznymi", CategoryType.MODERN),
    ("Telekomunikacja", "telekomunikacja", "Wyrażenia sieciowe i telekomunikacyjne", CategoryType.MODERN),
]

PARTS_OF_SPEECH = [
    "rzeczownik", "czasownik", "przymiotnik", "przysłówek", "liczebnik", "zaimek",
    "spójnik", "przyimek", "partykuła", "imiesłów", "wykrzyknik",
]

ENTRIES = [
    {
        "source_word": "šichta",
        "target_word": "zmiana robocza",
        "pronunciation": "šixta",
        "notes": "Klasyczne określenie zmiany w kopalni.",
        "category": "gornictwo",
        "alternatives": ["zmiana"],
        "examples": [
            ("Idã na šichtã, musza być na dół za pół godziny.", "Idę na zmianę, muszę być na dole za pół godziny."),
            ("Po nocnej šichty je człowiek spodlony.", "Po nocnej zmianie człowiek jest zmęczony."),
        ],
    },
    {
        "source_word": "pyrlik",
        "target_word": "młotek górniczy",
        "pronunciation": "pyrlik",
        "notes": "Narzędzie do obróbki skał i węgla.",
        "category": "gornictwo",
        "alternatives": ["perlik"],
        "examples": [
            ("Trza naostrzic pyrlik przed robotą.", "Trzeba naostrzyć młotek górniczy przed pracą."),
        ],
    },
    {
        "source_word": "fajront",
        "target_word": "koniec pracy",
        "pronunciation": "fajront",
        "notes": "Popularne określenie zakończenia zmiany.",
        "category": "gornictwo",
        "alternatives": ["koniec zmiany"],
        "examples": [
            ("Już fajront, idymy na wierzch.", "Koniec pracy, wychodzimy na powierzchnię."),
        ],
    },
    {
        "source_word": "huta",
        "target_word": "zakład hutniczy",
        "pronunciation": "huta",
        "notes": "Miejsce, w którym przetapia się metal.",
        "category": "hutnictwo",
        "alternatives": ["stalownia"],
        "examples": [
            ("Mój ojciec robił w hucie przez trzydzieści lot.", "Mój ojciec pracował w hucie przez trzydzieści lat."),
        ],
    },
    {
        "source_word": "krajzyga",
        "target_word": "piła tarczowa",
        "pronunciation": "krajzyga",
        "notes": "Popularna nazwa stołowej piły tarczowej.",
        "category": "inzynieria",
        "alternatives": ["piła stołowa"],
        "examples": [
            ("Pilnuj palców, jak robisz na krajzydze.", "Pilnuj palców, gdy pracujesz na pile tarczowej."),
        ],
    },
    {
        "source_word": "taśma",
        "target_word": "linia produkcyjna",
        "pronunciation": "taśma",
        "notes": "Potoczna nazwa przenośnika taśmowego.",
        "category": "produkcja",
        "alternatives": ["przenośnik"],
        "examples": [
            ("Robota na taśmie je szybka, trza uważać.", "Praca na taśmie jest szybka, trzeba uważać."),
        ],
    },
    {
        "source_word": "komputer",
        "source_lang": Language.POLISH,
        "target_word": "kōmputr",
        "target_lang": Language.SILESIAN,
        "pronunciation": "kōmputr",
        "notes": "Podstawowe słowo używane w branży IT.",
        "category": "informatyka",
        "alternatives": ["maszina licząca"],
        "examples": [
            ("Potrzebujã nowy kōmputr do pracy z grafiką.", "Potrzebuję nowy komputer do pracy z grafiką."),
        ],
    },
    {
        "source_word": "router",
        "source_lang": Language.POLISH,
        "target_word": "ruter",
        "target_lang": Language.SILESIAN,
        "pronunciation": "ruter",
        "notes": "Urządzenie rozdzielające ruch sieciowy w domu lub firmie.",
        "category": "telekomunikacja",
        "alternatives": ["przekaźnik sieciowy"],
        "examples": [
            ("Skōnfiguruj ruter, żeby mioł mocne hasło.", "Skonfiguruj router, aby miał mocne hasło."),
        ],
    },
]

SUBMISSIONS = [
    {
        "source_word": "hašpel",
        "target_word": "kołowrót górniczy",
        "pronunciation": "hašpel",
        "category": "gornictwo",
        "submitter_name": "Jan Kowalski",
        "submitter_email": "jan.kowalski@example.com",
        "examples": [
            ("Hašpel służy do wciągania wozków.", "Kołowrót służy do wciągania wózków."),
        ],
        "notes": "Używane w kopalniach do transportu ludzi lub urobku.",
    },
    {
        "source_word": "serwer",
        "source_lang": Language.POLISH,
        "target_word": "serwer",
        "target_lang": Language.SILESIAN,
        "pronunciation": "serwer",
        "category": "informatyka",
        "submitter_name": "Anna Nowak",
        "submitter_email": "anna.nowak@example.com",
        "examples": [
            ("Serwer obsługuje aplikacje firmowe.", "Serwer obsuguje aplikacyje firmowe."),
        ],
        "notes": "Propozycja terminologii sieciowej.",
    },
]


def seed_categories(session: Session) -> dict:
    for name, slug, description, category_type in CATEGORIES:
        category = session.query(Category).filter(Category.slug == slug).first()
        if category is None:
            category = Category(slug=slug)
            session.add(category)
        category.name = name
        category.description = description
        category.type = category_type
    session.flush()
    print(f"✅ {len(CATEGORIES)} categories ready")
    return {category.slug: category.id for category in session.query(Category).all()}


def seed_parts_of_speech(session: Session) -> None:
    for order, value in enumerate(PARTS_OF_SPEECH, start=1):
        part = session.query(PartOfSpeech).filter(PartOfSpeech.value == value).first()
        if part is None:
            part = PartOfSpeech(value=value)
            session.add(part)
        part.label = value
        part.order = order
    session.flush()
    print(f"✅ {len(PARTS_OF_SPEECH)} parts of speech ready")


def seed_entries(session: Session, category_ids: dict) -> None:
    approved_by = settings.ADMIN_EMAIL or "seed"
    now = datetime.now(timezone.utc)
    for index, data in enumerate(ENTRIES):
        slug = slugify(data["source_word"])
        entry = session.query(DictionaryEntry).filter(DictionaryEntry.slug == slug).first()
        if entry is None:
            entry = DictionaryEntry(slug=slug)
            session.add(entry)
        entry.source_word = data["source_word"]
        entry.source_lang = data.get("source_lang", Language.SILESIAN)
        entry.target_word = data["target_word"]
        entry.target_lang = data.get("target_lang", Language.POLISH)
        entry.pronunciation = data["pronunciation"]
        entry.part_of_speech = "rzeczownik"
        entry.notes = data["notes"]
        entry.category_id = category_ids[data["category"]]
        entry.status = EntryStatus.APPROVED
        entry.alternative_translations = data["alternatives"]
        entry.approved_at = now - timedelta(hours=index)
        entry.approved_by = approved_by
        entry.submitted_by = "seed"
        entry.example_sentences = [
            ExampleSentence(source_text=source, translated_text=translated, order=position)
            for position, (source, translated) in enumerate(data["examples"], start=1)
        ]
    session.flush()
    print(f"✅ Seeded {len(ENTRIES)} dictionary entries")


def seed_submissions(session: Session, category_ids: dict) -> None:
    created = 0
    for data in SUBMISSIONS:
        exists = session.query(PublicSubmission).filter(
            func.lower(PublicSubmission.source_word) == data["source_word"].lower(),
            func.lower(PublicSubmission.target_word) == data["target_word"].lower(),
        ).first()
        if exists:
            continue
        session.add(PublicSubmission(
            source_word=data["source_word"],
            source_lang=data.get("source_lang", Language.SILESIAN),
            target_word=data["target_word"],
            target_lang=data.get("target_lang", Language.POLISH),
            pronunciation=data["pronunciation"],
            part_of_speech="rzeczownik",
            category_id=category_ids[data["category"]],
            example_sentences=[encode_example(source, translated) for source, translated in data["examples"]],
            submitter_name=data["submitter_name"],
            submitter_email=data["submitter_email"],
            notes=data["notes"],
            status=SubmissionStatus.PENDING,
        ))
        created += 1
    session.flush()
    print(f"✅ Prepared {created} sample public submissions")


def main():
    print("🌱 Seeding Śląski Słownik Majsterkowy...")
    try:
        engine = create_engine(get_database_url())
        with Session(engine) as session:
            category_ids = seed_categories(session)
            seed_parts_of_speech(session)
            seed_entries(session, category_ids)
            seed_submissions(session, category_ids)
            session.commit()
        print("🎉 Seeding finished")
    except Exception as e:
        print(f"❌ Seeding failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
