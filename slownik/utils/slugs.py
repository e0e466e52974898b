"""
URL slug helpers shared by entries, categories and parts of speech.
"""
import re
import time
from typing import Awaitable, Callable, Optional

_DISALLOWED_CHARS_RE = re.compile(r"[^\w\s-]")
_SEPARATOR_RUN_RE = re.compile(r"[\s_-]+")

FALLBACK_SLUG_PREFIX = "haslo"

SlugExists = Callable[[str], Awaitable[bool]]


def slugify(text: Optional[str]) -> str:
    """
    Turn free text into a lowercase, hyphen-separated identifier.

    Unicode word characters are kept, so "Šichta nocno" becomes "šichta-nocno".
    Returns an empty string when nothing usable is left (e.g. "?!").
    """
    if not text:
        return ""
    slug = text.lower()
    slug = _DISALLOWED_CHARS_RE.sub("", slug)
    slug = _SEPARATOR_RUN_RE.sub("-", slug)
    return slug.strip("-")


def fallback_slug() -> str:
    """Timestamp token used when a text yields no slug at all."""
    return f"{FALLBACK_SLUG_PREFIX}-{int(time.time() * 1000)}"


def slug_or_fallback(*candidates: Optional[str]) -> str:
    """First non-empty slug among the candidates, else a timestamp token."""
    for candidate in candidates:
        slug = slugify(candidate)
        if slug:
            return slug
    return fallback_slug()


async def resolve_unique_slug(candidate: Optional[str], exists: SlugExists) -> str:
    """
    Return a slug derived from ``candidate`` for which ``exists`` is false.

    Probes ``base``, then ``base-2``, ``base-3``... The check is optimistic:
    callers still have to handle a unique violation when they insert.
    """
    base = slug_or_fallback(candidate)
    if not await exists(base):
        return base

    counter = 2
    while True:
        slug = f"{base}-{counter}"
        if not await exists(slug):
            return slug
        counter += 1
