"""
Helpers that flatten a submission for storage and recover its structure at review time
"""
from typing import Iterable, List, Optional, Tuple

from slownik.submissions.constants import (
    ALTERNATIVES_NOTE_PREFIX,
    EXAMPLE_SEPARATOR,
    NEW_CATEGORY_NOTE_PREFIX,
)


def split_target_words(value: Optional[str]) -> Tuple[str, List[str]]:
    """
    "koniec pracy, fajrant" -> ("koniec pracy", ["fajrant"]).

    Blank tokens are dropped; the primary is "" when nothing is left.
    """
    tokens = [token.strip() for token in (value or "").split(",")]
    tokens = [token for token in tokens if token]
    if not tokens:
        return "", []
    return tokens[0], tokens[1:]


def encode_example(source_text: str, translated_text: str) -> str:
    return f"{source_text}{EXAMPLE_SEPARATOR}{translated_text}"


def parse_example(encoded: str) -> Tuple[str, str]:
    """Split on the first separator; a string without one has no translation"""
    source_text, _, translated_text = encoded.partition(EXAMPLE_SEPARATOR)
    return source_text.strip(), translated_text.strip()


def build_submission_notes(
    notes: Optional[str],
    new_category_name: Optional[str] = None,
    alternatives: Iterable[str] = (),
) -> Optional[str]:
    lines = []
    if notes and notes.strip():
        lines.append(notes.strip())
    if new_category_name:
        lines.append(f"{NEW_CATEGORY_NOTE_PREFIX}{new_category_name}")
    alternatives = list(alternatives)
    if alternatives:
        lines.append(f"{ALTERNATIVES_NOTE_PREFIX} {', '.join(alternatives)}")
    return "\n".join(lines) or None


def parse_alternative_translations(notes: Optional[str]) -> List[str]:
    """Read back the alternatives line written by ``build_submission_notes``"""
    for line in (notes or "").splitlines():
        line = line.strip()
        if line.startswith(ALTERNATIVES_NOTE_PREFIX):
            remainder = line[len(ALTERNATIVES_NOTE_PREFIX):]
            return [item.strip() for item in remainder.split(",") if item.strip()]
    return []
