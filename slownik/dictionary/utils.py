import unicodedata
from typing import Iterable, List, Tuple

from slownik.constants.languages import POLISH_ALPHABET

# Polish order extended with the Latin letters Polish lacks (q, v, x)
_COLLATION_ORDER = POLISH_ALPHABET.replace("p", "pq").replace("u", "uv").replace("w", "wx")
_COLLATION_INDEX = {letter: position for position, letter in enumerate(_COLLATION_ORDER)}


def _char_key(char: str) -> Tuple[int, int, int]:
    if char in _COLLATION_INDEX:
        return (1, _COLLATION_INDEX[char], 0)
    # Silesian letters (š, ž, č, ô, ŏ...) sort with their base letter
    base = unicodedata.normalize("NFD", char)[0]
    if base in _COLLATION_INDEX:
        return (1, _COLLATION_INDEX[base], 1)
    if char.isalpha():
        return (2, ord(char), 0)
    return (0, ord(char), 0)


def polish_sort_key(text: str) -> List[Tuple[int, int, int]]:
    """Sort key approximating Polish collation, ignoring case"""
    return [_char_key(char) for char in text.strip().lower()]


def extract_initial_letter(text: str) -> str:
    """Upper-cased first character of a word, ``#`` for blank text"""
    trimmed = (text or "").strip()
    if not trimmed:
        return "#"
    return trimmed[0].upper()


def index_letters(words: Iterable[str]) -> List[str]:
    """Distinct initial letters of ``words`` in Polish alphabetical order"""
    return sorted({extract_initial_letter(word) for word in words}, key=polish_sort_key)
