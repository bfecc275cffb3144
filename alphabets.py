# alphabets.py
from __future__ import annotations

from typing import Dict

from errors import AlphabetError

LATIN = "abcdefghijklmnopqrstuvwxyz"
CYRILLIC = "абвгдеёжзийклмнопрстуфхцчшщъыьэюя"

ALPHABETS: Dict[str, str] = {
    "latin":    LATIN,
    "cyrillic": CYRILLIC,
}


def alphabet_for(name: str) -> str:
    """Return the character sequence registered under *name*."""
    try:
        return ALPHABETS[name.strip().lower()]
    except KeyError:
        raise AlphabetError(
            f"Unknown alphabet {name!r}. Expected one of {list(ALPHABETS)}"
        ) from None
