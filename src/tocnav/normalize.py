"""Case- and diacritic-insensitive text canonicalization."""

from __future__ import annotations

import unicodedata

import regex

_DIACRITIC_RE = regex.compile(r"\p{Diacritic}")


def normalize(text: str) -> str:
    """Lowercase text and strip every diacritic, combining or spacing.

    >>> normalize("Éléphant")
    'elephant'
    >>> normalize("x^2")
    'x2'
    """
    return _DIACRITIC_RE.sub("", unicodedata.normalize("NFD", text.lower()))
