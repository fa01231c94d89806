"""Locale-style ordering for member names."""

import unicodedata

# Collation groups: punctuation and symbols, then digits, then letters
_PUNCTUATION, _DIGIT, _LETTER = 0, 1, 2


def _fold(name: str) -> str:
    """Drop accents and case, e.g. ``Élan`` -> ``elan``."""
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def member_sort_key(name: str) -> tuple[tuple[int, str], ...]:
    """Return a sort key comparing names at base strength.

    Case and accents are ignored, so names differing only in those compare
    equal and keep their original relative order under a stable sort.
    Within the punctuation and symbol group characters fall back to code
    point order, so ``$x`` sorts before ``_x``.
    """
    key = []
    for ch in _fold(name):
        if ch.isalpha():
            group = _LETTER
        elif ch.isdigit():
            group = _DIGIT
        else:
            group = _PUNCTUATION
        key.append((group, ch))
    return tuple(key)
