"""
Name collation for display ordering.

Project names are compared the way a human reads them: case and accents are
ignored, so "alpha", "Alpha" and "Álpha" collate equal. Python's default
string ordering is code-point based ("B" < "a"), which is why names are
never compared raw.
"""

from __future__ import annotations

import unicodedata


def collation_key(name: str) -> str:
    """Base-letter key: NFKD-decomposed, combining marks dropped, casefolded."""
    decomposed = unicodedata.normalize('NFKD', name)
    base = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold()


def compare_names(a: str, b: str) -> int:
    """Three-way comparison of two names under collation_key."""
    key_a = collation_key(a)
    key_b = collation_key(b)
    return (key_a > key_b) - (key_a < key_b)
