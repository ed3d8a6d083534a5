"""
Fuzzy line comparison.

Script dumps and spreadsheets are produced independently, so the same
dialogue line can differ in wrapping, spacing and Japanese punctuation.
Both sides go through `normalize` and are then compared with `similar`.
"""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein

from .rules import DIVERGENCE_DIVISOR, FUZZY_STRIP_SYMBOLS, MAX_LENGTH_DIFFERENCE


def _strip_symbols(text: str) -> str:
    for symbol in FUZZY_STRIP_SYMBOLS:
        text = text.replace(symbol, "")
    return text


def normalize(text: str) -> str:
    """
    Remove every occurrence of the fixed symbol set from `text`.

    Stripping is repeated until the text stops changing: removing a space or
    a newline can join a backslash and an `n` into a new escape marker.
    """
    while True:
        stripped = _strip_symbols(text)
        if stripped == text:
            return stripped
        text = stripped


def levenshtein_distance(s1: str, s2: str) -> int:
    """Edit distance with unit costs for insertion, deletion and substitution."""
    return Levenshtein.distance(s1, s2)


def similar(a: str, b: str) -> bool:
    """
    True when two normalized strings denote the same line.

    - lengths differing by more than MAX_LENGTH_DIFFERENCE never match
    - otherwise the edit distance may be at most max(len) // DIVERGENCE_DIVISOR
    """
    if abs(len(a) - len(b)) > MAX_LENGTH_DIFFERENCE:
        return False
    if a == b:
        return True
    allowed = max(len(a), len(b)) // DIVERGENCE_DIVISOR
    # above the cutoff rapidfuzz returns allowed + 1
    return Levenshtein.distance(a, b, score_cutoff=allowed) <= allowed
