from __future__ import annotations

import math
import re
from typing import List

SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
WHITESPACE_RE = re.compile(r"\s+")
NON_WORD_RE = re.compile(r"[^\w]")
VOWELS = "aeiouy"


def split_lines(text: str) -> List[str]:
    """Split on newline characters only, keeping empty lines."""
    return text.split("\n")


def split_sentences(text: str) -> List[str]:
    """Split text on runs of sentence punctuation, dropping blank pieces."""
    return [piece for piece in SENTENCE_SPLIT_RE.split(text) if piece.strip()]


def split_words(text: str) -> List[str]:
    """Split text on whitespace runs, dropping empty pieces."""
    return [piece for piece in WHITESPACE_RE.split(text) if piece]


def count_syllables(word: str) -> int:
    """
    Estimate syllables by counting vowel groups.

    A trailing silent 'e' is dropped when more than one group was found and
    every word counts as at least one syllable, including the empty string.
    """
    if not word:
        return 1

    lowered = word.lower()
    syllables = 0
    previous_was_vowel = False
    for ch in lowered:
        is_vowel = ch in VOWELS
        if is_vowel and not previous_was_vowel:
            syllables += 1
        previous_was_vowel = is_vowel

    if lowered.endswith("e") and syllables > 1:
        syllables -= 1

    return max(1, syllables)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves toward positive infinity instead of to even."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def clamp(value: float, lower: float = 0.0, upper: float = 100.0) -> float:
    return max(lower, min(upper, value))
