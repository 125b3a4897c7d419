from __future__ import annotations

from typing import List

from ..config import ReadabilityTargets, Settings
from ..models import ReadabilityScore
from ..textutils import count_syllables, round_half_up, split_sentences, split_words

COMPLEX_WORD_SYLLABLES = 3
COMPLEX_WORD_LIMIT = 10

# Inclusive upper bounds on the Flesch-Kincaid grade.
READING_LEVELS = (
    (5.0, "Elementary"),
    (8.0, "Middle School"),
    (12.0, "High School"),
    (16.0, "College"),
)
TOP_READING_LEVEL = "Graduate"


def flesch_kincaid_grade(words: int, sentences: int, syllables: int) -> float:
    """
    Flesch-Kincaid grade level.

    Text without words scores 0.0. Punctuation-only text (words but no
    sentences) is treated as a single sentence.
    """
    if words == 0:
        return 0.0
    words_per_sentence = words / sentences if sentences else float(words)
    return 0.39 * words_per_sentence + 11.8 * (syllables / words) - 15.59


def reading_level_for(grade: float) -> str:
    for upper, label in READING_LEVELS:
        if grade <= upper:
            return label
    return TOP_READING_LEVEL


def analyze_readability(
    text: str, settings: Settings | None = None
) -> ReadabilityScore:
    """Compute grade level, sentence length and complex-word statistics."""
    targets = settings.readability_targets if settings else ReadabilityTargets()
    sentences = split_sentences(text)
    words = split_words(text)

    syllable_counts = [count_syllables(word) for word in words]
    total_words = len(words)
    total_sentences = len(sentences)

    if not total_words:
        words_per_sentence = 0.0
    elif total_sentences:
        words_per_sentence = total_words / total_sentences
    else:
        words_per_sentence = float(total_words)
    grade = flesch_kincaid_grade(total_words, total_sentences, sum(syllable_counts))
    complex_words = sum(1 for count in syllable_counts if count >= COMPLEX_WORD_SYLLABLES)

    return ReadabilityScore(
        flesch_kincaid=round_half_up(grade, 1),
        average_sentence_length=round_half_up(words_per_sentence, 1),
        average_words_per_sentence=words_per_sentence,
        complex_words=complex_words,
        reading_level=reading_level_for(grade),
        suggestions=tuple(
            _readability_suggestions(grade, words_per_sentence, complex_words, targets)
        ),
    )


def _readability_suggestions(
    grade: float,
    words_per_sentence: float,
    complex_words: int,
    targets: ReadabilityTargets,
) -> List[str]:
    suggestions: List[str] = []
    if grade > targets.target_flesch_kincaid:
        suggestions.append(
            "Consider simplifying language for better readability "
            f"(target: {targets.target_flesch_kincaid:g})"
        )
    if words_per_sentence > targets.max_sentence_length:
        suggestions.append(
            "Break up long sentences to improve clarity "
            f"(max: {targets.max_sentence_length} words)"
        )
    if complex_words > COMPLEX_WORD_LIMIT:
        suggestions.append(
            "Replace complex words with simpler alternatives where possible"
        )
    return suggestions
