from __future__ import annotations

import re
from typing import List

from ..models import StyleIssue
from ..textutils import split_sentences, split_words
from .base import StyleRule

PASSIVE_VOICE_RE = re.compile(r"\b(is|are|was|were|being|been)\s+\w+ed\b")


class ClickHereRule(StyleRule):
    """Flags non-descriptive "click here" link text."""

    kind = "builtin"
    name = "click-here"

    def check(self, line: str, line_number: int) -> List[StyleIssue]:
        column = line.lower().find("click here")
        if column < 0:
            return []
        return [
            StyleIssue(
                type="formatting",
                message='Avoid using "click here" in links',
                line=line_number,
                column=column,
                severity="warning",
                suggestion="Use descriptive link text that explains what the link does",
            )
        ]


class PassiveVoiceRule(StyleRule):
    """
    Regex heuristic for passive constructions: a form of "to be" followed by
    a word ending in -ed. Irregular participles ("was written") are missed
    and adjectives ("is tired") are flagged.
    """

    kind = "builtin"
    name = "passive-voice"

    def check(self, line: str, line_number: int) -> List[StyleIssue]:
        if not PASSIVE_VOICE_RE.search(line):
            return []
        return [
            StyleIssue(
                type="tone",
                message="Consider using active voice instead of passive voice",
                line=line_number,
                column=0,
                severity="info",
                suggestion="Rewrite in active voice for clarity",
            )
        ]


class SentenceLengthRule(StyleRule):
    """Reports every sentence on the line longer than max_words."""

    kind = "builtin"
    name = "sentence-length"

    def __init__(self, max_words: int = 20) -> None:
        self.max_words = max_words

    def check(self, line: str, line_number: int) -> List[StyleIssue]:
        issues: List[StyleIssue] = []
        for sentence in split_sentences(line):
            word_count = len(split_words(sentence))
            if word_count > self.max_words:
                issues.append(
                    StyleIssue(
                        type="grammar",
                        message=(
                            f"Sentence is too long ({word_count} words, "
                            f"max: {self.max_words})"
                        ),
                        line=line_number,
                        column=0,
                        severity="info",
                        suggestion="Break this sentence into smaller parts",
                    )
                )
        return issues
