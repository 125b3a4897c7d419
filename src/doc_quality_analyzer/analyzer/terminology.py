from __future__ import annotations

import re
from bisect import bisect_right
from typing import Dict, List

from ..config import DEFAULT_GLOSSARY, GlossaryTerm, Settings
from ..models import TermOccurrence, TerminologyConsistency, TerminologyIssue
from ..textutils import NON_WORD_RE

TOKEN_RE = re.compile(r"\S+")
WORD_CHAR_RE = re.compile(r"\w")
MIN_TERM_LENGTH = 3
INCONSISTENCY_PENALTY = 10


def analyze_terminology(
    text: str, settings: Settings | None = None
) -> TerminologyConsistency:
    """Find glossary terms and other words used with more than one spelling."""
    glossary = settings.glossary if settings else DEFAULT_GLOSSARY
    line_starts = _line_starts(text)

    inconsistencies: List[TerminologyIssue] = []
    for entry in glossary:
        issue = _check_glossary_entry(text, entry, line_starts)
        if issue is not None:
            inconsistencies.append(issue)
    inconsistencies.extend(_check_capitalization(text, line_starts))

    return TerminologyConsistency(
        score=max(0, 100 - len(inconsistencies) * INCONSISTENCY_PENALTY),
        inconsistencies=tuple(inconsistencies),
        glossary=tuple(glossary),
    )


def _check_glossary_entry(
    text: str, entry: GlossaryTerm, line_starts: List[int]
) -> TerminologyIssue | None:
    found: Dict[str, TermOccurrence] = {}
    for variation in (entry.term, *entry.alternatives):
        if not variation:
            continue
        pattern = re.compile(rf"\b{re.escape(variation)}\b", re.IGNORECASE)
        for match in pattern.finditer(text):
            literal = match.group(0)
            if literal not in found:
                found[literal] = _occurrence(text, literal, match.start(), line_starts)

    if len(found) < 2:
        return None
    return TerminologyIssue(
        term=entry.term,
        alternatives=tuple(found),
        occurrences=tuple(found.values()),
        suggestion=f'Use consistent terminology: "{entry.preferred}"',
    )


def _check_capitalization(
    text: str, line_starts: List[int]
) -> List[TerminologyIssue]:
    groups: Dict[str, List[TermOccurrence]] = {}
    for match in TOKEN_RE.finditer(text):
        clean = NON_WORD_RE.sub("", match.group(0))
        if len(clean) < MIN_TERM_LENGTH:
            continue
        # Point at the first kept character, past any leading punctuation.
        lead = WORD_CHAR_RE.search(match.group(0))
        start = match.start() + (lead.start() if lead else 0)
        groups.setdefault(clean.lower(), []).append(
            _occurrence(text, clean, start, line_starts)
        )

    issues: List[TerminologyIssue] = []
    for key, occurrences in groups.items():
        variants = list(dict.fromkeys(o.text for o in occurrences))
        if len(variants) > 1:
            issues.append(
                TerminologyIssue(
                    term=key,
                    alternatives=tuple(variants),
                    occurrences=tuple(occurrences),
                    suggestion=f'Use consistent capitalization for "{key}"',
                )
            )
    return issues


def _line_starts(text: str) -> List[int]:
    starts = [0]
    for match in re.finditer("\n", text):
        starts.append(match.end())
    return starts


def _occurrence(
    text: str, literal: str, offset: int, line_starts: List[int]
) -> TermOccurrence:
    line_index = bisect_right(line_starts, offset) - 1
    start = line_starts[line_index]
    end = text.find("\n", start)
    context = text[start:] if end < 0 else text[start:end]
    return TermOccurrence(
        text=literal,
        line=line_index + 1,
        column=offset - start,
        context=context.strip(),
    )
