from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, Literal

from .config import GlossaryTerm

Severity = Literal["error", "warning", "info"]
StructureIssueType = Literal[
    "missing-section", "incorrect-hierarchy", "duplicate-heading", "empty-section"
]
StyleCategory = Literal["terminology", "formatting", "tone", "grammar"]
LinkStatus = Literal["valid", "broken", "unreachable"]


@dataclass(frozen=True, slots=True)
class Document:
    """Represents an input document."""

    doc_id: str
    text: str


@dataclass(frozen=True, slots=True)
class StructureIssue:
    type: StructureIssueType
    message: str
    severity: Severity
    line: int | None = None


@dataclass(frozen=True, slots=True)
class HeadingNode:
    """A markdown heading with its 1-based line number."""

    text: str
    level: int
    line: int
    children: tuple["HeadingNode", ...] = ()


@dataclass(frozen=True, slots=True)
class HeadingHierarchy:
    is_valid: bool
    structure: tuple[HeadingNode, ...]
    issues: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class StructureAnalysis:
    score: int
    issues: tuple[StructureIssue, ...]
    suggestions: tuple[str, ...]
    heading_hierarchy: HeadingHierarchy


@dataclass(frozen=True, slots=True)
class ReadabilityScore:
    flesch_kincaid: float
    average_sentence_length: float
    average_words_per_sentence: float
    complex_words: int
    reading_level: str
    suggestions: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Link:
    """An inline markdown link found in the document."""

    text: str
    url: str
    line: int

    @property
    def is_internal(self) -> bool:
        return not self.url.startswith("http")


@dataclass(frozen=True, slots=True)
class InternalLink:
    text: str
    target: str
    line: int
    is_valid: bool


@dataclass(frozen=True, slots=True)
class ExternalLink:
    text: str
    url: str
    line: int
    status: LinkStatus


@dataclass(frozen=True, slots=True)
class BrokenLink:
    text: str
    url: str
    line: int
    error: str


@dataclass(frozen=True, slots=True)
class LinkValidation:
    score: int
    total_links: int
    valid_links: int
    broken_links: tuple[BrokenLink, ...]
    internal_links: tuple[InternalLink, ...]
    external_links: tuple[ExternalLink, ...]


@dataclass(frozen=True, slots=True)
class StyleIssue:
    type: StyleCategory
    message: str
    line: int
    column: int
    severity: Severity
    suggestion: str | None = None


@dataclass(frozen=True, slots=True)
class StyleCompliance:
    """Style findings for one document.

    ``adherence_percentage`` is the share of lines without an issue, clamped to
    0-100 since several issues can land on the same line.
    """

    score: int
    issues: tuple[StyleIssue, ...]
    adherence_percentage: int


@dataclass(frozen=True, slots=True)
class TermOccurrence:
    text: str
    line: int
    column: int
    context: str = ""


@dataclass(frozen=True, slots=True)
class TerminologyIssue:
    term: str
    alternatives: tuple[str, ...]
    occurrences: tuple[TermOccurrence, ...]
    suggestion: str


@dataclass(frozen=True, slots=True)
class TerminologyConsistency:
    score: int
    inconsistencies: tuple[TerminologyIssue, ...]
    glossary: tuple[GlossaryTerm, ...] = ()


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Full quality report for one document."""

    document_id: str
    timestamp: datetime
    structure_analysis: StructureAnalysis
    link_validation: LinkValidation
    style_compliance: StyleCompliance
    readability_score: ReadabilityScore
    terminology_consistency: TerminologyConsistency
    overall_score: int

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary of the full report."""
        payload = _jsonable(asdict(self))
        payload["timestamp"] = self.timestamp.isoformat()
        return payload


def _jsonable(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value
