from __future__ import annotations

from typing import List, TypedDict

from .models import AnalysisResult
from .scoring import normalize_readability


class DimensionScores(TypedDict):
    structure: int
    readability: float
    links: int
    style: int
    terminology: int


class DocumentSummary(TypedDict):
    doc_id: str
    overall_score: int
    scores: DimensionScores
    flesch_kincaid: float
    reading_level: str
    total_links: int
    issue_count: int
    suggestions: List[str]


def summarize_result(doc_id: str, result: AnalysisResult) -> DocumentSummary:
    """Create a compact JSON-serializable summary for one analyzed document."""
    structure = result.structure_analysis
    readability = result.readability_score
    return {
        "doc_id": doc_id,
        "overall_score": result.overall_score,
        "scores": {
            "structure": structure.score,
            "readability": normalize_readability(readability),
            "links": result.link_validation.score,
            "style": result.style_compliance.score,
            "terminology": result.terminology_consistency.score,
        },
        "flesch_kincaid": readability.flesch_kincaid,
        "reading_level": readability.reading_level,
        "total_links": result.link_validation.total_links,
        "issue_count": (
            len(structure.issues)
            + len(result.style_compliance.issues)
            + len(result.link_validation.broken_links)
            + len(result.terminology_consistency.inconsistencies)
        ),
        "suggestions": [*structure.suggestions, *readability.suggestions],
    }
