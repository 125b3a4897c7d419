from __future__ import annotations

from typing import Dict, Mapping

from .config import QualityTargets
from .models import (
    AnalysisResult,
    LinkValidation,
    ReadabilityScore,
    StructureAnalysis,
    StyleCompliance,
    TerminologyConsistency,
)
from .textutils import clamp, round_half_up

# Fixed contribution of each dimension to the overall score; sums to 1.0.
SCORE_WEIGHTS: Mapping[str, float] = {
    "structure": 0.30,
    "readability": 0.20,
    "links": 0.20,
    "style": 0.15,
    "terminology": 0.15,
}

READABILITY_BASELINE_GRADE = 8.0
READABILITY_POINTS_PER_GRADE = 5.0


def normalize_readability(readability: ReadabilityScore) -> float:
    """Map a grade level onto 0-100 where lower grades score higher.

    A document with no words has nothing to read and normalizes to 0.
    """
    if readability.average_words_per_sentence == 0:
        return 0.0
    grade = readability.flesch_kincaid
    return clamp(
        100.0 - (grade - READABILITY_BASELINE_GRADE) * READABILITY_POINTS_PER_GRADE
    )


def dimension_scores(
    structure: StructureAnalysis,
    readability: ReadabilityScore,
    links: LinkValidation,
    style: StyleCompliance,
    terminology: TerminologyConsistency,
) -> Dict[str, float]:
    """Return the 0-100 score of each dimension keyed like SCORE_WEIGHTS."""
    return {
        "structure": float(structure.score),
        "readability": normalize_readability(readability),
        "links": float(links.score),
        "style": float(style.score),
        "terminology": float(terminology.score),
    }


def calculate_overall_score(
    structure: StructureAnalysis,
    readability: ReadabilityScore,
    links: LinkValidation,
    style: StyleCompliance,
    terminology: TerminologyConsistency,
) -> int:
    """Weighted sum of the dimension scores, rounded to an integer."""
    scores = dimension_scores(structure, readability, links, style, terminology)
    weighted = sum(SCORE_WEIGHTS[name] * scores[name] for name in SCORE_WEIGHTS)
    return int(clamp(round_half_up(weighted)))


def evaluate_quality_targets(
    result: AnalysisResult, targets: QualityTargets | None = None
) -> Dict[str, bool]:
    """Report whether each dimension of a result reaches its target percentage."""
    targets = targets or QualityTargets()
    scores = dimension_scores(
        result.structure_analysis,
        result.readability_score,
        result.link_validation,
        result.style_compliance,
        result.terminology_consistency,
    )
    return {
        "overall": result.overall_score >= targets.overall_score_target,
        "structure": scores["structure"] >= targets.structure_score_target,
        "readability": scores["readability"] >= targets.readability_score_target,
        "links": scores["links"] >= targets.link_validation_target,
        "style": scores["style"] >= targets.style_compliance_target,
        "terminology": scores["terminology"]
        >= targets.terminology_consistency_target,
    }
