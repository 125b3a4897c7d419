import json
import math

import pytest

from doc_quality_analyzer import analyze_document, analyze_documents
from doc_quality_analyzer.config import Settings, StyleGuideConfig
from doc_quality_analyzer.models import Document
from tests.utils import WELL_FORMED_DOC, build_sectioned_doc

SAMPLES = [
    "",
    "   \n\n  ",
    "plain words without headings or punctuation",
    "## Only a section\n\nclick here. The page was updated.",
    "[broken link](",
    "!!! ??? ...",
    WELL_FORMED_DOC,
    build_sectioned_doc(5),
    "\n".join(["## Same"] * 40),
]


def _scores(result):
    return [
        result.structure_analysis.score,
        result.link_validation.score,
        result.style_compliance.score,
        result.terminology_consistency.score,
        result.overall_score,
    ]


@pytest.mark.parametrize("text", SAMPLES)
def test_scores_are_always_in_range(text):
    """Every score stays within 0-100 for odd inputs."""
    result = analyze_document(text)
    for score in _scores(result):
        assert not math.isnan(score)
        assert 0 <= score <= 100
    assert isinstance(result.overall_score, int)
    assert math.isfinite(result.readability_score.flesch_kincaid)


def test_empty_document_returns_complete_result():
    """An empty document still yields every sub-report."""
    result = analyze_document("")
    missing_h1 = [
        issue
        for issue in result.structure_analysis.issues
        if issue.type == "missing-section" and issue.severity == "error"
    ]
    assert missing_h1
    assert result.link_validation.total_links == 0
    assert result.readability_score.flesch_kincaid == 0.0
    assert result.document_id
    assert result.timestamp.tzinfo is not None


@pytest.mark.parametrize("text", ["", "   \n\n  "])
def test_empty_document_scores_low(text):
    """Documents without any words do not get a passing overall score."""
    result = analyze_document(text)
    assert result.overall_score < 70
    assert result.overall_score == 67


def test_analysis_is_idempotent():
    """Analyzing the same text twice gives the same scores."""
    settings = Settings(style_guide=StyleGuideConfig(enabled_checks=("click-here",)))
    text = "# Doc\n\nPlease click here. The API and the api differ."
    first = analyze_document(text, settings)
    second = analyze_document(text, settings)
    assert _scores(first) == _scores(second)
    assert first.readability_score == second.readability_score
    assert first.structure_analysis == second.structure_analysis


def test_well_formed_document_scores_high():
    """A tidy document gets full structure marks and 90+ overall."""
    result = analyze_document(WELL_FORMED_DOC)
    assert result.structure_analysis.score == 100
    assert result.link_validation.total_links == 2
    assert result.style_compliance.score == 100
    assert result.terminology_consistency.score == 100
    assert result.overall_score >= 90


def test_large_document_with_many_sections():
    result = analyze_document(build_sectioned_doc(50))
    assert result.link_validation.total_links == 50
    assert len(result.structure_analysis.heading_hierarchy.structure) == 51


def test_default_glossary_is_applied_through_pipeline():
    result = analyze_document("# Guide\n\nCall the API. The api returns JSON.")
    terms = [issue.term for issue in result.terminology_consistency.inconsistencies]
    assert "API" in terms


def test_result_serializes_to_json():
    result = analyze_document(WELL_FORMED_DOC)
    payload = json.loads(json.dumps(result.to_dict()))
    assert payload["overall_score"] == result.overall_score
    assert payload["timestamp"] == result.timestamp.isoformat()
    assert payload["link_validation"]["external_links"][0]["status"] == "valid"
    assert payload["terminology_consistency"]["glossary"][0]["term"] == "API"


def test_batch_analysis_matches_sequential_results():
    """Worker threads do not change per-document results."""
    documents = [
        Document(doc_id=f"doc-{idx}.md", text=text) for idx, text in enumerate(SAMPLES)
    ]
    sequential = analyze_documents(documents)
    parallel = analyze_documents(documents, max_workers=4)
    assert list(sequential) == [doc.doc_id for doc in documents]
    for doc_id, result in sequential.items():
        assert _scores(parallel[doc_id]) == _scores(result)
