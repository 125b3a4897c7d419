from __future__ import annotations

import logging
import uuid
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Dict, List

from .analyzer import (
    analyze_links,
    analyze_readability,
    analyze_structure,
    analyze_style,
    analyze_terminology,
)
from .config import Settings
from .linkcheck import LinkChecker
from .models import AnalysisResult, Document
from .scoring import calculate_overall_score

logger = logging.getLogger(__name__)


def analyze_document(
    text: str,
    settings: Settings | None = None,
    link_checker: LinkChecker | None = None,
) -> AnalysisResult:
    """Run all five analyzers over the text and aggregate their scores."""
    structure = analyze_structure(text, settings)
    readability = analyze_readability(text, settings)
    links = analyze_links(text, settings, checker=link_checker)
    style = analyze_style(text, settings)
    terminology = analyze_terminology(text, settings)

    overall = calculate_overall_score(structure, readability, links, style, terminology)
    result = AnalysisResult(
        document_id=_generate_id(),
        timestamp=datetime.now(timezone.utc),
        structure_analysis=structure,
        link_validation=links,
        style_compliance=style,
        readability_score=readability,
        terminology_consistency=terminology,
        overall_score=overall,
    )
    logger.debug(
        "Analyzed document=%s overall=%d structure=%d links=%d style=%d terminology=%d",
        result.document_id,
        overall,
        structure.score,
        links.score,
        style.score,
        terminology.score,
    )
    return result


def analyze_documents(
    documents: List[Document],
    settings: Settings | None = None,
    max_workers: int = 1,
) -> Dict[str, AnalysisResult]:
    """Analyze every document and return the results keyed by doc_id."""
    if max_workers <= 1 or len(documents) <= 1:
        return {doc.doc_id: analyze_document(doc.text, settings) for doc in documents}

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures = {
            doc.doc_id: pool.submit(analyze_document, doc.text, settings)
            for doc in documents
        }
        return {doc_id: future.result() for doc_id, future in futures.items()}


def _generate_id() -> str:
    return uuid.uuid4().hex[:9]
