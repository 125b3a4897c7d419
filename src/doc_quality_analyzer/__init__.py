"""
doc_quality_analyzer package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import Settings, config_from_dict, config_from_yaml, load_config
from .models import AnalysisResult, Document
from .pipeline import analyze_document, analyze_documents
from .scoring import SCORE_WEIGHTS, calculate_overall_score, evaluate_quality_targets

__all__ = [
    "Settings",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "AnalysisResult",
    "Document",
    "analyze_document",
    "analyze_documents",
    "SCORE_WEIGHTS",
    "calculate_overall_score",
    "evaluate_quality_targets",
]

__version__ = "0.1.0"
