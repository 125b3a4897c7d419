from __future__ import annotations

from .links import analyze_links, extract_links
from .readability import analyze_readability, flesch_kincaid_grade, reading_level_for
from .structure import analyze_structure, nest_headings
from .style import analyze_style
from .terminology import analyze_terminology

__all__ = [
    "analyze_links",
    "extract_links",
    "analyze_readability",
    "flesch_kincaid_grade",
    "reading_level_for",
    "analyze_structure",
    "nest_headings",
    "analyze_style",
    "analyze_terminology",
]
