from __future__ import annotations

from pathlib import Path

from doc_quality_analyzer.models import (
    HeadingHierarchy,
    LinkValidation,
    ReadabilityScore,
    StructureAnalysis,
    StyleCompliance,
    TerminologyConsistency,
)

WELL_FORMED_DOC = """# Widget Guide

## Introduction

Widgets help teams ship docs. Read [these notes](#getting-started) first.

## Overview

This tool checks files quickly.

## Getting Started

Start with a small file.

## Installation

Run the installer and follow each prompt.

## Usage

Point it at a folder. See [our site](https://example.com) for help.

## Examples

Try a sample folder to view a report.
"""


def build_sectioned_doc(sections: int) -> str:
    """Title heading followed by numbered sections, each holding one link."""
    parts = ["# Title", ""]
    for idx in range(sections):
        parts.append(f"## Section {idx}")
        parts.append("")
        parts.append(f"See [link {idx}](https://example.com/{idx}) for details.")
        parts.append("")
    return "\n".join(parts)


def make_reports(
    structure: int = 100,
    grade: float = 8.0,
    links: int = 100,
    style: int = 100,
    terminology: int = 100,
) -> tuple[
    StructureAnalysis,
    ReadabilityScore,
    LinkValidation,
    StyleCompliance,
    TerminologyConsistency,
]:
    """Hand-built sub-reports with the given scores."""
    return (
        StructureAnalysis(
            score=structure,
            issues=(),
            suggestions=(),
            heading_hierarchy=HeadingHierarchy(is_valid=True, structure=(), issues=()),
        ),
        ReadabilityScore(
            flesch_kincaid=grade,
            average_sentence_length=10.0,
            average_words_per_sentence=10.0,
            complex_words=0,
            reading_level="Middle School",
            suggestions=(),
        ),
        LinkValidation(
            score=links,
            total_links=0,
            valid_links=0,
            broken_links=(),
            internal_links=(),
            external_links=(),
        ),
        StyleCompliance(score=style, issues=(), adherence_percentage=100),
        TerminologyConsistency(score=terminology, inconsistencies=()),
    )


def write_corpus(root: Path) -> Path:
    """Create a small docs folder with markdown, text and an ignored file."""
    corpus_dir = root / "docs"
    (corpus_dir / "guides").mkdir(parents=True)
    (corpus_dir / "README.md").write_text(WELL_FORMED_DOC, encoding="utf-8")
    (corpus_dir / "guides" / "notes.txt").write_text(
        "## Notes\n\nClick here to read more.\n", encoding="utf-8"
    )
    (corpus_dir / "script.py").write_text("print('ignored')\n", encoding="utf-8")
    return corpus_dir
