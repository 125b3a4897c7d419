"""
Tiny helper script to print a quality report for a sample markdown document.
"""

from __future__ import annotations

from doc_quality_analyzer import analyze_document
from doc_quality_analyzer.config import ExpectedSection, ExpectedSections, Settings

SAMPLE = """# Release Notes

## Overview

This release was delivered on time. Please click here to read the full changelog.

### Upgrading

See the [upgrade guide](#upgrading) and the [API reference](https://example.com/api).
The api is backwards compatible.
"""


def main() -> None:
    settings = Settings(
        expected_sections=ExpectedSections(
            enabled=True,
            sections=(
                ExpectedSection(name="Overview", required=True, patterns=("overview",)),
                ExpectedSection(
                    name="Known Issues",
                    description="List open bugs",
                    patterns=("known issues", "limitations"),
                ),
            ),
        )
    )
    result = analyze_document(SAMPLE, settings)

    print(f"Overall score: {result.overall_score}")
    print(f"Structure: {result.structure_analysis.score}")
    print(
        f"Readability: grade {result.readability_score.flesch_kincaid} "
        f"({result.readability_score.reading_level})"
    )
    print(f"Links: {result.link_validation.score} ({result.link_validation.total_links} found)")
    print(f"Style: {result.style_compliance.score}")
    print(f"Terminology: {result.terminology_consistency.score}")
    print("-" * 40)
    for issue in result.structure_analysis.issues:
        print(f"[{issue.severity}] {issue.message}")
    for issue in result.style_compliance.issues:
        print(f"[{issue.severity}] line {issue.line}: {issue.message}")
    for inconsistency in result.terminology_consistency.inconsistencies:
        print(f"[term] {inconsistency.suggestion}: {', '.join(inconsistency.alternatives)}")


if __name__ == "__main__":
    main()
