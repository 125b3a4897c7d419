from __future__ import annotations

import re
from typing import Any, Dict, List, Sequence

from ..config import ExpectedSections, Settings
from ..models import HeadingHierarchy, HeadingNode, StructureAnalysis, StructureIssue
from ..textutils import split_lines

HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")

COMMON_SECTIONS = (
    "introduction",
    "overview",
    "getting started",
    "installation",
    "usage",
    "examples",
)

SEVERITY_DEDUCTIONS = {"error": 15, "warning": 10, "info": 5}
MAX_DEDUCTIONS = 100


def analyze_structure(text: str, settings: Settings | None = None) -> StructureAnalysis:
    """Check heading hierarchy, duplicates, the H1 and expected sections."""
    issues: List[StructureIssue] = []
    headings: List[HeadingNode] = []
    current_level = 0
    has_h1 = False

    for index, line in enumerate(split_lines(text)):
        match = HEADING_RE.match(line.strip())
        if not match:
            continue
        line_number = index + 1
        level = len(match.group(1))
        heading_text = match.group(2)

        if level == 1:
            has_h1 = True

        if level > current_level + 1:
            issues.append(
                StructureIssue(
                    type="incorrect-hierarchy",
                    message=(
                        f"Heading level {level} follows level {current_level}, "
                        "skipping levels"
                    ),
                    line=line_number,
                    severity="warning",
                )
            )

        if not heading_text.strip():
            issues.append(
                StructureIssue(
                    type="empty-section",
                    message="Empty heading found",
                    line=line_number,
                    severity="error",
                )
            )

        lowered = heading_text.lower()
        if any(h.text.lower() == lowered for h in headings):
            issues.append(
                StructureIssue(
                    type="duplicate-heading",
                    message=f'Duplicate heading: "{heading_text}"',
                    line=line_number,
                    severity="warning",
                )
            )

        headings.append(HeadingNode(text=heading_text, level=level, line=line_number))
        current_level = level

    if not has_h1:
        issues.append(
            StructureIssue(
                type="missing-section",
                message="Document should have an H1 heading",
                severity="error",
            )
        )

    expected = settings.expected_sections if settings else ExpectedSections()
    issues.extend(find_missing_sections(headings, expected))

    hierarchy_messages = tuple(
        issue.message for issue in issues if issue.type == "incorrect-hierarchy"
    )
    hierarchy = HeadingHierarchy(
        is_valid=not hierarchy_messages,
        structure=tuple(headings),
        issues=hierarchy_messages,
    )

    return StructureAnalysis(
        score=score_structure_issues(issues),
        issues=tuple(issues),
        suggestions=tuple(_structure_suggestions(issues, headings)),
        heading_hierarchy=hierarchy,
    )


def find_missing_sections(
    headings: List[HeadingNode], expected: ExpectedSections
) -> List[StructureIssue]:
    """Report configured (or common) sections that no heading mentions."""
    found = [heading.text.lower() for heading in headings]
    issues: List[StructureIssue] = []

    if expected.enabled and expected.sections:
        for section in expected.sections:
            needles = [p.lower() for p in section.patterns] or [section.name.lower()]
            if any(needle in heading for heading in found for needle in needles):
                continue
            prefix = "Required" if section.required else "Recommended"
            message = f'{prefix} section missing: "{section.name}"'
            if section.description:
                message += f" - {section.description}"
            issues.append(
                StructureIssue(
                    type="missing-section",
                    message=message,
                    severity="error" if section.required else "info",
                )
            )
        return issues

    for section in COMMON_SECTIONS:
        if not any(section in heading for heading in found):
            issues.append(
                StructureIssue(
                    type="missing-section",
                    message=f'Consider adding a "{section}" section',
                    severity="info",
                )
            )
    return issues


def score_structure_issues(issues: List[StructureIssue]) -> int:
    deductions = sum(SEVERITY_DEDUCTIONS[issue.severity] for issue in issues)
    return 100 - min(max(deductions, 0), MAX_DEDUCTIONS)


def nest_headings(headings: Sequence[HeadingNode]) -> List[HeadingNode]:
    """
    Build a tree from a flat heading list: each heading becomes a child of
    the closest preceding heading with a lower level.
    """
    roots: List[Dict[str, Any]] = []
    stack: List[Dict[str, Any]] = []
    for heading in headings:
        node = {"heading": heading, "children": []}
        while stack and stack[-1]["heading"].level >= heading.level:
            stack.pop()
        if stack:
            stack[-1]["children"].append(node)
        else:
            roots.append(node)
        stack.append(node)
    return [_freeze(node) for node in roots]


def _freeze(node: Dict[str, Any]) -> HeadingNode:
    heading: HeadingNode = node["heading"]
    return HeadingNode(
        text=heading.text,
        level=heading.level,
        line=heading.line,
        children=tuple(_freeze(child) for child in node["children"]),
    )


def _structure_suggestions(
    issues: List[StructureIssue], headings: List[HeadingNode]
) -> List[str]:
    suggestions: List[str] = []
    if any(issue.type == "missing-section" for issue in issues):
        suggestions.append("Add missing sections to improve document completeness")
    if any(issue.type == "incorrect-hierarchy" for issue in issues):
        suggestions.append(
            "Fix heading hierarchy to follow proper structure (H1 → H2 → H3, etc.)"
        )
    if not headings:
        suggestions.append("Add headings to structure your document better")
    if len(headings) < 3:
        suggestions.append("Consider adding more headings to break up large sections")
    return suggestions
