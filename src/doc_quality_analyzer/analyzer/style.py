from __future__ import annotations

from typing import List, Sequence

from ..config import Settings
from ..models import StyleCompliance, StyleIssue
from ..rules import StyleRule, build_style_rules
from ..textutils import clamp, round_half_up, split_lines

ISSUE_PENALTY = 5


def analyze_style(
    text: str,
    settings: Settings | None = None,
    rules: Sequence[StyleRule] | None = None,
) -> StyleCompliance:
    """Run each style rule over every physical line of the document."""
    active_rules = list(rules) if rules is not None else build_style_rules(settings)
    lines = split_lines(text)

    issues: List[StyleIssue] = []
    for index, line in enumerate(lines):
        for rule in active_rules:
            issues.extend(rule.check(line, index + 1))

    total_lines = len(lines)
    issue_count = len(issues)
    if total_lines:
        adherence = round_half_up((total_lines - issue_count) / total_lines * 100)
    else:
        adherence = 100.0

    return StyleCompliance(
        score=max(0, 100 - issue_count * ISSUE_PENALTY),
        issues=tuple(issues),
        adherence_percentage=int(clamp(adherence)),
    )
