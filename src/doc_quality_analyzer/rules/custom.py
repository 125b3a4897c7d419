from __future__ import annotations

import logging
import re
from typing import List

from ..config import CustomRule
from ..models import StyleIssue
from .base import StyleRule

logger = logging.getLogger(__name__)


class CustomPatternRule(StyleRule):
    """Case-insensitive regex rule supplied through the style guide settings."""

    kind = "custom"

    def __init__(self, rule: CustomRule, pattern: re.Pattern[str]) -> None:
        self.rule = rule
        self.name = rule.name
        self._pattern = pattern

    @classmethod
    def from_config(cls, rule: CustomRule) -> "CustomPatternRule | None":
        """Compile the rule, returning None when its pattern is invalid."""
        try:
            pattern = re.compile(rule.pattern, re.IGNORECASE)
        except re.error as exc:
            logger.debug("Skipping custom rule %r: %s", rule.name, exc)
            return None
        return cls(rule, pattern)

    def check(self, line: str, line_number: int) -> List[StyleIssue]:
        if not self._pattern.search(line):
            return []
        return [
            StyleIssue(
                type="formatting",
                message=self.rule.message,
                line=line_number,
                column=0,
                severity=self.rule.severity,
                suggestion=f"Custom rule: {self.rule.name}",
            )
        ]
