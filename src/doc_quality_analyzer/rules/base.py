from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, List, Literal

from ..models import StyleIssue

RuleKind = Literal["builtin", "custom"]


class StyleRule(ABC):
    """A line-level style check that reports zero or more issues."""

    kind: ClassVar[RuleKind]
    name: str

    @abstractmethod
    def check(self, line: str, line_number: int) -> List[StyleIssue]:
        """Return the issues found on a single physical line."""
        raise NotImplementedError
