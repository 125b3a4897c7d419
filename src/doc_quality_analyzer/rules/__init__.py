from __future__ import annotations

from typing import TYPE_CHECKING, Any, List

from ..config import DEFAULT_ENABLED_CHECKS, STYLE_CHECK_CATALOG
from .base import StyleRule
from .builtin import ClickHereRule, PassiveVoiceRule, SentenceLengthRule
from .custom import CustomPatternRule

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from ..config import Settings

__all__ = [
    "StyleRule",
    "ClickHereRule",
    "PassiveVoiceRule",
    "SentenceLengthRule",
    "CustomPatternRule",
    "create_builtin_rule",
    "build_style_rules",
]

# Order in which enabled built-in checks run on each line.
BUILTIN_RULE_ORDER = ("click-here", "passive-voice", "sentence-length")


def create_builtin_rule(name: str, **kwargs: Any) -> StyleRule | None:
    """
    Factory for built-in rules by catalog identifier.

    Catalog entries without a detector (heading-caps, terminology,
    contractions) return None.
    """
    normalized = name.lower().strip()
    if normalized not in STYLE_CHECK_CATALOG:
        raise ValueError(f"Unknown style check '{name}'.")
    if normalized == "click-here":
        return ClickHereRule()
    if normalized == "passive-voice":
        return PassiveVoiceRule()
    if normalized == "sentence-length":
        return SentenceLengthRule(max_words=kwargs.get("max_words", 20))
    return None


def build_style_rules(settings: "Settings | None" = None) -> List[StyleRule]:
    """Build the enabled built-in rules followed by the compilable custom rules."""
    if settings is None:
        enabled = set(DEFAULT_ENABLED_CHECKS)
        custom_rules = ()
        max_words = 20
    else:
        enabled = set(settings.style_guide.enabled_checks)
        custom_rules = settings.style_guide.custom_rules
        max_words = settings.readability_targets.max_sentence_length

    rules: List[StyleRule] = []
    for name in BUILTIN_RULE_ORDER:
        if name in enabled:
            rule = create_builtin_rule(name, max_words=max_words)
            if rule is not None:
                rules.append(rule)
    for custom in custom_rules:
        compiled = CustomPatternRule.from_config(custom)
        if compiled is not None:
            rules.append(compiled)
    return rules
