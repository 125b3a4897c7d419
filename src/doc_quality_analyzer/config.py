from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Sequence

import yaml

SEVERITIES = ("error", "warning", "info")

# Identifiers accepted in StyleGuideConfig.enabled_checks.
STYLE_CHECK_CATALOG = (
    "passive-voice",
    "click-here",
    "heading-caps",
    "sentence-length",
    "terminology",
    "contractions",
)

DEFAULT_ENABLED_CHECKS = (
    "passive-voice",
    "click-here",
    "heading-caps",
    "sentence-length",
)

_CAMEL_BOUNDARY_RE = re.compile(r"(?<!^)(?=[A-Z])")


@dataclass(frozen=True, slots=True)
class CustomRule:
    """User-defined regex rule applied line by line by the style analyzer."""

    name: str
    pattern: str
    message: str
    severity: str = "warning"

    def __post_init__(self) -> None:
        if self.severity not in SEVERITIES:
            raise ValueError(
                f"Unknown severity '{self.severity}' for rule '{self.name}'."
            )


@dataclass(frozen=True, slots=True)
class StyleGuideConfig:
    enabled_checks: tuple[str, ...] = DEFAULT_ENABLED_CHECKS
    custom_rules: tuple[CustomRule, ...] = ()
    # Reserved: accepted but not consulted by any analyzer.
    ignored_patterns: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ReadabilityTargets:
    target_flesch_kincaid: float = 12.0
    max_sentence_length: int = 20
    # Informational only.
    preferred_reading_level: str = "High School"


@dataclass(frozen=True, slots=True)
class LinkCheckSettings:
    """Link checking options.

    All fields are reserved: links are validated syntactically and no
    network phase exists for the timeout, retry count or domain filter to
    apply to.
    """

    check_external_links: bool = True
    timeout: float = 10.0
    retry_count: int = 2
    ignored_domains: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class QualityTargets:
    """Per-dimension target percentages used for progress reporting only."""

    overall_score_target: float = 80.0
    structure_score_target: float = 85.0
    readability_score_target: float = 75.0
    link_validation_target: float = 95.0
    style_compliance_target: float = 80.0
    terminology_consistency_target: float = 90.0


@dataclass(frozen=True, slots=True)
class ExpectedSection:
    name: str
    required: bool = False
    description: str = ""
    patterns: tuple[str, ...] = ()
    # Reserved: section ordering is not checked.
    order: int | None = None


@dataclass(frozen=True, slots=True)
class ExpectedSections:
    enabled: bool = False
    sections: tuple[ExpectedSection, ...] = ()
    # Reserved: unrecognized sections are never reported.
    allow_custom_sections: bool = True


@dataclass(frozen=True, slots=True)
class GlossaryTerm:
    term: str
    definition: str = ""
    preferred_usage: str = ""
    alternatives: tuple[str, ...] = ()

    @property
    def preferred(self) -> str:
        return self.preferred_usage or self.term


DEFAULT_GLOSSARY: tuple[GlossaryTerm, ...] = (
    GlossaryTerm(
        term="API",
        definition="Application Programming Interface",
        preferred_usage="API",
        alternatives=("api", "Api"),
    ),
    GlossaryTerm(
        term="JavaScript",
        definition="Programming language",
        preferred_usage="JavaScript",
        alternatives=("javascript", "Javascript", "JS"),
    ),
)


@dataclass(frozen=True, slots=True)
class Settings:
    """Configuration passed explicitly to every analysis call."""

    style_guide: StyleGuideConfig = field(default_factory=StyleGuideConfig)
    readability_targets: ReadabilityTargets = field(
        default_factory=ReadabilityTargets
    )
    link_check_settings: LinkCheckSettings = field(default_factory=LinkCheckSettings)
    quality_targets: QualityTargets = field(default_factory=QualityTargets)
    expected_sections: ExpectedSections = field(default_factory=ExpectedSections)
    # None selects DEFAULT_GLOSSARY; an empty tuple disables the glossary pass.
    terminology_glossary: tuple[GlossaryTerm, ...] | None = None

    @property
    def glossary(self) -> tuple[GlossaryTerm, ...]:
        if self.terminology_glossary is None:
            return DEFAULT_GLOSSARY
        return self.terminology_glossary

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dictionary representation of the settings."""
        return _plain(asdict(self))


def _plain(value: Any) -> Any:
    # yaml.safe_dump cannot represent tuples.
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def _snake_case(key: str) -> str:
    return _CAMEL_BOUNDARY_RE.sub("_", key).lower()


def _normalize_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    return {_snake_case(str(key)): value for key, value in data.items()}


def _build_kwargs(cls: type, data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {f.name: f for f in fields(cls)}
    normalized = _normalize_keys(data)
    kwargs: dict[str, Any] = {}
    for key, value in normalized.items():
        # Explicit nulls fall back to the field default.
        if key not in allowed or value is None:
            continue
        if isinstance(allowed[key].default, tuple):
            if not isinstance(value, (list, tuple)):
                raise ValueError(
                    f"Expected a list for {cls.__name__}.{key}, got {value!r}."
                )
            value = tuple(value)
        kwargs[key] = value
    return kwargs


def _build_section(cls: type, value: Any) -> Any:
    if value is None or isinstance(value, cls):
        return value if value is not None else cls()
    if not isinstance(value, Mapping):
        raise ValueError(f"Expected a mapping for {cls.__name__}, got {value!r}.")
    return cls(**_build_kwargs(cls, value))


def _build_items(cls: type, values: Sequence[Any] | None) -> tuple[Any, ...]:
    items: list[Any] = []
    for value in values or ():
        if isinstance(value, cls):
            items.append(value)
        elif isinstance(value, Mapping):
            try:
                items.append(cls(**_build_kwargs(cls, value)))
            except TypeError as exc:
                raise ValueError(f"Invalid {cls.__name__} entry {value!r}: {exc}") from exc
        else:
            raise ValueError(f"Expected a mapping for {cls.__name__}, got {value!r}.")
    return tuple(items)


def _build_style_guide(value: Any) -> StyleGuideConfig:
    if isinstance(value, StyleGuideConfig):
        return value
    style = _build_section(StyleGuideConfig, value)
    if isinstance(value, Mapping):
        rules = _normalize_keys(value).get("custom_rules")
        style = StyleGuideConfig(
            enabled_checks=style.enabled_checks,
            custom_rules=_build_items(CustomRule, rules),
            ignored_patterns=style.ignored_patterns,
        )
    return style


def _build_expected_sections(value: Any) -> ExpectedSections:
    if isinstance(value, ExpectedSections):
        return value
    expected = _build_section(ExpectedSections, value)
    if isinstance(value, Mapping):
        sections = _normalize_keys(value).get("sections")
        expected = ExpectedSections(
            enabled=expected.enabled,
            sections=_build_items(ExpectedSection, sections),
            allow_custom_sections=expected.allow_custom_sections,
        )
    return expected


def config_from_dict(data: Mapping[str, Any] | None) -> Settings:
    """Build Settings from a dictionary-like input.

    Keys may be snake_case or the camelCase used by exported settings JSON.
    Unknown keys are ignored.
    """
    if data is None:
        return Settings()
    normalized = _normalize_keys(data)
    kwargs: dict[str, Any] = {}
    if "style_guide" in normalized:
        kwargs["style_guide"] = _build_style_guide(normalized["style_guide"])
    if "readability_targets" in normalized:
        kwargs["readability_targets"] = _build_section(
            ReadabilityTargets, normalized["readability_targets"]
        )
    if "link_check_settings" in normalized:
        kwargs["link_check_settings"] = _build_section(
            LinkCheckSettings, normalized["link_check_settings"]
        )
    if "quality_targets" in normalized:
        kwargs["quality_targets"] = _build_section(
            QualityTargets, normalized["quality_targets"]
        )
    if "expected_sections" in normalized:
        kwargs["expected_sections"] = _build_expected_sections(
            normalized["expected_sections"]
        )
    if normalized.get("terminology_glossary") is not None:
        kwargs["terminology_glossary"] = _build_items(
            GlossaryTerm, normalized["terminology_glossary"]
        )
    return Settings(**kwargs)


def config_from_yaml(path: str | Path) -> Settings:
    """Load settings from a YAML (or JSON) file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> Settings:
    """Load settings from YAML when provided, otherwise return defaults."""
    if path is None:
        return Settings()
    return config_from_yaml(path)
