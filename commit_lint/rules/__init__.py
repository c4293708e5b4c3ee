"""Rules package."""

from collections.abc import Mapping
from dataclasses import dataclass

from commit_lint.rules.base import (
    SEVERITIES,
    WHENS,
    ConditionRule,
    Rule,
    RuleResult,
    Severity,
    When,
)
from commit_lint.rules.description_case import DescriptionCaseRule
from commit_lint.rules.description_tense import DescriptionTenseRule
from commit_lint.rules.layout import (
    BodyLeadingBlankRule,
    FooterLeadingBlankRule,
    HeaderTrimRule,
    SubjectFullStopRule,
)
from commit_lint.rules.length import (
    BodyMaxLineLengthRule,
    FooterMaxLineLengthRule,
    HeaderMaxLengthRule,
)
from commit_lint.rules.presence import ComponentNotEmptyRule, DescriptionNotEmptyRule

__all__ = [
    "RULE_CLASSES",
    "Rule",
    "RuleInfo",
    "RuleResult",
    "RuleSetting",
    "build_rules",
    "default_rules",
    "list_rule_info",
    "rule_names",
]

RULE_CLASSES: tuple[type[ConditionRule], ...] = (
    ComponentNotEmptyRule,
    DescriptionNotEmptyRule,
    DescriptionCaseRule,
    DescriptionTenseRule,
    HeaderMaxLengthRule,
    BodyMaxLineLengthRule,
    FooterMaxLineLengthRule,
    HeaderTrimRule,
    SubjectFullStopRule,
    BodyLeadingBlankRule,
    FooterLeadingBlankRule,
)


@dataclass(frozen=True, slots=True)
class RuleInfo:
    """Rule metadata for listing."""

    name: str
    class_name: str
    description: str
    default_severity: Severity
    default_when: When


@dataclass(frozen=True, slots=True)
class RuleSetting:
    """Per-rule severity/when override."""

    severity: Severity | None = None
    when: When | None = None


def rule_names() -> list[str]:
    return [rule_cls.name for rule_cls in RULE_CLASSES]


def default_rules() -> list[Rule]:
    """Return the default rule set, every rule at error severity."""
    return build_rules()


def build_rules(
    *,
    enabled_rule_names: list[str] | None = None,
    disabled_rule_names: list[str] | None = None,
    settings: Mapping[str, RuleSetting] | None = None,
) -> list[Rule]:
    """Build rule instances in canonical order applying enable/disable filters.

    Rules whose effective severity is ``off`` are left out.
    """
    known = set(rule_names())
    overrides = dict(settings or {})
    requested = (
        set(enabled_rule_names or []) | set(disabled_rule_names or []) | set(overrides)
    )
    unknown = [name for name in requested if name not in known]
    if unknown:
        joined = ", ".join(sorted(unknown))
        raise ValueError(f"Unknown rule names: {joined}")

    enabled = set(enabled_rule_names) if enabled_rule_names is not None else known
    disabled = set(disabled_rule_names or [])

    built: list[Rule] = []
    for rule_cls in RULE_CLASSES:
        if rule_cls.name not in enabled or rule_cls.name in disabled:
            continue
        setting = overrides.get(rule_cls.name, RuleSetting())
        severity = setting.severity or "error"
        if severity not in SEVERITIES:
            raise ValueError(f"Severity for '{rule_cls.name}' must be one of: error, off, warning")
        if setting.when is not None and setting.when not in WHENS:
            raise ValueError(f"When for '{rule_cls.name}' must be one of: always, never")
        if severity == "off":
            continue
        built.append(rule_cls(severity=severity, when=setting.when))
    return built


def list_rule_info() -> list[RuleInfo]:
    """Return metadata for all known rules in evaluation order."""
    return [
        RuleInfo(
            name=rule_cls.name,
            class_name=rule_cls.__name__,
            description=(rule_cls.__doc__ or "").strip(),
            default_severity="error",
            default_when=rule_cls.default_when,
        )
        for rule_cls in RULE_CLASSES
    ]
