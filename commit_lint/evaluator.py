"""Evaluation of commit messages against a rule set."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from commit_lint.allowlist import DEFAULT_IMPERATIVE_VERBS, build_allowlist
from commit_lint.config import AppConfig, ConfigurationError
from commit_lint.ignores import IgnorePredicate, build_ignores, find_ignore
from commit_lint.message import CommitMessage, ParsedHeader, parse_header, parse_message
from commit_lint.rules import RuleSetting, build_rules, default_rules
from commit_lint.rules.base import Rule, RuleResult, Severity
from commit_lint.rules.description_case import CASE_STYLES, DEFAULT_DISALLOWED_CASE_STYLES

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LintOptions:
    """Rule options shared by every evaluation."""

    max_header_length: int = 72
    max_body_line_length: int = 72
    max_footer_line_length: int = 72
    disallowed_case_styles: tuple[str, ...] = DEFAULT_DISALLOWED_CASE_STYLES
    allowlist: frozenset[str] = DEFAULT_IMPERATIVE_VERBS

    def __post_init__(self) -> None:
        for field_name in ("max_header_length", "max_body_line_length", "max_footer_line_length"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigurationError(f"{field_name} must be a positive integer, got {value!r}")
        unknown = [style for style in self.disallowed_case_styles if style not in CASE_STYLES]
        if unknown:
            joined = ", ".join(CASE_STYLES)
            raise ConfigurationError(
                f"Unknown case styles: {', '.join(unknown)}. Expected any of: {joined}"
            )


@dataclass(frozen=True, slots=True)
class RuleOutcome:
    """Result of one rule within a report."""

    rule: str
    severity: Severity
    result: RuleResult

    @property
    def passed(self) -> bool:
        return self.result.passed


@dataclass(frozen=True, slots=True)
class EvaluationReport:
    """Rule outcomes for a single commit message."""

    message: CommitMessage
    header: ParsedHeader
    outcomes: tuple[RuleOutcome, ...] = ()
    ignored_by: str | None = None
    source: str | None = None

    @property
    def ignored(self) -> bool:
        return self.ignored_by is not None

    @property
    def errors(self) -> list[RuleOutcome]:
        return [item for item in self.outcomes if not item.passed and item.severity == "error"]

    @property
    def warnings(self) -> list[RuleOutcome]:
        return [item for item in self.outcomes if not item.passed and item.severity == "warning"]

    @property
    def violations(self) -> list[RuleOutcome]:
        return [item for item in self.outcomes if not item.passed]

    @property
    def overall_passed(self) -> bool:
        return not self.errors


class Evaluator:
    """Runs ignore predicates, then every rule, over commit messages.

    Rules, options and ignores are fixed at construction and never mutated, so
    one evaluator can be shared across threads.
    """

    def __init__(
        self,
        rules: Sequence[Rule] | None = None,
        *,
        options: LintOptions | None = None,
        ignores: Sequence[IgnorePredicate] | None = None,
    ) -> None:
        self._rules = tuple(rules if rules is not None else default_rules())
        self._options = options or LintOptions()
        self._ignores = tuple(ignores if ignores is not None else build_ignores())

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    @property
    def options(self) -> LintOptions:
        return self._options

    @property
    def ignores(self) -> tuple[IgnorePredicate, ...]:
        return self._ignores

    def evaluate(
        self,
        message: str | CommitMessage,
        *,
        source: str | None = None,
        strip_comments: bool = False,
    ) -> EvaluationReport:
        """Evaluate one message, collecting every rule result.

        ``strip_comments`` drops ``#`` lines before parsing and is meant for
        commit-msg edit files only.
        """
        if isinstance(message, str):
            parsed = parse_message(message, strip_comments=strip_comments)
        else:
            parsed = message
        header = parse_header(parsed.header)

        predicate = find_ignore("\n".join(parsed.lines), self._ignores)
        if predicate is not None:
            logger.debug("Ignoring %s: matched %s", source or repr(parsed.header), predicate.name)
            return EvaluationReport(
                message=parsed, header=header, ignored_by=predicate.name, source=source
            )

        outcomes = tuple(
            RuleOutcome(
                rule=rule.name,
                severity=rule.severity,
                result=rule.evaluate(header, parsed, self._options),
            )
            for rule in self._rules
        )
        return EvaluationReport(message=parsed, header=header, outcomes=outcomes, source=source)

    def evaluate_many(
        self, messages: Iterable[str | CommitMessage]
    ) -> list[EvaluationReport]:
        """Evaluate messages independently, preserving input order."""
        return [self.evaluate(message) for message in messages]


def build_evaluator(app_config: AppConfig) -> Evaluator:
    """Build an evaluator from resolved configuration."""
    lint = app_config.lint
    try:
        rules = build_rules(
            enabled_rule_names=app_config.rule_enable,
            disabled_rule_names=app_config.rule_disable,
            settings={
                name: RuleSetting(severity=setting.severity, when=setting.when)
                for name, setting in app_config.rule_settings.items()
            },
        )
        ignores = build_ignores(app_config.ignores, include_default=app_config.default_ignores)
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc

    options = LintOptions(
        max_header_length=lint.max_header_length,
        max_body_line_length=lint.max_body_line_length,
        max_footer_line_length=lint.max_footer_line_length,
        disallowed_case_styles=tuple(lint.disallowed_case_styles),
        allowlist=build_allowlist(
            app_config.tense.allowlist,
            include_default=app_config.tense.include_default,
        ),
    )
    logger.debug(
        "Built evaluator with %d rules, %d ignore predicates, %d allowed verbs",
        len(rules),
        len(ignores),
        len(options.allowlist),
    )
    return Evaluator(rules, options=options, ignores=ignores)
