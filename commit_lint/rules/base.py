"""Base rule protocol and result model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Protocol

from commit_lint.message import CommitMessage, ParsedHeader

if TYPE_CHECKING:
    from commit_lint.evaluator import LintOptions

Severity = Literal["error", "warning", "off"]
When = Literal["always", "never"]

SEVERITIES: tuple[str, ...] = ("error", "warning", "off")
WHENS: tuple[str, ...] = ("always", "never")


@dataclass(frozen=True, slots=True)
class RuleResult:
    """Outcome of one rule against one commit message."""

    passed: bool
    message: str


class Rule(Protocol):
    """Protocol for commit message rules."""

    name: str
    severity: Severity
    when: When

    def evaluate(
        self, header: ParsedHeader, message: CommitMessage, options: LintOptions
    ) -> RuleResult:
        """Evaluate a parsed message and return the rule result."""


class ConditionRule:
    """Rule built from a condition that ``when`` may negate.

    Subclasses implement ``check`` and ``describe``. ``check`` returns whether
    the condition holds; ``describe`` renders the message for either polarity.
    """

    name = ""
    default_when: When = "always"

    def __init__(self, *, severity: Severity = "error", when: When | None = None) -> None:
        self.severity: Severity = severity
        self.when: When = when or self.default_when

    def evaluate(
        self, header: ParsedHeader, message: CommitMessage, options: LintOptions
    ) -> RuleResult:
        if not self.applies(header, message):
            return RuleResult(passed=True, message="")
        holds = self.check(header, message, options)
        negated = self.when == "never"
        passed = not holds if negated else holds
        return RuleResult(
            passed=passed,
            message="" if passed else self.describe(header, message, options, negated=negated),
        )

    def applies(self, header: ParsedHeader, message: CommitMessage) -> bool:
        return True

    def check(self, header: ParsedHeader, message: CommitMessage, options: LintOptions) -> bool:
        raise NotImplementedError

    def describe(
        self,
        header: ParsedHeader,
        message: CommitMessage,
        options: LintOptions,
        *,
        negated: bool,
    ) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(severity={self.severity!r}, when={self.when!r})"


def must(negated: bool) -> str:
    return "must not" if negated else "must"
