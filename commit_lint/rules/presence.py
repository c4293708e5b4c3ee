"""Header shape rules: component and description presence."""

from __future__ import annotations

from typing import TYPE_CHECKING

from commit_lint.message import CommitMessage, ParsedHeader
from commit_lint.rules.base import ConditionRule, must

if TYPE_CHECKING:
    from commit_lint.evaluator import LintOptions


class ComponentNotEmptyRule(ConditionRule):
    """Requires a header of the form `<component>: <description>`."""

    name = "component-not-empty"

    def check(self, header: ParsedHeader, message: CommitMessage, options: LintOptions) -> bool:
        return bool(header.component)

    def describe(
        self,
        header: ParsedHeader,
        message: CommitMessage,
        options: LintOptions,
        *,
        negated: bool,
    ) -> str:
        if negated:
            return "component must be empty"
        return 'header must be of the form "<component>: <description>"; component is missing'


class DescriptionNotEmptyRule(ConditionRule):
    """Requires a non-empty description."""

    name = "description-not-empty"

    def check(self, header: ParsedHeader, message: CommitMessage, options: LintOptions) -> bool:
        return bool(header.description.strip())

    def describe(
        self,
        header: ParsedHeader,
        message: CommitMessage,
        options: LintOptions,
        *,
        negated: bool,
    ) -> str:
        return f"description {must(not negated)} be empty"
