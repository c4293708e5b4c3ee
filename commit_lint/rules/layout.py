"""Structural formatting rules: whitespace, punctuation and blank lines."""

from __future__ import annotations

from typing import TYPE_CHECKING

from commit_lint.message import CommitMessage, ParsedHeader
from commit_lint.rules.base import ConditionRule, must

if TYPE_CHECKING:
    from commit_lint.evaluator import LintOptions

FULL_STOP = "."


class HeaderTrimRule(ConditionRule):
    """Rejects leading or trailing whitespace in the header."""

    name = "header-trim"

    def check(self, header: ParsedHeader, message: CommitMessage, options: LintOptions) -> bool:
        return message.header == message.header.strip()

    def describe(
        self,
        header: ParsedHeader,
        message: CommitMessage,
        options: LintOptions,
        *,
        negated: bool,
    ) -> str:
        if negated:
            return "header must have leading or trailing whitespace"
        if message.header.startswith((" ", "\t")) and message.header.endswith((" ", "\t")):
            return "header must not be surrounded by whitespace"
        if message.header.startswith((" ", "\t")):
            return "header must not start with whitespace"
        return "header must not end with whitespace"


class SubjectFullStopRule(ConditionRule):
    """Rejects a header ending in a full stop."""

    name = "subject-full-stop"
    default_when = "never"

    def check(self, header: ParsedHeader, message: CommitMessage, options: LintOptions) -> bool:
        return message.header.endswith(FULL_STOP)

    def describe(
        self,
        header: ParsedHeader,
        message: CommitMessage,
        options: LintOptions,
        *,
        negated: bool,
    ) -> str:
        return f'header {must(negated)} end with full stop "{FULL_STOP}"'


class BodyLeadingBlankRule(ConditionRule):
    """Requires exactly one blank line between header and body."""

    name = "body-leading-blank"

    def applies(self, header: ParsedHeader, message: CommitMessage) -> bool:
        return len(message.lines) > 1

    def check(self, header: ParsedHeader, message: CommitMessage, options: LintOptions) -> bool:
        lines = message.lines
        if lines[1].strip():
            return False
        return len(lines) < 3 or bool(lines[2].strip())

    def describe(
        self,
        header: ParsedHeader,
        message: CommitMessage,
        options: LintOptions,
        *,
        negated: bool,
    ) -> str:
        return f"body {must(negated)} have exactly one leading blank line"


class FooterLeadingBlankRule(ConditionRule):
    """Requires a blank line between body and footer."""

    name = "footer-leading-blank"

    def applies(self, header: ParsedHeader, message: CommitMessage) -> bool:
        return message.body is not None and message.footer_start is not None

    def check(self, header: ParsedHeader, message: CommitMessage, options: LintOptions) -> bool:
        if message.footer_start is None:
            return True
        return not message.lines[message.footer_start - 1].strip()

    def describe(
        self,
        header: ParsedHeader,
        message: CommitMessage,
        options: LintOptions,
        *,
        negated: bool,
    ) -> str:
        return f"footer {must(negated)} have leading blank line"
