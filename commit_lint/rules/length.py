"""Line length rules for header, body and footer."""

from __future__ import annotations

from typing import TYPE_CHECKING

from commit_lint.message import CommitMessage, ParsedHeader
from commit_lint.rules.base import ConditionRule, must

if TYPE_CHECKING:
    from commit_lint.evaluator import LintOptions


class HeaderMaxLengthRule(ConditionRule):
    """Limits the header length."""

    name = "header-max-length"

    def check(self, header: ParsedHeader, message: CommitMessage, options: LintOptions) -> bool:
        return len(message.header) <= options.max_header_length

    def describe(
        self,
        header: ParsedHeader,
        message: CommitMessage,
        options: LintOptions,
        *,
        negated: bool,
    ) -> str:
        return (
            f"header {must(not negated)} be longer than {options.max_header_length} "
            f"characters, current length is {len(message.header)}"
        )


class _BlockLineLengthRule(ConditionRule):
    block = ""

    def lines(self, message: CommitMessage) -> list[str]:
        raise NotImplementedError

    def limit(self, options: LintOptions) -> int:
        raise NotImplementedError

    def applies(self, header: ParsedHeader, message: CommitMessage) -> bool:
        return bool(self.lines(message))

    def check(self, header: ParsedHeader, message: CommitMessage, options: LintOptions) -> bool:
        return _longest(self.lines(message)) <= self.limit(options)

    def describe(
        self,
        header: ParsedHeader,
        message: CommitMessage,
        options: LintOptions,
        *,
        negated: bool,
    ) -> str:
        limit = self.limit(options)
        lines = self.lines(message)
        too_long = [index for index, line in enumerate(lines, start=1) if len(line) > limit]
        detail = f"; longest line is {_longest(lines)} characters"
        if too_long and not negated:
            detail = f"; line {too_long[0]} is {len(lines[too_long[0] - 1])} characters"
        return (
            f"{self.block}'s lines {must(not negated)} be longer than {limit} characters{detail}"
        )


class BodyMaxLineLengthRule(_BlockLineLengthRule):
    """Limits the length of every body line."""

    name = "body-max-line-length"
    block = "body"

    def lines(self, message: CommitMessage) -> list[str]:
        return message.body_lines

    def limit(self, options: LintOptions) -> int:
        return options.max_body_line_length


class FooterMaxLineLengthRule(_BlockLineLengthRule):
    """Limits the length of every footer line."""

    name = "footer-max-line-length"
    block = "footer"

    def lines(self, message: CommitMessage) -> list[str]:
        return message.footer_lines

    def limit(self, options: LintOptions) -> int:
        return options.max_footer_line_length


def _longest(lines: list[str]) -> int:
    return max((len(line) for line in lines), default=0)
