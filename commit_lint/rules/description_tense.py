"""Present-imperative tense rule backed by a verb allowlist."""

from __future__ import annotations

from typing import TYPE_CHECKING

from commit_lint.message import CommitMessage, ParsedHeader
from commit_lint.rules.base import ConditionRule, must

if TYPE_CHECKING:
    from commit_lint.evaluator import LintOptions

_TRAILING_PUNCTUATION = ",.:;!?"


class DescriptionTenseRule(ConditionRule):
    """Requires the description to start with an allowlisted imperative verb."""

    name = "description-tense"

    def applies(self, header: ParsedHeader, message: CommitMessage) -> bool:
        return bool(first_word(header.description))

    def check(self, header: ParsedHeader, message: CommitMessage, options: LintOptions) -> bool:
        return first_word(header.description) in options.allowlist

    def describe(
        self,
        header: ParsedHeader,
        message: CommitMessage,
        options: LintOptions,
        *,
        negated: bool,
    ) -> str:
        word = first_word(header.description)
        if negated:
            return (
                f"description {must(True)} start with a present-imperative verb, "
                f'found "{word}"'
            )
        return (
            f"description {must(False)} start with a present-imperative verb; "
            f'"{word}" is not in the allowed verb list'
        )


def first_word(description: str) -> str:
    """Return the lower-cased first token of a description."""
    tokens = description.split()
    if not tokens:
        return ""
    return tokens[0].lower().rstrip(_TRAILING_PUNCTUATION)
