"""Case-style rule for header descriptions."""

from __future__ import annotations

from re import compile
from typing import TYPE_CHECKING

from commit_lint.message import CommitMessage, ParsedHeader
from commit_lint.rules.base import ConditionRule, must

if TYPE_CHECKING:
    from commit_lint.evaluator import LintOptions

CASE_STYLES: tuple[str, ...] = (
    "lower-case",
    "upper-case",
    "sentence-case",
    "start-case",
    "pascal-case",
    "camel-case",
    "kebab-case",
    "snake-case",
)
DEFAULT_DISALLOWED_CASE_STYLES: tuple[str, ...] = (
    "sentence-case",
    "start-case",
    "pascal-case",
    "upper-case",
)

_QUOTED_RE = compile(r"`.*?`|\".*?\"|'.*?'")
_WORD_RE = compile(r"[A-Z]{2,}(?=[A-Z][a-z]|[^A-Za-z]|$)|[A-Z]?[a-z]+|[A-Z]+|\d+")


class DescriptionCaseRule(ConditionRule):
    """Rejects descriptions written in disallowed case styles."""

    name = "description-case"
    default_when = "never"

    def applies(self, header: ParsedHeader, message: CommitMessage) -> bool:
        text = header.description.strip()
        return bool(text) and text[0].isalpha()

    def check(self, header: ParsedHeader, message: CommitMessage, options: LintOptions) -> bool:
        return matched_case_style(header.description, options.disallowed_case_styles) is not None

    def describe(
        self,
        header: ParsedHeader,
        message: CommitMessage,
        options: LintOptions,
        *,
        negated: bool,
    ) -> str:
        if negated:
            style = matched_case_style(header.description, options.disallowed_case_styles)
            return f"description {must(True)} be {style}"
        return f"description {must(False)} be {' or '.join(options.disallowed_case_styles)}"


def matched_case_style(text: str, styles: tuple[str, ...]) -> str | None:
    """Return the first style in ``styles`` that ``text`` is written in."""
    for style in styles:
        if is_case(text, style):
            return style
    return None


def is_case(text: str, style: str) -> bool:
    """Whether ``text`` reads the same after conversion to ``style``.

    Quoted and back-ticked fragments are ignored. Empty text and text starting
    with a digit count as any style.
    """
    cleaned = _QUOTED_RE.sub("", text).strip()
    transformed = to_case(cleaned, style)
    if not transformed or transformed[0].isdigit():
        return True
    return transformed == cleaned


def to_case(text: str, style: str) -> str:
    if style == "lower-case":
        return text.lower()
    if style == "upper-case":
        return text.upper()
    if style == "sentence-case":
        return text[:1].upper() + text[1:]

    words = _WORD_RE.findall(text.replace("'", ""))
    if style == "start-case":
        return " ".join(word[:1].upper() + word[1:] for word in words)
    if style == "camel-case":
        return _camel(words)
    if style == "pascal-case":
        camel = _camel(words)
        return camel[:1].upper() + camel[1:]
    if style == "kebab-case":
        return "-".join(word.lower() for word in words)
    if style == "snake-case":
        return "_".join(word.lower() for word in words)
    raise ValueError(f"Unknown case style '{style}'. Expected one of: {', '.join(CASE_STYLES)}")


def _camel(words: list[str]) -> str:
    lowered = [word.lower() for word in words]
    if not lowered:
        return ""
    return lowered[0] + "".join(word.capitalize() for word in lowered[1:])
