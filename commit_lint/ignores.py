"""Ignore predicates that exempt whole commit messages from linting."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from re import Pattern


@dataclass(frozen=True, slots=True)
class IgnorePredicate:
    """A named pattern searched against the cleaned commit message."""

    name: str
    regex: Pattern[str]

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None


def literal(name: str, substring: str) -> IgnorePredicate:
    """Build a predicate that matches a literal substring anywhere."""
    return IgnorePredicate(name=name, regex=re.compile(re.escape(substring)))


def pattern(name: str, regex: str) -> IgnorePredicate:
    """Build a predicate from a regular expression."""
    try:
        compiled = re.compile(regex)
    except re.error as exc:
        raise ValueError(f"Invalid ignore pattern {regex!r}: {exc}") from exc
    return IgnorePredicate(name=name, regex=compiled)


DEFAULT_IGNORES: tuple[IgnorePredicate, ...] = (
    literal("merge-pull-request", "Merge pull request #"),
    pattern("merge", r"\AMerge (?:branch|remote-tracking branch|tag) "),
    pattern("revert", r'\ARevert ".*"'),
    pattern("autosquash", r"\A(?:fixup|squash|amend)! "),
    pattern(
        "version-bump",
        r"\A(?:[\w.-]+: )?[Bb]ump \S+ (?:from \S+ )?to v?\d+(?:\.\d+)*[\w.+-]*[ \t]*(?:\n|\Z)",
    ),
)


def build_ignores(
    patterns: Iterable[str] = (), *, include_default: bool = True
) -> tuple[IgnorePredicate, ...]:
    """Return the ordered ignore predicates: defaults first, then ``patterns``."""
    configured = tuple(
        pattern(f"config:{index}", regex) for index, regex in enumerate(patterns)
    )
    if not include_default:
        return configured
    return DEFAULT_IGNORES + configured


def find_ignore(text: str, ignores: Iterable[IgnorePredicate]) -> IgnorePredicate | None:
    """Return the first predicate matching ``text``."""
    for predicate in ignores:
        if predicate.matches(text):
            return predicate
    return None
