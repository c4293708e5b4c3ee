"""Rule behavior tests."""

from __future__ import annotations

import pytest

from commit_lint.evaluator import LintOptions
from commit_lint.message import parse_header, parse_message
from commit_lint.rules import RuleSetting, build_rules, default_rules, list_rule_info, rule_names
from commit_lint.rules.base import Rule, RuleResult
from commit_lint.rules.description_case import DescriptionCaseRule, is_case
from commit_lint.rules.description_tense import DescriptionTenseRule, first_word
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


def test_default_rules_follow_canonical_order() -> None:
    names = [rule.name for rule in default_rules()]
    assert names == [
        "component-not-empty",
        "description-not-empty",
        "description-case",
        "description-tense",
        "header-max-length",
        "body-max-line-length",
        "footer-max-line-length",
        "header-trim",
        "subject-full-stop",
        "body-leading-blank",
        "footer-leading-blank",
    ]
    assert names == rule_names()
    assert all(rule.severity == "error" for rule in default_rules())


def test_build_rules_applies_disable_and_settings() -> None:
    rules = build_rules(
        disabled_rule_names=["footer-leading-blank"],
        settings={
            "description-case": RuleSetting(severity="warning"),
            "header-trim": RuleSetting(severity="off"),
            "subject-full-stop": RuleSetting(when="always"),
        },
    )
    by_name = {rule.name: rule for rule in rules}
    assert "footer-leading-blank" not in by_name
    assert "header-trim" not in by_name
    assert by_name["description-case"].severity == "warning"
    assert by_name["subject-full-stop"].when == "always"


def test_build_rules_enable_keeps_canonical_order() -> None:
    rules = build_rules(enabled_rule_names=["subject-full-stop", "component-not-empty"])
    assert [rule.name for rule in rules] == ["component-not-empty", "subject-full-stop"]


def test_build_rules_rejects_unknown_names() -> None:
    with pytest.raises(ValueError, match="Unknown rule names: no-such-rule"):
        build_rules(disabled_rule_names=["no-such-rule"])


def test_list_rule_info_reports_default_polarity() -> None:
    info = {item.name: item for item in list_rule_info()}
    assert info["description-case"].default_when == "never"
    assert info["subject-full-stop"].default_when == "never"
    assert info["description-tense"].default_when == "always"
    assert info["header-max-length"].description == "Limits the header length."


def test_component_not_empty_flags_header_without_component() -> None:
    result = _run(ComponentNotEmptyRule(), "migrate shoes to new shoe module.")
    assert not result.passed
    assert "<component>: <description>" in result.message
    assert _run(ComponentNotEmptyRule(), "dog: refill water bowl").passed


def test_description_not_empty_is_independent_of_component() -> None:
    result = _run(DescriptionNotEmptyRule(), "dog:  ")
    assert not result.passed
    assert result.message == "description must not be empty"
    assert _run(ComponentNotEmptyRule(), "dog:  ").passed


def test_description_case_rejects_sentence_case() -> None:
    result = _run(DescriptionCaseRule(), "dungeonmaster: Fixes a bug with STR and CON attributes")
    assert not result.passed
    assert result.message == "description must not be sentence-case"


def test_description_case_ignores_component_case() -> None:
    assert _run(DescriptionCaseRule(), "DungeonMaster: refill water bowl").passed


@pytest.mark.parametrize(
    "header",
    [
        "dog: refill water bowl",
        "dog: 2fa support for the door",
        "dog: `Bowl` refill",
        "dog: refill `Bowl` via API",
    ],
)
def test_description_case_accepts_lowercase_numeric_and_quoted(header: str) -> None:
    assert _run(DescriptionCaseRule(), header).passed


@pytest.mark.parametrize(
    ("style", "header"),
    [
        ("upper-case", "dog: REFILL BOWL"),
        ("start-case", "dog: Refill Water Bowl"),
        ("pascal-case", "dog: RefillWaterBowl"),
        ("camel-case", "dog: refillWaterBowl"),
        ("kebab-case", "dog: refill-water-bowl"),
        ("snake-case", "dog: refill_water_bowl"),
    ],
)
def test_description_case_detects_each_style(style: str, header: str) -> None:
    options = LintOptions(disallowed_case_styles=(style,))
    result = _run(DescriptionCaseRule(), header, options)
    assert not result.passed
    assert result.message == f"description must not be {style}"


def test_description_case_always_requires_style() -> None:
    options = LintOptions(disallowed_case_styles=("lower-case",))
    rule = DescriptionCaseRule(when="always")
    assert _run(rule, "dog: refill water bowl", options).passed
    result = _run(rule, "dog: Refill water bowl", options)
    assert not result.passed
    assert result.message == "description must be lower-case"


def test_is_case_treats_empty_and_digits_as_matching() -> None:
    assert is_case("", "upper-case")
    assert is_case("404 page", "sentence-case")
    assert not is_case("refill bowl", "sentence-case")


def test_description_tense_accepts_allowlisted_first_word() -> None:
    assert _run(DescriptionTenseRule(), "dog: refill water bowl").passed
    assert _run(DescriptionTenseRule(), "dog: Refill, then rinse the bowl").passed
    assert _run(DescriptionTenseRule(), "net: re-enable keepalive").passed


def test_description_tense_names_rejected_word() -> None:
    result = _run(DescriptionTenseRule(), "dungeonmaster: Fixes a bug with STR and CON attributes")
    assert not result.passed
    assert '"fixes"' in result.message
    assert "present-imperative" in result.message


def test_description_tense_passes_empty_description() -> None:
    assert _run(DescriptionTenseRule(), "dog:  ").passed
    assert _run(DescriptionTenseRule(), "").passed


def test_description_tense_uses_injected_allowlist() -> None:
    options = LintOptions(allowlist=frozenset({"feed"}))
    assert _run(DescriptionTenseRule(), "dog: feed the cat", options).passed
    assert not _run(DescriptionTenseRule(), "dog: refill water bowl", options).passed


def test_first_word_lowercases_and_strips_punctuation() -> None:
    assert first_word("Refill: the bowl") == "refill"
    assert first_word("   ") == ""


def test_header_max_length_cites_limit_and_length() -> None:
    header = "dog: refill " + "x" * 68
    assert len(header) == 80
    result = _run(HeaderMaxLengthRule(), header)
    assert not result.passed
    assert result.message == (
        "header must not be longer than 72 characters, current length is 80"
    )
    assert _run(HeaderMaxLengthRule(), "dog: " + "x" * 67).passed


def test_body_max_line_length_flags_long_body_line() -> None:
    text = "dog: refill water bowl\n\nshort line\n" + "y" * 73
    result = _run(BodyMaxLineLengthRule(), text)
    assert not result.passed
    assert "72" in result.message
    assert "line 2 is 73 characters" in result.message
    assert _run(BodyMaxLineLengthRule(), "dog: refill water bowl").passed


def test_footer_max_line_length_flags_long_trailer() -> None:
    text = "dog: refill water bowl\n\nSigned-off-by: " + "a" * 70
    result = _run(FooterMaxLineLengthRule(), text)
    assert not result.passed
    assert result.message.startswith("footer's lines must not be longer than 72 characters")
    assert _run(BodyMaxLineLengthRule(), text).passed


def test_header_trim_reports_side() -> None:
    assert _run(HeaderTrimRule(), " dog: refill").message == "header must not start with whitespace"
    assert _run(HeaderTrimRule(), "dog: refill ").message == "header must not end with whitespace"
    assert _run(HeaderTrimRule(), "dog: refill").passed


def test_subject_full_stop_and_negation() -> None:
    result = _run(SubjectFullStopRule(), "dog: refill water bowl.")
    assert not result.passed
    assert result.message == 'header must not end with full stop "."'

    inverted = _run(SubjectFullStopRule(when="always"), "dog: refill water bowl")
    assert not inverted.passed
    assert inverted.message == 'header must end with full stop "."'


@pytest.mark.parametrize(
    ("text", "passed"),
    [
        ("dog: refill water bowl", True),
        ("dog: refill water bowl\n\nbody", True),
        ("dog: refill water bowl\nbody", False),
        ("dog: refill water bowl\n\n\nbody", False),
        ("dog: refill water bowl\nSigned-off-by: A <a@example.com>", False),
    ],
)
def test_body_leading_blank(text: str, passed: bool) -> None:
    result = _run(BodyLeadingBlankRule(), text)
    assert result.passed is passed
    if not passed:
        assert result.message == "body must have exactly one leading blank line"


def test_footer_leading_blank() -> None:
    missing = "dog: refill\n\nbody text\nSigned-off-by: A <a@example.com>"
    present = "dog: refill\n\nbody text\n\nSigned-off-by: A <a@example.com>"
    footer_only = "dog: refill\n\nSigned-off-by: A <a@example.com>"
    assert _run(FooterLeadingBlankRule(), missing).message == "footer must have leading blank line"
    assert _run(FooterLeadingBlankRule(), present).passed
    assert _run(FooterLeadingBlankRule(), footer_only).passed


def _run(rule: Rule, text: str, options: LintOptions | None = None) -> RuleResult:
    message = parse_message(text)
    return rule.evaluate(parse_header(message.header), message, options or LintOptions())


def test_footer_leading_blank_check_holds_without_footer() -> None:
    message = parse_message("dog: refill water bowl\n\nThe bowl was empty.")
    header = parse_header(message.header)
    assert message.footer_start is None
    assert FooterLeadingBlankRule().check(header, message, LintOptions())
