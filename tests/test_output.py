"""Output rendering tests."""

from __future__ import annotations

import json

from commit_lint.evaluator import Evaluator
from commit_lint.output import render_human, render_json
from commit_lint.rules import RuleSetting, build_rules


def test_render_human_lists_violations_with_rule_names() -> None:
    report = Evaluator().evaluate("migrate shoes to new shoe module.", source="abc1234")
    output = render_human([report], help_url="https://example.com/CONTRIBUTING.md")

    assert "input: abc1234 migrate shoes to new shoe module." in output
    assert "[component-not-empty]" in output
    assert "[subject-full-stop]" in output
    assert "found 2 problems, 0 warnings" in output
    assert "Get help: https://example.com/CONTRIBUTING.md" in output


def test_render_human_skips_passing_reports_unless_verbose() -> None:
    evaluator = Evaluator()
    reports = [
        evaluator.evaluate("dog: refill water bowl"),
        evaluator.evaluate("Merge pull request #42 from x/y"),
    ]
    assert render_human(reports) == ""

    verbose = render_human(reports, verbose=True)
    assert "input: dog: refill water bowl" in verbose
    assert "found 0 problems, 0 warnings" in verbose
    assert "ignored (merge-pull-request)" in verbose
    assert "Get help" not in verbose


def test_render_human_counts_warnings() -> None:
    rules = build_rules(settings={"description-case": RuleSetting(severity="warning")})
    report = Evaluator(rules).evaluate("dog: Refill water bowl")
    output = render_human([report])
    assert "description must not be sentence-case [description-case]" in output
    assert "found 0 problems, 1 warnings" in output


def test_render_json_has_stable_schema_keys() -> None:
    evaluator = Evaluator()
    reports = [
        evaluator.evaluate("dungeonmaster: Fixes a bug", source="abc1234"),
        evaluator.evaluate("bump foo-pkg to v1.2.3", source="def5678"),
    ]
    payload = json.loads(
        render_json(reports, input_source="git_range", help_url="https://example.com/help")
    )

    assert set(payload.keys()) == {"passed", "reports", "meta"}
    assert payload["passed"] is False
    assert set(payload["meta"].keys()) == {"generated_at", "help_url", "input_source", "version"}
    assert payload["meta"]["input_source"] == "git_range"

    first, second = payload["reports"]
    assert set(first.keys()) == {
        "source",
        "header",
        "component",
        "description",
        "ignored_by",
        "passed",
        "errors",
        "warnings",
        "results",
    }
    assert first["component"] == "dungeonmaster"
    assert first["errors"] == 2
    assert set(first["results"][0].keys()) == {"rule", "severity", "passed", "message"}
    assert second["ignored_by"] == "version-bump"
    assert second["results"] == []
    assert second["passed"] is True
