"""Output rendering."""

from __future__ import annotations

import json
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

import click

from commit_lint import __version__
from commit_lint.evaluator import EvaluationReport, RuleOutcome

INPUT_SIGN = "⧗"
ERROR_SIGN = "✖"
WARNING_SIGN = "⚠"
SUCCESS_SIGN = "✔"
INFO_SIGN = "ⓘ"


def render_human(
    reports: Sequence[EvaluationReport],
    *,
    help_url: str | None = None,
    verbose: bool = False,
) -> str:
    """Render diagnostics for failing reports (all reports when verbose)."""
    blocks: list[str] = []
    for report in reports:
        if report.violations or verbose:
            blocks.append(_render_report(report, help_url=help_url))
    return "\n\n".join(blocks)


def _render_report(report: EvaluationReport, *, help_url: str | None) -> str:
    label = f"{report.source} " if report.source else ""
    lines = [f"{click.style(INPUT_SIGN, bold=True)}   input: {label}{report.message.header}"]
    if report.ignored:
        lines.append(f"{click.style(INFO_SIGN, fg='blue')}   ignored ({report.ignored_by})")
        return "\n".join(lines)

    for outcome in report.violations:
        lines.append(_render_outcome(outcome))

    errors = len(report.errors)
    warnings = len(report.warnings)
    if errors:
        sign = click.style(ERROR_SIGN, fg="red", bold=True)
    elif warnings:
        sign = click.style(WARNING_SIGN, fg="yellow", bold=True)
    else:
        sign = click.style(SUCCESS_SIGN, fg="green", bold=True)
    lines.append("")
    lines.append(f"{sign}   found {errors} problems, {warnings} warnings")
    if help_url and (errors or warnings):
        lines.append(f"{click.style(INFO_SIGN, fg='blue')}   Get help: {help_url}")
    return "\n".join(lines)


def _render_outcome(outcome: RuleOutcome) -> str:
    if outcome.severity == "error":
        sign = click.style(ERROR_SIGN, fg="red")
    else:
        sign = click.style(WARNING_SIGN, fg="yellow")
    return f"{sign}   {outcome.result.message} [{outcome.rule}]"


def render_json(
    reports: Sequence[EvaluationReport],
    *,
    input_source: str,
    help_url: str | None = None,
) -> str:
    """Render stable JSON output for CI and automation."""
    return json.dumps(
        build_json_payload(reports, input_source=input_source, help_url=help_url),
        sort_keys=True,
    )


def build_json_payload(
    reports: Sequence[EvaluationReport],
    *,
    input_source: str,
    help_url: str | None = None,
) -> dict[str, Any]:
    """Build stable JSON payload for CI and automation."""
    return {
        "passed": all(report.overall_passed for report in reports),
        "reports": [_serialize_report(report) for report in reports],
        "meta": {
            "generated_at": datetime.now(tz=UTC)
            .replace(microsecond=0)
            .isoformat()
            .replace("+00:00", "Z"),
            "help_url": help_url,
            "input_source": input_source,
            "version": __version__,
        },
    }


def _serialize_report(report: EvaluationReport) -> dict[str, Any]:
    return {
        "source": report.source,
        "header": report.message.header,
        "component": report.header.component,
        "description": report.header.description,
        "ignored_by": report.ignored_by,
        "passed": report.overall_passed,
        "errors": len(report.errors),
        "warnings": len(report.warnings),
        "results": [_serialize_outcome(item) for item in report.outcomes],
    }


def _serialize_outcome(outcome: RuleOutcome) -> dict[str, Any]:
    return {
        "rule": outcome.rule,
        "severity": outcome.severity,
        "passed": outcome.passed,
        "message": outcome.result.message,
    }
