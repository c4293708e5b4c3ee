"""CLI entrypoint for commit-lint."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from commit_lint import __version__
from commit_lint.config import (
    AppConfig,
    ConfigurationError,
    default_config_template,
    load_app_config,
)
from commit_lint.evaluator import EvaluationReport, Evaluator, build_evaluator
from commit_lint.git import GitError, get_last_commit, get_range_commits
from commit_lint.message import parse_header
from commit_lint.output import render_human, render_json
from commit_lint.rules import list_rule_info

LOG_LEVELS = ("debug", "info", "warning", "error")

app = typer.Typer(
    name="commit-lint",
    no_args_is_help=True,
    help="Lint commit messages of the form '<component>: <description>'.",
)
logger = logging.getLogger(__name__)


def version_callback(value: bool) -> None:
    """Print version and exit when --version is provided."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option("--version", help="Show version and exit.", callback=version_callback),
    ] = False,
    log_level: Annotated[
        str, typer.Option("--log-level", help="Logging level: debug|info|warning|error.")
    ] = "warning",
) -> None:
    """Root command callback."""
    _ = version
    level = log_level.lower()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(
            f"log level must be one of: {', '.join(LOG_LEVELS)}", param_hint="--log-level"
        )
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.command("lint")
def lint_command(
    from_rev: Annotated[
        str | None,
        typer.Option(
            "--from",
            help="Lower end of the commit range (exclusive). Omit to lint all of --to's history.",
        ),
    ] = None,
    to_rev: Annotated[
        str | None,
        typer.Option("--to", help="Upper end of the commit range.", show_default="HEAD"),
    ] = None,
    last: Annotated[bool, typer.Option("--last", help="Lint the HEAD commit.")] = False,
    edit: Annotated[
        Path | None, typer.Option("--edit", help="Lint a commit-msg file such as COMMIT_EDITMSG.")
    ] = None,
    stdin: Annotated[bool, typer.Option(help="Read one commit message from stdin.")] = False,
    message: Annotated[
        str | None, typer.Option("--message", "-m", help="Lint the given message text.")
    ] = None,
    repo: Annotated[Path, typer.Option(help="Repository path.")] = Path("."),
    format: Annotated[
        str | None, typer.Option(help="Output format: human|json.", show_default="human")
    ] = None,
    help_url: Annotated[
        str | None, typer.Option("--help-url", help="URL shown next to reported problems.")
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Also report passing and ignored commits.")
    ] = False,
    strict: Annotated[
        bool, typer.Option("--strict", help="Exit with code 2 when only warnings are found.")
    ] = False,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config TOML file."),
    ] = None,
) -> None:
    """Lint commit messages and exit nonzero on errors."""
    app_config = _load_config_or_raise(repo, config_file)
    output_format = (format or app_config.format).lower()
    if output_format not in {"human", "json"}:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")

    selected = [
        from_rev is not None or to_rev is not None,
        last,
        edit is not None,
        stdin,
        message is not None,
    ]
    if sum(selected) > 1:
        raise typer.BadParameter("Use only one of --from/--to, --last, --edit, --stdin, --message.")

    evaluator = _build_evaluator_or_raise(app_config)
    reports, input_source = _lint_input(
        evaluator,
        repo=repo,
        from_rev=from_rev,
        to_rev=to_rev,
        edit=edit,
        stdin=stdin,
        message=message,
    )
    resolved_help_url = help_url or app_config.help_url

    if output_format == "json":
        typer.echo(render_json(reports, input_source=input_source, help_url=resolved_help_url))
    else:
        rendered = render_human(reports, help_url=resolved_help_url, verbose=verbose)
        if rendered:
            typer.echo(rendered)

    if not all(report.overall_passed for report in reports):
        raise typer.Exit(code=1)
    if strict and any(report.warnings for report in reports):
        raise typer.Exit(code=2)


@app.command("check-header")
def check_header_command(
    header: Annotated[str, typer.Argument(help="Header line to split.")],
    format: Annotated[str, typer.Option(help="Output format: human|json.")] = "human",
) -> None:
    """Show how a header splits into component and description."""
    output_format = format.lower()
    if output_format not in {"human", "json"}:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")

    parsed = parse_header(header)
    if output_format == "json":
        payload = {"component": parsed.component, "description": parsed.description}
        typer.echo(json.dumps(payload, sort_keys=True))
        return
    typer.echo(f"component: {parsed.component or '<missing>'}")
    typer.echo(f"description: {parsed.description or '<missing>'}")


@app.command("rules")
def rules_command(
    repo: Annotated[Path, typer.Option(help="Repository path.")] = Path("."),
    format: Annotated[str, typer.Option(help="Output format: human|json.")] = "human",
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config TOML file."),
    ] = None,
) -> None:
    """List available rules and their configured severity."""
    output_format = format.lower()
    if output_format not in {"human", "json"}:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")

    app_config = _load_config_or_raise(repo, config_file)
    evaluator = _build_evaluator_or_raise(app_config)
    active = {rule.name: rule for rule in evaluator.rules}
    rule_info = list_rule_info()

    if output_format == "json":
        payload = {
            "rules": [
                {
                    "name": item.name,
                    "description": item.description,
                    "default_severity": item.default_severity,
                    "default_when": item.default_when,
                    "severity": active[item.name].severity if item.name in active else "off",
                    "when": active[item.name].when if item.name in active else item.default_when,
                    "enabled": item.name in active,
                }
                for item in rule_info
            ],
            "meta": {"config_source": app_config.source},
        }
        typer.echo(json.dumps(payload, sort_keys=True))
        return

    lines = ["Available rules:"]
    for item in rule_info:
        rule = active.get(item.name)
        status = f"{rule.severity}, {rule.when}" if rule is not None else "off"
        lines.append(f"- {item.name} [{status}] - {item.description}")
    typer.echo("\n".join(lines))


@app.command("config")
def config_command(
    repo: Annotated[Path, typer.Option(help="Repository path.")] = Path("."),
    format: Annotated[str, typer.Option(help="Output format: human|json.")] = "human",
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config TOML file."),
    ] = None,
) -> None:
    """Show resolved configuration."""
    output_format = format.lower()
    if output_format not in {"human", "json"}:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")

    app_config = _load_config_or_raise(repo, config_file)
    evaluator = _build_evaluator_or_raise(app_config)
    payload = app_config.to_dict()
    payload["active_rules"] = [rule.name for rule in evaluator.rules]

    if output_format == "json":
        typer.echo(json.dumps(payload, sort_keys=True))
        return

    lines = [
        "Resolved configuration:",
        f"- source: {payload['source'] or 'defaults'}",
        f"- format: {payload['format']}",
        f"- help_url: {payload['help_url']}",
        f"- default_ignores: {payload['default_ignores']}",
        f"- ignores: {payload['ignores']}",
        f"- lint: {payload['lint']}",
        f"- tense.allowlist: {payload['tense']['allowlist']}",
        f"- active_rules: {payload['active_rules']}",
    ]
    typer.echo("\n".join(lines))


@app.command("config-init")
def config_init_command(
    out: Annotated[Path, typer.Option(help="Output path for starter config TOML.")] = Path(
        ".commit-lint.toml"
    ),
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite if file already exists."),
    ] = False,
) -> None:
    """Create a starter repository config file."""
    out_path = out.resolve()
    if out_path.exists() and not force:
        raise typer.BadParameter(
            f"Refusing to overwrite existing file: {out_path}. Use --force to overwrite."
        )
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(default_config_template(), encoding="utf-8")
    typer.echo(f"Wrote starter config: {out_path}")


@app.command("config-validate")
def config_validate_command(
    repo: Annotated[Path, typer.Option(help="Repository path.")] = Path("."),
    config_file: Annotated[
        Path,
        typer.Option("--config", help="Path to config TOML file to validate."),
    ] = Path(".commit-lint.toml"),
    format: Annotated[str, typer.Option(help="Output format: human|json.")] = "human",
) -> None:
    """Validate a config file and report active rules."""
    output_format = format.lower()
    if output_format not in {"human", "json"}:
        raise typer.BadParameter("format must be one of: human, json", param_hint="--format")

    app_config = _load_config_or_raise(repo, config_file)
    evaluator = _build_evaluator_or_raise(app_config)
    payload = {
        "ok": True,
        "source": app_config.source,
        "active_rules": [rule.name for rule in evaluator.rules],
    }
    if output_format == "json":
        typer.echo(json.dumps(payload, sort_keys=True))
        return
    typer.echo(
        "\n".join(
            [
                "Config is valid.",
                f"- source: {payload['source']}",
                f"- active_rules: {payload['active_rules']}",
            ]
        )
    )


def main() -> None:
    """Console script entrypoint."""
    app()


def _lint_input(
    evaluator: Evaluator,
    *,
    repo: Path,
    from_rev: str | None,
    to_rev: str | None,
    edit: Path | None,
    stdin: bool,
    message: str | None,
) -> tuple[list[EvaluationReport], str]:
    if message is not None:
        return ([evaluator.evaluate(message)], "message")

    if stdin:
        return ([evaluator.evaluate(sys.stdin.read())], "stdin")

    if edit is not None:
        try:
            text = edit.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise typer.BadParameter(f"Cannot read {edit}: {exc}", param_hint="--edit") from exc
        return (
            [evaluator.evaluate(text, source=str(edit), strip_comments=True)],
            f"edit:{edit}",
        )

    try:
        if from_rev is not None or to_rev is not None:
            commits = get_range_commits(repo, from_rev, to_rev or "HEAD")
            input_source = "git_range"
        else:
            commits = [get_last_commit(repo)]
            input_source = "git_last"
    except GitError as exc:
        raise typer.BadParameter(str(exc)) from exc

    logger.info("Linting %d commits from %s", len(commits), input_source)
    reports = [evaluator.evaluate(commit.message, source=commit.short_sha) for commit in commits]
    return (reports, input_source)


def _load_config_or_raise(repo: Path, config_file: Path | None = None) -> AppConfig:
    try:
        return load_app_config(repo, config_path=config_file)
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc), param_hint="config") from exc


def _build_evaluator_or_raise(app_config: AppConfig) -> Evaluator:
    try:
        return build_evaluator(app_config)
    except ConfigurationError as exc:
        raise typer.BadParameter(str(exc), param_hint="config.rules") from exc
