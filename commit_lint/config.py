"""Configuration loading for commit-lint."""

from __future__ import annotations

import logging
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from commit_lint.rules import rule_names
from commit_lint.rules.base import SEVERITIES, WHENS
from commit_lint.rules.description_case import CASE_STYLES, DEFAULT_DISALLOWED_CASE_STYLES

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = (".commit-lint.toml", "commit-lint.toml")
PYPROJECT_FILENAME = "pyproject.toml"
PYPROJECT_TOOL_KEYS = ("commit_lint", "commit-lint")


class ConfigurationError(ValueError):
    """Raised when configuration is malformed."""


@dataclass(slots=True)
class LintConfig:
    """Rule options: length limits and disallowed case styles."""

    max_header_length: int = 72
    max_body_line_length: int = 72
    max_footer_line_length: int = 72
    disallowed_case_styles: list[str] = field(
        default_factory=lambda: list(DEFAULT_DISALLOWED_CASE_STYLES)
    )

    def to_dict(self) -> dict[str, Any]:
        return {
            "max_header_length": self.max_header_length,
            "max_body_line_length": self.max_body_line_length,
            "max_footer_line_length": self.max_footer_line_length,
            "disallowed_case_styles": list(self.disallowed_case_styles),
        }


@dataclass(slots=True)
class TenseConfig:
    """Verb allowlist additions for the tense rule."""

    allowlist: list[str] = field(default_factory=list)
    include_default: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"allowlist": list(self.allowlist), "include_default": self.include_default}


@dataclass(slots=True)
class RuleSettingConfig:
    """Severity/when override for a single rule."""

    severity: str | None = None
    when: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"severity": self.severity, "when": self.when}


@dataclass(slots=True)
class AppConfig:
    """Runtime configuration values resolved from project files."""

    format: str = "human"
    help_url: str | None = None
    default_ignores: bool = True
    ignores: list[str] = field(default_factory=list)
    rule_enable: list[str] | None = None
    rule_disable: list[str] = field(default_factory=list)
    rule_settings: dict[str, RuleSettingConfig] = field(default_factory=dict)
    lint: LintConfig = field(default_factory=LintConfig)
    tense: TenseConfig = field(default_factory=TenseConfig)
    source: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "format": self.format,
            "help_url": self.help_url,
            "default_ignores": self.default_ignores,
            "ignores": list(self.ignores),
            "rules": {
                "enable": list(self.rule_enable) if self.rule_enable is not None else None,
                "disable": list(self.rule_disable),
                "settings": {
                    name: setting.to_dict() for name, setting in sorted(self.rule_settings.items())
                },
            },
            "lint": self.lint.to_dict(),
            "tense": self.tense.to_dict(),
            "source": self.source,
        }


def load_app_config(repo: Path, config_path: Path | None = None) -> AppConfig:
    """Load config from explicit path or repository-local files with precedence."""
    repo = repo.resolve()
    if config_path is not None:
        resolved = config_path if config_path.is_absolute() else (repo / config_path)
        if not resolved.exists():
            raise ConfigurationError(f"Config file does not exist: {resolved}")
        mapping = _extract_config_mapping(_load_toml(resolved), source_path=resolved)
        return _from_mapping(mapping, source=str(resolved))

    for filename in CONFIG_FILENAMES:
        resolved = repo / filename
        if resolved.exists():
            mapping = _extract_config_mapping(_load_toml(resolved), source_path=resolved)
            return _from_mapping(mapping, source=str(resolved))

    pyproject_path = repo / PYPROJECT_FILENAME
    if pyproject_path.exists():
        mapping = _extract_config_mapping(_load_toml(pyproject_path), source_path=pyproject_path)
        if mapping:
            return _from_mapping(mapping, source=str(pyproject_path))

    logger.debug("No config file found under %s, using defaults", repo)
    return AppConfig()


def default_config_template() -> str:
    """Return a starter config template."""
    return "\n".join(
        [
            'format = "human"',
            '# help_url = "https://github.com/<owner>/<repo>/blob/develop/CONTRIBUTING.md"',
            "default_ignores = true",
            "# Regular expressions searched against the whole message.",
            'ignores = ["^WIP: "]',
            "",
            "[rules]",
            "# enable = []",
            "disable = []",
            "",
            "[rules.settings.description-case]",
            'severity = "error"',
            'when = "never"',
            "",
            "[rules.settings.footer-leading-blank]",
            'severity = "warning"',
            "",
            "[lint]",
            "max_header_length = 72",
            "max_body_line_length = 72",
            "max_footer_line_length = 72",
            "disallowed_case_styles = [",
            '  "sentence-case",',
            '  "start-case",',
            '  "pascal-case",',
            '  "upper-case",',
            "]",
            "",
            "[tense]",
            "include_default = true",
            'allowlist = ["render"]',
            "",
        ]
    )


def _load_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as file_obj:
            loaded = tomllib.load(file_obj)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid TOML in {path}: {exc}") from exc
    if not isinstance(loaded, dict):
        return {}
    logger.debug("Loaded config from %s", path)
    return loaded


def _extract_config_mapping(loaded: dict[str, Any], *, source_path: Path) -> dict[str, Any]:
    if source_path.name == PYPROJECT_FILENAME:
        section = _find_pyproject_tool_section(loaded)
        return section if section is not None else {}

    tool_section = _find_pyproject_tool_section(loaded)
    if tool_section is not None:
        return tool_section
    return loaded


def _find_pyproject_tool_section(loaded: dict[str, Any]) -> dict[str, Any] | None:
    tool = loaded.get("tool")
    if not isinstance(tool, dict):
        return None
    for key in PYPROJECT_TOOL_KEYS:
        section = tool.get(key)
        if isinstance(section, dict):
            return section
    return None


def _from_mapping(mapping: dict[str, Any], *, source: str) -> AppConfig:
    rules_mapping = _as_table(mapping.get("rules"), "rules")
    lint_mapping = _as_table(mapping.get("lint"), "lint")
    tense_mapping = _as_table(mapping.get("tense"), "tense")

    raw_help_url = mapping.get("help_url")
    help_url = None if raw_help_url is None else _as_str(raw_help_url, "help_url")

    rule_enable = _as_str_list_or_none(rules_mapping.get("enable"), "rules.enable")
    rule_disable = _as_str_list(rules_mapping.get("disable"), "rules.disable")
    rule_settings = _parse_rule_settings(_as_table(rules_mapping.get("settings"), "rules.settings"))
    _validate_rule_names([*(rule_enable or []), *rule_disable, *rule_settings])

    return AppConfig(
        format=_as_choice(mapping.get("format", "human"), {"human", "json"}, "format"),
        help_url=help_url,
        default_ignores=_as_bool(mapping.get("default_ignores", True), "default_ignores"),
        ignores=_parse_ignores(mapping.get("ignores")),
        rule_enable=rule_enable,
        rule_disable=rule_disable,
        rule_settings=rule_settings,
        lint=_parse_lint_config(lint_mapping),
        tense=TenseConfig(
            allowlist=_as_str_list(tense_mapping.get("allowlist"), "tense.allowlist"),
            include_default=_as_bool(
                tense_mapping.get("include_default", True), "tense.include_default"
            ),
        ),
        source=source,
    )


def _parse_lint_config(value: dict[str, Any]) -> LintConfig:
    lengths: dict[str, int] = {}
    for key in ("max_header_length", "max_body_line_length", "max_footer_line_length"):
        length = _as_int(value.get(key, 72), f"lint.{key}")
        if length <= 0:
            raise ConfigurationError(f"lint.{key} must be > 0")
        lengths[key] = length

    styles = value.get("disallowed_case_styles")
    if styles is None:
        case_styles = list(DEFAULT_DISALLOWED_CASE_STYLES)
    else:
        case_styles = [
            _as_choice(item, set(CASE_STYLES), "lint.disallowed_case_styles")
            for item in _as_str_list(styles, "lint.disallowed_case_styles")
        ]
    return LintConfig(disallowed_case_styles=case_styles, **lengths)


def _parse_rule_settings(value: dict[str, Any]) -> dict[str, RuleSettingConfig]:
    parsed: dict[str, RuleSettingConfig] = {}
    for name, raw in value.items():
        table = _as_table(raw, f"rules.settings.{name}")
        severity = table.get("severity")
        when = table.get("when")
        prefix = f"rules.settings.{name}"
        parsed[name] = RuleSettingConfig(
            severity=None
            if severity is None
            else _as_choice(severity, set(SEVERITIES), f"{prefix}.severity"),
            when=None if when is None else _as_choice(when, set(WHENS), f"{prefix}.when"),
        )
    return parsed


def _parse_ignores(value: Any) -> list[str]:
    patterns = _as_str_list(value, "ignores")
    for pattern in patterns:
        try:
            re.compile(pattern)
        except re.error as exc:
            raise ConfigurationError(
                f"ignores contains an invalid pattern {pattern!r}: {exc}"
            ) from exc
    return patterns


def _validate_rule_names(names: list[str]) -> None:
    known = set(rule_names())
    unknown = sorted({name for name in names if name not in known})
    if unknown:
        raise ConfigurationError(f"Unknown rule names: {', '.join(unknown)}")


def _as_table(value: Any, field_name: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"{field_name} must be a table/object")
    return value


def _as_str_list(value: Any, field_name: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigurationError(f"{field_name} must be a list of strings")
    items: list[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ConfigurationError(f"{field_name} must be a list of strings")
        items.append(item)
    return items


def _as_str_list_or_none(value: Any, field_name: str) -> list[str] | None:
    if value is None:
        return None
    return _as_str_list(value, field_name)


def _as_str(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string")
    return value


def _as_choice(raw: Any, allowed: set[str], field_name: str) -> str:
    value = str(raw).lower()
    if value not in allowed:
        choices = ", ".join(sorted(allowed))
        raise ConfigurationError(f"{field_name} must be one of: {choices}")
    return value


def _as_int(raw: Any, field_name: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ConfigurationError(f"{field_name} must be an integer")
    return raw


def _as_bool(raw: Any, field_name: str) -> bool:
    if not isinstance(raw, bool):
        raise ConfigurationError(f"{field_name} must be a boolean")
    return raw
