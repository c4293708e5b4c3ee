"""Commit message linter for `<component>: <description>` headers."""

__version__ = "0.1.0"
