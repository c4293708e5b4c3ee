"""Git subprocess helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from subprocess import CalledProcessError, run

logger = logging.getLogger(__name__)

_FIELD_SEP = "\x1f"
_RECORD_SEP = "\x1e"
_LOG_FORMAT = f"--format=%H{_FIELD_SEP}%B{_RECORD_SEP}"


class GitError(RuntimeError):
    """Raised when git command execution fails."""


@dataclass(frozen=True, slots=True)
class GitCommit:
    """A commit hash with its raw message."""

    sha: str
    message: str

    @property
    def short_sha(self) -> str:
        return self.sha[:7]


def get_range_commits(
    repo: Path, from_rev: str | None, to_rev: str = "HEAD"
) -> list[GitCommit]:
    """Return commits reachable from ``to_rev`` but not ``from_rev``, oldest first.

    Without ``from_rev`` every commit reachable from ``to_rev`` is returned.
    """
    revision = to_rev if from_rev is None else f"{from_rev}..{to_rev}"
    return _parse_log(_run_git(repo, ["log", "--reverse", _LOG_FORMAT, revision]))


def get_last_commit(repo: Path) -> GitCommit:
    """Return the HEAD commit."""
    commits = _parse_log(_run_git(repo, ["log", "-1", _LOG_FORMAT]))
    if not commits:
        raise GitError("repository has no commits")
    return commits[0]


def _parse_log(output: str) -> list[GitCommit]:
    commits: list[GitCommit] = []
    for record in output.split(_RECORD_SEP):
        record = record.lstrip("\n")
        if not record:
            continue
        sha, _, message = record.partition(_FIELD_SEP)
        commits.append(GitCommit(sha=sha.strip(), message=message))
    return commits


def _run_git(repo: Path, args: list[str]) -> str:
    logger.debug("Running git %s in %s", " ".join(args), repo)
    try:
        completed = run(
            ["git", *args],
            cwd=repo,
            check=True,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
        )
    except CalledProcessError as exc:
        stderr = (exc.stderr or "").strip()
        raise GitError(stderr or f"git {' '.join(args)} failed") from exc
    except FileNotFoundError as exc:
        raise GitError(f"git executable not found: {exc}") from exc

    return completed.stdout
