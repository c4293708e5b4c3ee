"""Commit message and header parsing primitives."""

from __future__ import annotations

from dataclasses import dataclass
from re import compile

HEADER_RE = compile(r"^(?P<component>[\w.-]+): (?P<description>.+)$")
TRAILER_RE = compile(r"^(?P<token>\w+(?:-\w+)*|BREAKING[ -]CHANGE): (?P<value>.+)$")
COMMENT_CHAR = "#"


@dataclass(frozen=True, slots=True)
class ParsedHeader:
    """A header split into component and description.

    ``component`` is empty when the header does not have the
    ``<component>: <description>`` shape; ``description`` then holds the whole
    header.
    """

    component: str
    description: str
    raw: str


@dataclass(frozen=True, slots=True)
class CommitMessage:
    """A commit message split into header, body and footer."""

    raw: str
    header: str
    body: str | None
    footer: str | None
    lines: tuple[str, ...]
    footer_start: int | None = None

    @property
    def body_lines(self) -> list[str]:
        if self.body is None:
            return []
        return self.body.split("\n")

    @property
    def footer_lines(self) -> list[str]:
        if self.footer is None:
            return []
        return self.footer.split("\n")


def parse_header(line: str) -> ParsedHeader:
    """Split a header line into component and description (never fails)."""
    match = HEADER_RE.match(line)
    if match is None:
        return ParsedHeader(component="", description=line, raw=line)
    return ParsedHeader(
        component=match.group("component"),
        description=match.group("description"),
        raw=line,
    )


def parse_message(text: str, *, strip_comments: bool = False) -> CommitMessage:
    """Parse raw commit message text.

    Leading/trailing blank lines are ignored. With ``strip_comments`` the
    lines git treats as comments in an edit file (``#`` prefixed) are dropped
    first; stored commits keep such lines verbatim. The footer is the trailing
    block of ``Token: value`` trailers, with indented continuation lines
    allowed after the first trailer.
    """
    normalized = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = normalized.split("\n")
    if strip_comments:
        lines = [line for line in lines if not line.startswith(COMMENT_CHAR)]
    while lines and not lines[-1].strip():
        lines.pop()
    while lines and not lines[0].strip():
        lines.pop(0)

    if not lines:
        return CommitMessage(raw=text, header="", body=None, footer=None, lines=())

    header = lines[0]
    tail = lines[1:]
    tail_footer_start = _find_footer_start(tail)

    body_lines = tail if tail_footer_start is None else tail[:tail_footer_start]
    footer: str | None = None
    footer_start: int | None = None
    if tail_footer_start is not None:
        footer = "\n".join(tail[tail_footer_start:])
        footer_start = tail_footer_start + 1

    return CommitMessage(
        raw=text,
        header=header,
        body=_join_block(body_lines),
        footer=footer,
        lines=tuple(lines),
        footer_start=footer_start,
    )


def is_trailer(line: str) -> bool:
    return TRAILER_RE.match(line) is not None


def _find_footer_start(tail: list[str]) -> int | None:
    start: int | None = None
    for index in range(len(tail) - 1, -1, -1):
        line = tail[index]
        if is_trailer(line):
            start = index
            continue
        if line.strip() and line[:1] in {" ", "\t"}:
            continue
        break
    return start


def _join_block(lines: list[str]) -> str | None:
    start = 0
    end = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    if start == end:
        return None
    return "\n".join(lines[start:end])
