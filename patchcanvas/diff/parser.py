"""
Unified-diff hunk parser and serializer.

Turns the patch text of a single file (as returned per file by GitHub's
compare and pull request endpoints) into ``Hunk`` values and back. Parsing
is permissive: lines that cannot be placed are skipped, never raised on.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Optional

from patchcanvas.core.logging_config import get_logger
from patchcanvas.diff.models import DiffLine, DiffStats, Hunk, LineKind

logger = get_logger(__name__)

# e.g. "@@ -1,13 +1,15 @@ def main():" or "@@ -5 +5 @@"
HUNK_HEADER_PATTERN = re.compile(
    r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@ ?(.*)$"
)

_KINDS_BY_MARKER = {kind.marker: kind for kind in LineKind}


class LineClass(Enum):
    """Role of a physical patch line, decided from its first characters."""

    HEADER = "header"
    CONTENT = "content"
    IGNORABLE = "ignorable"


@dataclass(frozen=True)
class HunkHeader:
    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    section: str = ""


def classify_line(line: str) -> LineClass:
    """
    Classify a patch line as a hunk header, a content line or noise.

    Empty lines are ignorable: a bare "" carries no marker, so it is dropped
    rather than read as an empty context line. Lines such as
    "\\ No newline at end of file" and "diff --git" preambles are ignorable too.
    """
    if line.startswith("@@"):
        return LineClass.HEADER
    if line and line[0] in _KINDS_BY_MARKER:
        return LineClass.CONTENT
    return LineClass.IGNORABLE


def parse_hunk_header(line: str) -> Optional[HunkHeader]:
    """
    Parse a ``@@ -a,b +c,d @@ section`` header line.

    Omitted counts default to 1, as in single-line unified-diff ranges.
    Returns None when the line does not have the expected shape.
    """
    match = HUNK_HEADER_PATTERN.match(line)
    if match is None:
        return None

    old_start, old_lines, new_start, new_lines, section = match.groups()
    return HunkHeader(
        old_start=int(old_start),
        old_lines=int(old_lines) if old_lines is not None else 1,
        new_start=int(new_start),
        new_lines=int(new_lines) if new_lines is not None else 1,
        section=section,
    )


def generate_hunk_id(file_path: str, hunk_index: int) -> str:
    """Stable id for the hunk at ``hunk_index`` within ``file_path``."""
    return f"{file_path}-hunk-{hunk_index}"


@dataclass
class _HunkBuilder:
    """Accumulates the lines of the hunk currently open in ``parse_diff``."""

    id: str
    header_line: str
    header: HunkHeader
    lines: list[DiffLine] = field(default_factory=list)

    def append(self, line: str) -> None:
        kind = _KINDS_BY_MARKER[line[0]]
        # Line numbers advance with the position in the hunk, shared by all
        # kinds, not with separate old/new counters.
        index = len(self.lines)
        old_line_number = None
        new_line_number = None
        if kind != LineKind.ADD:
            old_line_number = self.header.old_start + index
        if kind != LineKind.DELETE:
            new_line_number = self.header.new_start + index

        self.lines.append(
            DiffLine(
                kind=kind,
                content=line[1:],
                old_line_number=old_line_number,
                new_line_number=new_line_number,
            )
        )

    def build(self) -> Hunk:
        return Hunk(
            id=self.id,
            old_start=self.header.old_start,
            old_lines=self.header.old_lines,
            new_start=self.header.new_start,
            new_lines=self.header.new_lines,
            header=self.header_line,
            lines=tuple(self.lines),
            section=self.header.section,
        )


def parse_diff(diff_text: str, file_path: str) -> list[Hunk]:
    """
    Parse the unified-diff patch of one file into hunks.

    Args:
        diff_text: Patch body; may be empty or hold several hunks
        file_path: Path used only to derive the hunk ids

    Returns:
        list[Hunk]: One hunk per valid ``@@`` header, in source order. Empty
        when the text holds no valid header.
    """
    hunks: list[Hunk] = []
    current: Optional[_HunkBuilder] = None
    hunk_index = 0

    for line in diff_text.split("\n"):
        line_class = classify_line(line)

        if line_class is LineClass.HEADER:
            if current is not None:
                hunks.append(current.build())
                current = None

            header = parse_hunk_header(line)
            if header is None:
                # The body of a malformed hunk is dropped up to the next header
                logger.debug(
                    f"Skipping malformed hunk header in {file_path}: {line!r}"
                )
                continue

            current = _HunkBuilder(
                id=generate_hunk_id(file_path, hunk_index),
                header_line=line,
                header=header,
            )
            hunk_index += 1
        elif line_class is LineClass.CONTENT and current is not None:
            current.append(line)

    if current is not None:
        hunks.append(current.build())

    return hunks


def _serialize_hunk(hunk: Hunk) -> str:
    lines = [hunk.header]
    lines.extend(LineKind(line.kind).marker + line.content for line in hunk.lines)
    return "\n".join(lines)


def serialize_hunks(hunks: Iterable[Hunk]) -> str:
    """
    Render hunks back to unified-diff text.

    Each hunk is its verbatim header followed by one marker-prefixed line per
    ``DiffLine``. Lines and hunks are joined with newlines and the result has
    no trailing newline.
    """
    return "\n".join(_serialize_hunk(hunk) for hunk in hunks)


def calculate_stats(hunks: Iterable[Hunk]) -> DiffStats:
    """Count added, deleted and context lines across ``hunks``."""
    additions = deletions = context = 0
    for hunk in hunks:
        additions += hunk.additions
        deletions += hunk.deletions
        context += hunk.context_lines
    return DiffStats(additions=additions, deletions=deletions, context=context)
