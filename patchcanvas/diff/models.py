from dataclasses import dataclass
from enum import Enum
from typing import Optional


class LineKind(str, Enum):
    """Kind of a physical line inside a hunk."""

    CONTEXT = "context"
    ADD = "add"
    DELETE = "delete"

    @property
    def marker(self) -> str:
        """The one-character prefix the line carries in unified-diff text."""
        return _MARKERS[self]


_MARKERS = {
    LineKind.CONTEXT: " ",
    LineKind.ADD: "+",
    LineKind.DELETE: "-",
}


class FileStatus(str, Enum):
    ADDED = "added"
    MODIFIED = "modified"
    DELETED = "deleted"
    RENAMED = "renamed"


@dataclass(frozen=True)
class DiffLine:
    """One line of a hunk, with its marker stripped from ``content``."""

    kind: LineKind
    content: str
    # Absent on add lines
    old_line_number: Optional[int] = None
    # Absent on delete lines
    new_line_number: Optional[int] = None


@dataclass(frozen=True)
class Hunk:
    """A contiguous region of change within one file's diff."""

    id: str
    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    # Raw header line, kept verbatim for serialization and display
    header: str
    lines: tuple[DiffLine, ...] = ()
    # Free text after the closing @@ of the header
    section: str = ""

    @property
    def additions(self) -> int:
        return sum(1 for line in self.lines if line.kind == LineKind.ADD)

    @property
    def deletions(self) -> int:
        return sum(1 for line in self.lines if line.kind == LineKind.DELETE)

    @property
    def context_lines(self) -> int:
        return sum(1 for line in self.lines if line.kind == LineKind.CONTEXT)


@dataclass(frozen=True)
class FileDiff:
    """The parsed diff of a single changed file."""

    path: str
    old_path: Optional[str]
    status: FileStatus
    additions: int
    deletions: int
    hunks: tuple[Hunk, ...] = ()


@dataclass(frozen=True)
class DiffStats:
    additions: int = 0
    deletions: int = 0
    context: int = 0

    @property
    def total(self) -> int:
        return self.additions + self.deletions + self.context
