"""
Request and response helpers for the diff endpoints.

Request bodies are validated with Pydantic; responses are built from the
frozen diff dataclasses, which FastAPI encodes directly.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from patchcanvas.diff.models import DiffLine, DiffStats, FileDiff, Hunk, LineKind


class ParseDiffRequest(BaseModel):
    """Patch text of one file and the path used to derive hunk ids."""

    patch: str
    path: str = Field(..., min_length=1)


class DiffLineSchema(BaseModel):
    kind: LineKind
    content: str
    old_line_number: Optional[int] = None
    new_line_number: Optional[int] = None

    def to_diff_line(self) -> DiffLine:
        return DiffLine(
            kind=self.kind,
            content=self.content,
            old_line_number=self.old_line_number,
            new_line_number=self.new_line_number,
        )


class HunkSchema(BaseModel):
    id: str
    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    header: str
    lines: List[DiffLineSchema] = Field(default_factory=list)
    section: str = ""

    def to_hunk(self) -> Hunk:
        return Hunk(
            id=self.id,
            old_start=self.old_start,
            old_lines=self.old_lines,
            new_start=self.new_start,
            new_lines=self.new_lines,
            header=self.header,
            lines=tuple(line.to_diff_line() for line in self.lines),
            section=self.section,
        )


class SerializeHunksRequest(BaseModel):
    hunks: List[HunkSchema]


def stats_to_dict(stats: DiffStats) -> Dict[str, int]:
    return {
        "additions": stats.additions,
        "deletions": stats.deletions,
        "context": stats.context,
        "total": stats.total,
    }


def file_diffs_response(file_diffs: List[FileDiff]) -> Dict[str, Any]:
    return {"files": file_diffs}
