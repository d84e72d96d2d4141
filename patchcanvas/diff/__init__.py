from patchcanvas.diff.models import (
    DiffLine,
    DiffStats,
    FileDiff,
    FileStatus,
    Hunk,
    LineKind,
)
from patchcanvas.diff.parser import (
    calculate_stats,
    generate_hunk_id,
    parse_diff,
    serialize_hunks,
)

__all__ = [
    "DiffLine",
    "DiffStats",
    "FileDiff",
    "FileStatus",
    "Hunk",
    "LineKind",
    "calculate_stats",
    "generate_hunk_id",
    "parse_diff",
    "serialize_hunks",
]
