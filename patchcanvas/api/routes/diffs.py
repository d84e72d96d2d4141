"""
Diff parsing endpoints.

Expose the unified-diff parser and serializer over HTTP for clients that
already hold patch text.
"""

from fastapi import APIRouter

from patchcanvas.api.schemas import (
    ParseDiffRequest,
    SerializeHunksRequest,
    stats_to_dict,
)
from patchcanvas.core.logging_config import get_logger
from patchcanvas.diff.parser import calculate_stats, parse_diff, serialize_hunks

router = APIRouter()
logger = get_logger(__name__)


@router.post("/diff/parse")
def parse_patch(request: ParseDiffRequest):
    """
    Parse the patch of a single file into hunks.

    Malformed or unrecognised lines are skipped, so this endpoint only fails
    on an invalid request body.
    """
    hunks = parse_diff(request.patch, request.path)
    logger.info(
        f"Parsed {len(hunks)} hunks for {request.path}",
        extra={"file_path": request.path, "hunk_count": len(hunks)},
    )
    return {
        "path": request.path,
        "hunks": hunks,
        "stats": stats_to_dict(calculate_stats(hunks)),
    }


@router.post("/diff/serialize")
def serialize_patch(request: SerializeHunksRequest):
    """Render hunks back to unified-diff text."""
    hunks = [hunk.to_hunk() for hunk in request.hunks]
    return {"patch": serialize_hunks(hunks)}
