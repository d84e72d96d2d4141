"""
Repository diff endpoints.

Fetch changed files from GitHub and return them with their patches parsed
into hunks.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from patchcanvas.api.schemas import file_diffs_response
from patchcanvas.core.exceptions import PatchCanvasException
from patchcanvas.core.logging_config import get_logger
from patchcanvas.services.diff_service import (
    get_comparison_diffs,
    get_pull_request_diffs,
)

router = APIRouter()
logger = get_logger(__name__)


@router.get("/repos/{owner}/{repo}/compare")
def compare_refs(
    owner: str,
    repo: str,
    base: str = Query(..., min_length=1),
    head: str = Query(..., min_length=1),
    path: Optional[str] = None,
):
    """
    Returns the parsed per-file diffs between ``base`` and ``head``.

    Args:
        owner: Repository owner
        repo: Repository name
        base: Base ref
        head: Head ref
        path: Optional file path to narrow the result to a single file

    Raises:
        HTTPException: With the status of the underlying failure
    """
    logger.info(f"Comparing {owner}/{repo} {base}...{head}")
    try:
        return file_diffs_response(
            get_comparison_diffs(owner, repo, base, head, path=path)
        )
    except PatchCanvasException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.exception(f"Error comparing {owner}/{repo}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")


@router.get("/repos/{owner}/{repo}/pulls/{number}/files")
def pull_request_files(owner: str, repo: str, number: int):
    """Returns the parsed per-file diffs of pull request ``number``."""
    logger.info(f"Loading files for {owner}/{repo}#{number}")
    try:
        return file_diffs_response(get_pull_request_diffs(owner, repo, number))
    except PatchCanvasException as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
    except Exception as e:
        logger.exception(f"Error loading files for {owner}/{repo}#{number}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Internal server error: {str(e)}")
