"""Diff service module.

Turns the changed-file entries returned by GitHub's compare and pull request
endpoints into parsed ``FileDiff`` values.
"""

from typing import Any, Dict, Iterable, List, Optional

from patchcanvas.core.exceptions import FileNotInDiffError, InvalidFilePayloadError
from patchcanvas.core.logging_config import get_logger
from patchcanvas.diff.models import FileDiff, FileStatus
from patchcanvas.diff.parser import calculate_stats, parse_diff
from patchcanvas.github_client import fetch_comparison_files, fetch_pull_request_files

logger = get_logger(__name__)

_KNOWN_STATUSES = {status.value for status in FileStatus}


def _resolve_status(raw_status: Optional[str], path: str) -> FileStatus:
    if raw_status in _KNOWN_STATUSES:
        return FileStatus(raw_status)
    # GitHub also reports "copied", "changed" and "unchanged"
    logger.debug(f"Treating status {raw_status!r} of {path} as modified")
    return FileStatus.MODIFIED


def build_file_diff(file_payload: Dict[str, Any]) -> FileDiff:
    """
    Build a FileDiff from one GitHub changed-file entry.

    Args:
        file_payload: Entry with ``filename`` and optionally ``previous_filename``,
                      ``status``, ``additions``, ``deletions`` and ``patch``

    Returns:
        FileDiff: The file's metadata and parsed hunks. Files without a patch
        (binary or too large for GitHub to inline) have no hunks.

    Raises:
        InvalidFilePayloadError: If the entry has no ``filename``
    """
    path = file_payload.get("filename")
    if not path:
        error_msg = "Missing required field 'filename' in changed-file entry"
        logger.error(error_msg)
        raise InvalidFilePayloadError(error_msg)

    patch = file_payload.get("patch") or ""
    hunks = parse_diff(patch, path)

    additions = file_payload.get("additions")
    deletions = file_payload.get("deletions")
    if additions is None or deletions is None:
        stats = calculate_stats(hunks)
        additions = stats.additions if additions is None else additions
        deletions = stats.deletions if deletions is None else deletions

    logger.debug(
        f"Parsed {len(hunks)} hunks for {path}",
        extra={"file_path": path, "hunk_count": len(hunks)},
    )

    return FileDiff(
        path=path,
        old_path=file_payload.get("previous_filename"),
        status=_resolve_status(file_payload.get("status"), path),
        additions=additions,
        deletions=deletions,
        hunks=tuple(hunks),
    )


def build_file_diffs(files: Iterable[Dict[str, Any]]) -> List[FileDiff]:
    """Build FileDiffs for every entry, keeping the order GitHub returned."""
    return [build_file_diff(file_payload) for file_payload in files]


def get_comparison_diffs(
    owner: str, repo: str, base: str, head: str, path: Optional[str] = None
) -> List[FileDiff]:
    """
    Fetch and parse the per-file diffs between two refs.

    Args:
        owner: Repository owner
        repo: Repository name
        base: Base ref (branch, tag or sha)
        head: Head ref
        path: When given, only the diff of this file is returned

    Raises:
        FileNotInDiffError: If ``path`` is not among the changed files
        GitHubRequestError: If the comparison cannot be fetched
    """
    files = fetch_comparison_files(owner, repo, base, head)

    if path is not None:
        files = [f for f in files if f.get("filename") == path]
        if not files:
            logger.warning(f"{path} not found in {owner}/{repo} {base}...{head}")
            raise FileNotInDiffError(path)

    return build_file_diffs(files)


def get_pull_request_diffs(owner: str, repo: str, pull_number: int) -> List[FileDiff]:
    """
    Fetch and parse the per-file diffs of a pull request.

    Raises:
        GitHubRequestError: If the pull request files cannot be fetched
    """
    files = fetch_pull_request_files(owner, repo, pull_number)
    return build_file_diffs(files)
