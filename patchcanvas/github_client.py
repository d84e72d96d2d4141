from typing import Any

import requests

from patchcanvas.core.config import get_settings
from patchcanvas.core.exceptions import GitHubRequestError
from patchcanvas.core.logging_config import get_logger

logger = get_logger(__name__)


def _build_headers() -> dict[str, str]:
    settings = get_settings()
    headers = {
        "Accept": "application/vnd.github.v3+json",
        "X-GitHub-Api-Version": settings.GITHUB_API_VERSION,
    }
    if settings.GITHUB_TOKEN:
        headers["Authorization"] = f"Bearer {settings.GITHUB_TOKEN}"
    return headers


def _get_json(path: str, params: dict[str, Any] | None = None) -> Any:
    """Performs a GET against the GitHub API and returns the decoded body."""
    settings = get_settings()
    url = f"{settings.GITHUB_API_BASE_URL}{path}"

    try:
        response = requests.get(
            url,
            headers=_build_headers(),
            params=params,
            timeout=settings.GITHUB_REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        return response.json()
    except requests.exceptions.HTTPError as e:
        status_code = e.response.status_code
        if status_code == 403:
            logger.error(
                f"Error fetching {url}: Forbidden. Check token permissions or rate limit. Details: {e.response.text}"
            )
        elif status_code == 404:
            logger.error(
                f"Error fetching {url}: Not Found. Check owner, repo and refs. Details: {e.response.text}"
            )
        else:
            logger.error(f"Error fetching {url}: {e}. Details: {e.response.text}")
        raise GitHubRequestError(url, status_code, str(e)) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Error fetching {url}: {e}")
        raise GitHubRequestError(url, 502, str(e)) from e


def fetch_comparison_files(
    owner: str, repo: str, base: str, head: str
) -> list[dict[str, Any]]:
    """Fetches the changed-file entries, with per-file patches, between two refs."""
    comparison = _get_json(f"/repos/{owner}/{repo}/compare/{base}...{head}")
    files = comparison.get("files") or []
    logger.info(f"Fetched {len(files)} changed files for {owner}/{repo} {base}...{head}")
    return files


def fetch_pull_request_files(
    owner: str, repo: str, pull_number: int
) -> list[dict[str, Any]]:
    """Fetches the changed-file entries of a pull request."""
    files = _get_json(
        f"/repos/{owner}/{repo}/pulls/{pull_number}/files", params={"per_page": 100}
    )
    logger.info(f"Fetched {len(files)} changed files for {owner}/{repo}#{pull_number}")
    return files
