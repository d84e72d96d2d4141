"""
Custom exceptions module.

Exceptions for the GitHub and diff service layers. Each carries the HTTP
status code the API layer should answer with. The diff parser itself never
raises: malformed patch text is skipped, not reported.
"""


class PatchCanvasException(Exception):
    """Base exception class for all application-specific exceptions."""

    def __init__(
        self,
        message: str = "An error occurred in the PatchCanvas application",
        status_code: int = 500,
    ):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


# GitHub Service Exceptions
class GitHubServiceException(PatchCanvasException):
    """Base exception for GitHub service operations."""

    def __init__(
        self, message: str = "GitHub service operation failed", status_code: int = 502
    ):
        super().__init__(message, status_code)


class GitHubRequestError(GitHubServiceException):
    """Raised when a request to the GitHub API fails."""

    def __init__(self, url: str, status_code: int, reason: str):
        self.url = url
        message = f"GitHub request to {url} failed: {reason}"
        super().__init__(message, status_code=status_code)


# Diff Service Exceptions
class DiffServiceException(PatchCanvasException):
    """Base exception for diff assembly operations."""

    def __init__(
        self, message: str = "Diff service operation failed", status_code: int = 500
    ):
        super().__init__(message, status_code)


class InvalidFilePayloadError(DiffServiceException):
    """Raised when a changed-file entry is missing required fields."""

    def __init__(self, details: str):
        message = f"Invalid file payload: {details}"
        super().__init__(message, status_code=400)


class FileNotInDiffError(DiffServiceException):
    """Raised when a requested file is not part of a comparison."""

    def __init__(self, path: str):
        self.path = path
        message = f"File {path} not found in diff"
        super().__init__(message, status_code=404)
