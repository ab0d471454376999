"""Error taxonomy surfaced by the generation pipeline."""

from __future__ import annotations


class RepoDocError(RuntimeError):
    """Base class for repodoc failures."""


class InvalidRepositoryURLError(RepoDocError, ValueError):
    """Raised when the input does not look like a repository URL."""


class RepositoryNotFoundError(RepoDocError):
    """Raised when repository metadata cannot be fetched."""

    def __init__(self, owner: str, repo: str) -> None:
        super().__init__("Repository not found or not accessible")
        self.owner = owner
        self.repo = repo


class GitHubAPIError(RepoDocError):
    """A single GitHub REST call failed or returned something unusable."""

    def __init__(self, message: str, *, status: int | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.status = status
        self.url = url


class GenerationSuperseded(RepoDocError):
    """Raised when a newer generation request has started."""


__all__ = [
    "GenerationSuperseded",
    "GitHubAPIError",
    "InvalidRepositoryURLError",
    "RepoDocError",
    "RepositoryNotFoundError",
]
