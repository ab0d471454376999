"""GitHub REST access and repository URL parsing."""

from .client import Fetcher, GitHubClient
from .urls import parse_repo_url

__all__ = ["Fetcher", "GitHubClient", "parse_repo_url"]
