"""In-memory stand-in for the GitHub REST API used across tests."""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Mapping

from repodoc.errors import GitHubAPIError
from repodoc.github.client import GitHubClient
from repodoc.models import RepositorySnapshot

BASE_URL = "https://api.github.test"


def repo_payload(name: str = "hello", owner: str = "octo", **overrides: Any) -> Dict[str, Any]:
    """Return a repository metadata payload shaped like the GitHub API."""
    payload: Dict[str, Any] = {
        "name": name,
        "description": "A friendly sample project",
        "clone_url": f"https://github.com/{owner}/{name}.git",
        "stargazers_count": 0,
        "forks_count": 0,
        "watchers_count": 0,
        "open_issues_count": 0,
        "html_url": f"https://github.com/{owner}/{name}",
        "owner": {"login": owner, "html_url": f"https://github.com/{owner}"},
        "license": None,
        "topics": [],
        "default_branch": "main",
    }
    payload.update(overrides)
    return payload


def make_snapshot(**overrides: Any) -> RepositorySnapshot:
    return RepositorySnapshot.from_api(repo_payload(**overrides))


class FakeGitHub:
    """Fetcher that serves canned payloads and records every URL requested."""

    def __init__(self) -> None:
        self.responses: Dict[str, Any] = {}
        self.calls: List[str] = []

    def __call__(self, url: str) -> Any:
        self.calls.append(url)
        if url not in self.responses:
            raise GitHubAPIError("GitHub API returned status 404", status=404, url=url)
        return copy.deepcopy(self.responses[url])

    def client(self) -> GitHubClient:
        return GitHubClient(BASE_URL, fetcher=self)

    def add_repo(self, owner: str = "octo", name: str = "hello", **overrides: Any) -> None:
        self.responses[f"{BASE_URL}/repos/{owner}/{name}"] = repo_payload(
            name=name, owner=owner, **overrides
        )

    def add_listing(
        self, owner: str, name: str, path: str, entries: Mapping[str, str]
    ) -> None:
        """Register a directory listing; ``entries`` maps names to ``"dir"``/``"file"``."""
        url = f"{BASE_URL}/repos/{owner}/{name}/contents"
        if path:
            url = f"{url}/{path}"
        self.responses[url] = [
            {
                "name": entry,
                "path": f"{path}/{entry}" if path else entry,
                "type": kind,
            }
            for entry, kind in entries.items()
        ]

    def add_languages(self, owner: str, name: str, languages: Mapping[str, int]) -> None:
        self.responses[f"{BASE_URL}/repos/{owner}/{name}/languages"] = dict(languages)

    def listing_calls(self) -> List[str]:
        return [url for url in self.calls if "/contents" in url]


__all__ = ["BASE_URL", "FakeGitHub", "make_snapshot", "repo_payload"]
