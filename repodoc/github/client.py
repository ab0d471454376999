"""Minimal read-only client for the GitHub REST API."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import Request, urlopen

from ..config import DEFAULT_API_BASE_URL
from ..errors import GitHubAPIError, RepositoryNotFoundError
from ..logging import get_logger
from ..models import ContentEntry, LanguageMap, RepositorySnapshot

Fetcher = Callable[[str], Any]


class GitHubClient:
    """Performs the repository, contents and languages lookups.

    Every call is attempted exactly once. Failures surface as
    :class:`GitHubAPIError`; callers decide whether that is fatal.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_API_BASE_URL,
        *,
        request_timeout: float = 15.0,
        user_agent: str = "repodoc",
        fetcher: Fetcher | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.request_timeout = request_timeout
        self.user_agent = user_agent
        self._fetch = fetcher or self._http_fetch
        self.logger = get_logger("github")

    def get_repository(self, owner: str, repo: str) -> RepositorySnapshot:
        url = self._repo_url(owner, repo)
        try:
            payload = self._fetch(url)
        except GitHubAPIError as exc:
            self.logger.debug("Metadata lookup for %s/%s failed: %s", owner, repo, exc)
            raise RepositoryNotFoundError(owner, repo) from exc
        if not isinstance(payload, dict):
            raise RepositoryNotFoundError(owner, repo)
        return RepositorySnapshot.from_api(payload)

    def list_contents(self, owner: str, repo: str, path: str = "") -> List[ContentEntry]:
        url = f"{self._repo_url(owner, repo)}/contents"
        relative = path.strip("/")
        if relative:
            url = f"{url}/{quote(relative)}"
        payload = self._fetch(url)
        # A file path returns a single object rather than a listing.
        if not isinstance(payload, list):
            return []
        return [ContentEntry.from_api(item) for item in payload if isinstance(item, dict)]

    def get_languages(self, owner: str, repo: str) -> LanguageMap:
        payload = self._fetch(f"{self._repo_url(owner, repo)}/languages")
        if not isinstance(payload, dict):
            return {}
        languages: LanguageMap = {}
        for name, size in payload.items():
            if isinstance(size, int) and not isinstance(size, bool):
                languages[str(name)] = size
        return languages

    def _repo_url(self, owner: str, repo: str) -> str:
        return f"{self.base_url}/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"

    def _http_fetch(self, url: str) -> Any:
        headers: Dict[str, str] = {
            "Accept": "application/vnd.github+json",
            "User-Agent": self.user_agent,
        }
        request = Request(url, headers=headers, method="GET")
        self.logger.debug("GET %s", url)
        try:
            with urlopen(request, timeout=self.request_timeout) as response:  # type: ignore[arg-type]
                raw = response.read()
        except HTTPError as exc:
            raise GitHubAPIError(
                f"GitHub API returned status {exc.code}", status=exc.code, url=url
            ) from exc
        except URLError as exc:
            raise GitHubAPIError(f"GitHub API request failed: {exc.reason}", url=url) from exc
        except TimeoutError as exc:
            raise GitHubAPIError("GitHub API request timed out", url=url) from exc

        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise GitHubAPIError("GitHub API returned invalid JSON", url=url) from exc


__all__ = ["Fetcher", "GitHubClient"]
