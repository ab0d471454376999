"""Repository URL parsing."""

from __future__ import annotations

import re
from typing import Tuple

from ..errors import InvalidRepositoryURLError

_REPO_URL = re.compile(
    r"^(?:https?://)?(?:www\.)?(?P<host>[A-Za-z0-9.-]+\.[A-Za-z]{2,})(?::\d+)?"
    r"/(?P<owner>[A-Za-z0-9_.-]+)/(?P<repo>[A-Za-z0-9_.-]+?)(?:\.git)?(?:[/?#].*)?$"
)


def parse_repo_url(url: str) -> Tuple[str, str]:
    """Return ``(owner, repo)`` for ``https://<host>/<owner>/<repo>[.git]``."""
    candidate = (url or "").strip()
    if not candidate:
        raise InvalidRepositoryURLError("Please enter a GitHub repository URL")
    match = _REPO_URL.match(candidate)
    if not match:
        raise InvalidRepositoryURLError(
            "Invalid GitHub URL. Please use format: https://github.com/owner/repo"
        )
    owner = match.group("owner")
    repo = match.group("repo")
    if owner in {".", ".."} or repo in {".", ".."}:
        raise InvalidRepositoryURLError(f"Invalid repository path in {candidate!r}")
    return owner, repo


__all__ = ["parse_repo_url"]
