"""Core data models shared across repodoc components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Tuple

LanguageMap = Dict[str, int]


class NodeKind(str, Enum):
    """Kind of an entry in a repository listing."""

    FILE = "file"
    DIRECTORY = "dir"


@dataclass(frozen=True)
class TreeNode:
    """A file or directory in a rendered folder tree."""

    name: str
    kind: NodeKind
    children: Tuple["TreeNode", ...] = ()

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    def count(self) -> int:
        """Return the number of nodes in this subtree, itself included."""
        return 1 + sum(child.count() for child in self.children)


@dataclass(frozen=True)
class ContentEntry:
    """One item returned by the repository contents endpoint."""

    name: str
    path: str
    kind: NodeKind

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "ContentEntry":
        name = str(payload.get("name") or "")
        kind = NodeKind.DIRECTORY if payload.get("type") == "dir" else NodeKind.FILE
        return cls(name=name, path=str(payload.get("path") or name), kind=kind)


@dataclass(frozen=True)
class RepositorySnapshot:
    """Read-only projection of repository metadata for one generation request."""

    name: str
    description: Optional[str]
    clone_url: str
    star_count: int
    fork_count: int
    watcher_count: int
    open_issue_count: int
    html_url: str
    owner_login: str
    owner_url: str
    default_branch: str
    license_name: Optional[str] = None
    topics: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "RepositorySnapshot":
        owner = payload.get("owner")
        if not isinstance(owner, Mapping):
            owner = {}
        license_data = payload.get("license")
        license_name = None
        if isinstance(license_data, Mapping) and license_data.get("name"):
            license_name = str(license_data["name"])
        topics = payload.get("topics")
        return cls(
            name=str(payload.get("name") or ""),
            description=payload.get("description") or None,
            clone_url=str(payload.get("clone_url") or ""),
            star_count=_as_count(payload.get("stargazers_count")),
            fork_count=_as_count(payload.get("forks_count")),
            watcher_count=_as_count(payload.get("watchers_count")),
            open_issue_count=_as_count(payload.get("open_issues_count")),
            html_url=str(payload.get("html_url") or ""),
            owner_login=str(owner.get("login") or ""),
            owner_url=str(owner.get("html_url") or ""),
            default_branch=str(payload.get("default_branch") or "main"),
            license_name=license_name,
            topics=tuple(str(topic) for topic in topics) if isinstance(topics, list) else (),
        )


class QualityIndicator(Enum):
    """Boolean quality signals surfaced in the summary, in display order."""

    HAS_TESTS = "Includes test suite"
    HAS_CI = "CI/CD pipeline configured"
    HAS_DOCKER = "Docker support"
    HAS_DOCS = "Documentation available"
    HAS_LICENSE = "Licensed"


@dataclass
class Classification:
    """Structured result of the heuristic repository analysis."""

    project_type: str
    primary_language: str
    language_count: int
    star_tier: str
    fork_tier: str
    issue_tier: str
    indicators: List[QualityIndicator] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)


def _as_count(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


__all__ = [
    "Classification",
    "ContentEntry",
    "LanguageMap",
    "NodeKind",
    "QualityIndicator",
    "RepositorySnapshot",
    "TreeNode",
]
