"""Depth-bounded folder tree construction from the contents endpoint."""

from __future__ import annotations

from functools import lru_cache
from typing import Callable, FrozenSet, Iterable, List, Protocol, Tuple

from pyuca import Collator

from ..errors import GenerationSuperseded, GitHubAPIError
from ..logging import get_logger
from ..models import ContentEntry, NodeKind, TreeNode

IGNORED_NAMES: FrozenSet[str] = frozenset(
    {
        "node_modules",
        ".git",
        "dist",
        "build",
        ".next",
        "coverage",
        "__pycache__",
        "venv",
        ".venv",
    }
)

DEFAULT_MAX_DEPTH = 3


class ContentsSource(Protocol):
    def list_contents(self, owner: str, repo: str, path: str = "") -> List[ContentEntry]:
        ...


@lru_cache(maxsize=1)
def _collator() -> Collator:
    return Collator()


def _sort_key(node: TreeNode) -> Tuple[bool, Tuple[int, ...], str]:
    return (not node.is_dir, _collator().sort_key(node.name), node.name)


def sort_nodes(nodes: Iterable[TreeNode]) -> List[TreeNode]:
    """Order directories before files, then by Unicode collation of the name.

    Punctuation and symbols sort ahead of digits and letters. Accents and case
    only break ties between otherwise equal names.
    """
    return sorted(nodes, key=_sort_key)


class TreeBuilder:
    """Walks a repository through the contents API up to ``max_depth`` levels."""

    def __init__(
        self,
        source: ContentsSource,
        *,
        extra_ignore: Iterable[str] = (),
        is_cancelled: Callable[[], bool] | None = None,
    ) -> None:
        self.source = source
        self.ignored = IGNORED_NAMES | frozenset(extra_ignore)
        self._is_cancelled = is_cancelled
        self.logger = get_logger("tree")

    def build(
        self,
        owner: str,
        repo: str,
        path: str = "",
        depth: int = 0,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> List[TreeNode]:
        if depth >= max_depth:
            return []
        if self._is_cancelled is not None and self._is_cancelled():
            raise GenerationSuperseded("A newer generation request has started")

        try:
            entries = self.source.list_contents(owner, repo, path)
        except GitHubAPIError as exc:
            self.logger.debug("Listing %r unavailable, treating as empty: %s", path or "/", exc)
            return []

        nodes: List[TreeNode] = []
        for entry in entries:
            if entry.name in self.ignored:
                continue
            if entry.kind is NodeKind.DIRECTORY:
                children = self.build(owner, repo, entry.path, depth + 1, max_depth)
                nodes.append(TreeNode(entry.name, NodeKind.DIRECTORY, tuple(children)))
            else:
                nodes.append(TreeNode(entry.name, NodeKind.FILE))
        return sort_nodes(nodes)


__all__ = ["DEFAULT_MAX_DEPTH", "IGNORED_NAMES", "TreeBuilder", "sort_nodes"]
