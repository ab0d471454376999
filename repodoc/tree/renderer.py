"""Box-drawing rendering of folder trees."""

from __future__ import annotations

from typing import List, Sequence

from ..models import TreeNode

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "
DIR_ICON = "📁 "
FILE_ICON = "📄 "


def render_tree(nodes: Sequence[TreeNode], prefix: str = "") -> str:
    """Render nodes as one ``prefix + connector + icon + name`` line each.

    There is no separate "last group" flag. Whether the enclosing group was the
    last sibling is already encoded in ``prefix`` (four spaces after a last
    sibling, ``│   `` otherwise), so a subtree is rendered by passing the
    parent's continuation prefix.
    """
    lines: List[str] = []
    _render(nodes, prefix, lines)
    return "".join(lines)


def _render(nodes: Sequence[TreeNode], prefix: str, lines: List[str]) -> None:
    for index, node in enumerate(nodes):
        is_last = index == len(nodes) - 1
        connector = LAST_BRANCH if is_last else BRANCH
        icon = DIR_ICON if node.is_dir else FILE_ICON
        lines.append(f"{prefix}{connector}{icon}{node.name}\n")
        if node.children:
            _render(node.children, prefix + (SPACE if is_last else PIPE), lines)


__all__ = ["render_tree"]
