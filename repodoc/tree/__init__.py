"""Folder tree construction and rendering."""

from .builder import DEFAULT_MAX_DEPTH, IGNORED_NAMES, TreeBuilder, sort_nodes
from .renderer import render_tree

__all__ = ["DEFAULT_MAX_DEPTH", "IGNORED_NAMES", "TreeBuilder", "render_tree", "sort_nodes"]
