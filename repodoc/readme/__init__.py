"""README document assembly."""

from .builder import ReadmeBuilder, Section
from .toc import TableOfContentsBuilder

__all__ = ["ReadmeBuilder", "Section", "TableOfContentsBuilder"]
