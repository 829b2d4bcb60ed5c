"""Documentation build configuration for volplugin."""

from .models.config import DocsConfig
from .models.toc import TocNode
from .naming import TocNameMapper, map_toc_name
from .parsing import MarkdownParser, render_markdown

__all__ = [
    "DocsConfig",
    "TocNode",
    "TocNameMapper",
    "MarkdownParser",
    "map_toc_name",
    "render_markdown",
]
