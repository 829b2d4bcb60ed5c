"""Configuration and navigation records."""

from .config import DocsConfig
from .toc import TocNode

__all__ = ["DocsConfig", "TocNode"]
