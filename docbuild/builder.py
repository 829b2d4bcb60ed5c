from __future__ import annotations

import io
import os
from typing import Any, Dict

import yaml
from mkdocs.commands.build import build
from mkdocs.config import load_config
from mkdocs.config.defaults import MkDocsConfig
from mkdocs.plugins import BasePlugin
from mkdocs.structure.files import Files
from mkdocs.structure.pages import Page

from docbuild.discovery import INDEX_URL
from docbuild.models.config import DocsConfig
from docbuild.parsing import MARKDOWN_EXTENSIONS, resolve_title


PLUGIN_NAME = "docbuild-toc-names"


class TocNamePlugin(BasePlugin):
    """Applies the configured index page, markdown parser and navigation labels to a build."""

    def __init__(self, docs_config: DocsConfig) -> None:
        super().__init__()
        self.docs_config = docs_config

    def on_files(self, files: Files, *, config: MkDocsConfig) -> Files:
        index_uri = self.docs_config.index_relative_path().as_posix()
        for file in files:
            if file.src_uri != index_uri and file.dest_uri == INDEX_URL and not _is_excluded(file):
                raise ValueError(
                    f"{file.src_uri} and the index document {index_uri} would both be written to {INDEX_URL}"
                )
        for file in files:
            if file.src_uri != index_uri:
                continue
            file.dest_uri = INDEX_URL
            file.url = INDEX_URL
            file.abs_dest_path = os.path.normpath(os.path.join(config["site_dir"], INDEX_URL))
        return files

    def on_page_content(self, html: str, *, page: Page, config: MkDocsConfig, files: Files) -> str:
        source = page.markdown or ""
        rendered = self.docs_config.parsing_function(source)
        # page.title is never empty here; MkDocs falls back to the file name.
        title = resolve_title(source, page.meta, page.file.name)
        page.title = self.docs_config.map_toc_name(page.file.name, page, title)
        return rendered


def _is_excluded(file: Any) -> bool:
    inclusion = getattr(file, "inclusion", None)
    return inclusion is not None and inclusion.is_excluded()


class DocsBuilder:
    """Adapts a ``DocsConfig`` onto an MkDocs build."""

    def __init__(self, config: DocsConfig) -> None:
        self.config = config

    def mkdocs_options(self) -> Dict[str, Any]:
        config = self.config
        options: Dict[str, Any] = {
            "site_name": config.base_title,
            "docs_dir": str(config.input_dir.resolve()),
            "site_dir": str(config.output_dir.resolve()),
            "markdown_extensions": list(MARKDOWN_EXTENSIONS),
            "use_directory_urls": False,
            "plugins": [],
        }
        if config.exclude:
            options["exclude_docs"] = "\n".join(config.exclude)
        return options

    def mkdocs_config(self) -> MkDocsConfig:
        source = io.StringIO(yaml.safe_dump(self.mkdocs_options()))
        mkdocs_config = load_config(source)
        mkdocs_config.plugins[PLUGIN_NAME] = TocNamePlugin(self.config)
        return mkdocs_config

    def run(self) -> None:
        build(self.mkdocs_config())


def run(config: DocsConfig) -> None:
    """Build the documentation site once. Build errors propagate to the caller."""

    DocsBuilder(config).run()


__all__ = ["DocsBuilder", "TocNamePlugin", "run", "PLUGIN_NAME"]
