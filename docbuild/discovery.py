from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List

import pathspec
from mkdocs.utils import is_markdown_file
from mkdocs.utils.meta import get_data

from docbuild.models.config import DocsConfig
from docbuild.models.toc import TocNode
from docbuild.parsing import resolve_title


INDEX_URL = "index.html"


def compile_exclude(patterns: Iterable[str]) -> pathspec.GitIgnoreSpec:
    """Compile exclusion globs with the gitignore dialect MkDocs applies to ``exclude_docs``."""

    return pathspec.GitIgnoreSpec.from_lines(list(patterns))


def discover_documents(input_dir: Path, exclude: Iterable[str] = ()) -> List[Path]:
    """Markdown files under ``input_dir`` (relative to it) not matched by ``exclude``.

    Any extension MkDocs renders as a page counts (``.md``, ``.markdown``, ...).
    """

    if not input_dir.is_dir():
        raise FileNotFoundError(f"Input directory not found: {input_dir}")

    spec = compile_exclude(exclude)
    documents = []
    for path in input_dir.rglob("*"):
        if not path.is_file() or not is_markdown_file(path.name):
            continue
        relative = path.relative_to(input_dir)
        if spec.match_file(relative.as_posix()):
            continue
        documents.append(relative)
    return sorted(documents)


def page_name(relative: Path) -> str:
    """The name MkDocs gives a page: its stem, with ``README`` read as ``index``."""

    return "index" if relative.stem == "README" else relative.stem


def page_url(relative: Path) -> str:
    """Where a page is written when directory URLs are off."""

    return (relative.parent / f"{page_name(relative)}.html").as_posix()


class TOCBuilder:
    """Preview the navigation a build produces, without running the build."""

    def __init__(self, config: DocsConfig) -> None:
        self.config = config

    def build(self) -> TocNode:
        config = self.config
        root = TocNode(
            document_id="",
            path=INDEX_URL,
            title=config.base_title,
            label=config.base_title,
            level=0,
        )
        sections: Dict[Path, TocNode] = {Path("."): root}
        index = config.index_relative_path()

        for relative in self._ordered_documents(index):
            parent = self._section_for(relative.parent, sections)
            source = config.input_dir / relative
            markdown_text, meta = get_data(source.read_text(encoding="utf-8-sig"))
            name = page_name(relative)
            title = resolve_title(markdown_text, meta, name)
            node = TocNode(
                document_id=name,
                path=INDEX_URL if relative == index else page_url(relative),
                title=title,
                label=title,
                level=parent.level + 1,
                source=source,
            )
            node.label = config.map_toc_name(name, node, title)
            parent.add_child(node)

        return root

    def _ordered_documents(self, index: Path) -> List[Path]:
        documents = discover_documents(self.config.input_dir, self.config.exclude)
        for relative in documents:
            if relative != index and page_url(relative) == INDEX_URL:
                raise ValueError(
                    f"{relative.as_posix()} and the index document {index.as_posix()} "
                    f"would both be written to {INDEX_URL}"
                )
        if index in documents:
            documents.remove(index)
            documents.insert(0, index)
        return documents

    def _section_for(self, directory: Path, sections: Dict[Path, TocNode]) -> TocNode:
        if directory in sections:
            return sections[directory]

        parent = self._section_for(directory.parent, sections)
        section = TocNode(
            document_id=directory.name,
            path=f"{directory.as_posix()}/",
            title=directory.name,
            label=directory.name,
            level=parent.level + 1,
        )
        parent.add_child(section)
        sections[directory] = section
        return section


__all__ = ["compile_exclude", "discover_documents", "page_name", "page_url", "TOCBuilder"]
