from __future__ import annotations

import re
from typing import Any, Callable, Dict, Iterator, Mapping, Protocol, Tuple

import markdown


_HEADING_PATTERN = re.compile(r"^(?P<hashes>#{1,6})\s+(?P<title>.+?)(?:\s+#+)?\s*$")
_FENCE_PATTERN = re.compile(r"^\s{0,3}(?P<fence>`{3,}|~{3,})")

MARKDOWN_EXTENSIONS = ["toc", "tables", "fenced_code"]


class MarkdownParser(Protocol):
    """Converts markdown source text into HTML."""

    def __call__(self, text: str) -> str: ...


def render_markdown(text: str) -> str:
    """Render markdown with Python-Markdown using the extensions the site is built with."""

    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)


def iter_headings(text: str) -> Iterator[Tuple[int, str]]:
    """Yield ``(level, title)`` for each ATX heading outside fenced code blocks."""

    fence: str | None = None
    for line in text.splitlines():
        fence_match = _FENCE_PATTERN.match(line)
        if fence_match:
            marker = fence_match.group("fence")
            if fence is None:
                fence = marker
            elif marker[0] == fence[0] and len(marker) >= len(fence):
                fence = None
            continue
        if fence is not None:
            continue
        match = _HEADING_PATTERN.match(line)
        if match:
            yield len(match.group("hashes")), match.group("title").strip()


def resolve_title(text: str, meta: Mapping[str, Any] | None, fallback: str) -> str:
    """Title of a document: front-matter ``title``, first H1, first heading, then ``fallback``.

    ``text`` is the markdown body with front matter already removed.
    """

    if meta:
        title = meta.get("title")
        if isinstance(title, str) and title.strip():
            return title.strip()
    headings = list(iter_headings(text))
    for level, title in headings:
        if level == 1:
            return title
    if headings:
        return headings[0][1]
    return fallback


_PARSERS: Dict[str, Callable[[str], str]] = {
    "markdown": render_markdown,
}


def parser_choices() -> Mapping[str, Callable[[str], str]]:
    return _PARSERS


def get_parser(name: str) -> MarkdownParser:
    key = name.lower()
    if key not in _PARSERS:
        raise KeyError(f"Unknown markdown parser '{name}'. Available: {', '.join(sorted(_PARSERS))}")
    return _PARSERS[key]


__all__ = [
    "MARKDOWN_EXTENSIONS",
    "MarkdownParser",
    "render_markdown",
    "iter_headings",
    "resolve_title",
    "parser_choices",
    "get_parser",
]
