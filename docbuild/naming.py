from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Protocol


class TocNameMapper(Protocol):
    """Maps (filename, toc node, parsed title) to the label shown in navigation."""

    def __call__(self, filename: str, toc_node: Any, title: str) -> str: ...


def map_toc_name(filename: str, toc_node: Any, title: str) -> str:
    """Prefix the title with the first underscore-delimited segment of the filename.

    ``"1_index"`` + ``"Introduction"`` gives ``"1. Introduction"``. The prefix is
    an opaque token; ``toc_node`` is ignored.
    """

    prefix = filename.split("_")[0]
    return prefix + ". " + title


def title_only(filename: str, toc_node: Any, title: str) -> str:
    return title


_NAME_MAPPERS: Dict[str, Callable[[str, Any, str], str]] = {
    "ordinal-prefix": map_toc_name,
    "title": title_only,
}


def name_mapper_choices() -> Mapping[str, Callable[[str, Any, str], str]]:
    return _NAME_MAPPERS


def get_name_mapper(name: str) -> TocNameMapper:
    key = name.lower()
    if key not in _NAME_MAPPERS:
        raise KeyError(f"Unknown name mapper '{name}'. Available: {', '.join(sorted(_NAME_MAPPERS))}")
    return _NAME_MAPPERS[key]


__all__ = ["TocNameMapper", "map_toc_name", "title_only", "name_mapper_choices", "get_name_mapper"]
