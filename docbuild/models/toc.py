from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional


@dataclass(slots=True)
class TocNode:
    """A navigation entry: the site root, a directory section or a document."""

    document_id: str
    path: str
    title: str
    label: str
    level: int
    source: Optional[Path] = None
    parent_path: Optional[str] = None
    order: int = 0
    children: List["TocNode"] = field(default_factory=list)

    @property
    def is_section(self) -> bool:
        return self.source is None

    def add_child(self, child: "TocNode") -> None:
        """Attach a child node while keeping the navigation hierarchy consistent."""

        child.order = len(self.children)
        child.parent_path = self.path
        self.children.append(child)

    def walk(self) -> Iterator["TocNode"]:
        yield self
        for child in self.children:
            yield from child.walk()


__all__ = ["TocNode"]
