from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Tuple

from pydantic import BaseModel, Field, field_validator

from docbuild.naming import get_name_mapper, map_toc_name
from docbuild.parsing import get_parser, render_markdown


class DocsConfig(BaseModel):
    """Options handed to the documentation build runner.

    ``map_toc_name`` follows the ``TocNameMapper`` signature and
    ``parsing_function`` the ``MarkdownParser`` one. Both also accept the name
    of a registered implementation, which is how config files refer to them.
    """

    input_dir: Path
    output_dir: Path
    index_content_path: Path
    exclude: Tuple[str, ...] = Field(default_factory=tuple)
    base_title: str
    map_toc_name: Callable[[str, Any, str], str] = Field(default=map_toc_name)
    parsing_function: Callable[[str], str] = Field(default=render_markdown)

    model_config = {
        "frozen": True,
    }

    @field_validator("exclude", mode="before")
    @classmethod
    def _split_exclude(cls, value: object) -> Tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            return tuple(pattern.strip() for pattern in value.split(",") if pattern.strip())
        return tuple(str(pattern).strip() for pattern in value if str(pattern).strip())

    @field_validator("map_toc_name", mode="before")
    @classmethod
    def _resolve_name_mapper(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return get_name_mapper(value)
            except KeyError as exc:
                raise ValueError(exc.args[0]) from exc
        return value

    @field_validator("parsing_function", mode="before")
    @classmethod
    def _resolve_parser(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                return get_parser(value)
            except KeyError as exc:
                raise ValueError(exc.args[0]) from exc
        return value

    def resolve_paths(self, base_path: Path) -> "DocsConfig":
        updates = {}
        for key in ("input_dir", "output_dir", "index_content_path"):
            raw: Path = getattr(self, key)
            updates[key] = (base_path / raw).resolve() if not raw.is_absolute() else raw
        return self.model_copy(update=updates)

    def index_relative_path(self) -> Path:
        """Location of the index document relative to ``input_dir``.

        A relative index path that does not start with ``input_dir`` is taken
        as already relative to it (``"1_index.md"``).
        """

        index = self.index_content_path
        if index.is_relative_to(self.input_dir):
            return index.relative_to(self.input_dir)
        if index.is_absolute() or ".." in index.parts:
            raise ValueError(
                f"Index document {index} is not inside the input directory {self.input_dir}"
            )
        return index


__all__ = ["DocsConfig"]
