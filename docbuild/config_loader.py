from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any, Dict

import yaml

from docbuild.models.config import DocsConfig
from docbuild.naming import map_toc_name
from docbuild.parsing import render_markdown


def volplugin_config() -> DocsConfig:
    """The configuration the volplugin documentation is built with."""

    return DocsConfig(
        input_dir=Path("docs"),
        output_dir=Path("dist"),
        index_content_path=Path("docs/1_index.md"),
        exclude=".*,*.go",
        base_title="volplugin Documentation",
        map_toc_name=map_toc_name,
        parsing_function=render_markdown,
    )


def _load_structured_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    ext = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    if ext in {".yaml", ".yml"}:
        data = yaml.safe_load(text)
    elif ext == ".toml":
        data = tomllib.loads(text)
    elif ext == ".json":
        data = json.loads(text)
    else:
        raise ValueError(f"Unsupported config format '{ext}' for {path}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level")
    return data


def load_docs_config(path: Path) -> DocsConfig:
    raw = _load_structured_file(path)
    config = DocsConfig.model_validate(raw)
    return config.resolve_paths(path.parent)


__all__ = ["load_docs_config", "volplugin_config"]
