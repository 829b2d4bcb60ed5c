from pathlib import Path

import pytest
from pydantic import ValidationError

from docbuild.config_loader import volplugin_config
from docbuild.models.config import DocsConfig
from docbuild.naming import map_toc_name, title_only
from docbuild.parsing import render_markdown


def _config(**overrides) -> DocsConfig:
    values = {
        "input_dir": Path("docs"),
        "output_dir": Path("dist"),
        "index_content_path": Path("docs/1_index.md"),
        "base_title": "Docs",
    }
    values.update(overrides)
    return DocsConfig(**values)


def test_volplugin_config_values():
    config = volplugin_config()

    assert config.input_dir == Path("docs")
    assert config.output_dir == Path("dist")
    assert config.index_content_path == Path("docs/1_index.md")
    assert config.exclude == (".*", "*.go")
    assert config.base_title == "volplugin Documentation"
    assert config.map_toc_name is map_toc_name
    assert config.parsing_function is render_markdown


def test_exclude_accepts_string_or_list():
    assert _config(exclude=" .*, *.go ,").exclude == (".*", "*.go")
    assert _config(exclude=["*.tmp", ""]).exclude == ("*.tmp",)
    assert _config(exclude=None).exclude == ()
    assert _config().exclude == ()


def test_callables_resolve_from_registered_names():
    config = _config(map_toc_name="title", parsing_function="markdown")

    assert config.map_toc_name is title_only
    assert config.parsing_function is render_markdown


def test_unknown_names_are_rejected():
    with pytest.raises(ValidationError):
        _config(map_toc_name="nope")
    with pytest.raises(ValidationError):
        _config(parsing_function="nope")
    with pytest.raises(ValidationError):
        _config(parsing_function=42)


def test_config_is_frozen():
    config = _config()

    with pytest.raises(ValidationError):
        config.base_title = "Other"


def test_resolve_paths_anchors_relative_paths(tmp_path):
    absolute_out = tmp_path / "elsewhere"
    config = _config(output_dir=absolute_out).resolve_paths(tmp_path)

    assert config.input_dir == (tmp_path / "docs").resolve()
    assert config.index_content_path == (tmp_path / "docs/1_index.md").resolve()
    assert config.output_dir == absolute_out
    assert config.map_toc_name is map_toc_name


def test_index_relative_path():
    assert _config().index_relative_path() == Path("1_index.md")
    assert _config(index_content_path=Path("1_index.md")).index_relative_path() == Path("1_index.md")
    assert _config(index_content_path=Path("docs/guide/1_start.md")).index_relative_path() == Path(
        "guide/1_start.md"
    )

    with pytest.raises(ValueError):
        _config(index_content_path=Path("../1_index.md")).index_relative_path()
    with pytest.raises(ValueError):
        _config(
            input_dir=Path("/srv/docs"), index_content_path=Path("/srv/other/1_index.md")
        ).index_relative_path()
