import pytest

from docbuild.parsing import get_parser, iter_headings, parser_choices, render_markdown, resolve_title


def test_render_markdown_produces_html_with_anchors():
    html = render_markdown("# Getting Started\n\nSome *text*.\n\n| a | b |\n|---|---|\n| 1 | 2 |\n")

    assert '<h1 id="getting-started">Getting Started</h1>' in html
    assert "<em>text</em>" in html
    assert "<table>" in html


def test_render_markdown_fenced_code():
    html = render_markdown("```\nvolcli volume create\n```\n")

    assert "<code>volcli volume create" in html


def test_resolve_title_prefers_front_matter_then_h1():
    text = "## Overview\n\n# Volumes\n"

    assert resolve_title(text, {"title": "Volume Guide"}, "2_volumes") == "Volume Guide"
    assert resolve_title(text, {}, "2_volumes") == "Volumes"
    assert resolve_title(text, None, "2_volumes") == "Volumes"


def test_resolve_title_falls_back_to_first_heading_then_name():
    assert resolve_title("Intro line\n\n## Usage\n\n### Flags\n", {}, "4_usage") == "Usage"
    assert resolve_title("no headings here", {}, "notes") == "notes"
    assert resolve_title("", {"title": "  "}, "empty") == "empty"


def test_iter_headings_strips_closing_hashes_and_skips_code_fences():
    text = (
        "```\n# not a heading\n```\n\n"
        "~~~~\n# also code\n~~~\n# still code\n~~~~\n\n"
        "# Configuration ##\n## Flags\n"
    )

    assert list(iter_headings(text)) == [(1, "Configuration"), (2, "Flags")]


def test_parser_registry():
    assert get_parser("markdown") is render_markdown
    assert "markdown" in parser_choices()

    with pytest.raises(KeyError):
        get_parser("marked")
