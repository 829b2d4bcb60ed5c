from __future__ import annotations

import argparse
from pathlib import Path

from dotenv import load_dotenv

from docbuild.builder import run
from docbuild.config_loader import load_docs_config, volplugin_config
from docbuild.discovery import TOCBuilder
from docbuild.models.config import DocsConfig
from docbuild.models.toc import TocNode
from docbuild.naming import name_mapper_choices
from docbuild.parsing import parser_choices


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Build the volplugin documentation site.")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML/TOML/JSON build configuration (default: the built-in volplugin configuration)",
    )
    parser.add_argument(
        "--toc-names",
        choices=sorted(name_mapper_choices()),
        default=None,
        help="Override how navigation labels are derived from file names and titles",
    )
    parser.add_argument(
        "--parser",
        choices=sorted(parser_choices()),
        default=None,
        help="Override the markdown parser used to render pages",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the navigation the build would produce without writing any output",
    )
    return parser


def apply_overrides(config: DocsConfig, args: argparse.Namespace) -> DocsConfig:
    updates = {}
    if args.toc_names:
        updates["map_toc_name"] = name_mapper_choices()[args.toc_names]
    if args.parser:
        updates["parsing_function"] = parser_choices()[args.parser]
    return config.model_copy(update=updates) if updates else config


def format_toc(node: TocNode) -> str:
    lines = []
    for entry in node.walk():
        lines.append(f"{'  ' * entry.level}{entry.label}  [{entry.path}]")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    if Path(".env").exists():
        load_dotenv(".env", override=False)
    args = build_parser().parse_args(argv)

    config = load_docs_config(args.config) if args.config else volplugin_config()
    config = apply_overrides(config, args)

    if args.dry_run:
        print(format_toc(TOCBuilder(config).build()))
        return 0

    run(config)
    print(f"[info] Wrote documentation to {config.output_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
