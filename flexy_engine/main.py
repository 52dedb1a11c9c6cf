#!/usr/bin/env python3
"""
Flexy - Main Entry Point

Command line tool to check markup templates and dimension literals.
"""

import argparse
import json
import sys

from flexy_engine import __version__
from flexy_engine.errors import FlexyError
from flexy_engine.layout import LayoutTreeBuilder
from flexy_engine.parser import MarkupParser, parse_dimension
from flexy_engine.parser.markup_parser import TREE_BUILDERS
from flexy_engine.utils.config import Config
from flexy_engine.utils.logging import default_log_file, setup_logging


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(prog="flexy", description="Flexy markup and layout tool")

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", action="store_true", help="Also log to the default log file")
    parser.add_argument("--config", default=None, help="Path to the configuration file")
    parser.add_argument("--tree-builder", choices=TREE_BUILDERS, default=None,
                        help="Markup tokenizer to use")

    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse", help="Parse a markup file and print its element tree")
    parse_cmd.add_argument("file", help="Markup file ('-' for stdin)")

    tree_cmd = commands.add_parser("tree", help="Print the layout tree built from a markup file")
    tree_cmd.add_argument("file", help="Markup file ('-' for stdin)")

    dim_cmd = commands.add_parser("dimension", help="Parse a dimension literal")
    dim_cmd.add_argument("literal", help="Dimension literal, e.g. 100%% or 320pt")

    return parser.parse_args(argv)


def read_markup(path: str) -> str:
    if path == '-':
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def describe_tree(tree) -> list:
    """List the layout tree nodes in pre-order with their depth."""
    rows = []

    def visit(handle, depth):
        node = tree[handle]
        rows.append({
            'handle': handle,
            'depth': depth,
            'element': getattr(node.element, 'tag_name', type(node.element).__name__),
            'children': list(node.children),
            'style': node.style.to_dict(),
        })
        for child in node.children:
            visit(child, depth + 1)

    visit(tree.root, 0)
    return rows


def main(argv=None) -> int:
    """Main entry point for the command line tool."""
    args = parse_args(argv)

    config = Config(args.config)
    console_level = "DEBUG" if args.debug else config.get('logging.console_level', 'INFO')
    logger = setup_logging(
        log_file=default_log_file() if args.log_file else None,
        console_level=console_level,
        file_level=config.get('logging.file_level', 'DEBUG'),
    )

    tree_builder = args.tree_builder or config.get('markup.tree_builder', 'html.parser')

    try:
        if args.command == "dimension":
            value, unit = parse_dimension(args.literal).to_host()
            print(f"{value:g} {unit}")
        else:
            element = MarkupParser(tree_builder).parse(read_markup(args.file))
            if args.command == "parse":
                output = element.to_dict()
            else:
                output = describe_tree(LayoutTreeBuilder().build(element))
            print(json.dumps(output, indent=2))
    except (FlexyError, OSError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"flexy: error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
