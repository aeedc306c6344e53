#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adocparse/cli.py
"""Command-line interface for adocparse.

Parse a document and show the result as a tree, JSON or YAML::

    $ adocparse README.adoc
    $ adocparse README.adoc --format json
    $ cat README.adoc | adocparse - --header-only --format yaml

Boolean parser options are exposed as flags generated from the
``AsciiDocOptions`` field metadata (``--lenient``, ``--keep-comments``,
``--no-trim-title`` and so on).

Exit codes: 0 on success, 1 when the document cannot be parsed, 2 on usage
or input errors.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import MISSING, fields
from pathlib import Path

from rich.console import Console
from rich.text import Text as RichText
from rich.tree import Tree

from adocparse import __version__
from adocparse.ast import (
    AuthorInfo,
    Block,
    DocAttr,
    DocHeader,
    Document,
    Name,
    Node,
    NodeVisitor,
    Strong,
    Text,
    Title,
)
from adocparse.ast.serialization import ast_to_json, ast_to_yaml
from adocparse.constants import DEFAULT_OUTPUT_FORMAT, OUTPUT_FORMATS
from adocparse.exceptions import ParsingError, ValidationError
from adocparse.logging_utils import configure_logging
from adocparse.options import AsciiDocOptions
from adocparse.parsers.asciidoc import AsciiDocParser
from adocparse.parsers.base import InputData

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_PARSING_ERROR = 1
EXIT_INPUT_ERROR = 2


class RichTreeVisitor(NodeVisitor):
    """Build a ``rich.tree.Tree`` mirroring the document model."""

    def visit_document(self, node: Document) -> Tree:
        tree = Tree(RichText("Document", style="bold"))
        tree.add(node.header.accept(self))
        body = tree.add(RichText(f"Body ({len(node.body)} blocks)", style="bold"))
        for block in node.body:
            body.add(block.accept(self))
        if node.metadata:
            meta = tree.add(RichText("Metadata", style="bold"))
            for key, value in node.metadata.items():
                meta.add(RichText(f"{key}: {value}"))
        return tree

    def visit_doc_header(self, node: DocHeader) -> Tree:
        tree = Tree(RichText("Header", style="bold"))
        tree.add(node.title.accept(self))
        if node.auth_info is not None:
            tree.add(node.auth_info.accept(self))
        if node.attrs:
            attrs = tree.add(RichText(f"Attributes ({len(node.attrs)})", style="bold"))
            for attr in node.attrs:
                attrs.add(attr.accept(self))
        return tree

    def visit_title(self, node: Title) -> RichText:
        label = RichText(f"Title (level {node.level}): ", style="cyan")
        label.append(repr(node.content.text))
        return label

    def visit_author_info(self, node: AuthorInfo) -> Tree:
        tree = Tree(RichText("Author", style="cyan"))
        tree.add(node.author.accept(self))
        if node.email is not None:
            tree.add(RichText(f"email: {node.email.text}"))
        return tree

    def visit_name(self, node: Name) -> RichText:
        parts = [f"first={node.firstname.text!r}"]
        if node.middlename is not None:
            parts.append(f"middle={node.middlename.text!r}")
        if node.lastname is not None:
            parts.append(f"last={node.lastname.text!r}")
        return RichText("name: " + " ".join(parts))

    def visit_doc_attr(self, node: DocAttr) -> RichText:
        if node.unset:
            return RichText(f":!{node.name.text}:", style="red")
        label = RichText(f":{node.name.text}:", style="green")
        if node.value is not None:
            label.append(f" {node.value.text}")
        return label

    def visit_block(self, node: Block) -> RichText:
        label = RichText(f"[{node.span.start}:{node.span.end}] ", style="dim")
        for inline in node.inline():
            label.append_text(inline.accept(self))
        return label

    def visit_strong(self, node: Strong) -> RichText:
        return RichText(node.text.text, style="bold")

    def visit_text(self, node: Text) -> RichText:
        return RichText(node.text.text)


def _add_option_arguments(parser: argparse.ArgumentParser) -> None:
    """Add one flag per boolean ``AsciiDocOptions`` field.

    Fields defaulting to True become ``store_false`` flags named after the
    field's ``cli_name`` metadata, or ``--no-<field-name>`` without one.
    """
    group = parser.add_argument_group("Parser options")
    for option_field in fields(AsciiDocOptions):
        if option_field.default is MISSING or not isinstance(option_field.default, bool):
            continue
        metadata = option_field.metadata
        default = option_field.default
        kebab = option_field.name.replace("_", "-")
        if "cli_name" in metadata:
            flag = f"--{metadata['cli_name']}"
        else:
            flag = f"--no-{kebab}" if default else f"--{kebab}"
        group.add_argument(
            flag,
            dest=option_field.name,
            action="store_false" if default else "store_true",
            default=default,
            help=metadata.get("help"),
        )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``adocparse`` command."""
    parser = argparse.ArgumentParser(
        prog="adocparse",
        description="Parse an AsciiDoc-like document and display its structure.",
    )
    parser.add_argument("input", metavar="FILE", help="Document to parse, or '-' to read standard input")
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default=DEFAULT_OUTPUT_FORMAT,
        help=f"Output format (default: {DEFAULT_OUTPUT_FORMAT})",
    )
    parser.add_argument("--header-only", action="store_true", help="Parse and print only the document header")
    parser.add_argument(
        "--offsets", action="store_true", help="Include source offsets of spans in JSON/YAML output"
    )

    _add_option_arguments(parser)

    logging_group = parser.add_argument_group("Logging options")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        default=None,
        help="Logging level (default: $ADOCPARSE_LOG_LEVEL or WARNING)",
    )
    logging_group.add_argument("--log-file", type=str, default=None, help="Also write log messages to this file")
    logging_group.add_argument(
        "--trace", action="store_true", help="Verbose logging with timestamps and logger names (implies DEBUG)"
    )

    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_options(parsed_args: argparse.Namespace) -> AsciiDocOptions:
    """Build ``AsciiDocOptions`` from parsed command line arguments."""
    values = {
        option_field.name: getattr(parsed_args, option_field.name)
        for option_field in fields(AsciiDocOptions)
        if hasattr(parsed_args, option_field.name)
    }
    return AsciiDocOptions(**values)


def _read_input(source: str) -> InputData:
    if source == "-":
        return sys.stdin.buffer.read()
    path = Path(source)
    if not path.is_file():
        raise ValidationError(f"Input file does not exist: {source}", parameter_name="input", parameter_value=source)
    return path


def render(node: Node, output_format: str, include_offsets: bool = False, console: Console | None = None) -> None:
    """Write ``node`` to standard output in the requested format."""
    if output_format == "json":
        sys.stdout.write(ast_to_json(node, indent=2, include_offsets=include_offsets) + "\n")
    elif output_format == "yaml":
        sys.stdout.write(ast_to_yaml(node, include_offsets=include_offsets))
    else:
        (console or Console()).print(node.accept(RichTreeVisitor()))


def main(args: list[str] | None = None) -> int:
    """Execute the ``adocparse`` command."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    log_level = "DEBUG" if parsed_args.trace else parsed_args.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    options = build_options(parsed_args)
    logger.debug("Parsing %s with %s", parsed_args.input, options)

    try:
        input_data = _read_input(parsed_args.input)
        adoc_parser = AsciiDocParser(options)
        node: Node
        if parsed_args.header_only:
            node = adoc_parser.parse_header(input_data)
        else:
            node = adoc_parser.parse(input_data)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR
    except ParsingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_PARSING_ERROR

    render(node, parsed_args.format, include_offsets=parsed_args.offsets)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
