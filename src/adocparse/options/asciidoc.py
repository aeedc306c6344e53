#  Copyright (c) 2025 Tom Villani, Ph.D.

# adocparse/options/asciidoc.py
"""Configuration options for AsciiDoc parsing.

This module defines the options class controlling how the document
assembler treats the header and body.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from adocparse.constants import (
    DEFAULT_PARSE_ATTRIBUTES,
    DEFAULT_PARSE_AUTHOR_LINE,
    DEFAULT_STRICT_MODE,
    DEFAULT_STRIP_COMMENTS,
    DEFAULT_TRIM_TITLE,
)
from adocparse.options.base import BaseParserOptions


@dataclass(frozen=True)
class AsciiDocOptions(BaseParserOptions):
    """Configuration options for AsciiDoc parsing.

    Parameters
    ----------
    trim_title : bool, default True
        Whether the assembler strips surrounding whitespace from the title
        content. The low-level title rule never trims.
    strict_mode : bool, default True
        Whether an unclosed comment block fails the whole parse. When False,
        a warning is logged: in the header the comment block starts the
        body, and in the body the rest of the input is ignored. A malformed
        author line or attribute entry never fails the parse; it ends the
        header in either mode.
    strip_comments : bool, default True
        Whether comment lines and comment blocks are elided from body blocks.
        When False, they are kept as ordinary body lines. Comments inside the
        header are always skipped.
    parse_author_line : bool, default True
        Whether the line after the title may be read as an author line.
    parse_attributes : bool, default True
        Whether attribute entries after the title/author line are collected.
        When False, they are left in the body.

    """

    trim_title: bool = field(
        default=DEFAULT_TRIM_TITLE,
        metadata={"help": "Strip whitespace around the title content", "cli_name": "no-trim-title"},
    )
    strict_mode: bool = field(
        default=DEFAULT_STRICT_MODE,
        metadata={
            "help": "Fail on unclosed comment blocks instead of skipping the rest of the input",
            "cli_name": "lenient",
            "importance": "advanced",
        },
    )
    strip_comments: bool = field(
        default=DEFAULT_STRIP_COMMENTS,
        metadata={"help": "Elide comments from body blocks", "cli_name": "keep-comments", "importance": "core"},
    )
    parse_author_line: bool = field(
        default=DEFAULT_PARSE_AUTHOR_LINE,
        metadata={"help": "Read the line after the title as an author line", "importance": "core"},
    )
    parse_attributes: bool = field(
        default=DEFAULT_PARSE_ATTRIBUTES,
        metadata={"help": "Parse document attributes", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()
