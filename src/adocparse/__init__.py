"""adocparse - a zero-copy parser for AsciiDoc-like documents.

adocparse turns a plain-text AsciiDoc-like document into a typed document
model: a title, optional author metadata, document attributes, and a body
split into blank-line delimited blocks. Comments are elided and constrained
``*strong*`` spans are resolved lazily per block. Every piece of text in the
model is a ``Span`` into the input; nothing is copied until asked for.

Key Features
------------
- Title, author line (``First [Middle] Last <email>``) and attribute entries
- Line (``//``) and block (``////``) comments
- Strict or lenient handling of unclosed comment blocks
- Metadata extraction from the header
- JSON and YAML serialization of the model
- Command-line front end (``adocparse FILE``)

Requirements
------------
- Python 3.10+

Examples
--------
Parse a document:

    >>> from adocparse import parse
    >>> doc = parse("= Rsciidoc\\nHeng Wang <admin@eastack.me>\\n:hello: world\\n:!toc:\\n")
    >>> doc.header.auth_info.author.lastname
    Span('Wang', 16:20)
    >>> doc.metadata["hello"]
    'world'

Parse only the header:

    >>> from adocparse import parse_header
    >>> parse_header("== Notes\\n\\nBody").title.level
    2

See Also
--------
adocparse.ast : document model, visitors and serialization
adocparse.parsers : grammar rules and the assembler

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "adocparse requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from typing import Optional

from adocparse.ast import DocHeader, Document
from adocparse.exceptions import (
    AdocParseError,
    EmptyRequiredSpan,
    IncompleteDelimiter,
    InvalidOptionsError,
    NoMatch,
    ParseFailure,
    ParsingError,
    ValidationError,
)
from adocparse.options import AsciiDocOptions, BaseParserOptions
from adocparse.parsers.asciidoc import AsciiDocParser
from adocparse.parsers.base import InputData
from adocparse.progress import ProgressCallback, ProgressEvent


def parse(
    input_data: InputData,
    options: Optional[AsciiDocOptions] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> Document:
    """Parse an AsciiDoc-like document.

    Parameters
    ----------
    input_data : str, Path, IO, or bytes
        Document content, a path to it, a stream, or UTF-8 bytes
    options : AsciiDocOptions or None, default None
        Parser options
    progress_callback : ProgressCallback or None, default None
        Optional callback receiving progress events

    Returns
    -------
    Document
        Parsed document

    Raises
    ------
    ParsingError
        If the document does not start with a title, or a comment block is
        left unclosed in strict mode
    ValidationError
        If the input cannot be read

    """
    return AsciiDocParser(options, progress_callback).parse(input_data)


def parse_header(text: InputData, options: Optional[AsciiDocOptions] = None) -> DocHeader:
    """Parse only the header (title, author line, attributes) of a document.

    Raises
    ------
    ParsingError
        If the document does not start with a title

    """
    return AsciiDocParser(options).parse_header(text)


__all__ = [
    "__version__",
    "parse",
    "parse_header",
    "AdocParseError",
    "AsciiDocOptions",
    "AsciiDocParser",
    "BaseParserOptions",
    "DocHeader",
    "Document",
    "EmptyRequiredSpan",
    "IncompleteDelimiter",
    "InvalidOptionsError",
    "NoMatch",
    "ParseFailure",
    "ParsingError",
    "ProgressCallback",
    "ProgressEvent",
    "ValidationError",
]
