#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Grammar rules and the document assembler.

The grammar is layered bottom-up:

- ``combinators``: cursor, primitive matchers and combinators
- ``lines``: line and block splitting
- ``comments``: line and block comment elision
- ``header``: title, author line and attribute entries
- ``inline``: constrained strong spans
- ``asciidoc``: the document assembler and ``AsciiDocParser``
"""

from adocparse.parsers.asciidoc import AsciiDocParser, parse_body, parse_doc_header, parse_document
from adocparse.parsers.base import BaseParser, InputData
from adocparse.parsers.combinators import Cursor
from adocparse.parsers.comments import parse_comment, parse_comment_block, parse_comment_line, skip_comments
from adocparse.parsers.header import parse_author_line, parse_doc_attr, parse_title
from adocparse.parsers.inline import parse_inline, parse_strong
from adocparse.parsers.lines import Blocks, Lines, parse_block, parse_line

__all__ = [
    "AsciiDocParser",
    "BaseParser",
    "Blocks",
    "Cursor",
    "InputData",
    "Lines",
    "parse_author_line",
    "parse_block",
    "parse_body",
    "parse_comment",
    "parse_comment_block",
    "parse_comment_line",
    "parse_doc_attr",
    "parse_doc_header",
    "parse_document",
    "parse_inline",
    "parse_line",
    "parse_strong",
    "parse_title",
    "skip_comments",
]
