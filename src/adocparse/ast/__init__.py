#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Typed document model for parsed AsciiDoc-like documents.

This package provides the node classes produced by the parser, a visitor base
class for traversing them, and JSON/YAML serialization helpers.

Examples
--------
    >>> from adocparse import parse
    >>> doc = parse("= Hello\\nJane Doe <jane@example.com>\\n:toc:\\n\\nBody text.\\n")
    >>> doc.header.auth_info.email
    Span('jane@example.com', 18:34)

"""

from adocparse.ast.nodes import (
    AuthorInfo,
    Block,
    DocAttr,
    DocHeader,
    Document,
    FormattedText,
    InlineNode,
    Name,
    Node,
    Span,
    Strong,
    Text,
    Title,
)
from adocparse.ast.visitors import NodeVisitor

__all__ = [
    "AuthorInfo",
    "Block",
    "DocAttr",
    "DocHeader",
    "Document",
    "FormattedText",
    "InlineNode",
    "Name",
    "Node",
    "NodeVisitor",
    "Span",
    "Strong",
    "Text",
    "Title",
]
