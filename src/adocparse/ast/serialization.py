#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adocparse/ast/serialization.py
"""JSON and YAML serialization for the document model.

Spans are written out as their text, optionally together with their source
offsets, so the output is self-contained and no longer tied to the input
buffer.

Examples
--------
Serialize a parsed document to JSON:

    >>> from adocparse import parse
    >>> from adocparse.ast.serialization import ast_to_json
    >>>
    >>> doc = parse("= Title\\nJane Doe\\n")
    >>> print(ast_to_json(doc, indent=2))

"""

from __future__ import annotations

import json
from typing import Any, Callable

import yaml

from adocparse.ast.nodes import (
    AuthorInfo,
    Block,
    DocAttr,
    DocHeader,
    Document,
    Name,
    Node,
    Span,
    Strong,
    Text,
    Title,
)

SCHEMA_VERSION = 1


def _serialize_span(span: Span | None, include_offsets: bool) -> Any:
    """Serialize a span as text or as a text/offset mapping.

    Parameters
    ----------
    span : Span or None
        Span to serialize
    include_offsets : bool
        Whether to include ``start``/``end`` source offsets

    Returns
    -------
    Any
        None, the span text, or a dict with text and offsets

    """
    if span is None:
        return None
    if not include_offsets:
        return span.text
    return {"text": span.text, "start": span.start, "end": span.end}


def _serialize_title(node: Title, include_offsets: bool) -> dict[str, Any]:
    return {
        "node_type": "Title",
        "level": node.level,
        "content": _serialize_span(node.content, include_offsets),
    }


def _serialize_name(node: Name, include_offsets: bool) -> dict[str, Any]:
    return {
        "node_type": "Name",
        "firstname": _serialize_span(node.firstname, include_offsets),
        "middlename": _serialize_span(node.middlename, include_offsets),
        "lastname": _serialize_span(node.lastname, include_offsets),
    }


def _serialize_author_info(node: AuthorInfo, include_offsets: bool) -> dict[str, Any]:
    return {
        "node_type": "AuthorInfo",
        "author": _serialize_name(node.author, include_offsets),
        "email": _serialize_span(node.email, include_offsets),
    }


def _serialize_doc_attr(node: DocAttr, include_offsets: bool) -> dict[str, Any]:
    return {
        "node_type": "DocAttr",
        "unset": node.unset,
        "name": _serialize_span(node.name, include_offsets),
        "value": _serialize_span(node.value, include_offsets),
    }


def _serialize_doc_header(node: DocHeader, include_offsets: bool) -> dict[str, Any]:
    return {
        "node_type": "DocHeader",
        "title": _serialize_title(node.title, include_offsets),
        "auth_info": _serialize_author_info(node.auth_info, include_offsets) if node.auth_info else None,
        "attrs": [_serialize_doc_attr(attr, include_offsets) for attr in node.attrs],
    }


def _serialize_block(node: Block, include_offsets: bool) -> dict[str, Any]:
    result: dict[str, Any] = {
        "node_type": "Block",
        "lines": [_serialize_span(line, include_offsets) for line in node.lines],
    }
    if include_offsets:
        result["start"] = node.span.start
        result["end"] = node.span.end
    return result


def _serialize_document(node: Document, include_offsets: bool) -> dict[str, Any]:
    return {
        "node_type": "Document",
        "header": _serialize_doc_header(node.header, include_offsets),
        "body": [_serialize_block(block, include_offsets) for block in node.body],
        "metadata": node.metadata,
    }


def _serialize_inline(node: Strong | Text, include_offsets: bool) -> dict[str, Any]:
    return {"node_type": type(node).__name__, "text": _serialize_span(node.text, include_offsets)}


_SERIALIZATION_DISPATCH: dict[type, Callable[[Any, bool], dict[str, Any]]] = {
    Document: _serialize_document,
    DocHeader: _serialize_doc_header,
    Title: _serialize_title,
    Name: _serialize_name,
    AuthorInfo: _serialize_author_info,
    DocAttr: _serialize_doc_attr,
    Block: _serialize_block,
    Strong: _serialize_inline,
    Text: _serialize_inline,
}


def ast_to_dict(node: Node, include_offsets: bool = False) -> dict[str, Any]:
    """Convert a model node to a dictionary representation.

    Parameters
    ----------
    node : Node
        The node to convert
    include_offsets : bool, default False
        Whether spans carry their source offsets

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If the node type has no serializer

    Examples
    --------
    >>> from adocparse.ast import DocAttr, Span
    >>> source = ":toc:"
    >>> ast_to_dict(DocAttr(name=Span(source, 1, 4)))
    {'node_type': 'DocAttr', 'unset': False, 'name': 'toc', 'value': None}

    """
    node_class = type(node)
    serializer = _SERIALIZATION_DISPATCH.get(node_class)
    if serializer:
        return serializer(node, include_offsets)

    raise ValueError(f"Unknown node type for serialization: {node_class.__name__}")


def ast_to_json(node: Node, indent: int | None = None, include_offsets: bool = False) -> str:
    """Serialize a model node to a JSON string with schema versioning.

    Parameters
    ----------
    node : Node
        The node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)
    include_offsets : bool, default False
        Whether spans carry their source offsets

    Returns
    -------
    str
        JSON string, ``{"schema_version": 1, "node_type": ..., ...}``

    """
    versioned_dict = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node, include_offsets)}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


def ast_to_yaml(node: Node, include_offsets: bool = False) -> str:
    """Serialize a model node to a YAML document.

    Parameters
    ----------
    node : Node
        The node to serialize
    include_offsets : bool, default False
        Whether spans carry their source offsets

    Returns
    -------
    str
        YAML text with keys in model order

    """
    versioned_dict = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node, include_offsets)}
    return yaml.safe_dump(versioned_dict, sort_keys=False, allow_unicode=True, default_flow_style=False)
