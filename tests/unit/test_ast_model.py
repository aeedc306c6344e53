#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the document model, visitors and serialization."""

import json

import pytest
import yaml

from adocparse import parse
from adocparse.ast import (
    AuthorInfo,
    Block,
    DocAttr,
    DocHeader,
    Name,
    NodeVisitor,
    Span,
    Strong,
    Text,
    Title,
)
from adocparse.ast.serialization import ast_to_dict, ast_to_json, ast_to_yaml


@pytest.mark.unit
class TestSpan:
    """Test the zero-copy slice type."""

    def test_text_and_len(self):
        span = Span("hello world", 6, 11)

        assert span.text == "world"
        assert str(span) == "world"
        assert len(span) == 5

    def test_equality_with_str_and_span(self):
        assert Span("abc", 0, 2) == "ab"
        assert Span("abc", 0, 2) == Span("xab", 1, 3)
        assert Span("abc", 0, 2) != "abc"
        assert hash(Span("abc", 0, 2)) == hash(Span("xab", 1, 3))

    def test_invalid_range(self):
        with pytest.raises(ValueError):
            Span("abc", 2, 1)
        with pytest.raises(ValueError):
            Span("abc", 0, 4)

    def test_strip_keeps_source(self):
        source = "  padded \t"
        span = Span(source, 0, len(source))

        stripped = span.strip()
        assert stripped == "padded"
        assert stripped.source is source
        assert (stripped.start, stripped.end) == (2, 8)
        assert span.lstrip() == "padded \t"
        assert span.rstrip() == "  padded"
        assert Span("**x**", 0, 5).strip("*") == "x"

    def test_strip_all_whitespace_is_empty(self):
        assert Span("   ", 0, 3).strip() == ""

    def test_repr(self):
        assert repr(Span("= Hi", 2, 4)) == "Span('Hi', 2:4)"


@pytest.mark.unit
class TestNodes:
    """Test node invariants and helpers."""

    def test_middlename_requires_lastname(self):
        with pytest.raises(ValueError):
            Name(firstname=Span("a b", 0, 1), middlename=Span("a b", 2, 3))

    def test_full_name(self):
        source = "Wang Yue Heng"
        name = Name(Span(source, 0, 4), Span(source, 5, 8), Span(source, 9, 13))

        assert name.full_name == "Wang Yue Heng"
        assert AuthorInfo(author=name).full_name == "Wang Yue Heng"

    def test_empty_block_rejected(self):
        with pytest.raises(ValueError):
            Block(lines=())

    def test_block_inline_keeps_line_breaks(self):
        block = parse("= T\n\nfirst *line*\r\nsecond line\n").body[0]
        nodes = block.inline()

        assert "".join(node.text.text for node in nodes) == block.text
        assert [type(node).__name__ for node in nodes] == ["Text", "Strong", "Text", "Text"]
        assert nodes[2].text == "\n"

    def test_block_inline_skips_elided_comments(self):
        block = parse("= T\n\nfirst\n// aside\nsecond\n").body[0]

        assert "".join(node.text.text for node in block.inline()) == "first\nsecond"

    def test_document_is_hashable(self):
        document = parse("= T\n:a: 1\n\nbody\n")

        assert document.metadata == {"title": "T", "a": "1"}
        assert hash(document) == hash(parse("= T\n:a: 1\n\nbody\n"))

    def test_resolved_attributes(self):
        header = parse("= T\n:a: 1\n:b:\n:a: 2\n:!b:\n:c: 3\n:c!:\n:d: 4\n").header

        assert header.resolved_attributes() == {"a": "2", "d": "4"}

    def test_nodes_are_frozen(self):
        title = Title(level=1, content=Span("= T", 1, 3))

        with pytest.raises(AttributeError):
            title.level = 2  # type: ignore[misc]


class _NodeCounter(NodeVisitor):
    def __init__(self):
        self.counts: dict[str, int] = {}

    def _count(self, node):
        name = type(node).__name__
        self.counts[name] = self.counts.get(name, 0) + 1

    def visit_document(self, node):
        self._count(node)
        node.header.accept(self)
        for block in node.body:
            block.accept(self)

    def visit_doc_header(self, node):
        self._count(node)
        node.title.accept(self)
        if node.auth_info is not None:
            node.auth_info.accept(self)
        for attr in node.attrs:
            attr.accept(self)

    def visit_title(self, node):
        self._count(node)

    def visit_author_info(self, node):
        self._count(node)
        node.author.accept(self)

    def visit_name(self, node):
        self._count(node)

    def visit_doc_attr(self, node):
        self._count(node)

    def visit_block(self, node):
        self._count(node)
        for inline in node.inline():
            inline.accept(self)

    def visit_strong(self, node):
        self._count(node)

    def visit_text(self, node):
        self._count(node)


@pytest.mark.unit
class TestVisitor:
    """Test visitor dispatch."""

    def test_visits_every_node(self, sample_document):
        counter = _NodeCounter()
        parse(sample_document).accept(counter)

        assert counter.counts == {
            "Document": 1,
            "DocHeader": 1,
            "Title": 1,
            "AuthorInfo": 1,
            "Name": 1,
            "DocAttr": 4,
            "Block": 2,
            "Text": 5,
            "Strong": 1,
        }

    def test_incomplete_visitor_cannot_be_instantiated(self):
        class Partial(NodeVisitor):
            def visit_title(self, node):
                return None

        with pytest.raises(TypeError):
            Partial()  # type: ignore[abstract]


@pytest.mark.unit
class TestSerialization:
    """Test JSON/YAML serialization."""

    def test_doc_attr_to_dict(self):
        source = ":toc:"
        result = ast_to_dict(DocAttr(name=Span(source, 1, 4)))

        assert result == {"node_type": "DocAttr", "unset": False, "name": "toc", "value": None}

    def test_inline_to_dict(self):
        source = "*b* c"
        assert ast_to_dict(Strong(Span(source, 1, 2))) == {"node_type": "Strong", "text": "b"}
        assert ast_to_dict(Text(Span(source, 3, 5))) == {"node_type": "Text", "text": " c"}

    def test_offsets(self):
        source = "= Title\n"
        result = ast_to_dict(Title(level=1, content=Span(source, 2, 7)), include_offsets=True)

        assert result["content"] == {"text": "Title", "start": 2, "end": 7}

    def test_document_to_json(self, rsciidoc_document):
        data = json.loads(ast_to_json(parse(rsciidoc_document)))

        assert data["schema_version"] == 1
        assert data["node_type"] == "Document"
        header = data["header"]
        assert header["title"] == {"node_type": "Title", "level": 1, "content": "Rsciidoc"}
        assert header["auth_info"]["author"]["lastname"] == "Wang"
        assert header["auth_info"]["email"] == "admin@eastack.me"
        assert [attr["unset"] for attr in header["attrs"]] == [False, True]
        assert data["body"] == []

    def test_block_offsets(self):
        source = "= T\n\nab\ncd\n"
        data = ast_to_dict(parse(source).body[0], include_offsets=True)

        assert (data["start"], data["end"]) == (5, 10)
        assert data["lines"][1] == {"text": "cd", "start": 8, "end": 10}

    def test_yaml_keeps_key_order(self, sample_document):
        text = ast_to_yaml(parse(sample_document).header)
        data = yaml.safe_load(text)

        assert text.startswith("schema_version: 1\n")
        assert list(data) == ["schema_version", "node_type", "title", "auth_info", "attrs"]
        assert data["auth_info"]["author"]["middlename"] == "Q"

    def test_header_without_author(self):
        header = DocHeader(title=Title(level=1, content=Span("= T", 2, 3)))

        assert ast_to_dict(header)["auth_info"] is None

    def test_unknown_node_type(self):
        with pytest.raises(ValueError, match="Unknown node type"):
            ast_to_dict(object())  # type: ignore[arg-type]
