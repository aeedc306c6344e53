#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adocparse/ast/nodes.py
"""Node classes for the parsed document model.

This module defines the typed document model produced by the parser. Every
text-bearing node holds ``Span`` views into the original input string rather
than copies of it, so the model stays valid exactly as long as that string.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Header nodes:
    - Title, Name, AuthorInfo, DocAttr, DocHeader

Body nodes:
    - Block

Inline nodes (resolved lazily from a Block):
    - Text, Strong (the only FormattedText case)

Root:
    - Document

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

if TYPE_CHECKING:
    from adocparse.ast.visitors import NodeVisitor


@dataclass(frozen=True, eq=False)
class Span:
    """Non-owning view of ``source[start:end]``.

    A span compares equal to another span or to a plain string holding the
    same text, which keeps assertions in calling code short.

    Parameters
    ----------
    source : str
        The complete input buffer
    start : int
        Offset of the first character of the slice
    end : int
        Offset one past the last character of the slice

    Examples
    --------
        >>> text = "= Hello\\n"
        >>> span = Span(text, 1, 7)
        >>> span == " Hello"
        True
        >>> span.strip().start
        2

    """

    source: str = field(repr=False)
    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate that the range lies inside the source."""
        if not 0 <= self.start <= self.end <= len(self.source):
            raise ValueError(f"Invalid span range {self.start}:{self.end} for source of length {len(self.source)}")

    @property
    def text(self) -> str:
        """Materialize the viewed text."""
        return self.source[self.start : self.end]

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Span({self.text!r}, {self.start}:{self.end})"

    def __len__(self) -> int:
        return self.end - self.start

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Span):
            return self.text == other.text
        if isinstance(other, str):
            return self.text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)

    def _predicate(self, chars: Optional[str]) -> Callable[[str], bool]:
        if chars is None:
            return str.isspace
        return lambda c: c in chars

    def lstrip(self, chars: Optional[str] = None) -> Span:
        """Return the span without leading whitespace (or ``chars``)."""
        matches = self._predicate(chars)
        start = self.start
        while start < self.end and matches(self.source[start]):
            start += 1
        return Span(self.source, start, self.end)

    def rstrip(self, chars: Optional[str] = None) -> Span:
        """Return the span without trailing whitespace (or ``chars``)."""
        matches = self._predicate(chars)
        end = self.end
        while end > self.start and matches(self.source[end - 1]):
            end -= 1
        return Span(self.source, self.start, end)

    def strip(self, chars: Optional[str] = None) -> Span:
        """Return the span without surrounding whitespace (or ``chars``)."""
        return self.lstrip(chars).rstrip(chars)


class Node(ABC):
    """Base class for all document model nodes.

    All nodes support the visitor pattern for traversal and rendering.
    """

    @abstractmethod
    def accept(self, visitor: NodeVisitor) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : NodeVisitor
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Header Nodes
# ============================================================================


@dataclass(frozen=True)
class Title(Node):
    """Document title line.

    Parameters
    ----------
    level : int
        Number of leading ``=`` markers (always at least 1)
    content : Span
        Rest of the title line. The low-level title rule keeps the separating
        whitespace after the markers; the assembler may strip it.

    """

    level: int
    content: Span

    def accept(self, visitor: NodeVisitor) -> Any:
        """Accept a visitor for processing this title."""
        return visitor.visit_title(self)


@dataclass(frozen=True)
class Name(Node):
    """Author name split into up to three components.

    ``middlename`` is only ever set together with ``lastname``: with two
    name tokens the second one is the last name.

    Parameters
    ----------
    firstname : Span
        First name token
    middlename : Span or None, default = None
        Middle name token (only with three tokens)
    lastname : Span or None, default = None
        Last name token

    """

    firstname: Span
    middlename: Optional[Span] = None
    lastname: Optional[Span] = None

    def __post_init__(self) -> None:
        """Reject a middle name without a last name."""
        if self.middlename is not None and self.lastname is None:
            raise ValueError("middlename requires a lastname")

    @property
    def parts(self) -> tuple[Span, ...]:
        """Present name components in order."""
        return tuple(part for part in (self.firstname, self.middlename, self.lastname) if part is not None)

    @property
    def full_name(self) -> str:
        """Name components joined by single spaces."""
        return " ".join(part.text for part in self.parts)

    def accept(self, visitor: NodeVisitor) -> Any:
        """Accept a visitor for processing this name."""
        return visitor.visit_name(self)


@dataclass(frozen=True)
class AuthorInfo(Node):
    """Author line of the document header.

    Parameters
    ----------
    author : Name
        Author name
    email : Span or None, default = None
        Email address without the enclosing ``<`` ``>``

    """

    author: Name
    email: Optional[Span] = None

    @property
    def full_name(self) -> str:
        """Author name as a single string."""
        return self.author.full_name

    def accept(self, visitor: NodeVisitor) -> Any:
        """Accept a visitor for processing this author line."""
        return visitor.visit_author_info(self)


@dataclass(frozen=True)
class DocAttr(Node):
    """Document attribute entry (``:name: value``).

    Parameters
    ----------
    name : Span
        Attribute name, never containing ``:``
    value : Span or None, default = None
        Text after the attribute, None when nothing follows it
    unset : bool, default = False
        True when the attribute was marked with ``!``

    """

    name: Span
    value: Optional[Span] = None
    unset: bool = False

    def accept(self, visitor: NodeVisitor) -> Any:
        """Accept a visitor for processing this attribute."""
        return visitor.visit_doc_attr(self)


@dataclass(frozen=True)
class DocHeader(Node):
    """Document header: title, optional author line and attribute entries.

    Parameters
    ----------
    title : Title
        Document title
    auth_info : AuthorInfo or None, default = None
        Author line, if present
    attrs : tuple of DocAttr, default = ()
        Attribute entries in source order, duplicates included

    """

    title: Title
    auth_info: Optional[AuthorInfo] = None
    attrs: tuple[DocAttr, ...] = ()

    def resolved_attributes(self) -> dict[str, Optional[str]]:
        """Fold the attribute entries into their effective values.

        Later entries override earlier ones and an unset entry removes the
        name entirely.

        Returns
        -------
        dict
            Mapping of attribute name to value (None for a set attribute
            without a value)

        """
        resolved: dict[str, Optional[str]] = {}
        for attr in self.attrs:
            if attr.unset:
                resolved.pop(attr.name.text, None)
            else:
                resolved[attr.name.text] = attr.value.text if attr.value is not None else None
        return resolved

    def accept(self, visitor: NodeVisitor) -> Any:
        """Accept a visitor for processing this header."""
        return visitor.visit_doc_header(self)


# ============================================================================
# Inline Nodes
# ============================================================================


class FormattedText(Node):
    """Base class for formatted inline spans."""

    text: Span


@dataclass(frozen=True)
class Strong(FormattedText):
    """Bold inline span with its ``*`` delimiters stripped.

    Parameters
    ----------
    text : Span
        Emphasized text

    """

    text: Span

    def accept(self, visitor: NodeVisitor) -> Any:
        """Accept a visitor for processing this span."""
        return visitor.visit_strong(self)


@dataclass(frozen=True)
class Text(Node):
    """Plain inline text between formatted spans."""

    text: Span

    def accept(self, visitor: NodeVisitor) -> Any:
        """Accept a visitor for processing this text."""
        return visitor.visit_text(self)


InlineNode = Union[Text, FormattedText]


# ============================================================================
# Body and Root Nodes
# ============================================================================


@dataclass(frozen=True)
class Block(Node):
    """Run of consecutive non-blank body lines.

    Parameters
    ----------
    lines : tuple of Span
        Logical lines of the block, terminators excluded. Elided comment
        lines are not part of the tuple.

    """

    lines: tuple[Span, ...]

    def __post_init__(self) -> None:
        """Reject empty blocks."""
        if not self.lines:
            raise ValueError("A block needs at least one line")

    @property
    def span(self) -> Span:
        """Contiguous source slice from the first line to the last."""
        first, last = self.lines[0], self.lines[-1]
        return Span(first.source, first.start, last.end)

    @property
    def text(self) -> str:
        """Block lines joined with ``\\n``."""
        return "\n".join(line.text for line in self.lines)

    def inline(self) -> list[InlineNode]:
        """Resolve inline formatting of the block, line by line.

        Lines are separated by a Text node holding the ``\\n`` of the line
        terminator, so the node texts joined together equal ``text``.

        Returns
        -------
        list
            Text and FormattedText nodes in source order

        """
        from adocparse.parsers.inline import parse_inline

        nodes: list[InlineNode] = []
        for index, line in enumerate(self.lines):
            if index:
                previous = self.lines[index - 1]
                newline = previous.source.find("\n", previous.end)
                nodes.append(Text(Span(previous.source, newline, newline + 1)))
            nodes.extend(parse_inline(line))
        return nodes

    def accept(self, visitor: NodeVisitor) -> Any:
        """Accept a visitor for processing this block."""
        return visitor.visit_block(self)


@dataclass(frozen=True)
class Document(Node):
    """Root document node.

    Parameters
    ----------
    header : DocHeader
        Parsed document header
    body : tuple of Block, default = ()
        Body blocks in source order
    metadata : dict, default = empty dict
        Document-level metadata derived from the header

    """

    header: DocHeader
    body: tuple[Block, ...] = ()
    metadata: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def title(self) -> Title:
        """Shortcut for ``header.title``."""
        return self.header.title

    def accept(self, visitor: NodeVisitor) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)
