#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adocparse/ast/visitors.py
"""Visitor pattern implementation for document model traversal.

Visitors separate algorithms (serialization, display, validation) from the
node structure itself. Each node's ``accept`` dispatches to the matching
``visit_*`` method.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from adocparse.ast.nodes import (
    AuthorInfo,
    Block,
    DocAttr,
    DocHeader,
    Document,
    Name,
    Strong,
    Text,
    Title,
)


class NodeVisitor(ABC):
    """Abstract base class for document model visitors.

    Subclasses implement a ``visit_*`` method for every node type. Visiting
    children is the subclass's responsibility.

    Examples
    --------
    Collect all attribute names:

        >>> class AttributeNames(NodeVisitor):
        ...     def __init__(self):
        ...         self.names = []
        ...
        ...     def visit_doc_attr(self, node):
        ...         self.names.append(node.name.text)
        ...
        ...     # remaining visit_* methods omitted

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The document node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_doc_header(self, node: DocHeader) -> Any:
        """Visit a DocHeader node."""
        pass

    @abstractmethod
    def visit_title(self, node: Title) -> Any:
        """Visit a Title node."""
        pass

    @abstractmethod
    def visit_author_info(self, node: AuthorInfo) -> Any:
        """Visit an AuthorInfo node."""
        pass

    @abstractmethod
    def visit_name(self, node: Name) -> Any:
        """Visit a Name node."""
        pass

    @abstractmethod
    def visit_doc_attr(self, node: DocAttr) -> Any:
        """Visit a DocAttr node."""
        pass

    @abstractmethod
    def visit_block(self, node: Block) -> Any:
        """Visit a Block node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass
