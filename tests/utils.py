"""Test utilities for the adocparse test suite.

This module provides helpers for building test documents and for checking
the structural guarantees of parse results.
"""

import shutil
import tempfile
from pathlib import Path
from typing import Iterable, Optional, Sequence

from adocparse.ast import InlineNode, Span


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp())


def cleanup_test_dir(temp_dir: Path) -> None:
    """Clean up test directory and files."""
    if temp_dir.exists():
        shutil.rmtree(temp_dir)


def build_document(
    title: str,
    author: Optional[str] = None,
    attributes: Sequence[str] = (),
    body: Iterable[str] = (),
    level: int = 1,
) -> str:
    """Assemble document text from its parts.

    Parameters
    ----------
    title : str
        Title text (without markers)
    author : str, optional
        Author line, written verbatim
    attributes : sequence of str
        Attribute lines, written verbatim
    body : iterable of str
        Paragraphs, separated by blank lines
    level : int, default 1
        Number of ``=`` markers

    """
    lines = [f"{'=' * level} {title}"]
    if author is not None:
        lines.append(author)
    lines.extend(attributes)
    paragraphs = list(body)
    if paragraphs:
        lines.append("")
        lines.append("\n\n".join(paragraphs))
    return "\n".join(lines) + "\n"


def assert_spans_in_source(source: str, spans: Iterable[Optional[Span]]) -> None:
    """Assert that every span is a view into ``source`` (no copies)."""
    for span in spans:
        if span is None:
            continue
        assert span.source is source
        assert 0 <= span.start <= span.end <= len(source)


def assert_inline_covers(nodes: Sequence[InlineNode], span: Span) -> None:
    """Assert that inline nodes tile ``span`` in order, delimiters aside."""
    pos = span.start
    for node in nodes:
        inner = node.text
        # a strong span is preceded by its opening delimiter
        assert inner.start in (pos, pos + 1)
        pos = inner.end if inner.start == pos else inner.end + 1
    assert pos == span.end
