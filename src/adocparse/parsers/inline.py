#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adocparse/parsers/inline.py
"""Inline formatting.

Only constrained strong spans (``*text*``) are recognized. A span must start
at a whitespace boundary and be followed by whitespace, punctuation from
``STRONG_BOUNDARY_CHARS`` or the end of input, so that asterisks inside words
(``a*b*c``) are left alone.

"""

from __future__ import annotations

import logging
from typing import Union

from adocparse.ast.nodes import InlineNode, Span, Strong, Text
from adocparse.constants import STRONG_BOUNDARY_CHARS, STRONG_DELIMITER
from adocparse.exceptions import EmptyRequiredSpan, IncompleteDelimiter, ParseFailure
from adocparse.parsers.combinators import Cursor, ParseResult, alt, eof, is_not, multispace0, one_of, peek, tag

logger = logging.getLogger(__name__)

_strong_body = is_not(STRONG_DELIMITER + "\r\n", min_count=0)

_boundary = peek(alt(one_of(STRONG_BOUNDARY_CHARS), eof))


def parse_strong(cursor: Cursor) -> ParseResult[Strong]:
    """Parse a ``*strong*`` span.

    Leading whitespace is consumed. The character after the closing ``*`` must
    be a boundary character (or the input must end there); it is checked but
    not consumed.

    Parameters
    ----------
    cursor : Cursor
        Position at (or in the whitespace before) the opening ``*``

    Returns
    -------
    tuple[Cursor, Strong]
        Cursor right after the closing ``*`` and the span without delimiters

    Raises
    ------
    NoMatch
        If there is no opening ``*``, or the closing ``*`` is not followed by
        a boundary character
    IncompleteDelimiter
        If the closing ``*`` is missing on the line
    EmptyRequiredSpan
        If the delimiters enclose nothing

    Examples
    --------
        >>> cursor, strong = parse_strong(Cursor("*bold* end"))
        >>> strong.text.text, cursor.rest
        ('bold', ' end')

    """
    cursor, _ = multispace0(cursor)
    opened, _ = tag(STRONG_DELIMITER)(cursor)
    body_end, text = _strong_body(opened)
    if not body_end.startswith(STRONG_DELIMITER):
        raise IncompleteDelimiter(f"strong span is never closed with {STRONG_DELIMITER!r}", body_end)
    if not text:
        raise EmptyRequiredSpan("strong span is empty", opened)
    closed = body_end.advance(len(STRONG_DELIMITER))
    _boundary(closed)
    return closed, Strong(text=text)


def parse_inline(text: Union[Span, str]) -> list[InlineNode]:
    """Split text into plain ``Text`` runs and ``Strong`` spans.

    A strong span is tried at the start of the text and after every
    whitespace character. Attempts that fail, including an opening ``*``
    that is never closed, leave the asterisk as literal text.

    Parameters
    ----------
    text : Span or str
        Text to scan; a span is scanned in place without copying

    Returns
    -------
    list of InlineNode
        Text and Strong nodes covering the input in order

    Examples
    --------
        >>> [type(node).__name__ for node in parse_inline("a *b* c")]
        ['Text', 'Strong', 'Text']

    """
    span = text if isinstance(text, Span) else Span(text, 0, len(text))
    source = span.source
    nodes: list[InlineNode] = []
    plain_start = pos = span.start

    while pos < span.end:
        at_boundary = pos == span.start or source[pos - 1].isspace()
        if at_boundary and source[pos] == STRONG_DELIMITER:
            try:
                end, strong = parse_strong(Cursor(source, pos))
            except ParseFailure as failure:
                logger.debug("No strong span at offset %d: %s", pos, failure.message)
            else:
                if end.pos <= span.end:
                    if plain_start < pos:
                        nodes.append(Text(Span(source, plain_start, pos)))
                    nodes.append(strong)
                    plain_start = pos = end.pos
                    continue
        pos += 1

    if plain_start < span.end:
        nodes.append(Text(Span(source, plain_start, span.end)))
    return nodes
