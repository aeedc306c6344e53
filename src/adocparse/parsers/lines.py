#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adocparse/parsers/lines.py
"""Line and block splitting.

A *logical line* is the text between two line terminators, where ``\\n`` and
``\\r\\n`` both count as a single terminator and the terminator itself is
excluded. A *block* is a maximal run of non-blank logical lines.

``parse_line`` and ``parse_block`` are grammar rules that require a
terminator after each line. ``Lines`` and ``Blocks`` are lazy iterables that
also accept a final line without terminator; iterating them again starts
over from the beginning.

"""

from __future__ import annotations

import logging
from typing import Iterator, Union

from adocparse.ast.nodes import Block, Span
from adocparse.exceptions import IncompleteDelimiter, NoMatch, ParseFailure
from adocparse.parsers.combinators import Cursor, ParseResult, line_ending, many0, rest_of_line, terminated
from adocparse.parsers.comments import parse_comment

logger = logging.getLogger(__name__)

Source = Union[str, Cursor]


def _as_cursor(source: Source) -> Cursor:
    return source if isinstance(source, Cursor) else Cursor(source)


def is_blank(line: Span) -> bool:
    """Whether a line is empty or holds only whitespace."""
    return not line.text.strip()


def parse_line(cursor: Cursor) -> ParseResult[Span]:
    """Consume one non-empty line and its required terminator.

    Raises
    ------
    NoMatch
        On an empty line, or when the line is not followed by a terminator

    """
    end, line = rest_of_line(cursor)
    if not line:
        raise NoMatch("expected a non-empty line", cursor)
    end, _ = line_ending(end)
    return end, line


_block = terminated(many0(parse_line), line_ending)


def parse_block(cursor: Cursor) -> ParseResult[list[Span]]:
    """Consume consecutive non-empty lines followed by an empty line.

    Returns the lines, which is an empty list when the cursor already sits
    on an empty line.
    """
    return _block(cursor)


class Lines:
    """Lazy, restartable sequence of logical lines.

    Parameters
    ----------
    source : str or Cursor
        Text to split; a cursor starts splitting at its position

    Examples
    --------
        >>> [line.text for line in Lines("one\\r\\ntwo\\n\\nthree")]
        ['one', 'two', '', 'three']

    """

    def __init__(self, source: Source):
        """Remember where splitting starts."""
        self._start = _as_cursor(source)

    def __iter__(self) -> Iterator[Span]:
        cursor = self._start
        while not cursor.at_end:
            after, line = rest_of_line(cursor)
            yield line
            if after.at_end:
                return
            cursor, _ = line_ending(after)


class Blocks:
    """Lazy, restartable sequence of blocks.

    Parameters
    ----------
    source : str or Cursor
        Text to split; a cursor starts splitting at its position
    strip_comments : bool, default True
        Elide comment lines and comment blocks. An elided comment does not
        end the block it appears in.
    strict : bool, default True
        What to do with a comment block that is never closed: raise
        ``IncompleteDelimiter`` when True, otherwise log a warning and
        treat the rest of the input as part of the comment.

    Examples
    --------
        >>> [block.text for block in Blocks("a\\nb\\n\\n// note\\nc\\n")]
        ['a\\nb', 'c']

    """

    def __init__(self, source: Source, strip_comments: bool = True, strict: bool = True):
        """Remember where splitting starts and how comments are treated."""
        self._start = _as_cursor(source)
        self.strip_comments = strip_comments
        self.strict = strict

    def _skip_comment(self, cursor: Cursor) -> Cursor | None:
        """Return the cursor after a comment at ``cursor``, or None if there is none."""
        try:
            end, _ = parse_comment(cursor)
        except IncompleteDelimiter:
            if self.strict:
                raise
            logger.warning("Unclosed comment block at offset %d; ignoring the rest of the input", cursor.pos)
            return cursor.move_to(len(cursor.source))
        except ParseFailure:
            return None
        return end

    def __iter__(self) -> Iterator[Block]:
        cursor = self._start
        lines: list[Span] = []
        while not cursor.at_end:
            if self.strip_comments:
                after_comment = self._skip_comment(cursor)
                if after_comment is not None:
                    cursor = after_comment
                    continue

            after, line = rest_of_line(cursor)
            if is_blank(line):
                if lines:
                    yield Block(tuple(lines))
                    lines = []
            else:
                lines.append(line)

            if after.at_end:
                break
            cursor, _ = line_ending(after)

        if lines:
            yield Block(tuple(lines))
