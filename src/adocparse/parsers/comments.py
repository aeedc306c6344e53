#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adocparse/parsers/comments.py
"""Comment recognition.

Two comment forms are recognized at the start of a line:

- a line comment, ``//`` followed by anything up to the end of the line;
- a comment block, opened by a line consisting of ``////`` and closed by the
  next such line.

Both rules consume the comment including its line terminator and produce
``None``, so the remaining input continues exactly where the comment ended.
Callers try comment recognition at each line boundary before trying content.

"""

from __future__ import annotations

from adocparse.constants import COMMENT_BLOCK_DELIMITER, COMMENT_LINE_MARKER
from adocparse.parsers.combinators import (
    Cursor,
    ParseResult,
    alt,
    cut,
    line_end,
    line_ending,
    many0,
    not_,
    preceded,
    rest_of_line,
    seq,
    space0,
    tag,
    terminated,
    value,
)

# A line holding only the block delimiter, trailing blanks allowed.
_block_delimiter_line = seq(tag(COMMENT_BLOCK_DELIMITER), space0, line_end)

_block_body_line = preceded(not_(_block_delimiter_line), terminated(rest_of_line, line_ending))

_comment_block = value(
    None,
    seq(
        _block_delimiter_line,
        many0(_block_body_line),
        cut(_block_delimiter_line, "comment block is never closed"),
    ),
)

_comment_line = value(None, seq(tag(COMMENT_LINE_MARKER), rest_of_line, line_end))

_comment = alt(_comment_block, _comment_line)

_comments = value(None, many0(_comment))


def parse_comment_line(cursor: Cursor) -> ParseResult[None]:
    """Consume a ``//`` line comment and its line terminator.

    Raises
    ------
    NoMatch
        If the input does not start with ``//``

    """
    return _comment_line(cursor)


def parse_comment_block(cursor: Cursor) -> ParseResult[None]:
    """Consume a ``////`` comment block through its closing delimiter line.

    Raises
    ------
    NoMatch
        If the input does not start with a ``////`` line
    IncompleteDelimiter
        If no closing ``////`` line follows

    """
    return _comment_block(cursor)


def parse_comment(cursor: Cursor) -> ParseResult[None]:
    """Consume one comment of either form, trying the block form first."""
    return _comment(cursor)


def skip_comments(cursor: Cursor) -> ParseResult[None]:
    """Consume any number of consecutive comments. Always succeeds."""
    return _comments(cursor)
