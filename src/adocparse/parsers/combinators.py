#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adocparse/parsers/combinators.py
"""Parsing primitives and combinators.

Every grammar rule in adocparse is a *parser*: a callable that takes an
immutable ``Cursor`` and returns a ``(cursor, value)`` pair, where the
returned cursor sits after the consumed input. A parser that does not match
raises a ``ParseFailure`` subclass instead. Because cursors are values, a
failed attempt can never move the caller's position, so alternation and
optional application need no manual rollback.

Only recoverable failures (``NoMatch``, ``EmptyRequiredSpan``) are swallowed
by ``alt``, ``opt`` and the repetition combinators. ``IncompleteDelimiter``
means an opening delimiter already committed the parse to a branch, and it
propagates through them.

Examples
--------
    >>> from adocparse.parsers.combinators import Cursor, delimited, is_not, tag
    >>> quoted = delimited(tag("<"), is_not(">"), tag(">"))
    >>> cursor, email = quoted(Cursor("<me@example.com> rest"))
    >>> email.text, cursor.rest
    ('me@example.com', ' rest')

"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple, TypeVar, Union

from adocparse.ast.nodes import Span
from adocparse.constants import LINE_SPACE_CHARS, WHITESPACE_CHARS
from adocparse.exceptions import EmptyRequiredSpan, IncompleteDelimiter, NoMatch, ParseFailure

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Cursor:
    """Immutable position inside a source string.

    Parameters
    ----------
    source : str
        The complete input buffer
    pos : int, default 0
        Offset of the next unconsumed character

    """

    source: str = field(repr=False)
    pos: int = 0

    @property
    def rest(self) -> str:
        """Unconsumed input (materialized; use for diagnostics and tests)."""
        return self.source[self.pos :]

    @property
    def at_end(self) -> bool:
        """Whether all input has been consumed."""
        return self.pos >= len(self.source)

    def peek(self, count: int = 1) -> str:
        """Return up to ``count`` characters after the cursor without consuming them."""
        return self.source[self.pos : self.pos + count]

    def startswith(self, literal: str) -> bool:
        """Whether the unconsumed input starts with ``literal``."""
        return self.source.startswith(literal, self.pos)

    def advance(self, count: int) -> Cursor:
        """Return a cursor ``count`` characters further on."""
        return Cursor(self.source, min(self.pos + count, len(self.source)))

    def move_to(self, pos: int) -> Cursor:
        """Return a cursor at the absolute offset ``pos``."""
        return Cursor(self.source, pos)

    def span_to(self, other: Cursor) -> Span:
        """Span of the input between this cursor and a later one."""
        return Span(self.source, self.pos, other.pos)

    def __repr__(self) -> str:
        return f"Cursor(pos={self.pos}, rest={self.source[self.pos : self.pos + 20]!r})"


ParseResult = Tuple[Cursor, T]
Parser = Callable[[Cursor], ParseResult[T]]

# ============================================================================
# Primitives
# ============================================================================


def tag(literal: str) -> Parser[Span]:
    """Match an exact literal."""

    def parse_tag(cursor: Cursor) -> ParseResult[Span]:
        if literal and cursor.startswith(literal):
            end = cursor.advance(len(literal))
            return end, cursor.span_to(end)
        raise NoMatch(f"expected {literal!r}", cursor)

    return parse_tag


def one_of(chars: str) -> Parser[str]:
    """Match a single character contained in ``chars``."""

    def parse_one_of(cursor: Cursor) -> ParseResult[str]:
        char = cursor.peek()
        if char and char in chars:
            return cursor.advance(1), char
        raise NoMatch(f"expected one of {chars!r}", cursor)

    return parse_one_of


def none_of(chars: str) -> Parser[str]:
    """Match a single character not contained in ``chars``."""

    def parse_none_of(cursor: Cursor) -> ParseResult[str]:
        char = cursor.peek()
        if char and char not in chars:
            return cursor.advance(1), char
        raise NoMatch(f"expected a character other than {chars!r}", cursor)

    return parse_none_of


def take_while(predicate: Callable[[str], bool], min_count: int = 0, max_count: Optional[int] = None) -> Parser[Span]:
    """Consume characters while ``predicate`` holds.

    Parameters
    ----------
    predicate : callable
        Character classifier
    min_count : int, default 0
        Minimum number of characters required
    max_count : int or None, default None
        Maximum number of characters consumed (unbounded when None)

    Raises
    ------
    EmptyRequiredSpan
        If at least one character is required and none matched
    NoMatch
        If fewer than ``min_count`` (but more than zero) characters matched

    """

    def parse_take_while(cursor: Cursor) -> ParseResult[Span]:
        source = cursor.source
        limit = len(source) if max_count is None else min(len(source), cursor.pos + max_count)
        pos = cursor.pos
        while pos < limit and predicate(source[pos]):
            pos += 1
        count = pos - cursor.pos
        if count < min_count:
            if count == 0:
                raise EmptyRequiredSpan("expected at least one matching character", cursor)
            raise NoMatch(f"expected at least {min_count} matching characters, got {count}", cursor)
        end = cursor.move_to(pos)
        return end, cursor.span_to(end)

    return parse_take_while


def take_while1(predicate: Callable[[str], bool]) -> Parser[Span]:
    """Consume one or more characters while ``predicate`` holds."""
    return take_while(predicate, min_count=1)


def is_not(chars: str, min_count: int = 1) -> Parser[Span]:
    """Consume characters not contained in ``chars`` (at least ``min_count``)."""
    return take_while(lambda c: c not in chars, min_count=min_count)


def take_until(literal: str) -> Parser[Span]:
    """Consume everything up to, not including, the next ``literal``."""

    def parse_take_until(cursor: Cursor) -> ParseResult[Span]:
        index = cursor.source.find(literal, cursor.pos)
        if index < 0:
            raise NoMatch(f"{literal!r} not found", cursor)
        end = cursor.move_to(index)
        return end, cursor.span_to(end)

    return parse_take_until


def pattern(regex: Union[str, re.Pattern[str]]) -> Parser[Span]:
    """Match a regular expression anchored at the cursor.

    The value is the span of the whole match.
    """
    compiled = re.compile(regex) if isinstance(regex, str) else regex

    def parse_pattern(cursor: Cursor) -> ParseResult[Span]:
        match = compiled.match(cursor.source, cursor.pos)
        if match is None:
            raise NoMatch(f"expected /{compiled.pattern}/", cursor)
        end = cursor.move_to(match.end())
        return end, cursor.span_to(end)

    return parse_pattern


def eof(cursor: Cursor) -> ParseResult[Span]:
    """Succeed without consuming anything, only at the end of input."""
    if cursor.at_end:
        return cursor, cursor.span_to(cursor)
    raise NoMatch("expected end of input", cursor)


space0 = take_while(lambda c: c in LINE_SPACE_CHARS)
space1 = take_while(lambda c: c in LINE_SPACE_CHARS, min_count=1)
multispace0 = take_while(lambda c: c in WHITESPACE_CHARS)
multispace1 = take_while(lambda c: c in WHITESPACE_CHARS, min_count=1)

# A lone "\r" is ordinary line content; only "\r\n" and "\n" end a line.
_LINE_ENDING_RE = re.compile(r"\r?\n")
_REST_OF_LINE_RE = re.compile(r"(?:[^\r\n]|\r(?!\n))*")


def line_ending(cursor: Cursor) -> ParseResult[Span]:
    """Match one logical line terminator, ``\\n`` or ``\\r\\n``."""
    match = _LINE_ENDING_RE.match(cursor.source, cursor.pos)
    if match is None:
        raise NoMatch("expected a line terminator", cursor)
    end = cursor.move_to(match.end())
    return end, cursor.span_to(end)


def line_end(cursor: Cursor) -> ParseResult[Span]:
    """Match a line terminator, or the end of input."""
    if cursor.at_end:
        return cursor, cursor.span_to(cursor)
    return line_ending(cursor)


def rest_of_line(cursor: Cursor) -> ParseResult[Span]:
    """Consume the (possibly empty) remainder of the current line, terminator excluded."""
    match = _REST_OF_LINE_RE.match(cursor.source, cursor.pos)
    assert match is not None  # the pattern accepts the empty string
    end = cursor.move_to(match.end())
    return end, cursor.span_to(end)


# ============================================================================
# Combinators
# ============================================================================


def alt(*parsers: Parser[Any]) -> Parser[Any]:
    """Try each parser in turn and return the first success."""

    def parse_alt(cursor: Cursor) -> ParseResult[Any]:
        failures: list[ParseFailure] = []
        for parser in parsers:
            try:
                return parser(cursor)
            except ParseFailure as failure:
                if not failure.recoverable:
                    raise
                failures.append(failure)
        expected = ", ".join(failure.message for failure in failures)
        raise NoMatch(f"no alternative matched ({expected})", cursor)

    return parse_alt


def opt(parser: Parser[T]) -> Parser[Optional[T]]:
    """Apply ``parser`` zero or one time."""

    def parse_opt(cursor: Cursor) -> ParseResult[Optional[T]]:
        try:
            return parser(cursor)
        except ParseFailure as failure:
            if not failure.recoverable:
                raise
            return cursor, None

    return parse_opt


def many0(parser: Parser[T]) -> Parser[list[T]]:
    """Apply ``parser`` repeatedly, collecting values until it stops matching.

    Repetition also stops when the parser succeeds without consuming input.
    """

    def parse_many0(cursor: Cursor) -> ParseResult[list[T]]:
        values: list[T] = []
        while True:
            try:
                next_cursor, result = parser(cursor)
            except ParseFailure as failure:
                if not failure.recoverable:
                    raise
                return cursor, values
            if next_cursor.pos == cursor.pos:
                return cursor, values
            values.append(result)
            cursor = next_cursor

    return parse_many0


def many1(parser: Parser[T]) -> Parser[list[T]]:
    """Apply ``parser`` one or more times."""
    repeated = many0(parser)

    def parse_many1(cursor: Cursor) -> ParseResult[list[T]]:
        next_cursor, first = parser(cursor)
        next_cursor, others = repeated(next_cursor)
        return next_cursor, [first, *others]

    return parse_many1


def many1_count(parser: Parser[Any]) -> Parser[int]:
    """Apply ``parser`` one or more times and return the repetition count."""
    return map_result(many1(parser), len)


def many_m_n(min_count: int, max_count: int, parser: Parser[T]) -> Parser[list[T]]:
    """Apply ``parser`` between ``min_count`` and ``max_count`` times."""

    def parse_many_m_n(cursor: Cursor) -> ParseResult[list[T]]:
        start = cursor
        values: list[T] = []
        while len(values) < max_count:
            try:
                next_cursor, result = parser(cursor)
            except ParseFailure as failure:
                if not failure.recoverable:
                    raise
                break
            if next_cursor.pos == cursor.pos:
                break
            values.append(result)
            cursor = next_cursor
        if len(values) < min_count:
            raise NoMatch(f"expected at least {min_count} repetitions, got {len(values)}", start)
        return cursor, values

    return parse_many_m_n


def seq(*parsers: Parser[Any]) -> Parser[tuple[Any, ...]]:
    """Apply parsers one after another and return all their values."""

    def parse_seq(cursor: Cursor) -> ParseResult[tuple[Any, ...]]:
        values = []
        for parser in parsers:
            cursor, result = parser(cursor)
            values.append(result)
        return cursor, tuple(values)

    return parse_seq


def pair(first: Parser[T], second: Parser[U]) -> Parser[tuple[T, U]]:
    """Apply two parsers one after another and return both values."""

    def parse_pair(cursor: Cursor) -> ParseResult[tuple[T, U]]:
        cursor, left = first(cursor)
        cursor, right = second(cursor)
        return cursor, (left, right)

    return parse_pair


def preceded(prefix: Parser[Any], parser: Parser[T]) -> Parser[T]:
    """Match ``prefix`` then ``parser``, keeping only the latter's value."""
    return map_result(pair(prefix, parser), lambda values: values[1])


def terminated(parser: Parser[T], suffix: Parser[Any]) -> Parser[T]:
    """Match ``parser`` then ``suffix``, keeping only the former's value."""
    return map_result(pair(parser, suffix), lambda values: values[0])


def delimited(prefix: Parser[Any], parser: Parser[T], suffix: Parser[Any]) -> Parser[T]:
    """Match ``prefix``, ``parser`` and ``suffix``, keeping the middle value."""
    return map_result(seq(prefix, parser, suffix), lambda values: values[1])


def map_result(parser: Parser[T], func: Callable[[T], U]) -> Parser[U]:
    """Transform the value of a successful parse."""

    def parse_map(cursor: Cursor) -> ParseResult[U]:
        cursor, result = parser(cursor)
        return cursor, func(result)

    return parse_map


def value(constant: T, parser: Parser[Any]) -> Parser[T]:
    """Replace the value of a successful parse with ``constant``."""
    return map_result(parser, lambda _: constant)


def peek(parser: Parser[T]) -> Parser[T]:
    """Apply ``parser`` without consuming input."""

    def parse_peek(cursor: Cursor) -> ParseResult[T]:
        _, result = parser(cursor)
        return cursor, result

    return parse_peek


def not_(parser: Parser[Any]) -> Parser[None]:
    """Succeed without consuming input only where ``parser`` does not match."""

    def parse_not(cursor: Cursor) -> ParseResult[None]:
        try:
            parser(cursor)
        except ParseFailure as failure:
            if not failure.recoverable:
                raise
            return cursor, None
        raise NoMatch("unexpected match", cursor)

    return parse_not


def recognize(parser: Parser[Any]) -> Parser[Span]:
    """Return the span consumed by ``parser`` instead of its value."""

    def parse_recognize(cursor: Cursor) -> ParseResult[Span]:
        end, _ = parser(cursor)
        return end, cursor.span_to(end)

    return parse_recognize


def cut(parser: Parser[T], message: Optional[str] = None) -> Parser[T]:
    """Commit to the current branch: a failure of ``parser`` becomes an ``IncompleteDelimiter``.

    Use it for the closing half of a delimiter pair once the opening half
    has matched.
    """

    def parse_cut(cursor: Cursor) -> ParseResult[T]:
        try:
            return parser(cursor)
        except ParseFailure as failure:
            if not failure.recoverable:
                raise
            raise IncompleteDelimiter(message or failure.message, failure.cursor) from failure

    return parse_cut


def parse_with(parser: Parser[T], text: Union[str, Cursor]) -> ParseResult[T]:
    """Run ``parser`` on a string or cursor.

    Examples
    --------
        >>> rest, span = parse_with(tag("//"), "// note")
        >>> rest.rest
        ' note'

    """
    cursor = text if isinstance(text, Cursor) else Cursor(text)
    return parser(cursor)


__all__ = [
    "Cursor",
    "ParseResult",
    "Parser",
    "alt",
    "cut",
    "delimited",
    "eof",
    "is_not",
    "line_end",
    "line_ending",
    "many0",
    "many1",
    "many1_count",
    "many_m_n",
    "map_result",
    "multispace0",
    "multispace1",
    "none_of",
    "not_",
    "one_of",
    "opt",
    "pair",
    "parse_with",
    "pattern",
    "peek",
    "preceded",
    "recognize",
    "rest_of_line",
    "seq",
    "space0",
    "space1",
    "tag",
    "take_until",
    "take_while",
    "take_while1",
    "terminated",
    "value",
]
