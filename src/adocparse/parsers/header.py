#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adocparse/parsers/header.py
"""Document header rules: title, author line and attribute entries.

Each rule takes a cursor positioned at the start of a line. None of them
trims or otherwise rewrites what it captures beyond the rules documented on
the function; all captured text is returned as spans over the input.

"""

from __future__ import annotations

from adocparse.ast.nodes import AuthorInfo, DocAttr, Name, Span, Title
from adocparse.constants import (
    ATTRIBUTE_DELIMITER,
    ATTRIBUTE_UNSET_MARKER,
    AUTHOR_TOKEN_EXCLUDED_CHARS,
    EMAIL_CLOSE,
    EMAIL_OPEN,
    MAX_AUTHOR_NAME_TOKENS,
    TITLE_MARKER,
)
from adocparse.exceptions import EmptyRequiredSpan, IncompleteDelimiter, NoMatch
from adocparse.parsers.combinators import (
    Cursor,
    ParseResult,
    is_not,
    line_end,
    many1_count,
    many_m_n,
    opt,
    preceded,
    rest_of_line,
    seq,
    space0,
    space1,
    tag,
    take_while1,
)

_title = seq(many1_count(tag(TITLE_MARKER)), rest_of_line, line_end)

_name_token = take_while1(lambda c: c not in AUTHOR_TOKEN_EXCLUDED_CHARS)

_name_tokens = seq(
    _name_token,
    many_m_n(0, MAX_AUTHOR_NAME_TOKENS - 1, preceded(space1, _name_token)),
)

_email_body = is_not(EMAIL_CLOSE + "\r\n", min_count=0)

_attribute_name = is_not(ATTRIBUTE_DELIMITER + "\r\n", min_count=0)

_attribute_value = opt(preceded(space1, rest_of_line))


def parse_title(cursor: Cursor) -> ParseResult[Title]:
    """Parse a title line such as ``== Section``.

    The number of leading ``=`` characters is the level; everything after
    them up to the line terminator is the content, leading space included.
    The line terminator (or the end of input) is consumed.

    Parameters
    ----------
    cursor : Cursor
        Position at the start of the title line

    Returns
    -------
    tuple[Cursor, Title]
        Cursor after the title line and the parsed title

    Raises
    ------
    NoMatch
        If the line does not start with ``=``

    Examples
    --------
        >>> cursor, title = parse_title(Cursor("===== Hello\\nWorld"))
        >>> title.level, title.content.text, cursor.rest
        (5, ' Hello', 'World')

    """
    cursor, (level, content, _) = _title(cursor)
    return cursor, Title(level=level, content=content)


def _name_from_tokens(tokens: list[Span]) -> Name:
    # Two tokens are first and last name; a middle name needs a third token.
    if len(tokens) == 1:
        return Name(firstname=tokens[0])
    if len(tokens) == 2:
        return Name(firstname=tokens[0], lastname=tokens[1])
    return Name(firstname=tokens[0], middlename=tokens[1], lastname=tokens[2])


def _parse_email(cursor: Cursor) -> ParseResult[Span]:
    start = cursor
    cursor, _ = tag(EMAIL_OPEN)(cursor)
    cursor, address = _email_body(cursor)
    if not cursor.startswith(EMAIL_CLOSE):
        raise IncompleteDelimiter(f"email address is never closed with {EMAIL_CLOSE!r}", cursor)
    address = address.strip()
    if not address:
        raise EmptyRequiredSpan("email address is empty", start)
    return cursor.advance(len(EMAIL_CLOSE)), address


def parse_author_line(cursor: Cursor) -> ParseResult[AuthorInfo]:
    """Parse an author line such as ``Wang Yue Heng <heng@example.com>``.

    One to three name tokens separated by blanks, optionally followed by an
    email address in angle brackets, then the end of the line. Blanks around
    the tokens and the email are discarded. The line terminator (or the end
    of input) is consumed.

    Parameters
    ----------
    cursor : Cursor
        Position at the start of the author line

    Returns
    -------
    tuple[Cursor, AuthorInfo]
        Cursor after the author line and the parsed author information

    Raises
    ------
    EmptyRequiredSpan
        If there is no name token, or the email brackets are empty
    IncompleteDelimiter
        If ``<`` is not closed by ``>`` on the same line
    NoMatch
        If anything else follows the name and email on the line

    """
    cursor, _ = space0(cursor)
    cursor, (first, others) = _name_tokens(cursor)
    cursor, _ = space0(cursor)

    email = None
    if cursor.startswith(EMAIL_OPEN):
        cursor, email = _parse_email(cursor)
        cursor, _ = space0(cursor)

    try:
        cursor, _ = line_end(cursor)
    except NoMatch as failure:
        raise NoMatch("unexpected text on author line", cursor) from failure

    return cursor, AuthorInfo(author=_name_from_tokens([first, *others]), email=email)


def parse_doc_attr(cursor: Cursor) -> ParseResult[DocAttr]:
    """Parse an attribute entry such as ``:toc: left`` or ``:!toc:``.

    The ``!`` marker may precede the name (``:!name:``) or follow it
    (``:name!:``); either way the entry is unset and the marker is not part
    of the name. The value is the rest of the line after the separating
    blanks, or None when nothing follows. The line terminator is not
    consumed.

    Parameters
    ----------
    cursor : Cursor
        Position at the start of the attribute line

    Returns
    -------
    tuple[Cursor, DocAttr]
        Cursor after the entry and the parsed attribute

    Raises
    ------
    NoMatch
        If the line does not start with ``:``
    IncompleteDelimiter
        If the name is not closed by ``:`` on the same line
    EmptyRequiredSpan
        If the name is empty

    Examples
    --------
        >>> cursor, attr = parse_doc_attr(Cursor(":hello: world\\n"))
        >>> attr.name.text, attr.value.text, attr.unset
        ('hello', 'world', False)

    """
    start = cursor
    cursor, _ = tag(ATTRIBUTE_DELIMITER)(cursor)
    cursor, marker = opt(tag(ATTRIBUTE_UNSET_MARKER))(cursor)
    cursor, name = _attribute_name(cursor)
    if not cursor.startswith(ATTRIBUTE_DELIMITER):
        raise IncompleteDelimiter(f"attribute name is never closed with {ATTRIBUTE_DELIMITER!r}", cursor)

    unset = marker is not None
    if not unset and name.text.endswith(ATTRIBUTE_UNSET_MARKER):
        unset = True
        name = Span(name.source, name.start, name.end - len(ATTRIBUTE_UNSET_MARKER))
    if not name:
        raise EmptyRequiredSpan("attribute name is empty", start)

    cursor = cursor.advance(len(ATTRIBUTE_DELIMITER))
    cursor, attr_value = _attribute_value(cursor)
    if attr_value is not None and not attr_value:
        attr_value = None
    return cursor, DocAttr(name=name, value=attr_value, unset=unset)
