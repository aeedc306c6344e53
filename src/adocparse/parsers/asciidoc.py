#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adocparse/parsers/asciidoc.py
"""AsciiDoc document assembler.

This module composes the header rules and the block splitter into a complete
document parse:

    title -> optional author line -> attribute entries -> body blocks

Comments are skipped at every header line boundary. Attribute entries are
collected for as long as lines match the attribute grammar; the first line
that does not match starts the body.

"""

from __future__ import annotations

import logging
from typing import Any, Optional

from adocparse.ast import Block, DocAttr, DocHeader, Document, Title
from adocparse.exceptions import IncompleteDelimiter, NoMatch, ParseFailure, ParsingError
from adocparse.options.asciidoc import AsciiDocOptions
from adocparse.parsers.base import BaseParser, InputData
from adocparse.parsers.combinators import (
    Cursor,
    ParseResult,
    Parser,
    line_end,
    many0,
    opt,
    preceded,
    terminated,
)
from adocparse.parsers.comments import skip_comments
from adocparse.parsers.header import parse_author_line, parse_doc_attr, parse_title
from adocparse.parsers.lines import Blocks
from adocparse.progress import ProgressCallback
from adocparse.utils.metadata import STANDARD_ATTRIBUTE_FIELDS, DocumentMetadata

logger = logging.getLogger(__name__)


def _ends_header(parser: Parser[Any], what: str) -> Parser[Any]:
    """Downgrade an IncompleteDelimiter raised by ``parser`` to NoMatch.

    A malformed optional header line ends the header; the line becomes the
    first body line.
    """

    def parse_ends_header(cursor: Cursor) -> ParseResult[Any]:
        try:
            return parser(cursor)
        except IncompleteDelimiter as failure:
            logger.warning("Malformed %s at offset %d treated as body: %s", what, failure.position, failure.message)
            raise NoMatch(f"malformed {what}", cursor) from failure

    return parse_ends_header


def _header_rules(options: AsciiDocOptions) -> tuple[Parser[Any], Parser[list[DocAttr]]]:
    author_line: Parser[Any] = preceded(skip_comments, _ends_header(parse_author_line, "author line"))
    attribute_line: Parser[Any] = preceded(
        skip_comments, _ends_header(terminated(parse_doc_attr, line_end), "attribute entry")
    )
    if not options.strict_mode:
        # An unclosed comment block ahead of the line also ends the header
        author_line = _ends_header(author_line, "author line")
        attribute_line = _ends_header(attribute_line, "attribute entry")
    return opt(author_line), many0(attribute_line)


def parse_doc_header(cursor: Cursor, options: Optional[AsciiDocOptions] = None) -> ParseResult[DocHeader]:
    """Parse the document header.

    Parameters
    ----------
    cursor : Cursor
        Position at the start of the document
    options : AsciiDocOptions or None, default None
        Assembler options; defaults are used when None

    Returns
    -------
    tuple[Cursor, DocHeader]
        Cursor at the first body line and the parsed header

    Raises
    ------
    NoMatch
        If the document does not start with a title (after comments)
    IncompleteDelimiter
        In strict mode, if a comment block in the header is never closed.
        A malformed author line or attribute entry never raises; it ends
        the header and starts the body

    Examples
    --------
        >>> cursor, header = parse_doc_header(Cursor("= Doc\\nJane Doe\\n:toc:\\nBody"))
        >>> header.title.content.text, header.auth_info.full_name, cursor.rest
        ('Doc', 'Jane Doe', 'Body')

    """
    options = options or AsciiDocOptions()
    author_rule, attributes_rule = _header_rules(options)

    cursor, _ = skip_comments(cursor)
    cursor, title = parse_title(cursor)
    if options.trim_title:
        title = Title(level=title.level, content=title.content.strip())
    logger.debug("Parsed title (level %d): %r", title.level, title.content.text)

    auth_info = None
    if options.parse_author_line:
        cursor, auth_info = author_rule(cursor)
        if auth_info is not None:
            logger.debug("Parsed author line: %s", auth_info.full_name)

    attrs: list[DocAttr] = []
    if options.parse_attributes:
        cursor, attrs = attributes_rule(cursor)
        logger.debug("Parsed %d attribute entries", len(attrs))

    return cursor, DocHeader(title=title, auth_info=auth_info, attrs=tuple(attrs))


def parse_body(cursor: Cursor, options: Optional[AsciiDocOptions] = None) -> ParseResult[tuple[Block, ...]]:
    """Split the input after the header into body blocks.

    Raises
    ------
    IncompleteDelimiter
        In strict mode, if a comment block in the body is never closed

    """
    options = options or AsciiDocOptions()
    body = tuple(Blocks(cursor, strip_comments=options.strip_comments, strict=options.strict_mode))
    logger.debug("Split body into %d blocks", len(body))
    return cursor.move_to(len(cursor.source)), body


def parse_document(cursor: Cursor, options: Optional[AsciiDocOptions] = None) -> ParseResult[Document]:
    """Parse a whole document: header followed by body blocks.

    Parameters
    ----------
    cursor : Cursor
        Position at the start of the document
    options : AsciiDocOptions or None, default None
        Assembler options; defaults are used when None

    Returns
    -------
    tuple[Cursor, Document]
        Cursor at the end of input and the parsed document (without metadata)

    Raises
    ------
    ParseFailure
        As for ``parse_doc_header``; in strict mode also for an unclosed
        comment block in the body

    """
    options = options or AsciiDocOptions()
    cursor, header = parse_doc_header(cursor, options)
    cursor, body = parse_body(cursor, options)
    return cursor, Document(header=header, body=body)


class AsciiDocParser(BaseParser):
    r"""Parse AsciiDoc-like text into a ``Document``.

    Supported Features
    ------------------
    - Title line (``=`` through any number of ``=``)
    - Author line with one to three name tokens and an optional ``<email>``
    - Document attributes (``:name: value``, ``:!name:`` and ``:name!:`` to unset)
    - Line (``//``) and block (``////``) comments
    - Body split into blank-line separated blocks
    - Constrained strong spans (``*text*``), resolved lazily via ``Block.inline()``

    Parameters
    ----------
    options : AsciiDocOptions or None, default = None
        Parser configuration options
    progress_callback : ProgressCallback or None, default = None
        Optional callback for progress updates

    Examples
    --------
    Basic parsing:

        >>> parser = AsciiDocParser()
        >>> doc = parser.parse("= Title\n\nThis is *bold*.")

    With options:

        >>> options = AsciiDocOptions(strict_mode=False, trim_title=False)
        >>> doc = AsciiDocParser(options).parse(asciidoc_text)

    """

    def __init__(self, options: AsciiDocOptions | None = None, progress_callback: Optional[ProgressCallback] = None):
        """Initialize the AsciiDoc parser."""
        BaseParser._validate_options_type(options, AsciiDocOptions, "asciidoc")
        options = options or AsciiDocOptions()
        super().__init__(options, progress_callback)
        self.options: AsciiDocOptions = options

    def parse(self, input_data: InputData) -> Document:
        """Parse AsciiDoc input into a Document.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            AsciiDoc input to parse. Can be:
            - AsciiDoc string (or a path to a file, as str)
            - File path (Path)
            - File-like object
            - Raw UTF-8 bytes

        Returns
        -------
        Document
            Parsed document

        Raises
        ------
        ParsingError
            If the document does not start with a title, or a comment
            block is left unclosed in strict mode
        ValidationError
            If the input cannot be read

        """
        content = self._load_text_content(input_data)
        self._emit_progress("started", "Parsing AsciiDoc", current=0, total=100)

        try:
            cursor, header = parse_doc_header(Cursor(content), self.options)
        except ParseFailure as failure:
            raise self._failure_to_error(failure, "header") from failure

        self._emit_progress("item_done", "Header parsed", current=50, total=100, item_type="header")
        if header.auth_info is not None:
            self._emit_progress(
                "detected", "Author line found", current=50, total=100, detected_type="author"
            )
        if header.attrs:
            self._emit_progress(
                "detected",
                f"{len(header.attrs)} attribute entries found",
                current=50,
                total=100,
                detected_type="attributes",
                attribute_count=len(header.attrs),
            )

        try:
            _, body = parse_body(cursor, self.options)
        except ParseFailure as failure:
            raise self._failure_to_error(failure, "body") from failure

        self._emit_progress("item_done", "Body split", current=90, total=100, item_type="body", block_count=len(body))

        metadata = self.extract_metadata(header).to_dict() if self.options.extract_metadata else {}
        document = Document(header=header, body=body, metadata=metadata)

        self._emit_progress("finished", "Parsing complete", current=100, total=100)
        return document

    def parse_header(self, input_data: InputData) -> DocHeader:
        """Parse only the document header, ignoring the body.

        Raises
        ------
        ParsingError
            If the document does not start with a title, or a header
            comment block is left unclosed in strict mode

        """
        content = self._load_text_content(input_data)
        try:
            _, header = parse_doc_header(Cursor(content), self.options)
        except ParseFailure as failure:
            raise self._failure_to_error(failure, "header") from failure
        return header

    def _failure_to_error(self, failure: ParseFailure, stage: str) -> ParsingError:
        if isinstance(failure, IncompleteDelimiter):
            message = f"Unclosed delimiter in document {stage}: {failure.message}"
        elif stage == "header":
            stage = "title"
            message = "Document does not start with a title line"
        else:
            message = f"Cannot parse document {stage}: {failure.message}"
        logger.error("%s (offset %d)", message, failure.position)
        self._emit_progress("error", message, metadata_error=failure.message, error=message, stage=stage)
        return ParsingError(message, parsing_stage=stage, remaining=failure.remaining, original_error=failure)

    def extract_metadata(self, document: Any) -> DocumentMetadata:
        """Extract metadata from a parsed document header.

        Parameters
        ----------
        document : DocHeader or Document
            Parsed header (or a document holding one)

        Returns
        -------
        DocumentMetadata
            Title, author and well-known attributes; other attributes go
            to ``custom``

        """
        header: DocHeader = document.header if isinstance(document, Document) else document
        attributes = header.resolved_attributes()
        metadata = DocumentMetadata(title=header.title.content.strip().text)

        if header.auth_info is not None:
            metadata.author = header.auth_info.full_name
            if header.auth_info.email is not None:
                metadata.email = header.auth_info.email.text
        if attributes.get("author"):
            metadata.author = attributes["author"]
        if attributes.get("email"):
            metadata.email = attributes["email"]
        if attributes.get("description"):
            metadata.subject = attributes["description"]
        keywords = attributes.get("keywords")
        if keywords:
            metadata.keywords = [k.strip() for k in keywords.replace(",", " ").split() if k.strip()]
        metadata.language = attributes.get("lang") or attributes.get("language")
        metadata.version = attributes.get("revnumber")

        for key, value in attributes.items():
            if key not in STANDARD_ATTRIBUTE_FIELDS:
                metadata.custom[key] = value

        return metadata
