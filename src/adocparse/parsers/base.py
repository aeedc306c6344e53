#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adocparse/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class for the adocparse parsers. The
BaseParser handles the concerns shared by every parser: options validation,
progress reporting and loading the input text.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Any, Optional, Union

from adocparse.ast import Document
from adocparse.exceptions import InvalidOptionsError, ValidationError
from adocparse.options.base import BaseParserOptions
from adocparse.progress import ProgressCallback, ProgressEvent
from adocparse.utils.metadata import DocumentMetadata

logger = logging.getLogger(__name__)

InputData = Union[str, Path, IO[bytes], IO[str], bytes]

# Strings longer than this, or containing a newline, are never treated as paths
_MAX_PATH_LENGTH = 260


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Parsing options
    progress_callback : ProgressCallback or None, default = None
        Optional callback for progress updates during parsing

    Notes
    -----
    The parse() method accepts:
    - str: document content, or a path to a file
    - Path: file path to read
    - IO[bytes] / IO[str]: file-like object
    - bytes: raw UTF-8 document bytes

    """

    def __init__(self, options: BaseParserOptions | None = None, progress_callback: Optional[ProgressCallback] = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options
        self.progress_callback: Optional[ProgressCallback] = progress_callback

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                parser_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: InputData) -> Document:
        """Parse the input document into the document model.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            The input document to parse

        Returns
        -------
        Document
            Parsed document

        Raises
        ------
        ParsingError
            If the document cannot be parsed
        ValidationError
            If input data is invalid or inaccessible

        """
        raise NotImplementedError

    @abstractmethod
    def extract_metadata(self, document: Any) -> DocumentMetadata:
        """Extract metadata from the parsed source.

        Parameters
        ----------
        document : Any
            Format-specific parsed object

        Returns
        -------
        DocumentMetadata
            Extracted metadata; empty if none is available

        """
        raise NotImplementedError

    def _emit_progress(self, event_type: str, message: str, current: int = 0, total: int = 0, **metadata: Any) -> None:
        """Emit a progress event to the callback if registered.

        If the callback raises an exception, it is logged so that it cannot
        interrupt parsing.

        Parameters
        ----------
        event_type : str
            Type of progress event (started, item_done, detected, finished, error)
        message : str
            Human-readable description of the event
        current : int, default 0
            Current progress position
        total : int, default 0
            Total progress units
        **metadata
            Additional event-specific information

        """
        if not self.progress_callback:
            return

        try:
            event = ProgressEvent(
                event_type=event_type,  # type: ignore[arg-type]
                message=message,
                current=current,
                total=total,
                metadata=metadata,
            )
            self.progress_callback(event)
        except Exception as e:
            logger.warning(f"Progress callback raised exception: {e}", exc_info=True)

    @staticmethod
    def _decode(data: bytes) -> str:
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ValidationError(
                "Input is not valid UTF-8", parameter_name="input_data", original_error=e
            ) from e

    @staticmethod
    def _load_text_content(input_data: InputData) -> str:
        """Load content from the supported input types.

        Parameters
        ----------
        input_data : str, Path, IO, or bytes
            Input data to load

        Returns
        -------
        str
            Document content as string

        Raises
        ------
        ValidationError
            If the input cannot be read or is not valid UTF-8

        """
        if isinstance(input_data, bytes):
            return BaseParser._decode(input_data)
        elif isinstance(input_data, Path):
            try:
                return BaseParser._decode(input_data.read_bytes())
            except OSError as e:
                raise ValidationError(
                    f"Cannot read {input_data}", parameter_name="input_data", parameter_value=input_data, original_error=e
                ) from e
        elif isinstance(input_data, str):
            # Could be file path or content
            if len(input_data) <= _MAX_PATH_LENGTH and "\n" not in input_data:
                try:
                    path = Path(input_data)
                    if path.is_file():
                        return BaseParser._decode(path.read_bytes())
                except OSError:
                    # Path too long or invalid - treat as content
                    pass
            return input_data
        elif hasattr(input_data, "read"):
            data = input_data.read()
            return BaseParser._decode(data) if isinstance(data, bytes) else data
        else:
            raise ValidationError(
                f"Unsupported input type: {type(input_data).__name__}",
                parameter_name="input_data",
                parameter_value=input_data,
            )
