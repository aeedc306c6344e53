#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the adocparse library.

This module defines specialized exception classes for the error conditions
that can occur while parsing a document. Low-level grammar rules signal
failure by raising a ``ParseFailure`` subclass; the document assembler turns
fatal failures into a ``ParsingError``.

Exception Hierarchy
-------------------
- AdocParseError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser)

  - ParseFailure (grammar rule did not match at the cursor)
    - NoMatch (pattern not present, recoverable)
    - EmptyRequiredSpan (required span matched zero characters, recoverable)
    - IncompleteDelimiter (opening delimiter without its closing one, committed)

  - ParsingError (the document as a whole could not be parsed)

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from adocparse.parsers.combinators import Cursor


class AdocParseError(Exception):
    """Base exception class for all adocparse-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(AdocParseError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when incorrect options class is provided to a parser.

    Parameters
    ----------
    parser_name : str
        Name of the parser that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        parser_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
    ):
        """Initialize the invalid options error with type information."""
        if message is None:
            message = (
                f"Invalid options type for '{parser_name}' parser. "
                f"Expected {expected_type.__name__}, but received {received_type.__name__}."
            )
        super().__init__(message, parameter_name="options", parameter_value=received_type)
        self.parser_name = parser_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParseFailure(AdocParseError):
    """A grammar rule failed at the given cursor.

    Rules never move the caller's cursor on failure; the cursor carried by
    the exception is the position where the failing rule gave up, which may
    lie after the position the rule was started at.

    Parameters
    ----------
    message : str
        Description of what was expected
    cursor : Cursor
        Input position where the failure was detected

    Attributes
    ----------
    recoverable : bool
        Whether alternation, optional application and repetition may swallow
        this failure and try something else.

    """

    recoverable = True

    def __init__(self, message: str, cursor: Cursor):
        """Initialize the failure with the cursor it occurred at."""
        super().__init__(message)
        self.cursor = cursor

    @property
    def position(self) -> int:
        """Offset into the source where the failure was detected."""
        return self.cursor.pos

    @property
    def remaining(self) -> str:
        """Remaining input at the failure position."""
        return self.cursor.rest

    def __str__(self) -> str:
        """Return the message together with a short excerpt of the remaining input."""
        excerpt = self.remaining[:20]
        return f"{self.message} at offset {self.position} (remaining: {excerpt!r})"


class NoMatch(ParseFailure):
    """The expected pattern is not present at the current position."""


class EmptyRequiredSpan(ParseFailure):
    """A span required to be non-empty matched zero characters."""


class IncompleteDelimiter(ParseFailure):
    """An opening delimiter was found but its closing delimiter was not.

    The opening delimiter commits the parse to its branch, so this failure
    is not swallowed by alternation or repetition.
    """

    recoverable = False


class ParsingError(AdocParseError):
    """Exception raised when a document cannot be parsed.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred (e.g. ``"title"``)
    remaining : str, optional
        The remaining input at the point of failure
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(
        self,
        message: str,
        parsing_stage: str | None = None,
        remaining: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage
        self.remaining = remaining
