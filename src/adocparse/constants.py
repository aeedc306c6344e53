#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the adocparse library.

This module centralizes the markup characters recognized by the grammar and
the default values of the parser options.

Constants are organized by category:
1. Character Classes - whitespace and line terminator characters
2. Markup Markers - delimiters recognized by the grammar
3. Parser Defaults - default values for AsciiDocOptions
4. Command Line - CLI output formats and environment variables
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Character Classes
# =============================================================================

# Horizontal whitespace separating tokens on one line
LINE_SPACE_CHARS = " \t"

# Any whitespace, line terminators included
WHITESPACE_CHARS = " \t\r\n"

# =============================================================================
# Markup Markers
# =============================================================================

TITLE_MARKER = "="

COMMENT_LINE_MARKER = "//"
COMMENT_BLOCK_DELIMITER = "////"

ATTRIBUTE_DELIMITER = ":"
ATTRIBUTE_UNSET_MARKER = "!"

EMAIL_OPEN = "<"
EMAIL_CLOSE = ">"

# Author names have at most this many whitespace-separated tokens
MAX_AUTHOR_NAME_TOKENS = 3

# Characters that may not appear inside an author name token
AUTHOR_TOKEN_EXCLUDED_CHARS = WHITESPACE_CHARS + EMAIL_OPEN + EMAIL_CLOSE + ATTRIBUTE_DELIMITER

STRONG_DELIMITER = "*"

# Characters allowed right after the closing delimiter of a strong span.
# End of input is accepted as well.
STRONG_BOUNDARY_CHARS = ',;".?! \t\r\n'

# =============================================================================
# Parser Defaults
# =============================================================================

DEFAULT_EXTRACT_METADATA = True
DEFAULT_TRIM_TITLE = True
DEFAULT_STRICT_MODE = True
DEFAULT_STRIP_COMMENTS = True
DEFAULT_PARSE_AUTHOR_LINE = True
DEFAULT_PARSE_ATTRIBUTES = True

# =============================================================================
# Command Line
# =============================================================================

OutputFormat = Literal["tree", "json", "yaml"]
OUTPUT_FORMATS: tuple[OutputFormat, ...] = ("tree", "json", "yaml")
DEFAULT_OUTPUT_FORMAT: OutputFormat = "tree"

ENV_PREFIX = "ADOCPARSE_"
DEFAULT_LOG_LEVEL = "WARNING"
