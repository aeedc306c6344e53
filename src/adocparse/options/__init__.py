#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the adocparse parsers.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy.
"""

from adocparse.options.asciidoc import AsciiDocOptions
from adocparse.options.base import BaseParserOptions, CloneFrozenMixin

__all__ = [
    "AsciiDocOptions",
    "BaseParserOptions",
    "CloneFrozenMixin",
]
