#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers for adocparse."""

from adocparse.utils.metadata import DocumentMetadata

__all__ = ["DocumentMetadata"]
