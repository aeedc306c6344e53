#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/adocparse/progress.py
"""Progress callback system for document parsing.

This module provides a standardized way to report parsing progress to
embedders.

Examples
--------
Basic progress tracking:

    >>> from adocparse import parse
    >>> from adocparse.progress import ProgressEvent
    >>>
    >>> def my_progress_handler(event: ProgressEvent):
    ...     print(f"{event.event_type}: {event.message} ({event.current}/{event.total})")
    >>>
    >>> doc = parse("= Title\\n", progress_callback=my_progress_handler)

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal

EventType = Literal["started", "item_done", "detected", "finished", "error"]


@dataclass
class ProgressEvent:
    """Progress event for parsing operations.

    Parameters
    ----------
    event_type : EventType
        Type of progress event:

        - "started": parsing has begun
        - "item_done": a parsing stage has been completed;
          ``metadata["item_type"]`` names it (``header``, ``body``)
        - "detected": an optional header part was found;
          ``metadata["detected_type"]`` names it (``author``, ``attributes``)
        - "finished": parsing completed successfully
        - "error": parsing failed; ``metadata["error"]`` holds the message

    message : str
        Human-readable description of the event
    current : int, default 0
        Current progress position
    total : int, default 0
        Total progress units. Set to 0 if unknown.
    metadata : dict, default empty
        Additional event-specific information

    """

    event_type: EventType
    message: str
    current: int = 0
    total: int = 0
    metadata: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Return human-readable string representation.

        Returns
        -------
        str
            Formatted event description

        """
        progress = f"({self.current}/{self.total})" if self.total > 0 else ""
        return f"[{self.event_type.upper()}] {self.message} {progress}".strip()


ProgressCallback = Callable[[ProgressEvent], None]
"""Type alias for progress callback functions.

Callbacks should not raise; if one does, the exception is logged and parsing
continues.
"""
