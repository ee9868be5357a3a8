#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2doc/progress.py
"""Progress callback system for HTML conversion.

Embedders can pass a callback to a converter to be told when a conversion
starts, which structures were found and when it finished.

Examples
--------
    >>> from html2doc.parsers.html import HtmlConverter
    >>> from html2doc.progress import ProgressEvent
    >>>
    >>> def my_progress_handler(event: ProgressEvent):
    ...     print(event)
    >>>
    >>> converter = HtmlConverter(progress_callback=my_progress_handler)

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal

EventType = Literal["started", "item_done", "detected", "finished", "error"]


@dataclass
class ProgressEvent:
    """Progress event for conversion operations.

    Parameters
    ----------
    event_type : EventType
        Type of progress event:

        - "started": a conversion has begun
        - "item_done": a discrete unit has been completed
          (``metadata["item_type"]`` names it)
        - "detected": a notable structure was found
          (``metadata["detected_type"]`` names it, e.g. ``"list"``)
        - "finished": the conversion completed successfully
        - "error": the conversion failed (``metadata["error"]`` holds details)

    message : str
        Human-readable description of the event
    current : int, default 0
        Current progress position
    total : int, default 0
        Total items to process. Set to 0 if unknown.
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

A progress callback is any callable that accepts a ProgressEvent and returns None.
Exceptions raised by a callback are logged and never interrupt a conversion.
"""
