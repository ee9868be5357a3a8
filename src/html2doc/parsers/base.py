#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2doc/parsers/base.py
"""Base classes for markup converters.

A converter turns source markup into document objects inserted at a
caller-chosen point of an existing document tree. Conversion is a
two-stage call: ``convert(contents)`` validates and parses eagerly and
returns an action; calling the action with a container performs the
insertion.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Protocol, runtime_checkable

from html2doc.document.nodes import DocumentContainer, DocumentObject
from html2doc.exceptions import InvalidOptionsError
from html2doc.options.base import BaseParserOptions
from html2doc.progress import ProgressCallback, ProgressEvent

logger = logging.getLogger(__name__)

InsertAction = Callable[[DocumentContainer], None]


@runtime_checkable
class Converter(Protocol):
    """Anything that can turn contents into an insertion action."""

    def convert(self, contents: str) -> Callable[[DocumentObject], None]: ...


class BaseConverter(ABC):
    """Abstract base class for markup converters.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific options
    progress_callback : ProgressCallback or None, default = None
        Optional callback for progress updates during conversion

    Examples
    --------
    Creating a custom converter:

        >>> class PlainTextConverter(BaseConverter):
        ...     def convert(self, contents):
        ...         def action(container):
        ...             container.add_paragraph(contents)
        ...         return action

    """

    def __init__(
        self, options: BaseParserOptions | None = None, progress_callback: Optional[ProgressCallback] = None
    ):
        self.options: BaseParserOptions | None = options
        self.progress_callback: Optional[ProgressCallback] = progress_callback

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, converter_name: str) -> None:
        """Validate that options are of the correct type for this converter.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=converter_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def convert(self, contents: str) -> InsertAction:
        """Validate and parse ``contents`` and return the insertion action.

        Parameters
        ----------
        contents : str
            Source markup

        Returns
        -------
        callable
            Action taking the target container; performs the insertion

        Raises
        ------
        ValidationError
            If contents are empty

        """
        raise NotImplementedError

    def _emit_progress(self, event_type: str, message: str, current: int = 0, total: int = 0, **metadata: Any) -> None:
        """Emit a progress event to the callback if registered.

        If the callback raises, the exception is logged and swallowed so it
        cannot interrupt the conversion.

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
