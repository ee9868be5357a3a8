#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/html2doc/utils/decorators.py
"""Utility decorators and context managers for html2doc converters.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from html2doc.exceptions import DependencyError
from html2doc.utils.packages import check_version_requirement


def check_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> None:
    """Raise DependencyError unless every package is importable at a matching version.

    Parameters
    ----------
    converter_name : str
        Name of the converter, used in the error message
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version

    """
    missing = []
    version_mismatches = []
    original_error = None

    for install_name, import_name, version_spec in packages:
        try:
            # nosemgrep: python.lang.security.audit.non-literal-import.non-literal-import
            importlib.import_module(import_name)

            if version_spec:
                meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
                if not meets_requirement:
                    version_mismatches.append((install_name, version_spec, installed_version or "unknown"))

        except ImportError as e:
            missing.append((install_name, version_spec))
            if original_error is None:
                original_error = e

    if missing or version_mismatches:
        raise DependencyError(
            converter_name=converter_name,
            missing_packages=missing,
            version_mismatches=version_mismatches,
            original_import_error=original_error,
        ) from original_error


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required dependencies and versions before method execution.

    Parameters
    ----------
    converter_name : str
        Name of the converter (e.g., "html"). Appears in error messages.
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples where:
        - install_name: Package name for pip install (e.g., "beautifulsoup4")
        - import_name: Module name for import statement (e.g., "bs4")
        - version_spec: Version requirement (e.g., ">=4.12.0" or "" for any version)

    Returns
    -------
    Callable
        Decorated method that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version.

    Examples
    --------
        >>> @requires_dependencies("html", [("beautifulsoup4", "bs4", ">=4.12.0")])
        ... def parse(self, markup):
        ...     from bs4 import BeautifulSoup
        ...     # parsing logic here

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            check_dependencies(converter_name, packages)
            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Time the enclosed block and log the elapsed time at DEBUG level.

    Parameters
    ----------
    logger : logging.Logger
        Logger instance to use for DEBUG messages
    operation : str
        Description of the operation being timed (e.g., "HTML tree walk")

    Examples
    --------
        >>> logger = logging.getLogger(__name__)
        >>> with debug_timer(logger, "HTML tree walk"):
        ...     walk(nodes)
        ... # Logs: "HTML tree walk completed in 0.01s" at DEBUG level

    Notes
    -----
    Zero overhead when DEBUG logging is disabled.

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
