#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the html2doc library.

This module defines the exception classes raised while converting HTML
markup into the document model. Argument problems are rejected at the
boundary; problems inside the tree walk abort the whole conversion and are
never recovered internally.

Exception Hierarchy
-------------------
- Html2DocError (base exception)

  - ValidationError (argument validation at the API boundary)
    - InvalidOptionsError (wrong options class for a converter)

  - RegistryError (invalid handler registrations)

  - ConversionError (failures during the tree walk)
    - HandlerContractError (handler received an incompatible context)
    - ConversionDepthError (nesting deeper than the configured limit)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class Html2DocError(Exception):
    """Base exception class for all html2doc-specific errors.

    Catching this will catch every library-specific error.

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


class ValidationError(Html2DocError):
    """Exception raised for invalid input parameters.

    This covers empty or missing markup, a missing target container, an
    empty style name or a missing converter.

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
    """Exception raised when an incorrect options class is given to a converter.

    Parameters
    ----------
    converter_name : str
        Name of the converter that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The options class type that was received
    message : str, optional
        Custom error message. If not provided, a helpful message is generated

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class RegistryError(Html2DocError):
    """Exception raised for invalid node handler registrations.

    Raised when a tag key is malformed, a handler is not callable, a tag is
    registered twice without ``replace=True`` or an unknown tag is removed.

    Parameters
    ----------
    message : str
        Description of the registry error
    tag : str, optional
        The tag key involved

    """

    def __init__(self, message: str, tag: str | None = None, original_error: Exception | None = None):
        """Initialize the registry error with the offending tag."""
        super().__init__(message, original_error=original_error)
        self.tag = tag


class ConversionError(Html2DocError):
    """Base exception for failures during the HTML tree walk.

    No rollback is performed: whatever the walk attached to the target
    container before the failure stays there.
    """

    pass


class HandlerContractError(ConversionError):
    """Exception raised when a handler receives a context it cannot work with.

    For example a heading handler invoked with a paragraph as its context,
    or a block handler invoked inside an inline run.

    Parameters
    ----------
    message : str
        Description of the violation
    tag : str, optional
        Node name whose handler raised
    context_type : str, optional
        Class name of the offending context

    """

    def __init__(
        self,
        message: str,
        tag: str | None = None,
        context_type: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the contract error with tag and context details."""
        super().__init__(message, original_error=original_error)
        self.tag = tag
        self.context_type = context_type


class ConversionDepthError(ConversionError):
    """Exception raised when markup nesting exceeds the configured depth limit.

    Parameters
    ----------
    depth : int
        Depth at which the walk stopped
    max_depth : int
        The configured limit

    """

    def __init__(self, depth: int, max_depth: int):
        """Initialize the depth error."""
        super().__init__(f"Markup nesting depth {depth} exceeds the configured maximum of {max_depth}")
        self.depth = depth
        self.max_depth = max_depth


class DependencyError(Html2DocError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the converter requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    message : str, optional
        Custom error message. If not provided, a helpful message is generated

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        if message is None:
            message_parts = []

            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" if spec else f"'{name}'" for name, spec in missing_packages)
                message_parts.append(f"{converter_name} requires the following packages: {pkg_list}")

            if version_mismatches:
                mismatch_str = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                message_parts.append(f"{converter_name} has version mismatches: {mismatch_str}")

            message = "\n".join(message_parts)

            all_packages = missing_packages + [(name, req) for name, req, _ in version_mismatches]
            if all_packages:
                packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
                message += f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message, original_error=original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.original_import_error = original_import_error
