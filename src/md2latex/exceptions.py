#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the md2latex library.

This module defines specialized exception classes for the error conditions
that can occur while parsing a document, rendering it to LaTeX and filling a
template. Every condition is fatal: the conversion is aborted and no partial
output is produced.

Exception Hierarchy
-------------------
- Md2LatexError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser/renderer)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, decoding failures)

  - ParsingError (input document parsing failures)
    - FrontmatterError (frontmatter that cannot be decoded)
      - MissingFrontmatterError (document does not start with frontmatter)

  - RenderingError (LaTeX generation failures)
    - UnknownNodeTypeError (node kind without a rendering rule)
    - DirectiveError (malformed code-block directive)
      - UnknownDirectiveError (unrecognized code fence language)
    - UnsupportedImageError (image extension without a rendering rule)

  - TemplateError (template substitution failures)
    - UnresolvedTemplateFieldError (placeholder missing from metadata)

  - DependencyError (missing/incompatible packages)

"""

from typing import Any


class Md2LatexError(Exception):
    """Base exception class for all md2latex-specific errors.

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


class ValidationError(Md2LatexError):
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
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

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


class FileError(Md2LatexError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when an input or template file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when a file exists but cannot be read."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(Md2LatexError):
    """Exception raised when document parsing fails.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class FrontmatterError(ParsingError):
    """Exception raised when a frontmatter block cannot be decoded into a mapping."""

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the frontmatter error."""
        super().__init__(message, parsing_stage="frontmatter", original_error=original_error)


class MissingFrontmatterError(FrontmatterError):
    """Exception raised when a document does not start with a frontmatter block.

    Parameters
    ----------
    found : str or None
        Name of the node kind found in first position, or None for an
        empty document

    """

    def __init__(self, found: str | None = None):
        """Initialize the missing frontmatter error."""
        if found is None:
            message = "missing frontmatter: document is empty"
        else:
            message = f"missing frontmatter: document starts with {found} instead of a metadata block"
        super().__init__(message)
        self.found = found


class RenderingError(Md2LatexError):
    """Exception raised when LaTeX rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class UnknownNodeTypeError(RenderingError):
    """Exception raised when a node has no LaTeX rendering rule.

    Parameters
    ----------
    node_type : str
        Name of the offending node type

    """

    def __init__(self, node_type: str):
        """Initialize the unknown node type error."""
        super().__init__(f"unknown node type: {node_type}", rendering_stage="node")
        self.node_type = node_type


class DirectiveError(RenderingError):
    """Exception raised when a code-block directive cannot be rendered."""

    def __init__(self, message: str, directive: str | None = None):
        """Initialize the directive error."""
        super().__init__(message, rendering_stage="directive")
        self.directive = directive


class UnknownDirectiveError(DirectiveError):
    """Exception raised for a code fence language that is not a known directive."""

    def __init__(self, directive: str):
        """Initialize the unknown directive error."""
        super().__init__(f"unknown directive: {directive!r}", directive=directive)


class UnsupportedImageError(RenderingError):
    """Exception raised for an image whose extension has no rendering rule.

    Parameters
    ----------
    url : str
        Image URL
    extension : str
        Extension extracted from the URL

    """

    def __init__(self, url: str, extension: str):
        """Initialize the unsupported image error."""
        super().__init__(f"unsupported image type {extension!r}: {url}", rendering_stage="image")
        self.url = url
        self.extension = extension


class TemplateError(Md2LatexError):
    """Exception raised when template substitution fails."""


class UnresolvedTemplateFieldError(TemplateError):
    """Exception raised when a template placeholder has no metadata value.

    Parameters
    ----------
    field_name : str
        The placeholder identifier that could not be resolved

    """

    def __init__(self, field_name: str):
        """Initialize the unresolved field error."""
        super().__init__(f"unresolved template field: {field_name!r} is not defined in the frontmatter")
        self.field_name = field_name


class DependencyError(Md2LatexError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the component requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The first import error encountered

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
