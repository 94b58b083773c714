#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the book2html library.

The rendering core is total over its inputs: every markdown string renders
and every link destination, fence info string or heading text is a valid
input. The exceptions below cover the surfaces around that core, namely
option validation, configuration loading, command line input and the
structural invariant of the render event stream.

Exception Hierarchy
-------------------
- Book2HtmlError (base exception)

  - ValidationError (option validation)

  - ConfigurationError (unreadable or invalid configuration files)

  - EventStreamError (unbalanced render event stream)

  - InputError (command line input that cannot be read)

  - OutputWriteError (rendered HTML that cannot be written)

Errors raised by the markdown parser itself are not wrapped; they propagate
to the caller unchanged.

"""

from typing import Any


class Book2HtmlError(Exception):
    """Base exception class for all book2html-specific errors.

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


class ValidationError(Book2HtmlError):
    """Exception raised for invalid rendering options.

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

    Attributes
    ----------
    parameter_name : str or None
        The name of the problematic parameter
    parameter_value : any
        The value that caused the error

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


class ConfigurationError(Book2HtmlError):
    """Exception raised when a configuration file cannot be used.

    Covers unreadable files, invalid TOML, sections of the wrong type and
    unknown keys.

    Parameters
    ----------
    message : str
        Description of the configuration problem
    config_path : str, optional
        Path of the offending configuration file
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    config_path : str or None
        Path of the configuration file

    """

    def __init__(self, message: str, config_path: str | None = None, original_error: Exception | None = None):
        """Initialize the configuration error with the file path."""
        super().__init__(message, original_error=original_error)
        self.config_path = config_path


class EventStreamError(Book2HtmlError):
    """Exception raised when a render event stream is not well nested.

    Transform stages only replace event payloads, so this signals a
    programming error in a stage rather than a problem with the markdown.

    Parameters
    ----------
    message : str
        Description of the nesting violation
    token_type : str, optional
        Type of the token whose event broke the nesting

    """

    def __init__(self, message: str, token_type: str | None = None):
        """Initialize the event stream error."""
        super().__init__(message)
        self.token_type = token_type


class InputError(Book2HtmlError):
    """Exception raised when command line input cannot be read.

    Parameters
    ----------
    message : str
        Description of the input problem
    input_path : str, optional
        The path that could not be read
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, input_path: str | None = None, original_error: Exception | None = None):
        """Initialize the input error."""
        super().__init__(message, original_error=original_error)
        self.input_path = input_path


class OutputWriteError(Book2HtmlError):
    """Exception raised when rendered HTML cannot be written.

    Parameters
    ----------
    message : str
        Description of the write failure
    output_path : str, optional
        The path that could not be written
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, output_path: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        super().__init__(message, original_error=original_error)
        self.output_path = output_path


__all__ = [
    "Book2HtmlError",
    "ValidationError",
    "ConfigurationError",
    "EventStreamError",
    "InputError",
    "OutputWriteError",
]
