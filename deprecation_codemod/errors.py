"""Codemod error taxonomy and exit codes."""

from enum import IntEnum
from typing import Optional


class ExitCode(IntEnum):
    """
    Exit codes for the codemod CLI.

    - 0: Every file was read, parsed and (when needed) written
    - 1: At least one file failed to read, parse or write
    - 3: Invalid arguments or configuration
    """

    SUCCESS = 0
    FILE_ERROR = 1
    INVALID_ARGS = 3


class CodemodError(Exception):
    """Base exception for all codemod errors."""

    def __init__(self, message: str, exit_code: ExitCode = ExitCode.FILE_ERROR):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code


class ParseError(CodemodError):
    """Source could not be parsed; the whole file is left untouched."""

    def __init__(self, message: str, file_path: Optional[str] = None):
        self.file_path = file_path
        location = file_path or "<source>"
        super().__init__(f"{location}: {message}", ExitCode.FILE_ERROR)


class UnknownCodemodError(CodemodError):
    """No codemod is registered under the requested name."""

    def __init__(self, name: str, available: Optional[list] = None):
        self.name = name
        hint = f" (available: {', '.join(available)})" if available else ""
        super().__init__(f"Unknown codemod '{name}'{hint}", ExitCode.INVALID_ARGS)


class InvalidOptionsError(CodemodError):
    """Print or transform options carry an unsupported value."""

    def __init__(self, message: str):
        super().__init__(message, ExitCode.INVALID_ARGS)


def format_error(error: Exception) -> str:
    """
    Format error for CLI output.

    Examples:
        >>> format_error(UnknownCodemodError("nope"))
        "Error: Unknown codemod 'nope'"
    """
    if isinstance(error, CodemodError):
        return f"Error: {error.message}"
    return f"Unexpected error: {error}"
