"""Centralized error handling module."""

from enum import Enum
from typing import Any, Dict, Optional

from linecli.utils.log_manager import get_logger

_logger = None


def _get_logger():
    """Get logger with lazy initialisation."""
    global _logger
    if _logger is None:
        _logger = get_logger(__name__)
    return _logger


## Error Categories


class ErrorCategory(Enum):
    """Categories of errors for better handling."""

    COMMAND = "command"
    CONFIGURATION = "configuration"
    FILE_SYSTEM = "file_system"
    UNKNOWN = "unknown"


## Custom Exceptions


class LineCliError(Exception):
    """Base exception for all linecli errors."""

    category = ErrorCategory.UNKNOWN
    user_message = "An error occurred"

    def __init__(
        self, message: str | None = None, details: Dict[str, Any] | None = None
    ):
        """Initialise LineCliError with optional message and details."""
        self.message = message or self.user_message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error details to a dictionary."""
        return {
            "error_type": self.__class__.__name__,
            "category": self.category.value,
            "message": self.message,
            "details": self.details,
        }


## Command Errors


class CliError(LineCliError):
    """Base exception for errors raised while executing a command.

    Handlers raise subclasses of this from ``handle_command``; the manager
    prints ``str(error)`` and carries on with the next line.
    """

    category = ErrorCategory.COMMAND
    user_message = "Command failed"


class InvalidNumberOfArguments(CliError):
    """An invalid number of arguments was given to a handler."""

    user_message = "Invalid number of arguments"

    def __init__(self, min: int, max: Optional[int] = None, given: int = 0):
        self.min = min
        self.max = max
        self.given = given
        expected = f"{min}-{max}" if max is not None else f"{min}"
        super().__init__(
            f"Invalid number of arguments: expected {expected}, received {given}.",
            details={"min": min, "max": max, "given": given},
        )


class ArgumentParseFailure(CliError):
    """An argument could not be coerced from its string form."""

    user_message = "Argument parse failure"

    def __init__(self, description: str):
        self.description = description
        super().__init__(f"Argument parse failure: {description}")


class ExecutionError(CliError):
    """A command failed while executing."""

    user_message = "Execution error"

    def __init__(self, description: str):
        self.description = description
        super().__init__(f"Execution error: {description}")


## File System Errors


class FileSystemError(LineCliError):
    """Base exception for file system-related errors."""

    category = ErrorCategory.FILE_SYSTEM
    user_message = "A file system error occurred"


## Configuration Errors


class ConfigurationError(LineCliError):
    """Base exception for configuration-related errors."""

    category = ErrorCategory.CONFIGURATION
    user_message = "A configuration error occurred"


class MissingConfigError(ConfigurationError):
    """Exception for missing configuration settings."""

    user_message = "Missing configuration settings"


class InvalidConfigError(ConfigurationError):
    """Exception for invalid configuration settings."""

    user_message = "Invalid configuration settings"


## Error Handler


class ErrorHandler:
    """Centralized error handling and logging."""

    @staticmethod
    def handle(
        error: Exception, context: str = "", log_traceback: bool = True
    ) -> Dict[str, Any]:
        """Log an error and return its dictionary form."""
        if isinstance(error, LineCliError):
            _get_logger().error(f"{context}: {error.message}", extra=error.details)
            if log_traceback:
                _get_logger().exception(error)
            return error.to_dict()

        _get_logger().error(f"{context}: {str(error)}")
        if log_traceback:
            _get_logger().exception(error)
        return {
            "error_type": "UnknownError",
            "category": ErrorCategory.UNKNOWN.value,
            "message": str(error),
            "details": {"context": context},
        }


## Utility Functions


def format_error_message(error: Exception) -> str:
    """Format an error message for display on a single line.

    Command errors already carry their prefix; anything else a handler
    raises is shown as an execution error.
    """
    if isinstance(error, CliError):
        return error.message
    if isinstance(error, LineCliError):
        return f"Execution error: {error.message}"
    return f"Execution error: {error}"
