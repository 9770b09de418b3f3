"""
Custom exception classes

This module defines the errors raised by the statistics engine and the
central handler the command-line entry point uses to report them.
"""

import logging
from typing import Optional, Dict, Any

logger = logging.getLogger(__name__)

EXIT_EMPTY_INPUT = 1
EXIT_INVALID_ARGUMENTS = 2


class StatisticsError(Exception):
    """
    Base class for statistics errors

    Every custom exception inherits from this class.
    """

    exit_code: int = EXIT_INVALID_ARGUMENTS

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class EmptyInputError(StatisticsError):
    """Raised when statistics are requested for an empty input sequence"""

    exit_code = EXIT_EMPTY_INPUT

    def __init__(self, message: str = "Can't compute statistics of empty inputs."):
        super().__init__(message=message, details={"count": 0})


class InvalidInputError(StatisticsError):
    """Raised when an input element is not a real number"""

    def __init__(self, index: int, value: Any, reason: str = "is not a real number"):
        self.index = index
        self.value = value
        try:
            shown = repr(value)
        except ValueError:
            # ints past the str conversion digit limit
            shown = f"<int of {value.bit_length()} bits>"
        super().__init__(
            message=f"Invalid input at position {index}: {shown} {reason}",
            details={"index": index, "value": shown}
        )


class InvalidPrecisionError(StatisticsError):
    """Raised when the engine is configured with a non-integer precision"""

    def __init__(self, precision: Any, validation_errors: Optional[list] = None):
        self.precision = precision
        super().__init__(
            message=f"Invalid precision: {precision!r} is not an integer",
            details={"validation_errors": validation_errors or []}
        )


def statistics_error_handler(exc: StatisticsError) -> Dict[str, Any]:
    """
    Log a StatisticsError and build the standard error payload.

    Args:
        exc: the raised exception

    Returns:
        Dict[str, Any]: error payload including the process exit code
    """
    logger.error(
        f"Statistics error: {exc.message} | "
        f"Type: {exc.__class__.__name__} | "
        f"Details: {exc.details}"
    )

    return {
        "success": False,
        "error": {
            "message": exc.message,
            "type": exc.__class__.__name__,
            "exit_code": exc.exit_code,
            "details": exc.details
        }
    }
