"""
Custom exception hierarchy for the configuration registry.

This module defines standardized error codes, messages, and categorization
for the errors that can occur while registering or reading configuration.
"""
from contextlib import contextmanager
from enum import Enum
import logging
from typing import Optional, Dict, Any, Type
import uuid

# Import dedicated error logger
from utils.error_logging import config_error_logger


class ErrorCode(Enum):
    """
    Enumeration of error codes for standardized error handling.

    Error codes are grouped by category for easier identification:
    - 1xx: Configuration errors
    - 9xx: Uncategorized/system errors
    """
    # Configuration errors (1xx)
    CONFIG_NOT_FOUND = 101
    INVALID_CONFIG = 102
    INVALID_NAMESPACE = 103
    CONFIG_SERIALIZATION_ERROR = 104
    CONFIG_VALIDATION_ERROR = 105

    # Uncategorized/system errors (9xx)
    UNKNOWN_ERROR = 901
    STORE_POISONED = 907


class ZirvError(Exception):
    """
    Base exception class for all registry errors.

    All other custom exceptions inherit from this class, allowing for
    standardized error handling throughout the package.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize a new ZirvError.

        Args:
            message: Human-readable error message
            code: Error code from the ErrorCode enum
            details: Additional error details for debugging or logging
        """
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


class ConfigError(ZirvError):
    """Exception raised for configuration-related errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INVALID_CONFIG,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code, details)


class SerializationError(ZirvError):
    """
    Raised when a value cannot be turned into its structured form.

    Registration happens at startup under the author's control, so this
    is a programming error and is not meant to be caught.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_SERIALIZATION_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code, details)


class ConversionError(ZirvError):
    """Raised by strict typed reads when a stored value has the wrong shape."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_VALIDATION_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code, details)


class StorePoisonedError(ZirvError):
    """Raised for every operation on a store whose lock holder failed."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.STORE_POISONED,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, code, details)


@contextmanager
def error_context(
    component_name: str,
    operation: Optional[str] = None,
    error_class: Type[ZirvError] = ZirvError,
    error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
    logger: Optional[logging.Logger] = None
):
    """
    Context manager for standardized error handling across the package.

    Provides consistent error handling, logging, and error wrapping
    for any component operation. Use with a 'with' statement to wrap code
    that may raise exceptions.

    Args:
        component_name: Name of the component (for error messages)
        operation: Description of the operation (for error messages)
        error_class: The ZirvError subclass to use for wrapping
        error_code: Error code to use for non-ZirvError exceptions
        logger: Logger to use (defaults to the dedicated config error logger)

    Yields:
        Control to the wrapped code block

    Raises:
        ZirvError: With appropriate error information
    """
    if logger is None:
        logger = config_error_logger

    try:
        yield
    except ZirvError as e:
        error_id = str(uuid.uuid4())
        logger.error(f"[{error_id}] {component_name} - {e}")
        raise
    except Exception as e:
        # Generate a unique error ID for tracking
        error_id = str(uuid.uuid4())

        error_msg = f"Error in {component_name}"
        if operation:
            error_msg += f" during {operation}"

        error_string = str(e)
        wrapped_error = error_class(
            f"{error_msg}: {error_string}",
            error_code,
            {
                "original_error": error_string,
                "error_type": type(e).__name__,
                "error_id": error_id,
            }
        )

        logger.error(f"[{error_id}] {error_msg}: {error_string}")

        raise wrapped_error from e
