"""
Validation and error handling for the uidmonitor package.

This module provides input validation, the exception hierarchy and error
handling helpers with consistent error reporting across the application.
"""

from .exceptions import (
    ErrorSeverity,
    NameResolutionError,
    StatsSourceError,
    UidMonitorError,
    ValidationError,
    handle_cli_error,
    handle_config_error,
    handle_error,
)

from .validators import (
    validate_enum_choice,
    validate_positive_float,
    validate_positive_integer,
)

__all__ = [
    # Exceptions
    "ErrorSeverity",
    "NameResolutionError",
    "StatsSourceError",
    "UidMonitorError",
    "ValidationError",
    # Handlers
    "handle_cli_error",
    "handle_config_error",
    "handle_error",
    # Validators
    "validate_enum_choice",
    "validate_positive_float",
    "validate_positive_integer",
]
