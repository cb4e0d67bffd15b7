"""Domain errors — custom exceptions for value formatting.

These exceptions are raised by the formatter and the date/time backend and
surface directly to the caller. They carry no infrastructure dependencies.
"""


class ValueFormatterError(Exception):
    """Base exception for all value formatter errors."""


class ConfigurationError(ValueFormatterError):
    """Raised when settings are missing or invalid."""


class TypeArgumentError(ValueFormatterError, TypeError):
    """Raised when an argument is not of the expected type (e.g., not a date)."""


class InvalidValueError(ValueFormatterError, ValueError):
    """Raised when a value has the right type but cannot be formatted."""
