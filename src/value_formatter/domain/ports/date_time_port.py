"""Port (ABC) for the date/time collaborator.

Domain layer interface — infrastructure provides the concrete implementation.
Calendar and timezone arithmetic live behind this port; the formatter only
decides *what* to format and with which pattern.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date


class DateTimePort(ABC):
    """Contract for validating patterns and formatting date values."""

    @abstractmethod
    def is_valid(self, value: date) -> bool:
        """Return ``True`` if *value* is a usable, well-formed date value."""

    @abstractmethod
    def is_strict_pattern_valid(self, pattern: str) -> bool:
        """Return ``True`` if *pattern* formats and re-parses without loss."""

    @abstractmethod
    def format(self, value: date, pattern: str) -> str:
        """Format *value* with *pattern*, without any timezone conversion."""

    @abstractmethod
    def format_in_timezone(self, value: date, timezone: str, pattern: str) -> str:
        """Convert *value* into *timezone*, then format it with *pattern*.

        Raises:
            ConfigurationError: If *timezone* is not a known identifier.
        """
