"""Stateless conversions — one throwaway ``Formatter`` per call.

For callers that do not want to keep a ``Formatter`` around. ``settings``
may be ``None`` to use the defaults; validation and errors are those of the
matching ``Formatter`` method.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from value_formatter.application.formatter import Formatter
from value_formatter.domain.models.settings import FormatSettings, default_settings


def _formatter(settings: Optional[FormatSettings]) -> Formatter:
    return Formatter(settings if settings is not None else default_settings())


def date_to_date_string(settings: Optional[FormatSettings], value: Optional[date]) -> str:
    """Convert a date to a date string."""
    return _formatter(settings).date_to_date_string(value)


def date_to_date_time_string(
    settings: Optional[FormatSettings],
    value: Optional[date],
    use_timezone: bool = True,
) -> str:
    """Convert a date to a date time string, optionally in the settings' timezone."""
    return _formatter(settings).date_to_date_time_string(value, use_timezone)


def number_to_number_string(settings: Optional[FormatSettings], value: Any) -> str:
    """Convert a number to a grouped number string."""
    return _formatter(settings).number_to_number_string(value)


def number_to_money_string(settings: Optional[FormatSettings], value: Any) -> str:
    """Convert a number to a money string (rounded, grouped, with symbol)."""
    return _formatter(settings).number_to_money_string(value)
