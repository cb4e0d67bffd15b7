"""Arrow backend — implements DateTimePort with the ``arrow`` library.

Patterns use arrow's moment-style tokens (``DD/MM/YYYY HH:mm:ss``). Naive
datetimes and plain dates are interpreted as UTC, which is arrow's default.
"""

from __future__ import annotations

import logging
from datetime import date, tzinfo
from typing import Callable

import arrow
from arrow.parser import TzinfoParser

from value_formatter.domain.errors import ConfigurationError, InvalidValueError
from value_formatter.domain.ports.date_time_port import DateTimePort

logger = logging.getLogger(__name__)

_DEFAULT_LOCALE = "en-us"

# One morning and one afternoon moment, days kept below 29 so every variant
# below stays a real date.
_REFERENCE_MOMENTS = (
    arrow.Arrow(2001, 2, 3, 4, 5, 6),
    arrow.Arrow(2012, 11, 22, 15, 16, 17),
)

# (field, replacement) pairs; a pattern carries a field when some replacement
# changes the rendered text. Hour +12 catches AM/PM-only patterns.
_FIELD_VARIANTS: tuple[tuple[str, Callable[[int], int]], ...] = (
    ("year", lambda v: v + 1),
    ("month", lambda v: v % 12 + 1),
    ("day", lambda v: v % 28 + 1),
    ("hour", lambda v: (v + 1) % 24),
    ("hour", lambda v: (v + 12) % 24),
    ("minute", lambda v: (v + 1) % 60),
    ("second", lambda v: (v + 1) % 60),
)


class ArrowDateTimeBackend(DateTimePort):
    """Format and validate date values through ``arrow``.

    Parameters
    ----------
    locale : str
        Arrow locale used for month/day names (``MMMM``, ``dddd``, ...).
    """

    def __init__(self, locale: str = _DEFAULT_LOCALE) -> None:
        self._locale = locale

    @property
    def locale(self) -> str:
        return self._locale

    # -- Validation ----------------------------------------------------------

    def is_valid(self, value: date) -> bool:
        """A date is valid when arrow can wrap it and resolve its UTC offset."""
        if not isinstance(value, date):
            return False
        try:
            arrow.get(value).timestamp()
        except (ValueError, OverflowError, TypeError) as exc:
            logger.debug("Rejected date value %r: %s", value, exc)
            return False
        return True

    def is_strict_pattern_valid(self, pattern: str) -> bool:
        """Check that *pattern* formats and parses back to an equal value.

        Each reference moment is rendered with *pattern* and parsed back. The
        parsed value must re-render to the identical string and must equal
        the moment on every field the pattern carries, so lossy patterns
        such as ``hh:mm`` without ``A`` are rejected. A pattern that carries
        no field at all is rejected too.
        """
        if not pattern:
            return False

        try:
            carries_any = False
            for moment in _REFERENCE_MOMENTS:
                rendered = self._render(moment, pattern)
                carried = self._carried_fields(moment, pattern, rendered)
                carries_any = carries_any or bool(carried)

                parsed = arrow.get(rendered, pattern, locale=self._locale)
                if self._render(parsed, pattern) != rendered:
                    return False
                for name in carried:
                    if getattr(parsed, name) != getattr(moment, name):
                        logger.debug("Pattern %r loses the %s field", pattern, name)
                        return False
        except (ValueError, TypeError) as exc:
            logger.debug("Pattern %r failed strict round trip: %s", pattern, exc)
            return False
        return carries_any

    def _render(self, moment: arrow.Arrow, pattern: str) -> str:
        return moment.format(pattern, locale=self._locale)

    def _carried_fields(self, moment: arrow.Arrow, pattern: str, rendered: str) -> set[str]:
        carried: set[str] = set()
        for name, replace in _FIELD_VARIANTS:
            variant = moment.replace(**{name: replace(getattr(moment, name))})
            if self._render(variant, pattern) != rendered:
                carried.add(name)
        return carried

    # -- Formatting ----------------------------------------------------------

    def format(self, value: date, pattern: str) -> str:
        try:
            return arrow.get(value).format(pattern, locale=self._locale)
        except (ValueError, OverflowError) as exc:
            raise InvalidValueError(f"Cannot format date {value!r}: {exc}") from exc

    def format_in_timezone(self, value: date, timezone: str, pattern: str) -> str:
        target = self._resolve_timezone(timezone)
        try:
            converted = arrow.get(value).to(target)
        except (ValueError, OverflowError) as exc:
            raise InvalidValueError(
                f"Cannot convert date {value!r} to timezone '{timezone}': {exc}"
            ) from exc
        return converted.format(pattern, locale=self._locale)

    @staticmethod
    def _resolve_timezone(timezone: str) -> tzinfo:
        try:
            return TzinfoParser.parse(timezone)
        except ValueError as exc:
            raise ConfigurationError(f"Unknown timezone '{timezone}'.") from exc
