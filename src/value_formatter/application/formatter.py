"""Formatter — converts dates and numbers into display strings.

A ``Formatter`` owns one ``FormatSettings`` bundle. Conversions read the
current bundle; date work is delegated to a ``DateTimePort`` backend while
number grouping and money assembly are done here.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any, Optional, Union

from pydantic import ValidationError

from value_formatter.application.error_messages import format_validation_errors
from value_formatter.application.number_rendering import (
    join_parts,
    round_number,
    split_number,
)
from value_formatter.domain.errors import (
    ConfigurationError,
    InvalidValueError,
    TypeArgumentError,
)
from value_formatter.domain.models.enums import SymbolLocation
from value_formatter.domain.models.settings import (
    FormatSettings,
    SettingsPatch,
    default_settings,
)
from value_formatter.domain.ports.date_time_port import DateTimePort
from value_formatter.infrastructure.date_time.arrow_backend import ArrowDateTimeBackend

logger = logging.getLogger(__name__)

PatchLike = Union[SettingsPatch, FormatSettings, Mapping[str, Any]]


def _validation_message(prefix: str, exc: ValidationError) -> str:
    return prefix + " " + "; ".join(format_validation_errors(exc.errors()))


class Formatter:
    """Locale-aware formatter for dates, date-times, numbers and money.

    Parameters
    ----------
    settings : FormatSettings | Mapping | None
        Settings to own. ``None`` uses ``default_settings()``. A
        ``FormatSettings`` instance is owned as given, without pattern
        validation; a mapping is validated into one.
    backend : DateTimePort | None
        Date/time collaborator. Defaults to ``ArrowDateTimeBackend``.
    """

    def __init__(
        self,
        settings: Optional[Union[FormatSettings, Mapping[str, Any]]] = None,
        backend: Optional[DateTimePort] = None,
    ) -> None:
        if settings is None:
            settings = default_settings()
        elif isinstance(settings, Mapping):
            try:
                settings = FormatSettings.model_validate(dict(settings))
            except ValidationError as exc:
                raise ConfigurationError(
                    _validation_message("The given settings are invalid:", exc)
                ) from exc
        self._settings: FormatSettings = settings
        self._backend: DateTimePort = backend or ArrowDateTimeBackend()

    # -- Settings ------------------------------------------------------------

    @property
    def settings(self) -> FormatSettings:
        """A copy of the current settings (see :meth:`get_settings`)."""
        return self.get_settings()

    @settings.setter
    def settings(self, patch: Optional[PatchLike]) -> None:
        self.set_settings(patch)

    def get_settings(self) -> FormatSettings:
        """Return a deep copy of the current settings.

        Changes to the returned object do not affect this formatter; use
        :meth:`set_settings` so that patterns are validated.
        """
        return self._settings.model_copy(deep=True)

    def set_settings(self, patch: Optional[PatchLike]) -> None:
        """Apply a partial settings update.

        Present fields are validated and committed one by one, in the order
        date format, date time format, money settings, number settings,
        timezone. The first invalid field raises; fields before it stay
        committed and fields after it are not applied. Money and number
        settings replace the whole sub-object.

        Raises:
            ConfigurationError: If *patch* is ``None`` or malformed, or a
                date pattern is not a strict pattern.
        """
        if patch is None:
            raise ConfigurationError("Settings are required to set the settings!")

        patch = self._coerce_patch(patch)

        if patch.date_format is not None:
            if not self._backend.is_strict_pattern_valid(patch.date_format):
                raise ConfigurationError(
                    f"The given date format is invalid: {patch.date_format!r}"
                )
            self._settings.date_format = patch.date_format
            logger.debug("Date format set to %r", patch.date_format)

        if patch.date_time_format is not None:
            if not self._backend.is_strict_pattern_valid(patch.date_time_format):
                raise ConfigurationError(
                    f"The given date time format is invalid: {patch.date_time_format!r}"
                )
            self._settings.date_time_format = patch.date_time_format
            logger.debug("Date time format set to %r", patch.date_time_format)

        if patch.money_settings is not None:
            self._settings.money_settings = patch.money_settings.model_copy()
            logger.debug("Money settings replaced: %s", patch.money_settings)

        if patch.number_settings is not None:
            self._settings.number_settings = patch.number_settings.model_copy()
            logger.debug("Number settings replaced: %s", patch.number_settings)

        if patch.timezone is not None:
            self._settings.timezone = patch.timezone
            logger.debug("Timezone set to %r", patch.timezone)

    @staticmethod
    def _coerce_patch(patch: PatchLike) -> SettingsPatch:
        if isinstance(patch, SettingsPatch):
            return patch
        if isinstance(patch, FormatSettings):
            return SettingsPatch.from_settings(patch)
        if isinstance(patch, Mapping):
            try:
                return SettingsPatch.model_validate(dict(patch))
            except ValidationError as exc:
                raise ConfigurationError(
                    _validation_message("The given settings update is invalid:", exc)
                ) from exc
        raise ConfigurationError(
            f"Settings must be a SettingsPatch, FormatSettings or mapping, "
            f"got {type(patch).__name__}."
        )

    # -- Dates ---------------------------------------------------------------

    def _check_date(self, value: Any) -> None:
        if not isinstance(value, date):
            raise TypeArgumentError(
                f"The given value is not of type date: {type(value).__name__}"
            )
        if not self._backend.is_valid(value):
            raise InvalidValueError(f"The given date is not valid: {value!r}")

    def date_to_date_string(self, value: Optional[date]) -> str:
        """Convert a date to a date string using the date format.

        Returns ``""`` for ``None``. No timezone conversion is applied.

        Raises:
            TypeArgumentError: If *value* is not a ``date``/``datetime``.
            InvalidValueError: If the backend rejects *value*.
        """
        if value is None:
            return ""
        self._check_date(value)
        return self._backend.format(value, self._settings.date_format)

    def date_to_date_time_string(
        self,
        value: Optional[date],
        use_timezone: bool = True,
    ) -> str:
        """Convert a date to a date time string using the date time format.

        With *use_timezone* the value is first converted into the configured
        timezone (naive values count as UTC); without it the wall-clock
        fields are formatted as given.

        Raises:
            TypeArgumentError: If *value* is not a ``date``/``datetime``.
            InvalidValueError: If the backend rejects *value*.
            ConfigurationError: If the configured timezone is unknown.
        """
        if value is None:
            return ""
        self._check_date(value)
        if use_timezone:
            return self._backend.format_in_timezone(
                value,
                self._settings.timezone,
                self._settings.date_time_format,
            )
        return self._backend.format(value, self._settings.date_time_format)

    # -- Numbers -------------------------------------------------------------

    def number_to_number_string(self, value: Any) -> str:
        """Convert a number to a grouped number string.

        Integer digits are grouped by three from the right; fractional
        digits are kept verbatim. Returns ``""`` for ``None``.

        Raises:
            InvalidValueError: If *value* is not a finite number.
        """
        if value is None:
            return ""
        return join_parts(split_number(value), self._settings.number_settings)

    def number_to_money_string(self, value: Any) -> str:
        """Convert a number to a money string.

        The value is rounded half-up to the money decimals, grouped like
        :meth:`number_to_number_string` and labelled with the symbol.
        Returns ``""`` for ``None``.

        Raises:
            InvalidValueError: If *value* is not a finite number.
            ConfigurationError: If the symbol location is unknown.
        """
        if value is None:
            return ""

        money = self._settings.money_settings
        amount = join_parts(
            round_number(value, money.decimals),
            self._settings.number_settings,
        )

        if money.symbol_location == SymbolLocation.BEFORE:
            return money.symbol + amount
        if money.symbol_location == SymbolLocation.AFTER:
            return amount + money.symbol
        raise ConfigurationError(
            f"Unknown money symbol location: {money.symbol_location!r}"
        )
