"""Settings bundle for value formatting.

This module defines the ``FormatSettings`` Pydantic model that drives every
conversion (date and date-time patterns, timezone, money and number rules),
the ``SettingsPatch`` shape used for partial updates, and the
``default_settings()`` factory.

Field names are snake_case; camelCase keys (``dateFormat``,
``moneySettings``, ...) are accepted when validating mappings, as are the
legacy ``decimalSeperationSymbol`` / ``digitSeperationSymbol`` keys. Unknown
keys are rejected at every level.
"""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from value_formatter.domain.models.enums import (
    DecimalSeparator,
    DigitSeparator,
    SymbolLocation,
)

DEFAULT_DATE_FORMAT = "DD/MM/YYYY"
DEFAULT_DATE_TIME_FORMAT = "DD/MM/YYYY HH:mm:ss"
DEFAULT_TIMEZONE = "UTC"


class _SettingsBase(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="forbid",
    )


# ---------------------------------------------------------------------------
# Sub-models
# ---------------------------------------------------------------------------


class MoneySettings(_SettingsBase):
    """How money amounts are rounded and labelled."""

    symbol: str = Field(
        default="€",
        description="Currency symbol or text.",
    )
    symbol_location: SymbolLocation = Field(
        default=SymbolLocation.BEFORE,
        description="Whether the symbol precedes or follows the amount.",
    )
    decimals: int = Field(
        default=2,
        ge=0,
        description="Number of fractional digits money values are rounded to.",
    )


class NumberSettings(_SettingsBase):
    """Separators used when rendering numbers."""

    decimal_separator: DecimalSeparator = Field(
        default=DecimalSeparator.COMMA,
        validation_alias=AliasChoices(
            "decimalSeparator", "decimalSeperationSymbol", "decimal_separator"
        ),
        description="Separates the integer part from the fractional part.",
    )
    digit_separator: DigitSeparator = Field(
        default=DigitSeparator.DOT,
        validation_alias=AliasChoices(
            "digitSeparator", "digitSeperationSymbol", "digit_separator"
        ),
        description="Separates groups of three integer digits.",
    )


# ---------------------------------------------------------------------------
# Root settings model
# ---------------------------------------------------------------------------


class FormatSettings(_SettingsBase):
    """Root settings bundle owned by a ``Formatter``."""

    date_format: str = Field(
        default=DEFAULT_DATE_FORMAT,
        description="Pattern used for plain dates.",
    )
    date_time_format: str = Field(
        default=DEFAULT_DATE_TIME_FORMAT,
        description="Pattern used for date-times.",
    )
    timezone: str = Field(
        default=DEFAULT_TIMEZONE,
        description="IANA timezone identifier date-times are converted into.",
    )
    money_settings: MoneySettings = Field(default_factory=MoneySettings)
    number_settings: NumberSettings = Field(default_factory=NumberSettings)


class SettingsPatch(_SettingsBase):
    """Partial settings update — ``None`` marks a field as absent."""

    date_format: Optional[str] = None
    date_time_format: Optional[str] = None
    timezone: Optional[str] = None
    money_settings: Optional[MoneySettings] = None
    number_settings: Optional[NumberSettings] = None

    @classmethod
    def from_settings(cls, settings: FormatSettings) -> SettingsPatch:
        """Build a patch in which every field of *settings* is present."""
        return cls(
            date_format=settings.date_format,
            date_time_format=settings.date_time_format,
            timezone=settings.timezone,
            money_settings=settings.money_settings.model_copy(),
            number_settings=settings.number_settings.model_copy(),
        )


def default_settings() -> FormatSettings:
    """Return a fresh default settings bundle.

    Every call builds new objects, so mutating one result is never visible
    through another.
    """
    return FormatSettings(
        date_format=DEFAULT_DATE_FORMAT,
        date_time_format=DEFAULT_DATE_TIME_FORMAT,
        timezone=DEFAULT_TIMEZONE,
        money_settings=MoneySettings(),
        number_settings=NumberSettings(),
    )
