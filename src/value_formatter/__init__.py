"""value_formatter — locale-aware date, number and money formatting."""

from value_formatter.application.conversions import (
    date_to_date_string,
    date_to_date_time_string,
    number_to_money_string,
    number_to_number_string,
)
from value_formatter.application.formatter import Formatter
from value_formatter.domain.errors import (
    ConfigurationError,
    InvalidValueError,
    TypeArgumentError,
    ValueFormatterError,
)
from value_formatter.domain.models import (
    DecimalSeparator,
    DigitSeparator,
    FormatSettings,
    MoneySettings,
    NumberSettings,
    SettingsPatch,
    SymbolLocation,
    default_settings,
)

__all__ = [
    # Formatter
    "Formatter",
    # Stateless conversions
    "date_to_date_string",
    "date_to_date_time_string",
    "number_to_money_string",
    "number_to_number_string",
    # Settings
    "DecimalSeparator",
    "DigitSeparator",
    "FormatSettings",
    "MoneySettings",
    "NumberSettings",
    "SettingsPatch",
    "SymbolLocation",
    "default_settings",
    # Errors
    "ConfigurationError",
    "InvalidValueError",
    "TypeArgumentError",
    "ValueFormatterError",
]

__version__ = "0.1.0"
