"""Domain models — public API.

Provides convenient imports for the settings bundle and its enums.
"""

from value_formatter.domain.models.enums import (
    DecimalSeparator,
    DigitSeparator,
    SymbolLocation,
)
from value_formatter.domain.models.settings import (
    FormatSettings,
    MoneySettings,
    NumberSettings,
    SettingsPatch,
    default_settings,
)

__all__ = [
    # Enums
    "DecimalSeparator",
    "DigitSeparator",
    "SymbolLocation",
    # Settings
    "FormatSettings",
    "MoneySettings",
    "NumberSettings",
    "SettingsPatch",
    "default_settings",
]
