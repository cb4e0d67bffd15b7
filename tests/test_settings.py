"""Tests for the settings bundle.

Covers:
- FormatSettings / sub-model defaults and validation
- default_settings() independence
- camelCase mappings and backfilling of omitted fields
- SettingsPatch shape
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

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


# ── Model Tests ───────────────────────────────────────────────────────────


class TestFormatSettingsModel:
    """Tests for the FormatSettings Pydantic model."""

    def test_defaults(self) -> None:
        settings = FormatSettings()
        assert settings.date_format == "DD/MM/YYYY"
        assert settings.date_time_format == "DD/MM/YYYY HH:mm:ss"
        assert settings.timezone == "UTC"
        assert settings.money_settings.decimals == 2
        assert settings.money_settings.symbol == "€"
        assert settings.money_settings.symbol_location == SymbolLocation.BEFORE
        assert settings.number_settings.decimal_separator == DecimalSeparator.COMMA
        assert settings.number_settings.digit_separator == DigitSeparator.DOT

    def test_custom_values(self) -> None:
        settings = FormatSettings(
            date_format="YYYY-MM-DD",
            timezone="Europe/Brussels",
            money_settings=MoneySettings(
                symbol="$",
                symbol_location=SymbolLocation.AFTER,
                decimals=0,
            ),
            number_settings=NumberSettings(
                decimal_separator=DecimalSeparator.DOT,
                digit_separator=DigitSeparator.NONE,
            ),
        )
        assert settings.date_format == "YYYY-MM-DD"
        assert settings.timezone == "Europe/Brussels"
        assert settings.money_settings.symbol_location == SymbolLocation.AFTER
        assert settings.number_settings.digit_separator == DigitSeparator.NONE

    def test_camel_case_mapping(self) -> None:
        settings = FormatSettings.model_validate(
            {
                "dateFormat": "YYYY/MM/DD",
                "moneySettings": {"symbol": "CHF", "symbolLocation": "AFTER", "decimals": 2},
                "numberSettings": {"decimalSeparator": ".", "digitSeparator": "NONE"},
            }
        )
        assert settings.date_format == "YYYY/MM/DD"
        assert settings.money_settings.symbol == "CHF"
        assert settings.money_settings.symbol_location == SymbolLocation.AFTER
        assert settings.number_settings.digit_separator == DigitSeparator.NONE

    def test_legacy_separator_keys(self) -> None:
        settings = FormatSettings.model_validate(
            {"numberSettings": {"decimalSeperationSymbol": ".", "digitSeperationSymbol": "NONE"}}
        )
        assert settings.number_settings.decimal_separator == DecimalSeparator.DOT
        assert settings.number_settings.digit_separator == DigitSeparator.NONE

    def test_misspelt_nested_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FormatSettings.model_validate({"moneySettings": {"symbl": "$"}})

    def test_unknown_top_level_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FormatSettings.model_validate({"dateFmt": "YYYY-MM-DD"})

    def test_omitted_fields_are_backfilled(self) -> None:
        settings = FormatSettings.model_validate({"timezone": "Asia/Tokyo"})
        assert settings.timezone == "Asia/Tokyo"
        assert settings.date_format == "DD/MM/YYYY"
        assert settings.money_settings == MoneySettings()
        assert settings.number_settings == NumberSettings()

    def test_negative_decimals_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MoneySettings(decimals=-1)

    def test_unknown_symbol_location_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MoneySettings(symbol_location="LEFT")

    def test_unknown_separator_rejected(self) -> None:
        with pytest.raises(ValidationError):
            NumberSettings(decimal_separator=" ")
        with pytest.raises(ValidationError):
            NumberSettings(digit_separator="_")

    def test_assignment_is_validated(self) -> None:
        settings = MoneySettings()
        with pytest.raises(ValidationError):
            settings.decimals = -3

    def test_serialization_roundtrip(self) -> None:
        original = default_settings()
        data = original.model_dump(mode="json", by_alias=True)
        restored = FormatSettings.model_validate(data)
        assert restored == original
        assert "moneySettings" in data


class TestDigitSeparator:
    def test_none_joins_with_empty_string(self) -> None:
        assert DigitSeparator.NONE.joiner == ""

    def test_symbols_join_with_themselves(self) -> None:
        assert DigitSeparator.DOT.joiner == "."
        assert DigitSeparator.COMMA.joiner == ","


# ── Factory Tests ─────────────────────────────────────────────────────────


class TestDefaultSettings:
    """default_settings() must hand out independent bundles."""

    def test_matches_model_defaults(self) -> None:
        assert default_settings() == FormatSettings()

    def test_returns_new_instance_each_call(self) -> None:
        first = default_settings()
        second = default_settings()
        assert first is not second
        assert first.money_settings is not second.money_settings
        assert first.number_settings is not second.number_settings

    def test_mutation_does_not_leak(self) -> None:
        first = default_settings()
        first.date_format = "YYYY"
        first.money_settings.symbol = "$"

        second = default_settings()
        assert second.date_format == "DD/MM/YYYY"
        assert second.money_settings.symbol == "€"


# ── Patch Tests ───────────────────────────────────────────────────────────


class TestSettingsPatch:
    def test_all_fields_absent_by_default(self) -> None:
        patch = SettingsPatch()
        assert patch.date_format is None
        assert patch.date_time_format is None
        assert patch.timezone is None
        assert patch.money_settings is None
        assert patch.number_settings is None

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SettingsPatch.model_validate({"dateFromat": "DD/MM/YYYY"})

    def test_partial_money_settings_backfilled_from_defaults(self) -> None:
        patch = SettingsPatch.model_validate({"moneySettings": {"symbol": "$"}})
        assert patch.money_settings == MoneySettings(symbol="$")

    def test_from_settings_marks_every_field_present(self) -> None:
        settings = default_settings()
        patch = SettingsPatch.from_settings(settings)
        assert patch.date_format == settings.date_format
        assert patch.date_time_format == settings.date_time_format
        assert patch.timezone == settings.timezone
        assert patch.money_settings == settings.money_settings
        assert patch.number_settings == settings.number_settings
