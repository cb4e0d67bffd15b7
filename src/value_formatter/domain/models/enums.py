"""Enumerations for number and money formatting."""

from enum import Enum


class SymbolLocation(str, Enum):
    """Side of the amount the currency symbol is placed on."""

    BEFORE = "BEFORE"  # €5,00
    AFTER = "AFTER"  # 5,00€


class DecimalSeparator(str, Enum):
    """Symbol between the integer and the fractional part."""

    DOT = "."
    COMMA = ","


class DigitSeparator(str, Enum):
    """Symbol between groups of three integer digits."""

    NONE = "NONE"
    DOT = "."
    COMMA = ","

    @property
    def joiner(self) -> str:
        """Text inserted between digit groups (empty for ``NONE``)."""
        return "" if self is DigitSeparator.NONE else self.value
