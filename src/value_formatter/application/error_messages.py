"""User-friendly error messages for settings validation errors.

Belongs to the Application layer — translates Pydantic machine errors
raised while validating a settings mapping into readable messages.
"""

from __future__ import annotations

from typing import Any

from pydantic.alias_generators import to_camel

# Maps (field, error_type) → message
_ERROR_MAP: dict[tuple[str, str], str] = {
    ("moneySettings.symbolLocation", "enum"): (
        "Invalid money symbol location. Expected: BEFORE or AFTER."
    ),
    ("moneySettings.decimals", "greater_than_equal"): (
        "Money decimals must be zero or a positive whole number."
    ),
    ("moneySettings.decimals", "int_parsing"): (
        "Money decimals must be a whole number (e.g., 2)."
    ),
    ("numberSettings.decimalSeparator", "enum"): (
        "Invalid decimal separator. Expected: '.' or ','."
    ),
    ("numberSettings.digitSeparator", "enum"): (
        "Invalid digit separator. Expected: 'NONE', '.' or ','."
    ),
    ("dateFormat", "string_type"): "The date format must be a text pattern.",
    ("dateTimeFormat", "string_type"): "The date time format must be a text pattern.",
    ("timezone", "string_type"): "The timezone must be an identifier such as 'Europe/Brussels'.",
}


# Legacy key spellings → canonical camelCase key
_LEGACY_KEYS: dict[str, str] = {
    "decimalSeperationSymbol": "decimalSeparator",
    "digitSeperationSymbol": "digitSeparator",
}


def _canonical_part(part: str) -> str:
    if part in _LEGACY_KEYS:
        return _LEGACY_KEYS[part]
    return to_camel(part) if "_" in part else part


def _canonical_field(loc: tuple[Any, ...] | list[Any]) -> str:
    """Dotted camelCase path for an error location."""
    return ".".join(_canonical_part(str(part)) for part in loc)


def friendly_error(
    field: str,
    error_type: str,
    fallback: str | None = None,
) -> str:
    """Return a user-friendly error message.

    Args:
        field: Dotted camelCase path of the field that failed validation.
        error_type: The Pydantic error type string (e.g., ``enum``).
        fallback: Fallback message if no mapping exists.

    Returns:
        A user-friendly error string.
    """
    message = _ERROR_MAP.get((field, error_type))
    if message:
        return message
    return fallback or f"Validation error on field '{field}'."


def format_validation_errors(errors: list[dict[str, Any]]) -> list[str]:
    """Convert a list of Pydantic error dicts to user-friendly messages.

    Args:
        errors: Output of ``ValidationError.errors()``.

    Returns:
        List of user-friendly error strings.
    """
    result: list[str] = []
    for err in errors:
        field = _canonical_field(err.get("loc", ()))
        error_type = err.get("type", "")
        msg = friendly_error(field, error_type, fallback=err.get("msg"))
        result.append(f"{field}: {msg}" if field else msg)
    return result
