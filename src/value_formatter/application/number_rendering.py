"""Number rendering — coercion, decimal splitting and digit grouping.

Belongs to the Application layer. Values are reduced to a sign flag, the
integer digits and the (optional) fractional digits of their plain decimal
notation; grouping and separators are applied only when the parts are joined
back together.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any, Optional

from value_formatter.domain.errors import InvalidValueError
from value_formatter.domain.models.settings import NumberSettings

_GROUP_SIZE = 3


@dataclass(frozen=True)
class NumberParts:
    """A number split into sign, integer digits and fractional digits."""

    negative: bool
    integer_digits: str
    fraction_digits: Optional[str] = None


# ---------------------------------------------------------------------------
# Coercion
# ---------------------------------------------------------------------------


def _invalid(value: Any) -> InvalidValueError:
    return InvalidValueError(f"The given value is not a valid number: {value!r}")


def _float_text(value: float) -> str:
    """Plain decimal text of a finite, non-negative float.

    Integral floats drop their fractional part; others use the shortest
    round-tripping digits, expanded out of exponent notation.
    """
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


def to_decimal_text(value: Any) -> tuple[bool, str]:
    """Coerce *value* and return ``(negative, absolute decimal text)``.

    Raises:
        InvalidValueError: If *value* is not a finite number or numeric string.
    """
    if isinstance(value, bool):
        raise _invalid(value)

    if isinstance(value, int):
        return value < 0, str(abs(value))

    if isinstance(value, Decimal):
        if not value.is_finite():
            raise _invalid(value)
        return value < 0, format(abs(value), "f")

    if isinstance(value, str):
        if not value.strip():
            raise _invalid(value)
        try:
            number = float(value)
        except ValueError as exc:
            raise _invalid(value) from exc
    elif isinstance(value, numbers.Real):
        number = float(value)
    else:
        raise _invalid(value)

    if not math.isfinite(number):
        raise _invalid(value)
    return number < 0, _float_text(abs(number))


def split_number(value: Any) -> NumberParts:
    """Split *value* into sign, integer digits and fractional digits."""
    negative, text = to_decimal_text(value)
    integer_digits, _, fraction_digits = text.partition(".")
    return NumberParts(negative, integer_digits, fraction_digits if "." in text else None)


def round_number(value: Any, decimals: int) -> NumberParts:
    """Round *value* half-up to exactly *decimals* fractional digits."""
    negative, text = to_decimal_text(value)
    exponent = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, len(text) + decimals + 1)
        try:
            rounded = Decimal(text).quantize(exponent, rounding=ROUND_HALF_UP)
        except InvalidOperation as exc:
            raise _invalid(value) from exc

    integer_digits, _, fraction_digits = format(rounded, "f").partition(".")
    # A value that rounds to zero loses its sign.
    negative = negative and rounded != 0
    return NumberParts(negative, integer_digits, fraction_digits if decimals > 0 else None)


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------


def group_digits(digits: str, separator: str) -> str:
    """Insert *separator* between groups of three digits, counted from the right.

    E.g. ``group_digits("1234567", ".")`` → ``"1.234.567"``.
    """
    reversed_digits = digits[::-1]
    chunks = [
        reversed_digits[i : i + _GROUP_SIZE]
        for i in range(0, len(reversed_digits), _GROUP_SIZE)
    ]
    return separator.join(chunks)[::-1]


def join_parts(parts: NumberParts, settings: NumberSettings) -> str:
    """Render *parts* with the separators from *settings*.

    Fractional digits are appended verbatim: never grouped, never rounded.
    """
    text = group_digits(parts.integer_digits, settings.digit_separator.joiner)
    if parts.negative:
        text = "-" + text
    if parts.fraction_digits is not None:
        text += settings.decimal_separator.value + parts.fraction_digits
    return text
