"""Decimal helpers for monetary amounts and weights.

All currency and weight arithmetic goes through ``Decimal``; binary floats are
only accepted at the boundary and converted through their string form.
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from protean.exceptions import ValidationError

ZERO = Decimal("0")
CENT = Decimal("0.01")


def to_decimal(value, field: str = "amount") -> Decimal:
    """Coerce ``value`` to ``Decimal``.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")`` rather than
    its binary expansion.
    """
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        raise ValidationError({field: [f"Invalid {field}: {value!r}"]})
    elif isinstance(value, int | str):
        try:
            result = Decimal(value)
        except InvalidOperation:
            raise ValidationError({field: [f"Invalid {field}: {value!r}"]}) from None
    elif isinstance(value, float):
        result = Decimal(str(value))
    else:
        raise ValidationError({field: [f"Invalid {field}: {value!r}"]})

    if not result.is_finite():
        raise ValidationError({field: [f"Invalid {field}: {value!r}"]})
    return result


def round_half_up(value: Decimal) -> Decimal:
    """Quantize to two decimal places, rounding half away from zero."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def divide(dividend: Decimal, divisor: Decimal | int) -> Decimal:
    """Divide and round the quotient to two decimal places, half-up."""
    return round_half_up(dividend / Decimal(divisor))
