"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation

from hledger_bridge.domain.errors import ReportParseError

MANTISSA_KEY = "decimalMantissa"
PLACES_KEY = "decimalPlaces"


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from JSON or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def decimal_from_mantissa(mantissa: int, places: int) -> Decimal:
    """Return ``mantissa * 10 ** -places`` without any rounding.

    The value is assembled from its digit tuple so that mantissas longer
    than the context precision are kept intact.
    """
    sign, digits, _ = Decimal(mantissa).as_tuple()
    return Decimal((sign, digits, -places))


def _is_integer(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def decode_quantity(value) -> Decimal:
    """Decode any of hledger's quantity encodings into an exact Decimal.

    Supported encodings, tried in order:

    - ``{"decimalMantissa": m, "decimalPlaces": p}``: exact ``m * 10**-p``,
      for any integer ``p`` (negative places scale the mantissa up);
    - a JSON number (int, Decimal or float);
    - a decimal string such as ``"20.50"``.

    Args:
        value: Decoded JSON value.

    Returns:
        Decimal: The quantity.

    Raises:
        ReportParseError: When the value has none of the supported shapes
            or is not a finite number.
    """
    if isinstance(value, dict):
        mantissa = value.get(MANTISSA_KEY)
        if _is_integer(mantissa):
            places = value.get(PLACES_KEY)
            if places is None:
                places = 0
            elif not _is_integer(places):
                raise ReportParseError(f"Invalid {PLACES_KEY}: {places!r}")
            return decimal_from_mantissa(mantissa, places)
        raise ReportParseError("Unknown decimal format")
    if isinstance(value, bool):
        raise ReportParseError("Unknown decimal format")
    if isinstance(value, (int, float, Decimal)):
        result = coerce_decimal(value)
        if not result.is_finite():
            raise ReportParseError("Invalid decimal number")
        return result
    if isinstance(value, str):
        try:
            result = Decimal(value)
        except InvalidOperation:
            raise ReportParseError(
                f"Invalid decimal string: {value!r}"
            ) from None
        if not result.is_finite():
            raise ReportParseError(f"Invalid decimal string: {value!r}")
        return result
    raise ReportParseError("Unknown decimal format")


__all__ = [
    "coerce_decimal",
    "decimal_from_mantissa",
    "decode_quantity",
    "MANTISSA_KEY",
    "PLACES_KEY",
]
