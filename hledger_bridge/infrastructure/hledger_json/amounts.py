"""Parsers for hledger amount objects.

An amount object looks like::

    {"acommodity": "$",
     "aquantity": {"decimalMantissa": 10000, "decimalPlaces": 2},
     "aprice": {"tag": "UnitPrice", "contents": {...amount...}},
     "astyle": {...}}
"""

from decimal import Decimal

from hledger_bridge.domain.models import (
    Amount,
    AmountStyle,
    DigitGroupStyle,
    Price,
    PrintAmount,
)
from hledger_bridge.utils.decimal_utils import decode_quantity

from .fields import as_list, get_bool, get_optional_str, get_str

COMMODITY_KEY = "acommodity"
QUANTITY_KEY = "aquantity"
PRICE_KEY = "aprice"
STYLE_KEY = "astyle"


def parse_quantity(obj: dict) -> Decimal:
    """Return the amount quantity, zero when absent or null."""
    raw = obj.get(QUANTITY_KEY)
    if raw is None:
        return Decimal("0")
    return decode_quantity(raw)


def _price_from_contents(envelope: dict) -> dict | None:
    contents = envelope.get("contents")
    return contents if isinstance(contents, dict) else None


def _price_from_legacy_field(envelope: dict) -> dict | None:
    legacy = envelope.get("priceAmount")
    return legacy if isinstance(legacy, dict) else None


_PRICE_STRATEGIES = (_price_from_contents, _price_from_legacy_field)


def parse_price(value) -> Price | None:
    """Extract the conversion price of an amount.

    The tagged ``contents`` envelope is tried first, then the legacy flat
    ``priceAmount`` field. Any other shape means no price.

    Args:
        value: Raw ``aprice`` value.

    Returns:
        Price | None: The price, or None when none is recorded.
    """
    if not isinstance(value, dict):
        return None
    for strategy in _PRICE_STRATEGIES:
        amount_obj = strategy(value)
        if amount_obj is not None:
            return Price(
                commodity=get_str(amount_obj, COMMODITY_KEY),
                quantity=parse_quantity(amount_obj),
            )
    return None


def parse_amount(obj: dict) -> Amount:
    return Amount(
        commodity=get_str(obj, COMMODITY_KEY),
        quantity=parse_quantity(obj),
        price=parse_price(obj.get(PRICE_KEY)),
    )


def parse_amounts(value) -> list[Amount]:
    """Parse an amount list; non-object entries are skipped."""
    return [
        parse_amount(item) for item in as_list(value) if isinstance(item, dict)
    ]


def _parse_digit_groups(value) -> DigitGroupStyle | None:
    # hledger encodes digit groups as [separator, [sizes...]].
    if isinstance(value, str):
        return DigitGroupStyle(separator=value)
    if isinstance(value, list) and value and isinstance(value[0], str):
        sizes = value[1] if len(value) > 1 else []
        return DigitGroupStyle(
            separator=value[0],
            group_sizes=tuple(
                size
                for size in as_list(sizes)
                if isinstance(size, int) and not isinstance(size, bool)
            ),
        )
    return None


def _parse_precision(value, default: int) -> int:
    # Newer hledger versions wrap the precision: {"tag": "Precision", "contents": 2}.
    if isinstance(value, dict):
        value = value.get("contents")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return default
    return value


def parse_amount_style(value) -> AmountStyle:
    """Parse an ``astyle`` object; other shapes give the default style."""
    default = AmountStyle()
    if not isinstance(value, dict):
        return default
    return AmountStyle(
        commodity_side=get_str(value, "ascommodityside", default.commodity_side),
        commodity_spaced=get_bool(value, "ascommodityspaced"),
        decimal_mark=(
            get_optional_str(value, "asdecimalmark")
            if "asdecimalmark" in value
            else default.decimal_mark
        ),
        digit_groups=_parse_digit_groups(value.get("asdigitgroups")),
        precision=_parse_precision(value.get("asprecision"), default.precision),
        rounding=get_str(value, "asrounding", default.rounding),
    )


def parse_print_amount(obj: dict) -> PrintAmount:
    amount = parse_amount(obj)
    return PrintAmount(
        commodity=amount.commodity,
        quantity=amount.quantity,
        price=amount.price,
        style=parse_amount_style(obj.get(STYLE_KEY)),
    )


def parse_print_amounts(value) -> list[PrintAmount]:
    return [
        parse_print_amount(item)
        for item in as_list(value)
        if isinstance(item, dict)
    ]


__all__ = [
    "parse_quantity",
    "parse_price",
    "parse_amount",
    "parse_amounts",
    "parse_amount_style",
    "parse_print_amount",
    "parse_print_amounts",
]
