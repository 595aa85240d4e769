"""Domain models for commodity amounts and reporting periods."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Price:
    """Unit conversion rate attached to an amount.

    Attributes:
        commodity: Commodity the price is expressed in.
        quantity: Exact price quantity.
    """

    commodity: str
    quantity: Decimal


@dataclass(frozen=True)
class Amount:
    """Commodity-tagged quantity, optionally carrying a price.

    Attributes:
        commodity: Currency or unit symbol (may be empty).
        quantity: Exact quantity at hledger's display precision.
        price: Conversion price recorded for the amount, if any.
    """

    commodity: str
    quantity: Decimal
    price: Price | None = None

    @property
    def is_zero(self) -> bool:
        """Return True when the quantity equals zero."""
        return self.quantity == 0


@dataclass(frozen=True)
class PeriodDate:
    """Reporting period boundaries; ``end`` is exclusive."""

    start: str
    end: str


__all__ = ["Price", "Amount", "PeriodDate"]
