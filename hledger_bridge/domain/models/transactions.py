"""Domain models for the print (transactions) report."""

from dataclasses import dataclass, field
from decimal import Decimal

from .amounts import Amount, Price


@dataclass(frozen=True)
class SourcePosition:
    """Location in a journal file."""

    line: int = 0
    column: int = 0
    file: str = ""


@dataclass(frozen=True)
class DigitGroupStyle:
    """Digit grouping: separator character and group sizes."""

    separator: str
    group_sizes: tuple[int, ...] = ()


@dataclass(frozen=True)
class AmountStyle:
    """Display style hledger inferred for a commodity.

    This layer never renders amounts; the style is kept so callers can.

    Attributes:
        commodity_side: "L" or "R".
        commodity_spaced: Whether a space separates symbol and quantity.
        decimal_mark: Decimal mark, if declared.
        digit_groups: Digit grouping, if any.
        precision: Number of decimal places displayed.
        rounding: hledger rounding strategy name.
    """

    commodity_side: str = "L"
    commodity_spaced: bool = False
    decimal_mark: str | None = "."
    digit_groups: DigitGroupStyle | None = None
    precision: int = 2
    rounding: str = "NoRounding"


@dataclass(frozen=True)
class PrintAmount:
    """Amount of a posting together with its display style."""

    commodity: str
    quantity: Decimal
    price: Price | None = None
    style: AmountStyle = field(default_factory=AmountStyle)

    def as_amount(self) -> Amount:
        """Return the amount without its style."""
        return Amount(
            commodity=self.commodity,
            quantity=self.quantity,
            price=self.price,
        )


@dataclass(frozen=True)
class BalanceAssertion:
    """Balance assertion attached to a posting."""

    amount: PrintAmount
    inclusive: bool = False
    total: bool = False
    position: SourcePosition = field(default_factory=SourcePosition)


@dataclass(frozen=True)
class PrintPosting:
    """Posting of a printed transaction.

    ``original`` holds the posting as written in the journal when hledger
    generated or modified this one (auto postings).
    """

    account: str
    amounts: list[PrintAmount] = field(default_factory=list)
    status: str = "Unmarked"
    comment: str = ""
    tags: list[tuple[str, str]] = field(default_factory=list)
    posting_type: str = "RegularPosting"
    date: str | None = None
    date2: str | None = None
    balance_assertion: BalanceAssertion | None = None
    original: "PrintPosting | None" = None
    transaction_index: str = ""


@dataclass(frozen=True)
class PrintTransaction:
    """Transaction as emitted by ``hledger print``."""

    date: str
    index: int = 0
    date2: str | None = None
    status: str = "Unmarked"
    code: str = ""
    description: str = ""
    comment: str = ""
    tags: list[tuple[str, str]] = field(default_factory=list)
    postings: list[PrintPosting] = field(default_factory=list)
    preceding_comment: str = ""
    source_positions: list[SourcePosition] = field(default_factory=list)


PrintReport = list[PrintTransaction]


__all__ = [
    "SourcePosition",
    "DigitGroupStyle",
    "AmountStyle",
    "PrintAmount",
    "BalanceAssertion",
    "PrintPosting",
    "PrintTransaction",
    "PrintReport",
]
