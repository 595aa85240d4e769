"""Domain models for the balance report."""

from dataclasses import dataclass, field
from typing import ClassVar, Literal

from .amounts import Amount, PeriodDate


@dataclass(frozen=True)
class BalanceAccount:
    """Account row of a single-period balance report.

    Attributes:
        name: Full account name.
        display_name: Name as displayed, shortened in tree mode.
        indent: Tree indentation level, 0 in flat mode.
        amounts: Account balance, one amount per commodity.
    """

    name: str
    display_name: str
    indent: int
    amounts: list[Amount]


@dataclass(frozen=True)
class PeriodicBalanceRow:
    """Row of a multi-period report.

    Attributes:
        account: Account name, empty for aggregate rows.
        display_name: Name as displayed.
        amounts: One list of amounts per reporting period.
        total: Row total when requested.
        average: Row average when requested.
    """

    account: str
    display_name: str
    amounts: list[list[Amount]]
    total: list[Amount] | None = None
    average: list[Amount] | None = None


@dataclass(frozen=True)
class SimpleBalance:
    """Single-period balance report."""

    kind: ClassVar[Literal["simple"]] = "simple"

    accounts: list[BalanceAccount]
    totals: list[Amount]


@dataclass(frozen=True)
class PeriodicBalance:
    """Multi-period balance report."""

    kind: ClassVar[Literal["periodic"]] = "periodic"

    dates: list[PeriodDate]
    rows: list[PeriodicBalanceRow]
    totals: PeriodicBalanceRow | None = field(default=None)


BalanceReport = SimpleBalance | PeriodicBalance


__all__ = [
    "BalanceAccount",
    "PeriodicBalanceRow",
    "SimpleBalance",
    "PeriodicBalance",
    "BalanceReport",
]
