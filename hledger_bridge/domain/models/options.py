"""Report options consumed by the hledger options compiler.

Every options value is immutable. Builder methods return a new value so a
caller can write ``BalanceOptions().monthly().tree().query("expenses")``.
Mutually exclusive hledger flags are modelled as one enum field per axis,
so two conflicting modes can never be requested at once.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar


class CalculationMode(str, Enum):
    """What each report cell shows."""

    SUM = "sum"
    VALUECHANGE = "valuechange"
    GAIN = "gain"
    BUDGET = "budget"
    COUNT = "count"


class AccumulationMode(str, Enum):
    """Over which span amounts are accumulated."""

    CHANGE = "change"
    CUMULATIVE = "cumulative"
    HISTORICAL = "historical"


class ListMode(str, Enum):
    """Account list rendering."""

    FLAT = "flat"
    TREE = "tree"


class PeriodInterval(str, Enum):
    """Report interval for multi-period reports."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class Layout(str, Enum):
    """How multi-commodity amounts are laid out."""

    WIDE = "wide"
    TALL = "tall"
    BARE = "bare"
    TIDY = "tidy"


class ValuationMode(str, Enum):
    """How amounts are converted before reporting.

    EXCHANGE needs a target commodity and VALUE needs a hledger valuation
    expression such as ``end`` or ``then,EUR``.
    """

    COST = "cost"
    MARKET = "market"
    EXCHANGE = "exchange"
    VALUE = "value"


_VALUATIONS_WITH_TARGET = frozenset({ValuationMode.EXCHANGE, ValuationMode.VALUE})


class RoundingMode(str, Enum):
    """Amount rounding applied by ``hledger print``."""

    NONE = "none"
    SOFT = "soft"
    HARD = "hard"
    ALL = "all"


def _check_non_negative(name: str, value: int | None) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")


def _check_valuation(mode: ValuationMode | None, target: str | None) -> None:
    if mode is None:
        if target is not None:
            raise ValueError("valuation_target requires a valuation mode")
        return
    if mode in _VALUATIONS_WITH_TARGET and not target:
        raise ValueError(f"{mode.value} valuation requires a valuation_target")
    if mode not in _VALUATIONS_WITH_TARGET and target is not None:
        raise ValueError(f"{mode.value} valuation takes no valuation_target")


@dataclass(frozen=True)
class _QueryOptions:
    """Date, status and query filters shared by every report kind."""

    begin: str | None = None
    end: str | None = None
    depth: int | None = None
    unmarked: bool = False
    pending: bool = False
    cleared: bool = False
    real: bool = False
    empty: bool = False
    queries: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _check_non_negative("depth", self.depth)
        # A bare string is one pattern, not a sequence of characters.
        if isinstance(self.queries, str):
            object.__setattr__(self, "queries", (self.queries,))
        else:
            object.__setattr__(self, "queries", tuple(self.queries))

    def query(self, *patterns: str):
        """Return a copy with ``patterns`` appended to the queries."""
        return replace(self, queries=(*self.queries, *patterns))

    def with_queries(self, patterns):
        """Return a copy whose queries are replaced by ``patterns``."""
        if isinstance(patterns, str):
            patterns = (patterns,)
        return replace(self, queries=tuple(patterns))

    def between(self, begin: str | None, end: str | None):
        """Return a copy restricted to ``begin`` (inclusive) .. ``end``."""
        return replace(self, begin=begin, end=end)


@dataclass(frozen=True)
class _PeriodicReportOptions(_QueryOptions):
    """Options shared by balance-like reports."""

    supported_calculations: ClassVar[frozenset[CalculationMode]] = frozenset(
        {
            CalculationMode.SUM,
            CalculationMode.VALUECHANGE,
            CalculationMode.GAIN,
        }
    )

    calculation: CalculationMode | None = None
    accumulation: AccumulationMode | None = None
    list_mode: ListMode = ListMode.FLAT
    interval: PeriodInterval | None = None
    period: str | None = None
    drop: int | None = None
    declared: bool = False
    average: bool = False
    row_total: bool = False
    summary_only: bool = False
    no_total: bool = False
    no_elide: bool = False
    sort_amount: bool = False
    percent: bool = False
    layout: Layout | None = None
    valuation: ValuationMode | None = None
    valuation_target: str | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_non_negative("drop", self.drop)
        _check_valuation(self.valuation, self.valuation_target)
        if (
            self.calculation is not None
            and self.calculation not in self.supported_calculations
        ):
            raise ValueError(
                f"{type(self).__name__} does not support the "
                f"{self.calculation.value} calculation mode"
            )

    def with_calculation(self, mode: CalculationMode):
        """Return a copy using ``mode`` as calculation mode."""
        return replace(self, calculation=mode)

    def valuechange(self):
        return self.with_calculation(CalculationMode.VALUECHANGE)

    def gain(self):
        return self.with_calculation(CalculationMode.GAIN)

    def change(self):
        return replace(self, accumulation=AccumulationMode.CHANGE)

    def cumulative(self):
        return replace(self, accumulation=AccumulationMode.CUMULATIVE)

    def historical(self):
        return replace(self, accumulation=AccumulationMode.HISTORICAL)

    def flat(self):
        return replace(self, list_mode=ListMode.FLAT)

    def tree(self):
        return replace(self, list_mode=ListMode.TREE)

    def daily(self):
        return replace(self, interval=PeriodInterval.DAILY)

    def weekly(self):
        return replace(self, interval=PeriodInterval.WEEKLY)

    def monthly(self):
        return replace(self, interval=PeriodInterval.MONTHLY)

    def quarterly(self):
        return replace(self, interval=PeriodInterval.QUARTERLY)

    def yearly(self):
        return replace(self, interval=PeriodInterval.YEARLY)

    def at_cost(self):
        return replace(self, valuation=ValuationMode.COST, valuation_target=None)

    def at_market(self):
        return replace(self, valuation=ValuationMode.MARKET, valuation_target=None)

    def exchange(self, commodity: str):
        """Return a copy converting amounts to ``commodity``."""
        return replace(
            self, valuation=ValuationMode.EXCHANGE, valuation_target=commodity
        )

    def valued(self, expression: str):
        """Return a copy valued with the hledger ``--value`` expression."""
        return replace(
            self, valuation=ValuationMode.VALUE, valuation_target=expression
        )


@dataclass(frozen=True)
class AccountsOptions(_QueryOptions):
    """Options for ``hledger accounts``."""

    used: bool = False
    declared: bool = False
    unused: bool = False
    undeclared: bool = False
    types: bool = False
    positions: bool = False
    directives: bool = False
    list_mode: ListMode = ListMode.FLAT
    drop: int | None = None
    period: str | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        _check_non_negative("drop", self.drop)

    def tree(self):
        return replace(self, list_mode=ListMode.TREE)

    def flat(self):
        return replace(self, list_mode=ListMode.FLAT)


@dataclass(frozen=True)
class BalanceOptions(_PeriodicReportOptions):
    """Options for ``hledger balance``.

    ``budget_goal`` names the periodic transactions used as budget when the
    calculation mode is BUDGET; without it hledger uses all of them.
    """

    supported_calculations: ClassVar[frozenset[CalculationMode]] = frozenset(
        CalculationMode
    )

    budget_goal: str | None = None
    related: bool = False
    invert: bool = False
    transpose: bool = False

    def budget(self, goal: str | None = None):
        return replace(
            self,
            calculation=CalculationMode.BUDGET,
            budget_goal=goal,
        )

    def count(self):
        return self.with_calculation(CalculationMode.COUNT)


@dataclass(frozen=True)
class BalanceSheetOptions(_PeriodicReportOptions):
    """Options for ``hledger balancesheet``."""


@dataclass(frozen=True)
class IncomeStatementOptions(_PeriodicReportOptions):
    """Options for ``hledger incomestatement``."""


@dataclass(frozen=True)
class CashflowOptions(_PeriodicReportOptions):
    """Options for ``hledger cashflow``."""

    supported_calculations: ClassVar[frozenset[CalculationMode]] = frozenset(
        {
            CalculationMode.SUM,
            CalculationMode.VALUECHANGE,
            CalculationMode.GAIN,
            CalculationMode.BUDGET,
        }
    )

    format: str | None = None
    base_url: str | None = None

    def budget(self):
        return self.with_calculation(CalculationMode.BUDGET)


@dataclass(frozen=True)
class PrintOptions(_QueryOptions):
    """Options for ``hledger print``."""

    explicit: bool = False
    show_costs: bool = False
    round: RoundingMode | None = None
    new: bool = False
    match_desc: str | None = None
    period: str | None = None

    def explicit_amounts(self):
        return replace(self, explicit=True)

    def rounding(self, mode: RoundingMode):
        return replace(self, round=mode)

    def new_only(self):
        return replace(self, new=True)


__all__ = [
    "CalculationMode",
    "AccumulationMode",
    "ListMode",
    "PeriodInterval",
    "Layout",
    "ValuationMode",
    "RoundingMode",
    "AccountsOptions",
    "BalanceOptions",
    "BalanceSheetOptions",
    "IncomeStatementOptions",
    "CashflowOptions",
    "PrintOptions",
]
