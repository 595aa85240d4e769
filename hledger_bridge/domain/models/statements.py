"""Domain models for multi-section financial statements."""

from dataclasses import dataclass

from .amounts import PeriodDate
from .balance import PeriodicBalance, PeriodicBalanceRow


@dataclass(frozen=True)
class Subreport:
    """Named, sign-tagged section of a compound report.

    Attributes:
        name: Section name, e.g. "Assets" or "Expenses".
        data: Periodic balance data of the section.
        increases_total: Whether the section adds to (True) or subtracts
            from (False) the grand total, exactly as reported by hledger.
    """

    name: str
    data: PeriodicBalance
    increases_total: bool = True

    @property
    def dates(self) -> list[PeriodDate]:
        """Return the section's period dates."""
        return self.data.dates

    @property
    def rows(self) -> list[PeriodicBalanceRow]:
        """Return the section's account rows."""
        return self.data.rows

    @property
    def totals(self) -> PeriodicBalanceRow | None:
        """Return the section's totals row."""
        return self.data.totals


@dataclass(frozen=True)
class CompoundReport:
    """Report made of several subreports and an optional grand total."""

    title: str
    dates: list[PeriodDate]
    subreports: list[Subreport]
    totals: PeriodicBalanceRow | None = None

    def find_subreport(self, name: str) -> Subreport | None:
        """Return the subreport matching ``name`` case-insensitively.

        Args:
            name: Section name to look up.

        Returns:
            Subreport | None: Matching section, or None when absent.
        """
        wanted = name.strip().lower()
        for subreport in self.subreports:
            if subreport.name.strip().lower() == wanted:
                return subreport
        return None


@dataclass(frozen=True)
class BalanceSheetReport(CompoundReport):
    """Balance sheet (Assets, Liabilities, ...)."""


@dataclass(frozen=True)
class IncomeStatementReport(CompoundReport):
    """Income statement (Revenues, Expenses)."""


@dataclass(frozen=True)
class CashflowReport(CompoundReport):
    """Cashflow statement."""


__all__ = [
    "Subreport",
    "CompoundReport",
    "BalanceSheetReport",
    "IncomeStatementReport",
    "CashflowReport",
]
