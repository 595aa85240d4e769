"""Domain services for report aggregates."""

from collections.abc import Iterable

from hledger_bridge.domain.models import (
    Amount,
    CompoundReport,
    PeriodicBalanceRow,
)


def nonzero_amounts(amounts: Iterable[Amount]) -> list[Amount]:
    """Return the amounts whose quantity is not zero."""
    return [amount for amount in amounts if not amount.is_zero]


def latest_period_amounts(row: PeriodicBalanceRow | None) -> list[Amount]:
    """Return the amounts of the last period of a row.

    Args:
        row: Periodic row, possibly missing.

    Returns:
        list[Amount]: Amounts of the most recent period, empty when the
        row is missing or has no periods.
    """
    if row is None or not row.amounts:
        return []
    return list(row.amounts[-1])


def grand_total(report: CompoundReport) -> list[Amount]:
    """Return the non-zero grand total of a compound report.

    For a balance sheet the grand total is the net worth.
    """
    return nonzero_amounts(latest_period_amounts(report.totals))


def section_total(report: CompoundReport, name: str) -> list[Amount]:
    """Return the non-zero total of the section named ``name``.

    Args:
        report: Compound report to search.
        name: Section name, matched case-insensitively.

    Returns:
        list[Amount]: Section total, empty when the section is absent.
    """
    subreport = report.find_subreport(name)
    if subreport is None:
        return []
    return nonzero_amounts(latest_period_amounts(subreport.totals))


__all__ = [
    "nonzero_amounts",
    "latest_period_amounts",
    "grand_total",
    "section_total",
]
