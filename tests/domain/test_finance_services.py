"""Tests for report aggregate services."""

from decimal import Decimal

from hledger_bridge.domain.models import (
    Amount,
    CompoundReport,
    PeriodDate,
    PeriodicBalance,
    PeriodicBalanceRow,
    Subreport,
)
from hledger_bridge.domain.services.finance import (
    grand_total,
    latest_period_amounts,
    nonzero_amounts,
    section_total,
)


def _row(*periods):
    return PeriodicBalanceRow(account="", display_name="", amounts=list(periods))


def _report():
    dates = [PeriodDate("2024-01-01", "2024-02-01"), PeriodDate("2024-02-01", "2024-03-01")]
    expenses = Subreport(
        name="Expenses",
        data=PeriodicBalance(
            dates=dates,
            rows=[],
            totals=_row(
                [Amount("$", Decimal("10"))],
                [Amount("$", Decimal("25")), Amount("EUR", Decimal("0"))],
            ),
        ),
        increases_total=False,
    )
    return CompoundReport(
        title="Income Statement",
        dates=dates,
        subreports=[expenses],
        totals=_row([Amount("$", Decimal("-10"))], [Amount("$", Decimal("-25"))]),
    )


def test_nonzero_amounts_filters_zero_quantities():
    amounts = [Amount("$", Decimal("0.00")), Amount("EUR", Decimal("1"))]
    assert nonzero_amounts(amounts) == [Amount("EUR", Decimal("1"))]


def test_latest_period_amounts_handles_missing_rows():
    assert latest_period_amounts(None) == []
    assert latest_period_amounts(_row()) == []


def test_grand_total_uses_last_period():
    assert grand_total(_report()) == [Amount("$", Decimal("-25"))]


def test_section_total_matches_case_insensitively():
    report = _report()
    assert section_total(report, "expenses") == [Amount("$", Decimal("25"))]
    assert section_total(report, "Revenues") == []
