"""Parsers for compound reports: balance sheet, income statement, cashflow.

hledger emits these as::

    {"cbrTitle": "...", "cbrDates": [...],
     "cbrSubreports": [[name, periodic-data, increases_total], ...],
     "cbrTotals": {...periodic row...}}
"""

from typing import TypeVar

from hledger_bridge.domain.errors import ReportParseError
from hledger_bridge.domain.models import (
    BalanceSheetReport,
    CashflowReport,
    CompoundReport,
    IncomeStatementReport,
    Subreport,
)

from .fields import get_str, require_key, require_object
from .periodic import parse_period_dates, parse_periodic_balance, parse_periodic_row

ReportT = TypeVar("ReportT", bound=CompoundReport)

BALANCE_SHEET_TITLE = "Balance Sheet"
INCOME_STATEMENT_TITLE = "Income Statement"
CASHFLOW_TITLE = "Cashflow Statement"


def parse_subreport(value) -> Subreport:
    """Parse a positional ``[name, data, increases_total]`` entry.

    An omitted or non-boolean flag counts as ``True``; only a literal
    ``false`` marks a section that decreases the total.

    Raises:
        ReportParseError: When the entry is not an array of at least two
            elements or its data is not an object.
    """
    if not isinstance(value, list) or len(value) < 2:
        raise ReportParseError("Subreport entry should be an array of at least 2 elements")
    name = value[0] if isinstance(value[0], str) else ""
    data = parse_periodic_balance(value[1], what=f"subreport {name!r}")
    increases_total = not (len(value) > 2 and value[2] is False)
    return Subreport(name=name, data=data, increases_total=increases_total)


def parse_compound_report(
    value,
    report_cls: type[ReportT],
    default_title: str,
) -> ReportT:
    """Parse a compound report document into ``report_cls``.

    Args:
        value: Decoded JSON document.
        report_cls: Concrete report type to build.
        default_title: Title used when ``cbrTitle`` is absent.

    Returns:
        ReportT: Parsed report.

    Raises:
        ReportParseError: When ``cbrDates`` or ``cbrSubreports`` is
            missing or a subreport entry is malformed.
    """
    what = default_title.lower()
    obj = require_object(value, what)
    dates = parse_period_dates(require_key(obj, "cbrDates", what))
    subreports_value = require_key(obj, "cbrSubreports", what)
    if not isinstance(subreports_value, list):
        raise ReportParseError(f"Expected array for cbrSubreports in {what}")
    totals_value = obj.get("cbrTotals")
    return report_cls(
        title=get_str(obj, "cbrTitle", default_title),
        dates=dates,
        subreports=[parse_subreport(entry) for entry in subreports_value],
        totals=None if totals_value is None else parse_periodic_row(totals_value),
    )


def parse_balancesheet_report(value) -> BalanceSheetReport:
    return parse_compound_report(value, BalanceSheetReport, BALANCE_SHEET_TITLE)


def parse_incomestatement_report(value) -> IncomeStatementReport:
    return parse_compound_report(
        value, IncomeStatementReport, INCOME_STATEMENT_TITLE
    )


def parse_cashflow_report(value) -> CashflowReport:
    return parse_compound_report(value, CashflowReport, CASHFLOW_TITLE)


__all__ = [
    "BALANCE_SHEET_TITLE",
    "INCOME_STATEMENT_TITLE",
    "CASHFLOW_TITLE",
    "parse_subreport",
    "parse_compound_report",
    "parse_balancesheet_report",
    "parse_incomestatement_report",
    "parse_cashflow_report",
]
