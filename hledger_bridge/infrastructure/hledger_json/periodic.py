"""Parsers for hledger's periodic report data (``prDates``/``prRows``).

The same object shape is used by multi-period ``balance`` output and by
each subreport of ``balancesheet``, ``incomestatement`` and ``cashflow``.
"""

from hledger_bridge.domain.errors import ReportParseError
from hledger_bridge.domain.models import (
    Amount,
    PeriodDate,
    PeriodicBalance,
    PeriodicBalanceRow,
)

from .amounts import parse_amounts
from .fields import as_list, require_key, require_object

DATES_KEY = "prDates"
ROWS_KEY = "prRows"
TOTALS_KEY = "prTotals"


def extract_tagged_date(value) -> str | None:
    """Return the date string of a tagged date such as
    ``{"tag": "Exact", "contents": "2024-01-01"}``.

    A bare string is accepted as is. Other shapes give None.
    """
    if isinstance(value, dict):
        contents = value.get("contents")
        return contents if isinstance(contents, str) else None
    if isinstance(value, str):
        return value
    return None


def parse_period_dates(value) -> list[PeriodDate]:
    """Parse ``[[start, end], ...]`` period bounds.

    Args:
        value: Raw ``prDates`` value.

    Returns:
        list[PeriodDate]: Periods in report order. Malformed pairs are
            skipped.
    """
    dates = []
    for pair in as_list(value):
        if not isinstance(pair, list) or len(pair) != 2:
            continue
        start = extract_tagged_date(pair[0])
        end = extract_tagged_date(pair[1])
        if start is None or end is None:
            continue
        dates.append(PeriodDate(start=start, end=end))
    return dates


def _parse_row_name(value) -> str:
    # Aggregate rows carry an empty array instead of a name.
    if isinstance(value, str):
        return value
    return ""


def _optional_amounts(obj: dict, key: str) -> list[Amount] | None:
    value = obj.get(key)
    if value is None:
        return None
    return parse_amounts(value)


def parse_periodic_row(value) -> PeriodicBalanceRow:
    """Parse one ``prRows`` entry (or the ``prTotals`` row).

    Args:
        value: Raw row object.

    Returns:
        PeriodicBalanceRow: Parsed row.

    Raises:
        ReportParseError: When the row is not an object.
    """
    obj = require_object(value, "periodic row")
    account = _parse_row_name(obj.get("prrName"))
    return PeriodicBalanceRow(
        account=account,
        display_name=account,
        amounts=[parse_amounts(period) for period in as_list(obj.get("prrAmounts"))],
        total=_optional_amounts(obj, "prrTotal"),
        average=_optional_amounts(obj, "prrAverage"),
    )


def parse_periodic_balance(value, what: str = "periodic balance") -> PeriodicBalance:
    """Parse a periodic data object.

    Args:
        value: Raw object holding ``prDates`` and ``prRows``.
        what: Name used in error messages.

    Returns:
        PeriodicBalance: Parsed periods, rows and optional totals.

    Raises:
        ReportParseError: When the object or one of its required
            containers is missing.
    """
    obj = require_object(value, what)
    dates = parse_period_dates(require_key(obj, DATES_KEY, what))
    rows_value = require_key(obj, ROWS_KEY, what)
    if not isinstance(rows_value, list):
        raise ReportParseError(f"Expected array for {ROWS_KEY} in {what}")
    rows = [parse_periodic_row(row) for row in rows_value]
    totals_value = obj.get(TOTALS_KEY)
    totals = None if totals_value is None else parse_periodic_row(totals_value)
    return PeriodicBalance(dates=dates, rows=rows, totals=totals)


__all__ = [
    "DATES_KEY",
    "ROWS_KEY",
    "TOTALS_KEY",
    "extract_tagged_date",
    "parse_period_dates",
    "parse_periodic_row",
    "parse_periodic_balance",
]
