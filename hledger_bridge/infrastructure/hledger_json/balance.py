"""Parser for ``hledger balance`` JSON output.

The balance command is the only one whose top-level shape depends on the
invocation: a single-period report is a two-element array
``[accounts, totals]`` while a multi-period report is a periodic object.
"""

from typing import Literal

from hledger_bridge.domain.errors import ReportParseError
from hledger_bridge.domain.models import (
    BalanceAccount,
    BalanceReport,
    SimpleBalance,
)

from .amounts import parse_amounts
from .fields import as_list
from .periodic import DATES_KEY, parse_periodic_balance

BalanceShape = Literal["simple", "periodic"]


def classify_balance_json(value) -> BalanceShape:
    """Decide which balance report shape ``value`` holds.

    Args:
        value: Decoded JSON document.

    Returns:
        BalanceShape: "simple" for a two-element array, "periodic" for an
            object carrying ``prDates``.

    Raises:
        ReportParseError: For any other top-level shape.
    """
    if isinstance(value, list) and len(value) == 2:
        return "simple"
    if isinstance(value, dict) and DATES_KEY in value:
        return "periodic"
    raise ReportParseError("Unknown balance report format")


def parse_balance_account(value) -> BalanceAccount:
    """Parse ``[name, display_name, indent, amounts]``."""
    if not isinstance(value, list):
        raise ReportParseError("Account should be an array")
    if len(value) < 4:
        raise ReportParseError("Account array should have at least 4 elements")
    name, display_name, indent, amounts = value[:4]
    if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
        indent = 0
    return BalanceAccount(
        name=name if isinstance(name, str) else "",
        display_name=display_name if isinstance(display_name, str) else "",
        indent=indent,
        amounts=parse_amounts(amounts),
    )


def parse_simple_balance(value) -> SimpleBalance:
    if not isinstance(value, list) or len(value) != 2:
        raise ReportParseError("Simple balance should have 2 elements")
    accounts_value, totals_value = value
    return SimpleBalance(
        accounts=[parse_balance_account(item) for item in as_list(accounts_value)],
        totals=parse_amounts(totals_value),
    )


def parse_balance_report(value) -> BalanceReport:
    """Classify and parse a balance document.

    Args:
        value: Decoded JSON document.

    Returns:
        BalanceReport: ``SimpleBalance`` or ``PeriodicBalance``.
    """
    if classify_balance_json(value) == "simple":
        return parse_simple_balance(value)
    return parse_periodic_balance(value)


__all__ = [
    "BalanceShape",
    "classify_balance_json",
    "parse_balance_account",
    "parse_simple_balance",
    "parse_balance_report",
]
