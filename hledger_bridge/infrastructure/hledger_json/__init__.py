"""Normalizers turning hledger JSON output into domain models."""

from .accounts import parse_accounts_output
from .amounts import parse_amount, parse_amounts, parse_price
from .balance import classify_balance_json, parse_balance_report, parse_simple_balance
from .periodic import parse_period_dates, parse_periodic_balance, parse_periodic_row
from .statements import (
    parse_balancesheet_report,
    parse_cashflow_report,
    parse_compound_report,
    parse_incomestatement_report,
)
from .transactions import parse_print_report

__all__ = [
    "parse_accounts_output",
    "parse_amount",
    "parse_amounts",
    "parse_price",
    "classify_balance_json",
    "parse_balance_report",
    "parse_simple_balance",
    "parse_period_dates",
    "parse_periodic_balance",
    "parse_periodic_row",
    "parse_compound_report",
    "parse_balancesheet_report",
    "parse_incomestatement_report",
    "parse_cashflow_report",
    "parse_print_report",
]
