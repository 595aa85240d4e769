"""Application port for hledger report access."""

from pathlib import Path
from typing import Protocol

from hledger_bridge.domain.models import (
    AccountsOptions,
    BalanceOptions,
    BalanceReport,
    BalanceSheetOptions,
    BalanceSheetReport,
    CashflowOptions,
    CashflowReport,
    IncomeStatementOptions,
    IncomeStatementReport,
    PrintOptions,
    PrintReport,
)


class ReportRepositoryPort(Protocol):
    """Port exposing typed hledger reports."""

    def fetch_accounts(
        self,
        journal_file: Path | str | None,
        options: AccountsOptions,
    ) -> list[str]:
        """Return account names."""

    def fetch_balance(
        self,
        journal_file: Path | str | None,
        options: BalanceOptions,
    ) -> BalanceReport:
        """Return a simple or periodic balance report."""

    def fetch_balancesheet(
        self,
        journal_file: Path | str | None,
        options: BalanceSheetOptions,
    ) -> BalanceSheetReport:
        """Return the balance sheet."""

    def fetch_incomestatement(
        self,
        journal_file: Path | str | None,
        options: IncomeStatementOptions,
    ) -> IncomeStatementReport:
        """Return the income statement."""

    def fetch_cashflow(
        self,
        journal_file: Path | str | None,
        options: CashflowOptions,
    ) -> CashflowReport:
        """Return the cashflow statement."""

    def fetch_print(
        self,
        journal_file: Path | str | None,
        options: PrintOptions,
    ) -> PrintReport:
        """Return printed transactions."""


__all__ = ["ReportRepositoryPort"]
