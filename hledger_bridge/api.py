"""Caller-facing functions, one per hledger report kind.

Each function runs one hledger process and returns a typed report or
raises a ``HledgerError``. The executable and default journal come from an
explicit ``HledgerSettings`` value; without one, hledger is looked up on
the search path and no default journal is used::

    from hledger_bridge.api import get_balance
    from hledger_bridge.domain.models import BalanceOptions

    report = get_balance("main.journal", BalanceOptions().monthly())
"""

from pathlib import Path

from hledger_bridge.application.ports.report_repository import (
    ReportRepositoryPort,
)
from hledger_bridge.application.use_cases import (
    GetAccountsUseCase,
    GetBalanceSheetUseCase,
    GetBalanceUseCase,
    GetCashflowUseCase,
    GetIncomeStatementUseCase,
    GetPrintUseCase,
)
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
from hledger_bridge.infrastructure.container import build_report_repository
from hledger_bridge.infrastructure.settings import HledgerSettings

JournalPath = Path | str | None


def _repository(settings: HledgerSettings | None) -> ReportRepositoryPort:
    return build_report_repository(settings or HledgerSettings())


def get_accounts(
    journal_file: JournalPath = None,
    options: AccountsOptions | None = None,
    settings: HledgerSettings | None = None,
) -> list[str]:
    """Return the account names of a journal."""
    return GetAccountsUseCase(_repository(settings)).execute(journal_file, options)


def get_balance(
    journal_file: JournalPath = None,
    options: BalanceOptions | None = None,
    settings: HledgerSettings | None = None,
) -> BalanceReport:
    """Return a simple or periodic balance report.

    Args:
        journal_file: Journal passed to hledger with ``-f``.
        options: Balance options, defaults when omitted.
        settings: Executable and default journal.

    Returns:
        BalanceReport: Parsed report.
    """
    return GetBalanceUseCase(_repository(settings)).execute(journal_file, options)


def get_balancesheet(
    journal_file: JournalPath = None,
    options: BalanceSheetOptions | None = None,
    settings: HledgerSettings | None = None,
) -> BalanceSheetReport:
    return GetBalanceSheetUseCase(_repository(settings)).execute(
        journal_file, options
    )


def get_incomestatement(
    journal_file: JournalPath = None,
    options: IncomeStatementOptions | None = None,
    settings: HledgerSettings | None = None,
) -> IncomeStatementReport:
    return GetIncomeStatementUseCase(_repository(settings)).execute(
        journal_file, options
    )


def get_cashflow(
    journal_file: JournalPath = None,
    options: CashflowOptions | None = None,
    settings: HledgerSettings | None = None,
) -> CashflowReport:
    return GetCashflowUseCase(_repository(settings)).execute(
        journal_file, options
    )


def get_print(
    journal_file: JournalPath = None,
    options: PrintOptions | None = None,
    settings: HledgerSettings | None = None,
) -> PrintReport:
    """Return the journal's transactions as printed by hledger."""
    return GetPrintUseCase(_repository(settings)).execute(journal_file, options)


__all__ = [
    "get_accounts",
    "get_balance",
    "get_balancesheet",
    "get_incomestatement",
    "get_cashflow",
    "get_print",
]
