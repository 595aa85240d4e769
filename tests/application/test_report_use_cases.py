"""Tests for the report use cases."""

from decimal import Decimal
from unittest.mock import MagicMock

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
    Amount,
    BalanceOptions,
    BalanceSheetOptions,
    BalanceSheetReport,
    CashflowOptions,
    CashflowReport,
    IncomeStatementOptions,
    IncomeStatementReport,
    PeriodDate,
    PeriodicBalance,
    PrintOptions,
    PrintPosting,
    PrintTransaction,
    SimpleBalance,
    Subreport,
)


def _statement(report_cls, *names):
    dates = [PeriodDate("2024-01-01", "2024-02-01")]
    return report_cls(
        title=report_cls.__name__,
        dates=dates,
        subreports=[
            Subreport(name, PeriodicBalance(dates=dates, rows=[])) for name in names
        ],
    )


def test_accounts_use_case_defaults_options():
    repository = MagicMock()
    repository.fetch_accounts.return_value = ["assets", "expenses"]
    logger = MagicMock()

    result = GetAccountsUseCase(repository, logger=logger).execute("main.journal")

    assert result == ["assets", "expenses"]
    repository.fetch_accounts.assert_called_once_with("main.journal", AccountsOptions())
    logger.info.assert_called_once()


def test_balance_use_case_passes_options_through():
    repository = MagicMock()
    report = SimpleBalance(accounts=[], totals=[Amount("$", Decimal("1"))])
    repository.fetch_balance.return_value = report
    options = BalanceOptions().tree()

    result = GetBalanceUseCase(repository, logger=MagicMock()).execute(None, options)

    assert result is report
    repository.fetch_balance.assert_called_once_with(None, options)


def test_balance_use_case_logs_periodic_reports():
    repository = MagicMock()
    repository.fetch_balance.return_value = PeriodicBalance(dates=[], rows=[])
    logger = MagicMock()

    GetBalanceUseCase(repository, logger=logger).execute()

    assert "periodic" in logger.info.call_args[0][0]


def test_statement_use_cases():
    repository = MagicMock()
    repository.fetch_balancesheet.return_value = _statement(
        BalanceSheetReport, "Assets", "Liabilities"
    )
    repository.fetch_incomestatement.return_value = _statement(
        IncomeStatementReport, "Revenues", "Expenses"
    )
    repository.fetch_cashflow.return_value = _statement(CashflowReport, "Cash flows")
    logger = MagicMock()

    balance_sheet = GetBalanceSheetUseCase(repository, logger=logger).execute()
    income = GetIncomeStatementUseCase(repository, logger=logger).execute("j.journal")
    cashflow = GetCashflowUseCase(repository, logger=logger).execute(
        None, CashflowOptions().budget()
    )

    assert [s.name for s in balance_sheet.subreports] == ["Assets", "Liabilities"]
    assert income.find_subreport("Expenses") is not None
    assert isinstance(cashflow, CashflowReport)
    repository.fetch_balancesheet.assert_called_once_with(None, BalanceSheetOptions())
    repository.fetch_incomestatement.assert_called_once_with(
        "j.journal", IncomeStatementOptions()
    )
    assert logger.info.call_count == 3
    assert "Revenues, Expenses" in logger.info.call_args_list[1][0][0]


def test_print_use_case_counts_postings():
    repository = MagicMock()
    repository.fetch_print.return_value = [
        PrintTransaction(
            date="2024-01-05",
            postings=[PrintPosting("expenses:food"), PrintPosting("assets:bank")],
        )
    ]
    logger = MagicMock()

    result = GetPrintUseCase(repository, logger=logger).execute(None, PrintOptions())

    assert len(result) == 1
    assert "2 postings" in logger.info.call_args[0][0]
