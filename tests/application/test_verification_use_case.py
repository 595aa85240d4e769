"""Tests for the verification use case."""

from decimal import Decimal
from unittest.mock import MagicMock

from hledger_bridge.application.use_cases.get_verification import (
    GetVerificationUseCase,
    outstanding_balances,
)
from hledger_bridge.domain.models import (
    Amount,
    BalanceAccount,
    BalanceOptions,
    PeriodDate,
    PeriodicBalance,
    PeriodicBalanceRow,
    PrintOptions,
    PrintPosting,
    PrintTransaction,
    SimpleBalance,
)


def _temp_balance():
    return SimpleBalance(
        accounts=[
            BalanceAccount(
                "assets:temp",
                "assets:temp",
                0,
                [Amount("$", Decimal("12")), Amount("EUR", Decimal("0"))],
            ),
            BalanceAccount("liabilities:temp", "liabilities:temp", 0, [Amount("$", Decimal("0"))]),
        ],
        totals=[],
    )


def test_verification_queries_temp_and_placeholder_accounts():
    repository = MagicMock()
    repository.fetch_balance.return_value = _temp_balance()
    uncategorized = [
        PrintTransaction(date="2024-02-03", postings=[PrintPosting("expenses:unknown")])
    ]
    repository.fetch_print.return_value = uncategorized
    logger = MagicMock()

    report = GetVerificationUseCase(repository, logger=logger).execute("main.journal")

    repository.fetch_balance.assert_called_once_with(
        "main.journal", BalanceOptions(queries=("temp",))
    )
    repository.fetch_print.assert_called_once_with(
        "main.journal",
        PrintOptions(queries=("expenses:uncat", "expenses:unknown")),
    )
    assert report.temp_balances == [
        BalanceAccount("assets:temp", "assets:temp", 0, [Amount("$", Decimal("12"))])
    ]
    assert report.uncategorized == uncategorized
    assert report.is_clean is False
    logger.warning.assert_called_once()


def test_clean_journal_is_logged_at_info():
    repository = MagicMock()
    repository.fetch_balance.return_value = SimpleBalance(accounts=[], totals=[])
    repository.fetch_print.return_value = []
    logger = MagicMock()

    report = GetVerificationUseCase(repository, logger=logger).execute()

    assert report.is_clean is True
    logger.info.assert_called_once_with("Verification found nothing to clean up")
    logger.warning.assert_not_called()


def test_outstanding_balances_from_periodic_report_use_last_period():
    report = PeriodicBalance(
        dates=[PeriodDate("2024-01-01", "2024-02-01"), PeriodDate("2024-02-01", "2024-03-01")],
        rows=[
            PeriodicBalanceRow(
                account="assets:temp",
                display_name="temp",
                amounts=[[Amount("$", Decimal("5"))], []],
            ),
            PeriodicBalanceRow(
                account="equity:temp",
                display_name="temp",
                amounts=[[], [Amount("$", Decimal("-3"))]],
            ),
        ],
    )

    assert outstanding_balances(report) == [
        BalanceAccount("equity:temp", "temp", 0, [Amount("$", Decimal("-3"))])
    ]
