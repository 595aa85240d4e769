"""Use case listing bookkeeping leftovers in a journal."""

from pathlib import Path

from hledger_bridge.application.ports.report_repository import (
    ReportRepositoryPort,
)
from hledger_bridge.domain.models import (
    BalanceAccount,
    BalanceOptions,
    BalanceReport,
    PrintOptions,
    SimpleBalance,
    VerificationReport,
)
from hledger_bridge.domain.services.finance import (
    latest_period_amounts,
    nonzero_amounts,
)
from hledger_bridge.infrastructure.logging.logger import get_app_logger

TEMP_ACCOUNTS_QUERY = "temp"
UNCATEGORIZED_QUERIES = ("expenses:uncat", "expenses:unknown")


def outstanding_balances(report: BalanceReport) -> list[BalanceAccount]:
    """Return the accounts of ``report`` with a non-zero balance.

    Periodic reports are reduced to the amounts of their last period.
    """
    if isinstance(report, SimpleBalance):
        candidates = report.accounts
    else:
        candidates = [
            BalanceAccount(
                name=row.account,
                display_name=row.display_name,
                indent=0,
                amounts=latest_period_amounts(row),
            )
            for row in report.rows
        ]
    outstanding = []
    for account in candidates:
        amounts = nonzero_amounts(account.amounts)
        if amounts:
            outstanding.append(
                BalanceAccount(
                    name=account.name,
                    display_name=account.display_name,
                    indent=account.indent,
                    amounts=amounts,
                )
            )
    return outstanding


class GetVerificationUseCase:
    """Find temporary balances and uncategorized expenses."""

    def __init__(self, repository: ReportRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing hledger reports.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, journal_file: Path | str | None = None) -> VerificationReport:
        """Return what still needs attention in the journal.

        Args:
            journal_file: Optional journal overriding the configured one.

        Returns:
            VerificationReport: Non-zero ``temp`` accounts and transactions
            posted to ``expenses:uncat`` or ``expenses:unknown``.
        """
        balances = self._repository.fetch_balance(
            journal_file,
            BalanceOptions().query(TEMP_ACCOUNTS_QUERY),
        )
        uncategorized = self._repository.fetch_print(
            journal_file,
            PrintOptions().query(*UNCATEGORIZED_QUERIES),
        )
        report = VerificationReport(
            temp_balances=outstanding_balances(balances),
            uncategorized=uncategorized,
        )
        if report.is_clean:
            self._logger.info("Verification found nothing to clean up")
        else:
            self._logger.warning(
                f"Verification found {len(report.temp_balances)} temporary "
                f"balances and {len(report.uncategorized)} uncategorized "
                "transactions"
            )
        return report


__all__ = ["GetVerificationUseCase", "outstanding_balances"]
