"""Use case to read the balance report."""

from pathlib import Path

from hledger_bridge.application.ports.report_repository import (
    ReportRepositoryPort,
)
from hledger_bridge.domain.models import (
    BalanceOptions,
    BalanceReport,
    SimpleBalance,
)
from hledger_bridge.infrastructure.logging.logger import get_app_logger


class GetBalanceUseCase:
    """Fetch a simple or periodic balance report."""

    def __init__(self, repository: ReportRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing hledger reports.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        journal_file: Path | str | None = None,
        options: BalanceOptions | None = None,
    ) -> BalanceReport:
        """Return the balance report.

        Args:
            journal_file: Optional journal overriding the configured one.
            options: Balance options, defaults when omitted.

        Returns:
            BalanceReport: ``SimpleBalance`` for single-period requests,
            ``PeriodicBalance`` otherwise.
        """
        report = self._repository.fetch_balance(
            journal_file,
            options or BalanceOptions(),
        )
        if isinstance(report, SimpleBalance):
            self._logger.info(
                f"Fetched simple balance with {len(report.accounts)} accounts"
            )
        else:
            self._logger.info(
                f"Fetched periodic balance with {len(report.rows)} rows "
                f"over {len(report.dates)} periods"
            )
        return report


__all__ = ["GetBalanceUseCase"]
