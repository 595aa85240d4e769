"""Use cases reading the balance sheet, income statement and cashflow."""

from pathlib import Path

from hledger_bridge.application.ports.report_repository import (
    ReportRepositoryPort,
)
from hledger_bridge.domain.models import (
    BalanceSheetOptions,
    BalanceSheetReport,
    CashflowOptions,
    CashflowReport,
    CompoundReport,
    IncomeStatementOptions,
    IncomeStatementReport,
)
from hledger_bridge.infrastructure.logging.logger import get_app_logger


class _StatementUseCase:
    """Shared wiring of the compound report use cases."""

    def __init__(self, repository: ReportRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing hledger reports.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def _log_report(self, report: CompoundReport) -> None:
        sections = ", ".join(subreport.name for subreport in report.subreports)
        self._logger.info(
            f"Fetched {report.title} with {len(report.subreports)} "
            f"subreports ({sections}) over {len(report.dates)} periods"
        )


class GetBalanceSheetUseCase(_StatementUseCase):
    """Fetch the balance sheet."""

    def execute(
        self,
        journal_file: Path | str | None = None,
        options: BalanceSheetOptions | None = None,
    ) -> BalanceSheetReport:
        report = self._repository.fetch_balancesheet(
            journal_file,
            options or BalanceSheetOptions(),
        )
        self._log_report(report)
        return report


class GetIncomeStatementUseCase(_StatementUseCase):
    """Fetch the income statement."""

    def execute(
        self,
        journal_file: Path | str | None = None,
        options: IncomeStatementOptions | None = None,
    ) -> IncomeStatementReport:
        report = self._repository.fetch_incomestatement(
            journal_file,
            options or IncomeStatementOptions(),
        )
        self._log_report(report)
        return report


class GetCashflowUseCase(_StatementUseCase):
    """Fetch the cashflow statement."""

    def execute(
        self,
        journal_file: Path | str | None = None,
        options: CashflowOptions | None = None,
    ) -> CashflowReport:
        report = self._repository.fetch_cashflow(
            journal_file,
            options or CashflowOptions(),
        )
        self._log_report(report)
        return report


__all__ = [
    "GetBalanceSheetUseCase",
    "GetIncomeStatementUseCase",
    "GetCashflowUseCase",
]
