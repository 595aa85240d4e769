"""Use case computing the dashboard headline figures."""

from datetime import date
from pathlib import Path

from hledger_bridge.application.ports.report_repository import (
    ReportRepositoryPort,
)
from hledger_bridge.domain.models import (
    Amount,
    BalanceSheetOptions,
    DashboardSummary,
    IncomeStatementOptions,
)
from hledger_bridge.domain.services.finance import grand_total, section_total
from hledger_bridge.domain.services.periods import previous_month_bounds
from hledger_bridge.infrastructure.logging.logger import get_app_logger

EXPENSES_SECTION = "Expenses"


class GetDashboardSummaryUseCase:
    """Compute net worth and the expenses of the last two months."""

    def __init__(self, repository: ReportRepositoryPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing hledger reports.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def _month_expenses(
        self,
        journal_file: Path | str | None,
        start: date,
        end: date,
    ) -> list[Amount]:
        income_statement = self._repository.fetch_incomestatement(
            journal_file,
            IncomeStatementOptions().between(start.isoformat(), end.isoformat()),
        )
        if income_statement.find_subreport(EXPENSES_SECTION) is None:
            self._logger.warning(
                f"{income_statement.title} for {start:%Y-%m} has no "
                f"{EXPENSES_SECTION} section"
            )
        return section_total(income_statement, EXPENSES_SECTION)

    def execute(
        self,
        journal_file: Path | str | None = None,
        today: date | None = None,
    ) -> DashboardSummary:
        """Return the dashboard summary.

        Net worth is the grand total of an unfiltered balance sheet. The
        expenses figures cover the last complete month before ``today``
        and the month before that, for comparison.

        Args:
            journal_file: Optional journal overriding the configured one.
            today: Reference date, defaults to the current date.

        Returns:
            DashboardSummary: Non-zero amounts per commodity.
        """
        today = today or date.today()
        start, end = previous_month_bounds(today)
        previous_start, previous_end = previous_month_bounds(today, months_back=2)
        balance_sheet = self._repository.fetch_balancesheet(
            journal_file,
            BalanceSheetOptions(),
        )
        net_worth = grand_total(balance_sheet)
        expenses = self._month_expenses(journal_file, start, end)
        previous_expenses = self._month_expenses(
            journal_file, previous_start, previous_end
        )
        self._logger.info(
            f"Dashboard summary: {len(net_worth)} net worth commodities, "
            f"{len(expenses)} expense commodities for {start:%Y-%m}, "
            f"{len(previous_expenses)} for {previous_start:%Y-%m}"
        )
        return DashboardSummary(
            net_worth=net_worth,
            period_expenses=expenses,
            period_start=start.isoformat(),
            period_end=end.isoformat(),
            previous_period_expenses=previous_expenses,
            previous_period_start=previous_start.isoformat(),
            previous_period_end=previous_end.isoformat(),
        )


__all__ = ["GetDashboardSummaryUseCase"]
