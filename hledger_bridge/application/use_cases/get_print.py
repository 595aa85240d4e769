"""Use case to read journal transactions through ``hledger print``."""

from pathlib import Path

from hledger_bridge.application.ports.report_repository import (
    ReportRepositoryPort,
)
from hledger_bridge.domain.models import PrintOptions, PrintReport
from hledger_bridge.infrastructure.logging.logger import get_app_logger


class GetPrintUseCase:
    """Fetch transactions with their postings and amount styles."""

    def __init__(self, repository: ReportRepositoryPort, logger=None) -> None:
        """Initialize the use case with its required dependencies."""
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        journal_file: Path | str | None = None,
        options: PrintOptions | None = None,
    ) -> PrintReport:
        transactions = self._repository.fetch_print(
            journal_file,
            options or PrintOptions(),
        )
        postings = sum(len(txn.postings) for txn in transactions)
        self._logger.info(
            f"Fetched {len(transactions)} transactions ({postings} postings)"
        )
        return transactions


__all__ = ["GetPrintUseCase"]
