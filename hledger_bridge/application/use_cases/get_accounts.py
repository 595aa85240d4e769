"""Use case to list the accounts of a journal."""

from pathlib import Path
from typing import List

from hledger_bridge.application.ports.report_repository import (
    ReportRepositoryPort,
)
from hledger_bridge.domain.models import AccountsOptions
from hledger_bridge.infrastructure.logging.logger import get_app_logger


class GetAccountsUseCase:
    """Fetch account names through the report repository."""

    def __init__(self, repository: ReportRepositoryPort, logger=None) -> None:
        """Initialize the use case with its required dependencies."""
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        journal_file: Path | str | None = None,
        options: AccountsOptions | None = None,
    ) -> List[str]:
        """Return account names in hledger's order."""
        accounts = self._repository.fetch_accounts(
            journal_file,
            options or AccountsOptions(),
        )
        self._logger.info(f"Fetched {len(accounts)} accounts")
        return accounts


__all__ = ["GetAccountsUseCase"]
