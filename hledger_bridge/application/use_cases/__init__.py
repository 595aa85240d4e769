"""Application use cases package."""

from .get_accounts import GetAccountsUseCase
from .get_balance import GetBalanceUseCase
from .get_dashboard_summary import GetDashboardSummaryUseCase
from .get_print import GetPrintUseCase
from .get_statements import (
    GetBalanceSheetUseCase,
    GetCashflowUseCase,
    GetIncomeStatementUseCase,
)
from .get_verification import GetVerificationUseCase

__all__ = [
    "GetAccountsUseCase",
    "GetBalanceUseCase",
    "GetBalanceSheetUseCase",
    "GetIncomeStatementUseCase",
    "GetCashflowUseCase",
    "GetPrintUseCase",
    "GetDashboardSummaryUseCase",
    "GetVerificationUseCase",
]
