"""Domain package for hledger report models and business rules."""

from .errors import (
    CommandFailedError,
    ExecutableNotFoundError,
    HledgerError,
    HledgerIOError,
    InvalidUtf8Error,
    JsonDecodeError,
    ReportParseError,
)
from .models import (
    Amount,
    BalanceReport,
    BalanceSheetReport,
    CashflowReport,
    IncomeStatementReport,
    PeriodicBalance,
    PrintTransaction,
    SimpleBalance,
)
from .services import (
    grand_total,
    nonzero_amounts,
    section_total,
    to_jsonable,
)

__all__ = [
    "HledgerError",
    "ExecutableNotFoundError",
    "HledgerIOError",
    "CommandFailedError",
    "InvalidUtf8Error",
    "JsonDecodeError",
    "ReportParseError",
    "Amount",
    "BalanceReport",
    "SimpleBalance",
    "PeriodicBalance",
    "BalanceSheetReport",
    "IncomeStatementReport",
    "CashflowReport",
    "PrintTransaction",
    "grand_total",
    "nonzero_amounts",
    "section_total",
    "to_jsonable",
]
