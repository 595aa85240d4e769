"""Domain models package."""

from .amounts import Amount, PeriodDate, Price
from .balance import (
    BalanceAccount,
    BalanceReport,
    PeriodicBalance,
    PeriodicBalanceRow,
    SimpleBalance,
)
from .dashboard import DashboardSummary
from .options import (
    AccountsOptions,
    AccumulationMode,
    BalanceOptions,
    BalanceSheetOptions,
    CalculationMode,
    CashflowOptions,
    IncomeStatementOptions,
    Layout,
    ListMode,
    PeriodInterval,
    PrintOptions,
    RoundingMode,
    ValuationMode,
)
from .statements import (
    BalanceSheetReport,
    CashflowReport,
    CompoundReport,
    IncomeStatementReport,
    Subreport,
)
from .transactions import (
    AmountStyle,
    BalanceAssertion,
    DigitGroupStyle,
    PrintAmount,
    PrintPosting,
    PrintReport,
    PrintTransaction,
    SourcePosition,
)
from .verification import VerificationReport

__all__ = [
    "Amount",
    "Price",
    "PeriodDate",
    "BalanceAccount",
    "PeriodicBalanceRow",
    "SimpleBalance",
    "PeriodicBalance",
    "BalanceReport",
    "Subreport",
    "CompoundReport",
    "BalanceSheetReport",
    "IncomeStatementReport",
    "CashflowReport",
    "SourcePosition",
    "DigitGroupStyle",
    "AmountStyle",
    "PrintAmount",
    "BalanceAssertion",
    "PrintPosting",
    "PrintTransaction",
    "PrintReport",
    "DashboardSummary",
    "VerificationReport",
    "CalculationMode",
    "AccumulationMode",
    "ListMode",
    "PeriodInterval",
    "Layout",
    "RoundingMode",
    "ValuationMode",
    "AccountsOptions",
    "BalanceOptions",
    "BalanceSheetOptions",
    "IncomeStatementOptions",
    "CashflowOptions",
    "PrintOptions",
]
