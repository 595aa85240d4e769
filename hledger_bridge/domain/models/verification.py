"""Domain models for journal bookkeeping checks."""

from dataclasses import dataclass

from .balance import BalanceAccount
from .transactions import PrintReport


@dataclass(frozen=True)
class VerificationReport:
    """Bookkeeping leftovers that should be cleaned up.

    Attributes:
        temp_balances: Temporary accounts still holding a non-zero balance.
        uncategorized: Transactions booked to placeholder expense accounts.
    """

    temp_balances: list[BalanceAccount]
    uncategorized: PrintReport

    @property
    def is_clean(self) -> bool:
        return not self.temp_balances and not self.uncategorized


__all__ = ["VerificationReport"]
