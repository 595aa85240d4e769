"""Domain models for dashboard aggregates."""

from dataclasses import dataclass

from .amounts import Amount


@dataclass(frozen=True)
class DashboardSummary:
    """Headline figures shown on the dashboard.

    Attributes:
        net_worth: Non-zero grand total amounts of the balance sheet.
        period_expenses: Non-zero expenses total of the summarized period.
        period_start: First day of the summarized period (ISO date).
        period_end: Exclusive end of the summarized period (ISO date).
        previous_period_expenses: Non-zero expenses total of the month
            before the summarized period.
        previous_period_start: First day of that month (ISO date).
        previous_period_end: Exclusive end of that month (ISO date).
    """

    net_worth: list[Amount]
    period_expenses: list[Amount]
    period_start: str
    period_end: str
    previous_period_expenses: list[Amount]
    previous_period_start: str
    previous_period_end: str


__all__ = ["DashboardSummary"]
