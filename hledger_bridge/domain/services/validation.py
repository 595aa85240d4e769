"""Domain validation helpers."""

from logging import Logger

from hledger_bridge.domain.models import (
    CompoundReport,
    PeriodDate,
    PeriodicBalance,
    PeriodicBalanceRow,
)


def validate_period_alignment(
    dates: list[PeriodDate],
    rows: list[PeriodicBalanceRow],
    logger: Logger,
    context: str = "report",
) -> bool:
    """Warn when rows do not carry one amount list per period.

    Args:
        dates: Reporting periods of the report.
        rows: Rows whose per-period amounts are checked.
        logger: Logger used for warnings.
        context: Report or section name used in messages.

    Returns:
        bool: True when every row matches the period count.
    """
    aligned = True
    for row in rows:
        if row.amounts and len(row.amounts) != len(dates):
            aligned = False
            logger.warning(
                f"{context}: row '{row.account}' has {len(row.amounts)} "
                f"period amounts for {len(dates)} periods"
            )
    return aligned


def validate_periodic_balance(
    report: PeriodicBalance,
    logger: Logger,
    context: str = "balance",
) -> bool:
    """Check rows and totals of a periodic balance against its dates."""
    rows = list(report.rows)
    if report.totals is not None:
        rows.append(report.totals)
    return validate_period_alignment(report.dates, rows, logger, context)


def validate_compound_report(
    report: CompoundReport,
    logger: Logger,
    minimum_subreports: int = 1,
) -> bool:
    """Warn about unexpected section counts or misaligned periods.

    Args:
        report: Balance sheet, income statement or cashflow report.
        logger: Logger used for warnings.
        minimum_subreports: Section count hledger normally emits.

    Returns:
        bool: True when no inconsistency was found.
    """
    valid = True
    if len(report.subreports) < minimum_subreports:
        valid = False
        logger.warning(
            f"{report.title}: expected at least {minimum_subreports} "
            f"subreports, got {len(report.subreports)}"
        )
    for subreport in report.subreports:
        if not validate_periodic_balance(
            subreport.data,
            logger,
            context=f"{report.title}/{subreport.name}",
        ):
            valid = False
    if report.totals is not None and not validate_period_alignment(
        report.dates,
        [report.totals],
        logger,
        context=report.title,
    ):
        valid = False
    return valid


__all__ = [
    "validate_period_alignment",
    "validate_periodic_balance",
    "validate_compound_report",
]
