"""Render report options into hledger command-line arguments.

Each ``compile_<kind>_args`` function returns the argument list that
follows the executable and the optional ``-f JOURNAL`` pair::

    [subcommand, "--output-format", "json", *flags, *queries]

Query patterns always come last and keep their order, since hledger reads
every trailing non-flag argument as a query.
"""

from hledger_bridge.domain.models import (
    AccountsOptions,
    AccumulationMode,
    BalanceOptions,
    BalanceSheetOptions,
    CalculationMode,
    CashflowOptions,
    IncomeStatementOptions,
    PrintOptions,
    ValuationMode,
)
from hledger_bridge.domain.models.options import _PeriodicReportOptions, _QueryOptions

JSON_OUTPUT = ["--output-format", "json"]

_ACCUMULATION_FLAGS = {
    AccumulationMode.CHANGE: "--change",
    AccumulationMode.CUMULATIVE: "--cumulative",
    AccumulationMode.HISTORICAL: "--historical",
}


def _flag(args: list[str], enabled: bool, flag: str) -> None:
    if enabled:
        args.append(flag)


def _separate(args: list[str], flag: str, value: str | None) -> None:
    # hledger-style "--flag VALUE" pair.
    if value is not None:
        args.extend([flag, value])


def _joined(args: list[str], flag: str, value) -> None:
    # hledger-style "--flag=VALUE" argument.
    if value is not None:
        args.append(f"{flag}={value}")


def _period_flags(args: list[str], options: _PeriodicReportOptions) -> None:
    if options.interval is not None:
        args.append(f"--{options.interval.value}")
    _separate(args, "--period", options.period)


def _calculation_flags(args: list[str], options: _PeriodicReportOptions) -> None:
    mode = options.calculation
    if mode is None:
        return
    if mode is CalculationMode.BUDGET:
        goal = getattr(options, "budget_goal", None)
        args.append("--budget" if goal is None else f"--budget={goal}")
        return
    args.append(f"--{mode.value}")


def _accumulation_flags(args: list[str], options: _PeriodicReportOptions) -> None:
    if options.accumulation is not None:
        args.append(_ACCUMULATION_FLAGS[options.accumulation])


def _list_mode_flag(args: list[str], options) -> None:
    args.append(f"--{options.list_mode.value}")


def _display_flags(args: list[str], options: _PeriodicReportOptions) -> None:
    _joined(args, "--drop", options.drop)
    _flag(args, options.declared, "--declared")
    _flag(args, options.average, "--average")
    _flag(args, options.row_total, "--row-total")
    _flag(args, options.summary_only, "--summary-only")
    _flag(args, options.no_total, "--no-total")
    _flag(args, options.no_elide, "--no-elide")
    _flag(args, options.sort_amount, "--sort-amount")
    _flag(args, options.percent, "--percent")


def _layout_flag(args: list[str], options: _PeriodicReportOptions) -> None:
    if options.layout is not None:
        args.append(f"--layout={options.layout.value}")


def _filter_flags(args: list[str], options: _QueryOptions) -> None:
    """Depth, empty, date and status filters, in hledger's usual order."""
    _joined(args, "--depth", options.depth)
    _flag(args, options.empty, "--empty")
    _separate(args, "--begin", options.begin)
    _separate(args, "--end", options.end)
    _flag(args, options.unmarked, "--unmarked")
    _flag(args, options.pending, "--pending")
    _flag(args, options.cleared, "--cleared")
    _flag(args, options.real, "--real")


def _valuation_flags(args: list[str], options: _PeriodicReportOptions) -> None:
    mode = options.valuation
    if mode is None:
        return
    if mode is ValuationMode.EXCHANGE:
        _separate(args, "--exchange", options.valuation_target)
    elif mode is ValuationMode.VALUE:
        _joined(args, "--value", options.valuation_target)
    else:
        args.append(f"--{mode.value}")


def _periodic_report_args(
    subcommand: str,
    options: _PeriodicReportOptions,
    extra_display=None,
) -> list[str]:
    args = [subcommand, *JSON_OUTPUT]
    _period_flags(args, options)
    _calculation_flags(args, options)
    _accumulation_flags(args, options)
    _list_mode_flag(args, options)
    _display_flags(args, options)
    if extra_display is not None:
        extra_display(args, options)
    _layout_flag(args, options)
    _filter_flags(args, options)
    _valuation_flags(args, options)
    return args


def _balance_only_flags(args: list[str], options: BalanceOptions) -> None:
    _flag(args, options.related, "--related")
    _flag(args, options.invert, "--invert")
    _flag(args, options.transpose, "--transpose")


def compile_accounts_args(options: AccountsOptions | None = None) -> list[str]:
    """Build ``hledger accounts`` arguments.

    ``accounts`` has no JSON output; its plain-text listing is parsed
    line by line, so no output-format flags are emitted.
    """
    options = options or AccountsOptions()
    args = ["accounts"]
    _flag(args, options.used, "--used")
    _flag(args, options.declared, "--declared")
    _flag(args, options.unused, "--unused")
    _flag(args, options.undeclared, "--undeclared")
    _flag(args, options.types, "--types")
    _flag(args, options.positions, "--positions")
    _flag(args, options.directives, "--directives")
    _list_mode_flag(args, options)
    _joined(args, "--drop", options.drop)
    _separate(args, "--period", options.period)
    _filter_flags(args, options)
    args.extend(options.queries)
    return args


def compile_balance_args(options: BalanceOptions | None = None) -> list[str]:
    """Build ``hledger balance`` arguments.

    Args:
        options: Balance options, defaults when None.

    Returns:
        list[str]: Arguments, queries last.
    """
    options = options or BalanceOptions()
    args = _periodic_report_args("balance", options, _balance_only_flags)
    args.extend(options.queries)
    return args


def compile_balancesheet_args(
    options: BalanceSheetOptions | None = None,
) -> list[str]:
    options = options or BalanceSheetOptions()
    args = _periodic_report_args("balancesheet", options)
    args.extend(options.queries)
    return args


def compile_incomestatement_args(
    options: IncomeStatementOptions | None = None,
) -> list[str]:
    options = options or IncomeStatementOptions()
    args = _periodic_report_args("incomestatement", options)
    args.extend(options.queries)
    return args


def compile_cashflow_args(options: CashflowOptions | None = None) -> list[str]:
    """Build ``hledger cashflow`` arguments, with its output-format extras."""
    options = options or CashflowOptions()
    args = _periodic_report_args("cashflow", options)
    _joined(args, "--format", options.format)
    _joined(args, "--base-url", options.base_url)
    args.extend(options.queries)
    return args


def compile_print_args(options: PrintOptions | None = None) -> list[str]:
    """Build ``hledger print`` arguments."""
    options = options or PrintOptions()
    args = ["print", *JSON_OUTPUT]
    _flag(args, options.explicit, "--explicit")
    _flag(args, options.show_costs, "--show-costs")
    if options.round is not None:
        args.append(f"--round={options.round.value}")
    _flag(args, options.new, "--new")
    _separate(args, "--match", options.match_desc)
    _separate(args, "--period", options.period)
    _joined(args, "--depth", options.depth)
    _separate(args, "--begin", options.begin)
    _separate(args, "--end", options.end)
    _flag(args, options.unmarked, "--unmarked")
    _flag(args, options.pending, "--pending")
    _flag(args, options.cleared, "--cleared")
    _flag(args, options.real, "--real")
    _flag(args, options.empty, "--empty")
    args.extend(options.queries)
    return args


__all__ = [
    "JSON_OUTPUT",
    "compile_accounts_args",
    "compile_balance_args",
    "compile_balancesheet_args",
    "compile_incomestatement_args",
    "compile_cashflow_args",
    "compile_print_args",
]
