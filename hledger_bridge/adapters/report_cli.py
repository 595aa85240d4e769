"""CLI adapter printing hledger reports as normalized JSON.

Usage::

    hledger-bridge [-f JOURNAL] balance --monthly --tree expenses
    hledger-bridge -f main.journal accounts --depth 1
    hledger-bridge balance --monthly --budget=goals -X EUR

Quantities are printed as strings so they keep their exact precision. Any
hledger failure is reported on stderr and the command exits with status 1.
"""

import argparse
import json
import sys
from typing import Callable

from hledger_bridge.application.use_cases import (
    GetAccountsUseCase,
    GetBalanceSheetUseCase,
    GetBalanceUseCase,
    GetCashflowUseCase,
    GetIncomeStatementUseCase,
    GetPrintUseCase,
)
from hledger_bridge.domain.errors import (
    CommandFailedError,
    HledgerError,
    ReportParseError,
)
from hledger_bridge.domain.models import (
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
from hledger_bridge.domain.services.serialization import to_jsonable
from hledger_bridge.infrastructure.container import build_report_repository
from hledger_bridge.infrastructure.logging.logger import get_app_logger
from hledger_bridge.infrastructure.settings import HledgerSettings

_PERIODIC_COMMANDS = {
    "balance": (BalanceOptions, GetBalanceUseCase),
    "balancesheet": (BalanceSheetOptions, GetBalanceSheetUseCase),
    "incomestatement": (IncomeStatementOptions, GetIncomeStatementUseCase),
    "cashflow": (CashflowOptions, GetCashflowUseCase),
}


def _add_query_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--begin", "-b", help="Start date (inclusive).")
    parser.add_argument("--end", "-e", help="End date (exclusive).")
    parser.add_argument("--depth", type=int, help="Maximum account depth.")
    parser.add_argument("--real", action="store_true")
    parser.add_argument("--empty", "-E", action="store_true")
    parser.add_argument("--unmarked", action="store_true")
    parser.add_argument("--pending", action="store_true")
    parser.add_argument("--cleared", action="store_true")
    parser.add_argument("queries", nargs="*", metavar="QUERY")


def _add_periodic_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--interval",
        choices=[item.value for item in PeriodInterval],
        help="Report interval.",
    )
    for item in PeriodInterval:
        parser.add_argument(
            f"--{item.value}",
            dest="interval",
            action="store_const",
            const=item.value,
        )
    parser.add_argument("--period", "-p", help="hledger period expression.")
    parser.add_argument(
        "--calculation",
        choices=[item.value for item in CalculationMode],
    )
    parser.add_argument(
        "--accumulation",
        choices=[item.value for item in AccumulationMode],
    )
    parser.add_argument("--tree", action="store_true")
    parser.add_argument("--drop", type=int)
    parser.add_argument("--declared", action="store_true")
    parser.add_argument("--average", "-A", action="store_true")
    parser.add_argument("--row-total", "-T", action="store_true")
    parser.add_argument("--summary-only", action="store_true")
    parser.add_argument("--no-total", "-N", action="store_true")
    parser.add_argument("--no-elide", action="store_true")
    parser.add_argument("--sort-amount", "-S", action="store_true")
    parser.add_argument("--percent", action="store_true")
    parser.add_argument("--layout", choices=[item.value for item in Layout])
    # hledger keeps only the last valuation flag; allow exactly one here.
    valuation = parser.add_mutually_exclusive_group()
    valuation.add_argument("--cost", "-B", action="store_true")
    valuation.add_argument("--market", "-V", action="store_true")
    valuation.add_argument("--exchange", "-X", metavar="COMMODITY")
    valuation.add_argument("--value", metavar="EXPR")
    _add_query_arguments(parser)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hledger-bridge",
        description="Run an hledger report and print it as normalized JSON.",
    )
    parser.add_argument(
        "-f",
        "--file",
        dest="journal_file",
        help="Journal file (defaults to LEDGER_FILE).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    accounts = subparsers.add_parser("accounts", help="List account names.")
    accounts.add_argument("--tree", action="store_true")
    accounts.add_argument("--used", action="store_true")
    accounts.add_argument("--declared", action="store_true")
    _add_query_arguments(accounts)

    periodic = {}
    for name in _PERIODIC_COMMANDS:
        periodic[name] = subparsers.add_parser(name, help=f"Run hledger {name}.")
        _add_periodic_arguments(periodic[name])

    balance = periodic["balance"]
    balance.add_argument(
        "--budget",
        nargs="?",
        const="",
        metavar="GOAL",
        help="Budget report, optionally against the named goal.",
    )
    balance.add_argument("--related", "-r", action="store_true")
    balance.add_argument("--invert", action="store_true")
    balance.add_argument("--transpose", action="store_true")

    cashflow = periodic["cashflow"]
    cashflow.add_argument("--format")
    cashflow.add_argument("--base-url")

    printer = subparsers.add_parser("print", help="Print transactions.")
    printer.add_argument("--explicit", "-x", action="store_true")
    printer.add_argument("--show-costs", action="store_true")
    printer.add_argument(
        "--round",
        choices=[item.value for item in RoundingMode],
    )
    printer.add_argument("--match", "-m", dest="match_desc")
    _add_query_arguments(printer)
    return parser


def _query_fields(args: argparse.Namespace) -> dict:
    return {
        "begin": args.begin,
        "end": args.end,
        "depth": args.depth,
        "real": args.real,
        "empty": args.empty,
        "unmarked": args.unmarked,
        "pending": args.pending,
        "cleared": args.cleared,
        "queries": tuple(args.queries),
    }


def _list_mode(args: argparse.Namespace) -> ListMode:
    return ListMode.TREE if args.tree else ListMode.FLAT


def _valuation_fields(args: argparse.Namespace) -> dict:
    if args.cost:
        return {"valuation": ValuationMode.COST}
    if args.market:
        return {"valuation": ValuationMode.MARKET}
    if args.exchange is not None:
        return {"valuation": ValuationMode.EXCHANGE, "valuation_target": args.exchange}
    if args.value is not None:
        return {"valuation": ValuationMode.VALUE, "valuation_target": args.value}
    return {}


def _calculation(args: argparse.Namespace) -> CalculationMode | None:
    calculation = CalculationMode(args.calculation) if args.calculation else None
    if getattr(args, "budget", None) is None:
        return calculation
    if calculation not in (None, CalculationMode.BUDGET):
        raise ValueError(
            f"--budget conflicts with --calculation {calculation.value}"
        )
    return CalculationMode.BUDGET


def _command_fields(args: argparse.Namespace) -> dict:
    if args.command == "balance":
        return {
            "budget_goal": args.budget or None,
            "related": args.related,
            "invert": args.invert,
            "transpose": args.transpose,
        }
    if args.command == "cashflow":
        return {"format": args.format, "base_url": args.base_url}
    return {}


def build_options(args: argparse.Namespace):
    """Translate parsed arguments into the options value of the command.

    Args:
        args: Namespace produced by the CLI parser.

    Returns:
        Options value matching ``args.command``.
    """
    fields = _query_fields(args)
    if args.command == "accounts":
        return AccountsOptions(
            used=args.used,
            declared=args.declared,
            list_mode=_list_mode(args),
            **fields,
        )
    if args.command == "print":
        return PrintOptions(
            explicit=args.explicit,
            show_costs=args.show_costs,
            round=RoundingMode(args.round) if args.round else None,
            match_desc=args.match_desc,
            **fields,
        )
    options_cls, _ = _PERIODIC_COMMANDS[args.command]
    return options_cls(
        calculation=_calculation(args),
        accumulation=(
            AccumulationMode(args.accumulation) if args.accumulation else None
        ),
        list_mode=_list_mode(args),
        interval=PeriodInterval(args.interval) if args.interval else None,
        period=args.period,
        drop=args.drop,
        declared=args.declared,
        average=args.average,
        row_total=args.row_total,
        summary_only=args.summary_only,
        no_total=args.no_total,
        no_elide=args.no_elide,
        sort_amount=args.sort_amount,
        percent=args.percent,
        layout=Layout(args.layout) if args.layout else None,
        **_valuation_fields(args),
        **_command_fields(args),
        **fields,
    )


def _use_case_factory(command: str) -> Callable:
    if command == "accounts":
        return GetAccountsUseCase
    if command == "print":
        return GetPrintUseCase
    return _PERIODIC_COMMANDS[command][1]


def _describe_error(exc: HledgerError) -> str:
    if isinstance(exc, CommandFailedError):
        return exc.stderr.strip() or str(exc)
    if isinstance(exc, ReportParseError):
        return exc.reason
    return str(exc)


def main(argv: list[str] | None = None) -> int:
    """Run the requested report and print it as JSON.

    Args:
        argv: Command-line arguments, ``sys.argv[1:]`` when None.

    Returns:
        int: Process exit status.
    """
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    try:
        options = build_options(args)
    except ValueError as exc:
        print(f"hledger-bridge: {exc}", file=sys.stderr)
        return 2

    repository = build_report_repository(HledgerSettings.from_env())
    use_case = _use_case_factory(args.command)(repository, logger=logger)
    try:
        report = use_case.execute(args.journal_file, options)
    except HledgerError as exc:
        logger.error(f"{args.command} failed: {exc}")
        print(f"hledger-bridge: {_describe_error(exc)}", file=sys.stderr)
        return 1

    print(json.dumps(to_jsonable(report), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
