"""hledger-backed repository producing typed reports."""

from pathlib import Path

from hledger_bridge.application.ports.command_runner import CommandRunnerPort
from hledger_bridge.application.ports.report_repository import (
    ReportRepositoryPort,
)
from hledger_bridge.domain.models import (
    AccountsOptions,
    BalanceOptions,
    BalanceReport,
    BalanceSheetOptions,
    BalanceSheetReport,
    CashflowOptions,
    CashflowReport,
    CompoundReport,
    IncomeStatementOptions,
    IncomeStatementReport,
    PeriodicBalance,
    PrintOptions,
    PrintReport,
)
from hledger_bridge.domain.services.validation import (
    validate_compound_report,
    validate_periodic_balance,
)
from hledger_bridge.infrastructure.hledger_json import (
    parse_accounts_output,
    parse_balance_report,
    parse_balancesheet_report,
    parse_cashflow_report,
    parse_incomestatement_report,
    parse_print_report,
)
from hledger_bridge.infrastructure.logging.logger import get_app_logger
from hledger_bridge.infrastructure.options_compiler import (
    compile_accounts_args,
    compile_balance_args,
    compile_balancesheet_args,
    compile_cashflow_args,
    compile_incomestatement_args,
    compile_print_args,
)
from hledger_bridge.infrastructure.settings import HledgerSettings
from hledger_bridge.infrastructure.subprocess_runner import decode_json_output

# hledger always emits at least these two sections for the statements.
_MINIMUM_STATEMENT_SECTIONS = 2


class HledgerReportRepository(ReportRepositoryPort):
    """Repository compiling options, running hledger and parsing output."""

    def __init__(
        self,
        runner: CommandRunnerPort,
        settings: HledgerSettings | None = None,
        logger=None,
    ) -> None:
        """Initialize the repository.

        Args:
            runner: Port executing hledger.
            settings: Settings supplying the default journal.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._runner = runner
        self._settings = settings or HledgerSettings()
        self._logger = logger or get_app_logger()

    def _run(self, args: list[str], journal_file: Path | str | None) -> str:
        return self._runner.run(
            args,
            journal_file=self._settings.resolve_journal(journal_file),
        )

    def _run_json(self, args: list[str], journal_file: Path | str | None):
        return decode_json_output(self._run(args, journal_file))

    def fetch_accounts(
        self,
        journal_file: Path | str | None = None,
        options: AccountsOptions | None = None,
    ) -> list[str]:
        output = self._run(compile_accounts_args(options), journal_file)
        return parse_accounts_output(output)

    def fetch_balance(
        self,
        journal_file: Path | str | None = None,
        options: BalanceOptions | None = None,
    ) -> BalanceReport:
        """Return the balance report in whichever shape hledger chose."""
        document = self._run_json(compile_balance_args(options), journal_file)
        report = parse_balance_report(document)
        if isinstance(report, PeriodicBalance):
            validate_periodic_balance(report, self._logger)
        return report

    def _check_statement(self, report: CompoundReport, minimum: int) -> None:
        validate_compound_report(
            report,
            self._logger,
            minimum_subreports=minimum,
        )

    def fetch_balancesheet(
        self,
        journal_file: Path | str | None = None,
        options: BalanceSheetOptions | None = None,
    ) -> BalanceSheetReport:
        document = self._run_json(
            compile_balancesheet_args(options), journal_file
        )
        report = parse_balancesheet_report(document)
        self._check_statement(report, _MINIMUM_STATEMENT_SECTIONS)
        return report

    def fetch_incomestatement(
        self,
        journal_file: Path | str | None = None,
        options: IncomeStatementOptions | None = None,
    ) -> IncomeStatementReport:
        document = self._run_json(
            compile_incomestatement_args(options), journal_file
        )
        report = parse_incomestatement_report(document)
        self._check_statement(report, _MINIMUM_STATEMENT_SECTIONS)
        return report

    def fetch_cashflow(
        self,
        journal_file: Path | str | None = None,
        options: CashflowOptions | None = None,
    ) -> CashflowReport:
        document = self._run_json(compile_cashflow_args(options), journal_file)
        report = parse_cashflow_report(document)
        self._check_statement(report, 1)
        return report

    def fetch_print(
        self,
        journal_file: Path | str | None = None,
        options: PrintOptions | None = None,
    ) -> PrintReport:
        document = self._run_json(compile_print_args(options), journal_file)
        return parse_print_report(document)


__all__ = ["HledgerReportRepository"]
