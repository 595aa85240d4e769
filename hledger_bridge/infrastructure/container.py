"""Composition root for wiring infrastructure adapters."""

from hledger_bridge.application.ports.command_runner import CommandRunnerPort
from hledger_bridge.application.ports.report_repository import (
    ReportRepositoryPort,
)
from hledger_bridge.infrastructure.hledger_repository import (
    HledgerReportRepository,
)
from hledger_bridge.infrastructure.logging.logger import get_app_logger
from hledger_bridge.infrastructure.settings import HledgerSettings
from hledger_bridge.infrastructure.subprocess_runner import (
    SubprocessCommandRunner,
)


def build_command_runner(
    settings: HledgerSettings | None = None,
) -> CommandRunnerPort:
    """Return the subprocess runner for the configured executable."""
    resolved = settings or HledgerSettings.from_env()
    return SubprocessCommandRunner(
        resolved.executable,
        logger=get_app_logger(),
    )


def build_report_repository(
    settings: HledgerSettings | None = None,
    runner: CommandRunnerPort | None = None,
) -> ReportRepositoryPort:
    """Return the hledger report repository."""
    resolved = settings or HledgerSettings.from_env()
    return HledgerReportRepository(
        runner or build_command_runner(resolved),
        settings=resolved,
        logger=get_app_logger(),
    )


__all__ = ["build_command_runner", "build_report_repository"]
