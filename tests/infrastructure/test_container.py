"""Tests for the composition root."""

from unittest.mock import MagicMock

from hledger_bridge.infrastructure import container
from hledger_bridge.infrastructure.hledger_repository import (
    HledgerReportRepository,
)
from hledger_bridge.infrastructure.settings import HledgerSettings
from hledger_bridge.infrastructure.subprocess_runner import (
    SubprocessCommandRunner,
)


def test_build_command_runner_uses_configured_executable(monkeypatch):
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())

    runner = container.build_command_runner(HledgerSettings(executable="/opt/hledger"))

    assert isinstance(runner, SubprocessCommandRunner)
    assert runner.executable == "/opt/hledger"


def test_build_report_repository_accepts_runner(monkeypatch):
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    runner = MagicMock()
    runner.run.return_value = "assets\n"

    repository = container.build_report_repository(HledgerSettings(), runner=runner)

    assert isinstance(repository, HledgerReportRepository)
    assert repository.fetch_accounts() == ["assets"]


def test_build_report_repository_reads_environment(monkeypatch):
    monkeypatch.setattr(container, "get_app_logger", lambda: MagicMock())
    monkeypatch.setenv("HLEDGER_PATH", "custom-hledger")
    monkeypatch.delenv("LEDGER_FILE", raising=False)

    runner = container.build_command_runner()

    assert runner.executable == "custom-hledger"
