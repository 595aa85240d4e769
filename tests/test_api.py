"""Tests for the caller-facing API functions."""

import json
import subprocess
from decimal import Decimal

import pytest

from hledger_bridge import api
from hledger_bridge.domain.errors import CommandFailedError, ExecutableNotFoundError
from hledger_bridge.domain.models import (
    AccountsOptions,
    IncomeStatementOptions,
    PeriodicBalance,
)
from hledger_bridge.infrastructure import subprocess_runner
from hledger_bridge.infrastructure.settings import HledgerSettings


def _date(value):
    return {"tag": "Exact", "contents": value}


def _install_hledger(monkeypatch, stdout="", returncode=0, stderr=""):
    calls = []

    def _run(argv, **kwargs):
        calls.append(argv)
        return subprocess.CompletedProcess(
            argv,
            returncode,
            stdout.encode("utf-8"),
            stderr.encode("utf-8"),
        )

    monkeypatch.setattr(subprocess_runner.subprocess, "run", _run)
    return calls


def test_get_accounts_end_to_end(monkeypatch):
    calls = _install_hledger(monkeypatch, stdout="assets:bank:checking\nexpenses:groceries\n")

    accounts = api.get_accounts("main.journal", AccountsOptions(depth=1))

    assert set(accounts) == {"assets:bank:checking", "expenses:groceries"}
    assert calls[0][:4] == ["hledger", "-f", "main.journal", "accounts"]
    assert "--depth=1" in calls[0]
    assert "--flat" in calls[0]


def test_get_balance_periodic_end_to_end(monkeypatch):
    document = {
        "prDates": [[_date("2024-01-01"), _date("2024-02-01")]],
        "prRows": [
            {
                "prrName": "expenses:food",
                "prrAmounts": [[{"acommodity": "$", "aquantity": 12.5}]],
            }
        ],
        "prTotals": None,
    }
    calls = _install_hledger(monkeypatch, stdout=json.dumps(document))

    report = api.get_balance(settings=HledgerSettings(executable="/opt/hledger"))

    assert isinstance(report, PeriodicBalance)
    assert report.rows[0].amounts[0][0].quantity == Decimal("12.5")
    assert report.totals is None
    assert calls[0][:2] == ["/opt/hledger", "balance"]


def test_settings_default_journal(monkeypatch, tmp_path):
    journal = tmp_path / "main.journal"
    calls = _install_hledger(monkeypatch, stdout="[]")

    assert api.get_print(settings=HledgerSettings(journal_file=journal)) == []
    assert calls[0][1:3] == ["-f", str(journal)]


def test_command_failure_is_raised(monkeypatch):
    _install_hledger(
        monkeypatch,
        returncode=1,
        stderr="hledger: Error: missing.journal does not exist",
    )

    with pytest.raises(CommandFailedError) as exc_info:
        api.get_incomestatement("missing.journal", IncomeStatementOptions())

    assert exc_info.value.code == 1
    assert "does not exist" in exc_info.value.stderr


def test_missing_executable(monkeypatch):
    def _run(argv, **kwargs):
        raise FileNotFoundError(argv[0])

    monkeypatch.setattr(subprocess_runner.subprocess, "run", _run)

    with pytest.raises(ExecutableNotFoundError):
        api.get_cashflow(settings=HledgerSettings(executable="missing-hledger"))
