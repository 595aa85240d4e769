"""Tests for the hledger report repository."""

import json
from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from hledger_bridge.domain.errors import CommandFailedError, JsonDecodeError
from hledger_bridge.domain.models import (
    AccountsOptions,
    Amount,
    BalanceOptions,
    BalanceSheetReport,
    PeriodicBalance,
    PrintOptions,
    SimpleBalance,
)
from hledger_bridge.infrastructure.hledger_repository import (
    HledgerReportRepository,
)
from hledger_bridge.infrastructure.settings import HledgerSettings

DOLLARS_100 = {
    "acommodity": "$",
    "aquantity": {"decimalMantissa": 10000, "decimalPlaces": 2},
}


def _date(value):
    return {"tag": "Exact", "contents": value}


def _repository(output, settings=None):
    runner = MagicMock()
    runner.run.return_value = output
    logger = MagicMock()
    return HledgerReportRepository(runner, settings=settings, logger=logger), runner, logger


def test_fetch_accounts_with_depth_filter():
    repository, runner, _ = _repository("assets:bank:checking\nexpenses:groceries\n")

    accounts = repository.fetch_accounts("main.journal", AccountsOptions(depth=1))

    assert set(accounts) == {"assets:bank:checking", "expenses:groceries"}
    args = runner.run.call_args[0][0]
    assert "--depth=1" in args
    assert "--flat" in args
    assert runner.run.call_args[1]["journal_file"] == "main.journal"


def test_fetch_balance_simple():
    document = [
        [["assets:bank:checking", "assets:bank:checking", 0, [DOLLARS_100]]],
        [DOLLARS_100],
    ]
    repository, runner, _ = _repository(json.dumps(document))

    report = repository.fetch_balance(None, BalanceOptions())

    assert isinstance(report, SimpleBalance)
    assert report.totals == [Amount("$", Decimal("100.00"))]
    assert runner.run.call_args[0][0][:3] == ["balance", "--output-format", "json"]


def test_fetch_balance_periodic_warns_on_misaligned_rows():
    document = {
        "prDates": [[_date("2024-01-01"), _date("2024-02-01")]],
        "prRows": [{"prrName": "assets", "prrAmounts": [[], []]}],
    }
    repository, _, logger = _repository(json.dumps(document))

    report = repository.fetch_balance(None, BalanceOptions().monthly())

    assert isinstance(report, PeriodicBalance)
    logger.warning.assert_called_once()


def test_settings_journal_is_used_by_default():
    settings = HledgerSettings(journal_file=Path("/data/main.journal"))
    repository, runner, _ = _repository("[]", settings=settings)

    repository.fetch_print(None, PrintOptions())
    assert runner.run.call_args[1]["journal_file"] == str(Path("/data/main.journal"))

    repository.fetch_print("override.journal", PrintOptions())
    assert runner.run.call_args[1]["journal_file"] == "override.journal"


def test_single_section_balance_sheet_is_logged_not_fatal():
    document = {
        "cbrTitle": "Balance Sheet 2024-01-31",
        "cbrDates": [[_date("2024-01-01"), _date("2024-02-01")]],
        "cbrSubreports": [
            [
                "Assets",
                {
                    "prDates": [[_date("2024-01-01"), _date("2024-02-01")]],
                    "prRows": [],
                    "prTotals": {"prrName": [], "prrAmounts": [[DOLLARS_100]]},
                },
                True,
            ]
        ],
    }
    repository, _, logger = _repository(json.dumps(document))

    report = repository.fetch_balancesheet(None, None)

    assert isinstance(report, BalanceSheetReport)
    logger.warning.assert_called_once()


def test_runner_errors_propagate():
    repository, runner, _ = _repository("")
    runner.run.side_effect = CommandFailedError(1, "hledger: journal not found")

    with pytest.raises(CommandFailedError):
        repository.fetch_incomestatement(None, None)


def test_invalid_json_is_reported():
    repository, _, _ = _repository("not json")
    with pytest.raises(JsonDecodeError):
        repository.fetch_cashflow(None, None)
