"""Tests for the subprocess command runner."""

import subprocess
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from hledger_bridge.domain.errors import (
    CommandFailedError,
    ExecutableNotFoundError,
    HledgerIOError,
    InvalidUtf8Error,
    JsonDecodeError,
)
from hledger_bridge.infrastructure import subprocess_runner
from hledger_bridge.infrastructure.subprocess_runner import (
    SubprocessCommandRunner,
    decode_json_output,
)


def _runner(executable="hledger"):
    return SubprocessCommandRunner(
        executable,
        logger=MagicMock(),
        usage_logger=MagicMock(),
    )


def _fake_run(monkeypatch, returncode=0, stdout=b"", stderr=b""):
    calls = []

    def _run(argv, **kwargs):
        calls.append((argv, kwargs))
        return subprocess.CompletedProcess(argv, returncode, stdout, stderr)

    monkeypatch.setattr(subprocess_runner.subprocess, "run", _run)
    return calls


def test_run_returns_stdout_and_builds_argv(monkeypatch):
    calls = _fake_run(monkeypatch, stdout=b"[]")
    runner = _runner("/opt/bin/hledger")

    output = runner.run(["print", "--output-format", "json"], journal_file="main.journal")

    assert output == "[]"
    argv, kwargs = calls[0]
    assert argv == [
        "/opt/bin/hledger", "-f", "main.journal",
        "print", "--output-format", "json",
    ]
    assert kwargs["capture_output"] is True
    assert kwargs["stdin"] is subprocess.DEVNULL


def test_run_without_journal(monkeypatch):
    calls = _fake_run(monkeypatch, stdout=b"assets\n")
    _runner().run(["accounts"])
    assert calls[0][0] == ["hledger", "accounts"]


def test_each_invocation_is_logged(monkeypatch):
    _fake_run(monkeypatch, stdout=b"[]")
    runner = _runner()
    runner.run(["print"])
    runner._usage_logger.info.assert_called_once()
    assert "exit=0" in runner._usage_logger.info.call_args[0][0]


def test_missing_journal_is_command_failure(monkeypatch):
    stderr = b"hledger: Error: /tmp/missing.journal: openFile: does not exist\n"
    _fake_run(monkeypatch, returncode=1, stderr=stderr)

    with pytest.raises(CommandFailedError) as exc_info:
        _runner().run(["balance"], journal_file="/tmp/missing.journal")

    assert exc_info.value.code != 0
    assert "does not exist" in exc_info.value.stderr


def test_undecodable_stderr_is_kept(monkeypatch):
    _fake_run(monkeypatch, returncode=2, stderr=b"bad \xff byte")
    with pytest.raises(CommandFailedError) as exc_info:
        _runner().run(["balance"])
    assert exc_info.value.stderr.startswith("bad ")


def test_executable_not_found(monkeypatch):
    def _run(argv, **kwargs):
        raise FileNotFoundError(argv[0])

    monkeypatch.setattr(subprocess_runner.subprocess, "run", _run)
    with pytest.raises(ExecutableNotFoundError) as exc_info:
        _runner("no-such-hledger").run(["accounts"])
    assert exc_info.value.executable == "no-such-hledger"


def test_other_os_errors_are_io_errors(monkeypatch):
    def _run(argv, **kwargs):
        raise PermissionError("denied")

    monkeypatch.setattr(subprocess_runner.subprocess, "run", _run)
    with pytest.raises(HledgerIOError):
        _runner().run(["accounts"])


def test_invalid_utf8_stdout(monkeypatch):
    _fake_run(monkeypatch, stdout=b"\xff\xfe")
    with pytest.raises(InvalidUtf8Error):
        _runner().run(["accounts"])


def test_decode_json_output_keeps_decimal_precision():
    document = decode_json_output('{"aquantity": 1.10, "n": 3}')
    assert document["aquantity"] == Decimal("1.10")
    assert str(document["aquantity"]) == "1.10"
    assert document["n"] == 3


def test_decode_json_output_rejects_invalid_json():
    with pytest.raises(JsonDecodeError):
        decode_json_output("Error: not json")
