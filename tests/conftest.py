"""Shared pytest configuration."""

import pytest

from hledger_bridge.infrastructure.logging import logger as logger_module


@pytest.fixture(autouse=True)
def _logs_in_tmp(tmp_path, monkeypatch):
    """Write log files under a temporary project root."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
