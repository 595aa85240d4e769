"""Tests for the logging helpers."""

import logging
from unittest.mock import MagicMock

from hledger_bridge.infrastructure.logging import logger as logger_module


def test_builder_writes_daily_file_under_subdir(tmp_path, monkeypatch):
    """Built loggers log to <root>/logs/<subdir>/<stamp>_<prefix>.log."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "_today_stamp",
        staticmethod(lambda: "20240315"),
    )

    builder = (
        logger_module.LoggerBuilder()
        .name("hledger_bridge.test.invocations")
        .subdir("usage")
        .prefix("usage_logs")
        .console(True)
        .level(logging.DEBUG)
    )
    built = builder.build()

    assert built.name == "hledger_bridge.test.invocations"
    assert built.level == logging.DEBUG
    assert built.propagate is False
    [file_handler] = [
        h for h in built.handlers if isinstance(h, logging.FileHandler)
    ]
    assert file_handler.baseFilename == str(
        tmp_path / "logs" / "usage" / "20240315_usage_logs.log"
    )
    assert len(built.handlers) == 2
    assert builder.build() is built


def test_builder_without_console_uses_custom_factories(tmp_path, monkeypatch):
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)
    made = []

    def _file_handler(path, fmt):
        made.append(path)
        handler = logging.NullHandler()
        handler.setFormatter(fmt)
        return handler

    built = (
        logger_module.LoggerBuilder()
        .name("hledger_bridge.test.quiet")
        .formatter(lambda: logging.Formatter("%(message)s"))
        .file_handler(_file_handler)
        .build()
    )

    assert len(made) == 1
    assert made[0].parent == tmp_path / "logs" / "app"
    assert len(built.handlers) == 1
    assert built.handlers[0].formatter._fmt == "%(message)s"


def test_default_handlers_log_at_info(tmp_path):
    fmt = logger_module.LoggerBuilder._default_formatter()
    file_handler = logger_module.LoggerBuilder._default_file_handler(
        tmp_path / "run.log",
        fmt,
    )
    console_handler = logger_module.LoggerBuilder._default_console_handler(fmt)

    assert file_handler.level == logging.INFO
    assert file_handler.formatter is fmt
    assert console_handler.level == logging.INFO
    assert console_handler.formatter is fmt
    file_handler.close()


def test_logger_wrapper_delegates_with_arguments(monkeypatch):
    """Wrapper methods forward messages and lazy arguments."""
    fake_logger = MagicMock()
    monkeypatch.setattr(
        logger_module.LoggerBuilder,
        "build",
        lambda self: fake_logger,
    )
    monkeypatch.setattr(logger_module.Logger, "_instance", None)

    wrapper = logger_module.Logger("hledger_bridge")
    wrapper.info("ran %s", "balance")
    wrapper.warning("odd shape")
    wrapper.error("exit %d", 1)
    wrapper.debug("argv")
    wrapper.critical("down")

    fake_logger.info.assert_called_with("ran %s", "balance")
    fake_logger.warning.assert_called_with("odd shape")
    fake_logger.error.assert_called_with("exit %d", 1)
    fake_logger.debug.assert_called_with("argv")
    fake_logger.critical.assert_called_with("down")
    assert logger_module.Logger("other") is wrapper


def test_app_and_usage_loggers_are_distinct_singletons(monkeypatch):
    built_for = []

    def _fake_build(self):
        built_for.append((self._name, self._subdir, self._console))
        return MagicMock()

    monkeypatch.setattr(logger_module.LoggerBuilder, "build", _fake_build)
    monkeypatch.setattr(logger_module.AppLogger, "_instance", None)
    monkeypatch.setattr(logger_module.UsageLogger, "_instance", None)

    app_logger = logger_module.get_app_logger()
    usage_logger = logger_module.get_usage_logger()

    assert logger_module.get_app_logger() is app_logger
    assert logger_module.get_usage_logger() is usage_logger
    assert app_logger is not usage_logger
    assert built_for == [
        ("hledger_bridge.app", "app", True),
        ("hledger_bridge.usage", "usage", False),
    ]
