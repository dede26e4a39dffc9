"""
Tests for logging configuration.
"""

import logging
from pathlib import Path

from gitcfg.logging import ColoredFormatter, LogConfig, get_log_level, get_logger, setup_logging


def test_get_logger_prefixes_component() -> None:
    assert get_logger("syntax").name == "gitcfg.syntax"
    assert get_logger("gitcfg.loader").name == "gitcfg.loader"
    assert get_logger("gitcfg").name == "gitcfg"


def test_get_log_level() -> None:
    assert get_log_level("debug") == logging.DEBUG
    assert get_log_level("WARN") == logging.WARNING
    assert get_log_level("bogus") == logging.INFO


def test_setup_logging_replaces_handlers(tmp_path: Path) -> None:
    config = LogConfig(
        console_level="error",
        file_enabled=True,
        file_path=str(tmp_path / "out.log"),
        module_levels={"syntax": "warning"},
    )

    root = setup_logging(config)
    root = setup_logging(config)

    assert len(root.handlers) == 2
    assert root.handlers[0].level == logging.ERROR
    assert get_logger("syntax").level == logging.WARNING

    get_logger("loader").debug("hello file")
    for handler in root.handlers:
        handler.flush()
    assert "hello file" in (tmp_path / "out.log").read_text(encoding="utf-8")

    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    get_logger("syntax").setLevel(logging.NOTSET)


def test_colored_formatter_restores_record() -> None:
    formatter = ColoredFormatter(fmt="%(levelname)s %(name)s %(message)s", use_colors=True)
    record = logging.LogRecord("gitcfg.syntax", logging.ERROR, __file__, 1, "boom", None, None)

    text = formatter.format(record)

    assert "\033[" in text
    assert "boom" in text
    assert record.levelname == "ERROR"
    assert record.name == "gitcfg.syntax"


def test_plain_formatter_without_colors() -> None:
    formatter = ColoredFormatter(fmt="%(levelname)s %(message)s", use_colors=False)
    record = logging.LogRecord("gitcfg.cli", logging.INFO, __file__, 1, "plain", None, None)

    assert formatter.format(record) == "INFO plain"
