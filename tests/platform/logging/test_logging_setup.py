"""Tests for the shared logger bootstrap."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest
from rich.logging import RichHandler

from dbrestore.platform.logging import setup_logger


@pytest.fixture(autouse=True)
def restore_default_handlers() -> Iterator[None]:
    yield
    _ = setup_logger()


def test_console_only_by_default() -> None:
    app_logger = setup_logger(console_level=logging.ERROR)

    assert app_logger.name == "dbrestore"
    assert len(app_logger.handlers) == 1
    assert isinstance(app_logger.handlers[0], RichHandler)
    assert app_logger.handlers[0].level == logging.ERROR


def test_log_file_gets_a_rotating_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "dbrestore.log"

    app_logger = setup_logger(log_file=log_file, file_level=logging.INFO)
    app_logger.info("restored")
    for handler in app_logger.handlers:
        handler.flush()

    file_handlers = [h for h in app_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].level == logging.INFO
    assert "INFO - restored" in log_file.read_text(encoding="utf-8")


def test_reconfiguring_replaces_previous_handlers(tmp_path: Path) -> None:
    _ = setup_logger(log_file=tmp_path / "a.log")
    app_logger = setup_logger()

    assert len(app_logger.handlers) == 1
