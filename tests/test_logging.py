from __future__ import annotations

import logging

import pytest

from fast_validator.utils import logging as validator_logging
from fast_validator.utils.logging import get_log_file_path, setup_logging


@pytest.fixture
def restore_root_logger(monkeypatch):
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    monkeypatch.setattr(validator_logging, "_logging_configured", False)
    monkeypatch.setattr(validator_logging, "_log_file_path", None)
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_logging_uses_custom_file_name(tmp_path, monkeypatch, restore_root_logger):
    monkeypatch.delenv("LOG_FILE_NAME", raising=False)

    setup_logging("module_x.log", log_dir=tmp_path / "log")

    path = get_log_file_path()
    assert path is not None
    assert path.name == "module_x.log"
    assert path.parent.name == "log"
    assert path.exists()


def test_logging_level_and_console_from_env(tmp_path, monkeypatch, restore_root_logger):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("ENV", "debug")

    setup_logging(log_dir=tmp_path)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert get_log_file_path() == tmp_path / "validator.log"
    assert any(type(h) is logging.StreamHandler for h in root.handlers)
