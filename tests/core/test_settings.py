import json
import logging

import pytest
from pydantic import ValidationError

from loscore.config import Settings
from loscore.logger.logger import setup_logger


@pytest.fixture
def missing_config(tmp_path):
    return tmp_path / "missing.json"


def test_defaults(monkeypatch, missing_config):
    monkeypatch.delenv("LOSCORE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOSCORE_LOG_FORMAT", raising=False)

    settings = Settings.load(missing_config)

    assert settings.LOG_LEVEL == "WARNING"
    assert "%(message)s" in settings.LOG_FORMAT


def test_environment_overrides(monkeypatch, missing_config):
    monkeypatch.setenv("LOSCORE_LOG_LEVEL", "debug")

    assert Settings.load(missing_config).LOG_LEVEL == "DEBUG"


def test_config_file(monkeypatch, tmp_path):
    monkeypatch.delenv("LOSCORE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOSCORE_LOG_FORMAT", raising=False)
    config_path = tmp_path / "loscore.json"
    config_path.write_text(json.dumps({"log_level": "info", "log_format": "%(message)s"}))

    settings = Settings.load(config_path)

    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_FORMAT == "%(message)s"


def test_environment_beats_config_file(monkeypatch, tmp_path):
    monkeypatch.setenv("LOSCORE_LOG_LEVEL", "ERROR")
    config_path = tmp_path / "loscore.json"
    config_path.write_text(json.dumps({"log_level": "info"}))

    assert Settings.load(config_path).LOG_LEVEL == "ERROR"


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="LOUD")


def test_setup_logger():
    logger = setup_logger("loscore.test", level="DEBUG", format_string="%(message)s")

    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1
    assert not logger.propagate

    # Already configured loggers are returned untouched
    assert setup_logger("loscore.test", level="ERROR") is logger
    assert logger.level == logging.DEBUG


def test_config_file_must_hold_object(monkeypatch, tmp_path):
    monkeypatch.delenv("LOSCORE_LOG_LEVEL", raising=False)
    config_path = tmp_path / "loscore.json"
    config_path.write_text(json.dumps(["DEBUG"]))

    with pytest.raises(ValueError, match="must hold a JSON object"):
        Settings.load(config_path)
