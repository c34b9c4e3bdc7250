import logging
import pytest
from aifh.utils.config import aifh_log_level

def test_aifh_log_level_default(monkeypatch):
    monkeypatch.delenv("AIFH_LOG_LEVEL", raising=False)
    assert aifh_log_level() == logging.WARNING

def test_aifh_log_level_from_env(monkeypatch):
    monkeypatch.setenv("AIFH_LOG_LEVEL", "info")
    assert aifh_log_level() == logging.INFO
    monkeypatch.setenv("AIFH_LOG_LEVEL", " DEBUG ")
    assert aifh_log_level() == logging.DEBUG

def test_aifh_log_level_invalid(monkeypatch):
    monkeypatch.setenv("AIFH_LOG_LEVEL", "LOUD")
    with pytest.raises(RuntimeError, match="Unknown log level 'LOUD'"):
        aifh_log_level()
