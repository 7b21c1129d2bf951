import logging

from is_even_mcp import config


def test_log_level_defaults_to_info(monkeypatch):
    monkeypatch.delenv("IS_EVEN_LOG_LEVEL", raising=False)
    assert config.get_log_level() == logging.INFO


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv("IS_EVEN_LOG_LEVEL", " debug ")
    assert config.get_log_level() == logging.DEBUG


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("IS_EVEN_LOG_LEVEL", "chatty")
    assert config.get_log_level() == logging.INFO
