import logging

from car_diagnostics import config


def test_default_level(monkeypatch):
    monkeypatch.setattr(config, "DEBUG", False)
    monkeypatch.setattr(config, "LOG_LEVEL", "WARNING")
    assert config.log_level() == logging.WARNING


def test_named_level(monkeypatch):
    monkeypatch.setattr(config, "DEBUG", False)
    monkeypatch.setattr(config, "LOG_LEVEL", "INFO")
    assert config.log_level() == logging.INFO


def test_unknown_level_falls_back(monkeypatch):
    monkeypatch.setattr(config, "DEBUG", False)
    monkeypatch.setattr(config, "LOG_LEVEL", "CHATTY")
    assert config.log_level() == logging.WARNING


def test_debug_flag_wins(monkeypatch):
    monkeypatch.setattr(config, "DEBUG", True)
    monkeypatch.setattr(config, "LOG_LEVEL", "ERROR")
    assert config.log_level() == logging.DEBUG


def test_env_helper(monkeypatch):
    monkeypatch.setenv("CAR_DIAGNOSTICS_TEST_VALUE", "")
    assert config._env("CAR_DIAGNOSTICS_TEST_VALUE", "fallback") == "fallback"
    monkeypatch.setenv("CAR_DIAGNOSTICS_TEST_VALUE", "set")
    assert config._env("CAR_DIAGNOSTICS_TEST_VALUE", "fallback") == "set"
