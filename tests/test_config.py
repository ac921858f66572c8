import logging

from brokerbot import config
from brokerbot.config import enter_test_mode, exit_test_mode, get_settings, get_test_prefix


def test_defaults_outside_test_mode():
    assert get_test_prefix() is None
    assert get_settings().test_mode is False


def test_enter_and_exit_test_mode(caplog):
    with caplog.at_level(logging.INFO):
        enter_test_mode("STAGING")
    assert get_test_prefix() == "STAGING"
    assert get_settings().test_mode is True
    assert "test_mode_enabled" in caplog.text
    exit_test_mode()
    assert get_test_prefix() is None


def test_env_helpers(monkeypatch):
    monkeypatch.setenv("X_FLAG", "yes")
    monkeypatch.setenv("X_FLOAT", "2.5")
    monkeypatch.setenv("X_BAD_FLOAT", "abc")
    monkeypatch.setenv("X_BLANK", "  ")
    assert config._b("X_FLAG", False) is True
    assert config._b("X_UNSET_FLAG", False) is False
    assert config._env_float("X_FLOAT", 1.0) == 2.5
    assert config._env_float("X_BAD_FLOAT", 1.0) == 1.0
    assert config._env_str_opt("X_BLANK") is None
