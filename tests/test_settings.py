import logging

import pytest

from calculator import settings
from calculator.settings import CalculatorConfig


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    for name in ["CALC_PRECISION", "CALC_DEFAULT_THEME", "CALC_HISTORY_LIMIT", "CALC_KEYBOARD_INPUT", "CALC_LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)
    settings.reset_config()
    yield
    settings.reset_config()


def test_defaults():
    cfg = CalculatorConfig.from_env()
    assert cfg == CalculatorConfig()
    assert cfg.precision == 12
    assert cfg.dark_by_default is True


def test_from_env(monkeypatch):
    monkeypatch.setenv("CALC_PRECISION", "8")
    monkeypatch.setenv("CALC_DEFAULT_THEME", "Light")
    monkeypatch.setenv("CALC_HISTORY_LIMIT", "5")
    monkeypatch.setenv("CALC_KEYBOARD_INPUT", "off")
    monkeypatch.setenv("CALC_LOG_LEVEL", "debug")
    cfg = CalculatorConfig.from_env()
    assert cfg.precision == 8
    assert cfg.default_theme == "light"
    assert cfg.history_limit == 5
    assert cfg.keyboard_input is False
    assert cfg.log_level == "DEBUG"


def test_bad_values_fall_back(monkeypatch):
    monkeypatch.setenv("CALC_PRECISION", "99")
    monkeypatch.setenv("CALC_DEFAULT_THEME", "purple")
    monkeypatch.setenv("CALC_HISTORY_LIMIT", "lots")
    monkeypatch.setenv("CALC_KEYBOARD_INPUT", "maybe")
    cfg = CalculatorConfig.from_env()
    assert cfg.precision == 17
    assert cfg.default_theme == "dark"
    assert cfg.history_limit == 20
    assert cfg.keyboard_input is True


def test_get_config_is_cached(monkeypatch):
    first = settings.get_config()
    monkeypatch.setenv("CALC_PRECISION", "5")
    assert settings.get_config() is first
    settings.reset_config()
    assert settings.get_config().precision == 5


def test_configure_logging_accepts_unknown_level():
    settings.configure_logging(CalculatorConfig(log_level="NOISY"))
    assert logging.getLogger("calculator").getEffectiveLevel() >= 0
