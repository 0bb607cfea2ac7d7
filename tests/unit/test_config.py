"""Test configuration loading from environment variables"""

import os

import pytest

from quote.core.config import Config
from quote.shared.exceptions import ConfigurationError

ENV_KEYS = [
    "QUOTE_BASE_URL",
    "QUOTE_RANGE",
    "QUOTE_INTERVAL",
    "QUOTE_TIMEOUT_SECONDS",
    "QUOTE_REFRESH_MS",
    "QUOTE_CHART_WIDTH",
    "QUOTE_CHART_HEIGHT",
    "QUOTE_LOG_LEVEL",
    "QUOTE_LOG_FILE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate from the real environment and any local .env file"""
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


def test_config_default_values():
    """Test that every setting has its default value"""
    config = Config.from_env()

    assert config.base_url == "https://query1.finance.yahoo.com/v8/finance/chart/"
    assert config.chart_range == "1d"
    assert config.chart_interval == "1m"
    assert config.timeout_seconds == 10.0
    assert config.refresh_ms == 5000
    assert config.chart_width == 60
    assert config.chart_height == 10
    assert config.log_level == "WARNING"
    assert config.log_file is None


def test_config_can_be_overridden(monkeypatch):
    """Test that settings can be overridden via environment variables"""
    monkeypatch.setenv("QUOTE_BASE_URL", "http://localhost:9000/chart")
    monkeypatch.setenv("QUOTE_RANGE", "5d")
    monkeypatch.setenv("QUOTE_INTERVAL", "5m")
    monkeypatch.setenv("QUOTE_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("QUOTE_REFRESH_MS", "1000")
    monkeypatch.setenv("QUOTE_CHART_WIDTH", "80")
    monkeypatch.setenv("QUOTE_CHART_HEIGHT", "12")
    monkeypatch.setenv("QUOTE_LOG_LEVEL", "debug")
    monkeypatch.setenv("QUOTE_LOG_FILE", "logs/quote.log")

    config = Config.from_env()

    assert config.base_url == "http://localhost:9000/chart/"
    assert config.chart_range == "5d"
    assert config.chart_interval == "5m"
    assert config.timeout_seconds == 2.5
    assert config.refresh_ms == 1000
    assert config.chart_width == 80
    assert config.chart_height == 12
    assert config.log_level == "DEBUG"
    assert config.log_file == "logs/quote.log"


def test_config_reads_dotenv_file(tmp_path):
    """Test that a .env file in the working directory is honoured"""
    (tmp_path / ".env").write_text("QUOTE_CHART_HEIGHT=4\n")

    try:
        assert Config.from_env().chart_height == 4
    finally:
        os.environ.pop("QUOTE_CHART_HEIGHT", None)


@pytest.mark.parametrize(
    "key,value",
    [
        ("QUOTE_CHART_WIDTH", "wide"),
        ("QUOTE_CHART_HEIGHT", "0"),
        ("QUOTE_REFRESH_MS", "-5"),
        ("QUOTE_TIMEOUT_SECONDS", "soon"),
        ("QUOTE_LOG_LEVEL", "LOUD"),
    ],
)
def test_config_rejects_invalid_values(monkeypatch, key, value):
    """Test that invalid values raise ConfigurationError"""
    monkeypatch.setenv(key, value)

    with pytest.raises(ConfigurationError):
        Config.from_env()


def test_config_blank_values_use_defaults(monkeypatch):
    monkeypatch.setenv("QUOTE_CHART_WIDTH", "")
    monkeypatch.setenv("QUOTE_RANGE", "")

    config = Config.from_env()

    assert config.chart_width == 60
    assert config.chart_range == "1d"
