"""Tests for KittiesSettings."""

import logging

import pytest
from pydantic import ValidationError

from kitties import KittiesModule, KittyIdOverflowError
from kitties.config import KittiesSettings, configure_logging
from kitties.core.types import U32_MAX


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    """Isolate settings from the developer's environment and .env file."""
    monkeypatch.chdir(tmp_path)
    for name in ("KITTIES_ID_LIMIT", "KITTIES_SEED_LENGTH", "KITTIES_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = KittiesSettings()

    assert settings.id_limit == U32_MAX
    assert settings.seed_length == 32
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("KITTIES_ID_LIMIT", "5")
    monkeypatch.setenv("KITTIES_SEED_LENGTH", "16")
    monkeypatch.setenv("KITTIES_LOG_LEVEL", "debug")

    settings = KittiesSettings()

    assert settings.id_limit == 5
    assert settings.seed_length == 16
    assert settings.log_level == "DEBUG"


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("KITTIES_ID_LIMIT=9\n", encoding="utf-8")

    assert KittiesSettings().id_limit == 9


@pytest.mark.parametrize(
    "kwargs",
    [{"id_limit": -1}, {"id_limit": U32_MAX + 1}, {"seed_length": 0}, {"log_level": "LOUD"}],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValidationError):
        KittiesSettings(**kwargs)


def test_module_uses_configured_id_limit():
    module = KittiesModule(settings=KittiesSettings(id_limit=1))
    module.create("alice")

    with pytest.raises(KittyIdOverflowError):
        module.create("alice")


def test_configure_logging_sets_package_level():
    logger = logging.getLogger("kitties")
    previous = logger.level
    try:
        configure_logging(KittiesSettings(log_level="debug"))
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(previous)
