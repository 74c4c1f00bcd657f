import logging

import pytest

from src.core.config import Config
from src.main import configure_logging


@pytest.fixture
def chatty_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    return monkeypatch


def test_unknown_log_level_falls_back_to_info(chatty_env):
    cfg = Config()

    assert cfg.logging.level == "CHATTY"
    assert cfg.logging.effective_level == "INFO"
    assert logging.getLevelName(cfg.logging.effective_level) == logging.INFO


def test_configure_logging_leaves_bad_level_to_validate(chatty_env):
    cfg = Config()

    configure_logging(cfg)

    with pytest.raises(ValueError) as exc_info:
        cfg.validate()

    assert "Configuration errors" in str(exc_info.value)
    assert "LOG_LEVEL must be one of" in str(exc_info.value)
