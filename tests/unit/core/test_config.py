import pytest

from src.core.config import Config


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ("HOST", "PORT", "LOG_LEVEL", "LOG_FORMAT", "DEBUG", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    cfg = Config()

    assert cfg.server.host == "0.0.0.0"
    assert cfg.server.port == 8000
    assert cfg.logging.level == "INFO"
    assert cfg.debug is False
    assert cfg.environment == "development"
    assert cfg.validate() is True


def test_reads_environment(clean_env):
    clean_env.setenv("HOST", "127.0.0.1")
    clean_env.setenv("PORT", "9001")
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("DEBUG", "True")
    clean_env.setenv("ENVIRONMENT", "production")

    cfg = Config()

    assert cfg.server.host == "127.0.0.1"
    assert cfg.server.port == 9001
    assert cfg.logging.level == "DEBUG"
    assert cfg.debug is True
    assert cfg.environment == "production"


def test_non_integer_port_falls_back_to_default(clean_env):
    clean_env.setenv("PORT", "eighty")

    assert Config().server.port == 8000


def test_validate_reports_all_errors(clean_env):
    clean_env.setenv("PORT", "70000")
    clean_env.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValueError) as exc_info:
        Config().validate()

    message = str(exc_info.value)
    assert "PORT must be between 1 and 65535" in message
    assert "LOG_LEVEL must be one of" in message
