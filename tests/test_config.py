"""Tests for environment-driven settings."""

from agent_parser.config import Settings


def test_defaults(monkeypatch) -> None:
    for name in ("HOST", "PORT", "LOG_LEVEL", "MAX_BATCH_SIZE"):
        monkeypatch.delenv(f"AGENT_PARSER_{name}", raising=False)

    settings = Settings(_env_file=None)

    assert settings.host == "0.0.0.0"
    assert settings.port == 5000
    assert settings.log_level == "INFO"
    assert settings.max_batch_size == 1000


def test_reads_prefixed_environment(monkeypatch) -> None:
    monkeypatch.setenv("AGENT_PARSER_PORT", "8080")
    monkeypatch.setenv("AGENT_PARSER_MAX_BATCH_SIZE", "50")
    monkeypatch.setenv("AGENT_PARSER_LOG_LEVEL", "DEBUG")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.max_batch_size == 50
    assert settings.log_level == "DEBUG"


def test_ignores_unprefixed_environment(monkeypatch) -> None:
    monkeypatch.delenv("AGENT_PARSER_PORT", raising=False)
    monkeypatch.setenv("PORT", "9999")

    assert Settings(_env_file=None).port == 5000
