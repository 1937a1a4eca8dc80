"""Unit tests for application settings configuration."""

from pathlib import Path

from booking_records.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./other.db")
    monkeypatch.setenv("OUTCOME_WEBHOOK_URL", "https://hooks.example.com/outcome")
    monkeypatch.setenv("SEED_DEFAULT_CLIENTS", "false")

    settings = Settings()

    assert settings.database_url == "sqlite:///./other.db"
    assert settings.outcome_webhook_url == "https://hooks.example.com/outcome"
    assert settings.seed_default_clients is False
    assert settings.outcome_source == "Meeting Record Form"
