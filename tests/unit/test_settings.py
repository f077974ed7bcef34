"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from phc_codec.infrastructure.config.settings import Settings, get_settings

pytestmark = pytest.mark.unit


def test_defaults(monkeypatch):
    # Arrange
    monkeypatch.delenv("ENVIRONMENT", raising=False)

    # Act
    settings = Settings(_env_file=None)

    # Assert
    assert settings.environment == "dev"
    assert settings.default_encoding == "auto"
    assert settings.encoding_preference is None
    assert settings.salt_length == 16
    assert settings.show_error_details is True


def test_prod_hides_error_details():
    settings = Settings(_env_file=None, environment="prod")

    assert settings.is_production
    assert settings.show_error_details is False


def test_explicit_error_details_override():
    settings = Settings(_env_file=None, environment="prod", expose_error_details=True)

    assert settings.show_error_details is True


def test_encoding_preference():
    assert Settings(_env_file=None, default_encoding="legacy").encoding_preference == "legacy"


def test_log_level_normalised():
    assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"


def test_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="verbose")


@pytest.mark.parametrize("salt_length", [7, 65])
def test_salt_length_bounds(salt_length):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, salt_length=salt_length)


def test_reads_environment(monkeypatch):
    # Arrange
    monkeypatch.setenv("DEFAULT_ENCODING", "phc")
    monkeypatch.setenv("ARGON2_TIME_COST", "5")

    # Act
    settings = get_settings()

    # Assert
    assert settings.default_encoding == "phc"
    assert settings.argon2_time_cost == 5
    assert get_settings() is settings
