"""Unit tests for settings."""
import pytest
from pydantic import ValidationError

from meetgrid.core.config import Settings


def make_settings(**overrides):
    return Settings(_env_file=None, **overrides)


@pytest.mark.unit
class TestSettings:
    def test_defaults(self):
        config = make_settings(ENVIRONMENT="development", DATABASE_URL=None, POSTGRES_USER=None)
        assert config.CIVIL_UTC_OFFSET_MINUTES == 540
        assert config.get_database_url() == "sqlite:///./meetgrid.db"

    def test_cors_origins_from_string(self):
        config = make_settings(CORS_ORIGINS="https://a.example, https://b.example")
        assert config.CORS_ORIGINS == ["https://a.example", "https://b.example"]

    def test_database_url_from_components(self):
        config = make_settings(
            DATABASE_URL=None,
            POSTGRES_USER="meet",
            POSTGRES_PASSWORD="secret",
            POSTGRES_HOST="db",
            POSTGRES_DB="meetgrid",
        )
        assert config.get_database_url() == "postgresql://meet:secret@db:5432/meetgrid"

    def test_missing_database_in_production(self):
        config = make_settings(DATABASE_URL=None, POSTGRES_USER=None, ENVIRONMENT="production")
        with pytest.raises(ValueError, match="Database configuration missing"):
            config.get_database_url()

    @pytest.mark.parametrize("offset", [1440, -1440, 2000])
    def test_civil_offset_must_stay_within_a_day(self, offset):
        with pytest.raises(ValidationError):
            make_settings(CIVIL_UTC_OFFSET_MINUTES=offset)

    def test_production_rejects_open_cors(self):
        config = make_settings(ENVIRONMENT="production", CORS_ORIGINS=["*"])
        with pytest.raises(ValueError, match="CORS_ORIGINS"):
            config.validate_production_config()

    def test_production_config_ok(self):
        config = make_settings(
            ENVIRONMENT="production",
            CORS_ORIGINS=["https://meet.example"],
            PUBLIC_BASE_URL="https://meet.example",
        )
        config.validate_production_config()
