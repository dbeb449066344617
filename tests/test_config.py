import pytest

from todo_api.config import Settings


def _settings(**overrides):
    values = {"JWT_SECRET": "x" * 40}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def test_defaults():
    assert Settings.model_fields["PORT"].default == 8080
    assert Settings.model_fields["JWT_EXPIRATION"].default == "24h"
    assert Settings.model_fields["JWT_SECRET"].is_required()


def test_database_url_from_parts():
    settings = _settings(DATABASE_URL="", DB_USER="to do", DB_PASSWORD="p@ss", DB_HOST="db", DB_PORT=5433, DB_NAME="todos")
    assert settings.get_database_url() == "postgresql://to+do:p%40ss@db:5433/todos"


def test_cors_origins_comma_separated():
    settings = _settings(CORS_ORIGINS="http://a.test, http://b.test")
    assert settings.CORS_ORIGINS == ["http://a.test", "http://b.test"]


def test_cors_origins_json():
    settings = _settings(CORS_ORIGINS='["http://a.test"]')
    assert settings.CORS_ORIGINS == ["http://a.test"]


def test_blank_secret_rejected():
    with pytest.raises(ValueError):
        _settings(JWT_SECRET="  ").validate_security_settings()


def test_short_secret_rejected_in_production():
    with pytest.raises(ValueError):
        _settings(JWT_SECRET="short", ENVIRONMENT="production").validate_security_settings()
    _settings(JWT_SECRET="short").validate_security_settings()
