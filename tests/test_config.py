import pytest
from pydantic import ValidationError

from fitmaster.core.config import Settings


def make_settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


@pytest.mark.unit
class TestSettings:
    def test_defaults(self):
        settings = make_settings()
        assert settings.rest_timer_default_seconds == 90
        assert settings.rest_timer_options == (30, 45, 60, 90, 120, 180)
        assert (
            settings.min_exercise_count,
            settings.default_exercise_count,
            settings.max_exercise_count,
        ) == (1, 2, 4)

    def test_log_level_is_uppercased(self):
        assert make_settings(log_level="debug").log_level == "DEBUG"

    def test_default_timer_must_be_an_option(self):
        with pytest.raises(ValidationError):
            make_settings(rest_timer_default_seconds=75)

    def test_default_count_must_be_in_range(self):
        with pytest.raises(ValidationError):
            make_settings(default_exercise_count=5)

    def test_postgres_urls(self):
        settings = make_settings(
            database_user="lifter", database_password="p@ss word", database_host="db"
        )
        assert settings.database_url == (
            "postgresql://lifter:p%40ss+word@db:5432/fitmaster?sslmode=prefer"
        )
        assert settings.async_database_url.startswith("postgresql+asyncpg://lifter:")
        assert settings.async_database_url.endswith("?ssl=prefer")
        assert not settings.is_sqlite

    def test_dsn_override(self):
        settings = make_settings(database_dsn="sqlite+aiosqlite:///./fitmaster.db")
        assert settings.async_database_url == "sqlite+aiosqlite:///./fitmaster.db"
        assert settings.database_url == "sqlite:///./fitmaster.db"
        assert settings.is_sqlite

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("REST_TIMER_OPTIONS", "[20, 40]")
        monkeypatch.setenv("REST_TIMER_DEFAULT_SECONDS", "40")
        settings = make_settings()
        assert settings.rest_timer_options == (20, 40)
        assert settings.rest_timer_default_seconds == 40

    def test_idle_timeout(self):
        assert make_settings().session_idle_timeout_seconds == 4 * 60 * 60
        assert make_settings(session_idle_timeout_seconds=0).session_idle_timeout_seconds == 0
        with pytest.raises(ValidationError):
            make_settings(session_idle_timeout_seconds=-1)
