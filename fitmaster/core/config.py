"""Application configuration from environment variables."""

from functools import lru_cache
from urllib.parse import quote_plus

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment (and .env file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_name: str = "FitMaster API"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # API
    api_v1_prefix: str = "/api/v1"

    # Database (PostgreSQL); database_dsn overrides the parts below when set
    database_dsn: str = ""
    database_host: str = "localhost"
    database_port: int = 5432
    database_user: str = "fitmaster"
    database_password: str = ""  # Set in .env - never commit
    database_name: str = "fitmaster"
    database_ssl_mode: str = "prefer"

    # Pool (ignored for SQLite)
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # CORS: comma-separated list of allowed origins in production
    cors_origins: str = ""

    # Rest timer
    rest_timer_default_seconds: int = 90
    rest_timer_options: tuple[int, ...] = (30, 45, 60, 90, 120, 180)

    # Live sessions idle this long are dropped (0 keeps them until finished or closed)
    session_idle_timeout_seconds: int = 4 * 60 * 60

    # Muscle group selection
    default_exercise_count: int = 2
    min_exercise_count: int = 1
    max_exercise_count: int = 4

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, v: str) -> str:
        return v.upper()

    @model_validator(mode="after")
    def _check_ranges(self) -> "Settings":
        if self.rest_timer_default_seconds not in self.rest_timer_options:
            raise ValueError("rest_timer_default_seconds must be one of rest_timer_options")
        if not self.min_exercise_count <= self.default_exercise_count <= self.max_exercise_count:
            raise ValueError("default_exercise_count must lie within [min, max] exercise count")
        if self.session_idle_timeout_seconds < 0:
            raise ValueError("session_idle_timeout_seconds cannot be negative")
        return self

    def _build_db_url(self, scheme: str = "postgresql", ssl_query: str = "sslmode=prefer") -> str:
        user = quote_plus(self.database_user)
        password = quote_plus(self.database_password)
        return (
            f"{scheme}://{user}:{password}@{self.database_host}:{self.database_port}"
            f"/{self.database_name}?{ssl_query}"
        )

    @property
    def database_url(self) -> str:
        """Synchronous URL for Alembic and tooling."""
        if self.database_dsn:
            return self.database_dsn.replace("+aiosqlite", "").replace("+asyncpg", "")
        return self._build_db_url(scheme="postgresql", ssl_query=f"sslmode={self.database_ssl_mode}")

    @property
    def async_database_url(self) -> str:
        """Async URL for FastAPI (asyncpg driver unless database_dsn says otherwise)."""
        if self.database_dsn:
            return self.database_dsn
        return self._build_db_url(scheme="postgresql+asyncpg", ssl_query=f"ssl={self.database_ssl_mode}")

    @property
    def is_sqlite(self) -> bool:
        return self.async_database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
