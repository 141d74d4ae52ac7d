"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    db_host: str = "localhost"
    db_port: int = 5432
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_name: str = "dvdrental"

    # Apply pending Alembic migrations during startup
    run_migrations: bool = True
    alembic_config: str = "alembic.ini"

    # API settings
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: list[str] = ["*"]

    log_level: str = "INFO"

    @property
    def database_url(self) -> str:
        """Async SQLAlchemy URL for the configured PostgreSQL database."""
        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        ).render_as_string(hide_password=False)
