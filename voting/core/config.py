import logging
import sys
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Look for .env in the project root (parent of voting/)
_env_file = Path(__file__).resolve().parent.parent.parent / ".env"

ServiceName = Literal["vote", "results"]

LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=_env_file, extra="ignore", frozen=True)

    # Database - individual parts, or a full DATABASE_URL that takes precedence
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "voting_db"
    db_user: str = "postgres"
    db_password: str = "postgres"
    database_url: str = ""
    db_pool_size: int = 10

    # Server
    host: str = "0.0.0.0"  # nosec B104 - services run inside containers
    vote_port: int = 3000
    results_port: int = 3001
    port: int | None = None  # PaaS platforms set PORT env var

    # Voting options
    option_a: str = "cats"
    option_b: str = "dogs"

    # Logging
    log_level: str = "info"

    @field_validator("port", mode="before")
    @classmethod
    def blank_port_is_unset(cls, value):
        """Some container runtimes export PORT as an empty string."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def database_url_sync(self) -> str:
        """Return database URL with psycopg driver for SQLAlchemy."""
        url = self.database_url
        if not url:
            return (
                f"postgresql+psycopg://{self.db_user}:{self.db_password}"
                f"@{self.db_host}:{self.db_port}/{self.db_name}"
            )
        # Convert postgres:// or postgresql:// to postgresql+psycopg://
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql+psycopg://", 1)
        elif url.startswith("postgresql://") and "+psycopg" not in url:
            url = url.replace("postgresql://", "postgresql+psycopg://", 1)
        return url

    @property
    def options(self) -> tuple[str, str]:
        return (self.option_a, self.option_b)

    def port_for(self, service: ServiceName) -> int:
        """Return the listening port for a service, honouring a PORT override."""
        if self.port is not None:
            return self.port
        return self.vote_port if service == "vote" else self.results_port


def validate_settings(settings: Settings) -> None:
    """Validate settings and exit with a helpful message on misconfiguration."""
    errors = []

    if not settings.option_a.strip() or not settings.option_b.strip():
        errors.append("OPTION_A and OPTION_B must both be non-empty")
    elif settings.option_a == settings.option_b:
        errors.append("OPTION_A and OPTION_B must be different values")

    if settings.log_level.lower() not in LOG_LEVELS:
        errors.append(f"LOG_LEVEL must be one of: {', '.join(LOG_LEVELS)}")

    if settings.db_password == "postgres" and not settings.database_url:  # nosec B105
        logging.warning("DB_PASSWORD is using the default value. Set it for shared deployments.")

    if errors:
        for error in errors:
            logging.error("Configuration error: %s", error)
        sys.exit(1)


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    validate_settings(settings)
    return settings
