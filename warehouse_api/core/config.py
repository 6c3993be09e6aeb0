"""Application configuration loaded from environment variables / .env file."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """Warehouse API settings.

    Database credentials have no defaults: either ``DB_USER``, ``DB_PASSWORD``
    and ``DB_NAME`` are all set, or ``DATABASE_URL`` overrides the whole URL.
    """

    app_name: str = Field(default="Warehouse API", alias="APP_NAME")
    app_env: str = Field(default="development", alias="APP_ENV")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8080, alias="PORT")

    # PostgreSQL
    db_host: str = Field(default="localhost", alias="DB_HOST")
    db_port: int = Field(default=5432, alias="DB_PORT")
    db_user: str | None = Field(default=None, alias="DB_USER")
    db_password: str | None = Field(default=None, alias="DB_PASSWORD")
    db_name: str | None = Field(default=None, alias="DB_NAME")
    db_pool_size: int = Field(default=10, alias="DB_POOL_SIZE")

    # Full SQLAlchemy URL, e.g. sqlite+aiosqlite:///./warehouse_dev.db
    database_url_override: str | None = Field(default=None, alias="DATABASE_URL")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
        "extra": "ignore",
    }

    @model_validator(mode="after")
    def _require_credentials(self) -> "Settings":
        if self.database_url_override:
            return self
        missing = [
            alias
            for alias, value in (
                ("DB_USER", self.db_user),
                ("DB_PASSWORD", self.db_password),
                ("DB_NAME", self.db_name),
            )
            if not value
        ]
        if missing:
            raise ValueError(f"environment variable(s) not set: {', '.join(missing)}")
        return self

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        ).render_as_string(hide_password=False)

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """Build the settings once per process."""
    return Settings()
