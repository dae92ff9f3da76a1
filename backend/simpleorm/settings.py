"""Connection settings loaded from environment variables (prefix ``SIMPLEORM_``)."""

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SIMPLEORM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    db_driver: Literal["sqlite", "mysql"] = "sqlite"
    # SQLite file path, or MySQL server host
    db_host: str = ":memory:"
    db_port: int = 3306
    db_name: str = ""
    db_user: str | None = None
    db_password: str | None = None

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None
