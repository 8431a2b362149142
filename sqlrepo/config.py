"""
Configuration Management Module

Configures database and logging parameters via environment variables or .env file.
Supports SQLite (default), MySQL and PostgreSQL databases.
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Repository Configuration Class

    All configuration items can be overridden by environment variables, with names matching fields (uppercase).
    """

    # Application Config
    APP_NAME: str = "sqlrepo"
    # Enables SQL echo and DEBUG level logging
    DEBUG: bool = False

    # Database Config
    DATABASE_TYPE: Literal["sqlite", "mysql", "postgresql"] = "sqlite"
    # Synchronous connection string used by SQLAlchemyEntityRepository
    DATABASE_URL: str = "sqlite:///./sqlrepo.db"
    # Asynchronous connection string used by AsyncSQLAlchemyEntityRepository
    ASYNC_DATABASE_URL: str = "sqlite+aiosqlite:///./sqlrepo.db"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get configuration (Singleton)

    Uses lru_cache to ensure configuration is loaded only once.

    Returns:
        Settings: Configuration instance
    """
    return Settings()
