"""Environment-backed settings for the borrower ledger."""

from functools import cached_property
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DBSettings(BaseSettings):
    """Database connection settings with engine/session kwargs."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    connection_url: str = Field(
        default="sqlite+aiosqlite:///./borrower_ledger.db", alias="LEDGER_DB_CONNECTION"
    )
    engine_kwargs: dict[str, Any] | None = Field(default=None, alias="LEDGER_ENGINE_KWARGS")
    session_kwargs: dict[str, Any] | None = Field(default=None, alias="LEDGER_SESSION_KWARGS")
    create_schema: bool = Field(default=False, alias="LEDGER_CREATE_SCHEMA")

    @property
    def is_sqlite(self) -> bool:
        return self.connection_url.startswith("sqlite")


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", alias="LEDGER_LOG_LEVEL")

    @cached_property
    def db(self) -> DBSettings:
        return DBSettings()  # pyright: ignore[reportCallIssue]

    @property
    def db_connection(self) -> str:
        return self.db.connection_url


def resolve_engine_kwargs(
    db_connection: str, service_engine_kwargs: dict[str, Any] | None
) -> dict[str, Any]:
    defaults: dict[str, Any] = {"echo": False}
    if not db_connection.startswith("sqlite"):
        defaults["pool_pre_ping"] = True
    return {**defaults, **(service_engine_kwargs or {})}


def resolve_session_kwargs(service_session_kwargs: dict[str, Any] | None) -> dict[str, Any]:
    defaults = {
        "expire_on_commit": False,
    }
    return {**defaults, **(service_session_kwargs or {})}
