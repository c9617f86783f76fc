"""
Configuration — Pydantic v2 Settings (env / .env)
=================================================

Purpose
-------
Centralized, strongly-typed application configuration using:
- Pydantic v2 `BaseSettings` for environment-driven values
- `pydantic-settings` v2 for `.env` loading and model config

Load Order & Behavior
---------------------
- Values are read from the environment; if not present, `.env` is used.
- Missing required fields (only `SECRET_KEY`) raise a validation error at import time.
- `extra="ignore"`: unknown env vars are ignored (not an error).

Usage
-----
from xconfess.database.config.config import settings

# Example
db_driver = settings.DB_DRIVER_NAME
mail_host = settings.MAIL_HOST

Security
--------
- Never commit secrets or the `.env` file to source control.
- Prefer runtime environment variables in production (K8s/Secrets Manager/etc.).
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration settings loaded from environment variables
    or a `.env` file. Provides strongly typed access to environment values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    DB_DRIVER_NAME: str = Field("sqlite", description="SQLAlchemy driver (e.g., `postgresql+psycopg2`, `sqlite`).")
    DB_USERNAME: Optional[str] = Field(None, description="Database username credential.")
    DB_PASSWORD: Optional[str] = Field(None, description="Database password credential.")
    DB_HOST: Optional[str] = Field(None, description="Hostname or IP address of the database server.")
    DB_PORT: Optional[int] = Field(None, description="Port of the database server.")
    DB_DATABASE_NAME: str = Field("xconfess.db", description="Database name (file path for SQLite).")
    DB_ECHO: bool = Field(False, description="Echo emitted SQL through the `sqlalchemy.engine` logger.")

    # Auth (tokens are issued by the identity service, verified here)
    SECRET_KEY: str = Field(..., description="Secret key used to verify signed access tokens.")
    ALGORITHM: str = Field("HS256", description="JWT signing algorithm (e.g., `HS256`).")

    # Application
    FRONTEND_URL: str = Field("http://localhost:3000", description="Base URL of the frontend client application.")
    INIT_MODE: str = Field("runtime", description="`runtime` bootstraps the database schema during startup.")
    LOG_LEVEL: str = Field("INFO", description="Root logging level (e.g., `DEBUG`, `INFO`).")

    # Mail
    MAIL_HOST: Optional[str] = Field(None, description="SMTP host. When unset, emails are written to the log instead of sent.")
    MAIL_PORT: int = Field(587, description="SMTP port.")
    MAIL_SECURE: bool = Field(False, description="Use implicit TLS (`SMTP_SSL`), typically on port 465.")
    MAIL_STARTTLS: bool = Field(True, description="Upgrade plain SMTP connections with STARTTLS.")
    MAIL_USER: str = Field("", description="SMTP login user. Login is skipped when empty.")
    MAIL_PASSWORD: str = Field("", description="SMTP login password.")
    MAIL_FROM: str = Field("noreply@xconfess.app", description="Sender address used for outgoing emails.")
    MAIL_TIMEOUT_SECONDS: float = Field(10.0, description="Socket timeout for SMTP connections.")


# Singleton instance of Settings, ready to be imported across the app
settings = Settings()
"""Defines a Settings object that contains the contents of the .env file"""
